"""
Integration tests
"""
import json
import sys
from pathlib import Path

import pytest
from pydantic import ValidationError

from blogcards import BlogListing
from blogcards.core import cli, thumb_cli
from blogcards.core.blog_client import FetchError
from blogcards.core.config import Settings
from blogcards.core.image_fallback import FallbackState
from blogcards.core.markdown_generator import MarkdownGenerator
from blogcards.core.models import ArticleCard, ImageKind
from blogcards.core.pagination import PageState
from blogcards.core.schemas import BlogPost, PaginationInfo, PostsPage


def _posts_page(current=5, total=10):
    return PostsPage(
        posts=[
            BlogPost(
                title="Video post",
                slug="video-post",
                content='<iframe src="https://www.youtube.com/embed/abc123"></iframe>',
                publishedAt="2024-01-05T12:00:00Z",
            ),
            BlogPost(
                title="Cover post",
                slug="cover-post",
                author="Sam",
                featuredImage="https://cdn.example.com/cover.jpg",
                content="<p>Cover</p>",
            ),
            BlogPost(title="Plain post", slug="plain-post", content="<p>Just words</p>"),
        ],
        pagination=PaginationInfo(
            currentPage=current,
            totalPages=total,
            totalPosts=total * 3,
            hasNextPage=current < total,
            hasPreviousPage=current > 1,
        ),
    )


class _FakeClient:
    def __init__(self, page=None, featured=None, featured_error=None):
        self.page = page or _posts_page()
        self.featured = featured
        self.featured_error = featured_error
        self.requests = []

    def fetch_page(self, page=1, limit=12):
        self.requests.append((page, limit))
        return self.page

    def fetch_featured(self):
        if self.featured_error:
            raise self.featured_error
        return self.featured

    @staticmethod
    def load_page_file(path):
        return PostsPage.model_validate(json.loads(Path(path).read_text(encoding="utf-8")))


class TestBlogListing:
    """Test BlogListing integration"""

    def test_build(self):
        client = _FakeClient(featured=BlogPost(title="Top", slug="top", content='<img src="/top.png">'))
        listing = BlogListing(settings=Settings(_env_file=None), client=client).build(page=5)

        assert client.requests == [(5, 12)]
        assert [card.image_kind for card in listing.cards] == [
            ImageKind.EXTRACTED,
            ImageKind.FEATURED,
            ImageKind.PLACEHOLDER,
        ]
        assert listing.featured.display_url == "/top.png"
        assert listing.page_state.current_page == 5
        assert [str(slot) for slot in listing.page_state.slots] == [
            "1", "...", "4", "5", "6", "...", "10"
        ]

    def test_featured_failure_is_not_fatal(self):
        client = _FakeClient(featured_error=FetchError("boom"))
        listing = BlogListing(settings=Settings(_env_file=None), client=client).build()
        assert listing.featured is None
        assert len(listing.cards) == 3

    def test_probe_applies_fallback(self):
        hq = "https://img.youtube.com/vi/abc123/hqdefault.jpg"
        builder = BlogListing(
            settings=Settings(_env_file=None),
            client=_FakeClient(),
            probe=lambda url: url == hq,
        )
        listing = builder.build()
        video_card = listing.cards[0]
        assert video_card.fallback.state == FallbackState.RETRIED
        assert video_card.display_url == hq

    def test_probe_hides_broken_thumbnail(self):
        builder = BlogListing(
            settings=Settings(_env_file=None),
            client=_FakeClient(),
            probe=lambda url: False,
        )
        listing = builder.build()
        assert not listing.cards[0].has_image
        assert listing.cards[1].has_image

    def test_markdown(self):
        listing = BlogListing(settings=Settings(_env_file=None), client=_FakeClient()).build()
        markdown = listing.to_markdown()

        assert "### [Video post](/blog/video-post)" in markdown
        assert "![Video post](https://img.youtube.com/vi/abc123/maxresdefault.jpg)" in markdown
        assert "_Anewgo Team | January 5, 2024_" in markdown
        assert "_Sam_" in markdown
        assert "_No image_" in markdown
        assert (
            "[« Previous](?page=4) | [1](?page=1) … [4](?page=4) **5** [6](?page=6) … "
            "[10](?page=10) | [Next »](?page=6)"
        ) in markdown

    def test_markdown_without_pagination(self):
        client = _FakeClient(page=_posts_page(current=1, total=1))
        markdown = BlogListing(settings=Settings(_env_file=None), client=client).build().to_markdown()
        assert "Previous" not in markdown

    def test_markdown_disabled_previous(self):
        client = _FakeClient(page=_posts_page(current=1, total=3))
        markdown = BlogListing(settings=Settings(_env_file=None), client=client).build().to_markdown()
        assert "« Previous | **1** [2](?page=2) [3](?page=3) | [Next »](?page=2)" in markdown

    def test_build_from_file(self, tmp_path: Path):
        path = tmp_path / "page.json"
        path.write_text(_posts_page().model_dump_json(by_alias=True), encoding="utf-8")
        listing = BlogListing(settings=Settings(_env_file=None), client=_FakeClient()).build_from_file(
            str(path)
        )
        assert len(listing.cards) == 3
        assert listing.featured is None


class TestMarkdownGenerator:
    """Test card and pagination rendering"""

    def _card(self, **kwargs):
        defaults = dict(
            title="Post",
            href="/blog/post",
            byline="Jo",
            date_label="January 5, 2024",
            image_kind=ImageKind.PLACEHOLDER,
            preview="Full body text...",
            excerpt="Short summary",
        )
        defaults.update(kwargs)
        return ArticleCard(**defaults)

    def test_listing_card_shows_excerpt_not_preview(self):
        lines = MarkdownGenerator.render_card(self._card())
        assert "Short summary" in lines
        assert "Full body text..." not in lines

    def test_featured_placeholder_shows_preview_and_excerpt(self):
        lines = MarkdownGenerator.render_card(self._card(), featured=True)
        assert "_No image_" in lines
        assert "Full body text..." in lines
        assert "Short summary" in lines

    def test_featured_with_image_has_no_preview(self):
        card = self._card(image_kind=ImageKind.FEATURED, image_url="https://cdn.example.com/a.jpg")
        lines = MarkdownGenerator.render_card(card, featured=True)
        assert "![Post](https://cdn.example.com/a.jpg)" in lines
        assert "Full body text..." not in lines
        assert "Short summary" in lines

    def test_card_without_excerpt(self):
        lines = MarkdownGenerator.render_card(self._card(excerpt=None))
        assert lines[-1] == ""
        assert lines[-2] == "_No image_"

    def test_listing_markdown_places_preview_on_featured_only(self):
        featured = BlogPost(title="Top", slug="top", content="<p>Top story body</p>", excerpt="Top summary")
        page = _posts_page()
        page.posts[2] = page.posts[2].model_copy(update={"excerpt": "Plain summary"})
        client = _FakeClient(page=page, featured=featured)
        markdown = BlogListing(settings=Settings(_env_file=None), client=client).build().to_markdown()

        assert "Top story body" in markdown
        assert "Top summary" in markdown
        assert "Plain summary" in markdown
        assert "Just words" not in markdown

    def test_pagination_clamps_current_page(self):
        state = PageState(current_page=7, total_pages=5, has_previous_page=True)
        assert MarkdownGenerator.render_pagination(state) == (
            "[« Previous](?page=4) | [1](?page=1) … [4](?page=4) **5** | Next »"
        )


class TestCli:
    """Test command-line entry points"""

    def test_listing_preview_from_file(self, tmp_path: Path, monkeypatch, capsys):
        path = tmp_path / "page.json"
        path.write_text(_posts_page().model_dump_json(by_alias=True), encoding="utf-8")
        monkeypatch.setattr(sys, "argv", ["blogcards", str(path), "--preview"])

        cli.main()

        out = capsys.readouterr().out
        assert "# Blog" in out
        assert "**5**" in out

    def test_listing_saves_markdown(self, tmp_path: Path, monkeypatch, capsys):
        path = tmp_path / "page.json"
        path.write_text(_posts_page().model_dump_json(by_alias=True), encoding="utf-8")
        output = tmp_path / "out" / "page.md"
        monkeypatch.setattr(sys, "argv", ["blogcards", str(path), "-o", str(output)])

        cli.main()

        assert output.exists()
        assert "Markdown generated" in capsys.readouterr().out

    def test_listing_missing_file(self, tmp_path: Path, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["blogcards", str(tmp_path / "none.json"), "--preview"])
        with pytest.raises(SystemExit) as exc_info:
            cli.main()
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err

    def test_invalid_config_exits(self, tmp_path: Path, monkeypatch, capsys):
        config = tmp_path / "settings.yaml"
        config.write_text("page_size: 0\n", encoding="utf-8")
        monkeypatch.setattr(sys, "argv", ["blogcards", "--config", str(config), "--preview"])
        with pytest.raises(SystemExit) as exc_info:
            cli.main()
        assert exc_info.value.code == 1
        assert "page_size" in capsys.readouterr().err

    def test_invalid_config_raises_when_verbose(self, tmp_path: Path, monkeypatch):
        config = tmp_path / "settings.yaml"
        config.write_text("page_size: 0\n", encoding="utf-8")
        monkeypatch.setattr(sys, "argv", ["blogcards", "--config", str(config), "-v"])
        with pytest.raises(ValidationError):
            cli.main()

    def test_thumb_from_file(self, tmp_path: Path, monkeypatch, capsys):
        path = tmp_path / "content.html"
        path.write_text('<iframe src="https://player.vimeo.com/video/555"></iframe>', encoding="utf-8")
        monkeypatch.setattr(sys, "argv", ["blogcards-thumb", str(path), "-v"])

        thumb_cli.main()

        out = capsys.readouterr().out.splitlines()
        assert out == ["Source: embed", "https://vumbnail.com/555.jpg"]

    def test_thumb_not_found(self, tmp_path: Path, monkeypatch, capsys):
        path = tmp_path / "content.html"
        path.write_text("<p>nothing</p>", encoding="utf-8")
        monkeypatch.setattr(sys, "argv", ["blogcards-thumb", str(path)])
        with pytest.raises(SystemExit) as exc_info:
            thumb_cli.main()
        assert exc_info.value.code == 1
