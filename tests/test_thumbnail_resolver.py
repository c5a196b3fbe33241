"""
Test for thumbnail resolver module
"""
import pytest

from blogcards.core.models import EmbedPlatform, EmbedReference
from blogcards.core.thumbnail_resolver import DEFAULT_RULES, ThumbnailResolver


class TestThumbnailResolver:
    """Test ThumbnailResolver rules"""

    def test_youtube_embed(self):
        resolver = ThumbnailResolver()
        assert (
            resolver.resolve("https://www.youtube.com/embed/abc123?autoplay=1")
            == "https://img.youtube.com/vi/abc123/maxresdefault.jpg"
        )

    def test_youtube_short_link(self):
        resolver = ThumbnailResolver()
        assert (
            resolver.resolve("https://youtu.be/dQw4w9WgXcQ#t=10")
            == "https://img.youtube.com/vi/dQw4w9WgXcQ/maxresdefault.jpg"
        )

    def test_youtube_id_terminators(self):
        resolver = ThumbnailResolver()
        for src in (
            "https://www.youtube.com/embed/id1?x=1",
            "https://www.youtube.com/embed/id1&x=1",
            "https://www.youtube.com/embed/id1/",
            "https://www.youtube.com/embed/id1#frag",
            "https://www.youtube.com/embed/id1",
        ):
            assert resolver.parse(src).video_id == "id1"

    def test_youtube_watch_url_not_recognized(self):
        """Only embed and short links carry an id"""
        resolver = ThumbnailResolver()
        assert resolver.resolve("https://www.youtube.com/watch?v=abc") is None

    def test_vimeo_video(self):
        resolver = ThumbnailResolver()
        reference = resolver.parse("https://vimeo.com/video/76979871")
        assert reference.platform == EmbedPlatform.VIMEO
        assert resolver.resolve("https://vimeo.com/video/76979871") == "https://vumbnail.com/76979871.jpg"

    def test_player_vimeo(self):
        resolver = ThumbnailResolver()
        reference = resolver.parse("https://player.vimeo.com/video/555?badge=0")
        assert reference.platform == EmbedPlatform.VIMEO_PLAYER
        assert reference.video_id == "555"
        assert resolver.resolve("https://player.vimeo.com/video/555") == "https://vumbnail.com/555.jpg"

    def test_vimeo_non_numeric_id(self):
        resolver = ThumbnailResolver()
        assert resolver.resolve("https://vimeo.com/video/abc") is None
        assert resolver.resolve("https://vimeo.com/76979871") is None

    def test_unknown_platform(self):
        resolver = ThumbnailResolver()
        assert resolver.resolve("https://www.dailymotion.com/embed/video/x7") is None
        assert resolver.resolve("") is None

    def test_thumbnail_url_without_template(self):
        resolver = ThumbnailResolver(rules=DEFAULT_RULES[:1])
        reference = EmbedReference(platform=EmbedPlatform.VIMEO, video_id="555")
        with pytest.raises(ValueError):
            resolver.thumbnail_url(reference)
