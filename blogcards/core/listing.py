"""
Main listing builder for blogcards
"""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, Optional

from .blog_client import BlogClient, FetchError, ImageProbe
from .cards import CardPresenter
from .config import Settings
from .image_fallback import settle
from .models import ArticleCard, ListingPage
from .pagination import PageState
from .schemas import PostsPage
from .thumbnail_extractor import ThumbnailExtractor

logger = logging.getLogger(__name__)


class BlogListing:
    """Build listing pages from the blog API or a saved posts file"""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client: Optional[BlogClient] = None,
        probe: Optional[Callable[[str], bool]] = None,
    ):
        """
        Initialize listing builder

        Args:
            settings: Settings (defaults read from the environment)
            client: Blog API client, built from settings when omitted
            probe: Image load check; enables fallback resolution when set
        """
        self.settings = settings or Settings()
        self.client = client or BlogClient(
            self.settings.api_base_url,
            timeout=self.settings.request_timeout,
        )
        if probe is None and self.settings.check_images:
            probe = ImageProbe(timeout=self.settings.request_timeout)
        self.probe = probe
        self.presenter = CardPresenter(
            extractor=ThumbnailExtractor(),
            default_author=self.settings.default_author,
            preview_length=self.settings.preview_length,
        )

    def build(self, page: int = 1, limit: Optional[int] = None) -> ListingPage:
        """
        Fetch one page of posts and build its listing

        Args:
            page: 1-indexed page number
            limit: Posts per page (settings.page_size by default)

        Returns:
            ListingPage
        """
        posts_page = self.client.fetch_page(page=page, limit=limit or self.settings.page_size)

        featured = None
        try:
            featured_post = self.client.fetch_featured()
        except FetchError as exc:
            logger.warning("Featured post unavailable: %s", exc)
            featured_post = None
        if featured_post is not None:
            featured = self.presenter.present(featured_post, featured=True)

        return self.build_from_page(posts_page, featured=featured, requested_page=page)

    def build_from_file(self, path: str) -> ListingPage:
        """Build a listing from a posts page saved as JSON"""
        return self.build_from_page(self.client.load_page_file(path))

    def build_from_page(
        self,
        posts_page: PostsPage,
        featured: Optional[ArticleCard] = None,
        requested_page: int = 1,
    ) -> ListingPage:
        cards = self.presenter.present_all(posts_page.posts)
        if self.probe is not None:
            cards = [self._check_image(card) for card in cards]
            if featured is not None:
                featured = self._check_image(featured)

        if posts_page.pagination is not None:
            page_state = PageState.from_info(posts_page.pagination)
        else:
            page_state = PageState(current_page=requested_page, total_pages=1)

        return ListingPage(cards=cards, page_state=page_state, featured=featured)

    def _check_image(self, card: ArticleCard) -> ArticleCard:
        if card.fallback is None:
            return card
        settled = settle(card.fallback, self.probe)
        if settled != card.fallback:
            logger.info("Thumbnail for %r settled as %s", card.title, settled.state.value)
        return replace(card, fallback=settled)
