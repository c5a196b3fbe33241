"""
Card presentation - turn blog posts into listing cards
"""
from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import List, Optional, Sequence

from .image_fallback import ImageFallbackChain
from .models import ArticleCard, ImageKind
from .schemas import BlogPost
from .thumbnail_extractor import ThumbnailExtractor

TAG_PATTERN = re.compile(r"<[^>]*>")
NO_PREVIEW_TEXT = "No content preview available"


class CardPresenter:
    """Build cards for the listing page"""

    def __init__(
        self,
        extractor: Optional[ThumbnailExtractor] = None,
        default_author: str = "Anewgo Team",
        preview_length: int = 400,
    ):
        """
        Initialize presenter

        Args:
            extractor: Thumbnail extractor for posts without a featured image
            default_author: Byline used when a post has no author
            preview_length: Characters of plain text kept in previews
        """
        self.extractor = extractor or ThumbnailExtractor()
        self.default_author = default_author
        self.preview_length = preview_length

    def present(self, post: BlogPost, featured: bool = False) -> ArticleCard:
        """
        Build the card for one post

        Args:
            post: Article record
            featured: Use the featured-article date style

        Returns:
            ArticleCard
        """
        image_kind, image_url, fallback = self._choose_image(post)
        return ArticleCard(
            title=post.title,
            href=f"/blog/{post.slug}",
            byline=post.author or self.default_author,
            date_label=self.date_label(post, short=featured),
            image_kind=image_kind,
            image_url=image_url,
            fallback=fallback,
            preview=self.preview(post),
            excerpt=post.excerpt,
        )

    def present_all(self, posts: Sequence[BlogPost]) -> List[ArticleCard]:
        return [self.present(post) for post in posts]

    def preview(self, post: BlogPost) -> str:
        """Plain-text preview of the post content"""
        content = post.content or ""
        if not content:
            return post.excerpt or NO_PREVIEW_TEXT

        text = TAG_PATTERN.sub("", content)[: self.preview_length]
        if len(content) > self.preview_length:
            text += "..."
        return text

    @staticmethod
    def date_label(post: BlogPost, short: bool = False) -> str:
        if post.published_at is not None:
            return format_date(_to_utc(post.published_at), short=short)
        if post.created_at is not None:
            return format_date(post.created_at, short=short)
        return ""

    def _choose_image(self, post: BlogPost):
        if post.featured_image:
            return ImageKind.FEATURED, post.featured_image, None

        extracted = self.extractor.extract(post.content or "")
        if extracted:
            return ImageKind.EXTRACTED, extracted, ImageFallbackChain.start(extracted)

        return ImageKind.PLACEHOLDER, None, None


def format_date(value: datetime, short: bool = False) -> str:
    """'January 5, 2024' or, with short=True, '1/5/2024'"""
    if short:
        return f"{value.month}/{value.day}/{value.year}"
    return f"{value:%B} {value.day}, {value.year}"


def _to_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc)
