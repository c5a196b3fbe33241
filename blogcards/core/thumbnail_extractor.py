"""
Thumbnail extraction module - derive a card image from article content
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .models import ThumbnailCandidate, ThumbnailSource
from .thumbnail_resolver import ThumbnailResolver

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SourcePattern:
    """A tolerant matcher tried in priority order"""
    priority: int
    name: str
    matcher: re.Pattern[str]

    def search(self, text: str) -> Optional[re.Match[str]]:
        return self.matcher.search(text)


EMBED_TAG_PATTERN = re.compile(r"<iframe[^>]*>", re.IGNORECASE)

EMBED_SRC_PATTERNS: Sequence[SourcePattern] = (
    SourcePattern(1, "quoted", re.compile(r"src=[\"']([^\"']+)[\"']", re.IGNORECASE)),
    SourcePattern(
        2,
        "encoded-double-quoted",
        re.compile(r"src=(?:\"\"|&quot;)((?:(?!&quot;)[^\"])+)(?:\"\"|&quot;)", re.IGNORECASE),
    ),
    SourcePattern(3, "single-quoted", re.compile(r"src='([^']+)'", re.IGNORECASE)),
    SourcePattern(4, "unquoted", re.compile(r"src=([^\s>]+)", re.IGNORECASE)),
)

IMAGE_TAG_PATTERNS: Sequence[SourcePattern] = (
    SourcePattern(
        1,
        "quoted",
        re.compile(r"<img[^>]+src=[\"']([^\"']+)[\"'][^>]*>", re.IGNORECASE),
    ),
    SourcePattern(
        2,
        "unquoted",
        re.compile(r"<img[^>]+src=([^\s>]+)[^>]*>", re.IGNORECASE),
    ),
)

IMAGE_TAG_SRC_PATTERN = re.compile(r"src=[\"']?([^\"'\s>]+)", re.IGNORECASE)
IMAGE_SUFFIX_PATTERN = re.compile(r"\.(jpg|jpeg|png|gif|webp|svg)(\?|$)", re.IGNORECASE)


class ThumbnailExtractor:
    """
    Find the first usable thumbnail in raw article content.

    Strategies, in order:
    1. First embed (iframe) tag, resolved to a video thumbnail
    2. First inline image tag with a plausible image URL

    Only the first embed tag is ever inspected.
    """

    def __init__(
        self,
        resolver: Optional[ThumbnailResolver] = None,
        embed_patterns: Optional[Sequence[SourcePattern]] = None,
        image_patterns: Optional[Sequence[SourcePattern]] = None,
    ):
        self.resolver = resolver or ThumbnailResolver()
        self.embed_patterns = _by_priority(embed_patterns or EMBED_SRC_PATTERNS)
        self.image_patterns = _by_priority(image_patterns or IMAGE_TAG_PATTERNS)

    def extract(self, content: Optional[str]) -> Optional[str]:
        """
        Extract a thumbnail URL from content

        Args:
            content: Raw rich-text/markup of the article

        Returns:
            Thumbnail URL, or None when nothing qualifies
        """
        candidate = self.extract_candidate(content)
        return candidate.url if candidate.found else None

    def extract_candidate(self, content: Optional[str]) -> ThumbnailCandidate:
        """Extract a thumbnail and report which strategy produced it"""
        if not content:
            return ThumbnailCandidate.empty()

        embed_src = self.find_embed_source(content)
        if embed_src:
            thumbnail = self.resolver.resolve(embed_src)
            if thumbnail:
                logger.debug("Thumbnail resolved from embed %s", embed_src)
                return ThumbnailCandidate(url=thumbnail, source=ThumbnailSource.EMBED)
            logger.debug("No platform rule for embed %s", embed_src)

        image_src = self.find_image_source(content)
        if image_src:
            logger.debug("Thumbnail taken from inline image %s", image_src)
            return ThumbnailCandidate(url=image_src, source=ThumbnailSource.INLINE_IMAGE)

        return ThumbnailCandidate.empty()

    def find_embed_source(self, content: str) -> Optional[str]:
        """Source URL of the first embed tag, if any pattern matches it"""
        tag = EMBED_TAG_PATTERN.search(content)
        if not tag:
            return None

        for pattern in self.embed_patterns:
            match = pattern.search(tag.group(0))
            if match:
                return match.group(1)

        logger.debug("Embed tag without extractable source: %s", tag.group(0)[:80])
        return None

    def find_image_source(self, content: str) -> Optional[str]:
        """Source URL of the first acceptable inline image tag"""
        for pattern in self.image_patterns:
            match = pattern.search(content)
            if not match:
                continue
            src_match = IMAGE_TAG_SRC_PATTERN.search(match.group(0))
            if src_match and src_match.group(1):
                src = src_match.group(1)
                if self.is_image_url(src):
                    return src
        return None

    @staticmethod
    def is_image_url(src: str) -> bool:
        """Accept known image suffixes, absolute URLs and root-relative paths"""
        return bool(
            IMAGE_SUFFIX_PATTERN.search(src)
            or src.startswith("http")
            or src.startswith("/")
        )


def extract_first_image(content: Optional[str]) -> Optional[str]:
    """Shortcut using the default extractor"""
    return _DEFAULT_EXTRACTOR.extract(content)


def _by_priority(patterns: Sequence[SourcePattern]) -> List[SourcePattern]:
    return sorted(patterns, key=lambda pattern: pattern.priority)


_DEFAULT_EXTRACTOR = ThumbnailExtractor()
