"""
Thumbnail resolver - map video embed URLs to thumbnail URLs
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .models import EmbedPlatform, EmbedReference


YOUTUBE_MAXRES_TEMPLATE = "https://img.youtube.com/vi/{id}/maxresdefault.jpg"
YOUTUBE_HQ_TEMPLATE = "https://img.youtube.com/vi/{id}/hqdefault.jpg"
VIMEO_TEMPLATE = "https://vumbnail.com/{id}.jpg"


@dataclass(frozen=True)
class EmbedRule:
    """Platform rule: host markers, exclusions and the id pattern"""
    platform: EmbedPlatform
    host_markers: Tuple[str, ...]
    id_pattern: re.Pattern[str]
    template: str
    excluded_markers: Tuple[str, ...] = ()

    def applies_to(self, src: str) -> bool:
        if any(marker in src for marker in self.excluded_markers):
            return False
        return any(marker in src for marker in self.host_markers)

    def match(self, src: str) -> Optional[EmbedReference]:
        if not self.applies_to(src):
            return None
        found = self.id_pattern.search(src)
        if not found or not found.group(1):
            return None
        return EmbedReference(platform=self.platform, video_id=found.group(1))


DEFAULT_RULES: Tuple[EmbedRule, ...] = (
    EmbedRule(
        platform=EmbedPlatform.YOUTUBE,
        host_markers=("youtube.com", "youtu.be"),
        id_pattern=re.compile(r"(?:youtube\.com/embed/|youtu\.be/)([^?&/#]+)"),
        template=YOUTUBE_MAXRES_TEMPLATE,
    ),
    EmbedRule(
        platform=EmbedPlatform.VIMEO,
        host_markers=("vimeo.com",),
        excluded_markers=("player.vimeo.com",),
        id_pattern=re.compile(r"vimeo\.com/video/(\d+)"),
        template=VIMEO_TEMPLATE,
    ),
    EmbedRule(
        platform=EmbedPlatform.VIMEO_PLAYER,
        host_markers=("player.vimeo.com",),
        id_pattern=re.compile(r"player\.vimeo\.com/video/(\d+)"),
        template=VIMEO_TEMPLATE,
    ),
)


class ThumbnailResolver:
    """Resolve embed source URLs to deterministic thumbnail URLs"""

    def __init__(self, rules: Optional[Sequence[EmbedRule]] = None):
        self.rules: List[EmbedRule] = list(rules if rules is not None else DEFAULT_RULES)

    def parse(self, embed_src: str) -> Optional[EmbedReference]:
        """
        Identify the video behind an embed URL

        Args:
            embed_src: Value of the embed tag's source attribute

        Returns:
            EmbedReference for the first matching rule, or None
        """
        if not embed_src:
            return None
        for rule in self.rules:
            reference = rule.match(embed_src)
            if reference is not None:
                return reference
        return None

    def resolve(self, embed_src: str) -> Optional[str]:
        """
        Resolve an embed URL to its thumbnail URL

        Args:
            embed_src: Value of the embed tag's source attribute

        Returns:
            Thumbnail URL, or None when no platform rule matches
        """
        reference = self.parse(embed_src)
        if reference is None:
            return None
        return self.thumbnail_url(reference)

    def thumbnail_url(self, reference: EmbedReference) -> str:
        """Fill the template of the first rule for the reference's platform"""
        for rule in self.rules:
            if rule.platform is reference.platform:
                return rule.template.format(id=reference.video_id)
        raise ValueError(f"No thumbnail template for platform: {reference.platform.value}")
