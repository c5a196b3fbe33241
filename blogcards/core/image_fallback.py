"""
Image fallback policy - what to display when a thumbnail fails to load
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Optional

from .thumbnail_resolver import YOUTUBE_HQ_TEMPLATE

logger = logging.getLogger(__name__)

MAXRES_SEGMENT = "maxresdefault.jpg"
HQ_SEGMENT = "hqdefault.jpg"
MAXRES_URL_PATTERN = re.compile(r"^https://img\.youtube\.com/vi/([^/]+)/maxresdefault\.jpg$")


class FallbackState(str, Enum):
    PRIMARY = "primary"
    RETRIED = "retried"
    HIDDEN = "hidden"


@dataclass(frozen=True)
class ImageFallbackChain:
    """
    Per-image fallback state machine.

    PRIMARY --fail (maxres URL)--> RETRIED --fail--> HIDDEN
    PRIMARY --fail (other URL)---> HIDDEN

    Each failure returns a new chain value; HIDDEN is terminal, so an image
    gets at most one substituted URL.
    """
    url: str
    state: FallbackState = FallbackState.PRIMARY

    @classmethod
    def start(cls, url: str) -> "ImageFallbackChain":
        return cls(url=url)

    @property
    def hidden(self) -> bool:
        return self.state is FallbackState.HIDDEN

    @property
    def retried(self) -> bool:
        return self.state is not FallbackState.PRIMARY

    def on_failure(self) -> "ImageFallbackChain":
        """
        Advance after the current URL failed to display

        Returns:
            The next chain value (same value once hidden)
        """
        if self.state is FallbackState.PRIMARY:
            substitute = lower_resolution_url(self.url)
            if substitute:
                logger.debug("Image failed, retrying with %s", substitute)
                return replace(self, url=substitute, state=FallbackState.RETRIED)
            logger.debug("Image failed without fallback, hiding %s", self.url)
            return replace(self, state=FallbackState.HIDDEN)

        if self.state is FallbackState.RETRIED:
            logger.debug("Fallback image failed, hiding %s", self.url)
            return replace(self, state=FallbackState.HIDDEN)

        return self


def lower_resolution_url(url: str) -> Optional[str]:
    """hqdefault counterpart of a maxresdefault thumbnail URL, if it is one"""
    if not url:
        return None
    match = MAXRES_URL_PATTERN.match(url)
    if match:
        return YOUTUBE_HQ_TEMPLATE.format(id=match.group(1))
    if MAXRES_SEGMENT in url:
        return url.replace(MAXRES_SEGMENT, HQ_SEGMENT, 1)
    return None


def settle(
    chain: ImageFallbackChain,
    loads: Callable[[str], bool],
) -> ImageFallbackChain:
    """
    Drive a chain with a load check until its URL loads or it is hidden

    Args:
        chain: Chain to start from
        loads: Returns True when the given URL can be displayed

    Returns:
        Final chain value
    """
    while not chain.hidden and not loads(chain.url):
        chain = chain.on_failure()
    return chain
