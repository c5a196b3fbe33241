"""
blogcards - Blog listing cards with derived thumbnails

This package derives card thumbnails from free-form article content,
applies a bounded fallback policy when a thumbnail fails to load, and
computes the page-number window for paginated listings.
"""

__version__ = "0.1.0"
__author__ = "OSInsight"
__license__ = "MIT"

from .models import ArticleCard, ListingPage, PageSlot
from .image_fallback import ImageFallbackChain
from .listing import BlogListing
from .pagination import PageState, window
from .thumbnail_extractor import ThumbnailExtractor
from .thumbnail_resolver import ThumbnailResolver

__all__ = [
    "ArticleCard",
    "ListingPage",
    "PageSlot",
    "ImageFallbackChain",
    "BlogListing",
    "PageState",
    "window",
    "ThumbnailExtractor",
    "ThumbnailResolver",
]
