"""
blogcards - Blog listing cards with derived thumbnails

This is the main public API module.
"""

from .core.models import ArticleCard, ListingPage, PageSlot
from .core.listing import BlogListing
from .core.pagination import window
from .core.thumbnail_extractor import ThumbnailExtractor, extract_first_image

__version__ = "0.1.0"
__all__ = [
    "BlogListing",
    "ArticleCard",
    "ListingPage",
    "PageSlot",
    "ThumbnailExtractor",
    "extract_first_image",
    "window",
]
