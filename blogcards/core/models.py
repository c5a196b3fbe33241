"""
Data models for blogcards
"""
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from .image_fallback import ImageFallbackChain
    from .pagination import PageState


class EmbedPlatform(str, Enum):
    """Video platforms with a known thumbnail template"""
    YOUTUBE = "youtube"
    VIMEO = "vimeo"
    VIMEO_PLAYER = "vimeo-player"


class ThumbnailSource(str, Enum):
    """Where a thumbnail candidate came from"""
    EMBED = "embed"
    INLINE_IMAGE = "inline-image"
    NONE = "none"


class ImageKind(str, Enum):
    """What a card shows in its image slot"""
    FEATURED = "featured"
    EXTRACTED = "extracted"
    PLACEHOLDER = "placeholder"


@dataclass(frozen=True)
class EmbedReference:
    """A video discovered inside rich content"""
    platform: EmbedPlatform
    video_id: str

    def __post_init__(self):
        if not self.video_id:
            raise ValueError("EmbedReference requires a non-empty video_id")


@dataclass(frozen=True)
class ThumbnailCandidate:
    """URL chosen to represent an article without a featured image"""
    url: str = ""
    source: ThumbnailSource = ThumbnailSource.NONE

    def __post_init__(self):
        if bool(self.url) != (self.source is not ThumbnailSource.NONE):
            raise ValueError(
                f"Inconsistent thumbnail candidate: url={self.url!r}, source={self.source.value}"
            )

    @classmethod
    def empty(cls) -> "ThumbnailCandidate":
        return cls()

    @property
    def found(self) -> bool:
        return self.source is not ThumbnailSource.NONE

    def __str__(self):
        if not self.found:
            return "No thumbnail"
        return f"{self.url} (from {self.source.value})"


@dataclass(frozen=True)
class PageSlot:
    """One entry of a page window: a page number or an ellipsis marker"""
    number: Optional[int] = None

    @classmethod
    def page(cls, number: int) -> "PageSlot":
        return cls(number=number)

    @classmethod
    def ellipsis(cls) -> "PageSlot":
        return cls(number=None)

    @property
    def is_ellipsis(self) -> bool:
        return self.number is None

    def __str__(self):
        return "..." if self.is_ellipsis else str(self.number)


@dataclass(frozen=True)
class ArticleCard:
    """Presentation of a single blog post in the listing"""
    title: str
    href: str
    byline: str
    date_label: str
    image_kind: ImageKind
    image_url: Optional[str] = None
    fallback: Optional["ImageFallbackChain"] = None
    preview: str = ""
    excerpt: Optional[str] = None

    @property
    def has_image(self) -> bool:
        """Whether an image should be displayed at all"""
        if self.image_kind is ImageKind.PLACEHOLDER:
            return False
        if self.fallback is not None:
            return not self.fallback.hidden
        return bool(self.image_url)

    @property
    def display_url(self) -> Optional[str]:
        """URL currently attempted for display"""
        if self.fallback is not None:
            return None if self.fallback.hidden else self.fallback.url
        return self.image_url

    def __str__(self):
        return f"Card: {self.title} ({self.image_kind.value})"


@dataclass
class ListingPage:
    """A rendered page of the blog listing"""
    cards: List[ArticleCard] = field(default_factory=list)
    page_state: Optional["PageState"] = None
    featured: Optional[ArticleCard] = None
    title: str = "Blog"

    @property
    def show_pagination(self) -> bool:
        return self.page_state is not None and self.page_state.total_pages > 1

    def to_markdown(self) -> str:
        """Convert to markdown format"""
        from .markdown_generator import MarkdownGenerator

        return MarkdownGenerator.generate(self)

    def save_markdown(self, filepath: str) -> None:
        """Save listing as markdown file"""
        output = Path(filepath)
        output.parent.mkdir(parents=True, exist_ok=True)
        with output.open('w', encoding='utf-8') as f:
            f.write(self.to_markdown())

    def __str__(self):
        return f"Listing: {self.title} ({len(self.cards)} cards)"
