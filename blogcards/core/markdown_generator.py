"""
Markdown generation module
"""
from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from .models import ArticleCard, ImageKind

if TYPE_CHECKING:
    from .models import ListingPage
    from .pagination import PageState


class MarkdownGenerator:
    """Render a listing page as markdown"""

    @staticmethod
    def generate(listing: "ListingPage") -> str:
        """
        Generate markdown from a listing page

        Args:
            listing: ListingPage object

        Returns:
            Markdown string
        """
        lines = [f"# {listing.title}", ""]

        if listing.featured is not None:
            lines.append("## Featured Article")
            lines.append("")
            lines.extend(MarkdownGenerator.render_card(listing.featured, level=3, featured=True))

        lines.append("## All Articles")
        lines.append("")
        if not listing.cards:
            lines.append("_No articles yet._")
            lines.append("")
        for card in listing.cards:
            lines.extend(MarkdownGenerator.render_card(card, level=3))

        if listing.show_pagination:
            lines.append(MarkdownGenerator.render_pagination(listing.page_state))

        return "\n".join(lines).rstrip() + "\n"

    @staticmethod
    def render_card(card: ArticleCard, level: int = 3, featured: bool = False) -> List[str]:
        """
        Render one card

        The content preview stands in for the image only on a featured
        card without one; every card shows its excerpt.
        """
        lines = [f"{'#' * level} [{card.title}]({card.href})", ""]

        meta = card.byline
        if card.date_label:
            meta = f"{meta} | {card.date_label}"
        lines.append(f"_{meta}_")
        lines.append("")

        if card.has_image:
            lines.append(f"![{card.title}]({card.display_url})")
        else:
            lines.append("_No image_")
        lines.append("")

        if featured and card.image_kind is ImageKind.PLACEHOLDER and card.preview:
            lines.append(card.preview)
            lines.append("")

        if card.excerpt:
            lines.append(card.excerpt)
            lines.append("")
        return lines

    @staticmethod
    def render_pagination(state: Optional["PageState"]) -> str:
        if state is None or state.total_pages <= 1:
            return ""

        items = []
        for slot in state.slots:
            if slot.is_ellipsis:
                items.append("…")
            elif slot.number == state.page:
                items.append(f"**{slot.number}**")
            else:
                items.append(f"[{slot.number}](?page={slot.number})")

        previous = (
            f"[« Previous](?page={state.page - 1})"
            if state.can_go_back
            else "« Previous"
        )
        following = (
            f"[Next »](?page={state.page + 1})"
            if state.can_go_forward
            else "Next »"
        )
        return f"{previous} | {' '.join(items)} | {following}"
