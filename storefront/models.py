"""Data model for search results, cart lines, audits and cart transactions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class Presence(str, Enum):
    """Outcome of probing for an indicator element."""

    DISPLAYED = "displayed"
    HIDDEN = "hidden"  # in the DOM but not visible
    ABSENT = "absent"  # not found once the driver's wait elapsed


class CartState(str, Enum):
    """Stages of a cart transaction, in the order they are reached."""

    BROWSING = "browsing"
    ITEM_ADDED = "item_added"
    CART_OPEN = "cart_open"
    EMPTYING = "emptying"
    EMPTIED = "emptied"


@dataclass(frozen=True)
class ResultItem:
    """One product on the active result page; invalid after navigation."""

    title: str
    position_index: int  # 1-based, page-local


@dataclass(frozen=True)
class CartItem:
    """One line of the open cart."""

    description: str
    position_index: int  # 0-based


@dataclass
class AuditResult:
    """Titles that failed the keyword check across a whole traversal."""

    keyword: str
    total_pages: Optional[int]  # None = page count could not be read
    pages_scanned: int = 0
    missing_titles: list[str] = field(default_factory=list)

    @property
    def inconclusive(self) -> bool:
        """True when no page count was available, so nothing was audited."""
        return not self.total_pages

    @property
    def passed(self) -> bool:
        return not self.inconclusive and not self.missing_titles


@dataclass
class CartTransactionResult:
    """What a cart transaction did and which post-conditions held."""

    item_index: int
    state: CartState = CartState.BROWSING
    listing_description: str = ""
    cart_description: str = ""
    non_empty_before_emptying: Presence = Presence.ABSENT
    empty_screen_after: Presence = Presence.ABSENT
    errors: list[str] = field(default_factory=list)

    @property
    def description_matches(self) -> bool:
        return bool(self.listing_description) and (
            self.listing_description == self.cart_description
        )

    @property
    def succeeded(self) -> bool:
        return (
            self.state is CartState.EMPTIED
            and self.description_matches
            and self.non_empty_before_emptying is Presence.DISPLAYED
            and self.empty_screen_after is Presence.DISPLAYED
        )
