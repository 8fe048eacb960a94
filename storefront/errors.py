"""
Typed errors raised by storefront components.

Read paths report absence through `None` / `Presence.ABSENT` rather than
raising; these exceptions are reserved for conditions a caller cannot
continue past without deciding what to do.
"""

from __future__ import annotations

from typing import Iterable


class StorefrontError(Exception):
    """Base class for storefront audit errors."""


class ElementAbsentError(StorefrontError):
    """A control that an action needed was not present on the page."""

    def __init__(self, selector: str, purpose: str = "") -> None:
        self.selector = selector
        self.purpose = purpose
        what = f"{purpose} element" if purpose else "Element"
        super().__init__(f"{what} not found: {selector}")


class ParseFailureError(StorefrontError):
    """Label text could not be converted to an integer."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Could not parse an integer from {text!r}")


class PaginationParseError(ParseFailureError):
    """A pagination entry label did not end in a page number."""

    def __init__(self, label: str) -> None:
        super().__init__(label)
        self.args = (f"Pagination label has no trailing page number: {label!r}",)


class PageNotFoundError(StorefrontError):
    """The requested result page is not offered by the pagination control."""

    def __init__(self, target: int, available: Iterable[int]) -> None:
        self.target = target
        self.available = sorted(available)
        super().__init__(
            f"Page number {target} is not in the list of page numbers {self.available}"
        )
