"""
XPath selectors for the storefront search, pagination and cart pages.

Position-scoped selectors are templates filled with `str.format`.
"""

from __future__ import annotations

# --- Search ---
SEARCH_BOX = "//input[@name='searchval']"
SEARCH_RESULT_HEADER = "//h1[contains(@class, 'search--title')]"

# --- Pagination ---
PAGINATION_ENTRIES = "//div[@id='paging']//ul/li/a"
CURRENT_PAGE_LABEL = "//div[@id='paging']//li/a[contains(@aria-label, 'current page')]"
LAST_PAGE_LABEL = "//div[@id='paging']//li/a[contains(@aria-label, 'last page')]"
NEXT_PAGE_LINK = "//div[@id='paging']//ul/li[last()]/a"
# The label is padded with a space so "page 1" does not match "page 10".
PAGE_LINK_TEMPLATE = (
    "//div[@id='paging']//ul/li/a[contains(concat(@aria-label, ' '), 'page {page} ')]"
)

# Words that mark a pagination entry as navigation rather than a page number.
DECORATIVE_PAGE_WORDS = ("next", "previous", "prev")

# --- Result listing ---
ITEM_TITLES = "//span[@data-testid='itemDescription']"
LISTING_ITEMS = "//div[@id='product_listing']/div"
ITEM_DESCRIPTION_TEMPLATE = (
    "(//div[@id='product_listing']/div)[{index}]//span[@data-testid='itemDescription']"
)
ITEM_ADD_TO_CART_TEMPLATE = (
    "(//div[@id='product_listing']/div)[{index}]//input[@type='submit']"
)

# --- Cart ---
OPEN_CART = "//a[contains(@aria-label, 'Your cart')]"
CART_ITEM_DESCRIPTIONS = (
    "//div[@class='cartItems']//li[@data-cart-item-id]"
    "//span[contains(@class, 'itemDescription')]/a"
)
# The empty-cart button only renders while the cart has lines.
EMPTY_CART_BUTTON = "//button[text()='Empty Cart']"
EMPTY_CART_CONFIRM = "//footer/button[following-sibling::button[text()='Cancel'][1]]"
EMPTY_CART_SCREEN = "//div[@class='empty-cart__inner']"
