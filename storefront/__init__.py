"""
Storefront search audit.

- `storefront.pagination` reads and drives the result-page control
- `storefront.audit` checks every result title for a keyword
- `storefront.cart` runs the add-to-cart / empty-cart transaction
- `storefront.search_page` is the caller-facing API over one session
- `storefront.driver` defines the automation driver and its Playwright adapter
"""
