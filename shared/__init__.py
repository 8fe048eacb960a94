"""
Shared infrastructure for the storefront search audit.

- `shared.config` for environment-based configuration
- `shared.logging` for structlog-based structured logging

Nothing here knows about pagination, carts or selectors; storefront logic
lives in the `storefront` package.
"""
