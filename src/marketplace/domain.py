"""Domain initialization and configuration.

Accounts, listings, carts, orders and their email side effects all live in
this one domain; ``domain.toml`` beside this file holds its infrastructure.
"""

from protean.domain import Domain

from marketplace.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

marketplace = Domain(name="marketplace")
