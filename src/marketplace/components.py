"""Imports every aggregate package so ``marketplace.init()`` registers it.

Domain traversal only loads modules in this directory and its immediate
subdirectories. Aggregate packages sit one level deeper, so their commands,
handlers and custom repositories are pulled in from here.
"""

# Identity
from marketplace.identity.user import (  # noqa: F401
    account,
    profile,
    registration,
    repository as user_repository,
    verification,
)

# Catalogue
from marketplace.catalogue.product import (  # noqa: F401
    creation,
    details,
    repository as product_repository,
    stock,
)

# Ordering
from marketplace.ordering.cart import items, repository as cart_repository  # noqa: F401
from marketplace.ordering.order import placement, repository as order_repository  # noqa: F401
