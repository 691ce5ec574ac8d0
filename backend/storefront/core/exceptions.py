"""
Error types shared across the storefront package

Author: TM3
Date: 2025-10-17
"""


class NotFoundError(LookupError):
    """A lookup that requires a match found nothing"""


class ProductNotFoundError(NotFoundError):
    """No product matched the requested criteria"""


class SnapshotIntegrityError(ValueError):
    """
    The loaded collections do not form a consistent snapshot

    Raised for duplicate identifiers or orders that reference
    customers/products missing from the snapshot.
    """
