class SatchelError(Exception):
    """Base exception for the satchel package."""


class InvalidArgumentError(SatchelError, ValueError):
    """Raised when a caller passes an unusable argument (e.g., negative max_depth)."""


class InventoryError(SatchelError):
    """Raised when inventory slot operations fail (e.g., inventory full)."""
