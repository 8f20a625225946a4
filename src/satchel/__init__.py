"""
Satchel package root.

Flattens nested containers (bags inside chests inside inventories) into a
single ordered list of leaf items. Domain specifics stay outside the core:
callers describe their containers through a resolver.
"""

from .exceptions import InvalidArgumentError, InventoryError, SatchelError
from .flattener import Flattener, flatten
from .resolver import (
    AttributeResolver,
    CallableResolver,
    ChainResolver,
    Collection,
    ContainerResolver,
    as_resolver,
    iter_slots,
)

__version__ = "0.1.0"

__all__ = [
    "AttributeResolver",
    "CallableResolver",
    "ChainResolver",
    "Collection",
    "ContainerResolver",
    "Flattener",
    "InvalidArgumentError",
    "InventoryError",
    "SatchelError",
    "as_resolver",
    "flatten",
    "iter_slots",
]
