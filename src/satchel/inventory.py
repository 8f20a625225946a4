from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional

from .exceptions import InventoryError
from .flattener import Flattener
from .resolver import AttributeResolver
from .schema import validate_item_dict

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class ItemStack:
    """A stack of items occupying one inventory slot.

    Stacks compare by identity: two stacks with identical fields are still
    different stacks. A stack with ``contents`` is a container (a backpack,
    a chest item) whose inner inventory gets flattened.
    """

    id: str
    name: str = ''
    qty: int = 1
    contents: Optional['Inventory'] = None

    @property
    def is_container(self) -> bool:
        return self.contents is not None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ItemStack':
        """Create an ItemStack (and any nested contents) from a dict, validating with the JSON schema."""
        validate_item_dict(data)
        return cls._build(data)

    @classmethod
    def _build(cls, data: Dict[str, Any]) -> 'ItemStack':
        contents = None
        if 'contents' in data:
            contents = Inventory._build(data['contents'])
        return cls(
            id=data['id'],
            name=data.get('name', data['id']),
            qty=int(data.get('qty', 1)),
            contents=contents,
        )

    def __repr__(self) -> str:
        kind = 'container' if self.is_container else 'item'
        return f'<ItemStack {kind} {self.id} x{self.qty}>'


class Inventory:
    """
    Fixed-size, slot-ordered inventory.

    - Slots hold an ItemStack or None; order is preserved.
    - Implements the Collection protocol through ``slots()``.
    """

    def __init__(self, size: int, slots: Optional[List[Optional[ItemStack]]] = None) -> None:
        if size < 0:
            raise InventoryError(f'Inventory size must be non-negative, got {size}')
        initial = list(slots or [])
        if len(initial) > size:
            raise InventoryError(f'{len(initial)} slots given for an inventory of size {size}')
        self._slots: List[Optional[ItemStack]] = initial + [None] * (size - len(initial))

    @property
    def size(self) -> int:
        return len(self._slots)

    def slots(self) -> List[Optional[ItemStack]]:
        return list(self._slots)

    def get_slot(self, index: int) -> Optional[ItemStack]:
        self._check_index(index)
        return self._slots[index]

    def set_slot(self, index: int, stack: Optional[ItemStack]) -> Optional[ItemStack]:
        """Place ``stack`` at ``index``, returning whatever was there before."""
        self._check_index(index)
        previous = self._slots[index]
        self._slots[index] = stack
        logger.debug('Slot %d: %r -> %r', index, previous, stack)
        return previous

    def add(self, stack: ItemStack) -> int:
        """Put ``stack`` into the first empty slot and return its index.

        Raises InventoryError when no slot is free.
        """
        for index, current in enumerate(self._slots):
            if current is None:
                self._slots[index] = stack
                logger.debug('Added %r to slot %d', stack, index)
                return index
        raise InventoryError(f'Inventory full ({self.size} slots); cannot add {stack.id}')

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._slots):
            raise InventoryError(f'Slot index out of range: {index} (size={len(self._slots)})')

    def __len__(self) -> int:
        return len(self._slots)

    def __iter__(self) -> Iterator[Optional[ItemStack]]:
        return iter(list(self._slots))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Inventory':
        """Build an inventory from ``{"size": n, "slots": [...]}``.

        Each slot is ``None`` or an item dict; items may carry their own
        ``contents`` inventory. Size defaults to the number of slots given.
        """
        # Validate through a synthetic holder so the whole tree is checked at once
        validate_item_dict({'id': '__root__', 'contents': data})
        return cls._build(data)

    @classmethod
    def _build(cls, data: Dict[str, Any]) -> 'Inventory':
        raw_slots = data.get('slots', [])
        size = int(data.get('size', len(raw_slots)))
        slots = [None if raw is None else ItemStack._build(raw) for raw in raw_slots]
        return cls(size=size, slots=slots)


CONTENTS_RESOLVER = AttributeResolver('contents')


def flatten_inventory(inventory: Optional[Inventory], max_depth: Optional[int] = None) -> List[ItemStack]:
    """Flatten an inventory, expanding container stacks into their contents.

    A missing inventory flattens to an empty list. ``max_depth`` defaults to
    the configured value (see :func:`satchel.config.load_flatten_config`).
    """
    if inventory is None:
        return []
    return Flattener(CONTENTS_RESOLVER, max_depth=max_depth).flatten(inventory)


__all__ = [
    'CONTENTS_RESOLVER',
    'Inventory',
    'ItemStack',
    'flatten_inventory',
]
