from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

from .config import load_flatten_config
from .exceptions import InvalidArgumentError
from .resolver import ContainerResolver, as_resolver, iter_slots

logger = logging.getLogger(__name__)


def _check_max_depth(max_depth: Any) -> int:
    # bool is an int subclass; True/False as a depth is always a caller bug
    if isinstance(max_depth, bool) or not isinstance(max_depth, int):
        raise InvalidArgumentError(f"max_depth must be an integer, got {max_depth!r}")
    if max_depth < 0:
        raise InvalidArgumentError(f"max_depth must be non-negative, got {max_depth}")
    return max_depth


def _push_slots(stack: List[Tuple[Any, int]], collection: Any, depth: int) -> None:
    """Push the present items of ``collection`` so they pop in slot order."""
    items = [item for item in iter_slots(collection) if item is not None]
    for item in reversed(items):
        stack.append((item, depth))


def flatten(root: Any, max_depth: int, resolver: Any) -> List[Any]:
    """
    Flatten ``root`` into an ordered list of leaf items.

    Items are visited depth-first, left to right. A container is replaced by
    its contents; the container itself is never emitted, so an empty container
    contributes nothing. Top-level items sit at depth 0 and containers are
    expanded while ``depth <= max_depth``; anything reached deeper is emitted
    as-is.

    Items are tracked by identity for the whole call. An item seen a second
    time (a real cycle, or the same instance shared by two branches) is
    emitted as a leaf instead of being expanded again.

    Args:
        root: A Collection, a plain iterable of slots, or ``None``.
        max_depth: Non-negative expansion limit.
        resolver: A ContainerResolver or a callable ``item -> collection | None``.

    Raises:
        InvalidArgumentError: If ``max_depth`` is not a non-negative integer
            or ``resolver`` is unusable. Raised before any traversal.
    """
    max_depth = _check_max_depth(max_depth)
    resolver = as_resolver(resolver)

    out: List[Any] = []
    # id -> item; holding the reference keeps ids from being recycled mid-call
    seen: Dict[int, Any] = {}
    stack: List[Tuple[Any, int]] = []
    _push_slots(stack, root, 0)

    cycles = 0
    cutoffs = 0
    while stack:
        item, depth = stack.pop()
        key = id(item)
        if key in seen:
            cycles += 1
            logger.debug('Item %r already expanded; emitting as leaf (depth=%d)', item, depth)
            out.append(item)
            continue
        if depth > max_depth:
            cutoffs += 1
            logger.debug('Depth %d exceeds max_depth=%d; emitting %r as leaf', depth, max_depth, item)
            out.append(item)
            continue
        seen[key] = item

        inner = resolver.resolve(item)
        if inner is None:
            out.append(item)
        else:
            _push_slots(stack, inner, depth + 1)

    logger.debug(
        'Flattened %d items (max_depth=%d, visited=%d, cycles=%d, cutoffs=%d)',
        len(out), max_depth, len(seen), cycles, cutoffs,
    )
    return out


class Flattener:
    """Reusable flattener bound to a resolver and a default depth limit.

    The instance keeps no per-call state, so it can be shared freely;
    every :meth:`flatten` call tracks visited items on its own.
    """

    def __init__(self, resolver: Any, max_depth: Optional[int] = None) -> None:
        self.resolver: ContainerResolver = as_resolver(resolver)
        if max_depth is None:
            max_depth = load_flatten_config().max_depth
        self.max_depth = _check_max_depth(max_depth)

    def flatten(self, root: Any, max_depth: Optional[int] = None) -> List[Any]:
        depth = self.max_depth if max_depth is None else max_depth
        return flatten(root, depth, self.resolver)

    def __repr__(self) -> str:
        return f"Flattener(resolver={self.resolver!r}, max_depth={self.max_depth})"


__all__ = [
    "Flattener",
    "flatten",
]
