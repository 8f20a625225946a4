from __future__ import annotations

from typing import Any, Callable, Iterable, Optional, Protocol, runtime_checkable

from .exceptions import InvalidArgumentError


@runtime_checkable
class Collection(Protocol):
    """Protocol for an ordered group of slots.

    Each slot holds an item or ``None`` for an empty slot. Order is
    significant and must be stable for the lifetime of a flatten call.
    Plain lists and tuples are accepted wherever a Collection is expected.
    """

    def slots(self) -> Iterable[Optional[Any]]:
        """Return the slots in order, ``None`` marking an empty slot."""


@runtime_checkable
class ContainerResolver(Protocol):
    """Protocol that tells containers apart from leaves.

    Implementations must be side-effect free and deterministic for a given
    item while a flatten call is in progress.
    """

    def resolve(self, item: Any) -> Optional[Any]:
        """Return the item's inner collection, or ``None`` if it is a leaf."""


def iter_slots(collection: Any) -> Iterable[Optional[Any]]:
    """Adapt a collection-like object to an iterable of slots.

    Supports three styles:
    - ``None``, treated as an empty collection
    - An object implementing :class:`Collection` (has ``slots()``)
    - Any other iterable (list, tuple, generator)

    Raises:
        TypeError: If the object is none of the above.
    """
    if collection is None:
        return ()
    slots = getattr(collection, "slots", None)
    if callable(slots):
        return slots()
    try:
        return iter(collection)
    except TypeError:
        raise TypeError(
            f"Object {collection!r} is not iterable and does not expose slots()."
        ) from None


class CallableResolver:
    """Adapter turning a plain ``item -> collection | None`` function into a resolver."""

    def __init__(self, func: Callable[[Any], Optional[Any]]) -> None:
        self._func = func

    def resolve(self, item: Any) -> Optional[Any]:
        return self._func(item)

    def __repr__(self) -> str:
        return f"CallableResolver({self._func!r})"


class AttributeResolver:
    """Resolve containers by reading an attribute such as ``contents``.

    An item whose attribute is missing or ``None`` is a leaf. Note that an
    empty-but-present collection still marks a container, which then
    contributes nothing to the flattened output.
    """

    def __init__(self, attribute: str = "contents") -> None:
        if not attribute:
            raise InvalidArgumentError("attribute must be a non-empty string")
        self.attribute = attribute

    def resolve(self, item: Any) -> Optional[Any]:
        return getattr(item, self.attribute, None)

    def __repr__(self) -> str:
        return f"AttributeResolver({self.attribute!r})"


class ChainResolver:
    """Try several resolvers in order; the first one to report a container wins.

    Useful when a game has more than one kind of container (backpacks,
    chests, bundles) each recognised by its own rule. With no resolvers every
    item is a leaf.
    """

    def __init__(self, *resolvers: Any) -> None:
        self._resolvers = tuple(as_resolver(r) for r in resolvers)

    @property
    def resolvers(self) -> tuple:
        return self._resolvers

    def resolve(self, item: Any) -> Optional[Any]:
        for resolver in self._resolvers:
            inner = resolver.resolve(item)
            if inner is not None:
                return inner
        return None


def as_resolver(obj: Any) -> ContainerResolver:
    """Coerce ``obj`` into a :class:`ContainerResolver`.

    Objects with a callable ``resolve`` are returned unchanged; other
    callables are wrapped in :class:`CallableResolver`.

    Raises:
        InvalidArgumentError: If ``obj`` is ``None`` or cannot resolve items.
    """
    if obj is None:
        raise InvalidArgumentError("a container resolver is required")
    if callable(getattr(obj, "resolve", None)):
        return obj  # type: ignore[return-value]
    if callable(obj):
        return CallableResolver(obj)
    raise InvalidArgumentError(
        f"Object {obj!r} is neither a ContainerResolver nor a callable."
    )


__all__ = [
    "AttributeResolver",
    "CallableResolver",
    "ChainResolver",
    "Collection",
    "ContainerResolver",
    "as_resolver",
    "iter_slots",
]
