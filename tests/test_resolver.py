from __future__ import annotations

from types import SimpleNamespace

import pytest

from satchel import (
    AttributeResolver,
    CallableResolver,
    ChainResolver,
    Collection,
    ContainerResolver,
    InvalidArgumentError,
    as_resolver,
    flatten,
    iter_slots,
)


def test_iter_slots_accepts_none_lists_and_slot_objects():
    class Shelf:
        def slots(self):
            return ["a", None, "b"]

    assert list(iter_slots(None)) == []
    assert list(iter_slots(("x", None))) == ["x", None]
    assert list(iter_slots(Shelf())) == ["a", None, "b"]
    assert isinstance(Shelf(), Collection)


def test_iter_slots_rejects_non_iterables():
    with pytest.raises(TypeError):
        iter_slots(42)


def test_attribute_resolver_reads_named_attribute():
    resolver = AttributeResolver("items")
    bag = SimpleNamespace(items=["coin"])
    assert resolver.resolve(bag) == ["coin"]
    assert resolver.resolve(SimpleNamespace(items=None)) is None
    assert resolver.resolve(object()) is None
    assert isinstance(resolver, ContainerResolver)


def test_attribute_resolver_requires_name():
    with pytest.raises(InvalidArgumentError):
        AttributeResolver("")


def test_chain_resolver_first_container_wins():
    backpack = SimpleNamespace(kind="backpack", pockets=["rope"], contents=["ignored"])
    chest = SimpleNamespace(kind="chest", contents=["gold", None, "gem"])
    sword = SimpleNamespace(kind="sword")

    chain = ChainResolver(AttributeResolver("pockets"), AttributeResolver("contents"))
    assert chain.resolve(backpack) == ["rope"]
    assert chain.resolve(chest) == ["gold", None, "gem"]
    assert chain.resolve(sword) is None

    out = flatten([sword, backpack, chest], 3, chain)
    assert out == [sword, "rope", "gold", "gem"]


def test_empty_chain_treats_everything_as_leaf():
    chest = SimpleNamespace(contents=["gold"])
    assert flatten([chest], 3, ChainResolver()) == [chest]


def test_chain_accepts_plain_callables():
    chain = ChainResolver(lambda item: item if isinstance(item, list) else None)
    assert isinstance(chain.resolvers[0], CallableResolver)
    assert flatten([["a", ["b"]], "c"], 5, chain) == ["a", "b", "c"]


def test_as_resolver_passes_through_and_wraps():
    resolver = AttributeResolver()
    assert as_resolver(resolver) is resolver
    wrapped = as_resolver(lambda item: None)
    assert isinstance(wrapped, CallableResolver)
    assert wrapped.resolve("anything") is None


@pytest.mark.parametrize("bad", [None, 3, "contents"])
def test_as_resolver_rejects_unusable_objects(bad):
    with pytest.raises(InvalidArgumentError):
        as_resolver(bad)
