from dataclasses import dataclass, field

import pytest

from aigtasks.hashset import HashSet


@dataclass
class Item:
    name: str
    value: int = field(default=0, compare=False)


def by_len(item):
    return len(item.name)


def make(buckets=7):
    return HashSet(buckets, key=by_len)


def test_insert_and_duplicates():
    hs = make()
    assert hs.insert(Item("abc", 1)) is True
    assert hs.insert(Item("abc", 2)) is False
    assert len(hs) == 1
    assert Item("abc") in hs
    assert Item("abd") not in hs


def test_iteration_follows_bucket_order():
    hs = make()
    hs.insert(Item("aa"))
    hs.insert(Item("b"))
    hs.insert(Item("c"))
    assert [it.name for it in hs] == ["b", "c", "aa"]
    assert [it.name for it in hs[1]] == ["b", "c"]


def test_query_returns_stored_item():
    hs = make()
    hs.insert(Item("task", 5))
    found = hs.query(Item("task"))
    assert found.value == 5
    assert hs.query(Item("none")) is None


def test_update_replaces_or_inserts():
    hs = make()
    assert hs.update(Item("x", 1)) is False
    assert hs.update(Item("x", 9)) is True
    assert len(hs) == 1
    assert hs.query(Item("x")).value == 9


def test_remove_moves_last_into_place():
    hs = make()
    for name in ["x", "y", "z"]:
        hs.insert(Item(name))
    assert hs.remove(Item("x")) is True
    assert [it.name for it in hs[1]] == ["z", "y"]
    assert hs.remove(Item("x")) is False
    assert len(hs) == 2


def test_clear_and_reset():
    hs = make()
    hs.insert(Item("a"))
    hs.clear()
    assert len(hs) == 0
    assert hs.num_buckets() == 7
    hs.reset()
    assert hs.num_buckets() == 0


def test_no_buckets_raises():
    hs = HashSet(key=by_len)
    with pytest.raises(ValueError):
        hs.insert(Item("a"))
    hs.init(3)
    assert hs.insert(Item("a")) is True


def test_many_items_all_found():
    hs = HashSet(13)
    values = list(range(0, 500, 7))
    assert all(hs.insert(v) for v in values)
    assert len(hs) == len(values)
    assert sorted(hs) == values
    assert all(v in hs for v in values)