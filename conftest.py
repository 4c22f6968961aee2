"""
conftest.py

Sample containers bound to collproto tokens, shared by the test modules.
They exist only to exercise the protocol; collproto itself ships no
concrete containers.
"""

from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

import pytest

from collproto import (
    ABSENT,
    Collection,
    FixedSizeIndexedCollection,
    IndexedCollection,
    KeyedCollection,
    ReadonlyCollection,
    ReadonlyIndexedCollection,
    ReadonlyKeyedCollection,
    expose,
)


# =============================================================================
# Unordered
# =============================================================================

class ReadonlyBag:
    def __init__(self, items: Optional[Iterable[Any]] = None):
        self._items: List[Any] = list(items or ())

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    @expose(ReadonlyCollection.size)
    @property
    def size(self) -> int:
        return len(self._items)

    @expose(ReadonlyCollection.has)
    def has(self, value: Any) -> bool:
        return value in self._items


class Bag(ReadonlyBag):
    @expose(Collection.add)
    def add(self, value: Any) -> None:
        self._items.append(value)

    @expose(Collection.delete)
    def delete(self, value: Any) -> bool:
        try:
            self._items.remove(value)
        except ValueError:
            return False
        return True

    @expose(Collection.clear)
    def clear(self) -> None:
        self._items.clear()


# =============================================================================
# Indexed
# =============================================================================

class ReadonlyList(ReadonlyBag):
    @expose(ReadonlyIndexedCollection.index_of)
    def index_of(self, value: Any, from_index: int = 0) -> int:
        if from_index < 0:
            from_index = max(len(self._items) + from_index, 0)
        for i in range(from_index, len(self._items)):
            if self._items[i] == value:
                return i
        return -1

    @expose(ReadonlyIndexedCollection.get_at)
    def get_at(self, index: int) -> Any:
        if 0 <= index < len(self._items):
            return self._items[index]
        return ABSENT


class FixedArray(ReadonlyList):
    @expose(FixedSizeIndexedCollection.set_at)
    def set_at(self, index: int, value: Any) -> bool:
        if 0 <= index < len(self._items):
            self._items[index] = value
            return True
        return False


class ArrayList(FixedArray, Bag):
    @expose(IndexedCollection.insert_at)
    def insert_at(self, index: int, value: Any) -> None:
        self._items.insert(index, value)

    @expose(IndexedCollection.remove_at)
    def remove_at(self, index: int) -> None:
        del self._items[index]


# =============================================================================
# Keyed
# =============================================================================

class ReadonlyDictionary:
    def __init__(self, entries: Optional[Dict[Any, Any]] = None):
        self._entries: Dict[Any, Any] = dict(entries or {})

    def __iter__(self) -> Iterator[Tuple[Any, Any]]:
        return iter(self._entries.items())

    @expose(ReadonlyKeyedCollection.size)
    @property
    def size(self) -> int:
        return len(self._entries)

    @expose(ReadonlyKeyedCollection.has)
    def has(self, key: Any) -> bool:
        return key in self._entries

    @expose(ReadonlyKeyedCollection.get)
    def get(self, key: Any) -> Any:
        return self._entries.get(key, ABSENT)

    @expose(ReadonlyKeyedCollection.keys)
    def keys(self) -> Iterator[Any]:
        return iter(self._entries.keys())

    @expose(ReadonlyKeyedCollection.values)
    def values(self) -> Iterator[Any]:
        return iter(self._entries.values())


class Dictionary(ReadonlyDictionary):
    @expose(KeyedCollection.set)
    def set(self, key: Any, value: Any) -> None:
        self._entries[key] = value

    @expose(KeyedCollection.delete)
    def delete(self, key: Any) -> bool:
        if key in self._entries:
            del self._entries[key]
            return True
        return False

    @expose(KeyedCollection.clear)
    def clear(self) -> None:
        self._entries.clear()


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def readonly_bag() -> ReadonlyBag:
    return ReadonlyBag(["a", "b"])


@pytest.fixture
def bag() -> Bag:
    return Bag(["a", "b"])


@pytest.fixture
def readonly_list() -> ReadonlyList:
    return ReadonlyList(["a", "b", "a"])


@pytest.fixture
def fixed_array() -> FixedArray:
    return FixedArray(["x", "y", "z"])


@pytest.fixture
def array_list() -> ArrayList:
    return ArrayList(["a", "b", "c"])


@pytest.fixture
def readonly_dictionary() -> ReadonlyDictionary:
    return ReadonlyDictionary({"one": 1, "two": 2})


@pytest.fixture
def dictionary() -> Dictionary:
    return Dictionary({"one": 1, "two": 2})


@pytest.fixture
def all_samples(
    readonly_bag, bag, readonly_list, fixed_array, array_list,
    readonly_dictionary, dictionary,
) -> List[Any]:
    return [
        readonly_bag, bag, readonly_list, fixed_array, array_list,
        readonly_dictionary, dictionary,
    ]
