"""
indexed.py

Indexed (array-like) collection capabilities.

ReadonlyIndexedCollection[T] extends ReadonlyCollection[T]
    index_of(value, from_index=0) -> int    first position at or after
                                            from_index, or -1
    get_at(index) -> T | ABSENT             ABSENT when out of bounds

FixedSizeIndexedCollection[T] extends ReadonlyIndexedCollection[T]
    set_at(index, value) -> bool            False when out of bounds

IndexedCollection[T] extends FixedSizeIndexedCollection[T], Collection[T]
    insert_at(index, value) -> None         shifts following elements right
    remove_at(index) -> None                shifts following elements left

IndexedCollection takes add, delete and clear from Collection, so
``IndexedCollection.delete is Collection.delete``: a value exposing the one
delete operation satisfies both.
"""

from typing import Any

from collproto.collection import Collection, ReadonlyCollection
from collproto.contract import CapabilityInterface, Operation
from collproto.tokens import symbol_for

# =============================================================================
# ReadonlyIndexedCollection
# =============================================================================

def is_readonly_indexed_collection(value: Any) -> bool:
    """Tests whether a value supports the minimal representation of a ReadonlyIndexedCollection."""
    return ReadonlyIndexedCollection.is_satisfied_by(value)


ReadonlyIndexedCollection = CapabilityInterface(
    "ReadonlyIndexedCollection",
    predicate=is_readonly_indexed_collection,
    parents=(ReadonlyCollection,),
    description="A ReadonlyCollection whose elements can be read by position.",
    operations=(
        Operation(
            accessor="index_of",
            token=symbol_for("ReadonlyIndexedCollection.indexOf"),
            signature="(value, from_index=0) -> int",
            description="Gets the index for a value in the collection, "
                        "or -1 if the value was not found.",
        ),
        Operation(
            accessor="get_at",
            token=symbol_for("ReadonlyIndexedCollection.getAt"),
            signature="(index) -> T | ABSENT",
            description="Gets the value at the specified index, or ABSENT if the "
                        "index is outside of the bounds of the collection.",
        ),
    ),
)


# =============================================================================
# FixedSizeIndexedCollection
# =============================================================================

def is_fixed_size_indexed_collection(value: Any) -> bool:
    """Tests whether a value supports the minimal representation of a FixedSizeIndexedCollection."""
    return FixedSizeIndexedCollection.is_satisfied_by(value)


FixedSizeIndexedCollection = CapabilityInterface(
    "FixedSizeIndexedCollection",
    predicate=is_fixed_size_indexed_collection,
    parents=(ReadonlyIndexedCollection,),
    description="A ReadonlyIndexedCollection whose positions can be overwritten.",
    operations=(
        Operation(
            accessor="set_at",
            token=symbol_for("FixedSizeIndexedCollection.setAt"),
            signature="(index, value) -> bool",
            description="Sets a value at the specified index. Returns True if the "
                        "value was set, False if the index was out of bounds.",
        ),
    ),
)


# =============================================================================
# IndexedCollection
# =============================================================================

def is_indexed_collection(value: Any) -> bool:
    """Tests whether a value supports the minimal representation of an IndexedCollection."""
    return IndexedCollection.is_satisfied_by(value)


IndexedCollection = CapabilityInterface(
    "IndexedCollection",
    predicate=is_indexed_collection,
    parents=(FixedSizeIndexedCollection, Collection),
    description="A resizable indexed collection.",
    operations=(
        Operation(
            accessor="insert_at",
            token=symbol_for("IndexedCollection.insertAt"),
            signature="(index, value) -> None",
            description="Inserts a value at the specified index, shifting any "
                        "following elements to the right one position.",
        ),
        Operation(
            accessor="remove_at",
            token=symbol_for("IndexedCollection.removeAt"),
            signature="(index) -> None",
            description="Removes the value at the specified index, shifting any "
                        "following elements to the left one position.",
        ),
    ),
)
