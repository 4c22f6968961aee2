"""
keyed.py

Keyed (map-like) collection capabilities. Unrelated to the unordered and
indexed lattice: a keyed collection iterates (key, value) pairs and mints
its own tokens, including its own delete and clear.

ReadonlyKeyedCollection[K, V]
    size  (property) -> int
    has(key) -> bool
    get(key) -> V | ABSENT
    keys() -> Iterator[K]
    values() -> Iterator[V]

KeyedCollection[K, V] extends ReadonlyKeyedCollection[K, V]
    set(key, value) -> None
    delete(key) -> bool
    clear() -> None
"""

from typing import Any

from collproto.contract import CapabilityInterface, Operation, OperationKind
from collproto.tokens import symbol_for

# =============================================================================
# ReadonlyKeyedCollection
# =============================================================================

def is_readonly_keyed_collection(value: Any) -> bool:
    """Tests whether a value supports the minimal representation of a ReadonlyKeyedCollection."""
    return ReadonlyKeyedCollection.is_satisfied_by(value)


ReadonlyKeyedCollection = CapabilityInterface(
    "ReadonlyKeyedCollection",
    predicate=is_readonly_keyed_collection,
    description="An iterable of (key, value) pairs with key lookup.",
    operations=(
        Operation(
            accessor="size",
            token=symbol_for("ReadonlyKeyedCollection.size"),
            kind=OperationKind.PROPERTY,
            signature="int",
            description="Gets the number of elements in the collection.",
        ),
        Operation(
            accessor="has",
            token=symbol_for("ReadonlyKeyedCollection.has"),
            signature="(key) -> bool",
            description="Tests whether a key is present in the collection.",
        ),
        Operation(
            accessor="get",
            token=symbol_for("ReadonlyKeyedCollection.get"),
            signature="(key) -> V | ABSENT",
            description="Gets the value associated with the provided key, "
                        "or ABSENT if the key is not present.",
        ),
        Operation(
            accessor="keys",
            token=symbol_for("ReadonlyKeyedCollection.keys"),
            signature="() -> Iterator[K]",
            description="Gets an iterator over the keys in the collection.",
        ),
        Operation(
            accessor="values",
            token=symbol_for("ReadonlyKeyedCollection.values"),
            signature="() -> Iterator[V]",
            description="Gets an iterator over the values in the collection.",
        ),
    ),
)


# =============================================================================
# KeyedCollection
# =============================================================================

def is_keyed_collection(value: Any) -> bool:
    """Tests whether a value supports the minimal representation of a KeyedCollection."""
    return KeyedCollection.is_satisfied_by(value)


KeyedCollection = CapabilityInterface(
    "KeyedCollection",
    predicate=is_keyed_collection,
    parents=(ReadonlyKeyedCollection,),
    description="A ReadonlyKeyedCollection that entries can be set on and removed from.",
    operations=(
        Operation(
            accessor="set",
            token=symbol_for("KeyedCollection.set"),
            signature="(key, value) -> None",
            description="Sets a value in the collection for the provided key.",
        ),
        Operation(
            accessor="delete",
            token=symbol_for("KeyedCollection.delete"),
            signature="(key) -> bool",
            description="Deletes a key and its associated value. Returns True if "
                        "the key was found and removed.",
        ),
        Operation(
            accessor="clear",
            token=symbol_for("KeyedCollection.clear"),
            signature="() -> None",
            description="Clears the collection.",
        ),
    ),
)
