"""
collection.py

Unordered collection capabilities: ReadonlyCollection and Collection.

ReadonlyCollection[T]
    size  (property) -> int      number of elements
    has(value) -> bool           membership test
    iteration yields the elements

Collection[T] extends ReadonlyCollection[T]
    add(value) -> None
    delete(value) -> bool        True iff an element was removed
    clear() -> None
"""

from typing import Any

from collproto.contract import CapabilityInterface, Operation, OperationKind
from collproto.tokens import symbol_for

# =============================================================================
# ReadonlyCollection
# =============================================================================

def is_readonly_collection(value: Any) -> bool:
    """Tests whether a value supports the minimal representation of a ReadonlyCollection."""
    return ReadonlyCollection.is_satisfied_by(value)


ReadonlyCollection = CapabilityInterface(
    "ReadonlyCollection",
    predicate=is_readonly_collection,
    description="An iterable collection that can report its size and test membership.",
    operations=(
        Operation(
            accessor="size",
            token=symbol_for("ReadonlyCollection.size"),
            kind=OperationKind.PROPERTY,
            signature="int",
            description="Gets the number of elements in the collection.",
        ),
        Operation(
            accessor="has",
            token=symbol_for("ReadonlyCollection.has"),
            signature="(value) -> bool",
            description="Tests whether an element is present in the collection.",
        ),
    ),
)


# =============================================================================
# Collection
# =============================================================================

def is_collection(value: Any) -> bool:
    """Tests whether a value supports the minimal representation of a Collection."""
    return Collection.is_satisfied_by(value)


Collection = CapabilityInterface(
    "Collection",
    predicate=is_collection,
    parents=(ReadonlyCollection,),
    description="A ReadonlyCollection that elements can be added to and removed from.",
    operations=(
        Operation(
            accessor="add",
            token=symbol_for("Collection.add"),
            signature="(value) -> None",
            description="Adds an element to the collection.",
        ),
        Operation(
            accessor="delete",
            token=symbol_for("Collection.delete"),
            signature="(value) -> bool",
            description="Deletes an element from the collection. "
                        "Returns True if an element was removed.",
        ),
        Operation(
            accessor="clear",
            token=symbol_for("Collection.clear"),
            signature="() -> None",
            description="Clears the collection.",
        ),
    ),
)
