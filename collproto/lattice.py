"""
lattice.py

Queries over the whole capability lattice.

    ReadonlyCollection --> Collection ----------------------------------------+
        |                                                                     v
        +--> ReadonlyIndexedCollection --> FixedSizeIndexedCollection --> IndexedCollection

    ReadonlyKeyedCollection --> KeyedCollection
"""

from typing import Any, Dict, Tuple

from collproto.collection import Collection, ReadonlyCollection
from collproto.contract import CapabilityInterface
from collproto.errors import UnknownInterfaceError
from collproto.indexed import (
    FixedSizeIndexedCollection,
    IndexedCollection,
    ReadonlyIndexedCollection,
)
from collproto.keyed import KeyedCollection, ReadonlyKeyedCollection

# Parents always precede children.
INTERFACES: Tuple[CapabilityInterface, ...] = (
    ReadonlyCollection,
    Collection,
    ReadonlyIndexedCollection,
    FixedSizeIndexedCollection,
    IndexedCollection,
    ReadonlyKeyedCollection,
    KeyedCollection,
)

_BY_NAME: Dict[str, CapabilityInterface] = {i.name: i for i in INTERFACES}


def get_interface(name: str) -> CapabilityInterface:
    """Get a lattice interface by name."""
    try:
        return _BY_NAME[name]
    except (KeyError, TypeError):
        raise UnknownInterfaceError(name) from None


def roots() -> Tuple[CapabilityInterface, ...]:
    return tuple(i for i in INTERFACES if i.is_root)


def capabilities_of(value: Any) -> Tuple[CapabilityInterface, ...]:
    """Every interface ``value`` satisfies, in lattice order. Never raises."""
    return tuple(i for i in INTERFACES if i.is_satisfied_by(value))


def most_specific(value: Any) -> Tuple[CapabilityInterface, ...]:
    """
    The satisfied interfaces that no other satisfied interface extends.

    A list-like value yields (IndexedCollection,); a value that is both a
    Collection and a ReadonlyIndexedCollection but cannot set_at yields both.
    """
    satisfied = capabilities_of(value)
    return tuple(
        i for i in satisfied
        if not any(other is not i and other.extends(i) for other in satisfied)
    )
