"""
collproto: Structural Capability Protocol for Collections
==========================================================

collproto names the operations of collection-like types with well-known
tokens and tells, at runtime, whether an arbitrary value structurally
implements a capability level, whatever its class or base classes.

Capability Lattice
------------------
- **Unordered**: ReadonlyCollection, Collection
- **Indexed**: ReadonlyIndexedCollection, FixedSizeIndexedCollection,
  IndexedCollection (also a Collection)
- **Keyed**: ReadonlyKeyedCollection, KeyedCollection

Stability Guarantees (v1.x)
---------------------------
Everything exported in ``__all__`` is public and follows semantic
versioning. Token names ("Collection.add", ...) are part of the protocol and
never change within a major version.

Detection is shallow: a positive predicate means the required operations
are present, not that they behave per contract.

Example
-------
::

    from collproto import Collection, ReadonlyCollection, expose, is_collection

    class Bag:
        def __init__(self):
            self._items = []

        def __iter__(self):
            return iter(self._items)

        @expose(ReadonlyCollection.size)
        @property
        def size(self):
            return len(self._items)

        @expose(ReadonlyCollection.has)
        def has(self, value):
            return value in self._items

        @expose(Collection.add)
        def add(self, value):
            self._items.append(value)

        @expose(Collection.delete)
        def delete(self, value):
            ...

        @expose(Collection.clear)
        def clear(self):
            self._items.clear()

    assert is_collection(Bag())
"""

import logging

__version__ = "1.0.0"

# =============================================================================
# PUBLIC API
# =============================================================================

__all__ = [
    # --- Package Metadata ---
    "__version__",

    # --- Tokens ---
    "symbol_for",
    "is_token",
    "registered_tokens",
    "split_token",

    # --- Absent Marker ---
    "ABSENT",
    "is_absent",

    # --- Presence ---
    "exposes",
    "expose",
    "get_operation",
    "is_iterable",

    # --- Contracts ---
    "CapabilityInterface",
    "Operation",
    "OperationKind",

    # --- Unordered ---
    "ReadonlyCollection",
    "Collection",
    "is_readonly_collection",
    "is_collection",

    # --- Indexed ---
    "ReadonlyIndexedCollection",
    "FixedSizeIndexedCollection",
    "IndexedCollection",
    "is_readonly_indexed_collection",
    "is_fixed_size_indexed_collection",
    "is_indexed_collection",

    # --- Keyed ---
    "ReadonlyKeyedCollection",
    "KeyedCollection",
    "is_readonly_keyed_collection",
    "is_keyed_collection",

    # --- Lattice ---
    "INTERFACES",
    "get_interface",
    "roots",
    "capabilities_of",
    "most_specific",

    # --- Exceptions ---
    "ProtocolDefinitionError",
    "InvalidTokenNameError",
    "UnregisteredTokenError",
    "InvalidOperationError",
    "DuplicateOperationError",
    "InheritedOperationRedefinitionError",
    "ConflictingParentTokensError",
    "InvalidParentError",
    "UnknownInterfaceError",
    "UnknownOperationError",
    "ContractImmutabilityError",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())

# =============================================================================
# IMPORTS
# =============================================================================

from collproto.absent import ABSENT, is_absent
from collproto.collection import (
    Collection,
    ReadonlyCollection,
    is_collection,
    is_readonly_collection,
)
from collproto.contract import CapabilityInterface, Operation, OperationKind
from collproto.errors import (
    ConflictingParentTokensError,
    ContractImmutabilityError,
    DuplicateOperationError,
    InheritedOperationRedefinitionError,
    InvalidOperationError,
    InvalidParentError,
    InvalidTokenNameError,
    ProtocolDefinitionError,
    UnknownInterfaceError,
    UnknownOperationError,
    UnregisteredTokenError,
)
from collproto.indexed import (
    FixedSizeIndexedCollection,
    IndexedCollection,
    ReadonlyIndexedCollection,
    is_fixed_size_indexed_collection,
    is_indexed_collection,
    is_readonly_indexed_collection,
)
from collproto.keyed import (
    KeyedCollection,
    ReadonlyKeyedCollection,
    is_keyed_collection,
    is_readonly_keyed_collection,
)
from collproto.lattice import (
    INTERFACES,
    capabilities_of,
    get_interface,
    most_specific,
    roots,
)
from collproto.presence import expose, exposes, get_operation, is_iterable
from collproto.tokens import is_token, registered_tokens, split_token, symbol_for
