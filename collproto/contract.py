"""
contract.py

Capability interface contracts.

A CapabilityInterface is a named, fixed set of operations (token plus
signature) together with the interfaces it structurally extends. It is also
the token namespace of that interface: ``Collection.add`` is the token for
the add operation, and inherited accessors resolve to the parent's token
object, so ``IndexedCollection.delete is Collection.delete``.

Design Invariants:
- Immutable after creation
- Extension is purely additive (no inherited operation is redeclared)
- Tokens are composed from parents, never re-minted
- Deterministic serialization (sorted keys, content-based hash)
- Pure data plus a side-effect-free predicate; no default implementations
"""

import hashlib
import json
import keyword
import logging
import re
from enum import Enum
from typing import Any, Callable, Dict, Iterator, List, Optional, Sequence, Tuple

from collproto.errors import (
    ConflictingParentTokensError,
    ContractImmutabilityError,
    DuplicateOperationError,
    InheritedOperationRedefinitionError,
    InvalidOperationError,
    InvalidParentError,
    ProtocolDefinitionError,
    UnknownOperationError,
    UnregisteredTokenError,
)
from collproto.presence import exposes, is_iterable
from collproto.tokens import is_token, split_token, symbol_for

logger = logging.getLogger(__name__)

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


# =============================================================================
# Operation Kind Enum
# =============================================================================

class OperationKind(Enum):
    """How a candidate exposes an operation."""
    METHOD = "method"
    PROPERTY = "property"


# =============================================================================
# Helper Functions
# =============================================================================

def _validate_identifier(value: Any, field_name: str) -> str:
    """Validate that a value is a usable Python identifier."""
    if not isinstance(value, str) or not value.isidentifier() or keyword.iskeyword(value):
        raise InvalidOperationError(
            value,
            f"{field_name} must be a non-keyword identifier",
        )
    return value


def _compute_hash(data: Dict[str, Any]) -> str:
    """Compute SHA-256 hash of JSON-serialized data."""
    json_str = json.dumps(data, sort_keys=True, separators=(',', ':'))
    return hashlib.sha256(json_str.encode('utf-8')).hexdigest()


def predicate_name_for(interface_name: str) -> str:
    """'ReadonlyIndexedCollection' -> 'is_readonly_indexed_collection'."""
    return "is_" + _CAMEL_BOUNDARY.sub("_", interface_name).lower()


# =============================================================================
# Operation
# =============================================================================

class Operation:
    """
    One required operation of a capability interface.

    Attributes:
        accessor: Python attribute name on the interface (e.g. "index_of")
        token: Registered token naming the operation (e.g. "ReadonlyIndexedCollection.indexOf")
        kind: METHOD or PROPERTY
        signature: Human-readable signature, e.g. "(value, from_index=0) -> int"
        description: Optional contract text implementers must honor
    """

    __slots__ = ('_accessor', '_token', '_kind', '_signature', '_description', '_frozen')

    def __init__(
        self,
        *,
        accessor: str,
        token: str,
        signature: str,
        kind: OperationKind = OperationKind.METHOD,
        description: Optional[str] = None,
    ):
        accessor = _validate_identifier(accessor, "accessor")

        if not is_token(token):
            raise UnregisteredTokenError(token)

        if isinstance(kind, str):
            try:
                kind = OperationKind(kind.lower())
            except ValueError:
                raise InvalidOperationError(accessor, f"unknown kind {kind!r}")
        elif not isinstance(kind, OperationKind):
            raise InvalidOperationError(
                accessor,
                f"kind must be OperationKind or str, got {type(kind).__name__}",
            )

        if not isinstance(signature, str) or not signature.strip():
            raise InvalidOperationError(accessor, "signature must be a non-empty string")

        if description is not None and not isinstance(description, str):
            raise InvalidOperationError(
                accessor,
                f"description must be a string, got {type(description).__name__}",
            )

        object.__setattr__(self, '_accessor', accessor)
        object.__setattr__(self, '_token', token)
        object.__setattr__(self, '_kind', kind)
        object.__setattr__(self, '_signature', signature)
        object.__setattr__(self, '_description', description)
        object.__setattr__(self, '_frozen', True)

    def __setattr__(self, name: str, value: Any) -> None:
        if getattr(self, '_frozen', False):
            raise ContractImmutabilityError(f"set attribute '{name}'")
        object.__setattr__(self, name, value)

    def __delattr__(self, name: str) -> None:
        if getattr(self, '_frozen', False):
            raise ContractImmutabilityError(f"delete attribute '{name}'")
        object.__delattr__(self, name)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def accessor(self) -> str:
        return self._accessor

    @property
    def token(self) -> str:
        return self._token

    @property
    def kind(self) -> OperationKind:
        return self._kind

    @property
    def signature(self) -> str:
        return self._signature

    @property
    def description(self) -> Optional[str]:
        return self._description

    @property
    def operation_name(self) -> str:
        """Operation part of the token, e.g. 'indexOf'."""
        return split_token(self._token)[1]

    # -------------------------------------------------------------------------
    # Comparison Methods
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Operation):
            return NotImplemented
        return (
            self._accessor == other._accessor
            and self._token == other._token
            and self._kind == other._kind
            and self._signature == other._signature
            and self._description == other._description
        )

    def __hash__(self) -> int:
        return hash((
            self._accessor,
            self._token,
            self._kind,
            self._signature,
            self._description,
        ))

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a dictionary."""
        result = {
            "accessor": self._accessor,
            "kind": self._kind.value,
            "signature": self._signature,
            "token": self._token,
        }
        if self._description is not None:
            result["description"] = self._description
        return result

    def to_json(self, *, indent: Optional[int] = None) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), sort_keys=True, indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Operation":
        """Construct from a dictionary, interning the token name if needed."""
        return cls(
            accessor=data["accessor"],
            token=symbol_for(data["token"]),
            signature=data["signature"],
            kind=data.get("kind", OperationKind.METHOD.value),
            description=data.get("description"),
        )

    @classmethod
    def from_json(cls, json_str: str) -> "Operation":
        """Construct from JSON string."""
        return cls.from_dict(json.loads(json_str))

    # -------------------------------------------------------------------------
    # String Representations
    # -------------------------------------------------------------------------

    def __repr__(self) -> str:
        return f"Operation(accessor={self._accessor!r}, token={self._token!r})"

    def __str__(self) -> str:
        if self._kind is OperationKind.PROPERTY:
            return f"{self._accessor}: {self._signature}"
        return f"{self._accessor}{self._signature}"


# =============================================================================
# CapabilityInterface
# =============================================================================

class CapabilityInterface:
    """
    A named capability level in the collection lattice.

    Attribute access on an interface yields tokens (``Collection.add``) and
    the predicates of the interface and its ancestors
    (``IndexedCollection.is_collection``).

    Attributes:
        name: Interface name, also the prefix of every token it mints
        parents: Interfaces this one structurally extends
        operations: Operations introduced by this interface
        tokens: Every required token, inherited ones first
        interface_id: Content-based hash
    """

    __slots__ = (
        '_interface_id',
        '_name',
        '_description',
        '_parents',
        '_operations',
        '_token_map',
        '_operations_by_token',
        '_tokens',
        '_own_tokens',
        '_predicates',
        '_frozen',
    )

    def __init__(
        self,
        name: str,
        *,
        parents: Sequence["CapabilityInterface"] = (),
        operations: Sequence[Operation] = (),
        description: Optional[str] = None,
        predicate: Optional[Callable[[Any], bool]] = None,
    ):
        if not isinstance(name, str) or not name.isidentifier():
            raise ProtocolDefinitionError(
                f"interface name must be an identifier, got {name!r}",
                error_code="P003",
            )
        if predicate is not None and not callable(predicate):
            raise ProtocolDefinitionError(
                f"{name} predicate must be callable, got {type(predicate).__name__}",
                error_code="P003",
            )

        # Compose parents
        inherited: Dict[str, str] = {}
        inherited_from: Dict[str, str] = {}
        inherited_tokens: List[str] = []
        operations_by_token: Dict[str, Operation] = {}
        predicates: Dict[str, Callable[[Any], bool]] = {}

        for parent in parents:
            if not isinstance(parent, CapabilityInterface):
                raise InvalidParentError(name, parent)
            for accessor, token in parent._token_map.items():
                seen = inherited.get(accessor)
                if seen is not None and seen is not token:
                    raise ConflictingParentTokensError(name, accessor, seen, token)
                inherited[accessor] = token
                inherited_from.setdefault(accessor, parent.name)
            for token in parent.tokens:
                if token not in operations_by_token:
                    inherited_tokens.append(token)
                    operations_by_token[token] = parent._operations_by_token[token]
            predicates.update(parent._predicates)

        # Own operations
        token_map = dict(inherited)
        own: List[Operation] = []

        for i, op in enumerate(operations):
            if not isinstance(op, Operation):
                raise InvalidOperationError(
                    f"operations[{i}]",
                    f"must be Operation, got {type(op).__name__}",
                )
            if op.accessor in inherited:
                raise InheritedOperationRedefinitionError(
                    name, op.accessor, inherited_from[op.accessor],
                )
            if op.accessor in token_map:
                raise DuplicateOperationError(name, op.accessor)
            if split_token(op.token)[0] != name:
                raise InvalidOperationError(
                    op.accessor,
                    f"token {op.token!r} is not in the {name} namespace",
                )
            token_map[op.accessor] = op.token
            operations_by_token[op.token] = op
            own.append(op)

        own_tokens = tuple(op.token for op in own)

        object.__setattr__(self, '_name', name)
        object.__setattr__(self, '_description', description)
        object.__setattr__(self, '_parents', tuple(parents))
        object.__setattr__(self, '_operations', tuple(own))
        object.__setattr__(self, '_token_map', token_map)
        object.__setattr__(self, '_operations_by_token', operations_by_token)
        object.__setattr__(self, '_own_tokens', own_tokens)
        object.__setattr__(self, '_tokens', tuple(inherited_tokens) + own_tokens)

        if predicate is None:
            predicate = self.is_satisfied_by
        predicates[predicate_name_for(name)] = predicate
        object.__setattr__(self, '_predicates', predicates)

        object.__setattr__(self, '_interface_id', self._compute_interface_id())
        object.__setattr__(self, '_frozen', True)

        logger.debug(
            "Defined capability interface %s: %d own operations, %d inherited",
            name, len(own_tokens), len(inherited_tokens),
        )

    def __setattr__(self, name: str, value: Any) -> None:
        if getattr(self, '_frozen', False):
            raise ContractImmutabilityError(f"set attribute '{name}'")
        object.__setattr__(self, name, value)

    def __delattr__(self, name: str) -> None:
        if getattr(self, '_frozen', False):
            raise ContractImmutabilityError(f"delete attribute '{name}'")
        object.__delattr__(self, name)

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails: token accessors and predicates.
        if name.startswith('_'):
            raise AttributeError(name)
        token = self._token_map.get(name)
        if token is not None:
            return token
        predicate = self._predicates.get(name)
        if predicate is not None:
            return predicate
        raise UnknownOperationError(self._name, name)

    def __dir__(self) -> List[str]:
        return sorted(set(super().__dir__()) | set(self._token_map) | set(self._predicates))

    # -------------------------------------------------------------------------
    # Internal Helper Methods
    # -------------------------------------------------------------------------

    def _compute_interface_id(self) -> str:
        """Compute content-based hash for interface_id."""
        data = {
            "description": self._description,
            "name": self._name,
            "operations": [op.to_dict() for op in self._operations],
            "parents": [p.interface_id for p in self._parents],
        }
        return _compute_hash(data)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def interface_id(self) -> str:
        """Content-based hash of this interface, including its parents."""
        return self._interface_id

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> Optional[str]:
        return self._description

    @property
    def parents(self) -> Tuple["CapabilityInterface", ...]:
        return self._parents

    @property
    def operations(self) -> Tuple[Operation, ...]:
        """Operations introduced by this interface (not inherited ones)."""
        return self._operations

    @property
    def own_tokens(self) -> Tuple[str, ...]:
        return self._own_tokens

    @property
    def tokens(self) -> Tuple[str, ...]:
        """Every required token, root-first, each listed once."""
        return self._tokens

    @property
    def predicate_name(self) -> str:
        return predicate_name_for(self._name)

    @property
    def is_root(self) -> bool:
        return not self._parents

    # -------------------------------------------------------------------------
    # Lookup Methods
    # -------------------------------------------------------------------------

    def token_for(self, accessor: str) -> str:
        """Get the token for an accessor, inherited or own."""
        token = self._token_map.get(accessor)
        if token is None:
            raise UnknownOperationError(self._name, accessor)
        return token

    def operation_for(self, token: str) -> Optional[Operation]:
        """Get the Operation declaring ``token``, or None if not required here."""
        return self._operations_by_token.get(token)

    def all_operations(self) -> List[Operation]:
        """Every required operation, root-first."""
        return [self._operations_by_token[t] for t in self._tokens]

    def ancestors(self) -> Tuple["CapabilityInterface", ...]:
        """Every interface this one extends, root-first, excluding itself."""
        seen: Dict[str, CapabilityInterface] = {}
        for parent in self._parents:
            for ancestor in parent.ancestors() + (parent,):
                seen.setdefault(ancestor.interface_id, ancestor)
        return tuple(seen.values())

    def extends(self, other: "CapabilityInterface") -> bool:
        """Reflexive, transitive structural extension."""
        if not isinstance(other, CapabilityInterface):
            return False
        return other == self or other in self.ancestors()

    # -------------------------------------------------------------------------
    # Structural Detection
    # -------------------------------------------------------------------------

    def is_satisfied_by(self, value: Any) -> bool:
        """
        Test whether ``value`` structurally implements this interface.

        The value must be iterable, satisfy every parent (checked through the
        parent's own predicate, in declaration order) and expose every token
        this interface introduces. Presence only; nothing on the value is
        called. Never raises.
        """
        if not is_iterable(value):
            return False
        for parent in self._parents:
            if not parent.is_satisfied_by(value):
                return False
        return all(exposes(value, token) for token in self._own_tokens)

    def missing_tokens(self, value: Any) -> Tuple[str, ...]:
        """Tokens required here (own or inherited) that ``value`` does not expose."""
        return tuple(t for t in self._tokens if not exposes(value, t))

    # -------------------------------------------------------------------------
    # Comparison Methods
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CapabilityInterface):
            return NotImplemented
        return self._interface_id == other._interface_id

    def __hash__(self) -> int:
        return hash(self._interface_id)

    # -------------------------------------------------------------------------
    # Iteration
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        """Return count of required tokens."""
        return len(self._tokens)

    def __iter__(self) -> Iterator[str]:
        """Iterate over required tokens."""
        return iter(self._tokens)

    def __contains__(self, token: object) -> bool:
        """Check if a token is required by this interface."""
        return token in self._operations_by_token

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a dictionary."""
        result = {
            "interface_id": self._interface_id,
            "name": self._name,
            "operations": [op.to_dict() for op in self._operations],
            "parents": [p.name for p in self._parents],
            "predicate": self.predicate_name,
            "tokens": list(self._tokens),
        }
        if self._description is not None:
            result["description"] = self._description
        return result

    def to_json(self, *, indent: Optional[int] = None) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), sort_keys=True, indent=indent)

    # -------------------------------------------------------------------------
    # String Representations
    # -------------------------------------------------------------------------

    def __repr__(self) -> str:
        return (
            f"CapabilityInterface(name={self._name!r}, "
            f"parents={[p.name for p in self._parents]!r}, "
            f"operations={len(self._operations)})"
        )

    def __str__(self) -> str:
        return self._name
