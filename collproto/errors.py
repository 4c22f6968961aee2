"""
errors.py

Definition-time errors for collproto.

Only code that defines tokens, operations or interfaces can trigger these.
The runtime surface (token accessors, predicates, presence lookup) is total
and never raises.

Error codes:
- P001  InvalidTokenNameError
- P002  UnregisteredTokenError
- P003  InvalidOperationError
- P004  DuplicateOperationError
- P005  InheritedOperationRedefinitionError
- P006  ConflictingParentTokensError
- P007  InvalidParentError
- P008  UnknownInterfaceError
- P009  UnknownOperationError
"""

from typing import Any


class ProtocolDefinitionError(Exception):
    """
    Raised when a token, operation or capability interface cannot be defined.
    """

    def __init__(
        self,
        message: str,
        *,
        error_code: str = "P000",
    ):
        self.message = message
        self.error_code = error_code
        super().__init__(self.format())

    def format(self) -> str:
        """Format as human-readable error message."""
        return f"[{self.error_code}] Protocol definition failed: {self.message}"


class InvalidTokenNameError(ProtocolDefinitionError):
    """Raised when a token name is not of the form '<Interface>.<operation>'."""

    def __init__(self, name: Any, reason: str):
        self.name = name
        self.reason = reason
        super().__init__(
            message=f"Invalid token name {name!r}: {reason}",
            error_code="P001",
        )


class UnregisteredTokenError(ProtocolDefinitionError):
    """Raised when a value is used as a token but was never interned."""

    def __init__(self, token: Any):
        self.token = token
        super().__init__(
            message=f"{token!r} is not a registered capability token. "
                    "Obtain tokens from an interface or symbol_for().",
            error_code="P002",
        )


class InvalidOperationError(ProtocolDefinitionError):
    """Raised when an Operation is malformed."""

    def __init__(self, accessor: Any, reason: str):
        self.accessor = accessor
        self.reason = reason
        super().__init__(
            message=f"Invalid operation {accessor!r}: {reason}",
            error_code="P003",
        )


class DuplicateOperationError(ProtocolDefinitionError):
    """Raised when an interface declares the same accessor twice."""

    def __init__(self, interface: str, accessor: str):
        self.interface = interface
        self.accessor = accessor
        super().__init__(
            message=f"{interface} declares operation '{accessor}' more than once",
            error_code="P004",
        )


class InheritedOperationRedefinitionError(ProtocolDefinitionError):
    """Raised when an interface redeclares an operation one of its parents provides."""

    def __init__(self, interface: str, accessor: str, parent: str):
        self.interface = interface
        self.accessor = accessor
        self.parent = parent
        super().__init__(
            message=f"{interface} redeclares operation '{accessor}' "
                    f"inherited from {parent}. Extension must be additive.",
            error_code="P005",
        )


class ConflictingParentTokensError(ProtocolDefinitionError):
    """Raised when two parents supply different tokens under one accessor."""

    def __init__(self, interface: str, accessor: str, first: str, second: str):
        self.interface = interface
        self.accessor = accessor
        self.first = first
        self.second = second
        super().__init__(
            message=f"{interface} inherits '{accessor}' as both "
                    f"{first!r} and {second!r}",
            error_code="P006",
        )


class InvalidParentError(ProtocolDefinitionError):
    """Raised when a parent is not a CapabilityInterface."""

    def __init__(self, interface: str, parent: Any):
        self.interface = interface
        self.parent = parent
        super().__init__(
            message=f"{interface} parent must be a CapabilityInterface, "
                    f"got {type(parent).__name__}",
            error_code="P007",
        )


class UnknownInterfaceError(ProtocolDefinitionError, KeyError):
    """Raised when looking up an interface name that is not in the lattice."""

    def __init__(self, name: Any):
        self.name = name
        super().__init__(
            message=f"No capability interface named {name!r}",
            error_code="P008",
        )

    def __str__(self) -> str:
        return self.format()


class UnknownOperationError(ProtocolDefinitionError, AttributeError):
    """Raised when an interface has no operation or predicate under a name."""

    def __init__(self, interface: str, accessor: str):
        self.interface = interface
        self.accessor = accessor
        super().__init__(
            message=f"{interface} has no operation '{accessor}'",
            error_code="P009",
        )


class ContractImmutabilityError(Exception):
    """Raised when attempting to mutate an immutable contract object."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(
            f"Cannot {operation}: contract is immutable after creation"
        )
