"""
test_errors.py

Tests for collproto's definition-time errors.

Validates:
- Every error carries its code and a readable message
- Errors share one base class
- Lookup errors remain catchable as KeyError / AttributeError
"""

import pytest

from collproto import (
    Collection,
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


class TestProtocolDefinitionErrorBase:
    """Test the base error."""

    def test_format(self):
        """Format includes the code and the message."""
        err = ProtocolDefinitionError("something is off", error_code="P100")
        assert err.format() == "[P100] Protocol definition failed: something is off"
        assert str(err) == err.format()

    def test_default_code(self):
        """The base code is P000."""
        assert ProtocolDefinitionError("x").error_code == "P000"


class TestErrorCodes:
    """Each error has a fixed code and keeps its context."""

    @pytest.mark.parametrize("err,code", [
        (InvalidTokenNameError("bad", "reason"), "P001"),
        (UnregisteredTokenError("Foo.bar"), "P002"),
        (InvalidOperationError("push", "reason"), "P003"),
        (DuplicateOperationError("Queue", "enqueue"), "P004"),
        (InheritedOperationRedefinitionError("Set", "delete", "Collection"), "P005"),
        (ConflictingParentTokensError("Hybrid", "size", "A.size", "B.size"), "P006"),
        (InvalidParentError("Broken", "text"), "P007"),
        (UnknownInterfaceError("Stack"), "P008"),
        (UnknownOperationError("Collection", "push"), "P009"),
    ])
    def test_codes(self, err, code):
        """Error code appears on the object and in the message."""
        assert err.error_code == code
        assert f"[{code}]" in str(err)
        assert isinstance(err, ProtocolDefinitionError)

    def test_token_name_context(self):
        """InvalidTokenNameError keeps the name and reason."""
        err = InvalidTokenNameError("Collection", "missing operation")
        assert err.name == "Collection"
        assert err.reason == "missing operation"
        assert "'Collection'" in err.message

    def test_redefinition_context(self):
        """InheritedOperationRedefinitionError names the parent."""
        err = InheritedOperationRedefinitionError("Set", "delete", "Collection")
        assert "inherited from Collection" in err.message
        assert "additive" in err.message

    def test_conflict_context(self):
        """ConflictingParentTokensError names both tokens."""
        err = ConflictingParentTokensError("Hybrid", "size", "A.size", "B.size")
        assert err.first == "A.size"
        assert err.second == "B.size"

    def test_parent_context(self):
        """InvalidParentError reports the offending type."""
        err = InvalidParentError("Broken", 42)
        assert "int" in err.message


class TestLookupErrorCompatibility:
    """Lookup errors integrate with Python's lookup protocols."""

    def test_unknown_interface_is_key_error(self):
        """UnknownInterfaceError is a KeyError with a readable str."""
        err = UnknownInterfaceError("Stack")
        assert isinstance(err, KeyError)
        assert str(err).startswith("[P008]")

    def test_unknown_operation_is_attribute_error(self):
        """UnknownOperationError works with getattr defaults."""
        assert getattr(Collection, "push", None) is None
        assert isinstance(UnknownOperationError("Collection", "push"), AttributeError)


class TestImmutabilityError:
    """ContractImmutabilityError is separate from definition errors."""

    def test_message(self):
        """Message names the rejected operation."""
        err = ContractImmutabilityError("set attribute 'name'")
        assert str(err) == "Cannot set attribute 'name': contract is immutable after creation"
        assert not isinstance(err, ProtocolDefinitionError)
