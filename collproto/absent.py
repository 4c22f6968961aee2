"""
absent.py

The ABSENT marker.

Lookup-style operations (ReadonlyIndexedCollection.getAt,
ReadonlyKeyedCollection.get) return ABSENT when nothing exists at the given
index or key. It is an ordinary return value, never an exception, and it is
distinct from None so that None can be stored as an element.
"""


class _AbsentType:
    """Type of the ABSENT singleton."""

    __slots__ = ()

    _instance = None

    def __new__(cls) -> "_AbsentType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"

    def __reduce__(self) -> str:
        return "ABSENT"

    def __copy__(self) -> "_AbsentType":
        return self

    def __deepcopy__(self, memo) -> "_AbsentType":
        return self


ABSENT = _AbsentType()


def is_absent(value: object) -> bool:
    """Check whether a lookup result is the ABSENT marker."""
    return value is ABSENT
