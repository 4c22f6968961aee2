"""
presence.py

Presence lookup for capability tokens.

A candidate exposes an operation when an attribute named by the token text
(e.g. "Collection.add") is reachable on the instance or its class hierarchy.
Lookup goes through inspect.getattr_static: properties, descriptors and
__getattr__ hooks are never invoked, so detection has no side effects and
costs nothing proportional to the size of the collection.

Implementers bind their methods and properties to tokens with ``expose``:

    class Bag:
        @expose(ReadonlyCollection.size)
        @property
        def size(self) -> int:
            return len(self._items)

        @expose(Collection.add)
        def add(self, value) -> None:
            self._items.append(value)

An attribute set directly under the token name works as well:
``setattr(obj, Collection.clear, obj.reset)``.

If a candidate is mutated while a lookup runs, the result reflects some
snapshot of its shape during the call.
"""

import inspect
from collections.abc import Iterable
from typing import Any, Callable, Optional, Tuple

from collproto.absent import ABSENT
from collproto.errors import ProtocolDefinitionError, UnregisteredTokenError
from collproto.tokens import is_token

_MISSING = object()


# =============================================================================
# Lookup
# =============================================================================

def is_iterable(value: Any) -> bool:
    """
    Check whether ``value`` supports the iteration protocol. Never raises.

    The value's type must define a non-None ``__iter__``. Objects iterable
    only through the legacy ``__getitem__`` sequence protocol are rejected.
    """
    try:
        return isinstance(value, Iterable)
    except Exception:
        return False


def exposes(value: Any, token: str) -> bool:
    """
    Check whether ``value`` exposes an entry for ``token``.

    Presence only: the operation is not called and no property is evaluated.
    Never raises; anything that cannot be inspected does not expose the token.
    """
    if not isinstance(token, str):
        return False
    try:
        return inspect.getattr_static(value, token, _MISSING) is not _MISSING
    except Exception:
        return False


def get_operation(value: Any, token: str) -> Any:
    """
    Return the operation ``value`` exposes for ``token``, or ABSENT.

    Methods come back bound; properties are evaluated, so ``size`` yields
    the current count.
    """
    if not exposes(value, token):
        return ABSENT
    return getattr(value, token)


# =============================================================================
# Binding
# =============================================================================

class _TokenAlias:
    """
    Descriptor installed under a token name by ``expose``.

    Resolves the member by its own name at access time, so a subclass that
    overrides the member without re-decorating it is reached through the
    token as well.
    """

    __slots__ = ('name',)

    def __init__(self, name: str):
        self.name = name

    def __get__(self, instance: Any, owner: Optional[type] = None) -> Any:
        if instance is None:
            return getattr(owner, self.name)
        return getattr(instance, self.name)

    def __repr__(self) -> str:
        return f"_TokenAlias({self.name!r})"


class _ExposedMember:
    """
    Class-body placeholder produced by ``expose``.

    When the owning class is created it replaces itself with the wrapped
    member under its own name and installs a forwarding alias to that name
    under every token name.
    """

    __slots__ = ('member', 'tokens')

    def __init__(self, member: Any, tokens: Tuple[str, ...]):
        self.member = member
        self.tokens = tokens

    def __set_name__(self, owner: type, name: str) -> None:
        setattr(owner, name, self.member)
        for token in self.tokens:
            setattr(owner, token, _TokenAlias(name))

    def __repr__(self) -> str:
        return f"_ExposedMember({self.member!r}, tokens={self.tokens!r})"


def expose(*tokens: str) -> Callable[[Any], _ExposedMember]:
    """
    Decorator binding a method or property to one or more capability tokens.

    Stacking ``expose`` merges the token sets. Only registered tokens are
    accepted.

    Raises:
        ProtocolDefinitionError: if no token is given.
        UnregisteredTokenError: if a token was never interned.
    """
    if not tokens:
        raise ProtocolDefinitionError(
            "expose() needs at least one token",
            error_code="P002",
        )
    for token in tokens:
        if not is_token(token):
            raise UnregisteredTokenError(token)

    def decorator(member: Any) -> _ExposedMember:
        if isinstance(member, _ExposedMember):
            merged = member.tokens + tuple(t for t in tokens if t not in member.tokens)
            return _ExposedMember(member.member, merged)
        return _ExposedMember(member, tuple(dict.fromkeys(tokens)))

    return decorator
