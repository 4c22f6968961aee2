"""
tokens.py

Capability Token Registry.

A token is the global name of one capability operation, written
"<InterfaceName>.<operationName>" (e.g. "Collection.add",
"ReadonlyIndexedCollection.getAt"). Candidates expose an operation by
carrying an attribute whose name is the token text.

Design Invariants:
- A token is an interned str: equal names give the identical object
- Identity holds across separately loaded copies of this module, because
  interning goes through the interpreter-wide table (sys.intern)
- Tokens are never mutated or unregistered
- Lookups of well-known tokens never fail after import
"""

import logging
import re
import sys
from typing import Any, Dict, Tuple

from collproto.errors import InvalidTokenNameError

logger = logging.getLogger(__name__)

TOKEN_NAME_PATTERN = re.compile(
    r"^(?P<interface>[A-Za-z_][A-Za-z0-9_]*)\.(?P<operation>[A-Za-z_][A-Za-z0-9_]*)$"
)

# name -> interned token
_registry: Dict[str, str] = {}


def symbol_for(name: str) -> str:
    """
    Return the token registered under ``name``, interning it on first use.

    Calling this twice with the same name returns the same object, for the
    lifetime of the process.

    Raises:
        InvalidTokenNameError: if ``name`` is not '<Interface>.<operation>'.
    """
    token = _registry.get(name) if isinstance(name, str) else None
    if token is not None:
        return token

    _validate_name(name)
    # sys.intern rejects str subclasses
    interned = sys.intern(str(name))
    token = _registry.setdefault(interned, interned)
    if token is interned:
        logger.debug("Interned capability token %s", token)
    return token


def is_token(value: Any) -> bool:
    """Check whether ``value`` is a registered token (same name, same object)."""
    if not isinstance(value, str):
        return False
    return _registry.get(value) is value


def registered_tokens() -> Tuple[str, ...]:
    """Sorted snapshot of every token interned so far."""
    return tuple(sorted(_registry))


def split_token(token: str) -> Tuple[str, str]:
    """Split a token into its (interface name, operation name) parts."""
    match = TOKEN_NAME_PATTERN.match(token) if isinstance(token, str) else None
    if match is None:
        raise InvalidTokenNameError(token, "expected '<Interface>.<operation>'")
    return match.group("interface"), match.group("operation")


def _validate_name(name: Any) -> None:
    if not isinstance(name, str):
        raise InvalidTokenNameError(name, f"must be a string, got {type(name).__name__}")
    if TOKEN_NAME_PATTERN.match(name) is None:
        raise InvalidTokenNameError(name, "expected '<Interface>.<operation>'")
