from __future__ import annotations

import builtins
import types
from typing import Any

from beartype.door import TypeHint, is_bearable
from beartype.roar import BeartypeException


def _is_class(t: Any) -> bool:
    # `list[int]` passes `isinstance(..., type)` on some Python versions.
    return isinstance(t, type) and not isinstance(t, types.GenericAlias)


def is_type_hint(t: Any) -> bool:
    """Return True if `t` is a class or a type hint `beartype` understands."""
    if _is_class(t):
        return True

    try:
        TypeHint(t)
    except BeartypeException:
        return False
    return True


def validate_type(t: Any) -> None:
    """
    Make sure `t` can be used as the type argument of an instance check.

    Raises:
        TypeError: If `t` is neither a class nor a type hint.
    """
    if not is_type_hint(t):
        raise TypeError(
            f"The given type should be a class or a type hint, got {t!r} "
            f"of type {type_name(type(t))}"
        )


def is_instance(value: object, t: Any) -> bool:
    """
    Check `value` against the class or type hint `t`.

    Plain classes use `isinstance`. Anything else is checked with
    `beartype.door.is_bearable`, which samples a single item of containers
    (e.g. `list[int]`) instead of checking every element.
    """
    if _is_class(t):
        return isinstance(value, t)
    return is_bearable(value, t)


def type_name(t: Any) -> str:
    """Name used to display a class or type hint in failure messages."""
    if not _is_class(t):
        return repr(t)

    if t.__module__ == builtins.__name__:
        return t.__qualname__
    return f"{t.__module__}.{t.__qualname__}"
