from __future__ import annotations

from typing import Any, Final

from typing_extensions import Protocol, runtime_checkable

SELF_REFERENCE: Final = "(this Collection)"
"""Rendered in place of a container that contains itself."""

ELLIPSIS: Final = "..."

BUILTIN_CONTAINERS: Final = (list, tuple, set, frozenset, dict)


@runtime_checkable
class Representation(Protocol):
    """Strategy used to turn values into text for failure messages."""

    def to_string(self, value: Any, /) -> str: ...


def truncate(text: str, max_length: int) -> str:
    """Cut `text` down to `max_length` characters. 0 or less means no limit."""
    if max_length <= 0 or len(text) <= max_length:
        return text

    if max_length <= len(ELLIPSIS):
        return ELLIPSIS[:max_length]
    return text[: max_length - len(ELLIPSIS)] + ELLIPSIS


def children(value: Any) -> list[Any]:
    """Direct members of a builtin container, or an empty list."""
    if isinstance(value, dict):
        return [*value.keys(), *value.values()]
    if isinstance(value, BUILTIN_CONTAINERS):
        return list(value)
    return []


def contains_cycle(value: Any) -> bool:
    """Return True if a builtin container reaches itself through its members."""
    on_path: set[int] = set()
    done: set[int] = set()
    # Iterative DFS so deep (but acyclic) nesting cannot hit the recursion limit
    stack: list[tuple[Any, bool]] = [(value, False)]
    while stack:
        current, leaving = stack.pop()
        key = id(current)
        if leaving:
            on_path.discard(key)
            done.add(key)
            continue

        if not isinstance(current, BUILTIN_CONTAINERS) or key in done:
            continue
        if key in on_path:
            return True

        on_path.add(key)
        stack.append((current, True))
        stack.extend((child, False) for child in children(current))
    return False
