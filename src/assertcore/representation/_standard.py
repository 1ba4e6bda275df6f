from __future__ import annotations

import logging
from typing import Any

import numpy as np

from .. import config
from ..typecheck import type_name
from ._arrays import array_summary
from ._base import BUILTIN_CONTAINERS, SELF_REFERENCE, truncate

log = logging.getLogger(__name__)


class StandardRepresentation:
    """
    Default textual form of values in failure messages.

    `None` renders as `null`, strings are double-quoted, classes and type hints
    render by name, builtin containers render their members recursively and
    large numpy arrays are summarized. Subclasses of the builtin containers
    (namedtuples, `Counter`, ...) keep their own `repr`. A container reached
    again while it is still being rendered is replaced with `(this Collection)`.
    """

    def to_string(self, value: Any, /) -> str:
        try:
            text = self._format(value, set())
        except RecursionError:
            log.debug("Value nested too deeply to render, falling back to repr()")
            text = _safe_repr(value)
        return truncate(text, config.max_length())

    def _format(self, value: Any, on_path: set[int]) -> str:
        match value:
            case None:
                return "null"
            case str():
                return f'"{value}"'
            case bool() | int() | float() | complex() | bytes():
                return _safe_repr(value)
            case _ if type(value) in BUILTIN_CONTAINERS or isinstance(value, np.ndarray):
                if id(value) in on_path:
                    return SELF_REFERENCE

                on_path.add(id(value))
                try:
                    return self._format_container(value, on_path)
                finally:
                    on_path.discard(id(value))
            case type():
                return type_name(value)
            case _:
                return _safe_repr(value)

    def _format_container(self, value: Any, on_path: set[int]) -> str:
        match value:
            case list():
                return f"[{self._join(value, on_path)}]"
            case tuple() if len(value) == 1:
                return f"({self._format(value[0], on_path)},)"
            case tuple():
                return f"({self._join(value, on_path)})"
            case set() | frozenset():
                return f"{{{self._join(value, on_path)}}}"
            case dict():
                items = ", ".join(
                    f"{self._format(k, on_path)}: {self._format(v, on_path)}"
                    for k, v in value.items()
                )
                return f"{{{items}}}"
            case np.ndarray():
                return self._format_array(value, on_path)
            case _:
                return _safe_repr(value)

    def _format_array(self, array: np.ndarray, on_path: set[int]) -> str:
        if array.size > config.array_summary_threshold():
            return array_summary(array)

        # 0-d arrays turn into a scalar
        if not isinstance(elements := array.tolist(), list):
            return self._format(elements, on_path)
        return f"[{self._join(elements, on_path)}]"

    def _join(self, elements: Any, on_path: set[int]) -> str:
        return ", ".join(self._format(element, on_path) for element in elements)


def _safe_repr(value: Any) -> str:
    try:
        return repr(value)
    except Exception:
        log.debug(f"repr() failed for a value of type {type(value)!r}", exc_info=True)
        return f"<{type_name(type(value))} object at {hex(id(value))}>"
