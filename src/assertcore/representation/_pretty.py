from __future__ import annotations

import logging
from typing import Any

import wadler_lindig as wl

from .. import config
from ._base import contains_cycle, truncate
from ._standard import StandardRepresentation

log = logging.getLogger(__name__)


def _null_and_quoted_strings(value: Any) -> wl.AbstractDoc | None:
    match value:
        case None:
            return wl.TextDoc("null")
        case str():
            return wl.TextDoc(f'"{value}"')
        case _:
            return None


class PrettyRepresentation:
    """
    Multi-line representation built on the `wadler_lindig` pretty printer.

    Useful for nested dataclasses and arrays, which `wadler_lindig` lays out
    to fit `width` columns and shows arrays in a short `f32[3,4](numpy)` form.
    `None` and strings render exactly like `StandardRepresentation`, at any
    depth, so the two can be swapped without changing simple messages.
    """

    def __init__(self, width: int = 80):
        self.width = width
        self._standard = StandardRepresentation()

    def to_string(self, value: Any, /) -> str:
        if value is None or isinstance(value, str) or contains_cycle(value):
            return self._standard.to_string(value)

        try:
            text = wl.pformat(
                value, width=self.width, custom=_null_and_quoted_strings
            )
        except Exception:
            log.debug(
                f"wadler_lindig could not format a value of type {type(value)!r}, "
                "falling back to the standard representation",
                exc_info=True,
            )
            return self._standard.to_string(value)
        return truncate(text, config.max_length())
