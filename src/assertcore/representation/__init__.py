from __future__ import annotations

from typing import Any, Final

from .. import config
from ._arrays import array_summary as array_summary
from ._base import SELF_REFERENCE as SELF_REFERENCE
from ._base import Representation as Representation
from ._base import contains_cycle as contains_cycle
from ._pretty import PrettyRepresentation as PrettyRepresentation
from ._standard import StandardRepresentation as StandardRepresentation

STANDARD_REPRESENTATION: Final = StandardRepresentation()
PRETTY_REPRESENTATION: Final = PrettyRepresentation()


def default_representation() -> Representation:
    """Return the shared representation selected by the `render.pretty` option."""
    if config.pretty_enabled():
        return PRETTY_REPRESENTATION
    return STANDARD_REPRESENTATION


def render(value: Any) -> str:
    """Render `value` for a failure message with the default representation."""
    return default_representation().to_string(value)
