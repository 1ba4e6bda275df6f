from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np
from typing_extensions import TypedDict

PRECISION = 3
"""Number of digits after the decimal point."""

THRESHOLD_MAX = 3
"""Absolute values larger than 10^3 use scientific notation."""

THRESHOLD_MIN = -4
"""Absolute values smaller than 10^-4 use scientific notation."""


class ArrayStats(TypedDict, total=False):
    """Statistics used to summarize a large array in one line."""

    shape: Sequence[int]
    size: int
    type_name: str
    dtype_str: str

    # Content flags
    all_zeros: bool
    has_nan: bool
    has_pos_inf: bool
    has_neg_inf: bool

    # Numeric statistics
    min: float | None
    max: float | None
    mean: float | None
    std: float | None


_DT_NAMES = {
    "float16": "f16",
    "float32": "f32",
    "float64": "",  # Default dtype in numpy
    "uint8": "u8",
    "uint16": "u16",
    "uint32": "u32",
    "uint64": "u64",
    "int8": "i8",
    "int16": "i16",
    "int32": "i32",
    "int64": "i64",
    "complex64": "c64",
    "complex128": "c128",
}


def _type_name(array: np.ndarray) -> str:
    return (
        "array"
        if type(array) is np.ndarray
        else type(array).__name__.rsplit(".", 1)[-1]
    )


def _dtype_str(array: np.ndarray) -> str:
    dtype_base = str(array.dtype).rsplit(".", 1)[-1]
    return _DT_NAMES.get(dtype_base, dtype_base)


def _sci_mode(f: float) -> bool:
    return (abs(f) < 10**THRESHOLD_MIN) or (abs(f) > 10**THRESHOLD_MAX)


def pretty_str(x: Any) -> str:
    """Format a scalar statistic for display."""
    if isinstance(x, int):
        return f"{x}"
    if isinstance(x, float):
        if x == 0.0:
            return "0."
        fmt = f"{{:.{PRECISION}{'e' if _sci_mode(x) else 'f'}}}"
        return fmt.format(x)
    return str(x)


def _sparse_join(items: list[str | None], sep: str = " ") -> str:
    """Join non-empty strings with a separator."""
    return sep.join([item for item in items if item])


def array_stats(array: np.ndarray) -> ArrayStats:
    """Compute the statistics shown in an array summary.

    Only real-valued numeric arrays get value statistics; complex, boolean and
    object arrays are summarized by shape and dtype alone.
    """
    stats: ArrayStats = {
        "shape": array.shape,
        "size": int(array.size),
        "type_name": _type_name(array),
        "dtype_str": _dtype_str(array),
    }

    if array.size == 0 or not np.issubdtype(array.dtype, np.number):
        return stats
    if np.iscomplexobj(array):
        return stats

    good_data = array.ravel()
    if np.issubdtype(array.dtype, np.inexact):
        stats["has_nan"] = bool(np.isnan(array).any())
        stats["has_pos_inf"] = bool(np.isposinf(array).any())
        stats["has_neg_inf"] = bool(np.isneginf(array).any())

        # Only compute min/max/mean/std for good data
        good_data = array[np.isfinite(array)]

    if len(good_data) > 0:
        stats["min"] = good_data.min().item()
        stats["max"] = good_data.max().item()
        stats["all_zeros"] = stats["min"] == 0 and stats["max"] == 0

        if len(good_data) > 1:
            stats["mean"] = float(good_data.mean())
            stats["std"] = float(good_data.std())

    return stats


def array_summary(array: np.ndarray) -> str:
    """One-line summary of an array, e.g. `array[200] i64 n=200 x∈[0, 199] μ=99.500 σ=57.734`."""
    stats = array_stats(array)

    shape = ", ".join(str(dim) for dim in stats["shape"])
    type_str = f"{stats['type_name']}[{shape}]"
    numel = f"n={stats['size']}"

    if stats.get("all_zeros"):
        common = "all_zeros"
    else:
        minmax = meanstd = None
        if (min_val := stats.get("min")) is not None and (
            max_val := stats.get("max")
        ) is not None:
            minmax = f"x∈[{pretty_str(min_val)}, {pretty_str(max_val)}]"
        if (mean := stats.get("mean")) is not None and (
            std := stats.get("std")
        ) is not None:
            meanstd = f"μ={pretty_str(mean)} σ={pretty_str(std)}"
        common = _sparse_join([minmax, meanstd])

    warnings: list[str | None] = []
    if stats.get("has_nan"):
        warnings.append("NaN!")
    if stats.get("has_pos_inf"):
        warnings.append("+Inf!")
    if stats.get("has_neg_inf"):
        warnings.append("-Inf!")

    return _sparse_join(
        [type_str, stats["dtype_str"], numel, common, _sparse_join(warnings)]
    )
