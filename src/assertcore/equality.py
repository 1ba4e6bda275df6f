from __future__ import annotations

from typing import Any

import numpy as np


def are_equal(expected: Any, actual: Any) -> bool:
    """
    Null-safe equality used by the equal/not-equal assertions.

    Identical objects are always equal and `None` only equals `None`.
    Numpy arrays are compared element-wise with `numpy.array_equal`, so two
    arrays are equal when they have the same shape and elements. Everything
    else uses the value's own `==`.

    Lists, tuples and dicts that hold arrays make `==` ambiguous; those are
    compared member by member with the same rules.
    """
    if expected is actual:
        return True
    if expected is None or actual is None:
        return False

    expected_is_array = isinstance(expected, np.ndarray)
    actual_is_array = isinstance(actual, np.ndarray)
    if expected_is_array or actual_is_array:
        return expected_is_array and actual_is_array and _arrays_equal(expected, actual)

    try:
        return bool(expected == actual)
    except ValueError:
        # "The truth value of an array with more than one element is ambiguous"
        if (result := _members_equal(expected, actual)) is None:
            raise
        return result


def _arrays_equal(expected: np.ndarray, actual: np.ndarray) -> bool:
    try:
        return bool(np.array_equal(expected, actual))
    except (TypeError, ValueError):
        # Object arrays whose elements do not compare cleanly
        return expected.shape == actual.shape and all(
            are_equal(e, a) for e, a in zip(expected.ravel(), actual.ravel())
        )


def _members_equal(expected: Any, actual: Any) -> bool | None:
    """Compare builtin containers member by member, or None if they are not comparable this way."""
    if type(expected) is not type(actual):
        return None

    if isinstance(expected, (list, tuple)):
        return len(expected) == len(actual) and all(
            are_equal(e, a) for e, a in zip(expected, actual)
        )
    if isinstance(expected, dict):
        return expected.keys() == actual.keys() and all(
            are_equal(value, actual[key]) for key, value in expected.items()
        )
    return None
