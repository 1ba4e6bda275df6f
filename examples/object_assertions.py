#!/usr/bin/env python3
"""
Example showing the failure messages produced by the object assertions.

Each example runs a failing assertion and prints the message it raised:
- the generated message for each kind of failure
- a description label prefixed to the message
- a custom message replacing the generated one
- long values truncated through the render configuration
"""

from __future__ import annotations

from collections.abc import Callable

import numpy as np

from assertcore import AssertionContext, AssertionFailedError, Objects, config

objects = Objects.instance()


def show(call: Callable[[], None]) -> None:
    try:
        call()
    except AssertionFailedError as e:
        print(f"  {e}")
    else:
        print("  (passed)")


def generated_messages_example():
    """The generated message for each kind of failure."""

    print("=== Generated Messages ===")
    ctx = AssertionContext()
    values = [1, 2]
    values.append(values)  # type: ignore[arg-type]

    show(lambda: objects.assert_equal(ctx, "foo", "bar"))
    show(lambda: objects.assert_not_equal(ctx, 1, 1))
    show(lambda: objects.assert_null(ctx, values))
    show(lambda: objects.assert_not_null(ctx, None))
    show(lambda: objects.assert_same(ctx, [1], [1]))
    show(lambda: objects.assert_not_same(ctx, values, values))
    show(lambda: objects.assert_is_instance_of(ctx, 42, str))
    show(lambda: objects.assert_is_instance_of_any(ctx, "x", [int, list[int]]))
    show(lambda: objects.assert_equal(ctx, np.arange(1000), np.arange(1, 1001)))
    print()


def description_example():
    """Descriptions label the message; overriding messages replace it."""

    print("=== Descriptions and Overrides ===")
    ctx = AssertionContext().described_as("name check")
    show(lambda: objects.assert_equal(ctx, "Frodo", "Sam"))

    ctx.overriding_error_message("expected a hobbit called %s", "Sam")
    show(lambda: objects.assert_equal(ctx, "Frodo", "Sam"))
    print()


def truncation_example():
    """Long values are cut down when `render.max_length` is set."""

    print("=== Truncation ===")
    with config.render_override({"max_length": 24}):
        show(lambda: objects.assert_equal(AssertionContext(), "x" * 100, "y" * 100))
    print()


if __name__ == "__main__":
    generated_messages_example()
    description_example()
    truncation_example()
