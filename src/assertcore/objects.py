from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from .context import AssertionContext
from .descriptors import (
    is_equal,
    is_not_equal,
    is_not_instance_of,
    is_not_instance_of_any,
    is_not_same,
    is_null,
    is_same,
)
from .equality import are_equal
from .failures import Failures
from .representation import render
from .typecheck import is_instance, validate_type


class Objects:
    """
    Reusable assertions for arbitrary objects.

    Every assertion returns `None` when it holds and raises the reporter's
    error (an `AssertionFailedError` by default) when it does not. Invalid
    arguments such as a missing type raise `ValueError` or `TypeError`
    straight away, whatever the context says.

    Examples:
        objects = Objects.instance()
        objects.assert_equal(AssertionContext(), "foo", "foo")
    """

    def __init__(self, failures: Failures | None = None):
        self._failures = failures if failures is not None else Failures.instance()

    @classmethod
    def instance(cls) -> Objects:
        """Return the shared instance, which reports through `Failures.instance()`."""
        return _INSTANCE

    def assert_is_instance_of(
        self, context: AssertionContext, actual: Any, type_: Any
    ) -> None:
        """
        Verify that `actual` is an instance of `type_`.

        Args:
            context: Description and message override for the failure.
            actual: Value under test. `None` always fails.
            type_: A class or a type hint such as `list[int]` or `int | str`.

        Raises:
            ValueError: If `type_` is `None`.
            TypeError: If `type_` is neither a class nor a type hint.
        """
        __tracebackhide__ = True
        if type_ is None:
            raise ValueError("The given type should not be None")
        validate_type(type_)

        self.assert_not_null(context, actual)
        if is_instance(actual, type_):
            return
        self._failures.report(context, is_not_instance_of(actual, type_))

    def assert_is_instance_of_any(
        self, context: AssertionContext, actual: Any, types: Sequence[Any]
    ) -> None:
        """
        Verify that `actual` is an instance of at least one of `types`.

        Raises:
            ValueError: If `types` is `None`, empty, or contains `None`.
            TypeError: If `types` is a single class or holds something that
                is neither a class nor a type hint.
        """
        __tracebackhide__ = True
        types = self._validate_types(types)

        self.assert_not_null(context, actual)
        if any(is_instance(actual, type_) for type_ in types):
            return
        self._failures.report(context, is_not_instance_of_any(actual, types))

    def _validate_types(self, types: Sequence[Any] | None) -> list[Any]:
        if types is None:
            raise ValueError("The given types should not be None")
        if isinstance(types, type):
            raise TypeError(
                "The given types should be a sequence of types, not a single type. "
                "Use assert_is_instance_of for a single type."
            )

        types = list(types)
        if not types:
            raise ValueError("The given types should not be empty")
        if any(type_ is None for type_ in types):
            raise ValueError(
                f"The given types:<{render(types)}> should not have None elements"
            )
        for type_ in types:
            validate_type(type_)
        return types

    def assert_equal(
        self, context: AssertionContext, actual: Any, expected: Any
    ) -> None:
        """Verify that `actual` equals `expected` (see `are_equal`)."""
        __tracebackhide__ = True
        if are_equal(expected, actual):
            return
        self._failures.report(context, is_not_equal(actual, expected))

    def assert_not_equal(
        self, context: AssertionContext, actual: Any, other: Any
    ) -> None:
        """Verify that `actual` does not equal `other`."""
        __tracebackhide__ = True
        if not are_equal(other, actual):
            return
        self._failures.report(context, is_equal(actual, other))

    def assert_null(self, context: AssertionContext, actual: Any) -> None:
        """Verify that `actual` is `None`."""
        __tracebackhide__ = True
        if actual is None:
            return
        self._failures.report(context, is_not_equal(actual, None))

    def assert_not_null(self, context: AssertionContext, actual: Any) -> None:
        """Verify that `actual` is not `None`."""
        __tracebackhide__ = True
        if actual is not None:
            return
        self._failures.report(context, is_null())

    def assert_same(
        self, context: AssertionContext, actual: Any, expected: Any
    ) -> None:
        """Verify that `actual` and `expected` are the same object."""
        __tracebackhide__ = True
        if actual is expected:
            return
        self._failures.report(context, is_not_same(actual, expected))

    def assert_not_same(
        self, context: AssertionContext, actual: Any, other: Any
    ) -> None:
        """Verify that `actual` and `other` are not the same object."""
        __tracebackhide__ = True
        if actual is not other:
            return
        self._failures.report(context, is_same(actual))


_INSTANCE: Objects = Objects()
