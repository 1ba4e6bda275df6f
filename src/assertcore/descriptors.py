"""Error descriptors: what went wrong in a failed assertion, rendered on demand."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from .representation import Representation, default_representation


class DescriptorKind(enum.Enum):
    NOT_EQUAL = "not_equal"
    EQUAL = "equal"
    NULL = "null"
    NOT_INSTANCE_OF = "not_instance_of"
    NOT_INSTANCE_OF_ANY = "not_instance_of_any"
    NOT_SAME = "not_same"
    SAME = "same"


@dataclass(frozen=True)
class ErrorDescriptor:
    """
    Failure payload built at the moment an assertion fails.

    Attributes:
        kind: Which predicate failed.
        template: Message with one `%s` placeholder per argument.
        arguments: Raw values substituted into the template. They are only
            turned into text by `render`.
    """

    kind: DescriptorKind
    template: str
    arguments: tuple[Any, ...] = ()

    def render(self, representation: Representation | None = None) -> str:
        if representation is None:
            representation = default_representation()

        return self.template % tuple(
            representation.to_string(argument) for argument in self.arguments
        )


def is_not_equal(actual: Any, expected: Any) -> ErrorDescriptor:
    return ErrorDescriptor(
        DescriptorKind.NOT_EQUAL,
        "expected:<%s> but was:<%s>",
        (expected, actual),
    )


def is_equal(actual: Any, other: Any) -> ErrorDescriptor:
    return ErrorDescriptor(
        DescriptorKind.EQUAL,
        "expected:<%s> not to be equal to:<%s>",
        (actual, other),
    )


def is_null() -> ErrorDescriptor:
    return ErrorDescriptor(DescriptorKind.NULL, "expected not null")


def is_not_instance_of(actual: Any, type_: Any) -> ErrorDescriptor:
    return ErrorDescriptor(
        DescriptorKind.NOT_INSTANCE_OF,
        "expected instance of:<%s> but was instance of:<%s>",
        (type_, type(actual)),
    )


def is_not_instance_of_any(actual: Any, types: Iterable[Any]) -> ErrorDescriptor:
    return ErrorDescriptor(
        DescriptorKind.NOT_INSTANCE_OF_ANY,
        "expected instance of any:<%s> but was instance of:<%s>",
        (list(types), type(actual)),
    )


def is_not_same(actual: Any, expected: Any) -> ErrorDescriptor:
    return ErrorDescriptor(
        DescriptorKind.NOT_SAME,
        "expected same instance but found:<%s> and:<%s>",
        (actual, expected),
    )


def is_same(actual: Any) -> ErrorDescriptor:
    return ErrorDescriptor(
        DescriptorKind.SAME,
        "expected not same instance but found:<%s>",
        (actual,),
    )
