from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from typing_extensions import Self

from .representation import Representation, default_representation


@dataclass
class AssertionContext:
    """
    Caller-supplied metadata for one or more assertion calls.

    Attributes:
        description: Label prefixed to failure messages as `[description] `.
            Either text or a zero-argument callable, which is only called
            when a failure message is built.
        overriding_message: Replaces the generated failure message entirely.
        representation: How values are rendered in generated messages. `None`
            uses the configured default.

    Empty strings count as unset.

    Examples:
        context = AssertionContext().described_as("user name")
        Objects.instance().assert_equal(context, user.name, "Frodo")
    """

    description: str | Callable[[], str] | None = None
    overriding_message: str | None = None
    representation: Representation | None = None

    def described_as(self, description: str | Callable[[], str] | None) -> Self:
        self.description = description
        return self

    def overriding_error_message(self, message: str | None, *args: Any) -> Self:
        """
        Set the overriding message, `%`-formatting it with `args` rendered like failure values.

        Raises:
            ValueError: If `message` does not take exactly `len(args)` `%s` arguments.
        """
        if message and args:
            representation = self.representation_or_default()
            rendered = tuple(representation.to_string(arg) for arg in args)
            try:
                message = message % rendered
            except (TypeError, ValueError) as e:
                raise ValueError(
                    f"The overriding message {message!r} cannot be formatted "
                    f"with {len(args)} argument(s): {e}"
                ) from e
        self.overriding_message = message
        return self

    def with_representation(self, representation: Representation | None) -> Self:
        self.representation = representation
        return self

    def description_text(self) -> str | None:
        description = self.description
        if callable(description):
            description = description()
        return description or None

    def overriding_message_text(self) -> str | None:
        return self.overriding_message or None

    def representation_or_default(self) -> Representation:
        if self.representation is None:
            return default_representation()
        return self.representation
