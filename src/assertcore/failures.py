from __future__ import annotations

import logging
from typing import NoReturn

from . import config
from .context import AssertionContext
from .descriptors import ErrorDescriptor
from .errors import AssertionFailedError

log = logging.getLogger(__name__)


def _with_description(context: AssertionContext, message: str) -> str:
    if (description := context.description_text()) is None:
        return message
    return f"[{description}] {message}"


class Failures:
    """
    Turns failed assertions into raised errors.

    This is the one place failure messages are assembled: a non-empty
    overriding message from the context is used verbatim, otherwise the
    descriptor is rendered with the context's representation. Either way the
    context description, when set, is prefixed as `[description] `.

    The reporter holds no per-call state, so the shared `Failures.instance()`
    can be used from any thread.
    """

    def __init__(
        self,
        error_type: type[AssertionFailedError] = AssertionFailedError,
    ):
        self._error_type = error_type

    @classmethod
    def instance(cls) -> Failures:
        """Return the shared reporter."""
        return _INSTANCE

    def message_for(
        self, context: AssertionContext, descriptor: ErrorDescriptor
    ) -> str:
        if (message := context.overriding_message_text()) is None:
            message = descriptor.render(context.representation_or_default())
        return _with_description(context, message)

    def failure(
        self, context: AssertionContext, descriptor: ErrorDescriptor
    ) -> AssertionFailedError:
        """Build (but do not raise) the error for a failed assertion."""
        message = self.message_for(context, descriptor)
        if config.log_failures_enabled():
            log.info(f"Assertion failed ({descriptor.kind.value}): {message}")
        return self._error_type(message, kind=descriptor.kind)

    def report(
        self, context: AssertionContext, descriptor: ErrorDescriptor
    ) -> NoReturn:
        """Raise the error for a failed assertion."""
        __tracebackhide__ = True
        raise self.failure(context, descriptor)


_INSTANCE: Failures = Failures()
