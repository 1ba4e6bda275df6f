from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .descriptors import DescriptorKind


class AssertionFailedError(AssertionError):
    """Raised when an assertion does not hold.

    Subclasses `AssertionError` so test runners report it as a test failure.
    """

    def __init__(self, message: str, *, kind: DescriptorKind | None = None):
        super().__init__(message)
        self.message = message
        self.kind = kind
