from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from . import config as config
from . import descriptors as descriptors
from . import representation as representation
from .context import AssertionContext as AssertionContext
from .descriptors import DescriptorKind as DescriptorKind
from .descriptors import ErrorDescriptor as ErrorDescriptor
from .equality import are_equal as are_equal
from .errors import AssertionFailedError as AssertionFailedError
from .failures import Failures as Failures
from .logging import init_python_logging as init_python_logging
from .logging import setup_logging as setup_logging
from .objects import Objects as Objects
from .representation import PrettyRepresentation as PrettyRepresentation
from .representation import Representation as Representation
from .representation import StandardRepresentation as StandardRepresentation
from .representation import render as render

try:
    __version__ = version(__name__)
except PackageNotFoundError:
    __version__ = "unknown"
