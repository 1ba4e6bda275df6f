from __future__ import annotations

import json
import logging
import os
from collections.abc import Callable, Mapping, MutableMapping
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Final, TypeAlias, TypedDict, cast

from typing_extensions import Self, assert_never
from typing_extensions import override as override_

log = logging.getLogger(__name__)


class BaseConfig(TypedDict, total=False):
    """Base configuration dictionary that all feature configs should inherit from."""

    pass


class RenderConfig(BaseConfig, total=False):
    """Configuration for rendering values inside failure messages."""

    max_length: int
    """Rendered values longer than this are truncated. 0 disables truncation."""

    array_summary_threshold: int
    """Numpy arrays with more elements than this are summarized instead of listed."""

    pretty: bool
    """Use the pretty representation by default."""


class ReportConfig(BaseConfig, total=False):
    """Configuration for the failure reporter."""

    log_failures: bool


class Config(BaseConfig, total=False):
    """Root configuration containing all feature configurations."""

    render: RenderConfig
    report: ReportConfig


_SENTINEL: Final = object()
ROOT_PATH: Final = ""

DEFAULT_MAX_LENGTH: Final = 0
DEFAULT_ARRAY_SUMMARY_THRESHOLD: Final = 100

ValueType: TypeAlias = Config | RenderConfig | ReportConfig | None


def _parse_env_bool(value: str) -> bool:
    """Parse environment variable as boolean."""
    return value.strip().lower() in ("1", "true", "yes", "on")


def _parse_env_int(value: str) -> int:
    return int(value.strip())


# "feature.option" -> parser for the raw string value
_OPTION_PARSERS: Final[Mapping[str, Callable[[str], Any]]] = {
    "render.max_length": _parse_env_int,
    "render.array_summary_threshold": _parse_env_int,
    "render.pretty": _parse_env_bool,
    "report.log_failures": _parse_env_bool,
}

# "feature.option" -> exact type a JSON value must have
_OPTION_TYPES: Final[Mapping[str, type]] = {
    "render.max_length": int,
    "render.array_summary_threshold": int,
    "render.pretty": bool,
    "report.log_failures": bool,
}

_ENV_OPTIONS: Final[Mapping[str, str]] = {
    "ASSERTCORE_MAX_LENGTH": "render.max_length",
    "ASSERTCORE_ARRAY_SUMMARY_THRESHOLD": "render.array_summary_threshold",
    "ASSERTCORE_PRETTY": "render.pretty",
    "ASSERTCORE_LOG_FAILURES": "report.log_failures",
}


def _set_option(config: Config, key: str, raw: str, source: str) -> None:
    if (parser := _OPTION_PARSERS.get(key)) is None:
        log.warning(f"Ignoring unknown option '{key}' from {source}.")
        return

    try:
        value = parser(raw)
    except ValueError:
        log.warning(f"Ignoring invalid value {raw!r} for option '{key}' from {source}.")
        return

    _store(config, key, value)


def _set_json_options(
    config: Config, parsed: Mapping[str, Any], source: str
) -> None:
    for feature, options in parsed.items():
        if not isinstance(options, dict):
            log.warning(
                f"Ignoring invalid value {options!r} for feature '{feature}' from {source}."
            )
            continue

        for option, value in options.items():
            key = f"{feature}.{option}"
            if (expected := _OPTION_TYPES.get(key)) is None:
                log.warning(f"Ignoring unknown option '{key}' from {source}.")
                continue
            # bool is an int subclass, so compare exact types
            if type(value) is not expected:
                log.warning(
                    f"Ignoring invalid value {value!r} for option '{key}' from {source}."
                )
                continue
            _store(config, key, value)


def _store(config: Config, key: str, value: Any) -> None:
    feature, _, option = key.partition(".")
    cast(dict[str, Any], config).setdefault(feature, {})[option] = value


def _parse_env_config(env_key: str) -> Config:
    """
    Parse environment configuration from various formats.

    Supports:
    1. JSON: ASSERTCORE_CONFIG='{"render": {"max_length": 80}, "report": {"log_failures": true}}'
    2. Comma-separated: ASSERTCORE_CONFIG='render.max_length=80,report.log_failures=1'
    """
    env_value = os.environ.get(env_key, "").strip()
    config: Config = {}

    if not env_value:
        return config

    # Try JSON first
    if env_value.startswith("{"):
        try:
            parsed = json.loads(env_value)
        except json.JSONDecodeError:
            log.warning(f"Could not parse {env_key} as JSON, ignoring it.")
            return config

        if isinstance(parsed, dict):
            _set_json_options(config, parsed, env_key)
            return config

    # Try comma-separated format
    for pair in env_value.split(","):
        if "=" not in pair:
            continue
        key, value = pair.split("=", 1)
        _set_option(config, key.strip(), value, env_key)

    return config


def _default_config() -> Config:
    """Get default configuration from environment variables."""
    config: Config = {}

    # Start with main config
    config.update(_parse_env_config("ASSERTCORE_CONFIG"))

    # Individual environment variable overrides
    for env_key, option in _ENV_OPTIONS.items():
        if (raw := os.environ.get(env_key)) is not None:
            _set_option(config, option, raw, env_key)

    return config


def _config_for_value(value: ValueType) -> BaseConfig | object:
    """Convert a value to either a config dict or _SENTINEL."""
    match value:
        case None:
            return _SENTINEL
        case Mapping():
            return dict(value)
        case _:
            assert_never(value)


class _ConfigNode:
    """
    A hierarchical configuration node with inheritance.

    Each node represents a path in the configuration tree (e.g., "render", "report").
    Nodes inherit their portion of the parent's configuration unless explicitly overridden.
    """

    __slots__ = ("_path", "_parent", "_var")
    _registry: MutableMapping[str, Self] = {}

    @classmethod
    def node(cls, path: str) -> Self:
        """Create or fetch the node for path."""
        if path in cls._registry:
            return cls._registry[path]

        if not path:  # root
            parent = None
        else:
            parent_path, _, _ = path.rpartition(".")
            parent = cls.node(parent_path)

        self = super().__new__(cls)
        self._init(path, parent)
        cls._registry[path] = self
        return self

    def _init(self, path: str, parent: "_ConfigNode | None") -> None:
        self._path = path
        self._parent = parent

        # Either a config dict or _SENTINEL for inheritance
        self._var: ContextVar[BaseConfig | object] = ContextVar(
            f"config:{path or '<root>'}", default=_SENTINEL
        )

    def _config(self) -> BaseConfig:
        """Get the effective configuration for this node."""
        val = self._var.get()
        if val is not _SENTINEL:
            return cast(BaseConfig, val)

        if self._parent is None:
            # Root fallback - always re-read environment
            return _default_config()

        parent_config = self._parent._config()
        _, _, name = self._path.rpartition(".")
        portion = cast(Mapping[str, Any], parent_config).get(name)
        return cast(BaseConfig, portion) if isinstance(portion, dict) else {}

    @property
    def config(self) -> BaseConfig:
        """Return the effective configuration for this node."""
        return self._config()

    def set(self, value: ValueType) -> None:
        """Set value. None means inherit parent again."""
        self._var.set(_config_for_value(value))

    @contextmanager
    def override(self, value: ValueType):
        """Temporarily override value within current context."""
        token = self._var.set(_config_for_value(value))
        try:
            yield
        finally:
            self._var.reset(token)

    @override_
    def __repr__(self) -> str:
        return f"<ConfigNode {self._path!r} config={self.config!r}>"


# Convenience layer
def node(path: str = ROOT_PATH) -> _ConfigNode:
    """Return the (singleton) node object for path."""
    return _ConfigNode.node(path)


def config(path: str = ROOT_PATH) -> BaseConfig:
    """Return the effective configuration for path."""
    return node(path).config


@contextmanager
def override(value: ValueType, path: str = ROOT_PATH):
    """Temporarily override path within the current async context."""
    with node(path).override(value):
        yield


def set(value: ValueType, path: str = ROOT_PATH) -> None:
    """Set value for path."""
    node(path).set(value)


# Feature-specific convenience functions
def render_config() -> RenderConfig:
    """Get the effective render configuration."""
    return cast(RenderConfig, config("render"))


def max_length() -> int:
    return render_config().get("max_length", DEFAULT_MAX_LENGTH)


def array_summary_threshold() -> int:
    return render_config().get(
        "array_summary_threshold", DEFAULT_ARRAY_SUMMARY_THRESHOLD
    )


def pretty_enabled() -> bool:
    return render_config().get("pretty", False)


def report_config() -> ReportConfig:
    """Get the effective report configuration."""
    return cast(ReportConfig, config("report"))


def log_failures_enabled() -> bool:
    return report_config().get("log_failures", False)


@contextmanager
def render_override(value: RenderConfig | None):
    """Temporarily override render configuration."""
    with override(value, "render"):
        yield


@contextmanager
def report_override(value: ReportConfig | None):
    """Temporarily override report configuration."""
    with override(value, "report"):
        yield
