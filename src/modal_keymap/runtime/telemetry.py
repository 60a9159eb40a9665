"""Telemetry for key map loading, built on telelog.

Public surface:

``configure(...)`` -- adopt an explicit telelog config or a named preset
``get_logger(name)`` -- cached logger bound to the active config
``record_event(name, ...)`` -- one structured event at a given level
``span(name, ...)`` -- profiled block, optionally tracked as a component
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import (
    Any,
    Dict,
    Iterator,
    Mapping,
    MutableMapping,
    Optional,
    Tuple,
    cast,
)

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "MODAL_KEYMAP_"
DEFAULT_LOGGER_NAME = os.getenv(f"{ENV_PREFIX}LOGGER", "modal_keymap")
DEFAULT_LOG_FILE = os.getenv(f"{ENV_PREFIX}LOG_FILE", "")

_LOGGERS: MutableMapping[str, Any] = {}
_CONFIG: Optional[Any] = None


def env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def env_flag(name: str, default: bool = False) -> bool:
    raw = env(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list, tuple, set, frozenset)):
        return repr(value)
    return str(value)


def _pairs(data: Dict[str, Any]) -> list[tuple[str, str]]:
    return [(str(key), _stringify(value)) for key, value in data.items()]


@dataclass(frozen=True)
class LogSettings:
    """Output options translated into a ``tl.Config``."""

    level: str = "WARNING"
    console: bool = True
    colored: bool = True
    json: bool = False
    log_file: str = ""
    buffer_size: Optional[int] = None

    @classmethod
    def from_env(cls) -> "LogSettings":
        console = not env_flag("DISABLE_CONSOLE")
        return cls(
            level=(env("LOG_LEVEL") or "WARNING").upper(),
            console=console,
            colored=console and not env_flag("NO_COLOR"),
            json=env_flag("LOG_JSON"),
            log_file=env("LOG_FILE") or DEFAULT_LOG_FILE,
            buffer_size=(
                int(env("LOG_BUFFER_SIZE") or "2048")
                if env_flag("LOG_BUFFERED")
                else None
            ),
        )

    def build(self) -> Any:
        config = tl.Config()
        config.with_min_level(self.level)
        config.with_console_output(self.console)
        if self.console:
            config.with_colored_output(self.colored)
        if self.json:
            config.with_json_format(True)
        if self.log_file:
            config.with_file_output(self.log_file)
        if self.buffer_size is not None:
            config.with_buffering(True)
            config.with_buffer_size(self.buffer_size)
        config.with_profiling(True)
        return config


PRESETS: Mapping[str, LogSettings] = {
    "development": LogSettings(level="DEBUG"),
    "production": LogSettings(
        level="INFO",
        console=False,
        colored=False,
        log_file=DEFAULT_LOG_FILE or "modal_keymap.log",
        buffer_size=2048,
    ),
    "performance": LogSettings(
        level="DEBUG",
        console=False,
        colored=False,
        json=True,
        log_file=DEFAULT_LOG_FILE or "modal_keymap-performance.log",
        buffer_size=2048,
    ),
}


def configure(*, config: Optional[Any] = None, preset: Optional[str] = None) -> None:
    """Replace the active telelog configuration.

    ``config`` is adopted as-is; ``preset`` names an entry of
    :data:`PRESETS`. With neither, the ``MODAL_KEYMAP_*`` environment
    decides. Cached loggers are dropped so they pick up the new config.
    """

    global _CONFIG
    if config is not None and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")

    if preset:
        try:
            settings = PRESETS[preset.lower()]
        except KeyError as exc:
            raise ValueError(f"Unknown telemetry preset '{preset}'.") from exc
        config = settings.build()
    elif config is None:
        config = LogSettings.from_env().build()

    _CONFIG = config
    _LOGGERS.clear()


def _active_config() -> Any:
    global _CONFIG
    if _CONFIG is None:
        _CONFIG = LogSettings.from_env().build()
    return _CONFIG


def get_logger(name: Optional[str] = None) -> Any:
    """Return the cached ``telelog.Logger`` for ``name``."""

    logger_name = name or DEFAULT_LOGGER_NAME
    if logger_name not in _LOGGERS:
        _LOGGERS[logger_name] = tl.Logger.with_config(logger_name, _active_config())
    return _LOGGERS[logger_name]


def _level_method(logger: Any, level: Any) -> Tuple[Any, bool]:
    name = str(level).lower()
    with_data = getattr(logger, f"{name}_with", None)
    if with_data is not None:
        return with_data, True
    method = getattr(logger, name, None)
    if method is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    return method, False


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Emit ``event::<name>`` with ``data`` attached as key/value pairs."""

    log = get_logger(logger_name)
    payload = {"event": name, **(data or {})}
    method, accepts_data = _level_method(log, level)
    message = f"event::{name}"
    if accepts_data:
        method(message, _pairs(payload))
    else:
        method(f"{message} {payload}")


@dataclass
class SpanHandle:
    """Handle yielded by :func:`span` for attaching metadata."""

    logger: Any
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _stringify(value)

    def fail(self, reason: str) -> None:
        payload = {"span": self.span_name, **self.metadata, "reason": reason}
        if self.component_name:
            payload["component"] = self.component_name
        method, accepts_data = _level_method(self.logger, "error")
        if accepts_data:
            method("span::fail", _pairs(payload))
        else:
            method(f"span::fail {payload}")


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile a block and, when ``component`` is set, track it as one.

    ``metadata`` is pushed into the logger context for the duration of the
    block. An exception escaping the block is logged through
    :meth:`SpanHandle.fail` and re-raised.
    """

    log = get_logger(logger_name)
    component_name = name if component is True else component or None

    pushed: list[str] = []
    serialized: Dict[str, Any] = {}
    for key, value in (metadata or {}).items():
        serialized[key] = _stringify(value)
        log.add_context(key, serialized[key])
        pushed.append(key)

    with ExitStack() as stack:
        if component_name:
            stack.enter_context(log.track_component(component_name))
        stack.enter_context(log.profile(name))
        handle = SpanHandle(
            logger=log,
            span_name=name,
            component_name=component_name,
            metadata=serialized,
        )
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise
        finally:
            for key in pushed:
                log.remove_context(key)


__all__ = [
    "LogSettings",
    "PRESETS",
    "SpanHandle",
    "configure",
    "env",
    "env_flag",
    "get_logger",
    "record_event",
    "span",
]
