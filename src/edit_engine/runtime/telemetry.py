"""Telemetry for the edit engine, built on telelog.

Loggers are configured from :class:`~edit_engine.runtime.config.EngineSettings`
unless an explicit ``telelog.Config`` is installed with :func:`configure`.
"""

from __future__ import annotations

from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, MutableMapping, Optional, cast

import telelog  # type: ignore[import]

from .config import EngineSettings, get_settings

tl = cast(Any, telelog)

DEFAULT_LOGGER_NAME = "edit_engine"

_loggers: MutableMapping[str, Any] = {}
_config: Optional[Any] = None


def _text(value: Any) -> str:
    if isinstance(value, (dict, list, tuple, set)):
        return repr(value)
    return str(value)


def config_from_settings(settings: EngineSettings) -> Any:
    """Translate :class:`EngineSettings` into a ``telelog.Config``."""

    config = tl.Config()
    config.with_min_level(settings.log_level)
    config.with_console_output(settings.console_output)
    if settings.console_output:
        config.with_colored_output(settings.colored_output)
    if settings.log_json:
        config.with_json_format(True)
    if settings.log_file:
        config.with_file_output(settings.log_file)
    if settings.log_buffered:
        config.with_buffering(True)
        config.with_buffer_size(settings.log_buffer_size)
    config.with_profiling(True)
    return config


def configure(
    *, config: Optional[Any] = None, settings: Optional[EngineSettings] = None
) -> None:
    """Install ``config``, or one built from ``settings``, and drop cached loggers."""

    global _config
    if config is not None and settings is not None:
        raise ValueError("Provide either `config` or `settings`, not both.")
    _config = config or config_from_settings(settings or get_settings())
    _loggers.clear()


def get_logger(name: Optional[str] = None) -> Any:
    global _config
    logger_name = name or DEFAULT_LOGGER_NAME
    logger = _loggers.get(logger_name)
    if logger is None:
        if _config is None:
            _config = config_from_settings(get_settings())
        logger = tl.Logger.with_config(logger_name, _config)
        _loggers[logger_name] = logger
    return logger


def _emit(logger: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    name = level.lower()
    structured = getattr(logger, f"{name}_with", None)
    if structured is not None:
        structured(message, [(str(k), _text(v)) for k, v in payload.items()])
        return
    plain = getattr(logger, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {payload}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Emit ``event::<name>`` with ``data`` attached as key/value pairs."""

    payload = {"event": name, **(data or {})}
    _emit(get_logger(logger_name), level, f"event::{name}", payload)


@dataclass
class SpanHandle:
    logger: Any
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _text(value)

    def fail(self, reason: str) -> None:
        payload: Dict[str, Any] = {"span": self.span_name, **self.metadata}
        if self.component_name:
            payload["component"] = self.component_name
        payload["reason"] = reason
        _emit(self.logger, "error", "span::fail", payload)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile a block under ``name``.

    ``component=True`` tracks the block as a component named like the span; a
    string names the component explicitly. ``metadata`` is attached as logger
    context while the block runs. Exceptions are logged and re-raised.
    """

    log = get_logger(logger_name)
    component_name = name if component is True else component or None
    handle = SpanHandle(logger=log, span_name=name, component_name=component_name)
    for key, value in (metadata or {}).items():
        handle.add_metadata(key, value)
    context_keys = list(handle.metadata)

    with ExitStack() as stack:
        for key in context_keys:
            log.add_context(key, handle.metadata[key])
            stack.callback(log.remove_context, key)
        if component_name:
            stack.enter_context(log.track_component(component_name))
        stack.enter_context(log.profile(name))
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise


__all__ = [
    "SpanHandle",
    "config_from_settings",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
