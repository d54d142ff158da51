"""Telemetry services built directly on telelog.

Views are hot-path objects, so only derived-view construction is traced:

``configure(...)`` -- override or preset the telelog configuration
``get_logger(name)`` -- fetch (and cache) a configured logger
``record_event(name, ...)`` -- emit structured events at a chosen level
``span(name, ...)`` -- profiling context manager with failure reporting
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, MutableMapping, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "FILTERVIEW_"
DEFAULT_LOGGER_NAME = os.getenv(f"{ENV_PREFIX}LOGGER", "filterview")

_LOGGER_CACHE: MutableMapping[str, Any] = {}
_ACTIVE_CONFIG: Optional[Any] = None


def env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def env_flag(name: str, default: bool = False) -> bool:
    raw = env(name)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    return repr(value) if isinstance(value, (dict, list, tuple, set)) else str(value)


def _development(config: Any) -> None:
    config.with_min_level("DEBUG")
    config.with_console_output(True)
    config.with_colored_output(True)
    config.with_json_format(False)


def _production(config: Any) -> None:
    config.with_min_level("INFO")
    config.with_console_output(False)
    config.with_file_output(env("LOG_FILE") or "filterview.log")
    config.with_buffering(True)


def _performance(config: Any) -> None:
    config.with_min_level("DEBUG")
    config.with_console_output(False)
    config.with_buffering(True)
    config.with_json_format(True)
    config.with_file_output(env("LOG_FILE") or "filterview-performance.log")


_PRESETS: Dict[str, Callable[[Any], None]] = {
    "development": _development,
    "production": _production,
    "performance": _performance,
}


def _from_environment(config: Any) -> None:
    # Library default is quiet: callers opt in to INFO/DEBUG noise.
    config.with_min_level((env("LOG_LEVEL") or "WARNING").upper())

    console = not env_flag("DISABLE_CONSOLE")
    config.with_console_output(console)
    if console:
        config.with_colored_output(not env_flag("NO_COLOR"))

    if env_flag("LOG_JSON"):
        config.with_json_format(True)

    log_file = env("LOG_FILE")
    if log_file:
        config.with_file_output(log_file)

    if env_flag("LOG_BUFFERED"):
        config.with_buffering(True)
        config.with_buffer_size(int(env("LOG_BUFFER_SIZE") or "2048"))


def build_config(preset: Optional[str] = None) -> Any:
    """Return a ``tl.Config`` from a named preset or from the environment."""

    config = tl.Config()
    if preset is None:
        _from_environment(config)
    else:
        try:
            _PRESETS[preset.lower()](config)
        except KeyError:
            raise ValueError(f"Unknown preset '{preset}'.") from None
    config.with_profiling(True)
    return config


def configure(*, config: Optional[Any] = None, preset: Optional[str] = None) -> None:
    """Swap the active telelog configuration and drop cached loggers.

    Parameters
    ----------
    config:
        Explicit ``tl.Config`` instance to adopt.
    preset:
        ``"development"``, ``"production"`` or ``"performance"``. Mutually
        exclusive with ``config``.
    """

    global _ACTIVE_CONFIG
    if config and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")

    if config is None:
        config = build_config(preset)
    else:
        config.with_profiling(True)

    _ACTIVE_CONFIG = config
    _LOGGER_CACHE.clear()


def get_logger(name: Optional[str] = None) -> Any:
    """Return a cached ``telelog.Logger`` for ``name``."""

    global _ACTIVE_CONFIG
    if _ACTIVE_CONFIG is None:
        _ACTIVE_CONFIG = build_config()

    logger_name = name or DEFAULT_LOGGER_NAME
    if logger_name not in _LOGGER_CACHE:
        _LOGGER_CACHE[logger_name] = tl.Logger.with_config(
            logger_name, _ACTIVE_CONFIG
        )
    return _LOGGER_CACHE[logger_name]


def _emit(log: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    name = level.lower()
    structured = getattr(log, f"{name}_with", None)
    if structured is not None:
        structured(message, [(str(k), _stringify(v)) for k, v in payload.items()])
        return
    plain = getattr(log, name, None)
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
    """Emit a structured ``event::<name>`` record."""

    _emit(get_logger(logger_name), level, f"event::{name}", {"event": name, **(data or {})})


@dataclass
class SpanHandle:
    """Handle yielded by ``span`` so callers can attach results."""

    logger: Any
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _stringify(value)

    def _payload(self, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        payload = {"span": self.span_name, **self.metadata}
        if self.component_name:
            payload["component"] = self.component_name
        payload.update(extra or {})
        return payload

    def done(self) -> None:
        _emit(self.logger, "debug", "span::done", self._payload())

    def fail(self, reason: str) -> None:
        _emit(self.logger, "error", "span::fail", self._payload({"reason": reason}))


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile a block, optionally tracking it as a telelog component.

    ``component=True`` reuses ``name`` as the component id; a string names it
    explicitly. ``metadata`` is pushed as logger context for the duration of
    the block and repeated in the ``span::done`` / ``span::fail`` records.
    Exceptions are reported and re-raised unchanged.
    """

    log = get_logger(logger_name)
    component_name = name if component is True else (component or None)
    payload = {key: _stringify(value) for key, value in (metadata or {}).items()}

    for key, value in payload.items():
        log.add_context(key, value)

    with ExitStack() as stack:
        if component_name:
            stack.enter_context(log.track_component(component_name))
        stack.enter_context(log.profile(name))
        handle = SpanHandle(
            logger=log,
            span_name=name,
            component_name=component_name,
            metadata=dict(payload),
        )
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise
        else:
            handle.done()
        finally:
            for key in payload:
                log.remove_context(key)


__all__ = [
    "SpanHandle",
    "build_config",
    "configure",
    "env",
    "env_flag",
    "get_logger",
    "record_event",
    "span",
]
