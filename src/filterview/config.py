"""Process-wide settings for derived-view construction."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from filterview.runtime.telemetry import env


class ComposeMode(str, Enum):
    """Whether ``compose`` keeps the source view's own predicate."""

    SUPPLIED_ONLY = "supplied_only"
    WITH_BASE = "with_base"


class SubstrStrategy(str, Enum):
    """How a substring predicate decides the ordinal rank of a character."""

    CAPTURE = "capture"
    RESCAN = "rescan"


@dataclass(frozen=True, slots=True)
class ViewSettings:
    compose_mode: ComposeMode = ComposeMode.SUPPLIED_ONLY
    substr_strategy: SubstrStrategy = SubstrStrategy.CAPTURE

    def with_overrides(
        self,
        *,
        compose_mode: ComposeMode | str | None = None,
        substr_strategy: SubstrStrategy | str | None = None,
    ) -> "ViewSettings":
        updated = self
        if compose_mode is not None:
            updated = replace(updated, compose_mode=parse_compose_mode(compose_mode))
        if substr_strategy is not None:
            updated = replace(
                updated, substr_strategy=parse_substr_strategy(substr_strategy)
            )
        return updated


def parse_compose_mode(value: ComposeMode | str) -> ComposeMode:
    if isinstance(value, ComposeMode):
        return value
    try:
        return ComposeMode(value.lower().replace("-", "_"))
    except ValueError:
        choices = ", ".join(mode.value for mode in ComposeMode)
        raise ValueError(f"Unknown compose mode '{value}' (expected {choices})") from None


def parse_substr_strategy(value: SubstrStrategy | str) -> SubstrStrategy:
    if isinstance(value, SubstrStrategy):
        return value
    try:
        return SubstrStrategy(value.lower())
    except ValueError:
        choices = ", ".join(strategy.value for strategy in SubstrStrategy)
        raise ValueError(
            f"Unknown substr strategy '{value}' (expected {choices})"
        ) from None


def load_settings() -> ViewSettings:
    """Build settings from ``FILTERVIEW_COMPOSE_MODE`` / ``FILTERVIEW_SUBSTR_STRATEGY``."""

    return ViewSettings().with_overrides(
        compose_mode=env("COMPOSE_MODE"),
        substr_strategy=env("SUBSTR_STRATEGY"),
    )


_ACTIVE: Optional[ViewSettings] = None


def get_settings() -> ViewSettings:
    global _ACTIVE
    if _ACTIVE is None:
        _ACTIVE = load_settings()
    return _ACTIVE


def configure(settings: Optional[ViewSettings] = None) -> ViewSettings:
    """Install ``settings`` (or reload from the environment) and return them."""

    global _ACTIVE
    _ACTIVE = settings if settings is not None else load_settings()
    return _ACTIVE


__all__ = [
    "ComposeMode",
    "SubstrStrategy",
    "ViewSettings",
    "configure",
    "get_settings",
    "load_settings",
    "parse_compose_mode",
    "parse_substr_strategy",
]
