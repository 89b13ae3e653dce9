"""Single config object: built from defaults and environment; available via DI."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields
from typing import Any

DEFAULT_PREFIX = "HOTEL_"


class Config:
    """Environment helpers shared by config classes."""

    @classmethod
    def load_from_env(cls, prefix: str = DEFAULT_PREFIX, **defaults: Any) -> dict[str, Any]:
        """Load from os.environ with prefix and defaults. Returns dict for MyConfig(**Config.load_from_env())."""
        result = dict(defaults)
        for key, value in os.environ.items():
            if key.startswith(prefix):
                name = key[len(prefix):].lower()
                result[name] = value
        return result


@dataclass
class HotelConfig(Config):
    """
    Application config. Defaults are the limits the menu enforces;
    HOTEL_MAX_BASE_COST, HOTEL_LONG_IDENTIFIER_LENGTH and HOTEL_LOG_LEVEL override them.
    """

    max_base_cost: float = 1_000_000.0
    long_identifier_length: int = 50
    log_level: str = "WARNING"


def _coerce(prefix: str, name: str, raw: Any, target: type) -> Any:
    if isinstance(raw, target):
        return raw
    try:
        return target(raw)
    except (TypeError, ValueError):
        raise ValueError(f"{prefix}{name.upper()}: expected {target.__name__}, got {raw!r}") from None


def load_config_from_env(prefix: str = DEFAULT_PREFIX, **overrides: Any) -> HotelConfig:
    """Build HotelConfig from prefixed env vars; unknown keys are ignored, explicit overrides win."""
    values = HotelConfig.load_from_env(prefix)
    values.update({k: v for k, v in overrides.items() if v is not None})
    kwargs: dict[str, Any] = {}
    for f in fields(HotelConfig):
        if f.name in values:
            kwargs[f.name] = _coerce(prefix, f.name, values[f.name], type(f.default))
    config = HotelConfig(**kwargs)
    if not config.max_base_cost > 0:
        raise ValueError(f"{prefix}MAX_BASE_COST: must be greater than 0, got {config.max_base_cost!r}")
    config.log_level = config.log_level.upper()
    if not isinstance(logging.getLevelName(config.log_level), int):
        raise ValueError(f"{prefix}LOG_LEVEL: unknown level {config.log_level!r}")
    return config
