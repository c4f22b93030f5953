"""
Client Configuration
--------------------
Immutable settings for one Eventbrite client.

Sources, lowest to highest precedence:
- dataclass defaults
- YAML file (from_yaml)
- EVENTBRITE_* environment variables

Rules:
- The token is never logged
- Built once, never mutated afterwards
"""

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union
import logging
import os

import yaml

from eventbrite_v3.core.errors import ConfigurationError

DEFAULT_BASE_URL = "https://www.eventbriteapi.com/v3"
DEFAULT_REQUESTS_PER_SECOND = 5
ENV_PREFIX = "EVENTBRITE_"

logger = logging.getLogger("eventbrite_v3.infra.config")


@dataclass(frozen=True)
class ClientConfig:
    """Configuration for an Eventbrite client."""
    base_url: str = DEFAULT_BASE_URL
    token: str = ""
    requests_per_second: int = DEFAULT_REQUESTS_PER_SECOND  # 0 disables limiting
    timeout_seconds: float = 30.0
    user_agent: str = "eventbrite-v3/0.1"

    def __repr__(self) -> str:
        token = "***" if self.token else "''"
        return (
            f"ClientConfig(base_url={self.base_url!r}, token={token}, "
            f"requests_per_second={self.requests_per_second}, "
            f"timeout_seconds={self.timeout_seconds})"
        )

    @property
    def has_token(self) -> bool:
        return bool(self.token)

    def with_overrides(self, **overrides: Any) -> "ClientConfig":
        """Return a copy with the given fields replaced."""
        return replace(self, **_coerce(overrides))

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX, base: Optional["ClientConfig"] = None) -> "ClientConfig":
        """
        Build from environment variables.

        EVENTBRITE_TOKEN, EVENTBRITE_BASE_URL, EVENTBRITE_REQUESTS_PER_SECOND,
        EVENTBRITE_TIMEOUT_SECONDS, EVENTBRITE_USER_AGENT
        """
        base = base or cls()
        overrides: Dict[str, Any] = {}
        for f in fields(cls):
            value = os.getenv(f"{prefix}{f.name.upper()}")
            if value is not None:
                overrides[f.name] = value
        if not overrides:
            return base
        logger.debug(f"Config overrides from environment: {sorted(overrides)}")
        return base.with_overrides(**overrides)

    @classmethod
    def from_yaml(cls, path: Union[str, Path], prefix: str = ENV_PREFIX) -> "ClientConfig":
        """
        Load from a YAML file, then apply environment overrides.

        The file may hold the settings at top level or under an
        'eventbrite' section.
        """
        config_path = Path(path)
        if not config_path.exists():
            raise ConfigurationError(f"Config file not found: {config_path}")

        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file must hold a mapping: {config_path}")
        section = data.get("eventbrite", data)
        if not isinstance(section, dict):
            raise ConfigurationError(f"Config section must hold a mapping: {config_path}")

        known = {f.name for f in fields(cls)}
        unknown = set(section) - known
        if unknown:
            logger.warning(f"Ignoring unknown config keys in {config_path}: {sorted(unknown)}")

        file_config = cls(**_coerce({k: v for k, v in section.items() if k in known}))
        logger.info(f"Loaded config from {config_path}")
        return cls.from_env(prefix=prefix, base=file_config)


def _coerce(values: Dict[str, Any]) -> Dict[str, Any]:
    """Convert raw (string) values to field types."""
    out: Dict[str, Any] = {}
    for key, value in values.items():
        try:
            if key == "requests_per_second":
                out[key] = int(value)
            elif key == "timeout_seconds":
                out[key] = float(value)
            else:
                out[key] = "" if value is None else str(value)
        except (TypeError, ValueError):
            raise ConfigurationError(f"Invalid value for {key}: {value!r}") from None
    return out
