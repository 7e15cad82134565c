"""Runtime configuration objects for coltypes."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from typing import Any

_OFFSET = re.compile(r"^[+-]\d{2}:\d{2}$")


@dataclass
class TypesConfig:
    """Dialect selection, parse options and connection settings."""

    dialect: str = "sqlite"
    timezone: str = "+00:00"
    dsn: str | None = None
    echo: bool = False
    options: dict[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate the timezone offset used to complete naive DATE values."""
        if not _OFFSET.match(self.timezone or ""):
            raise ValueError(
                f"timezone must be an offset like '+00:00' or '-05:30', got {self.timezone!r}"
            )

    def parse_options(self) -> dict[str, Any]:
        """Options handed to value parsers."""
        return {**self.options, "timezone": self.timezone}


def _load_env_config() -> dict[str, object]:
    """Load configuration from environment variables.

    Returns:
        Dictionary of configuration values from environment
    """
    config: dict[str, object] = {}

    if "COLTYPES_DIALECT" in os.environ:
        config["dialect"] = os.environ["COLTYPES_DIALECT"]

    if "COLTYPES_TIMEZONE" in os.environ:
        config["timezone"] = os.environ["COLTYPES_TIMEZONE"]

    if "COLTYPES_DSN" in os.environ:
        config["dsn"] = os.environ["COLTYPES_DSN"]

    if "COLTYPES_ECHO" in os.environ:
        config["echo"] = os.environ["COLTYPES_ECHO"].lower() in ("true", "1", "yes", "on")

    return config


def create_config(**kwargs: object) -> TypesConfig:
    """Build a :class:`TypesConfig` from keyword arguments and the environment.

    Supports environment variables for configuration:
    - COLTYPES_DIALECT: Dialect whose type table is used (default "sqlite")
    - COLTYPES_TIMEZONE: Offset appended to DATE values stored without one
    - COLTYPES_DSN: Database connection string for the engine helpers
    - COLTYPES_ECHO: Enable SQLAlchemy echo mode (true/false)

    Keyword arguments override environment variables. Unknown keys are kept
    in ``config.options`` and passed along to value parsers.

    Raises:
        ValueError: If the timezone is not a ``+HH:MM`` / ``-HH:MM`` offset
    """
    merged = {**_load_env_config(), **kwargs}

    known: dict[str, object] = {
        k: merged.pop(k) for k in list(merged) if k in TypesConfig.__dataclass_fields__
    }
    extra = known.pop("options", None) or {}
    return TypesConfig(options={**extra, **merged}, **known)  # type: ignore[arg-type]
