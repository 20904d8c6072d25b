# src/assertkit/core/config.py
"""Configuration schema and loading for assertkit.

Uses Pydantic for validation with a frozen (immutable) model and Dynaconf
for multi-source loading.

Precedence (highest to lowest):
1. Environment variables (ASSERTKIT_*)
2. Config file (YAML), when one is given
3. Defaults from the Pydantic schema
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field

ENVVAR_PREFIX = "ASSERTKIT"

# Keys Dynaconf adds to as_dict() that are not settings
_DYNACONF_INTERNAL_KEYS = frozenset({"LOAD_DOTENV", "ENVIRONMENTS", "SETTINGS_FILES"})


class AssertkitSettings(BaseModel):
    """Library-wide defaults."""

    model_config = {"frozen": True, "extra": "forbid"}

    default_nesting: int = Field(
        default=3,
        ge=0,
        description="Nesting depth used by fields_for/document_for when none is given",
    )
    indent_width: int = Field(
        default=2,
        ge=1,
        description="Spaces added per nesting level in generated documents",
    )
    mailbox_timeout_sec: float = Field(
        default=0.1,
        gt=0,
        description="How long mailbox assertions wait for each expected message",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Log level used by the CLI",
    )


def _load_raw(settings_files: list[str]) -> dict[str, Any]:
    from dynaconf import Dynaconf

    dynaconf_settings = Dynaconf(
        envvar_prefix=ENVVAR_PREFIX,
        settings_files=settings_files,
        environments=False,  # No [default]/[production] sections
        load_dotenv=False,  # Don't auto-load .env
        merge_enabled=True,
    )

    # Dynaconf returns uppercase keys; convert to lowercase for Pydantic
    return {k.lower(): v for k, v in dynaconf_settings.as_dict().items() if k not in _DYNACONF_INTERNAL_KEYS}


def load_settings(config_path: Path) -> AssertkitSettings:
    """Load settings from a YAML file with environment variable overrides.

    Environment variable format: ASSERTKIT_DEFAULT_NESTING=5

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Validated AssertkitSettings instance

    Raises:
        ValidationError: If configuration fails Pydantic validation
        FileNotFoundError: If config file doesn't exist
    """
    # Explicit check for file existence (Dynaconf silently accepts missing files)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    return AssertkitSettings(**_load_raw([str(config_path)]))


@lru_cache(maxsize=1)
def get_settings() -> AssertkitSettings:
    """Defaults overlaid with ASSERTKIT_* environment variables.

    Cached for the life of the process. Tests that change the environment
    call get_settings.cache_clear().
    """
    return AssertkitSettings(**_load_raw([]))
