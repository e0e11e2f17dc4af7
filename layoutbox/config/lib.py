"""Centralized environment configuration management for layoutbox.

Provides a unified interface for the few environment variables the library
honours:
- Single `get_environment()` function for all configuration
- Type-safe enum with metadata (default, type, description)
- Consistent resolution: override > environment > default

Example:
    >>> from layoutbox.config import EnvVar, get_environment
    >>>
    >>> engine = get_environment(EnvVar.LAYOUTBOX_ENGINE)  # Returns str
    >>> repeat = get_environment(EnvVar.LAYOUTBOX_REPEAT_ITEMS)  # bool | None
    >>>
    >>> # Override at runtime
    >>> engine = get_environment(EnvVar.LAYOUTBOX_ENGINE, override="descriptor")
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Any, overload

# =============================================================================
# Environment Variable Configuration
# =============================================================================


@dataclass(frozen=True)
class EnvConfig:
    """Metadata for an environment variable.

    Attributes:
        name: Environment variable name (e.g., "LAYOUTBOX_ENGINE").
        default: Default value if not set in environment.
        var_type: Python type for value conversion (str, bool).
        description: Human-readable description.
        category: Grouping category for documentation.
    """

    name: str
    default: Any
    var_type: type
    description: str = ""
    category: str = "general"


class EnvVar(Enum):
    """All environment variables used by layoutbox.

    Each member contains an EnvConfig with name, default, type, and description.
    Use with `get_environment()` for type-safe access.

    Categories:
        - compose: Composer defaults (engine, repeat optimisation)
        - logging: Log output configuration
    """

    # -------------------------------------------------------------------------
    # Composition
    # -------------------------------------------------------------------------
    LAYOUTBOX_ENGINE = EnvConfig(
        name="LAYOUTBOX_ENGINE",
        default="model",
        var_type=str,
        description="Registered engine used when a Composer gets no engine",
        category="compose",
    )
    LAYOUTBOX_REPEAT_ITEMS = EnvConfig(
        name="LAYOUTBOX_REPEAT_ITEMS",
        default=None,
        var_type=bool,
        description="Use the engine's repeat-one-item primitive (None=follow engine)",
        category="compose",
    )

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------
    LAYOUTBOX_LOG_LEVEL = EnvConfig(
        name="LAYOUTBOX_LOG_LEVEL",
        default="WARNING",
        var_type=str,
        description="Level passed to setup_logging() when none is given",
        category="logging",
    )


# =============================================================================
# Type Conversion Helpers
# =============================================================================


def _parse_bool(value: str) -> bool | None:
    """Parse string to boolean.

    Recognizes: true/false, 1/0, yes/no (case-insensitive).
    Returns None for unrecognized values.
    """
    normalized = value.lower().strip()
    if normalized in ("true", "1", "yes"):
        return True
    if normalized in ("false", "0", "no"):
        return False
    return None


def _convert_value(value: str | None, var_type: type, default: Any) -> Any:
    """Convert string value to target type.

    Args:
        value: Raw string value from environment (or None).
        var_type: Target Python type.
        default: Default value if conversion fails or value is None.

    Returns:
        Converted value or default.
    """
    if value is None:
        return default

    if var_type is str:
        return value

    if var_type is bool:
        result = _parse_bool(value)
        return result if result is not None else default

    return value


# =============================================================================
# Main Interface
# =============================================================================


@overload
def get_environment(env_var: EnvVar, override: str) -> str: ...
@overload
def get_environment(env_var: EnvVar, override: bool) -> bool: ...
@overload
def get_environment(env_var: EnvVar, override: None = None) -> Any: ...


def get_environment(env_var: EnvVar, override: Any = None) -> Any:
    """Get environment variable value with type conversion.

    Resolution priority:
        1. Explicit override parameter (highest)
        2. Environment variable value
        3. Default from EnvConfig (lowest)

    Args:
        env_var: Environment variable enum member.
        override: Optional override value (bypasses env lookup).

    Returns:
        Value converted to the appropriate type (str or bool).

    Example:
        >>> get_environment(EnvVar.LAYOUTBOX_ENGINE)
        'model'
        >>> get_environment(EnvVar.LAYOUTBOX_ENGINE, override="descriptor")
        'descriptor'
    """
    config: EnvConfig = env_var.value

    if override is not None:
        return override

    raw_value = os.environ.get(config.name)
    return _convert_value(raw_value, config.var_type, config.default)


def get_environment_info(env_var: EnvVar) -> EnvConfig:
    """Get metadata for an environment variable.

    Args:
        env_var: Environment variable enum member.

    Returns:
        EnvConfig with name, default, type, and description.
    """
    return env_var.value


def list_environment_variables(category: str | None = None) -> list[EnvVar]:
    """List all environment variables, optionally filtered by category.

    Args:
        category: Filter by category (compose, logging).
                 None returns all variables.

    Returns:
        List of EnvVar enum members.
    """
    if category is None:
        return list(EnvVar)

    return [var for var in EnvVar if var.value.category == category]


# =============================================================================
# Convenience Functions
# =============================================================================


def get_default_engine_name(override: str | None = None) -> str:
    """Name of the engine a Composer uses when none is passed."""
    return get_environment(EnvVar.LAYOUTBOX_ENGINE, override=override)


def get_repeat_items_preference() -> bool | None:
    """Configured default for the repeat-one-item optimisation.

    Returns:
        True/False when set explicitly, None to follow the engine.
    """
    return get_environment(EnvVar.LAYOUTBOX_REPEAT_ITEMS)


def get_log_level() -> str:
    """Configured log level name, upper-cased."""
    return str(get_environment(EnvVar.LAYOUTBOX_LOG_LEVEL)).upper()


__all__ = [
    # Core types
    "EnvConfig",
    "EnvVar",
    # Main interface
    "get_environment",
    "get_environment_info",
    # Convenience functions
    "get_default_engine_name",
    "get_repeat_items_preference",
    "get_log_level",
    # Introspection
    "list_environment_variables",
]
