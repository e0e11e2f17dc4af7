"""Centralized configuration management for layoutbox.

Example:
    >>> from layoutbox.config import EnvVar, get_environment
    >>>
    >>> get_environment(EnvVar.LAYOUTBOX_ENGINE)
    'model'
    >>> for var in list_environment_variables("compose"):
    ...     info = get_environment_info(var)
    ...     print(f"{info.name}: {info.description}")

Environment Variable Categories:
    compose: Default engine and repeat optimisation preference
    logging: Log level used by setup_logging()
"""

from .lib import (
    # Core types
    EnvConfig,
    EnvVar,
    get_default_engine_name,
    # Main interface
    get_environment,
    get_environment_info,
    get_log_level,
    get_repeat_items_preference,
    # Introspection
    list_environment_variables,
)

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
