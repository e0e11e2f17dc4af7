"""Host engine abstraction and registry."""

from layoutbox.engine.lib import (
    LayoutEngine,
    get_engine,
    list_engines,
    register_engine,
)

__all__ = [
    "LayoutEngine",
    "get_engine",
    "list_engines",
    "register_engine",
]
