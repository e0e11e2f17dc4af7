"""Host engine abstraction.

The composer never builds layout objects itself. It drives a LayoutEngine,
which owns the concrete item, group, section and layout types of whatever
rendering system finally measures and draws the slots. This module defines
the abstract engine and a registry/factory for accessing engines by name.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from layoutbox.dimension import LayoutSize
from layoutbox.node import Direction
from layoutbox.spacing import EdgeSpacing, Insets, Spacing


class LayoutEngine(ABC):
    """Abstract base class for host layout engines.

    Host objects are opaque to the composer and treated as values: every
    `with_*` call returns the configured object, which may be the same
    instance mutated in place or a new copy.

    Subclasses must implement:
        - name: Engine identifier string
        - make_item / make_group: leaf and composite construction
        - with_content_insets / with_edge_spacing / with_inter_item_spacing
        - make_section / make_layout: top-level wrappers

    Engines that offer a "repeat one item N times" group constructor
    advertise it with `supports_repeated_items` and implement
    `make_repeated_group`.

    Example:
        >>> class MyEngine(LayoutEngine):
        ...     name = "mine"
        ...     def make_item(self, size):
        ...         return {"size": size}
        ...     ...
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Engine identifier string."""
        ...

    @property
    def supports_repeated_items(self) -> bool:
        """Whether `make_repeated_group` is available. Off unless advertised."""
        return False

    @abstractmethod
    def make_item(self, size: LayoutSize) -> Any:
        """Create a leaf item of the given size."""
        ...

    @abstractmethod
    def make_group(
        self, direction: Direction, size: LayoutSize, subitems: Sequence[Any]
    ) -> Any:
        """Create a group from an explicit, ordered list of items and groups."""
        ...

    def make_repeated_group(
        self, direction: Direction, size: LayoutSize, item: Any, count: int
    ) -> Any:
        """Create a group holding `count` copies of one item.

        Raises:
            NotImplementedError: If the engine has no such primitive.
        """
        raise NotImplementedError(f"Engine '{self.name}' cannot repeat items")

    @abstractmethod
    def with_content_insets(self, obj: Any, insets: Insets) -> Any:
        """Apply content insets to an item or group."""
        ...

    @abstractmethod
    def with_edge_spacing(self, obj: Any, edges: EdgeSpacing) -> Any:
        """Apply per-edge spacing to an item or group."""
        ...

    @abstractmethod
    def with_inter_item_spacing(self, group: Any, spacing: Spacing) -> Any:
        """Apply spacing between the subitems of a group."""
        ...

    @abstractmethod
    def make_section(
        self,
        group: Any,
        insets: Insets | None = None,
        inter_group_spacing: float | None = None,
    ) -> Any:
        """Wrap one top-level group in a section."""
        ...

    @abstractmethod
    def make_layout(self, sections: Sequence[Any]) -> Any:
        """Wrap one or more sections in the engine's layout object."""
        ...


# Engine registry - populated by engine modules on import
_registry: dict[str, type[LayoutEngine]] = {}


def register_engine(engine_cls: type[LayoutEngine]) -> type[LayoutEngine]:
    """Register an engine class in the registry.

    Uses a temporary instance to retrieve the engine name.

    Args:
        engine_cls: The engine class to register.

    Returns:
        The engine class (for decorator chaining).

    Example:
        >>> @register_engine
        ... class MyEngine(LayoutEngine):
        ...     ...
    """
    _registry[engine_cls().name] = engine_cls
    return engine_cls


def get_engine(name: str) -> LayoutEngine:
    """Get an engine instance by name.

    Args:
        name: The engine identifier (e.g., "model", "descriptor").

    Returns:
        LayoutEngine: A new instance of the requested engine.

    Raises:
        KeyError: If no engine with the given name is registered.

    Example:
        >>> engine = get_engine("model")
        >>> engine.supports_repeated_items
        True
    """
    if name not in _registry:
        _import_engines()
        if name not in _registry:
            available = ", ".join(_registry.keys()) or "(none)"
            raise KeyError(f"Unknown engine '{name}'. Available: {available}")
    return _registry[name]()


def list_engines() -> list[str]:
    """List all registered engine names.

    Returns:
        list[str]: List of engine identifier strings.

    Example:
        >>> list_engines()
        ['model', 'descriptor']
    """
    _import_engines()
    return list(_registry.keys())


def _import_engines() -> None:
    """Import bundled engine modules to trigger registration."""
    import importlib

    for module_name in ("model", "descriptor"):
        importlib.import_module(f"layoutbox.engine.{module_name}")


__all__ = [
    "LayoutEngine",
    "register_engine",
    "get_engine",
    "list_engines",
]
