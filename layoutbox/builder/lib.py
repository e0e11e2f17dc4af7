"""Declarative construction surface for layout trees.

A group's children are described by a block: a zero-argument callable the
group calls once while it is being constructed. The block is ordinary Python.
It may return a single node, a list of nodes, or (the most natural form) be a
generator function that yields nodes from inside `if` and `for` statements:

    >>> def row():
    ...     yield ItemBox(w(0.2), h(1.0)).insets(space=20)
    ...     if show_badge:
    ...         yield ItemBox(w(0.1), h(1.0))
    ...     for i in range(3):
    ...         yield ItemBox(w(0.1), h(1.0)).insets(space=i * 0.5)
    >>> GroupBox(w(1.0), absolute(120), row).compose()

`LayoutBuilder` turns whatever the block produced into one LayoutNode
(possibly a Fragment) and the group flattens it straight away, so fragments
never outlive construction. The module-level helpers `combine`,
`choose_first`, `choose_second`, `optional` and `from_array` expose the same
operations for callers who prefer to assemble blocks explicitly.

`ItemBox` and `GroupBox` are the mutable builder phase: chainable calls
configure them and `build()` freezes them into `Slot` / `Group` nodes. A
builder placed in a block is built at that moment, so later changes to the
builder never reach the group that captured it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Self

from layoutbox.compose import Composer, ComposerConfig
from layoutbox.core.log import get_logger
from layoutbox.dimension import Dimension, LayoutSize
from layoutbox.engine import LayoutEngine
from layoutbox.node import Direction, Fragment, Group, LayoutNode, Slot, flatten
from layoutbox.spacing import EdgeSpacing, Insets, Spacing

logger = get_logger("layoutbox.builder")

Block = Callable[[], Any]


# =============================================================================
# Builder facade
# =============================================================================


class LayoutBuilder:
    """Resolves block contents into a single LayoutNode.

    Mirrors the operations a block needs:
        - build_block: sequential statements
        - build_either_first / build_either_second: if/else branches
        - build_optional: an `if` without `else`
        - build_array: the iterations of a loop
    """

    @staticmethod
    def build_block(*components: Any) -> LayoutNode:
        """Combine sequential components.

        A single component is returned unchanged; anything else is wrapped
        in a Fragment in the given order.
        """
        nodes = [LayoutBuilder.component(c) for c in components]
        if len(nodes) == 1:
            return nodes[0]
        return Fragment(items=tuple(nodes))

    @staticmethod
    def build_either_first(component: Any) -> LayoutNode:
        """Result of a taken `if` branch."""
        return LayoutBuilder.component(component)

    @staticmethod
    def build_either_second(component: Any) -> LayoutNode:
        """Result of a taken `else` branch."""
        return LayoutBuilder.component(component)

    @staticmethod
    def build_optional(component: Any | None) -> LayoutNode:
        """Result of an `if` without `else`; None contributes nothing."""
        if component is None:
            return Fragment()
        return LayoutBuilder.component(component)

    @staticmethod
    def build_array(components: Iterable[Any]) -> Fragment:
        """Wrap loop results in iteration order."""
        return Fragment(items=tuple(LayoutBuilder.component(c) for c in components))

    @staticmethod
    def component(value: Any) -> LayoutNode:
        """Convert one block value into a LayoutNode.

        Args:
            value: A node, a builder, an iterable of those, or None.

        Returns:
            The node itself, the built node, a Fragment for iterables,
            or an empty Fragment for None.

        Raises:
            TypeError: If the value cannot appear in a layout block.
        """
        match value:
            case Slot() | Group() | Fragment():
                return value
            case BoxConfig():
                return value.build()
            case None:
                return Fragment()
            case str() | bytes():
                raise TypeError(f"{value!r} cannot appear in a layout block")
            case Iterable():
                return LayoutBuilder.build_array(value)
        raise TypeError(
            f"{type(value).__name__} cannot appear in a layout block; "
            "expected ItemBox, GroupBox or a layout node"
        )

    @classmethod
    def evaluate(cls, block: Block) -> LayoutNode:
        """Run a block once and resolve its result.

        A returned (or yielded) sequence is treated as sequential statements.
        Each value is converted as soon as the block produces it, so a
        builder yielded from a generator is frozen before the block resumes.

        Raises:
            TypeError: If `block` is not callable or produces an
                unsupported value.
        """
        if not callable(block):
            raise TypeError(
                f"Layout block must be callable, got {type(block).__name__}"
            )
        result = block()
        if isinstance(result, (list, tuple)) or isinstance(result, Iterator):
            return cls.build_block(*(cls.component(v) for v in result))
        return cls.component(result)


combine = LayoutBuilder.build_block
choose_first = LayoutBuilder.build_either_first
choose_second = LayoutBuilder.build_either_second
optional = LayoutBuilder.build_optional
from_array = LayoutBuilder.build_array


# =============================================================================
# Fluent builders
# =============================================================================


class BoxConfig(ABC):
    """Configuration shared by item and group builders.

    Every configuration call mutates the builder and returns it, so calls
    can be chained before the builder is placed in a block.
    """

    def __init__(self, width: Dimension, height: Dimension) -> None:
        self._size = LayoutSize(width=width, height=height)
        self._insets: Insets | None = None
        self._edges: EdgeSpacing | None = None

    @property
    def layout_size(self) -> LayoutSize:
        return self._size

    @property
    def content_insets(self) -> Insets | None:
        return self._insets

    @property
    def edge_spacing(self) -> EdgeSpacing | None:
        return self._edges

    def size(self, width: Dimension, height: Dimension) -> Self:
        """Replace both dimensions."""
        self._size = LayoutSize(width=width, height=height)
        return self

    def insets(
        self,
        insets: Insets | float | None = None,
        *,
        top: float = 0.0,
        leading: float = 0.0,
        bottom: float = 0.0,
        trailing: float = 0.0,
        space: float | None = None,
    ) -> Self:
        """Set content insets.

        Accepts an Insets value, a single number (uniform), `space=` for a
        uniform inset, or the four edges as keywords.
        """
        if space is not None:
            self._insets = Insets.uniform(space)
        elif isinstance(insets, Insets):
            self._insets = insets
        elif insets is not None:
            self._insets = Insets.uniform(insets)
        else:
            self._insets = Insets(
                top=top, leading=leading, bottom=bottom, trailing=trailing
            )
        return self

    def edges(self, edges: EdgeSpacing) -> Self:
        """Replace all four edge spacings at once."""
        self._edges = edges
        return self

    def leading(self, spacing: Spacing | None) -> Self:
        return self._set_edge("leading", spacing)

    def top(self, spacing: Spacing | None) -> Self:
        return self._set_edge("top", spacing)

    def trailing(self, spacing: Spacing | None) -> Self:
        return self._set_edge("trailing", spacing)

    def bottom(self, spacing: Spacing | None) -> Self:
        return self._set_edge("bottom", spacing)

    def _set_edge(self, edge: str, spacing: Spacing | None) -> Self:
        self._edges = (self._edges or EdgeSpacing()).with_edge(edge, spacing)
        return self

    @abstractmethod
    def build(self) -> Slot | Group:
        """Freeze the current configuration into a node."""
        ...


class ItemBox(BoxConfig):
    """Builder for a Slot.

    Args:
        width: Width of each position.
        height: Height of each position.
        columns: Number of identical adjacent positions.

    Example:
        >>> ItemBox(w(0.3), h(1.0), columns=2).insets(space=10)
    """

    def __init__(
        self, width: Dimension, height: Dimension, columns: int = 1
    ) -> None:
        super().__init__(width, height)
        self.columns = columns

    def build(self) -> Slot:
        """Freeze the current configuration into a Slot."""
        return Slot(
            size=self._size,
            insets=self._insets,
            edge_spacing=self._edges,
            replica_count=self.columns,
        )

    def compose(
        self,
        engine: LayoutEngine | str | None = None,
        config: ComposerConfig | None = None,
    ) -> list[Any]:
        """Compose into `columns` host items."""
        return Composer(engine, config).compose_slot(self.build())


class GroupBox(BoxConfig):
    """Builder for a Group.

    The block is evaluated and flattened immediately; the resulting
    children are frozen nodes.

    Args:
        width: Width of the group.
        height: Height of the group.
        block: Zero-argument callable describing the children.
        direction: Layout axis for the children.

    Example:
        >>> GroupBox(
        ...     w(1.0),
        ...     h(0.4),
        ...     lambda: [ItemBox(w(0.5), h(1.0), columns=2)],
        ...     direction=Direction.VERTICAL,
        ... ).space(fixed(5))
    """

    def __init__(
        self,
        width: Dimension,
        height: Dimension,
        block: Block,
        *,
        direction: Direction | str = Direction.HORIZONTAL,
    ) -> None:
        super().__init__(width, height)
        self.direction = Direction(direction)
        self._space: Spacing | None = None
        self._children: tuple[Slot | Group, ...] = tuple(
            flatten(LayoutBuilder.evaluate(block))
        )
        logger.debug(
            f"{self.direction.value} group block produced {len(self._children)} children"
        )

    @classmethod
    def horizontal(cls, width: Dimension, height: Dimension, block: Block) -> GroupBox:
        return cls(width, height, block, direction=Direction.HORIZONTAL)

    @classmethod
    def vertical(cls, width: Dimension, height: Dimension, block: Block) -> GroupBox:
        return cls(width, height, block, direction=Direction.VERTICAL)

    @property
    def children(self) -> tuple[Slot | Group, ...]:
        return self._children

    @property
    def inter_item_spacing(self) -> Spacing | None:
        return self._space

    def space(self, spacing: Spacing | None) -> Self:
        """Set the spacing between consecutive children."""
        self._space = spacing
        return self

    def build(self) -> Group:
        """Freeze the current configuration into a Group."""
        return Group(
            size=self._size,
            insets=self._insets,
            edge_spacing=self._edges,
            direction=self.direction,
            inter_item_spacing=self._space,
            children=self._children,
        )

    def compose(
        self,
        engine: LayoutEngine | str | None = None,
        config: ComposerConfig | None = None,
    ) -> Any:
        """Compose into one host group."""
        return Composer(engine, config).compose_group(self.build())


__all__ = [
    "Block",
    "LayoutBuilder",
    "combine",
    "choose_first",
    "choose_second",
    "optional",
    "from_array",
    "BoxConfig",
    "ItemBox",
    "GroupBox",
]
