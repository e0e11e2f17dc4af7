"""Layout node model and flattening.

The node tree is the contract between the builder surface and the composer.
A LayoutNode is exactly one of:

- Slot: a leaf standing for one or more identical adjacent positions.
- Group: a composite arranging slots and groups along one axis.
- Fragment: a transparent list produced by conditionals and loops in a
  builder block. Fragments carry no geometry and are resolved away by
  `flatten` before a Group stores its children, so a Group can never hold one.

All nodes are frozen. The tree is built once, top-down, and consumed once,
bottom-up, by the composer.
"""

from __future__ import annotations

from enum import Enum
from typing import Literal, Union

from pydantic import BaseModel, Field

from layoutbox.dimension import LayoutSize
from layoutbox.spacing import EdgeSpacing, Insets, Spacing


class Direction(str, Enum):
    """Axis along which a group lays out its children.

    - HORIZONTAL: children flow leading-to-trailing
    - VERTICAL: children flow top-to-bottom
    """

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class Slot(BaseModel):
    """Leaf node describing `replica_count` identical positions.

    Attributes:
        size: Width and height of each position.
        insets: Content insets applied to each position.
        edge_spacing: Per-edge spacing applied to each position.
        replica_count: Number of adjacent positions (>= 1).
    """

    kind: Literal["slot"] = "slot"
    size: LayoutSize = Field(..., description="Size of each position")
    insets: Insets | None = Field(None, description="Content insets")
    edge_spacing: EdgeSpacing | None = Field(None, description="Per-edge spacing")
    replica_count: int = Field(
        default=1,
        ge=1,
        description="Number of identical adjacent positions",
    )

    model_config = {"frozen": True}


class Group(BaseModel):
    """Composite node arranging an ordered sequence of slots and groups.

    Attributes:
        size: Width and height of the group.
        insets: Content insets of the group.
        edge_spacing: Per-edge spacing of the group.
        direction: Layout axis for the children.
        inter_item_spacing: Spacing between consecutive children.
        children: Flattened children in written order.
    """

    kind: Literal["group"] = "group"
    size: LayoutSize = Field(..., description="Size of the group")
    insets: Insets | None = Field(None, description="Content insets")
    edge_spacing: EdgeSpacing | None = Field(None, description="Per-edge spacing")
    direction: Direction = Field(
        default=Direction.HORIZONTAL,
        description="Layout axis for the children",
    )
    inter_item_spacing: Spacing | None = Field(
        None, description="Spacing between consecutive children"
    )
    children: tuple[Union[Slot, Group], ...] = Field(
        default=(),
        description="Flattened child nodes, never fragments",
    )

    model_config = {"frozen": True}


class Fragment(BaseModel):
    """Transparent carrier for zero or more nodes produced by control flow."""

    kind: Literal["fragment"] = "fragment"
    items: tuple[Union[Slot, Group, Fragment], ...] = Field(
        default=(),
        description="Nodes in evaluation order, possibly nested fragments",
    )

    model_config = {"frozen": True}


Group.model_rebuild()
Fragment.model_rebuild()

LayoutNode = Union[Slot, Group, Fragment]
"""Any node a builder block can produce."""


def flatten(node: LayoutNode) -> list[Slot | Group]:
    """Expand nested fragments into one ordered list of real nodes.

    Args:
        node: Root of the (possibly fragment) tree.

    Returns:
        Slots and groups in evaluation order. An empty fragment yields [].

    Example:
        >>> flatten(Fragment(items=(a, Fragment(items=(b, c)))))
        [a, b, c]
    """
    match node:
        case Fragment(items=items):
            flat: list[Slot | Group] = []
            for item in items:
                flat.extend(flatten(item))
            return flat
        case Slot() | Group():
            return [node]
    raise TypeError(f"Cannot flatten {type(node).__name__}; expected a LayoutNode")


__all__ = [
    "Direction",
    "Slot",
    "Group",
    "Fragment",
    "LayoutNode",
    "flatten",
]
