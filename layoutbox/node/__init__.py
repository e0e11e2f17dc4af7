"""Layout node model (Slot, Group, Fragment) and flattening."""

from .lib import Direction, Fragment, Group, LayoutNode, Slot, flatten

__all__ = [
    "Direction",
    "Slot",
    "Group",
    "Fragment",
    "LayoutNode",
    "flatten",
]
