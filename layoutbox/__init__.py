"""layoutbox: declarative compositional layout trees.

Describe rows and columns of sized boxes with ordinary Python control flow
and lower them into the objects of a host layout engine.
"""

from layoutbox.builder import (
    GroupBox,
    ItemBox,
    LayoutBuilder,
    choose_first,
    choose_second,
    combine,
    from_array,
    optional,
)
from layoutbox.compose import Composer, ComposerConfig, CompositionError, compose
from layoutbox.dimension import (
    Dimension,
    DimensionMode,
    LayoutSize,
    absolute,
    estimated,
    fractional_height,
    fractional_width,
    h,
    w,
)
from layoutbox.engine import LayoutEngine, get_engine, list_engines, register_engine
from layoutbox.node import Direction, Fragment, Group, LayoutNode, Slot, flatten
from layoutbox.section import make_layout, make_section
from layoutbox.spacing import EdgeSpacing, Insets, Spacing, SpacingMode, fixed, flexible

__all__ = [
    # Values
    "Dimension",
    "DimensionMode",
    "LayoutSize",
    "fractional_width",
    "fractional_height",
    "absolute",
    "estimated",
    "w",
    "h",
    "Spacing",
    "SpacingMode",
    "EdgeSpacing",
    "Insets",
    "fixed",
    "flexible",
    # Nodes
    "Direction",
    "Slot",
    "Group",
    "Fragment",
    "LayoutNode",
    "flatten",
    # Builders
    "LayoutBuilder",
    "combine",
    "choose_first",
    "choose_second",
    "optional",
    "from_array",
    "ItemBox",
    "GroupBox",
    # Composition
    "Composer",
    "ComposerConfig",
    "CompositionError",
    "compose",
    # Engines
    "LayoutEngine",
    "get_engine",
    "list_engines",
    "register_engine",
    # Sections
    "make_section",
    "make_layout",
]
