"""Descriptor engine for native host bridges.

Emits plain JSON-compatible dicts using the camelCase vocabulary of
compositional collection layouts (layoutSize, widthDimension, contentInsets,
edgeSpacing, interItemSpacing, subitems). A native host can rebuild its own
layout objects from the descriptor without knowing about layoutbox.

Example output:
    ```json
    {
      "type": "group",
      "direction": "vertical",
      "layoutSize": {
        "widthDimension": {"kind": "absolute", "value": 110.0},
        "heightDimension": {"kind": "absolute", "value": 205.0}
      },
      "subitems": [{"type": "item", "layoutSize": {...}}],
      "interItemSpacing": {"kind": "fixed", "value": 5.0}
    }
    ```

The engine has no repeat primitive; repeated slots are always written out
as explicit subitems.
"""

import json
from collections.abc import Sequence
from typing import Any

from layoutbox.dimension import Dimension, DimensionMode, LayoutSize
from layoutbox.engine.lib import LayoutEngine, register_engine
from layoutbox.node import Direction
from layoutbox.spacing import EdgeSpacing, Insets, Spacing, SpacingMode

Descriptor = dict[str, Any]

DIMENSION_KINDS: dict[DimensionMode, str] = {
    DimensionMode.FRACTIONAL_WIDTH: "fractionalWidth",
    DimensionMode.FRACTIONAL_HEIGHT: "fractionalHeight",
    DimensionMode.ABSOLUTE: "absolute",
    DimensionMode.ESTIMATED: "estimated",
}

SPACING_KINDS: dict[SpacingMode, str] = {
    SpacingMode.FIXED: "fixed",
    SpacingMode.FLEXIBLE: "flexible",
}


def _dimension(dimension: Dimension) -> Descriptor:
    return {"kind": DIMENSION_KINDS[dimension.mode], "value": dimension.value}


def _size(size: LayoutSize) -> Descriptor:
    return {
        "widthDimension": _dimension(size.width),
        "heightDimension": _dimension(size.height),
    }


def _spacing(spacing: Spacing | None) -> Descriptor | None:
    if spacing is None:
        return None
    return {"kind": SPACING_KINDS[spacing.mode], "value": spacing.value}


def _insets(insets: Insets) -> Descriptor:
    return {
        "top": insets.top,
        "leading": insets.leading,
        "bottom": insets.bottom,
        "trailing": insets.trailing,
    }


@register_engine
class DescriptorEngine(LayoutEngine):
    """Builds JSON-compatible layout descriptors."""

    @property
    def name(self) -> str:
        return "descriptor"

    def make_item(self, size: LayoutSize) -> Descriptor:
        return {"type": "item", "layoutSize": _size(size)}

    def make_group(
        self, direction: Direction, size: LayoutSize, subitems: Sequence[Descriptor]
    ) -> Descriptor:
        return {
            "type": "group",
            "direction": direction.value,
            "layoutSize": _size(size),
            "subitems": list(subitems),
        }

    def with_content_insets(self, obj: Descriptor, insets: Insets) -> Descriptor:
        return {**obj, "contentInsets": _insets(insets)}

    def with_edge_spacing(self, obj: Descriptor, edges: EdgeSpacing) -> Descriptor:
        return {
            **obj,
            "edgeSpacing": {
                "leading": _spacing(edges.leading),
                "top": _spacing(edges.top),
                "trailing": _spacing(edges.trailing),
                "bottom": _spacing(edges.bottom),
            },
        }

    def with_inter_item_spacing(self, group: Descriptor, spacing: Spacing) -> Descriptor:
        return {**group, "interItemSpacing": _spacing(spacing)}

    def make_section(
        self,
        group: Descriptor,
        insets: Insets | None = None,
        inter_group_spacing: float | None = None,
    ) -> Descriptor:
        section: Descriptor = {"type": "section", "group": group}
        if insets is not None:
            section["contentInsets"] = _insets(insets)
        if inter_group_spacing is not None:
            section["interGroupSpacing"] = inter_group_spacing
        return section

    def make_layout(self, sections: Sequence[Descriptor]) -> Descriptor:
        return {"type": "layout", "sections": list(sections)}


def to_json(descriptor: Descriptor, indent: int | None = 2) -> str:
    """Serialize a descriptor for the host bridge."""
    return json.dumps(descriptor, indent=indent)


__all__ = [
    "Descriptor",
    "DescriptorEngine",
    "to_json",
]
