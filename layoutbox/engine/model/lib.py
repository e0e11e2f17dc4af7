"""Reference engine producing frozen pydantic host objects.

The object model follows the shape of a compositional collection layout:
items carry a size, content insets and edge spacing; groups add a direction,
inter-item spacing and their subitems; a section wraps one group and a layout
wraps sections. These objects are what tests and non-native callers inspect.

The engine supports the repeat primitive: a repeated group stores a single
subitem plus `repeat_count`, and `effective_subitems` expands it.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Literal, Union

from pydantic import BaseModel, Field

from layoutbox.dimension import LayoutSize
from layoutbox.engine.lib import LayoutEngine, register_engine
from layoutbox.node import Direction
from layoutbox.spacing import EdgeSpacing, Insets, Spacing


class Item(BaseModel):
    """A configured leaf item."""

    kind: Literal["item"] = "item"
    layout_size: LayoutSize
    content_insets: Insets = Field(default_factory=Insets)
    edge_spacing: EdgeSpacing | None = None

    model_config = {"frozen": True}


class ItemGroup(BaseModel):
    """A configured group of items and nested groups.

    Attributes:
        direction: Layout axis.
        subitems: Explicit subitems, or the single repeated item.
        repeat_count: Copies of `subitems[0]` when built by the repeat
            primitive, None for an explicit list.
    """

    kind: Literal["group"] = "group"
    layout_size: LayoutSize
    direction: Direction
    subitems: tuple[Union[Item, ItemGroup], ...]
    repeat_count: int | None = None
    content_insets: Insets = Field(default_factory=Insets)
    edge_spacing: EdgeSpacing | None = None
    inter_item_spacing: Spacing | None = None

    model_config = {"frozen": True}

    @property
    def effective_subitems(self) -> list[Item | ItemGroup]:
        """Subitems as laid out, with repeated groups expanded."""
        if self.repeat_count is not None:
            return [self.subitems[0]] * self.repeat_count
        return list(self.subitems)


class Section(BaseModel):
    """A section holding one top-level group."""

    group: ItemGroup
    content_insets: Insets = Field(default_factory=Insets)
    inter_group_spacing: float = 0.0

    model_config = {"frozen": True}


class CompositionalLayout(BaseModel):
    """Top-level layout made of sections."""

    sections: tuple[Section, ...]

    model_config = {"frozen": True}


ItemGroup.model_rebuild()


@register_engine
class ModelEngine(LayoutEngine):
    """Builds Item / ItemGroup / Section / CompositionalLayout models."""

    @property
    def name(self) -> str:
        return "model"

    @property
    def supports_repeated_items(self) -> bool:
        return True

    def make_item(self, size: LayoutSize) -> Item:
        return Item(layout_size=size)

    def make_group(
        self,
        direction: Direction,
        size: LayoutSize,
        subitems: Sequence[Item | ItemGroup],
    ) -> ItemGroup:
        return ItemGroup(layout_size=size, direction=direction, subitems=tuple(subitems))

    def make_repeated_group(
        self, direction: Direction, size: LayoutSize, item: Item, count: int
    ) -> ItemGroup:
        return ItemGroup(
            layout_size=size,
            direction=direction,
            subitems=(item,),
            repeat_count=count,
        )

    def with_content_insets(self, obj: Item | ItemGroup, insets: Insets):
        return obj.model_copy(update={"content_insets": insets})

    def with_edge_spacing(self, obj: Item | ItemGroup, edges: EdgeSpacing):
        return obj.model_copy(update={"edge_spacing": edges})

    def with_inter_item_spacing(self, group: ItemGroup, spacing: Spacing) -> ItemGroup:
        return group.model_copy(update={"inter_item_spacing": spacing})

    def make_section(
        self,
        group: ItemGroup,
        insets: Insets | None = None,
        inter_group_spacing: float | None = None,
    ) -> Section:
        return Section(
            group=group,
            content_insets=insets or Insets(),
            inter_group_spacing=inter_group_spacing or 0.0,
        )

    def make_layout(self, sections: Sequence[Section]) -> CompositionalLayout:
        return CompositionalLayout(sections=tuple(sections))


__all__ = [
    "Item",
    "ItemGroup",
    "Section",
    "CompositionalLayout",
    "ModelEngine",
]
