"""Builder facade and fluent item/group builders."""

from .lib import (
    Block,
    BoxConfig,
    GroupBox,
    ItemBox,
    LayoutBuilder,
    choose_first,
    choose_second,
    combine,
    from_array,
    optional,
)

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
