"""Reference engine with pydantic host objects."""

from layoutbox.engine.model.lib import (
    CompositionalLayout,
    Item,
    ItemGroup,
    ModelEngine,
    Section,
)

__all__ = [
    "Item",
    "ItemGroup",
    "Section",
    "CompositionalLayout",
    "ModelEngine",
]
