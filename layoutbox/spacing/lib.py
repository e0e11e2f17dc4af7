"""Spacing and inset values.

Spacing controls the gap between a box and its neighbours (per edge) or
between the items of a group. Insets shrink the content area of a box inside
its own frame. Both are plain values; the host engine decides how to apply
negative or oversized numbers.
"""

from enum import Enum

from pydantic import BaseModel, Field


class SpacingMode(str, Enum):
    """Fixed spacing is exact; flexible spacing is a minimum the engine may grow."""

    FIXED = "fixed"
    FLEXIBLE = "flexible"


class Spacing(BaseModel):
    """A single spacing value."""

    mode: SpacingMode = Field(..., description="Fixed or flexible")
    value: float = Field(..., description="Spacing in engine units")

    model_config = {"frozen": True}

    @classmethod
    def fixed(cls, value: float) -> "Spacing":
        return cls(mode=SpacingMode.FIXED, value=value)

    @classmethod
    def flexible(cls, value: float) -> "Spacing":
        return cls(mode=SpacingMode.FLEXIBLE, value=value)


class EdgeSpacing(BaseModel):
    """Spacing around the four edges of a box.

    Each edge is optional; an unset edge keeps the engine's default.

    Attributes:
        leading: Spacing before the leading edge.
        top: Spacing above the top edge.
        trailing: Spacing after the trailing edge.
        bottom: Spacing below the bottom edge.
    """

    leading: Spacing | None = Field(None, description="Leading edge spacing")
    top: Spacing | None = Field(None, description="Top edge spacing")
    trailing: Spacing | None = Field(None, description="Trailing edge spacing")
    bottom: Spacing | None = Field(None, description="Bottom edge spacing")

    model_config = {"frozen": True}

    def with_edge(self, edge: str, spacing: Spacing | None) -> "EdgeSpacing":
        """Copy with one edge replaced.

        Args:
            edge: One of "leading", "top", "trailing", "bottom".
            spacing: New value for that edge, or None to reset it.

        Raises:
            ValueError: If `edge` is not an edge name.
        """
        if edge not in EdgeSpacing.model_fields:
            raise ValueError(f"Unknown edge '{edge}'")
        return self.model_copy(update={edge: spacing})


class Insets(BaseModel):
    """Directional content insets in engine units."""

    top: float = Field(0.0, description="Top inset")
    leading: float = Field(0.0, description="Leading inset")
    bottom: float = Field(0.0, description="Bottom inset")
    trailing: float = Field(0.0, description="Trailing inset")

    model_config = {"frozen": True}

    @classmethod
    def uniform(cls, space: float) -> "Insets":
        """Same inset on all four edges."""
        return cls(top=space, leading=space, bottom=space, trailing=space)


def fixed(value: float) -> Spacing:
    return Spacing.fixed(value)


def flexible(value: float) -> Spacing:
    return Spacing.flexible(value)


__all__ = [
    "SpacingMode",
    "Spacing",
    "EdgeSpacing",
    "Insets",
    "fixed",
    "flexible",
]
