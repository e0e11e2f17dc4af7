"""Sizing values for layout slots and groups.

A Dimension describes one axis of a box: a proportion of the parent's width
or height, a fixed length in the host engine's native units, or an estimate
the engine may refine after measuring content. No range checks are made here;
out-of-range values are passed to the engine unchanged.
"""

from enum import Enum

from pydantic import BaseModel, Field


class DimensionMode(str, Enum):
    """How a Dimension value is interpreted by the host engine."""

    FRACTIONAL_WIDTH = "fractional_width"
    FRACTIONAL_HEIGHT = "fractional_height"
    ABSOLUTE = "absolute"
    ESTIMATED = "estimated"


class Dimension(BaseModel):
    """A single sizing value along one axis.

    Attributes:
        mode: Interpretation of `value`.
        value: Proportion of the parent axis for fractional modes,
            a length in engine units otherwise.

    Example:
        >>> Dimension.fractional_width(0.5)
        Dimension(mode=<DimensionMode.FRACTIONAL_WIDTH: 'fractional_width'>, value=0.5)
    """

    mode: DimensionMode = Field(..., description="How the value is interpreted")
    value: float = Field(..., description="Proportion or length")

    model_config = {"frozen": True}

    @classmethod
    def fractional_width(cls, fraction: float) -> "Dimension":
        """Proportion of the parent's width."""
        return cls(mode=DimensionMode.FRACTIONAL_WIDTH, value=fraction)

    @classmethod
    def fractional_height(cls, fraction: float) -> "Dimension":
        """Proportion of the parent's height."""
        return cls(mode=DimensionMode.FRACTIONAL_HEIGHT, value=fraction)

    @classmethod
    def absolute(cls, length: float) -> "Dimension":
        """Fixed length in engine units."""
        return cls(mode=DimensionMode.ABSOLUTE, value=length)

    @classmethod
    def estimated(cls, length: float) -> "Dimension":
        """Initial estimate the engine may adjust after measuring."""
        return cls(mode=DimensionMode.ESTIMATED, value=length)


class LayoutSize(BaseModel):
    """Width and height of a slot or group."""

    width: Dimension = Field(..., description="Horizontal dimension")
    height: Dimension = Field(..., description="Vertical dimension")

    model_config = {"frozen": True}


# Shorthand constructors


def fractional_width(fraction: float) -> Dimension:
    return Dimension.fractional_width(fraction)


def fractional_height(fraction: float) -> Dimension:
    return Dimension.fractional_height(fraction)


def absolute(length: float) -> Dimension:
    return Dimension.absolute(length)


def estimated(length: float) -> Dimension:
    return Dimension.estimated(length)


def w(fraction: float) -> Dimension:
    """Shorthand for `fractional_width`."""
    return Dimension.fractional_width(fraction)


def h(fraction: float) -> Dimension:
    """Shorthand for `fractional_height`."""
    return Dimension.fractional_height(fraction)


__all__ = [
    "DimensionMode",
    "Dimension",
    "LayoutSize",
    "fractional_width",
    "fractional_height",
    "absolute",
    "estimated",
    "w",
    "h",
]
