"""Dimension and size values with shorthand constructors."""

from .lib import (
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

__all__ = [
    "Dimension",
    "DimensionMode",
    "LayoutSize",
    "fractional_width",
    "fractional_height",
    "absolute",
    "estimated",
    "w",
    "h",
]
