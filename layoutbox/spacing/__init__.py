"""Spacing, edge spacing and inset values."""

from .lib import EdgeSpacing, Insets, Spacing, SpacingMode, fixed, flexible

__all__ = [
    "SpacingMode",
    "Spacing",
    "EdgeSpacing",
    "Insets",
    "fixed",
    "flexible",
]
