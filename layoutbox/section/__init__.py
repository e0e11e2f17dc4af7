"""Section and layout assembly."""

from .lib import make_layout, make_section

__all__ = ["make_section", "make_layout"]
