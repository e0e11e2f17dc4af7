"""Composition of node trees into host engine objects."""

from .lib import Composer, ComposerConfig, CompositionError, compose

__all__ = [
    "CompositionError",
    "ComposerConfig",
    "Composer",
    "compose",
]
