"""Descriptor engine emitting JSON-compatible layout dicts."""

from layoutbox.engine.descriptor.lib import Descriptor, DescriptorEngine, to_json

__all__ = [
    "Descriptor",
    "DescriptorEngine",
    "to_json",
]
