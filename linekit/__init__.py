"""Grapheme-aware line editing core: text segmentation, a cursor buffer, undo stack and clipboard."""

__version__ = "0.1.0"