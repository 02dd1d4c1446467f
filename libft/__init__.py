"""C-style character, byte-buffer, string, conversion and printf helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "output", "strings", "transform", "printf"]