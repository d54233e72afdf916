"""Character, byte-buffer, string, number conversion and printf helpers."""

__version__ = "0.1.0"

__all__ = ["chars", "memory", "output", "strings", "conversion", "printf"]