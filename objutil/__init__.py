"""Key-normalising and thread-safe maps and sets, and null checks."""

__version__ = "0.1.0"
__all__ = ["maps", "null", "sets"]