"""Search functions for NUL-terminated byte strings, in the search module."""

__version__ = "0.1.0"
__all__ = ["search"]