"""Utility exports."""
from .text import to_bytes, to_text

__all__ = ["to_bytes", "to_text"]
