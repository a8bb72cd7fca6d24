"""Utility functions."""

from .icons import icon_from_file
from .paths import segment

__all__ = ["icon_from_file", "segment"]
