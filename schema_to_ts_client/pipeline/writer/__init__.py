"""
Writer module.

Commits a generated manifest to the file system.
"""

from __future__ import annotations

from .materializer import Materializer

__all__ = [
    "Materializer",
]
