"""
Schema AST module.

Contains the node definitions and parser for the model/edge schema.
"""

from __future__ import annotations

from .nodes import Edge, EdgeDirection, Field, Model, Schema
from .parser import SchemaParser

__all__ = [
    "Schema",
    "Model",
    "Field",
    "Edge",
    "EdgeDirection",
    "SchemaParser",
]
