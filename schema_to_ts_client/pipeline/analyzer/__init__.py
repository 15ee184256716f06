"""
Analyzer module.

Contains the type mapping and search filter tables.
"""

from __future__ import annotations

from .type_mapper import (
    SearchClause,
    TypeKind,
    TypeRef,
    TypeTag,
    map_type,
    search_clauses,
)

__all__ = [
    "TypeTag",
    "TypeKind",
    "TypeRef",
    "SearchClause",
    "map_type",
    "search_clauses",
]
