"""
Type mapping from schema type tags to TypeScript.

The tag vocabulary is closed. Any tag outside it is treated as a reference
to another generated type and passed through unchanged; a typo therefore
only shows up when the generated client is compiled.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TypeTag(str, Enum):
    """Type tags understood by the mapper."""

    INT = "int"
    INT_ARRAY = "[]int"
    STRING = "string"
    STRING_ARRAY = "[]string"
    BOOL = "bool"
    BOOL_ARRAY = "[]bool"
    FLOAT = "float"
    FLOAT_ARRAY = "[]float"
    TIME = "time.Time"
    TIME_ARRAY = "[]time.Time"

    @classmethod
    def lookup(cls, tag: str) -> TypeTag | None:
        try:
            return cls(tag)
        except ValueError:
            return None


class TypeKind(Enum):
    """Kind of a mapped type."""

    PRIMITIVE = "primitive"  # number, string, boolean, Date
    ARRAY = "array"  # number[], string[], ...
    REFERENCE = "reference"  # Anything else, assumed to name a generated type


@dataclass(frozen=True)
class TypeRef:
    """A mapped type."""

    kind: TypeKind
    ts_type: str
    tag: TypeTag | None = None  # None for references

    @property
    def is_date(self) -> bool:
        return self.tag is TypeTag.TIME

    @property
    def is_date_array(self) -> bool:
        return self.tag is TypeTag.TIME_ARRAY


# Tag -> (kind, TypeScript type)
_TYPE_MAP: dict[TypeTag, tuple[TypeKind, str]] = {
    TypeTag.INT: (TypeKind.PRIMITIVE, "number"),
    TypeTag.INT_ARRAY: (TypeKind.ARRAY, "number[]"),
    TypeTag.STRING: (TypeKind.PRIMITIVE, "string"),
    TypeTag.STRING_ARRAY: (TypeKind.ARRAY, "string[]"),
    TypeTag.BOOL: (TypeKind.PRIMITIVE, "boolean"),
    TypeTag.BOOL_ARRAY: (TypeKind.ARRAY, "boolean[]"),
    TypeTag.FLOAT: (TypeKind.PRIMITIVE, "number"),
    TypeTag.FLOAT_ARRAY: (TypeKind.ARRAY, "number[]"),
    TypeTag.TIME: (TypeKind.PRIMITIVE, "Date"),
    TypeTag.TIME_ARRAY: (TypeKind.ARRAY, "Date[]"),
}


def map_type(tag: str) -> TypeRef:
    """
    Map a schema type tag to a TypeScript type.

    Args:
        tag: The schema type tag, e.g. ``"[]int"`` or ``"Team"``

    Returns:
        TypeRef for known tags, or a REFERENCE carrying the tag unchanged
    """
    known = TypeTag.lookup(tag)
    if known is None:
        return TypeRef(kind=TypeKind.REFERENCE, ts_type=tag)
    kind, ts_type = _TYPE_MAP[known]
    return TypeRef(kind=kind, ts_type=ts_type, tag=known)


@dataclass(frozen=True)
class SearchClause:
    """One optional property of a generated search input."""

    suffix: str  # Appended to the camelCase field name ("" for exact match)
    ts_type: str


# Filters offered by the search endpoint, per tag. Tags not listed get no filters.
_SEARCH_CLAUSES: dict[TypeTag, tuple[SearchClause, ...]] = {
    TypeTag.STRING: (
        SearchClause("", "string"),
        SearchClause("Contains", "string"),
    ),
    TypeTag.STRING_ARRAY: (
        SearchClause("", "string[]"),
        SearchClause("OneContains", "string[]"),
        SearchClause("AllContains", "string[]"),
        SearchClause("NoneContains", "string[]"),
    ),
    TypeTag.INT: (
        SearchClause("", "number"),
        SearchClause("Contains", "number"),
    ),
    TypeTag.FLOAT: (
        SearchClause("", "number"),
        SearchClause("Contains", "number"),
    ),
    TypeTag.INT_ARRAY: (
        SearchClause("", "number[]"),
        SearchClause("Contains", "number[]"),
    ),
    TypeTag.BOOL: (SearchClause("", "boolean"),),
    TypeTag.TIME: (
        SearchClause("", "Date"),
        SearchClause("Contains", "Date"),
        SearchClause("Start", "Date"),
        SearchClause("End", "Date"),
    ),
}


def search_clauses(tag: str) -> tuple[SearchClause, ...]:
    """Search filters available for a field with the given type tag."""
    known = TypeTag.lookup(tag)
    if known is None:
        return ()
    return _SEARCH_CLAUSES.get(known, ())
