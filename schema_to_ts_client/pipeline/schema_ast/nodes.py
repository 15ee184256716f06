"""
Schema node definitions.

These nodes hold the models, fields and edges exactly as declared in the
schema document. Nothing is resolved or validated here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class EdgeDirection(str, Enum):
    """Navigation direction of an edge."""

    TO = "to"  # owning side, supports connect/disconnect
    FROM = "from"  # target side, read-only

    @classmethod
    def parse(cls, value: str | None) -> EdgeDirection:
        """Anything other than ``"to"``, a missing direction included, is the read-only side."""
        return cls.TO if value == cls.TO.value else cls.FROM


@dataclass(frozen=True)
class Field:
    """A model field."""

    name: str  # Raw identifier, arbitrary casing
    type: str  # Type tag, or the name of another model
    optional: bool = False


@dataclass(frozen=True)
class Edge:
    """A relationship from one model to another."""

    name: str
    type: str  # Related model name, not checked against the schema
    direction: EdgeDirection = EdgeDirection.FROM


@dataclass(frozen=True)
class Model:
    """A schema-declared entity type."""

    name: str
    fields: tuple[Field, ...] = field(default_factory=tuple)
    edges: tuple[Edge, ...] = field(default_factory=tuple)

    def edge_target_types(self) -> list[str]:
        """Distinct related model names, in first-seen order, excluding this model."""
        seen: list[str] = []
        for edge in self.edges:
            if edge.type != self.name and edge.type not in seen:
                seen.append(edge.type)
        return seen


@dataclass(frozen=True)
class Schema:
    """Root of the generation input."""

    models: tuple[Model, ...] = field(default_factory=tuple)

    @property
    def model_names(self) -> list[str]:
        return [model.name for model in self.models]
