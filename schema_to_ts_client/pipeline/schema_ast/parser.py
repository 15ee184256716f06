"""
Schema document parser.

Phase 1 of the pipeline: turn the decoded JSON document into Schema nodes.
Only the document shape is checked; type tags and edge targets are kept
as-is for later phases.
"""

from __future__ import annotations

import logging
from typing import Any

from ...exceptions import SchemaParseError
from .nodes import Edge, EdgeDirection, Field, Model, Schema

logger = logging.getLogger(__name__)


class SchemaParser:
    """Parses a schema document into a :class:`Schema`."""

    def parse(self, document: Any) -> Schema:
        """
        Parse a schema document.

        Args:
            document: The decoded JSON document, ``{"models": [...]}``

        Returns:
            Schema with one Model per entry, in document order

        Raises:
            SchemaParseError: If the document or one of its entries is malformed
        """
        if not isinstance(document, dict):
            raise SchemaParseError(f"Schema document must be an object, got {type(document).__name__}")

        raw_models = document.get("models")
        if not isinstance(raw_models, list):
            raise SchemaParseError("Schema document must have a 'models' array")

        models = tuple(self._parse_model(raw, f"models[{i}]") for i, raw in enumerate(raw_models))
        logger.debug("Parsed %d models", len(models))
        return Schema(models=models)

    def _parse_model(self, raw: Any, path: str) -> Model:
        self._require_object(raw, path)
        name = self._require_key(raw, "model_name", path)
        fields = tuple(
            self._parse_field(f, f"{path}.fields[{i}]") for i, f in enumerate(self._optional_list(raw, "fields", path))
        )
        edges = tuple(
            self._parse_edge(e, f"{path}.edges[{i}]") for i, e in enumerate(self._optional_list(raw, "edges", path))
        )
        return Model(name=name, fields=fields, edges=edges)

    def _parse_field(self, raw: Any, path: str) -> Field:
        self._require_object(raw, path)
        return Field(
            name=self._require_key(raw, "field_name", path),
            type=self._require_key(raw, "type", path, allow_empty=True),
            optional=bool(raw.get("is_optional", False)),
        )

    def _parse_edge(self, raw: Any, path: str) -> Edge:
        self._require_object(raw, path)
        return Edge(
            name=self._require_key(raw, "edge_name", path),
            type=self._require_key(raw, "type", path),
            direction=EdgeDirection.parse(raw.get("direction")),
        )

    @staticmethod
    def _require_object(raw: Any, path: str) -> None:
        if not isinstance(raw, dict):
            raise SchemaParseError(f"{path}: expected an object, got {type(raw).__name__}")

    @staticmethod
    def _require_key(raw: dict[str, Any], key: str, path: str, allow_empty: bool = False) -> str:
        value = raw.get(key)
        if not isinstance(value, str) or not (value or allow_empty):
            raise SchemaParseError(f"{path}: missing or empty '{key}'")
        return value

    @staticmethod
    def _optional_list(raw: dict[str, Any], key: str, path: str) -> list[Any]:
        # null and missing both mean "none declared"
        value = raw.get(key)
        if value is None:
            return []
        if not isinstance(value, list):
            raise SchemaParseError(f"{path}: '{key}' must be an array")
        return value
