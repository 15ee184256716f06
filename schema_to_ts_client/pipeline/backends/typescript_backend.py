"""
TypeScript backend.

Emits, per model, an interface, an axios CRUD service and a search/edge API
module, plus the index and utility files shared by all models.
"""

from __future__ import annotations

import logging
from typing import Any

from ...utils import (
    to_camel_case_with_first_lower,
    to_pascal_case,
    to_snake_case,
)
from ..analyzer.type_mapper import TypeKind, map_type, search_clauses
from ..manifest import GeneratedFile, Manifest
from ..schema_ast.nodes import Edge, EdgeDirection, Field, Model, Schema
from .base import CodeBackend

logger = logging.getLogger(__name__)


class TypeScriptBackend(CodeBackend):
    """Backend for TypeScript + axios clients."""

    TEMPLATE_LANG = "typescript"
    FILE_EXTENSION = "ts"

    # Output layout
    TYPES_DIR = "types"
    SERVICES_DIR = "services"
    METHODS_DIR = "methods"
    UTILS_DIR = "utils"

    def generate_type(self, model: Model) -> GeneratedFile:
        """types/<Model>.ts"""
        logger.debug("Generating interface for %s", model.name)
        context = {
            "MODEL_NAME": model.name,
            "REFERENCE_TYPES": self.referenced_types(model),
            "fields": [self._prepare_field_context(f) for f in model.fields],
        }
        return self.emit(f"{self.TYPES_DIR}/{model.name}.ts", "type", context)

    def generate_service(self, model: Model) -> GeneratedFile:
        """services/<Model>.ts"""
        logger.debug("Generating CRUD service for %s", model.name)
        context = {
            "MODEL_NAME": model.name,
            "CRUD_PATH": self.crud_path(model),
            "fields": [self._prepare_field_context(f) for f in model.fields],
        }
        return self.emit(f"{self.SERVICES_DIR}/{model.name}.ts", "service", context)

    def generate_methods(self, model: Model) -> GeneratedFile:
        """methods/<Model>.ts"""
        logger.debug("Generating API methods for %s (%d edges)", model.name, len(model.edges))
        edge_types = model.edge_target_types()
        context = {
            "MODEL_NAME": model.name,
            "API_PATH": self.api_path(model),
            "TYPE_IMPORTS": [model.name, *edge_types],
            "EDGE_TYPES": edge_types,
            "search_fields": [clause for f in model.fields for clause in self._prepare_search_context(f)],
            "edges": [self._prepare_edge_context(e) for e in model.edges],
        }
        return self.emit(f"{self.METHODS_DIR}/{model.name}.ts", "methods", context)

    def generate_aggregates(self, schema: Schema) -> Manifest:
        names = {"MODEL_NAMES": schema.model_names}
        return [
            self.emit(f"{self.TYPES_DIR}/index.ts", "types_index", names),
            self.emit("index.ts", "index", names),
            *self.generate_utils(),
        ]

    def generate_utils(self) -> Manifest:
        """The endpoint settings holder and axios factory; identical for every schema."""
        return [
            self.emit(f"{self.UTILS_DIR}/apiSettings.ts", "api_settings", {}),
            self.emit(f"{self.UTILS_DIR}/getAxiosInstance.ts", "get_axios_instance", {}),
            self.emit(f"{self.UTILS_DIR}/index.ts", "utils_index", {}),
        ]

    def crud_path(self, model: Model) -> str:
        return f"{self.config.crud_prefix}/{to_snake_case(model.name)}"

    def api_path(self, model: Model) -> str:
        return f"{self.config.api_prefix}/{to_snake_case(model.name)}"

    def referenced_types(self, model: Model) -> list[str]:
        """
        Other generated types named by the model's field tags.

        Args:
            model: The model whose fields are scanned

        Returns:
            Distinct type names in first-seen order, excluding the model itself
        """
        names: list[str] = []
        for field in model.fields:
            type_ref = map_type(field.type)
            # Only a bare identifier can be imported from a sibling module
            if type_ref.kind is not TypeKind.REFERENCE or not type_ref.ts_type.isidentifier():
                continue
            if type_ref.ts_type != model.name and type_ref.ts_type not in names:
                names.append(type_ref.ts_type)
        return names

    def _prepare_field_context(self, field: Field) -> dict[str, Any]:
        """
        Prepare the template context for a field.

        Args:
            field: The field definition

        Returns:
            Dictionary of template variables
        """
        type_ref = map_type(field.type)
        return {
            "prop": to_camel_case_with_first_lower(field.name),
            "wire": to_snake_case(field.name),
            "ts_type": type_ref.ts_type,
            "optional": field.optional,
            "is_date": type_ref.is_date,
            "is_date_array": type_ref.is_date_array,
        }

    def _prepare_search_context(self, field: Field) -> list[dict[str, str]]:
        prop = to_camel_case_with_first_lower(field.name)
        return [{"name": prop + clause.suffix, "ts_type": clause.ts_type} for clause in search_clauses(field.type)]

    def _prepare_edge_context(self, edge: Edge) -> dict[str, Any]:
        snake = to_snake_case(edge.name)
        return {
            "is_to": edge.direction is EdgeDirection.TO,
            "suffix": to_pascal_case(edge.name),
            "segment": snake,
            "target": edge.type,
            "param": f"{to_camel_case_with_first_lower(edge.name)}Id",
            "payload_key": f"{snake}_id",
        }
