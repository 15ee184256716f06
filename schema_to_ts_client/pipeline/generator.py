"""
Pipeline generator.

Drives the backend over every model and assembles the aggregate files into
a single manifest. Generation is a pure function of the schema and config;
nothing is written here.
"""

from __future__ import annotations

import logging
from typing import Any

from .backends import CodeBackend, TypeScriptBackend
from .config import GeneratorConfig
from .manifest import Manifest
from .schema_ast import Schema, SchemaParser

logger = logging.getLogger(__name__)


class PipelineGenerator:
    """Generates the client sources for a schema."""

    def __init__(
        self,
        schema: Schema | dict[str, Any],
        config: GeneratorConfig | None = None,
        backend: CodeBackend | None = None,
    ):
        """
        Args:
            schema: A parsed Schema, or the raw schema document
            config: Generation options, defaults when omitted
            backend: Backend override, TypeScriptBackend when omitted
        """
        if not isinstance(schema, Schema):
            schema = SchemaParser().parse(schema)
        self.schema = schema
        self.config = config or GeneratorConfig()
        self.backend = backend or TypeScriptBackend(self.config)

    def generate(self) -> Manifest:
        """
        Generate every file of the client.

        Returns:
            Manifest ordered as: types, type index, entry point, utils,
            services, methods
        """
        models = self.schema.models

        logger.info("Generating interfaces...")
        interfaces = [self.backend.generate_type(model) for model in models]

        logger.info("Generating entry point and utils...")
        aggregates = self.backend.generate_aggregates(self.schema)

        logger.info("Generating CRUD...")
        services = [self.backend.generate_service(model) for model in models]

        logger.info("Generating methods...")
        methods = [self.backend.generate_methods(model) for model in models]

        manifest = [*interfaces, *aggregates, *services, *methods]
        logger.info("Generated %d files for %d models", len(manifest), len(models))
        return manifest
