"""Schema to TypeScript client generator

Generates a typed TypeScript (axios) REST client from a schema of models,
fields and edges: interfaces, CRUD services, and search/relationship APIs.
"""

__version__ = "1.0.0"

from .exceptions import ConfigError, SchemaLoadError, SchemaParseError, SchemaToTsClientError
from .loader import load_schema
from .pipeline import (
    GeneratedFile,
    GeneratorConfig,
    Manifest,
    Materializer,
    PipelineGenerator,
)

__all__ = [
    "PipelineGenerator",
    "GeneratorConfig",
    "GeneratedFile",
    "Manifest",
    "Materializer",
    "load_schema",
    "SchemaToTsClientError",
    "SchemaLoadError",
    "SchemaParseError",
    "ConfigError",
]
