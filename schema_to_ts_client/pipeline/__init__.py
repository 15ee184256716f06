"""
Pipeline - schema to TypeScript client generator.

The pipeline runs in three phases:

1. Phase 1 (Parser): Parse the schema document into Schema nodes
2. Phase 2 (Backend): Map types and names, render every file into a manifest
3. Phase 3 (Writer): Replace the output directory with the manifest
"""

from __future__ import annotations

from .config import GeneratorConfig
from .generator import PipelineGenerator
from .manifest import GeneratedFile, Manifest
from .writer import Materializer

__all__ = [
    "PipelineGenerator",
    "GeneratorConfig",
    "GeneratedFile",
    "Manifest",
    "Materializer",
]
