"""
Base class for code generation backends.

Defines the interface that language-specific backends implement.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

import jinja2

from ... import __version__
from ..config import GeneratorConfig
from ..manifest import GeneratedFile, Manifest
from ..schema_ast.nodes import Model, Schema


class CodeBackend(ABC):
    """Abstract base class for code generation backends."""

    # Template directory name
    TEMPLATE_LANG: str = ""

    # File extension
    FILE_EXTENSION: str = ""

    def __init__(self, config: GeneratorConfig):
        """
        Initialize the backend.

        Args:
            config: Code generation configuration
        """
        self.config = config
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent.parent / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
            undefined=jinja2.StrictUndefined,
        )
        self.header_template = self.jinja_env.get_template(f"header.{self.FILE_EXTENSION}.jinja2")

    def render(self, template_name: str, context: dict[str, Any]) -> str:
        """Render a template, prefixed with the generation comment when enabled."""
        body = self.jinja_env.get_template(f"{template_name}.{self.FILE_EXTENSION}.jinja2").render(**context)
        sections = [body.rstrip()]
        if self.config.add_generation_comment:
            sections.insert(0, self.header_template.render(VERSION=__version__))
        return "\n\n".join(s for s in sections if s) + "\n"

    def emit(self, path: str, template_name: str, context: dict[str, Any]) -> GeneratedFile:
        return GeneratedFile.of(path, self.render(template_name, context))

    @abstractmethod
    def generate_type(self, model: Model) -> GeneratedFile:
        """
        Generate the type definition of one model.

        Args:
            model: The model to emit

        Returns:
            The type definition file
        """

    @abstractmethod
    def generate_service(self, model: Model) -> GeneratedFile:
        """Generate the CRUD service of one model."""

    @abstractmethod
    def generate_methods(self, model: Model) -> GeneratedFile:
        """Generate the search and relationship API of one model."""

    @abstractmethod
    def generate_aggregates(self, schema: Schema) -> Manifest:
        """
        Generate the files that span every model.

        Args:
            schema: The whole schema

        Returns:
            Index and utility files
        """
