"""
Configuration for the client generator pipeline.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from ..exceptions import ConfigError


@dataclass
class GeneratorConfig:
    """Configuration options for code generation."""

    # Add a "generated, do not edit" comment at the top of every file
    add_generation_comment: bool = True

    # Prefix of the plain CRUD endpoints
    crud_prefix: str = "/crud"

    # Prefix of the search and edge endpoints
    api_prefix: str = "/api"

    # Timeout in seconds when fetching the schema
    schema_timeout: float = 30.0

    @staticmethod
    def from_dict(d: dict) -> GeneratorConfig:
        """Create a config from a dictionary."""
        config = GeneratorConfig()
        for k, v in d.items():
            if hasattr(config, k):
                setattr(config, k, v)
        return config

    @staticmethod
    def from_file(path: str | Path) -> GeneratorConfig:
        """
        Create a config from a JSON file.

        Raises:
            ConfigError: If the file cannot be read or does not hold a JSON object
        """
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in config file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Error reading config file {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must hold a JSON object")
        return GeneratorConfig.from_dict(data)

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "add_generation_comment": self.add_generation_comment,
            "crud_prefix": self.crud_prefix,
            "api_prefix": self.api_prefix,
            "schema_timeout": self.schema_timeout,
        }
