"""
Exceptions raised before any file is written.
"""


class SchemaToTsClientError(Exception):
    """Base class for generator errors."""

    pass


class SchemaLoadError(SchemaToTsClientError):
    """Raised when the schema document cannot be fetched or decoded.

    This covers transport failures, non-2xx responses, missing files
    and bodies that are not valid JSON.
    """

    pass


class SchemaParseError(SchemaToTsClientError):
    """Raised when the schema document does not have the expected shape."""

    pass


class ConfigError(SchemaToTsClientError):
    """Raised when the --config file cannot be read or is not a JSON object."""

    pass
