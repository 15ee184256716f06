"""Schema acquisition.

The schema document can come from an HTTP(S) URL, from an HTTP server
listening on a unix-domain socket, or from a local JSON file.
"""

import json
import logging
from pathlib import Path
from typing import Any

import httpx

from .exceptions import SchemaLoadError

logger = logging.getLogger(__name__)

DEFAULT_SCHEMA_SOURCE = "http://localhost:8080/static/schema.json"

UNIX_PREFIX = "unix:"

# Host sent in requests over a unix socket; only the path matters
_UNIX_BASE_URL = "http://localhost"


def parse_unix_source(source: str) -> tuple[str, str]:
    """Split ``unix:<socket_path>:<request_path>`` into its two parts.

    Examples:
        "unix:/run/api.sock:/static/schema.json" -> ("/run/api.sock", "/static/schema.json")
        "unix:/run/api.sock" -> ("/run/api.sock", "/")

    Raises:
        SchemaLoadError: If the socket path is empty.
    """
    socket_path, _, request_path = source[len(UNIX_PREFIX) :].partition(":")
    if not socket_path:
        raise SchemaLoadError(f"Invalid unix socket source: {source}")
    return socket_path, request_path or "/"


def load_schema(
    source: str = DEFAULT_SCHEMA_SOURCE,
    timeout: float = 30.0,
    transport: httpx.BaseTransport | None = None,
) -> Any:
    """Load the schema document from a URL, unix socket or file.

    Args:
        source: ``http(s)://...``, ``unix:<socket>:<path>`` or a file path.
        timeout: Request timeout in seconds.
        transport: httpx transport override, used instead of the default
            network or unix socket transport.

    Returns:
        The decoded JSON document.

    Raises:
        SchemaLoadError: If the document cannot be fetched or decoded.
    """
    if source.startswith(UNIX_PREFIX):
        socket_path, request_path = parse_unix_source(source)
        transport = transport or httpx.HTTPTransport(uds=socket_path)
        return _fetch(request_path, timeout, transport=transport, base_url=_UNIX_BASE_URL)
    if source.startswith(("http://", "https://")):
        return _fetch(source, timeout, transport=transport)
    return load_schema_from_file(source)


def _fetch(
    url: str,
    timeout: float,
    transport: httpx.BaseTransport | None = None,
    base_url: str = "",
) -> Any:
    logger.info("Fetching schema from %s%s", base_url, url)
    try:
        with httpx.Client(transport=transport, base_url=base_url, timeout=timeout) as client:
            response = client.get(url)
            response.raise_for_status()
            data = response.json()
    except httpx.TimeoutException as e:
        raise SchemaLoadError(f"Timed out fetching schema from {url}") from e
    except httpx.HTTPStatusError as e:
        raise SchemaLoadError(f"Schema request failed with HTTP {e.response.status_code}: {url}") from e
    except httpx.HTTPError as e:
        raise SchemaLoadError(f"Could not fetch schema from {url}: {e}") from e
    except json.JSONDecodeError as e:
        raise SchemaLoadError(f"Schema response from {url} is not valid JSON: {e}") from e
    logger.debug("Fetched schema from %s", url)
    return data


def load_schema_from_file(path: str | Path) -> Any:
    """Load the schema document from a local JSON file."""
    path = Path(path)
    logger.info("Loading schema from %s", path)
    try:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as e:
        raise SchemaLoadError(f"Schema file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise SchemaLoadError(f"Invalid JSON in schema file {path}: {e}") from e
    except OSError as e:
        raise SchemaLoadError(f"Error reading schema file {path}: {e}") from e
