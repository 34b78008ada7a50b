"""Utility functions for loading schema documents and writing artifacts.

This module provides functions for loading GraphQL SDL from files and URLs
with proper error handling, and for writing generated files to disk.
"""

from pathlib import Path
from typing import Mapping
from urllib.parse import urlparse

import requests

from .logging_config import get_logger

logger = get_logger(__name__)

SCHEMA_SUFFIXES = {".graphql", ".graphqls", ".gql"}


class SchemaLoaderError(Exception):
    """Custom exception for schema loading errors."""

    pass


def load_schema_from_file(file_path: str | Path) -> tuple[str, str]:
    """Load schema text from a local file.

    Args:
        file_path: Path to the schema file.

    Returns:
        Tuple of (source description, schema text).

    Raises:
        FileNotFoundError: If file doesn't exist.
        SchemaLoaderError: If file cannot be read.
    """
    file_path = Path(file_path)
    logger.debug(f"Attempting to load schema from file: {file_path}")

    if not file_path.exists():
        logger.error(f"File not found: {file_path}")
        raise FileNotFoundError(f"File not found: {file_path}")

    if file_path.suffix.lower() not in SCHEMA_SUFFIXES:
        logger.warning(f"File does not have a GraphQL extension: {file_path}")

    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error(f"Error reading file {file_path}: {e}", exc_info=True)
        raise SchemaLoaderError(f"Error reading file {file_path}: {e}") from e

    logger.info(f"Loaded schema from {file_path}")
    return str(file_path), text


def load_schema_from_url(url: str, timeout: int = 30) -> tuple[str, str]:
    """Load schema text from a URL.

    Args:
        url: URL to fetch the SDL document from.
        timeout: Request timeout in seconds.

    Returns:
        Tuple of (source description, schema text).

    Raises:
        SchemaLoaderError: If URL is invalid or the request fails.
    """
    logger.debug(f"Attempting to load schema from URL: {url}")

    parsed_url = urlparse(url)
    if not all([parsed_url.scheme, parsed_url.netloc]):
        logger.error(f"Invalid URL format: {url}")
        raise SchemaLoaderError(f"Invalid URL: {url}")

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.Timeout as e:
        logger.error(f"Request timeout for URL: {url}")
        raise SchemaLoaderError(f"Request timeout for URL: {url}") from e
    except requests.exceptions.ConnectionError as e:
        logger.error(f"Connection error for URL {url}: {e}")
        raise SchemaLoaderError(f"Connection error for URL: {url}") from e
    except requests.exceptions.HTTPError as e:
        logger.error(f"HTTP error {e.response.status_code} for URL: {url}")
        raise SchemaLoaderError(
            f"HTTP error {e.response.status_code} for URL: {url}"
        ) from e
    except requests.exceptions.RequestException as e:
        logger.error(f"Request error for URL {url}: {e}", exc_info=True)
        raise SchemaLoaderError(f"Request error for URL {url}: {e}") from e

    logger.info(f"Loaded schema from {url}")
    return url, response.text


def load_schema(
    file_path: str | Path | None = None,
    url: str | None = None,
    timeout: int = 30,
) -> tuple[str, str]:
    """Load schema text from either a file or URL.

    Args:
        file_path: Path to local schema file (mutually exclusive with url).
        url: URL to fetch the schema from (mutually exclusive with file_path).
        timeout: Request timeout in seconds (only used for URLs).

    Returns:
        Tuple of (source description, schema text).

    Raises:
        SchemaLoaderError: If neither or both parameters are provided, or loading fails.
        FileNotFoundError: If file doesn't exist.
    """
    if not file_path and not url:
        raise SchemaLoaderError("Either file_path or url must be provided")

    if file_path and url:
        raise SchemaLoaderError("Cannot specify both file_path and url")

    if file_path:
        return load_schema_from_file(file_path)
    return load_schema_from_url(url, timeout)


def write_artifacts(files: Mapping[str, str], output_dir: str | Path) -> list[Path]:
    """Write generated files into a directory, creating it if needed.

    Returns:
        Paths of the written files, in mapping order.
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    written = []
    for file_name, code in files.items():
        path = output_dir / file_name
        path.write_text(code, encoding="utf-8")
        logger.debug(f"Wrote {path}")
        written.append(path)

    return written
