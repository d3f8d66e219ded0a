"""Utility functions for loading serialized syntax trees.

This module provides functions for loading expansion requests from JSON
files or streams with proper error handling and validation.
"""

import json
import sys
from pathlib import Path
from typing import IO, Any

from .codegen.core.syntax import ExpansionRequest, SyntaxTreeError, request_from_dict
from .logging_config import get_logger

logger = get_logger(__name__)


class JSONLoaderError(Exception):
    """Custom exception for JSON loading errors."""

    pass


def load_json_from_file(file_path: str | Path) -> tuple[str, Any]:
    """Load JSON data from a local file.

    Args:
        file_path: Path to the JSON file.

    Returns:
        Tuple of (source description, parsed JSON data).

    Raises:
        FileNotFoundError: If file doesn't exist.
        JSONLoaderError: If file cannot be read or JSON is invalid.
    """
    file_path = Path(file_path)
    logger.debug(f"Attempting to load JSON from file: {file_path}")

    if not file_path.exists():
        logger.error(f"File not found: {file_path}")
        raise FileNotFoundError(f"File not found: {file_path}")

    if file_path.suffix.lower() != ".json":
        logger.warning(f"File does not have .json extension: {file_path}")

    try:
        with file_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
        logger.info(f"Successfully loaded JSON from {file_path}")
        return str(file_path), data
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in file {file_path}: {e}")
        raise JSONLoaderError(f"Invalid JSON in file {file_path}: {e}") from e
    except OSError as e:
        logger.error(f"Error reading file {file_path}: {e}", exc_info=True)
        raise JSONLoaderError(f"Error reading file {file_path}: {e}") from e


def load_json_from_stream(stream: IO[str] | None = None) -> tuple[str, Any]:
    """Load JSON data from a text stream (standard input by default).

    Raises:
        JSONLoaderError: If the stream does not contain valid JSON.
    """
    stream = stream if stream is not None else sys.stdin
    try:
        data = json.load(stream)
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON on input stream: {e}")
        raise JSONLoaderError(f"Invalid JSON on input stream: {e}") from e
    return "<stdin>", data


def load_expansion_request(
    file_path: str | Path | None = None,
    stream: IO[str] | None = None,
    default_attribute: str | None = None,
) -> ExpansionRequest:
    """Load an attribute and its declaration from JSON.

    Args:
        file_path: Path to the JSON file; standard input (or ``stream``) when None.
        stream: Stream to read when no path is given.
        default_attribute: Macro name used when the JSON names no attribute.

    Returns:
        The expansion request, with ``source`` set to where it came from.

    Raises:
        FileNotFoundError: If file doesn't exist.
        JSONLoaderError: If the JSON is invalid or is not a valid syntax tree.
    """
    if file_path is not None:
        source, data = load_json_from_file(file_path)
    else:
        source, data = load_json_from_stream(stream)

    try:
        request = request_from_dict(data, default_attribute=default_attribute)
    except SyntaxTreeError as e:
        logger.error(f"Invalid syntax tree in {source}: {e}")
        raise JSONLoaderError(f"Invalid syntax tree in {source}: {e}") from e

    request.source = source
    return request
