"""Loading JSON model descriptions from disk or over HTTP.

Both loaders return the parsed document together with a short description
of where it came from, which the CLI prints back to the user.
"""

import json
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import requests

from .logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 30


class JSONLoaderError(Exception):
    """Raised when a model document cannot be fetched or parsed."""

    pass


def load_json_from_file(file_path: str | Path) -> tuple[str, Any]:
    """Read and parse a JSON model file.

    Args:
        file_path: Path to the model.

    Returns:
        Tuple of (source description, parsed JSON data).

    Raises:
        FileNotFoundError: If file doesn't exist.
        JSONLoaderError: If the file cannot be read or is not valid JSON.
    """
    file_path = Path(file_path)
    logger.debug("Loading model file %s", file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    if file_path.suffix.lower() != ".json":
        logger.warning("Model file does not have a .json extension: %s", file_path)

    try:
        data = json.loads(file_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise JSONLoaderError(f"Invalid JSON in file {file_path}: {e}") from e
    except OSError as e:
        raise JSONLoaderError(f"Error reading file {file_path}: {e}") from e

    logger.info("Loaded model from %s", file_path)
    return f"file {file_path}", data


def load_json_from_url(url: str, timeout: int = DEFAULT_TIMEOUT) -> tuple[str, Any]:
    """Fetch and parse a JSON model over HTTP.

    Args:
        url: Address of the model.
        timeout: Request timeout in seconds.

    Returns:
        Tuple of (source description, parsed JSON data).

    Raises:
        JSONLoaderError: If the URL is malformed, the request fails, or the
            body isn't valid JSON.
    """
    parsed_url = urlparse(url)
    if not (parsed_url.scheme and parsed_url.netloc):
        raise JSONLoaderError(f"Invalid URL: {url}")

    logger.debug("Fetching model from %s", url)
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
        data = response.json()
    except requests.exceptions.JSONDecodeError as e:
        raise JSONLoaderError(f"Invalid JSON response from URL {url}: {e}") from e
    except requests.exceptions.Timeout as e:
        raise JSONLoaderError(f"Request timeout for URL: {url}") from e
    except requests.exceptions.HTTPError as e:
        raise JSONLoaderError(f"HTTP error {e.response.status_code} for URL: {url}") from e
    except requests.exceptions.RequestException as e:
        raise JSONLoaderError(f"Request error for URL {url}: {e}") from e

    content_type = response.headers.get("content-type", "").lower()
    if "json" not in content_type:
        logger.warning("URL %s returned content type %r", url, content_type)

    logger.info("Loaded model from %s", url)
    return f"url {url}", data


def load_json(
    file_path: str | Path | None = None,
    url: str | None = None,
    timeout: int = DEFAULT_TIMEOUT,
) -> tuple[str, Any]:
    """Load a JSON model from exactly one of a file or a URL.

    Raises:
        JSONLoaderError: If neither or both sources are given, or loading fails.
        FileNotFoundError: If the file doesn't exist.
    """
    if not file_path and not url:
        raise JSONLoaderError("Either file_path or url must be provided")

    if file_path and url:
        raise JSONLoaderError("Cannot specify both file_path and url")

    if file_path:
        return load_json_from_file(file_path)
    return load_json_from_url(url, timeout)
