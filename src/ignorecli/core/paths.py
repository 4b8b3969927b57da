"""Remote URL and local output path resolution."""

import logging
from pathlib import Path

from ignorecli.core.constant import BASE_URL
from ignorecli.core.errors import DirectoryCreationError
from ignorecli.core.types import Service

logger = logging.getLogger(__name__)


def resolve_remote_url(
    filename: str,
    service: Service | str | None = None,
    base_url: str = BASE_URL,
) -> str:
    """Build the download URL for a template file.

    Every service is sourced from the same upstream template, so
    ``service`` does not change the result.

    Args:
        filename: Template filename, e.g. ``Python.gitignore``.
        service: Target service. Accepted for symmetry with
            ``resolve_output_path``.
        base_url: Registry base URL.

    Returns:
        Full URL of the template file.
    """
    return f"{base_url.rstrip('/')}/{filename}"


def resolve_output_path(output_dir: str | Path, service: Service | str) -> Path:
    """Get the output file path for a service.

    Args:
        output_dir: Directory the ignore file is written to.
        service: Target service.

    Returns:
        Path to ``.gitignore`` or ``.dockerignore`` inside ``output_dir``.
    """
    return Path(output_dir) / Service.parse(service).output_filename


def ensure_directory(path: str | Path) -> Path:
    """Create a directory and its parents if missing.

    Args:
        path: Directory path.

    Returns:
        The directory path.

    Raises:
        DirectoryCreationError: If the directory cannot be created.
    """
    directory = Path(path)
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryCreationError(
            f"Failed to create output directory: {directory}"
        ) from e
    logger.debug(f"Output directory ready: {directory}")
    return directory


def file_exists(path: str | Path) -> bool:
    """Check whether anything exists at the given path."""
    return Path(path).exists()
