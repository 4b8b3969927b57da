"""ignorecli - Add .gitignore and .dockerignore templates to a project.

This package downloads ignore-file templates from GitHub's gitignore
repository and writes them into a local project directory.
"""

__version__ = "0.1.0"

from ignorecli.core.errors import ErrorKind, IgnoreCliError
from ignorecli.core.types import (
    DownloadConfig,
    DownloadResult,
    FetchOptions,
    Service,
    Template,
)
from ignorecli.downloader import fetch_and_write
from ignorecli.functions import (
    download_ignore_file,
    find_template,
    list_templates,
    search_templates,
)
from ignorecli.templates.catalog import CATALOG, TemplateCatalog

__all__ = [
    # Core types
    "DownloadConfig",
    "DownloadResult",
    "ErrorKind",
    "FetchOptions",
    "IgnoreCliError",
    "Service",
    "Template",
    # Catalog
    "CATALOG",
    "TemplateCatalog",
    # Functions
    "download_ignore_file",
    "fetch_and_write",
    "find_template",
    "list_templates",
    "search_templates",
]


def main() -> None:
    """CLI entry point."""
    import sys

    from ignorecli.cli import main as cli_main

    sys.exit(cli_main())
