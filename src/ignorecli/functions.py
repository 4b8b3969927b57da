"""Python API for ignorecli.

This module provides high-level functions for using ignorecli
as a library.
"""

import logging

import requests

from ignorecli.core.errors import (
    FileAlreadyExistsError,
    HttpStatusError,
    IgnoreCliError,
    UnknownTemplateError,
)
from ignorecli.core.paths import (
    ensure_directory,
    file_exists,
    resolve_output_path,
    resolve_remote_url,
)
from ignorecli.core.types import DownloadConfig, DownloadResult, FetchOptions, Template
from ignorecli.downloader import fetch_and_write
from ignorecli.templates.catalog import CATALOG, TemplateCatalog

logger = logging.getLogger(__name__)


def find_template(name: str, catalog: TemplateCatalog = CATALOG) -> Template | None:
    """Find a template by name (case-insensitive).

    Args:
        name: Template name.
        catalog: Catalog to search.

    Returns:
        Matching Template or None if not found.
    """
    return catalog.lookup(name)


def list_templates(catalog: TemplateCatalog = CATALOG) -> list[Template]:
    """List all available templates in display order."""
    return catalog.list_all()


def search_templates(query: str, catalog: TemplateCatalog = CATALOG) -> list[Template]:
    """Search templates by name or description.

    Args:
        query: Case-insensitive substring.
        catalog: Catalog to search.

    Returns:
        Matching templates.
    """
    return catalog.search(query)


def download_ignore_file(
    config: DownloadConfig,
    options: FetchOptions | None = None,
    session: requests.Session | None = None,
    catalog: TemplateCatalog = CATALOG,
) -> DownloadResult:
    """Download an ignore file as described by ``config``.

    Expected failures are reported through the result rather than raised.

    Args:
        config: What to download and where.
        options: Fetch options. Uses defaults if None.
        session: HTTP session to use. A private one is created if None.
        catalog: Catalog to resolve the template name against.

    Returns:
        DownloadResult describing the outcome.
    """
    options = options or FetchOptions()
    output_path = None

    try:
        template = catalog.lookup(config.language)
        if template is None:
            raise UnknownTemplateError(config.language)

        ensure_directory(config.output_dir)

        output_path = resolve_output_path(config.output_dir, config.service)
        if file_exists(output_path) and not config.force:
            raise FileAlreadyExistsError(
                f"File already exists: {output_path}. Use --force to overwrite."
            )
    except IgnoreCliError as e:
        logger.debug(f"Download rejected: {e}")
        return DownloadResult(
            success=False,
            message=str(e),
            file_path=output_path,
            error=e.kind,
        )

    url = resolve_remote_url(template.filename, config.service, options.base_url)
    logger.info(f"Downloading {template.name} from {url} to {output_path}")

    try:
        fetch_and_write(url, output_path, options=options, session=session)
    except IgnoreCliError as e:
        logger.warning(f"Failed to download {url}: {e}")
        return DownloadResult(
            success=False,
            message=f"Failed to download template: {e}",
            error=e.kind,
            status_code=e.status_code if isinstance(e, HttpStatusError) else None,
        )

    return DownloadResult(
        success=True,
        message=(
            f"Successfully downloaded {config.service.output_filename} "
            f"for {template.name}"
        ),
        file_path=output_path,
    )
