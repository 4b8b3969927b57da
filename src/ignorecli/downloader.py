"""Fetch a remote template and write it to disk."""

import logging
import os
import shutil
import uuid
from pathlib import Path
from typing import BinaryIO
from urllib.parse import urljoin

import requests

from ignorecli.core.constant import REDIRECT_STATUSES
from ignorecli.core.errors import (
    HttpStatusError,
    NetworkError,
    TooManyRedirectsError,
    WriteError,
)
from ignorecli.core.types import FetchOptions

logger = logging.getLogger(__name__)

_TEMP_FLAGS = os.O_WRONLY | os.O_CREAT | os.O_EXCL | getattr(os, "O_BINARY", 0)


def create_session(options: FetchOptions | None = None) -> requests.Session:
    """Create an HTTP session for template downloads.

    Args:
        options: Fetch options. Uses defaults if None.

    Returns:
        Configured requests Session.
    """
    options = options or FetchOptions()
    session = requests.Session()
    session.headers.update({"User-Agent": options.user_agent})
    return session


def fetch_and_write(
    url: str,
    destination: str | Path,
    options: FetchOptions | None = None,
    session: requests.Session | None = None,
) -> Path:
    """Download ``url`` and install it at ``destination``.

    The body is streamed into a temporary file next to the file being
    replaced and renamed over it only once the transfer completes. On any
    failure the temporary file is removed and an existing destination is
    left untouched. A symlinked destination is written through, and an
    existing file keeps its permission bits.

    Args:
        url: URL to download.
        destination: Output file path. Its directory must exist.
        options: Fetch options. Uses defaults if None.
        session: HTTP session to use. A private one is created if None.

    Returns:
        The destination path.

    Raises:
        HttpStatusError: If the server answers with a non-200 status.
        TooManyRedirectsError: If more than ``max_redirects`` hops occur.
        NetworkError: On connection errors, timeouts or broken transfers.
        WriteError: If the file cannot be written.
    """
    options = options or FetchOptions()
    destination = Path(destination)
    target = destination.resolve()
    own_session = session is None
    if session is None:
        session = create_session(options)

    try:
        tmp_path = target.with_name(f".{target.name}.{uuid.uuid4().hex}.part")
        try:
            # 0o666 lets the process umask decide the mode of a new file.
            fd = os.open(tmp_path, _TEMP_FLAGS, 0o666)
        except OSError as e:
            raise WriteError(f"Failed to write {destination}: {e}") from e

        try:
            try:
                with os.fdopen(fd, "wb") as file:
                    _download(session, url, file, options)
                if target.exists():
                    shutil.copymode(target, tmp_path)
                os.replace(tmp_path, target)
            except OSError as e:
                raise WriteError(f"Failed to write {destination}: {e}") from e
        except BaseException:
            _discard(tmp_path)
            raise
    finally:
        if own_session:
            session.close()

    logger.debug(f"Wrote {destination}")
    return destination


def _download(
    session: requests.Session,
    url: str,
    file: BinaryIO,
    options: FetchOptions,
) -> None:
    """Follow redirects from ``url`` and stream the final body into ``file``."""
    current = url
    for _ in range(options.max_redirects + 1):
        logger.debug(f"GET {current}")
        try:
            response = session.get(
                current,
                stream=True,
                allow_redirects=False,
                timeout=options.timeout,
            )
        except requests.RequestException as e:
            raise NetworkError(str(e)) from e

        try:
            location = response.headers.get("Location")
            if response.status_code in REDIRECT_STATUSES and location:
                current = urljoin(current, location)
                logger.debug(f"Redirected ({response.status_code}) to {current}")
                continue

            if response.status_code != 200:
                raise HttpStatusError(response.status_code, current)

            _write_body(response, file, options.chunk_size)
            return
        finally:
            response.close()

    raise TooManyRedirectsError(options.max_redirects)


def _write_body(response: requests.Response, file: BinaryIO, chunk_size: int) -> None:
    try:
        for chunk in response.iter_content(chunk_size=chunk_size):
            if chunk:
                file.write(chunk)
    except requests.RequestException as e:
        raise NetworkError(f"Transfer interrupted: {e}") from e


def _discard(path: Path) -> None:
    """Remove a temporary file, ignoring failures."""
    try:
        path.unlink(missing_ok=True)
    except OSError as e:
        logger.debug(f"Could not remove temporary file {path}: {e}")
