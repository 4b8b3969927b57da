"""Pytest fixtures and configuration."""

import shutil
import tempfile
from collections.abc import Callable
from pathlib import Path
from typing import Generator
from unittest.mock import MagicMock

import pytest
import requests


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    try:
        yield Path(tmpdir)
    finally:
        shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def make_response() -> Callable[..., MagicMock]:
    """Factory for fake streamed HTTP responses."""

    def _make(
        status_code: int = 200,
        body: bytes | list[bytes] = b"",
        headers: dict[str, str] | None = None,
    ) -> MagicMock:
        response = MagicMock(spec=requests.Response)
        response.status_code = status_code
        response.headers = headers or {}
        chunks = body if isinstance(body, list) else [body]
        response.iter_content.return_value = iter(chunks)
        return response

    return _make


@pytest.fixture
def make_session() -> Callable[[dict[str, object]], MagicMock]:
    """Factory for fake sessions routing URLs to responses or exceptions."""

    def _make(routes: dict[str, object]) -> MagicMock:
        session = MagicMock(spec=requests.Session)

        def get(url: str, **kwargs: object) -> object:
            result = routes[url]
            if isinstance(result, BaseException):
                raise result
            return result

        session.get.side_effect = get
        return session

    return _make
