"""Core layer for ignorecli."""

from ignorecli.core.errors import ErrorKind, IgnoreCliError
from ignorecli.core.types import (
    DownloadConfig,
    DownloadResult,
    FetchOptions,
    Service,
    Template,
)

__all__ = [
    "DownloadConfig",
    "DownloadResult",
    "ErrorKind",
    "FetchOptions",
    "IgnoreCliError",
    "Service",
    "Template",
]
