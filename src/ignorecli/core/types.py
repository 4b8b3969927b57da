"""Type definitions for ignorecli."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

from ignorecli.core.constant import (
    BASE_URL,
    DEFAULT_CHUNK_SIZE,
    DEFAULT_MAX_REDIRECTS,
    DEFAULT_TIMEOUT,
    OUTPUT_FILENAMES,
    USER_AGENT,
)
from ignorecli.core.errors import ErrorKind, InvalidServiceError


class Service(Enum):
    """Supported ignore-file services."""

    GIT = "git"
    DOCKER = "docker"

    @classmethod
    def parse(cls, value: "str | Service") -> "Service":
        """Convert a user-supplied string to a Service.

        Args:
            value: Service name ("git" or "docker", exact) or Service member.

        Returns:
            Matching Service.

        Raises:
            InvalidServiceError: If the value names no known service.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError as e:
            raise InvalidServiceError(str(value)) from e

    @property
    def output_filename(self) -> str:
        """Get the file name written for this service."""
        return OUTPUT_FILENAMES[self.value]


class Template(BaseModel):
    """An ignore-file template available from the remote registry."""

    name: str
    filename: str
    description: str | None = None

    model_config = {"frozen": True, "extra": "forbid"}


class FetchOptions(BaseModel):
    """Tunables for the fetch-and-write engine."""

    base_url: str = BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    max_redirects: int = Field(default=DEFAULT_MAX_REDIRECTS, ge=0)
    chunk_size: int = Field(default=DEFAULT_CHUNK_SIZE, gt=0)
    user_agent: str = USER_AGENT

    model_config = {"extra": "forbid"}


class DownloadConfig(BaseModel):
    """Parameters for a single ignore-file download."""

    language: str
    service: Service = Service.GIT
    output_dir: Path = Field(default_factory=Path.cwd)
    force: bool = False

    model_config = {"extra": "forbid"}


@dataclass
class DownloadResult:
    """Result of a download operation."""

    success: bool
    message: str
    file_path: Path | None = None
    error: ErrorKind | None = None
    status_code: int | None = None
