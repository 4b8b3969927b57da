"""Error types for ignorecli."""

from enum import Enum


class ErrorKind(Enum):
    """Failure categories reported to callers."""

    UNKNOWN_TEMPLATE = "unknown_template"
    INVALID_SERVICE = "invalid_service"
    DIRECTORY_CREATION = "directory_creation"
    FILE_EXISTS = "file_exists"
    HTTP_STATUS = "http_status"
    TOO_MANY_REDIRECTS = "too_many_redirects"
    NETWORK = "network"
    IO = "io"


class IgnoreCliError(Exception):
    """Base class for all ignorecli errors."""

    kind: ErrorKind


class UnknownTemplateError(IgnoreCliError):
    """Raised when a template name is not in the catalog."""

    kind = ErrorKind.UNKNOWN_TEMPLATE

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f'Template "{name}" not found. Use "ignore list" to see available templates.'
        )


class InvalidServiceError(IgnoreCliError):
    """Raised when a service string is neither git nor docker."""

    kind = ErrorKind.INVALID_SERVICE

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f'Invalid service "{value}". Valid services are: git, docker')


class DirectoryCreationError(IgnoreCliError):
    """Raised when the output directory cannot be created."""

    kind = ErrorKind.DIRECTORY_CREATION


class FileAlreadyExistsError(IgnoreCliError):
    """Raised when the output file exists and overwriting is not allowed."""

    kind = ErrorKind.FILE_EXISTS


class HttpStatusError(IgnoreCliError):
    """Raised when the remote server answers with an unexpected status."""

    kind = ErrorKind.HTTP_STATUS

    def __init__(self, status_code: int, url: str | None = None) -> None:
        self.status_code = status_code
        self.url = url
        super().__init__(f"HTTP {status_code}")


class TooManyRedirectsError(IgnoreCliError):
    """Raised when the redirect chain exceeds the configured limit."""

    kind = ErrorKind.TOO_MANY_REDIRECTS

    def __init__(self, max_redirects: int) -> None:
        self.max_redirects = max_redirects
        super().__init__(f"Too many redirects (limit {max_redirects})")


class NetworkError(IgnoreCliError):
    """Raised on connection failures, timeouts and broken transfers."""

    kind = ErrorKind.NETWORK


class WriteError(IgnoreCliError):
    """Raised when the downloaded content cannot be written to disk."""

    kind = ErrorKind.IO
