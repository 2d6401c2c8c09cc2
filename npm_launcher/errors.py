"""
Error types raised by the launcher pipeline.

Every error is fatal to the process. main.run() prints
"<context>: <message>" and exits with status 1.
"""

from typing import Optional


class LauncherError(Exception):
    """Base class for all launcher failures."""

    context = "Error"

    def __init__(self, message: str, context: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if context is not None:
            self.context = context

    def report(self) -> str:
        """Line written to the host before exiting."""
        return f"{self.context}: {self.message}"


class ParseError(LauncherError):
    """Malformed inbound request or malformed registry response body."""

    context = "Error parsing request"


class NetworkError(LauncherError):
    """The registry could not be reached."""

    context = "Error querying packages"


class ApiError(LauncherError):
    """The registry answered with a non-200 status."""

    context = "Error querying package"

    def __init__(self, status_code: int, context: Optional[str] = None):
        super().__init__(
            f"The API responded with status code {status_code}", context
        )
        self.status_code = status_code


class OpenError(LauncherError):
    """The OS could not open a URL."""

    context = "Error opening url"
