"""
Error hierarchy for parse-seed.

Infrastructure adapters raise these; the pipeline catches `SeedError` at its
boundary and turns it into a failed run.
"""

from __future__ import annotations

from typing import Optional


class SeedError(Exception):
    """Base class for all seeding failures."""


class FetchError(SeedError):
    """Retrieving users from the random-user API failed."""


class NetworkError(FetchError):
    """Transport failure or non-2xx response from the random-user API."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class UpstreamStatusError(NetworkError):
    """The random-user API answered with a non-2xx status."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message, status_code=status_code)


class ResponseParseError(FetchError):
    """The random-user API body was not JSON or not the expected shape."""


class RemoteWriteError(SeedError):
    """The Parse batch save was rejected.

    `code` carries the Parse error code when the server returned one and
    `status_code` the HTTP status of the failing call.
    """

    def __init__(
        self,
        message: str,
        code: Optional[int] = None,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.status_code = status_code


__all__ = [
    "SeedError",
    "FetchError",
    "NetworkError",
    "UpstreamStatusError",
    "ResponseParseError",
    "RemoteWriteError",
]
