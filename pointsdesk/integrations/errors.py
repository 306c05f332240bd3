"""Classified failures for the points-management API client."""

from typing import Any, Dict, Optional

GENERIC_CONNECTIVITY_MESSAGE = "Network or connectivity error. Check that the points server is reachable."


class ClientError(Exception):
    """Base class for every failure a screen can surface to the user."""

    kind = "client"

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message


class LocalValidationError(ClientError):
    """Input rejected before any network call."""

    kind = "validation"


class ApiError(ClientError):
    """Structured error response (non-2xx) from the points API."""

    kind = "api"

    def __init__(self, message: str, status_code: int, payload: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload or {}

    def is_not_found(self) -> bool:
        return self.status_code == 404

    def is_bad_request(self) -> bool:
        return self.status_code == 400


class ConnectivityError(ClientError):
    """Transport-level failure: the server could not be reached."""

    kind = "connectivity"

    def __init__(self, message: str = GENERIC_CONNECTIVITY_MESSAGE, cause: Optional[Exception] = None):
        super().__init__(message, cause)


class ResponseParseError(ConnectivityError):
    """Response body could not be decoded into the expected shape."""

    def __init__(self, message: str, status_code: Optional[int] = None, cause: Optional[Exception] = None):
        super().__init__(message, cause)
        self.status_code = status_code
