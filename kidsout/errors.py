from __future__ import annotations

import requests


class KidsoutError(Exception):
    """Base class for every error raised by this package."""


class KidsoutApiError(KidsoutError):
    """
    A request to the API failed: connection problem, HTTP error status or a
    body that could not be decoded.

    `status` is the HTTP status code when a response was received.
    `original_error` is the exception raised by the transport, if any.
    """

    def __init__(
        self,
        message: str,
        status: int | None = None,
        original_error: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.original_error = original_error
        response = getattr(original_error, "response", None)
        if isinstance(original_error, requests.RequestException) and response is not None:
            self.status = response.status_code
        else:
            self.status = status

    def __str__(self) -> str:
        if self.status is None:
            return self.message
        return f"{self.message} (status: {self.status})"


class KidsoutValidationError(KidsoutError, ValueError):
    """Request parameters were rejected before anything was sent."""

    def __init__(self, message: str, validation_issues: list[str] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.validation_issues = validation_issues or []
