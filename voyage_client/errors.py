"""Exceptions raised by the Voyage client."""
from __future__ import annotations

from typing import Any, Optional

import requests


class VoyageError(Exception):
    """Base class for errors raised by this package."""


class RequestValidationError(VoyageError, ValueError):
    """A request failed local validation; nothing was sent."""

    message = "invalid request"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.message)


class InputRequiredError(RequestValidationError):
    message = "input is required"


class InputTooLargeError(RequestValidationError):
    message = "input length must be less than or equal to 128"


class DocumentsRequiredError(RequestValidationError):
    message = "documents are required"


class DocumentsTooLargeError(RequestValidationError):
    message = "documents length must be less than or equal to 1000"


class QueryRequiredError(RequestValidationError):
    message = "query is required"


class ModelRequiredError(RequestValidationError):
    message = "model is required"


class APIStatusError(VoyageError):
    """The service answered with a non-success HTTP status."""

    def __init__(self, status_code: int, detail: Any, response: Optional[requests.Response] = None) -> None:
        self.status_code = status_code
        self.detail = detail
        self.response = response
        super().__init__(f"HTTP {status_code}: {detail}")

    @classmethod
    def from_response(cls, response: requests.Response) -> "APIStatusError":
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("detail") is not None:
            detail = body["detail"]
        else:
            detail = response.text or response.reason
        return cls(response.status_code, detail, response)
