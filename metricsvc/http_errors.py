"""Errors reported to HTTP clients, with their status codes and JSON bodies."""

from __future__ import annotations

from http import HTTPStatus
from typing import ClassVar

from .errors import (
    BusinessRuleViolation,
    DomainError,
    InvalidMetricID,
    InvalidMetricReadingID,
    InvalidTimestamp,
)


class PresentationError(Exception):
    """Base class for errors that become an HTTP error response."""

    _status: ClassVar[HTTPStatus] = HTTPStatus.BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message

    def status_code(self) -> int:
        """The HTTP status code of the response."""
        return int(self._status)

    def to_dict(self) -> dict[str, str]:
        """The JSON body of the response."""
        return {"error": self.message}


class NotFound(PresentationError):
    """The requested resource does not exist."""

    _status = HTTPStatus.NOT_FOUND


class UnprocessableEntity(PresentationError):
    """The request was understood but a business rule rejected it."""

    _status = HTTPStatus.UNPROCESSABLE_ENTITY


class DomainValidation(PresentationError):
    """A value in the request failed domain validation."""

    _status = HTTPStatus.BAD_REQUEST


class EmptyField(PresentationError):
    """A required field was empty or blank."""

    _status = HTTPStatus.BAD_REQUEST

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"field '{field}' cannot be empty")


class NegativeField(PresentationError):
    """A field that must not be negative was below zero."""

    _status = HTTPStatus.BAD_REQUEST

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"field '{field}' must be greater than or equal to 0")


_VALIDATION_ERRORS = (InvalidMetricID, InvalidMetricReadingID, InvalidTimestamp)


def from_domain_error(error: DomainError) -> PresentationError:
    """Map a domain error to the error reported to the client."""
    if isinstance(error, BusinessRuleViolation):
        return UnprocessableEntity(error.message)
    if isinstance(error, _VALIDATION_ERRORS):
        return DomainValidation(error.message)
    return DomainValidation(error.message)