"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI and HTTP layers can catch them uniformly and map them to
user-facing messages and status codes.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Input was malformed or a business rule was violated.

    ``fields`` optionally maps the offending input field to a reason so
    callers can point at what needs correcting.
    """

    def __init__(self, message: str, fields: dict[str, str] | None = None) -> None:
        super().__init__(message)
        self.fields = dict(fields) if fields else {}


class InvalidStatusError(ValidationError):
    """A status label is unknown or the transition to it is not allowed."""


class NotFoundError(DomainException):
    """A requested order, adjustment or reservation does not exist."""
