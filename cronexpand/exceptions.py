"""
cronexpand exception hierarchy.

Hierarchy::

    CronParseError
    ├── UsageError                - no expression supplied
    ├── MalformedExpressionError  - fewer than 5 time fields + command
    └── FieldExpansionError       - a single time field failed to expand
        ├── MissingFieldError
        ├── InvalidStepError
        ├── InvalidRangeError
        ├── InvalidValueError
        └── OutOfBoundsError

``exit_code`` is the process exit status the CLI uses for each class.
"""

from __future__ import annotations


class CronParseError(Exception):
    """Base exception for all cron expression errors."""

    exit_code = 3

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UsageError(CronParseError):
    """Raised when no expression was given at all."""

    exit_code = 1


class MalformedExpressionError(CronParseError):
    """Raised when the expression has fewer than 6 whitespace-separated parts."""

    exit_code = 2


class FieldExpansionError(CronParseError):
    """Raised when one time field cannot be expanded.

    Carries the field name and the token that failed so callers can point
    at the exact spot in the input.
    """

    def __init__(self, message: str, *, field: str, token: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
        self.token = token


class MissingFieldError(FieldExpansionError):
    """Raised when a time field is empty."""


class InvalidStepError(FieldExpansionError):
    """Raised when a /step is missing, non-numeric or not positive."""


class InvalidRangeError(FieldExpansionError):
    """Raised when either side of an a-b range is not an integer."""


class InvalidValueError(FieldExpansionError):
    """Raised when a single value is not an integer."""


class OutOfBoundsError(FieldExpansionError):
    """Raised when a value falls outside the field's allowed range."""

    def __init__(self, message: str, *, field: str, token: str, minimum: int, maximum: int) -> None:
        super().__init__(message, field=field, token=token)
        self.minimum = minimum
        self.maximum = maximum
