from __future__ import annotations

from typing import Optional, Sequence


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidFormat(ValidationError):
    """A field could not be converted to its type or failed a domain check."""


class EmptyInput(InvalidFormat):
    """Raised when a required token is blank after trimming."""


class UnknownValue(InvalidFormat):
    """Raised when a token is not one of the recognized values."""


class NullInput(ValidationError):
    """Raised when a required value is absent (None)."""


class RowStructureError(ValidationError):
    """Raised when a row does not carry the expected number of fields."""

    def __init__(self, field_count: int, expected: int, line_number: Optional[int] = None):
        where = f"Line {line_number}: " if line_number is not None else ""
        super().__init__(f"{where}expected {expected} fields, got {field_count}")
        self.line_number = line_number
        self.field_count = field_count
        self.expected = expected



class InvalidRecord(ValidationError):
    """A whole row was rejected. Keeps the raw fields and the underlying cause."""

    def __init__(self, raw_fields: Sequence[str], cause: Optional[Exception] = None):
        super().__init__(f"Invalid person data: {list(raw_fields)}")
        self.raw_fields = tuple(raw_fields)
        self.cause = cause
        self.__cause__ = cause


class ReadError(DomainError):
    """Fatal error: the whole read operation is aborted."""


class SourceNotFound(ReadError):
    def __init__(self, source: str):
        super().__init__(f"File not found: {source}")
        self.source = source


class IOFailure(ReadError):
    """Raised when the underlying stream fails for reasons unrelated to content."""
