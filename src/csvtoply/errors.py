"""
Conversion Errors
=================
Exception hierarchy raised by the conversion pipeline.

Every error aborts the whole run. The command line catches ``CsvToPlyError``
and reports it; library callers get the exception unchanged.
"""
from __future__ import annotations


class CsvToPlyError(Exception):
    """Base class for all conversion failures."""


class SchemaError(CsvToPlyError):
    """The CSV header does not describe a usable mesh."""


class MissingFieldError(SchemaError):
    def __init__(self, field: str) -> None:
        super().__init__(f"Required field {field} not present")
        self.field = field


class DataError(CsvToPlyError):
    """A data row holds a value that cannot be converted."""


class MalformedValueError(DataError):
    def __init__(self, field: str, value: str, expected: str = "number") -> None:
        super().__init__(f"Field {field}: cannot parse '{value}' as {expected}")
        self.field = field
        self.value = value


class ColorParseError(DataError):
    def __init__(self, value: str) -> None:
        super().__init__(f"Failed to parse Diffuse '{value}'")
        self.value = value


class MalformedRowError(DataError):
    def __init__(self, row_number: int, expected: int, actual: int) -> None:
        super().__init__(
            f"Row {row_number}: expected at least {expected} fields, got {actual}"
        )
        self.row_number = row_number
        self.expected = expected
        self.actual = actual


class MalformedInputError(DataError):
    """The input is not readable as UTF-8 CSV text."""
    def __init__(self, detail: str) -> None:
        super().__init__(f"Input is not valid CSV text: {detail}")
        self.detail = detail
