# Error types raised by the pipeline stages

from typing import Iterable, Sequence


class PipelineError(Exception):
    """Base class for pipeline failures."""


class SourceUnavailable(PipelineError):
    """The raw table could not be fetched or read."""


class SchemaMismatch(PipelineError, ValueError):
    """One or more required columns are absent."""

    def __init__(self, missing: Iterable[str], context: str = "table"):
        self.missing = list(missing)
        super().__init__(f"Required columns missing from {context}: {self.missing}")


class DateParseError(PipelineError, ValueError):
    """Strict mode only: values that do not match the date format."""

    def __init__(self, column: str, date_format: str, bad_values: Sequence):
        self.column = column
        self.date_format = date_format
        self.bad_values = list(bad_values)
        preview = self.bad_values[:5]
        super().__init__(
            f"{len(self.bad_values):,} value(s) in '{column}' do not match "
            f"'{date_format}', e.g. {preview}"
        )


class InsufficientData(PipelineError, ValueError):
    """Too few (or collinear) groups to fit the requested model."""


__all__ = [
    "PipelineError",
    "SourceUnavailable",
    "SchemaMismatch",
    "DateParseError",
    "InsufficientData",
]
