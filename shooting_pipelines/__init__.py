"""
Cleaning, aggregation and OLS pipeline for the NYPD shooting incident data.
"""

from .errors import (
    PipelineError,
    SourceUnavailable,
    SchemaMismatch,
    DateParseError,
    InsufficientData,
)

__all__ = [
    "PipelineError",
    "SourceUnavailable",
    "SchemaMismatch",
    "DateParseError",
    "InsufficientData",
]
