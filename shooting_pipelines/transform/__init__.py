from .cleaning import cleanup_duplicate_columns, drop_columns, parse_dates, normalize_schema
from .missingness import indicator_name, indicator_columns, add_missing_indicators
from .aggregate import (
    group_count_sum,
    add_non_missing_counts,
    pivot_longer,
    build_report_tables,
)
from .transform_master import run_transforms

__all__ = [
    "cleanup_duplicate_columns",
    "drop_columns",
    "parse_dates",
    "normalize_schema",
    "indicator_name",
    "indicator_columns",
    "add_missing_indicators",
    "group_count_sum",
    "add_non_missing_counts",
    "pivot_longer",
    "build_report_tables",
    "run_transforms",
]
