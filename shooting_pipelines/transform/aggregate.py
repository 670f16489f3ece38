# Grouped counts, long-form reshapes and the report tables built from them

from typing import Dict, Sequence

import pandas as pd
from rich.console import Console

from config import PipelineConfig
from shooting_pipelines.errors import SchemaMismatch
from shooting_pipelines.transform.missingness import INDICATOR_PREFIX, indicator_columns

console = Console()

NON_MISSING_PREFIX = "non_missing_"


def _require(df: pd.DataFrame, columns: Sequence[str], context: str) -> None:
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise SchemaMismatch(missing, context=context)


def group_count_sum(
    df: pd.DataFrame,
    keys: Sequence[str],
    sum_columns: Sequence[str] = (),
    count_name: str = "total",
) -> pd.DataFrame:
    """
    One row per key combination present in `df`, with its row count and
    the sum of each `sum_columns` column. Null keys form their own group.
    Row order is not meaningful.
    """
    keys = list(keys)
    sum_columns = list(sum_columns)
    _require(df, keys + sum_columns, "aggregation input")

    grouped = df.groupby(keys, dropna=False, observed=True, sort=True)
    out = grouped.size().rename(count_name).to_frame()
    if sum_columns:
        out = out.join(grouped[sum_columns].sum())
    return out.reset_index()


def add_non_missing_counts(
    agg: pd.DataFrame,
    indicator_cols: Sequence[str],
    total_column: str = "total",
) -> pd.DataFrame:
    """Add `non_missing_<field>` = total - missing for each indicator column."""
    _require(agg, [total_column, *indicator_cols], "group aggregate")

    agg = agg.copy()
    for col in indicator_cols:
        field = col[len(INDICATOR_PREFIX):] if col.startswith(INDICATOR_PREFIX) else col
        agg[f"{NON_MISSING_PREFIX}{field}"] = agg[total_column] - agg[col]
    return agg


def pivot_longer(
    df: pd.DataFrame,
    id_columns: Sequence[str],
    measure_columns: Sequence[str],
    names_to: str = "category",
    values_to: str = "value",
) -> pd.DataFrame:
    """Turn each measure column into (names_to, values_to) rows per input row."""
    _require(df, [*id_columns, *measure_columns], "pivot input")

    return df.melt(
        id_vars=list(id_columns),
        value_vars=list(measure_columns),
        var_name=names_to,
        value_name=values_to,
    )


def borough_counts(df: pd.DataFrame, group_key: Sequence[str] = ("BORO",)) -> pd.DataFrame:
    """(BORO, count), largest first."""
    return (
        group_count_sum(df, group_key, count_name="count")
        .sort_values("count", ascending=False)
        .reset_index(drop=True)
    )


def missing_by_borough(
    df: pd.DataFrame,
    nullable_fields: Sequence[str],
    group_key: Sequence[str] = ("BORO",),
) -> pd.DataFrame:
    """(BORO, missing_data_type, count) with one row per borough and field."""
    cols = indicator_columns(nullable_fields)
    agg = group_count_sum(df, group_key, cols)
    long = pivot_longer(agg, group_key, cols, names_to="missing_data_type", values_to="count")
    long["missing_data_type"] = long["missing_data_type"].map(dict(zip(cols, nullable_fields)))
    return long


def victim_profile(
    df: pd.DataFrame,
    group_key: Sequence[str] = ("BORO",),
    victim_columns: Sequence[str] = ("VIC_AGE_GROUP", "VIC_SEX"),
) -> pd.DataFrame:
    """(BORO, VIC_AGE_GROUP, VIC_SEX, count)."""
    return group_count_sum(df, [*group_key, *victim_columns], count_name="count")


def missing_vs_total(
    df: pd.DataFrame,
    nullable_fields: Sequence[str],
    group_key: Sequence[str] = ("BORO",),
) -> pd.DataFrame:
    """(BORO, missing_data_type, missing_count, total_incidents) per borough and field."""
    cols = indicator_columns(nullable_fields)
    agg = group_count_sum(df, group_key, cols, count_name="total_incidents")
    long = pivot_longer(
        agg,
        [*group_key, "total_incidents"],
        cols,
        names_to="missing_data_type",
        values_to="missing_count",
    )
    long["missing_data_type"] = long["missing_data_type"].map(dict(zip(cols, nullable_fields)))
    return long[[*group_key, "missing_data_type", "missing_count", "total_incidents"]]


def build_report_tables(df: pd.DataFrame, config: PipelineConfig) -> Dict[str, pd.DataFrame]:
    """All tables the charting layer and the regression consume."""
    cols = indicator_columns(config.nullable_fields)

    group_aggregate = group_count_sum(df, config.group_key, cols, count_name=config.count_column)
    group_aggregate = add_non_missing_counts(group_aggregate, cols, config.count_column)

    tables = {
        "group_aggregate": group_aggregate,
        "borough_counts": borough_counts(df, config.group_key),
        "missing_by_borough": missing_by_borough(df, config.nullable_fields, config.group_key),
        "victim_profile": victim_profile(df, config.group_key, config.victim_columns),
        "missing_vs_total": missing_vs_total(df, config.nullable_fields, config.group_key),
    }
    console.print(f"[green]Report tables built:[/green] {', '.join(tables)}")
    return tables


__all__ = [
    "group_count_sum",
    "add_non_missing_counts",
    "pivot_longer",
    "borough_counts",
    "missing_by_borough",
    "victim_profile",
    "missing_vs_total",
    "build_report_tables",
]
