# Schema normalization applied before any indicator or aggregate work
from typing import Iterable

import pandas as pd
from rich.console import Console

from config import PipelineConfig
from shooting_pipelines.errors import DateParseError, SchemaMismatch
from shooting_pipelines.utils.logging import log_step

console = Console()


def cleanup_duplicate_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Drop duplicated columns (same name) while preserving first occurrence."""
    seen = set()
    keep = []

    for i, c in enumerate(df.columns):
        if c not in seen:
            keep.append(i)
            seen.add(c)
        else:
            console.print(f"[yellow]Dropped duplicate column:[/yellow] {c}")

    return df.iloc[:, keep].copy()


def drop_columns(df: pd.DataFrame, columns: Iterable[str]) -> pd.DataFrame:
    """Remove a set of columns by name. Names not present are ignored."""
    columns = set(columns)
    present = [c for c in df.columns if c in columns]
    absent = sorted(columns.difference(df.columns))

    if absent:
        console.print(f"[yellow]Columns to drop not found (ignored):[/yellow] {absent}")
    if present:
        console.print(f"[cyan]Dropping columns:[/cyan] {present}")

    return df.drop(columns=present)


def parse_dates(
    df: pd.DataFrame,
    column: str,
    date_format: str = "%m/%d/%Y",
    strict: bool = False,
) -> pd.DataFrame:
    """
    Replace a text date column with calendar dates.

    Values that do not match `date_format` become null, unless `strict`
    is set, in which case a DateParseError lists them. Nulls in the
    source stay null either way.
    """
    if column not in df.columns:
        raise SchemaMismatch([column], context="date parsing input")

    df = df.copy()
    raw = df[column]
    parsed = pd.to_datetime(raw, format=date_format, errors="coerce")

    failed = parsed.isna() & raw.notna()
    n_failed = int(failed.sum())
    if n_failed:
        if strict:
            bad = list(zip(raw.index[failed], raw[failed]))
            raise DateParseError(column, date_format, bad)
        console.print(f"[yellow]Unparseable '{column}' values set to null:[/yellow] {n_failed:,}")

    df[column] = parsed.dt.date
    console.print(f"[green]Parsed dates in '{column}':[/green] {int(parsed.notna().sum()):,}")
    return df


def normalize_schema(df: pd.DataFrame, config: PipelineConfig) -> pd.DataFrame:
    """
    Cleaning sequence run right after ingestion.

    Steps:
        1. Drop duplicate-named columns
        2. Drop the configured unused columns
        3. Parse the occurrence date
    """
    console.print("\n[bold cyan]Normalizing schema...[/bold cyan]")

    df = cleanup_duplicate_columns(df)
    df = drop_columns(df, config.dropped_columns)
    log_step("Unused columns dropped", df)

    df = parse_dates(df, config.date_column, config.date_format, strict=config.strict_dates)
    log_step(f"{config.date_column} -> date", df)
    return df


__all__ = ["cleanup_duplicate_columns", "drop_columns", "parse_dates", "normalize_schema"]
