# Core data validation checks for the shooting incident pipeline

from typing import Dict, Sequence, Tuple

import pandas as pd
from rich.console import Console
from rich.table import Table

from config import PipelineConfig

console = Console()


def run_validation_checks(df: pd.DataFrame, step_name: str, config: PipelineConfig) -> None:
    """
    Key integrity checks, reported but never fatal:
    - occurrence date completeness after parsing
    - grouping key completeness
    """
    if df.empty:
        console.print(f"[bold yellow]WARNING: {step_name} - table is empty.[/bold yellow]")
        return

    date_col = config.date_column
    if date_col in df.columns:
        missing_pct = df[date_col].isna().mean()
        if missing_pct > 0.01:
            console.print(
                f"[bold red]FAIL: {step_name} - '{date_col}' missing {missing_pct:.2%} (>1%).[/bold red]"
            )
        else:
            console.print(
                f"[green]PASS: {step_name} - '{date_col}' completeness OK ({missing_pct:.2%} missing).[/green]"
            )

    for key in config.group_key:
        if key not in df.columns:
            continue
        n_missing = int(df[key].isna().sum())
        if n_missing:
            console.print(
                f"[bold yellow]WARNING: {step_name} - {n_missing:,} rows with no '{key}'.[/bold yellow]"
            )
        else:
            console.print(f"[green]PASS: {step_name} - '{key}' present on every row.[/green]")


def validate_group_aggregate(
    agg: pd.DataFrame,
    source_rows: int,
    indicator_cols: Sequence[str],
    total_column: str = "total",
) -> None:
    """
    Check aggregate invariants: group totals add up to the source row count
    and no group has more missing values than rows.
    """
    total = int(agg[total_column].sum())
    if total != source_rows:
        raise ValueError(
            f"Group totals sum to {total:,} but the source has {source_rows:,} rows."
        )

    over = [c for c in indicator_cols if ((agg[total_column] - agg[c]) < 0).any()]
    negative = [c for c in indicator_cols if (agg[c] < 0).any()]
    if over or negative:
        raise ValueError(
            f"Missing counts out of range for {sorted(set(over) | set(negative))}."
        )

    console.print(f"[green]PASS: group aggregate - {len(agg):,} groups cover {total:,} rows.[/green]")


def missingness_snapshot(df: pd.DataFrame) -> Dict[str, Tuple[int, float]]:
    """Map each column to (missing count, missing %)."""
    return {
        col: (int(df[col].isna().sum()), float(df[col].isna().mean() * 100) if len(df) else 0.0)
        for col in df.columns
    }


def show_missingness_table(df: pd.DataFrame, columns: Sequence[str], step_name: str) -> None:
    table = Table(
        title=f"{step_name} - Missing Data",
        show_header=True,
        header_style="bold magenta",
    )
    table.add_column("Column", style="cyan")
    table.add_column("Missing", justify="right", style="red")
    table.add_column("Present", justify="right", style="green")

    snapshot = missingness_snapshot(df[[c for c in columns if c in df.columns]])
    for col, (count, pct) in snapshot.items():
        table.add_row(col, f"{count:,} ({pct:.1f}%)", f"{len(df) - count:,}")

    console.print(table)


__all__ = [
    "run_validation_checks",
    "validate_group_aggregate",
    "missingness_snapshot",
    "show_missingness_table",
]
