# Missing-value indicator columns for the nullable perpetrator fields

from typing import List, Sequence

import pandas as pd
from rich.console import Console

from shooting_pipelines.errors import SchemaMismatch

console = Console()

INDICATOR_PREFIX = "missing_"


def indicator_name(field: str) -> str:
    """'PERP_SEX' -> 'missing_perp_sex'."""
    return f"{INDICATOR_PREFIX}{field.lower()}"


def indicator_columns(fields: Sequence[str]) -> List[str]:
    return [indicator_name(f) for f in fields]


def add_missing_indicators(df: pd.DataFrame, fields: Sequence[str]) -> pd.DataFrame:
    """
    Append one 0/1 column per field: 1 where the field is null, else 0.

    Indicators follow the original columns, in the order `fields` is given.
    """
    missing = [f for f in fields if f not in df.columns]
    if missing:
        raise SchemaMismatch(missing, context="missingness input")

    indicators = pd.DataFrame(
        {indicator_name(f): df[f].isna().astype("int8") for f in fields},
        index=df.index,
    )
    for col, n in indicators.sum().items():
        console.print(f"[cyan]{col}:[/cyan] {int(n):,} of {len(df):,}")

    return pd.concat([df.drop(columns=indicators.columns, errors="ignore"), indicators], axis=1)


__all__ = ["INDICATOR_PREFIX", "indicator_name", "indicator_columns", "add_missing_indicators"]
