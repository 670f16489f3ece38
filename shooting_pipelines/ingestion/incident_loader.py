# Raw shooting incident ingestion from NYC Open Data (or a local CSV)
import io
from pathlib import Path
from typing import Iterable, Sequence, Union
from urllib.parse import urlparse

import pandas as pd
import requests
from rich.console import Console

from config import NA_VALUES, REQUEST_TIMEOUT
from shooting_pipelines.errors import SchemaMismatch, SourceUnavailable

console = Console()

Source = Union[str, Path]


def is_url(source: Source) -> bool:
    return urlparse(str(source)).scheme in ("http", "https")


def _fetch_text(url: str, timeout: float) -> str:
    """Single GET, no retry. Any transport failure is a SourceUnavailable."""
    console.print(f"[cyan]Downloading:[/cyan] {url}")
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.Timeout as e:
        raise SourceUnavailable(f"Timed out after {timeout}s fetching {url}") from e
    except requests.RequestException as e:
        raise SourceUnavailable(f"Could not fetch {url}: {e}") from e
    return response.text


def read_csv_source(
    source: Source,
    timeout: float = REQUEST_TIMEOUT,
    na_values: Sequence[str] = NA_VALUES,
) -> pd.DataFrame:
    """Read a CSV from a URL or local path into a DataFrame."""
    try:
        if is_url(source):
            text = _fetch_text(str(source), timeout)
            return pd.read_csv(io.StringIO(text), na_values=list(na_values), low_memory=False)

        path = Path(source)
        if not path.exists():
            raise SourceUnavailable(f"CSV not found: {path}")
        console.print(f"[cyan]Reading:[/cyan] {path.name}")
        return pd.read_csv(path, na_values=list(na_values), low_memory=False)
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
        raise SourceUnavailable(f"{source} is not a readable CSV: {e}") from e
    except OSError as e:
        raise SourceUnavailable(f"Could not read {source}: {e}") from e


def check_required_columns(
    df: pd.DataFrame, required_columns: Iterable[str], context: str = "raw incidents"
) -> None:
    missing = [c for c in required_columns if c not in df.columns]
    if missing:
        console.print(f"[bold red]Schema check failed.[/bold red] [red]Missing:[/red] {missing}")
        raise SchemaMismatch(missing, context=context)


def load_incidents(
    source: Source,
    required_columns: Iterable[str],
    timeout: float = REQUEST_TIMEOUT,
    na_values: Sequence[str] = NA_VALUES,
) -> pd.DataFrame:
    """
    Load the raw incident table and confirm the columns later stages need.

    Raises:
        SourceUnavailable: network, timeout, HTTP status or file errors
        SchemaMismatch: a required column is absent
    """
    df = read_csv_source(source, timeout=timeout, na_values=na_values)
    check_required_columns(df, required_columns)
    console.print(f"[yellow]Loaded rows:[/yellow] {len(df):,}")
    return df


__all__ = ["is_url", "read_csv_source", "check_required_columns", "load_incidents"]
