# ingestion/ingestion_master.py
from typing import Optional

import pandas as pd
from rich.console import Console

from config import PipelineConfig
from shooting_pipelines.ingestion.incident_loader import load_incidents
from shooting_pipelines.utils.logging import log_step

console = Console()


def run_ingestion(config: Optional[PipelineConfig] = None) -> pd.DataFrame:
    config = config or PipelineConfig()
    console.print("\n[bold cyan]=== INGESTION PIPELINE START ===[/bold cyan]\n")

    df = load_incidents(
        config.source_locator,
        config.required_columns,
        timeout=config.timeout,
        na_values=config.na_values,
    )
    log_step("Raw incidents loaded", df)

    console.print("\n[green]Ingestion completed successfully.[/green]\n")
    return df
