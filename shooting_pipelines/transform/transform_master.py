"""
transform_master.py

Orchestrates the cleaning, indicator and aggregation steps.
"""

from typing import Dict, Optional

import pandas as pd
from rich.console import Console

from config import PipelineConfig
from shooting_pipelines.transform.aggregate import build_report_tables
from shooting_pipelines.transform.cleaning import normalize_schema
from shooting_pipelines.transform.missingness import add_missing_indicators, indicator_columns
from shooting_pipelines.utils.logging import log_step
from shooting_pipelines.validate.core import run_validation_checks, validate_group_aggregate

console = Console()


def run_transforms(raw: pd.DataFrame, config: Optional[PipelineConfig] = None) -> Dict[str, pd.DataFrame]:
    """
    Run the transformation stages on the loaded incidents.

    Parameters:
        raw: DataFrame returned by ingestion
        config: Pipeline configuration (defaults when omitted)

    Returns:
        Dict with:
            - incidents: cleaned rows with missing_* indicator columns
            - group_aggregate, borough_counts, missing_by_borough,
              victim_profile, missing_vs_total: report tables
    """
    config = config or PipelineConfig()
    console.print("\n[bold cyan]=== TRANSFORM PIPELINE START ===[/bold cyan]\n")

    df = normalize_schema(raw, config)
    run_validation_checks(df, "Transform: After schema normalization", config)

    df = add_missing_indicators(df, config.nullable_fields)
    log_step("Missing indicators added", df)

    tables = build_report_tables(df, config)
    validate_group_aggregate(
        tables["group_aggregate"],
        source_rows=len(df),
        indicator_cols=indicator_columns(config.nullable_fields),
        total_column=config.count_column,
    )
    log_step("Group aggregate", tables["group_aggregate"])

    console.print("\n[green]Transformation completed successfully.[/green]\n")
    return {"incidents": df, **tables}
