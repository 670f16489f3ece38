# End-to-end report pipeline with Rich console output

from pathlib import Path
from typing import Any, Dict, Optional

import matplotlib.pyplot as plt
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from config import FIGURES_DIR, PipelineConfig
from shooting_pipelines.ingestion.ingestion_master import run_ingestion
from shooting_pipelines.models.ols import fit_ols, show_fit_summary
from shooting_pipelines.transform.transform_master import run_transforms
from shooting_pipelines.utils.logging import clear_pipeline_log, show_pipeline_table
from shooting_pipelines.validate.core import show_missingness_table
from shooting_pipelines.viz.charts import render_report_charts

console = Console()


def create_header():
    header = """
    ╔═══════════════════════════════════════════════════════════════╗
    ║           NYPD SHOOTING INCIDENT REPORT PIPELINE              ║
    ║   Ingestion → Transform → Aggregate → Fit → Charts            ║
    ╚═══════════════════════════════════════════════════════════════╝
    """
    return Panel(header, style="bold cyan", border_style="bright_cyan", expand=False)


def create_step_panel(step_num, total_steps, title, status="running"):
    if status == "running":
        emoji, style = "⏳", "bold yellow"
    elif status == "complete":
        emoji, style = "✅", "bold green"
    else:
        emoji, style = "❌", "bold red"
    return Panel(f"{emoji} [bold]{title}[/bold]", title=f"[{style}]Step {step_num}/{total_steps}[/{style}]", border_style=style, expand=False)


def create_results_table(outputs: Dict[str, Any], date_column: str):
    df = outputs["incidents"]
    fit = outputs["fit"]
    table = Table(title="📊 Report Results", box=box.ROUNDED, show_header=True, header_style="bold magenta", border_style="bright_magenta")
    table.add_column("Metric", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")
    table.add_row("Incidents", f"{len(df):,}")
    table.add_row("Groups", f"{len(outputs['group_aggregate']):,}")
    dates = df[date_column].dropna()
    if len(dates):
        table.add_row("Date Range", f"{dates.min()} → {dates.max()}")
    table.add_row("R²", f"{fit.r_squared:.4f}")
    if outputs.get("figures_dir") is not None:
        table.add_row("Figures", str(outputs["figures_dir"]))
    return table


def run_pipeline(
    config: Optional[PipelineConfig] = None,
    figures_dir: Optional[Path] = None,
    render_charts: bool = True,
) -> Dict[str, Any]:
    """
    Load, transform, aggregate and fit in one pass.

    Returns the report tables plus `incidents`, `raw` and `fit`.
    Charts are drawn when `render_charts` is set and saved when
    `figures_dir` is given.
    """
    config = config or PipelineConfig()
    clear_pipeline_log()

    raw = run_ingestion(config)
    outputs: Dict[str, Any] = {"raw": raw, **run_transforms(raw, config)}

    show_missingness_table(outputs["incidents"], config.nullable_fields, "Nullable fields")

    fit = fit_ols(outputs["group_aggregate"], config.response_column, config.predictor_columns)
    show_fit_summary(fit)
    outputs["fit"] = fit

    outputs["figures_dir"] = None
    if render_charts:
        figures = render_report_charts(outputs, figures_dir, key=config.group_key[0])
        outputs["figures_dir"] = figures_dir
        for fig in figures.values():
            plt.close(fig)

    return outputs


def main():
    console.print()
    console.print(create_header())
    console.print()
    config = PipelineConfig.from_env()
    try:
        console.print(create_step_panel(1, 1, "Shooting incident report", "running"))
        with console.status("[bold yellow]Running pipeline...", spinner="dots"):
            outputs = run_pipeline(config, figures_dir=FIGURES_DIR)
        console.print(create_step_panel(1, 1, "Report Complete", "complete"))
        console.print()

        console.print(Panel("[bold green] PIPELINE COMPLETED SUCCESSFULLY [/bold green]", border_style="bright_green", expand=False))
        console.print()
        console.print(create_results_table(outputs, config.date_column))
        console.print()
        console.print(Panel("[bold cyan] Pipeline Execution Summary[/bold cyan]", border_style="cyan", expand=False))
        show_pipeline_table()
    except Exception as e:
        console.print()
        console.print(Panel(f"[bold red] PIPELINE FAILED [/bold red]\n\n[red]Error:[/red] {str(e)}\n\n[dim]Check logs above for details.[/dim]", border_style="bright_red", title="[bold red]Error[/bold red]", expand=False))
        raise


if __name__ == "__main__":
    main()
