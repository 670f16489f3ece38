# Static charts for the borough report tables

from pathlib import Path
from typing import Dict, Optional

import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns
from matplotlib.figure import Figure
from rich.console import Console

console = Console()

sns.set(style="whitegrid")


def save_figure(fig: Figure, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path, dpi=300, bbox_inches="tight")
    console.print(f"[dim cyan]  Saved: {path.name}[/dim cyan]")
    return path


def plot_borough_counts(counts: pd.DataFrame, key: str = "BORO") -> Figure:
    """Shooting incidents per borough."""
    fig, ax = plt.subplots(figsize=(10, 5))
    sns.barplot(data=counts, x=key, y="count", color="steelblue", ax=ax)
    ax.set_title("Shooting Incidents by Borough")
    ax.set_xlabel("Borough")
    ax.set_ylabel("Incidents")
    fig.tight_layout()
    return fig


def plot_missing_by_borough(missing: pd.DataFrame, key: str = "BORO") -> Figure:
    """Missing perpetrator fields per borough, one bar per field."""
    fig, ax = plt.subplots(figsize=(12, 6))
    sns.barplot(data=missing, x=key, y="count", hue="missing_data_type", ax=ax)
    ax.set_title("Missing Perpetrator Data by Borough")
    ax.set_xlabel("Borough")
    ax.set_ylabel("Missing values")
    ax.legend(title="Field")
    fig.tight_layout()
    return fig


def plot_victim_profile(
    profile: pd.DataFrame,
    key: str = "BORO",
    age_col: str = "VIC_AGE_GROUP",
    sex_col: str = "VIC_SEX",
) -> Figure:
    """Victim age group by sex, one panel per borough."""
    data = profile.copy()
    data[[age_col, sex_col]] = data[[age_col, sex_col]].fillna("UNKNOWN")
    order = sorted(data[age_col].astype(str).unique())
    data[age_col] = data[age_col].astype(str)

    grid = sns.catplot(
        data=data,
        kind="bar",
        x=age_col,
        y="count",
        hue=sex_col,
        col=key,
        col_wrap=3,
        order=order,
        height=4,
        aspect=1.2,
    )
    grid.set_axis_labels("Victim age group", "Incidents")
    grid.set_titles("{col_name}")
    for ax in grid.axes.flat:
        ax.tick_params(axis="x", rotation=45)
    grid.figure.suptitle("Victim Age Group and Sex by Borough", y=1.02)
    return grid.figure


def plot_missing_vs_total(table: pd.DataFrame, key: str = "BORO") -> Figure:
    """Missing count against borough total, one series per field."""
    fig, ax = plt.subplots(figsize=(9, 6))
    sns.scatterplot(
        data=table,
        x="total_incidents",
        y="missing_count",
        hue="missing_data_type",
        style="missing_data_type",
        s=90,
        ax=ax,
    )
    for row in table.itertuples(index=False):
        ax.annotate(
            str(getattr(row, key)),
            (row.total_incidents, row.missing_count),
            textcoords="offset points",
            xytext=(4, 4),
            fontsize=8,
        )
    ax.set_title("Missing Perpetrator Data vs Total Incidents")
    ax.set_xlabel("Total incidents")
    ax.set_ylabel("Missing values")
    fig.tight_layout()
    return fig


def render_report_charts(
    tables: Dict[str, pd.DataFrame],
    out_dir: Optional[Path] = None,
    key: str = "BORO",
) -> Dict[str, Figure]:
    """Draw every chart; save PNGs under `out_dir` when given."""
    figures = {
        "01_incidents_by_borough": plot_borough_counts(tables["borough_counts"], key),
        "02_missing_by_borough": plot_missing_by_borough(tables["missing_by_borough"], key),
        "03_victim_profile": plot_victim_profile(tables["victim_profile"], key),
        "04_missing_vs_total": plot_missing_vs_total(tables["missing_vs_total"], key),
    }
    if out_dir is not None:
        for name, fig in figures.items():
            save_figure(fig, Path(out_dir) / f"{name}.png")
    return figures


__all__ = [
    "save_figure",
    "plot_borough_counts",
    "plot_missing_by_borough",
    "plot_victim_profile",
    "plot_missing_vs_total",
    "render_report_charts",
]
