from dataclasses import replace

import pytest

from config import PipelineConfig
from shooting_pipelines.errors import InsufficientData, SchemaMismatch
from shooting_pipelines.pipeline import create_results_table, run_pipeline
from shooting_pipelines.transform import run_transforms
from shooting_pipelines.utils.logging import pipeline_log
from tests.factories import BOROUGH_PROFILE, make_incidents


def test_run_transforms_end_to_end(raw_incidents):
    out = run_transforms(raw_incidents, PipelineConfig())

    incidents = out["incidents"]
    assert len(incidents) == len(raw_incidents)
    assert list(incidents.columns[-3:]) == [
        "missing_perp_age_group",
        "missing_perp_sex",
        "missing_perp_race",
    ]
    agg = out["group_aggregate"].set_index("BORO")
    assert agg.loc["QUEENS", "total"] == 6
    assert agg.loc["QUEENS", "missing_perp_sex"] == 2
    assert agg.loc["QUEENS", "non_missing_perp_sex"] == 4


def test_run_pipeline_from_local_csv(local_config, raw_incidents):
    outputs = run_pipeline(local_config, render_charts=False)

    assert len(outputs["raw"]) == len(raw_incidents)
    assert outputs["group_aggregate"]["total"].sum() == len(raw_incidents)
    assert len(outputs["group_aggregate"]) == len(BOROUGH_PROFILE)

    fit = outputs["fit"]
    assert fit.n_obs == len(BOROUGH_PROFILE)
    assert fit.predictors == list(local_config.predictor_columns)
    assert 0.0 <= fit.r_squared <= 1.0 + 1e-9

    steps = [entry["step"] for entry in pipeline_log]
    assert steps[0] == "Raw incidents loaded"
    assert "Missing indicators added" in steps

    table = create_results_table(outputs, local_config.date_column)
    assert table.row_count >= 4


def test_run_pipeline_saves_figures(local_config, tmp_path):
    fig_dir = tmp_path / "figures"
    run_pipeline(local_config, figures_dir=fig_dir)
    assert sorted(p.name for p in fig_dir.glob("*.png")) == [
        "01_incidents_by_borough.png",
        "02_missing_by_borough.png",
        "03_victim_profile.png",
        "04_missing_vs_total.png",
    ]


def test_run_pipeline_too_few_boroughs(tmp_path):
    path = tmp_path / "four.csv"
    profile = {"A": (3, 1, 0, 0), "B": (4, 2, 1, 0), "C": (5, 3, 0, 1), "D": (6, 4, 2, 2)}
    make_incidents(profile).to_csv(path, index=False)

    with pytest.raises(InsufficientData):
        run_pipeline(PipelineConfig(source_locator=str(path)), render_charts=False)


def test_run_pipeline_schema_mismatch(tmp_path):
    path = tmp_path / "bad.csv"
    make_incidents().drop(columns=["VIC_SEX"]).to_csv(path, index=False)

    with pytest.raises(SchemaMismatch):
        run_pipeline(PipelineConfig(source_locator=str(path)), render_charts=False)


def test_unparseable_dates_do_not_stop_the_pipeline(tmp_path):
    raw = make_incidents()
    raw.loc[[0, 5], "OCCUR_DATE"] = "13/40/2020"
    path = tmp_path / "dates.csv"
    raw.to_csv(path, index=False)

    config = PipelineConfig(source_locator=str(path))
    outputs = run_pipeline(config, render_charts=False)
    assert outputs["incidents"]["OCCUR_DATE"].isna().sum() == 2
    assert len(outputs["incidents"]) == len(raw)

    with pytest.raises(ValueError):
        run_pipeline(replace(config, strict_dates=True), render_charts=False)
