import numpy as np
import pandas as pd
import pytest

from shooting_pipelines.errors import InsufficientData, SchemaMismatch
from shooting_pipelines.models.ols import FitResult, fit_ols, show_fit_summary

PREDICTORS = ["missing_age", "missing_sex", "missing_race"]


def _groups(n: int = 5) -> pd.DataFrame:
    """Per-borough missing counts with a full-rank design."""
    df = pd.DataFrame(
        {
            "missing_age": [1, 2, 3, 4, 5, 6, 9],
            "missing_sex": [0, 1, 0, 2, 1, 4, 2],
            "missing_race": [0, 0, 1, 2, 3, 1, 5],
        }
    ).head(n)
    df["total"] = 2 * df["missing_age"] + 0 * df["missing_sex"] + 0 * df["missing_race"] + 10
    return df


def test_exact_fit_recovers_coefficients():
    result = fit_ols(_groups(5), "total", PREDICTORS)

    assert isinstance(result, FitResult)
    assert result.intercept == pytest.approx(10.0, abs=1e-8)
    assert [result.coefficients[p] for p in PREDICTORS] == pytest.approx([2.0, 0.0, 0.0], abs=1e-8)
    assert result.r_squared == pytest.approx(1.0)
    assert result.n_obs == 5
    assert result.df_resid == 1


def test_four_groups_three_predictors_is_insufficient():
    with pytest.raises(InsufficientData):
        fit_ols(_groups(4), "total", PREDICTORS)


def test_five_groups_three_predictors_succeeds():
    result = fit_ols(_groups(5), "total", PREDICTORS)
    assert result.df_resid == 1


def test_rank_deficient_design_is_insufficient():
    df = _groups(7)
    df["missing_race"] = 0
    with pytest.raises(InsufficientData, match="rank"):
        fit_ols(df, "total", PREDICTORS)


def test_missing_column_is_schema_mismatch():
    with pytest.raises(SchemaMismatch):
        fit_ols(_groups(5), "total", ["missing_age", "missing_weight"])


def test_noisy_fit_matches_least_squares():
    df = _groups(7)
    df["total"] = df["total"] + np.array([0.5, -1.0, 0.25, 0.0, 1.5, -0.75, 0.3])

    result = fit_ols(df, "total", PREDICTORS)

    X = np.column_stack([np.ones(len(df)), df[PREDICTORS].to_numpy(dtype=float)])
    beta, *_ = np.linalg.lstsq(X, df["total"].to_numpy(dtype=float), rcond=None)
    assert result.intercept == pytest.approx(beta[0])
    assert [result.coefficients[p] for p in PREDICTORS] == pytest.approx(beta[1:])

    assert 0.0 < result.r_squared < 1.0
    assert result.adj_r_squared < result.r_squared
    assert all(se > 0 for se in result.std_errors.values())
    assert result.residuals["min"] <= result.residuals["median"] <= result.residuals["max"]
    assert len(result.fitted) == len(df)


def test_coefficient_order_follows_predictors():
    order = ["missing_race", "missing_age", "missing_sex"]
    result = fit_ols(_groups(6), "total", order)
    frame = result.summary_frame()

    assert frame["term"].tolist() == ["const", *order]
    assert frame.loc[frame["term"] == "missing_age", "estimate"].item() == pytest.approx(2.0, abs=1e-8)


def test_show_fit_summary_runs():
    df = _groups(7)
    df["total"] = df["total"] + np.array([0.5, -1.0, 0.25, 0.0, 1.5, -0.75, 0.3])
    show_fit_summary(fit_ols(df, "total", PREDICTORS))
