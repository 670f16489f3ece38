# OLS of borough incident totals on borough missing-data counts

from dataclasses import dataclass, field
from typing import Dict, List, Sequence

import numpy as np
import pandas as pd
import statsmodels.api as sm
from rich.console import Console
from rich.table import Table

from shooting_pipelines.errors import InsufficientData, SchemaMismatch

console = Console()

INTERCEPT = "const"


@dataclass(frozen=True)
class FitResult:
    response: str
    predictors: List[str]
    intercept: float
    coefficients: Dict[str, float]
    std_errors: Dict[str, float]
    t_values: Dict[str, float]
    p_values: Dict[str, float]
    residuals: Dict[str, float]
    residual_std_error: float
    r_squared: float
    adj_r_squared: float
    f_statistic: float
    n_obs: int
    df_resid: int
    fitted: List[float] = field(default_factory=list)

    def summary_frame(self) -> pd.DataFrame:
        """Coefficient table, intercept first, then predictors in fit order."""
        terms = [INTERCEPT, *self.predictors]
        estimates = {INTERCEPT: self.intercept, **self.coefficients}
        return pd.DataFrame(
            {
                "term": terms,
                "estimate": [estimates[t] for t in terms],
                "std_error": [self.std_errors[t] for t in terms],
                "t_value": [self.t_values[t] for t in terms],
                "p_value": [self.p_values[t] for t in terms],
            }
        )


def _residual_summary(resid: pd.Series) -> Dict[str, float]:
    q = np.quantile(resid.to_numpy(dtype=float), [0.0, 0.25, 0.5, 0.75, 1.0])
    return dict(zip(["min", "q1", "median", "q3", "max"], (float(v) for v in q)))


def fit_ols(df: pd.DataFrame, response: str, predictors: Sequence[str]) -> FitResult:
    """
    Fit response ~ intercept + sum(coef_i * predictor_i).

    Raises InsufficientData when there are no residual degrees of freedom
    (rows <= predictors + 1) or the design matrix is rank deficient.
    """
    predictors = list(predictors)
    missing = [c for c in [response, *predictors] if c not in df.columns]
    if missing:
        raise SchemaMismatch(missing, context="regression input")

    n_obs = len(df)
    n_params = len(predictors) + 1
    if n_obs <= n_params:
        raise InsufficientData(
            f"{n_obs} group(s) cannot support {len(predictors)} predictor(s) plus an "
            f"intercept; need at least {n_params + 1}."
        )

    y = df[response].astype(float)
    X = sm.add_constant(df[predictors].astype(float), has_constant="add")

    rank = np.linalg.matrix_rank(X.to_numpy())
    if rank < n_params:
        raise InsufficientData(
            f"Design matrix is rank deficient (rank {rank} < {n_params}); "
            "a predictor is constant or collinear with the others."
        )

    model = sm.OLS(y, X).fit()
    console.print(f"[green]OLS fitted on {n_obs} groups:[/green] R² = {model.rsquared:.4f}")

    params = model.params
    return FitResult(
        response=response,
        predictors=predictors,
        intercept=float(params[INTERCEPT]),
        coefficients={p: float(params[p]) for p in predictors},
        std_errors={k: float(v) for k, v in model.bse.items()},
        t_values={k: float(v) for k, v in model.tvalues.items()},
        p_values={k: float(v) for k, v in model.pvalues.items()},
        residuals=_residual_summary(model.resid),
        residual_std_error=float(np.sqrt(model.scale)),
        r_squared=float(model.rsquared),
        adj_r_squared=float(model.rsquared_adj),
        f_statistic=float(model.fvalue),
        n_obs=n_obs,
        df_resid=int(model.df_resid),
        fitted=[float(v) for v in model.fittedvalues],
    )


def show_fit_summary(result: FitResult) -> None:
    """Print coefficients and fit statistics as rich tables."""
    resid = Table(title="Residuals", show_header=True, header_style="bold magenta")
    for name in result.residuals:
        resid.add_column(name, justify="right")
    resid.add_row(*(f"{v:,.3f}" for v in result.residuals.values()))
    console.print(resid)

    coef = Table(
        title=f"OLS: {result.response} ~ {' + '.join(result.predictors)}",
        show_header=True,
        header_style="bold magenta",
    )
    coef.add_column("Term", style="cyan")
    coef.add_column("Estimate", justify="right", style="green")
    coef.add_column("Std. Error", justify="right")
    coef.add_column("t value", justify="right")
    coef.add_column("Pr(>|t|)", justify="right", style="yellow")
    for row in result.summary_frame().itertuples(index=False):
        coef.add_row(
            row.term,
            f"{row.estimate:,.4f}",
            f"{row.std_error:,.4f}",
            f"{row.t_value:,.3f}",
            f"{row.p_value:.4g}",
        )
    console.print(coef)

    console.print(
        f"[cyan]Residual standard error:[/cyan] {result.residual_std_error:,.3f} "
        f"on {result.df_resid} degrees of freedom"
    )
    console.print(
        f"[cyan]R²:[/cyan] {result.r_squared:.4f}  "
        f"[cyan]Adjusted R²:[/cyan] {result.adj_r_squared:.4f}  "
        f"[cyan]F:[/cyan] {result.f_statistic:,.2f}"
    )


__all__ = ["FitResult", "fit_ols", "show_fit_summary"]
