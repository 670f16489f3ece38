from .ols import FitResult, fit_ols, show_fit_summary

__all__ = ["FitResult", "fit_ols", "show_fit_summary"]
