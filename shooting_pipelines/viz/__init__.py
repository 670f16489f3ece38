from .charts import render_report_charts, save_figure

__all__ = ["render_report_charts", "save_figure"]
