"""
Utility functions for the shooting incident pipeline.
"""

from .logging import log_step, show_pipeline_table, clear_pipeline_log, pipeline_log

__all__ = ["log_step", "show_pipeline_table", "clear_pipeline_log", "pipeline_log"]
