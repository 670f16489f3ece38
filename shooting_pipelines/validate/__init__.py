# __init__ for validate utils


from .core import (
    run_validation_checks,
    validate_group_aggregate,
    missingness_snapshot,
    show_missingness_table,
)

__all__ = [
    "run_validation_checks",
    "validate_group_aggregate",
    "missingness_snapshot",
    "show_missingness_table",
]
