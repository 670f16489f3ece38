from dataclasses import dataclass, replace
from os import getenv
from pathlib import Path
from typing import Optional, Tuple

# Project Root
PROJECT_ROOT = Path(__file__).resolve().parent

# Reports
REPORTS_DIR = PROJECT_ROOT / "reports"
FIGURES_DIR = REPORTS_DIR / "figures"

# NYPD Shooting Incident Data (Historic)
SOURCE_URL = "https://data.cityofnewyork.us/api/views/833y-fsy8/rows.csv?accessType=DOWNLOAD"
REQUEST_TIMEOUT = 60.0  # seconds

# Tokens read as null on top of the pandas defaults
NA_VALUES: Tuple[str, ...] = ("(null)",)

# Columns every later stage needs
REQUIRED_COLUMNS: Tuple[str, ...] = (
    "OCCUR_DATE",
    "BORO",
    "VIC_AGE_GROUP",
    "VIC_SEX",
    "PERP_AGE_GROUP",
    "PERP_SEX",
    "PERP_RACE",
)

# Coordinates are not used by the analysis
DROPPED_COLUMNS: Tuple[str, ...] = (
    "X_COORD_CD",
    "Y_COORD_CD",
    "Latitude",
    "Longitude",
    "Lon_Lat",
)

DATE_COLUMN = "OCCUR_DATE"
DATE_FORMAT = "%m/%d/%Y"
STRICT_DATES = False

NULLABLE_FIELDS: Tuple[str, ...] = ("PERP_AGE_GROUP", "PERP_SEX", "PERP_RACE")

GROUP_KEY: Tuple[str, ...] = ("BORO",)
COUNT_COLUMN = "total"
VICTIM_COLUMNS: Tuple[str, ...] = ("VIC_AGE_GROUP", "VIC_SEX")

# OLS: borough totals ~ borough missing counts
RESPONSE_COLUMN = COUNT_COLUMN
PREDICTOR_COLUMNS: Tuple[str, ...] = (
    "missing_perp_age_group",
    "missing_perp_sex",
    "missing_perp_race",
)


def _env_flag(value: Optional[str]) -> Optional[bool]:
    if value is None:
        return None
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class PipelineConfig:
    source_locator: str = SOURCE_URL
    required_columns: Tuple[str, ...] = REQUIRED_COLUMNS
    dropped_columns: Tuple[str, ...] = DROPPED_COLUMNS
    date_column: str = DATE_COLUMN
    date_format: str = DATE_FORMAT
    strict_dates: bool = STRICT_DATES
    nullable_fields: Tuple[str, ...] = NULLABLE_FIELDS
    group_key: Tuple[str, ...] = GROUP_KEY
    count_column: str = COUNT_COLUMN
    victim_columns: Tuple[str, ...] = VICTIM_COLUMNS
    response_column: str = RESPONSE_COLUMN
    predictor_columns: Tuple[str, ...] = PREDICTOR_COLUMNS
    timeout: float = REQUEST_TIMEOUT
    na_values: Tuple[str, ...] = NA_VALUES

    @classmethod
    def from_env(cls) -> "PipelineConfig":
        """Defaults, overridden by SHOOTING_* environment variables when set."""
        config = cls()
        source = getenv("SHOOTING_SOURCE")
        if source:
            config = replace(config, source_locator=source)
        timeout = getenv("SHOOTING_TIMEOUT")
        if timeout:
            config = replace(config, timeout=float(timeout))
        strict = _env_flag(getenv("SHOOTING_STRICT_DATES"))
        if strict is not None:
            config = replace(config, strict_dates=strict)
        return config
