import matplotlib

matplotlib.use("Agg")

import pandas as pd  # noqa: E402
import pytest  # noqa: E402

from config import PipelineConfig  # noqa: E402
from tests.factories import make_incidents  # noqa: E402


@pytest.fixture
def raw_incidents() -> pd.DataFrame:
    """25 incidents over 5 boroughs with a full-rank missingness profile."""
    return make_incidents()


@pytest.fixture
def incidents_csv(tmp_path, raw_incidents):
    path = tmp_path / "shootings.csv"
    raw_incidents.to_csv(path, index=False)
    return path


@pytest.fixture
def local_config(incidents_csv) -> PipelineConfig:
    return PipelineConfig(source_locator=str(incidents_csv))
