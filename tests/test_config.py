from config import PREDICTOR_COLUMNS, SOURCE_URL, PipelineConfig
from shooting_pipelines.transform.missingness import indicator_columns


def test_defaults():
    config = PipelineConfig()
    assert config.source_locator == SOURCE_URL
    assert config.strict_dates is False
    assert config.response_column == config.count_column
    # the regression predictors are the indicators of the nullable fields
    assert list(PREDICTOR_COLUMNS) == indicator_columns(config.nullable_fields)


def test_from_env(monkeypatch):
    monkeypatch.setenv("SHOOTING_SOURCE", "/tmp/shootings.csv")
    monkeypatch.setenv("SHOOTING_TIMEOUT", "12.5")
    monkeypatch.setenv("SHOOTING_STRICT_DATES", "true")

    config = PipelineConfig.from_env()
    assert config.source_locator == "/tmp/shootings.csv"
    assert config.timeout == 12.5
    assert config.strict_dates is True


def test_from_env_without_overrides(monkeypatch):
    for name in ("SHOOTING_SOURCE", "SHOOTING_TIMEOUT", "SHOOTING_STRICT_DATES"):
        monkeypatch.delenv(name, raising=False)
    assert PipelineConfig.from_env() == PipelineConfig()
