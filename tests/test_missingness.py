import numpy as np
import pandas as pd
import pytest

from shooting_pipelines.errors import SchemaMismatch
from shooting_pipelines.transform.missingness import (
    add_missing_indicators,
    indicator_columns,
    indicator_name,
)

FIELDS = ["PERP_AGE_GROUP", "PERP_SEX", "PERP_RACE"]


def test_indicator_name():
    assert indicator_name("PERP_SEX") == "missing_perp_sex"
    assert indicator_columns(["A", "b_C"]) == ["missing_a", "missing_b_c"]


def test_indicator_matches_null(raw_incidents):
    out = add_missing_indicators(raw_incidents, FIELDS)
    assert len(out) == len(raw_incidents)
    for field in FIELDS:
        expected = raw_incidents[field].isna().astype(int)
        assert (out[indicator_name(field)] == expected).all()
        assert set(out[indicator_name(field)].unique()) <= {0, 1}


def test_indicator_columns_appended_in_order():
    df = pd.DataFrame({"z": [1, 2], "b": [None, "x"], "a": ["y", np.nan]})
    out = add_missing_indicators(df, ["a", "b"])
    assert list(out.columns) == ["z", "b", "a", "missing_a", "missing_b"]
    assert out["missing_a"].tolist() == [0, 1]
    assert out["missing_b"].tolist() == [1, 0]
    assert "missing_a" not in df.columns


def test_unknown_field_fails_before_running():
    df = pd.DataFrame({"a": [1]})
    with pytest.raises(SchemaMismatch) as excinfo:
        add_missing_indicators(df, ["a", "nope"])
    assert excinfo.value.missing == ["nope"]


def test_empty_table():
    df = pd.DataFrame({"a": pd.Series([], dtype=object)})
    out = add_missing_indicators(df, ["a"])
    assert out.empty
    assert list(out.columns) == ["a", "missing_a"]
