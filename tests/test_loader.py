"""
Tests for reading the raw institutions CSV.
"""
import io

import pandas as pd
import pytest

from data_prep.loader import load_institutions_csv


class TestLoadInstitutionsCsv:

    @pytest.mark.unit
    def test_overrides_keep_codes_as_text(self, raw_csv_text):
        df = load_institutions_csv(io.StringIO(raw_csv_text))
        assert len(df) == 4
        assert df["ZIP"].tolist()[3] == "02110"
        assert df["FDICDBS"].tolist() == ["09", "02", "13", "01"]
        assert str(df["FED"].dtype) == "string"
        assert str(df["CHANGEC1"].dtype) == "string"
        assert str(df["CFPBENDDTE"].dtype) == "string"
        assert str(df["CERT"].dtype) == "Int64"

    @pytest.mark.unit
    def test_dates_left_as_text(self, raw_csv_text):
        df = load_institutions_csv(io.StringIO(raw_csv_text))
        assert df["ESTYMD"].iloc[0] == "01/15/1990"

    @pytest.mark.unit
    def test_without_overrides_inference_loses_leading_zeros(self, raw_csv_text):
        df = load_institutions_csv(io.StringIO(raw_csv_text), dtype_overrides={})
        assert df["FDICDBS"].tolist() == [9, 2, 13, 1]

    @pytest.mark.unit
    def test_reads_from_path(self, raw_csv_text, tmp_path):
        path = tmp_path / "institutions.csv"
        path.write_text(raw_csv_text)
        df = load_institutions_csv(str(path))
        assert df["NAME"].tolist()[0] == "First Prairie Bank"
        pd.testing.assert_frame_equal(df, load_institutions_csv(io.StringIO(raw_csv_text)))
