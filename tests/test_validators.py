"""
Tests for post-cleaning validation.
"""
import pandas as pd
import pytest

from data_prep.cleaner import clean_institutions
from data_prep.validators import find_missing_closure_dates, validate_institutions


class TestValidateInstitutions:

    @pytest.mark.unit
    def test_clean_fixture_is_valid(self, raw_institutions):
        result = validate_institutions(clean_institutions(raw_institutions).frame)
        assert result.is_valid
        assert result.warnings == []
        assert "All checks passed" in result.summary()

    @pytest.mark.unit
    def test_raw_flags_are_errors(self, raw_institutions):
        result = validate_institutions(raw_institutions)
        assert not result.is_valid
        assert any("ACTIVE" in e for e in result.errors)

    @pytest.mark.unit
    def test_raw_codes_are_errors(self, raw_institutions):
        result = validate_institutions(raw_institutions)
        assert any(e.startswith("BKCLASS") for e in result.errors)

    @pytest.mark.unit
    def test_inactive_without_closure_date_warns(self, raw_institutions):
        raw_institutions.loc[1, "ENDEFYMD"] = None
        result = validate_institutions(clean_institutions(raw_institutions).frame)
        assert result.is_valid
        assert any("no closure date" in w for w in result.warnings)
        assert result.counts == {"missing_closure_date": 1}

    @pytest.mark.unit
    def test_duplicate_and_null_certs(self, raw_institutions):
        df = clean_institutions(raw_institutions).frame
        df["CERT"] = pd.array([101, 101, None, 104], dtype="Int64")
        result = validate_institutions(df)
        assert any("null CERT" in e for e in result.errors)
        assert any("duplicate CERT" in w for w in result.warnings)
        assert result.counts["null_cert"] == 1
        assert result.counts["duplicate_cert"] == 1

    @pytest.mark.unit
    def test_closed_before_established(self, raw_institutions):
        raw_institutions.loc[1, "ENDEFYMD"] = "01/01/1980"
        result = validate_institutions(clean_institutions(raw_institutions).frame)
        assert any("before they were established" in w for w in result.warnings)

    @pytest.mark.unit
    def test_empty_table(self):
        result = validate_institutions(pd.DataFrame())
        assert result.is_valid
        assert result.warnings == ["Table is empty (0 rows)."]
        assert result.counts == {}

    @pytest.mark.unit
    def test_counts_per_check_in_summary(self, raw_institutions):
        raw_institutions.loc[1, "ENDEFYMD"] = "01/01/1980"
        raw_institutions.loc[3, "ESTYMD"] = None
        result = validate_institutions(clean_institutions(raw_institutions).frame)
        assert result.n_rows == 4
        assert result.counts == {
            "missing_establishment_date": 1,
            "closed_before_established": 1,
        }
        summary = result.summary()
        assert "Institutions checked: 4" in summary
        assert "closed_before_established: 1" in summary

    @pytest.mark.unit
    def test_each_raw_flag_column_is_counted(self, raw_institutions):
        result = validate_institutions(raw_institutions)
        n_flags = sum(1 for e in result.errors if "expected boolean" in e)
        assert n_flags > 0
        assert result.counts["flag_dtype"] == n_flags


class TestFindMissingClosureDates:

    @pytest.mark.unit
    def test_returns_offending_rows(self, scenario_institutions):
        scenario_institutions.loc[1, "ENDEFYMD"] = pd.NaT
        rows = find_missing_closure_dates(scenario_institutions)
        assert rows["CERT"].tolist() == [2]

    @pytest.mark.unit
    def test_missing_columns_yield_nothing(self):
        assert find_missing_closure_dates(pd.DataFrame({"CERT": [1]})).empty
