"""Tests for ISOWeekDateConverter."""

from datetime import date, datetime

import pandas as pd
import pytest
from omegaconf import OmegaConf

from iso_weekdate import ISOWeekDate, OutOfRangeError
from iso_weekdate.calendar import ISOWeekDateConverter


class TestYYYYWKToDate:
    """Tests for YYYYWW -> date conversion."""

    @pytest.mark.parametrize(
        "yyyywk, day_offset, expected",
        [
            (202501, 0, date(2024, 12, 30)),
            ("202501", 6, date(2025, 1, 5)),
            (202502, 0, date(2025, 1, 6)),
            (202452, 4, date(2024, 12, 27)),
            (202053, 6, date(2021, 1, 3)),
            (202401, 0, date(2024, 1, 1)),
        ],
    )
    def test_convert(self, converter, yyyywk, day_offset, expected):
        assert converter.convert_yyyywk_to_date(yyyywk, day_offset=day_offset) == expected

    @pytest.mark.parametrize("yyyywk", ["2025-01", 20251, "abcdef", 2025011])
    def test_malformed_code(self, converter, yyyywk):
        with pytest.raises(ValueError, match="Invalid YYYYWW format"):
            converter.convert_yyyywk_to_date(yyyywk)

    def test_week_not_in_year(self, converter):
        with pytest.raises(OutOfRangeError):
            converter.convert_yyyywk_to_date(202553)

    def test_bad_day_offset(self, converter):
        with pytest.raises(OutOfRangeError):
            converter.convert_yyyywk_to_date(202501, day_offset=7)

    def test_week_range(self, converter):
        assert converter.get_week_range(202501) == (date(2024, 12, 30), date(2025, 1, 5))

    def test_week_info(self, converter):
        info = converter.get_week_info(202410)
        assert info["year"] == 2024
        assert info["week"] == 10
        assert info["yyyywk"] == 202410
        assert info["monday"] == date(2024, 3, 4)
        assert info["wednesday"] == date(2024, 3, 6)
        assert info["sunday"] == date(2024, 3, 10)
        assert info["total_weeks_in_year"] == 52

    def test_week_info_invalid(self, converter):
        with pytest.raises(OutOfRangeError):
            converter.get_week_info(202453)


class TestDateToISOWeek:
    """Tests for date -> ISOWeekDate / YYYYWW conversion."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("2024-12-30", ISOWeekDate(2025, 1, 0)),
            (date(2025, 1, 1), ISOWeekDate(2025, 1, 2)),
            (datetime(2021, 1, 3, 15, 30), ISOWeekDate(2020, 53, 6)),
            (pd.Timestamp("2021-01-01"), ISOWeekDate(2020, 53, 4)),
        ],
    )
    def test_convert_date_to_iso_week_date(self, converter, value, expected):
        assert converter.convert_date_to_iso_week_date(value) == expected

    def test_convert_date_to_yyyywk(self, converter):
        assert converter.convert_date_to_yyyywk("2024-01-01") == 202401
        assert converter.convert_date_to_yyyywk("2024-07-15") == 202429
        assert converter.convert_date_to_yyyywk("2024-12-31") == 202501

    def test_invalid_date_string(self, converter):
        with pytest.raises(ValueError, match="Invalid date format"):
            converter.convert_date_to_yyyywk("30/12/2024")

    def test_configured_date_format(self, cfg, logger_config):
        cfg.calendar.date_format = "%d/%m/%Y"
        converter = ISOWeekDateConverter(config=cfg)
        assert converter.convert_date_to_yyyywk("30/12/2024") == 202501


class TestPandasBatch:
    """Tests for pandas batch conversion."""

    def test_dates_to_yyyywk(self, converter):
        dates = pd.Series(["2024-01-01", "2024-07-15", "2024-12-31", "2021-01-03"])
        result = converter.convert_date_to_yyyywk_pandas(dates)
        assert result.tolist() == [202401, 202429, 202501, 202053]
        assert result.dtype == "Int64"

    def test_missing_dates_become_na(self, converter):
        result = converter.convert_date_to_yyyywk_pandas(pd.Series(["2024-01-01", None, "2024-12-31"]))
        assert result.dtype == "Int64"
        assert result.isna().tolist() == [False, True, False]
        assert result.dropna().tolist() == [202401, 202501]

    def test_missing_timestamps_become_na(self, converter):
        result = converter.convert_date_to_yyyywk_pandas(pd.Series([pd.Timestamp("2021-01-03"), pd.NaT]))
        assert result.isna().tolist() == [False, True]
        assert result.iloc[0] == 202053

    def test_dates_to_yyyywk_matches_scalar(self, converter):
        dates = pd.Series(pd.date_range("2019-12-01", "2021-01-31", freq="D"))
        result = converter.convert_date_to_yyyywk_pandas(dates)
        expected = [converter.convert_date_to_yyyywk(d) for d in dates]
        assert result.tolist() == expected

    def test_scalar_falls_back(self, converter):
        assert converter.convert_date_to_yyyywk_pandas("2024-12-31") == 202501

    def test_yyyywk_to_dates(self, converter):
        codes = pd.Series([202501, 202053, 202410], index=[10, 11, 12])
        result = converter.convert_yyyywk_to_date_pandas(codes)
        assert result.index.tolist() == [10, 11, 12]
        assert result.dt.date.tolist() == [date(2024, 12, 30), date(2020, 12, 28), date(2024, 3, 4)]

    def test_yyyywk_to_dates_with_day_offset(self, converter):
        result = converter.convert_yyyywk_to_date_pandas(pd.Series([202501]), day_offset=6)
        assert result.dt.date.tolist() == [date(2025, 1, 5)]

    @pytest.mark.parametrize("codes", [[202553], [202400], ["abc"], [202401.7], [202401, None]])
    def test_yyyywk_to_dates_invalid(self, converter, codes):
        with pytest.raises(ValueError):
            converter.convert_yyyywk_to_date_pandas(pd.Series(codes))


class TestUtilities:
    """Tests for validation and helper methods."""

    @pytest.mark.parametrize(
        "yyyywk, expected",
        [(202401, True), (202053, True), (202453, False), (202400, False), (202454, False), ("invalid", False)],
    )
    def test_is_valid_yyyywk(self, converter, yyyywk, expected):
        assert converter.is_valid_yyyywk(yyyywk) is expected

    def test_get_weeks_in_year(self, converter):
        assert converter.get_weeks_in_year(2020) == 53
        assert converter.get_weeks_in_year(2025) == 52

    def test_get_current_week(self, converter):
        assert converter.get_current_week() == ISOWeekDate.from_date(date.today())

    def test_log_operations_from_config(self, cfg, logger_config):
        assert ISOWeekDateConverter(config=cfg).log_operations is True
        assert ISOWeekDateConverter(config=cfg, log_operations=False).log_operations is False
        assert ISOWeekDateConverter(config=OmegaConf.create({})).log_operations is False
