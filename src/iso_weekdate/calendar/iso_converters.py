"""
ISO Week Date Converter (iso_converters.py)

A service class for converting between YYYYWW week codes, calendar dates and
ISOWeekDate values, with proper ISO 8601 compliance.

Includes pandas integration for efficient batch processing of date columns.
Requires pandas, numpy and follows iso_weekdate logging patterns.
"""
# %%
# -----------------------------------------------------------------------------
# Author: Evgeni Nikolaev
# emails: evgeni.nikolaev@ricoh-usa.com
# -----------------------------------------------------------------------------
# UPDATED ON: 2025-09-02
# CREATED ON: 2025-08-05
# -----------------------------------------------------------------------------
# COPYRIGHT @ 2025 Ricoh-USA. All rights reserved.
# The information contained herein is copyright and proprietary to
# Ricoh-USA and may not be reproduced, disclosed, or used in
# any manner without prior written permission from Ricoh-USA
# -----------------------------------------------------------------------------
# %%
from datetime import datetime, date
from typing import Union, Tuple
import re

import pandas as pd
import numpy as np
from omegaconf import DictConfig, OmegaConf
from iso_weekdate.calendar.iso_week_date import (
    ISOWeekDate,
    WEEKDAY_FULL_NAMES,
    weeks_in_iso_year,
)
from iso_weekdate.loggers.loguru.config import get_logger

DateLike = Union[str, date, datetime, pd.Timestamp]


class ISOWeekDateConverter:
    """
    A class for converting between YYYYWW week codes, calendar dates and ISO week dates.

    This class provides methods for:
    - Converting YYYYWW format to calendar dates
    - Converting calendar dates to ISOWeekDate values and YYYYWW codes
    - Batch conversion of pandas Series in both directions
    - Validating week codes

    Configuration (all optional, read from the ``calendar`` node):
    - date_format: strptime format for string dates (default: "%Y-%m-%d")
    - log_operations: default for the log_operations argument (default: False)

    Example:
        >>> converter = ISOWeekDateConverter(config)
        >>> converter.convert_yyyywk_to_date(202501)
        datetime.date(2024, 12, 30)
        >>> converter.convert_yyyywk_to_date(202501, day_offset=6)
        datetime.date(2025, 1, 5)
    """

    def __init__(self, config: DictConfig, log_operations: bool = None) -> None:
        """
        Initialize the ISO Week Date Converter.

        Args:
            config (DictConfig): Hydra configuration object
            log_operations: Whether to log conversion operations
                (default: calendar.log_operations from the config, else False)
        """
        self.config = config
        if log_operations is None:
            log_operations = OmegaConf.select(config, "calendar.log_operations", default=False)
        self.log_operations = bool(log_operations)
        self.date_format = OmegaConf.select(config, "calendar.date_format", default="%Y-%m-%d")
        self.logger = get_logger()
        self.logger.info("Initialized ISOWeekDateConverter with log_operations={}", self.log_operations)

    # ------------------------------------------------------------------
    # YYYYWW -> date
    # ------------------------------------------------------------------

    def convert_yyyywk_to_date(self, yyyywk: Union[int, str], day_offset: int = 0) -> date:
        """
        Convert a year-week format (YYYYWW) to a calendar date.

        Args:
            yyyywk: Year and week number in format YYYYWW (e.g., 202452 for 2024, week 52).
                   Can be passed as int or str.
            day_offset: Day of week (0=Monday, ..., 6=Sunday). Defaults to 0 (Monday).

        Returns:
            date: The calendar date

        Raises:
            ValueError: If yyyywk format is invalid.
            OutOfRangeError: If the week or day offset is out of range.

        Example:
            >>> converter.convert_yyyywk_to_date(202452, day_offset=4)
            datetime.date(2024, 12, 27)
        """
        try:
            year, week = self._parse_yyyywk(yyyywk)
            result = ISOWeekDate(year, week, day_offset).to_date()

            if self.log_operations:
                self.logger.debug("Converted YYYYWK {} day_offset {} to: {}", yyyywk, day_offset, result)

            return result

        except Exception as e:
            self.logger.error(
                "Error converting YYYYWK {} day_offset {} to date: {}", yyyywk, day_offset, str(e)
            )
            raise

    def _parse_yyyywk(self, yyyywk: Union[int, str]) -> Tuple[int, int]:
        """Parse YYYYWW format into year and week components."""
        yyyywk_str = str(yyyywk)

        if not re.match(r'^\d{6}$', yyyywk_str):
            raise ValueError(f"Invalid YYYYWW format: {yyyywk}. Expected 6 digits (e.g., 202401)")

        year = int(yyyywk_str[:4])
        week = int(yyyywk_str[4:6])

        if year < 1:
            raise ValueError(f"Year must be between 1 and 9999, got: {year}")

        if self.log_operations:
            self.logger.debug("Parsed YYYYWK {} into year: {}, week: {}", yyyywk, year, week)
        return year, week

    def get_week_range(self, yyyywk: Union[int, str]) -> Tuple[date, date]:
        """Get the Monday and Sunday dates for a given ISO week."""
        monday = self.convert_yyyywk_to_date(yyyywk, day_offset=0)
        sunday = self.convert_yyyywk_to_date(yyyywk, day_offset=6)

        if self.log_operations:
            self.logger.debug("Week {} range: {} to {}", yyyywk, monday, sunday)

        return monday, sunday

    def get_week_info(self, yyyywk: Union[int, str]) -> dict:
        """Get comprehensive information about a given week."""
        try:
            year, week = self._parse_yyyywk(yyyywk)
            monday = ISOWeekDate(year, week, 0)

            info = {
                'year': year,
                'week': week,
                'yyyywk': monday.yyyywk,
            }
            for offset, name in enumerate(WEEKDAY_FULL_NAMES):
                info[name] = monday.add_days(offset).to_date()
            info['total_weeks_in_year'] = weeks_in_iso_year(year)

            if self.log_operations:
                self.logger.debug(
                    "Generated week info for YYYYWK {}: {} to {}", yyyywk, info['monday'], info['sunday']
                )

            return info

        except Exception as e:
            self.logger.error("Error generating week info for YYYYWK {}: {}", yyyywk, str(e))
            raise

    # ------------------------------------------------------------------
    # date -> ISO week date / YYYYWW
    # ------------------------------------------------------------------

    def _to_date(self, value: DateLike) -> date:
        if isinstance(value, str):
            try:
                return datetime.strptime(value, self.date_format).date()
            except ValueError as e:
                self.logger.error("Invalid date format. Expected '{}', got: {}", self.date_format, value)
                raise ValueError(f"Invalid date format. Expected '{self.date_format}', got: {value}") from e
        if isinstance(value, pd.Timestamp):
            return value.date()
        if isinstance(value, datetime):
            return value.date()
        return value

    def convert_date_to_iso_week_date(self, value: DateLike) -> ISOWeekDate:
        """
        Convert a calendar date to an ISOWeekDate.

        Args:
            value: Date to convert. Can be:
                - String in the configured date format ("YYYY-MM-DD" by default)
                - date or datetime object
                - pandas Timestamp

        Returns:
            ISOWeekDate: The ISO week date

        Example:
            >>> str(converter.convert_date_to_iso_week_date("2024-12-30"))
            '2025-W01-0 (Mon)'
        """
        result = ISOWeekDate.from_date(self._to_date(value))

        if self.log_operations:
            self.logger.debug("Converted date {} to ISO week date: {}", value, result)

        return result

    def convert_date_to_yyyywk(self, value: DateLike) -> int:
        """
        Convert a date to YYYYWW format using the ISO week-numbering year.

        Example:
            >>> converter.convert_date_to_yyyywk("2024-12-31")
            202501
        """
        try:
            result = self.convert_date_to_iso_week_date(value).yyyywk

            if self.log_operations:
                self.logger.debug("Converted date {} to YYYYWK: {}", value, result)

            return result

        except Exception as e:
            self.logger.error("Error converting date {} to YYYYWK: {}", value, str(e))
            raise

    # ------------------------------------------------------------------
    # pandas batch processing
    # ------------------------------------------------------------------

    def convert_date_to_yyyywk_pandas(self, value: Union[DateLike, pd.Series]) -> Union[int, pd.Series]:
        """
        Convert date(s) to YYYYWW format with pandas optimization for batch processing.

        Missing dates (None or NaT) come back as <NA> in a nullable Int64 Series.

        Example:
            >>> dates = pd.Series(["2024-01-01", "2024-07-15", "2024-12-31"])
            >>> converter.convert_date_to_yyyywk_pandas(dates)
            0    202401
            1    202429
            2    202501
            dtype: Int64
        """
        try:
            if not isinstance(value, pd.Series):
                return self.convert_date_to_yyyywk(value)

            self.logger.info("Processing batch conversion for {} dates", len(value))
            if pd.api.types.is_string_dtype(value):
                dates = pd.to_datetime(value, format=self.date_format)
            else:
                dates = pd.to_datetime(value)
            iso = dates.dt.isocalendar()
            result = iso.year.astype("Int64") * 100 + iso.week.astype("Int64")

            if self.log_operations:
                self.logger.debug("Batch converted {} dates to YYYYWK format", len(value))

            return result

        except Exception as e:
            self.logger.error("Error in pandas batch conversion: {}", str(e))
            raise

    def convert_yyyywk_to_date_pandas(self, yyyywk: pd.Series, day_offset: int = 0) -> pd.Series:
        """
        Convert a Series of YYYYWW codes to calendar dates (datetime64) in one pass.

        Raises:
            ValueError: If any code is malformed or names a week its year does not have.
        """
        try:
            codes = pd.to_numeric(yyyywk, errors="coerce").to_numpy(dtype="float64", na_value=np.nan)
            if np.isnan(codes).any():
                raise ValueError("YYYYWW series contains non-numeric values")
            fractional = codes != np.floor(codes)
            if fractional.any():
                raise ValueError(f"YYYYWW codes must be whole numbers: {codes[fractional].tolist()}")
            codes = codes.astype("int64")

            years = codes // 100
            weeks = codes % 100
            max_weeks = np.array([weeks_in_iso_year(int(y)) for y in years], dtype="int64")
            invalid = (weeks < 1) | (weeks > max_weeks)
            if invalid.any():
                raise ValueError(f"Invalid YYYYWW codes: {codes[invalid].tolist()}")
            if not 0 <= day_offset <= 6:
                raise ValueError(f"Day offset must be between 0 and 6, got: {day_offset}")

            jan_4 = pd.to_datetime(pd.DataFrame({"year": years, "month": 1, "day": 4}, index=yyyywk.index))
            week_1_mondays = jan_4 - pd.to_timedelta(jan_4.dt.weekday, unit="D")
            offsets = pd.to_timedelta(pd.Series((weeks - 1) * 7 + day_offset, index=yyyywk.index), unit="D")
            result = week_1_mondays + offsets

            if self.log_operations:
                self.logger.debug("Batch converted {} YYYYWK codes to dates", len(yyyywk))

            return result

        except Exception as e:
            self.logger.error("Error in pandas batch conversion of YYYYWK codes: {}", str(e))
            raise

    # ------------------------------------------------------------------
    # Utilities
    # ------------------------------------------------------------------

    def get_weeks_in_year(self, year: int) -> int:
        """Get the number of ISO weeks in a given year (52 or 53)."""
        weeks = weeks_in_iso_year(year)

        if self.log_operations:
            self.logger.debug("Year {} has {} ISO weeks", year, weeks)

        return weeks

    def is_valid_yyyywk(self, yyyywk: Union[int, str]) -> bool:
        """Check if a YYYYWW format is valid."""
        try:
            year, week = self._parse_yyyywk(yyyywk)
            is_valid = 1 <= week <= weeks_in_iso_year(year)
        except ValueError:
            is_valid = False

        if self.log_operations:
            self.logger.debug("Validation for YYYYWK {}: {}", yyyywk, is_valid)

        return is_valid

    def get_current_week(self) -> ISOWeekDate:
        """Get the ISO week date of today."""
        current = ISOWeekDate.today()
        self.logger.info("Current ISO week date: {}", current)
        return current
