"""
ISO Week Date demonstration script

Constructs sample ISO week dates, converts today's date, shows week
arithmetic and prints the number of ISO weeks in a few years.

💡 Usage:
iso-weekdate-demo

Or with Hydra overrides:
iso-weekdate-demo demo.sample=[2020,53,3] demo.years=[2020,2026] demo.weeks_ahead=4
"""
# -----------------------------------------------------------------------------
# * Author: Evgeni Nikolaev
# * Emails: evgeni.nikolaev@ricoh-usa.com
# -----------------------------------------------------------------------------
# * UPDATED ON: 2025-09-02
# * CREATED ON: 2025-08-27
# -----------------------------------------------------------------------------
# COPYRIGHT @ 2025 Ricoh. All rights reserved.
# The information contained herein is copyright and proprietary to
# Ricoh and may not be reproduced, disclosed, or used in
# any manner without prior written permission from Ricoh.
# -----------------------------------------------------------------------------

import sys
from datetime import date
from pathlib import Path
from typing import Optional, TextIO

import hydra
from omegaconf import DictConfig, OmegaConf

from iso_weekdate.calendar import ISOWeekDate, ISOWeekDateConverter
from iso_weekdate.loggers.loguru.config import setup_logger, get_logger


def run_demo(cfg: DictConfig, today: Optional[date] = None, out: TextIO = sys.stdout) -> None:
    """Print sample conversions to ``out``."""
    logger = get_logger()
    converter = ISOWeekDateConverter(config=cfg)

    year, week, day_offset = OmegaConf.select(cfg, "demo.sample", default=[2025, 1, 0])
    years = OmegaConf.select(cfg, "demo.years", default=[2025, 2024])
    weeks_ahead = OmegaConf.select(cfg, "demo.weeks_ahead", default=1)
    today = today or date.today()

    print("ISO Week Date Demo", file=out)
    print("==================\n", file=out)

    # Create from components
    sample = ISOWeekDate(year, week, day_offset)
    print(f"ISO Date 1: {sample}", file=out)
    print(f"  -> Date: {sample.to_date():%Y-%m-%d}\n", file=out)

    # Create from a date
    current = converter.convert_date_to_iso_week_date(today)
    print(f"Today: {today:%Y-%m-%d}", file=out)
    print(f"  -> ISO Date: {current}\n", file=out)

    # Week arithmetic
    next_week = current.add_weeks(weeks_ahead)
    print(f"In {weeks_ahead} week(s): {next_week}", file=out)
    print(f"  -> Date: {next_week.to_date():%Y-%m-%d}\n", file=out)

    for y in years:
        print(f"Weeks in {y}: {converter.get_weeks_in_year(y)}", file=out)

    logger.info("Completed ISO week date demonstration")


@hydra.main(config_path="../conf", config_name="config", version_base=None)
def main(cfg: DictConfig) -> None:
    """
    Main function for the ISO week date demonstration.

    Args:
        cfg: Hydra configuration object
    """
    setup_logger(cfg, log_dir_override=Path.cwd())
    logger = get_logger()
    logger.info("Starting ISO week date demonstration")

    try:
        run_demo(cfg)
    except Exception as e:
        logger.error("Demonstration failed: {}", str(e))
        raise


if __name__ == "__main__":
    main()
