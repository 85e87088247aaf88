"""Shared fixtures for iso_weekdate tests."""

import pytest
from omegaconf import OmegaConf

from iso_weekdate.calendar import ISOWeekDateConverter
from iso_weekdate.loggers.loguru.config import setup_logger


@pytest.fixture
def cfg():
    """Minimal configuration with console logging off."""
    return OmegaConf.create({
        "calendar": {"date_format": "%Y-%m-%d", "log_operations": True},
        "loggers": {
            "loguru": {
                "default_level": "DEBUG",
                "console_enabled": False,
                "file_enabled": True,
            }
        },
    })


@pytest.fixture
def logger_config(cfg, tmp_path):
    """Logger writing into the test's temporary directory."""
    logger_config = setup_logger(cfg, log_dir_override=tmp_path)
    yield logger_config
    logger_config.logger.remove()


@pytest.fixture
def converter(cfg, logger_config):
    return ISOWeekDateConverter(config=cfg)
