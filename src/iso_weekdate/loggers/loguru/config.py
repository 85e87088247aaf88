"""
Loguru configuration module for iso_weekdate with automatic script-local logging.

This module provides logging configuration that:
- Creates logs in the main script's directory by default
- Detects the executing script location using __main__.__file__
- Falls back to current working directory for interactive environments
- Supports manual log directory override when needed

Key Features:
- Reads settings from ``loggers.loguru`` (or ``loguru``) in the Hydra config,
  merged over built-in defaults
- Date-based subdirectories (YYYYMMDD) for log organization
- Time-stamped log files (am/pm-HH-MM-SS.log)
- Console and file logging with configurable levels
- Optional error-only log file

Usage:
    # Default behavior - logs created in script's directory
    logger_config = setup_logger(cfg)
    logger = get_logger()

    # With manual override
    logger_config = setup_logger(cfg, log_dir_override=Path('/custom/path'))
    logger = get_logger()
"""
# -----------------------------------------------------------------------------
# * Author: Evgeni Nikolaev
# * Emails: evgeni.nikolaev@ricoh-usa.com
# -----------------------------------------------------------------------------
# * UPDATED ON: 2025-09-02
# * CREATED ON: 2025-07-29
# -----------------------------------------------------------------------------
# COPYRIGHT @ 2025 Ricoh. All rights reserved.
# The information contained herein is copyright and proprietary to
# Ricoh and may not be reproduced, disclosed, or used in
# any manner without prior written permission from Ricoh.
# -----------------------------------------------------------------------------

import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from loguru import logger
from omegaconf import DictConfig, OmegaConf

DEFAULT_LOGURU_CONFIG = {
    'default_level': 'INFO',
    'console_enabled': True,
    'file_enabled': True,
    'file': {
        'base_dir': 'logs/loguru',
        'format': '{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} | {message}',
        'rotation': '100 MB',
        'retention': '30 days',
        'compression': 'gz'
    },
    'console': {
        'format': '<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan> | <level>{message}</level>',
        'colorize': True
    },
    'additional_sinks': {
        'error_file': {
            'enabled': False,
            'level': 'ERROR',
            'format': '{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} | {message}'
        }
    }
}

# Searched in order; the first path present in the config wins
LOGURU_CONFIG_PATHS = ('loggers.loguru', 'loguru', 'logging.loguru', 'logger.loguru')


def _time_stamp(now: datetime) -> str:
    """Format a time as am/pm-HH-MM-SS with a 12-hour clock."""
    am_pm = "am" if now.hour < 12 else "pm"
    hour_12 = now.hour % 12 or 12
    return f"{am_pm}-{hour_12:02d}-{now.minute:02d}-{now.second:02d}"


class LoggerConfig:
    """Configure and manage Loguru logging for the entire project."""

    def __init__(self, config: DictConfig, log_dir_override: Optional[Path] = None):
        """
        Initialize logger configuration.

        Args:
            config: Hydra configuration
            log_dir_override: Optional path to override the log directory location.
                            If provided, logs will be created relative to this path.
        """
        self.config = config
        self.logger = logger
        self.log_dir_override = Path(log_dir_override) if log_dir_override is not None else None
        self.current_log_file: Optional[Path] = None

        self.loguru_config = self._find_loguru_config()

        self._setup_logging()

    def _find_loguru_config(self) -> DictConfig:
        """Find the loguru node in the config and merge it over the defaults."""
        defaults = OmegaConf.create(DEFAULT_LOGURU_CONFIG)

        for path in LOGURU_CONFIG_PATHS:
            found_config = OmegaConf.select(self.config, path, default=None)
            if found_config is not None:
                return OmegaConf.merge(defaults, found_config)

        return defaults

    def _get_log_base_dir(self) -> Path:
        """
        Get the base directory for logs.

        If log_dir_override is provided, use it as the parent directory.
        Otherwise use the directory of the main script, or the current working
        directory when there is none (interactive sessions).
        """
        base_dir_str = self.loguru_config.file.base_dir

        if self.log_dir_override:
            return self.log_dir_override / base_dir_str

        import __main__

        main_file = getattr(__main__, '__file__', None)
        if main_file:
            return Path(main_file).parent.resolve() / base_dir_str

        return Path.cwd() / base_dir_str

    def _setup_logging(self):
        """Set up Loguru logging with file and console handlers."""
        # Remove default handler
        self.logger.remove()

        if self.loguru_config.console_enabled:
            self._setup_console_logging()

        if self.loguru_config.file_enabled:
            self._setup_file_logging()

        if self.loguru_config.additional_sinks.error_file.enabled:
            self._setup_error_file_logging()

    def _setup_console_logging(self):
        """Setup console logging handler."""
        console_config = self.loguru_config.console

        self.logger.add(
            sys.stdout,
            format=console_config.format,
            level=self.loguru_config.default_level,
            colorize=console_config.colorize,
            enqueue=True
        )

    def _log_dir(self, now: datetime) -> Path:
        log_dir = self._get_log_base_dir() / now.strftime("%Y%m%d")
        log_dir.mkdir(parents=True, exist_ok=True)
        return log_dir

    def _setup_file_logging(self):
        """Setup file logging handler with date/time directory structure."""
        file_config = self.loguru_config.file

        now = datetime.now()
        log_file = self._log_dir(now) / f"{_time_stamp(now)}.log"

        self.logger.add(
            str(log_file),
            format=file_config.format,
            level=self.loguru_config.default_level,
            rotation=file_config.rotation,
            retention=file_config.retention,
            compression=file_config.compression,
            enqueue=True
        )

        self.current_log_file = log_file

    def _setup_error_file_logging(self):
        """Setup an error-only log file next to the main log file."""
        error_config = self.loguru_config.additional_sinks.error_file

        now = datetime.now()
        error_file = self._log_dir(now) / f"errors-{_time_stamp(now)}.log"

        self.logger.add(
            str(error_file),
            format=error_config.format,
            level=error_config.level,
            enqueue=True
        )

    def set_level(self, level: str):
        """Change the logging level dynamically."""
        original_level = self.loguru_config.default_level
        self.loguru_config.default_level = level

        self._setup_logging()

        self.logger.info("Logging level changed from {} to {}", original_level, level)


# Global logger instance - will be initialized when setup_logger is called
project_logger = None


def setup_logger(config: DictConfig, log_dir_override: Optional[Path] = None) -> LoggerConfig:
    """
    Setup the global logger for the project.

    Args:
        config (DictConfig): Hydra configuration containing logging settings
        log_dir_override (Optional[Path]): Optional path to override log directory location.
                                          If not provided, logs will be created in the
                                          main script's directory.

    Returns:
        LoggerConfig: Configured logger instance

    Example:
        setup_logger(cfg)
        logger = get_logger()
        logger.info("Hello world!")
    """
    global project_logger
    project_logger = LoggerConfig(config, log_dir_override)
    return project_logger


def get_logger():
    """
    Get the configured logger instance.

    Returns:
        Logger: Configured Loguru logger instance

    Raises:
        RuntimeError: If setup_logger() hasn't been called yet
    """
    if project_logger is None:
        raise RuntimeError("Logger not initialized. Call setup_logger() first.")
    return project_logger.logger


def setup_logger_for_script(config: DictConfig, script_file: Optional[str] = None) -> LoggerConfig:
    """
    Convenience function to setup logger for scripts with local log directory.

    Args:
        config: Hydra configuration
        script_file: The __file__ variable from the calling script.
                    If provided, logs will be created in the script's directory.

    Returns:
        LoggerConfig: Configured logger instance
    """
    log_dir_override = Path(script_file).parent if script_file else None
    return setup_logger(config, log_dir_override)
