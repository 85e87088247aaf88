from iso_weekdate.loggers.loguru.config import setup_logger, setup_logger_for_script, get_logger

__all__ = ["setup_logger", "setup_logger_for_script", "get_logger"]
