"""Attach the log file handler at the configured level."""

from docpage.api.config.DocpageConfig import DocpageConfig
from docpage.utils.logger import configure_logging


def _configure_logging() -> None:
    try:
        level = DocpageConfig.load().log.level
    except ValueError:
        # The command itself reports the broken config
        level = "INFO"
    configure_logging(level=level)
