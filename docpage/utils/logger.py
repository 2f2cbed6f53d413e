import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(docpage_home: Path | None = None, level: str = "INFO") -> None:
    """Configure unified docpage logging.

    Args:
        docpage_home: Directory holding docpage.log. If None, derived from environment.
        level: Logging level name for the docpage logger.
    """
    global _CONFIGURED
    root_logger = logging.getLogger("docpage")
    root_logger.setLevel(level)
    if _CONFIGURED:
        return

    if docpage_home is None:
        from .get_home_dir import get_home_dir

        docpage_home = get_home_dir()

    # Ensure directory exists
    docpage_home.mkdir(parents=True, exist_ok=True)
    log_file = docpage_home / "docpage.log"

    # Format
    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    # File Handler
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name.

    Handlers are attached by configure_logging() at CLI entry; library callers
    get plain propagation to whatever logging they have set up.
    """
    return logging.getLogger(f"docpage.{name}")
