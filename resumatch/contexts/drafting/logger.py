"""
Drafting context logger.

Provides logging interface for drafting context with automatic [draft] prefix.
All drafting modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from resumatch.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[draft]"


def setup_drafting_logger(log_dir: Path = None, company_name: str = "") -> Path:
    """
    Setup logger for drafting context.

    Args:
        log_dir: Directory for this drafting session (None = LOGS_PATH)
        company_name: Company the letter is addressed to

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="draft",
        log_dir=log_dir,
        extra_provenance={"Company": company_name} if company_name else None,
    )


def _log_info(message: str) -> None:
    """Log info message with [draft] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [draft] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [draft] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [draft] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [draft] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")
