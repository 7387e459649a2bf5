"""
Targeting context logger.

Provides logging interface for targeting context with automatic [target] prefix.
All targeting modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from resumatch.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[target]"


def setup_targeting_logger(log_dir: Path = None, job_source: str = "") -> Path:
    """
    Setup logger for targeting context.

    Args:
        log_dir: Directory for this scoring session (None = LOGS_PATH)
        job_source: Job description the resume is scored against

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="target",
        log_dir=log_dir,
        extra_provenance={"Job description": job_source} if job_source else None,
    )


def _log_info(message: str) -> None:
    """Log info message with [target] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [target] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [target] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [target] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [target] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_analysis_result(resume_name: str, result, elapsed_time: float) -> None:
    """
    Log score breakdown of an ATS analysis.

    Args:
        resume_name: Resume identifier
        result: ATSAnalysisResult from score_resume()
        elapsed_time: Time taken
    """
    _log_success(f"{resume_name}: overall {result.overall_score}/100 ({elapsed_time:.2f}s)")
    _log_info(
        f"  keyword {result.keyword_score}, format {result.format_score}, "
        f"content {result.content_score}"
    )
    _log_info(
        f"  {len(result.matched_keywords)} matched / "
        f"{len(result.matched_keywords) + len(result.missing_keywords)} job keywords"
    )
    if result.missing_keywords:
        _log_warning(f"  Missing: {', '.join(result.missing_keywords[:5])}")
