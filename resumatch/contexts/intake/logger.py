"""
Intake context logger.

Provides logging interface for the intake context with automatic [intake] prefix.
All intake modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from resumatch.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[intake]"


def setup_intake_logger(log_dir: Path = None, source: str = "") -> Path:
    """
    Setup logger for intake context.

    Args:
        log_dir: Directory for this intake session (None = LOGS_PATH)
        source: Resume file being structured, recorded in provenance

    Returns:
        Path to log file

    Example:
        from resumatch.contexts.intake.logger import setup_intake_logger, _log_info

        log_file = setup_intake_logger(source="jane_doe.docx")
        _log_info("Structuring resume...")
    """
    return _setup_logger(
        context_name="intake",
        log_dir=log_dir,
        extra_provenance={"Source": source} if source else None,
    )


# Wrapper functions with automatic [intake] prefix


def _log_info(message: str) -> None:
    """Log info message with [intake] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [intake] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [intake] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [intake] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [intake] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level intake-specific logging helpers


def log_structuring_result(source: str, resume, elapsed_time: float) -> None:
    """
    Log a one-line summary of what the structurer recovered.

    Args:
        source: Resume identifier (filename or "<text>")
        resume: StructuredResume returned by structure_resume()
        elapsed_time: Time taken
    """
    _log_success(f"{source}: structured ({elapsed_time:.2f}s)")
    _log_info(
        f"  {len(resume.experience)} experience, {len(resume.education)} education, "
        f"{len(resume.skills.technical)} technical / {len(resume.skills.soft)} soft skills"
    )
    missing = [
        field_name
        for field_name in ("name", "email", "phone", "location")
        if not getattr(resume.personal_info, field_name)
    ]
    if missing:
        _log_warning(f"  No {', '.join(missing)} found")
