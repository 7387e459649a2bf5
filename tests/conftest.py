"""Shared fixtures for resumatch tests."""

from pathlib import Path

import pytest

from resumatch.contexts.intake.resume_parser import structure_resume
from resumatch.utils.keyword_registry import load_keyword_tables

FIXTURES_PATH = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture(scope="session")
def tables():
    """Packaged keyword tables."""
    return load_keyword_tables()


@pytest.fixture(scope="session")
def sample_resume_path():
    return FIXTURES_PATH / "sample_resume.txt"


@pytest.fixture(scope="session")
def sample_resume_text(sample_resume_path):
    return sample_resume_path.read_text(encoding="utf-8")


@pytest.fixture
def sample_resume(sample_resume_text, tables):
    """Fresh StructuredResume parsed from the sample resume fixture."""
    return structure_resume(sample_resume_text, tables)


@pytest.fixture(scope="session")
def backend_job_description():
    return (FIXTURES_PATH / "backend_engineer_job.txt").read_text(encoding="utf-8")
