"""
Integration tests for the structure -> score -> optimize -> draft pipeline.

Runs the public entry points end to end with the packaged keyword tables and
cover-letter templates.
"""

from dataclasses import replace

import pytest

from resumatch.contexts.drafting import CoverLetterRequest, draft_cover_letter
from resumatch.contexts.intake import (
    Skills,
    StructuredResume,
    UnreadableDocumentError,
    structure_resume,
    structure_resume_file,
)
from resumatch.contexts.intake.skills_extractor import MAX_SOFT_SKILLS, MAX_TECHNICAL_SKILLS
from resumatch.contexts.targeting import extract_job_keywords, optimize_resume, score_resume
from resumatch.contexts.targeting.scoring_rules import SECTION_EXPERIENCE

JANE_DOE = (
    "Jane Doe\njane@example.com\n555-123-4567\n\n"
    "SUMMARY\nResults-driven engineer with 5 years experience.\n\n"
    "SKILLS\nJavaScript, Leadership, SQL\n\n"
    "EXPERIENCE\n2020-2023\nBuilt scalable systems."
)

VARIED_INPUTS = [
    "x",
    "Jane Doe",
    "SKILLS\n\n",
    "EXPERIENCE\n2020 - 2021",
    "!!! ??? ...",
    "Python Python Python",
    "A" * 5000,
    "Name\n" * 200,
    "résumé – naïve café ✓",
]


@pytest.mark.integration
def test_structure_minimal_resume(tables):
    resume = structure_resume(JANE_DOE, tables)

    assert resume.personal_info.name == "Jane Doe"
    assert resume.personal_info.email == "jane@example.com"
    assert "JavaScript" in resume.skills.technical
    assert "SQL" in resume.skills.technical
    assert "Leadership" in resume.skills.soft


@pytest.mark.integration
def test_whitespace_only_is_unreadable(tables):
    with pytest.raises(UnreadableDocumentError):
        structure_resume("   \n\t  ", tables)


@pytest.mark.integration
def test_missing_experience_penalized(sample_resume, backend_job_description, tables):
    baseline = score_resume(sample_resume, backend_job_description, tables)
    result = score_resume(replace(sample_resume, experience=[]), backend_job_description, tables)

    assert result.format_score <= baseline.format_score - 20
    assert SECTION_EXPERIENCE not in [s.name for s in result.detailed_analysis.sections]


@pytest.mark.integration
def test_keyword_partition_in_extraction_order(tables):
    job = "JavaScript, Python, AWS, Leadership. " * 4
    resume = StructuredResume(skills=Skills(technical=["JavaScript"]))

    result = score_resume(resume, job, tables)

    assert "JavaScript" in result.matched_keywords
    assert result.missing_keywords == ["Python", "AWS", "Leadership"]
    assert result.keyword_score < 95


@pytest.mark.integration
def test_scoring_is_deterministic(sample_resume, backend_job_description, tables):
    first = score_resume(sample_resume, backend_job_description, tables)
    second = score_resume(sample_resume, backend_job_description, tables)
    assert first == second
    assert first.to_dict() == second.to_dict()


@pytest.mark.integration
@pytest.mark.parametrize("raw_text", VARIED_INPUTS)
def test_structuring_is_total(raw_text, tables, backend_job_description):
    """Any non-blank text structures and scores without raising."""
    resume = structure_resume(raw_text, tables)

    assert len(resume.skills.technical) <= MAX_TECHNICAL_SKILLS
    assert len(resume.skills.soft) <= MAX_SOFT_SKILLS

    result = score_resume(resume, backend_job_description, tables)
    for score in (
        result.overall_score,
        result.keyword_score,
        result.format_score,
        result.content_score,
    ):
        assert 0 <= score <= 100

    job_keywords = extract_job_keywords(backend_job_description, tables)
    assert not set(result.matched_keywords) & set(result.missing_keywords)
    assert sorted(result.matched_keywords + result.missing_keywords) == sorted(job_keywords)


@pytest.mark.integration
@pytest.mark.parametrize("raw_text", VARIED_INPUTS)
def test_empty_job_description_scores_75(raw_text, tables):
    result = score_resume(structure_resume(raw_text, tables), "", tables)
    assert result.keyword_score == 75
    assert result.matched_keywords == []
    assert result.missing_keywords == []


@pytest.mark.integration
def test_full_pipeline(sample_resume_path, backend_job_description, tables):
    """Structure a resume file, score it, optimize it and draft a cover letter."""
    resume = structure_resume_file(sample_resume_path, tables)
    assert resume.personal_info.name == "Jordan Rivera"

    result = score_resume(resume, backend_job_description, tables)
    assert result.missing_keywords == ["Agile", "Machine Learning", "Data Analysis"]

    optimized = optimize_resume(resume, backend_job_description, tables)
    rescored = score_resume(optimized.resume, backend_job_description, tables)
    assert rescored.keyword_score >= result.keyword_score

    draft = draft_cover_letter(
        CoverLetterRequest(
            resume=optimized.resume,
            job_title="Senior Backend Engineer",
            company_name="Acme Corp",
            job_description=backend_job_description,
        ),
        tables,
    )
    assert draft.content.endswith("Jordan Rivera")
    assert 60 <= draft.ats_score <= 95
