"""Unit tests for keyword-driven resume optimization."""

import pytest

from resumatch.contexts.intake.resume_data_structure import Skills, StructuredResume
from resumatch.contexts.intake.skills_extractor import MAX_SOFT_SKILLS, MAX_TECHNICAL_SKILLS
from resumatch.contexts.targeting.optimizer import (
    MAX_ADDITIONAL_KEYWORDS,
    analyze_and_optimize,
    enhance_description,
    generate_summary,
    optimize_resume,
    optimize_skills,
    optimize_summary,
    suggest_additional_keywords,
)


@pytest.mark.unit
class TestSummary:
    """Test summary rewriting."""

    def test_generated_when_empty(self):
        summary = optimize_summary("", ["Python", "AWS"])
        assert summary == generate_summary(["Python", "AWS"])
        assert "expertise in Python, AWS." in summary

    def test_adds_up_to_three_keywords(self):
        summary = optimize_summary("Engineer.", ["Python", "SQL", "AWS", "Docker"])
        assert summary == (
            "Engineer. Experienced in Python, SQL, AWS "
            "with a proven track record of delivering results."
        )

    def test_unchanged_when_nothing_missing(self):
        assert optimize_summary("Python engineer", ["python"]) == "Python engineer"


@pytest.mark.unit
class TestExperienceAndSkills:
    """Test description and skill list enrichment."""

    def test_enhance_description(self):
        description = enhance_description("Built APIs.", ["Project Management", "Python"])
        assert description == (
            "Built APIs. Utilized Project Management "
            "to enhance project outcomes and team efficiency."
        )

    def test_description_without_stem_keywords(self):
        assert enhance_description("Built APIs.", ["Python"]) == "Built APIs."

    def test_optimize_skills(self, tables):
        skills = optimize_skills(
            Skills(technical=["Python"], soft=[]), ["Python", "Docker", "Leadership"], tables
        )
        assert skills.technical == ["Python", "Docker"]
        assert skills.soft == ["Leadership"]

    def test_skill_caps_kept(self, tables):
        full = Skills(
            technical=[f"Tool{i}" for i in range(MAX_TECHNICAL_SKILLS)],
            soft=[f"Trait{i}" for i in range(MAX_SOFT_SKILLS)],
        )
        job = "JavaScript, Python, React, SQL, AWS, Docker, Git, Leadership, Communication"

        optimized = optimize_resume(StructuredResume(skills=full), job, tables)

        assert optimized.resume.skills.technical == full.technical
        assert optimized.resume.skills.soft == full.soft

    def test_skills_filled_up_to_cap(self, tables):
        skills = Skills(technical=[f"Tool{i}" for i in range(MAX_TECHNICAL_SKILLS - 1)])
        optimized = optimize_skills(skills, ["Python", "Docker"], tables)

        assert len(optimized.technical) == MAX_TECHNICAL_SKILLS
        assert optimized.technical[-1] == "Python"

    def test_additional_keywords_capped(self):
        keywords = [f"Keyword{i}" for i in range(12)]
        assert len(suggest_additional_keywords(StructuredResume(), keywords)) == (
            MAX_ADDITIONAL_KEYWORDS
        )


@pytest.mark.unit
class TestOptimizeResume:
    """Test the full optimization pass."""

    def test_input_not_modified(self, sample_resume, backend_job_description):
        before = sample_resume.to_dict()
        optimize_resume(sample_resume, backend_job_description)
        assert sample_resume.to_dict() == before

    def test_missing_keywords_reported(self, sample_resume, backend_job_description):
        optimized = optimize_resume(sample_resume, backend_job_description)
        assert "Agile" in optimized.additional_keywords
        assert "Python" not in optimized.additional_keywords
        assert "Agile" in optimized.resume.summary

    def test_analyze_and_optimize(self, sample_resume, backend_job_description):
        analysis, optimized = analyze_and_optimize(sample_resume, backend_job_description)
        assert analysis.missing_keywords[: len(optimized.additional_keywords)] == (
            optimized.additional_keywords
        )
