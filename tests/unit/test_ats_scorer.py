"""Unit tests for the ATS scorer."""

import pytest

from resumatch.contexts.intake.resume_data_structure import (
    ExperienceEntry,
    PersonalInfo,
    Skills,
    StructuredResume,
)
from resumatch.contexts.targeting.analysis_result import KeywordAnalysis
from resumatch.contexts.targeting.ats_scorer import ATSScorer, round_half_up, score_resume
from resumatch.contexts.targeting.scoring_rules import (
    GENERAL_FORMAT_TIPS,
    IMPROVE_ACTION_VERBS,
    IMPROVE_QUANTIFY,
    ISSUE_NO_EXPERIENCE,
    LENGTH_OPTIMAL,
    LENGTH_TOO_LONG,
    LENGTH_TOO_SHORT,
    REC_ADD_SKILLS,
    REC_ADD_SUMMARY,
    REC_IMPROVE_FORMAT,
    REC_MORE_KEYWORDS,
    SECTION_SKILLS,
    STRENGTH_ACTION_VERBS,
    STRENGTH_QUANTIFIED,
)


@pytest.fixture
def scorer(tables):
    return ATSScorer(tables)


def _keywords(found: int, total: int) -> KeywordAnalysis:
    found_list = [f"kw{i}" for i in range(found)]
    missing_list = [f"missing{i}" for i in range(total - found)]
    return KeywordAnalysis(found=found_list, missing=missing_list, density=found / total)


@pytest.mark.unit
class TestKeywordScore:
    """Test keyword density scoring."""

    def test_no_keywords(self, scorer):
        assert scorer.keyword_score(KeywordAnalysis()) == 75

    def test_floor(self, scorer):
        assert scorer.keyword_score(_keywords(1, 4)) == 30

    def test_bonus_for_ten_matches(self, scorer):
        assert scorer.keyword_score(_keywords(12, 20)) == 70

    def test_ceiling(self, scorer):
        assert scorer.keyword_score(_keywords(10, 10)) == 95
        assert scorer.keyword_score(_keywords(15, 15)) == 95


@pytest.mark.unit
class TestOverallScore:
    """Test the weighted combination."""

    def test_weights(self, scorer):
        assert scorer.overall_score(100, 100, 100) == 100
        assert scorer.overall_score(95, 100, 95) == 97

    def test_rounds_half_up(self, scorer):
        assert scorer.overall_score(75, 60, 65) == 68

    def test_round_half_up(self):
        assert round_half_up(72.5) == 73
        assert round_half_up(72.49) == 72


@pytest.mark.unit
class TestFormatting:
    """Test structural penalties."""

    def test_empty_resume_floored(self, scorer):
        findings, score = scorer.analyze_formatting(StructuredResume())
        assert score == 60
        assert ISSUE_NO_EXPERIENCE in findings.issues
        assert findings.recommendations == [REC_ADD_SUMMARY, REC_ADD_SKILLS]

    def test_complete_resume_gets_general_tips(self, scorer, sample_resume):
        findings, score = scorer.analyze_formatting(sample_resume)
        assert score == 100
        assert findings.issues == []
        assert findings.recommendations == list(GENERAL_FORMAT_TIPS)

    def test_missing_experience_penalty(self, scorer, sample_resume):
        sample_resume.experience = []
        _, score = scorer.analyze_formatting(sample_resume)
        assert score == 80


@pytest.mark.unit
class TestContent:
    """Test content heuristics."""

    def test_strong_content(self, scorer):
        findings, score = scorer.analyze_content(
            "Achieved 30% growth; led, built, improved, reduced and launched"
        )
        assert score == 90
        assert findings.strengths == [STRENGTH_QUANTIFIED, STRENGTH_ACTION_VERBS]

    def test_weak_content(self, scorer):
        findings, score = scorer.analyze_content("Skilled engineer")
        assert score == 60
        assert findings.improvements == [IMPROVE_QUANTIFY, IMPROVE_ACTION_VERBS]


@pytest.mark.unit
class TestAuxiliaryMetrics:
    """Test readability and length analysis."""

    def test_length(self, scorer):
        assert scorer.length_analysis("word " * 500).recommendation == LENGTH_OPTIMAL
        assert scorer.length_analysis("word " * 500).optimal
        assert scorer.length_analysis("word " * 10).recommendation == LENGTH_TOO_SHORT
        assert scorer.length_analysis("word " * 900).recommendation == LENGTH_TOO_LONG

    def test_readability_of_empty_text(self, scorer):
        assert scorer.readability_score("") == 65

    def test_readability_optimal(self, scorer):
        sentence = " ".join(["word"] * 20)
        assert scorer.readability_score(sentence) == 85


@pytest.mark.unit
class TestScore:
    """Test the full analysis of a resume."""

    def test_empty_resume_and_job(self, scorer):
        result = scorer.score(StructuredResume(), "")

        assert result.keyword_score == 75
        assert result.format_score == 60
        assert result.content_score == 60
        assert result.overall_score == 66
        assert result.matched_keywords == []
        assert result.missing_keywords == []
        assert result.detailed_analysis.sections == []
        assert result.recommendations == [
            REC_MORE_KEYWORDS,
            REC_IMPROVE_FORMAT,
            REC_ADD_SUMMARY,
            REC_ADD_SKILLS,
            IMPROVE_QUANTIFY,
            IMPROVE_ACTION_VERBS,
        ]

    def test_none_job_description(self, scorer, sample_resume):
        assert scorer.score(sample_resume, None) == scorer.score(sample_resume, "")

    def test_skills_section_only_when_present(self, scorer):
        resume = StructuredResume(
            personal_info=PersonalInfo(name="Jane Doe"),
            experience=[ExperienceEntry(title="Dev", description="Built APIs")],
        )
        names = [section.name for section in scorer.score(resume, "Python").detailed_analysis.sections]
        assert SECTION_SKILLS not in names

        resume.skills = Skills(technical=["Python"])
        names = [section.name for section in scorer.score(resume, "Python").detailed_analysis.sections]
        assert SECTION_SKILLS in names

    def test_missing_keywords_named(self, scorer):
        job = "JavaScript Python React SQL AWS Docker Git Agile"
        result = scorer.score(StructuredResume(), job)

        assert len(result.missing_keywords) > 5
        assert f"Add these important keywords: {', '.join(result.missing_keywords[:3])}" in (
            result.recommendations
        )
        assert len(result.recommendations) <= 8

    def test_score_resume_function(self, sample_resume, backend_job_description):
        result = score_resume(sample_resume, backend_job_description)
        assert 0 <= result.overall_score <= 100

    def test_to_dict_shape(self, scorer, sample_resume, backend_job_description):
        data = scorer.score(sample_resume, backend_job_description).to_dict()
        assert {"overallScore", "matchedKeywords", "missingKeywords", "detailedAnalysis"} <= set(data)
        assert set(data["detailedAnalysis"]) == {"sections", "readabilityScore", "lengthAnalysis"}
