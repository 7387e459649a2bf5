"""
ATS scoring for the Targeting context.

Scores a StructuredResume against a job description the way an Applicant
Tracking System would: keyword overlap, formatting heuristics and content
heuristics, combined into a weighted overall score with per-section findings
and a bounded list of recommendations.

The scorer is total: any StructuredResume (including an all-empty one) and
any job description string produce a result. An empty job description has
no keywords and takes the fixed keyword score.
"""

from typing import List, Optional

from resumatch.contexts.intake.resume_data_structure import StructuredResume
from resumatch.contexts.targeting.analysis_result import (
    ATSAnalysisResult,
    ContentFindings,
    DetailedAnalysis,
    FindingGroup,
    KeywordAnalysis,
    LengthAnalysis,
    SectionAnalysis,
)
from resumatch.contexts.targeting.job_keywords import analyze_keywords, extract_job_keywords
from resumatch.contexts.targeting.logger import _log_debug
from resumatch.contexts.targeting.scoring_rules import (
    CONTENT_WEIGHT_TENTHS,
    FORMAT_WEIGHT_TENTHS,
    GENERAL_FORMAT_TIPS,
    IMPROVE_ACTION_VERBS,
    IMPROVE_QUANTIFY,
    ISSUE_MISSING_CONTACT,
    ISSUE_NO_EXPERIENCE,
    ISSUE_NO_SKILLS,
    ISSUE_WEAK_SUMMARY,
    KEYWORD_WEIGHT_TENTHS,
    LENGTH_OPTIMAL,
    LENGTH_TOO_LONG,
    LENGTH_TOO_SHORT,
    QUANTIFIABLE_PATTERN,
    REC_ADD_KEYWORDS,
    REC_ADD_SKILLS,
    REC_ADD_SUMMARY,
    REC_IMPROVE_FORMAT,
    REC_MORE_KEYWORDS,
    SECTION_EDUCATION,
    SECTION_EXPERIENCE,
    SECTION_SKILLS,
    SECTION_SUMMARY,
    SENTENCE_BREAK,
    STRENGTH_ACTION_VERBS,
    STRENGTH_QUANTIFIED,
    ContentScoreRules,
    FormatScoreRules,
    KeywordScoreRules,
    LengthRules,
    ReadabilityRules,
    RecommendationRules,
    SectionScoreRules,
)
from resumatch.utils.keyword_registry import KeywordTables, load_keyword_tables
from resumatch.utils.text_processing import contains_term, count_words


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values (round() rounds half to even)."""
    return int(value + 0.5)


def _matching_keywords(text: str, job_keywords: List[str]) -> List[str]:
    lowered = text.lower()
    return [keyword for keyword in job_keywords if keyword.lower() in lowered]


class ATSScorer:
    """
    Scores structured resumes against job descriptions.

    Holds only the injected keyword tables, so one instance can be shared
    freely or created per call.

    Example:
        scorer = ATSScorer(load_keyword_tables())
        result = scorer.score(resume, job_description)
        print(result.overall_score)
    """

    def __init__(self, tables: KeywordTables):
        self.tables = tables

    # -------------------------------------------------------------------------
    # Entry point
    # -------------------------------------------------------------------------

    def score(self, resume: StructuredResume, job_description: Optional[str]) -> ATSAnalysisResult:
        """
        Analyze a resume against a job description.

        Args:
            resume: Structured resume
            job_description: Raw job description text (None treated as "")

        Returns:
            ATSAnalysisResult
        """
        job_description = job_description or ""
        resume_text = resume.plain_text()
        job_keywords = extract_job_keywords(job_description, self.tables)

        keyword_analysis = analyze_keywords(resume_text, job_keywords)
        formatting, format_score = self.analyze_formatting(resume)
        content, content_score = self.analyze_content(resume_text)
        keyword_score = self.keyword_score(keyword_analysis)
        overall_score = self.overall_score(keyword_score, format_score, content_score)

        _log_debug(
            f"{len(job_keywords)} job keywords, {len(keyword_analysis.found)} found; "
            f"scores k={keyword_score} f={format_score} c={content_score} -> {overall_score}"
        )

        return ATSAnalysisResult(
            overall_score=overall_score,
            keyword_score=keyword_score,
            format_score=format_score,
            content_score=content_score,
            matched_keywords=keyword_analysis.found,
            missing_keywords=keyword_analysis.missing,
            keyword_density=keyword_analysis.density,
            formatting=formatting,
            content=content,
            recommendations=self.recommendations(
                keyword_analysis, formatting, format_score, content, content_score
            ),
            detailed_analysis=DetailedAnalysis(
                sections=self.analyze_sections(resume, job_description, job_keywords),
                readability_score=self.readability_score(resume_text),
                length_analysis=self.length_analysis(resume_text),
            ),
        )

    # -------------------------------------------------------------------------
    # Scores
    # -------------------------------------------------------------------------

    def keyword_score(self, analysis: KeywordAnalysis) -> int:
        """Density as a percentage plus bonuses for many matches, clamped to [30, 95]."""
        rules = KeywordScoreRules
        if analysis.total == 0:
            return rules.NO_KEYWORDS_SCORE

        score = round_half_up(analysis.density * 100)
        if len(analysis.found) >= rules.BONUS_THRESHOLD:
            score += rules.BONUS
        if len(analysis.found) >= rules.EXTRA_BONUS_THRESHOLD:
            score += rules.EXTRA_BONUS
        return clamp(score, rules.MIN, rules.MAX)

    def analyze_formatting(self, resume: StructuredResume) -> tuple[FindingGroup, int]:
        """
        Penalize missing structural sections.

        Returns:
            (findings, score) with score floored at 60. When no specific
            recommendation applies, the general formatting tips are listed.
        """
        rules = FormatScoreRules
        findings = FindingGroup()
        score = rules.START

        if not resume.personal_info.name:
            findings.issues.append(ISSUE_MISSING_CONTACT)
            score -= rules.MISSING_NAME_PENALTY

        if len(resume.summary) < rules.MIN_SUMMARY_LEN:
            findings.issues.append(ISSUE_WEAK_SUMMARY)
            findings.recommendations.append(REC_ADD_SUMMARY)
            score -= rules.SHORT_SUMMARY_PENALTY

        if not resume.experience:
            findings.issues.append(ISSUE_NO_EXPERIENCE)
            score -= rules.NO_EXPERIENCE_PENALTY

        if resume.skills.is_empty():
            findings.issues.append(ISSUE_NO_SKILLS)
            findings.recommendations.append(REC_ADD_SKILLS)
            score -= rules.NO_SKILLS_PENALTY

        if not findings.recommendations:
            findings.recommendations.extend(GENERAL_FORMAT_TIPS)

        return findings, max(rules.MIN, score)

    def analyze_content(self, resume_text: str) -> tuple[ContentFindings, int]:
        """
        Reward quantified achievements and action verbs.

        Action verbs are counted as whole words, so "led" is not found in
        "skilled".

        Returns:
            (findings, score) clamped to [50, 95]
        """
        rules = ContentScoreRules
        findings = ContentFindings()
        score = rules.START

        if QUANTIFIABLE_PATTERN.search(resume_text):
            findings.strengths.append(STRENGTH_QUANTIFIED)
            score += rules.QUANTIFIED_BONUS
        else:
            findings.improvements.append(IMPROVE_QUANTIFY)
            score -= rules.UNQUANTIFIED_PENALTY

        verb_count = sum(1 for verb in self.tables.action_verbs if contains_term(resume_text, verb))
        if verb_count >= rules.MIN_ACTION_VERBS:
            findings.strengths.append(STRENGTH_ACTION_VERBS)
            score += rules.ACTION_VERB_BONUS
        else:
            findings.improvements.append(IMPROVE_ACTION_VERBS)
            score -= rules.FEW_ACTION_VERBS_PENALTY

        return findings, clamp(score, rules.MIN, rules.MAX)

    def overall_score(self, keyword_score: int, format_score: int, content_score: int) -> int:
        """Weighted 0.4/0.3/0.3 combination, rounded half up."""
        weighted_tenths = (
            keyword_score * KEYWORD_WEIGHT_TENTHS
            + format_score * FORMAT_WEIGHT_TENTHS
            + content_score * CONTENT_WEIGHT_TENTHS
        )
        return (weighted_tenths + 5) // 10

    # -------------------------------------------------------------------------
    # Per-section analysis
    # -------------------------------------------------------------------------

    def analyze_sections(
        self, resume: StructuredResume, job_description: str, job_keywords: List[str]
    ) -> List[SectionAnalysis]:
        """Analyze each non-empty section, in resume order."""
        sections = []
        if resume.summary:
            sections.append(self._analyze_summary(resume.summary, job_keywords))
        if resume.experience:
            sections.append(self._analyze_experience(resume, job_keywords))
        if not resume.skills.is_empty():
            sections.append(self._analyze_skills(resume, job_keywords))
        if resume.education:
            sections.append(self._analyze_education(resume, job_description))
        return sections

    def _analyze_summary(self, summary: str, job_keywords: List[str]) -> SectionAnalysis:
        rules = SectionScoreRules
        matching = _matching_keywords(summary, job_keywords)
        strong = len(summary) >= rules.SUMMARY_MIN_LEN and len(matching) >= rules.SUMMARY_MIN_KEYWORDS

        return SectionAnalysis(
            name=SECTION_SUMMARY,
            score=rules.SUMMARY_STRONG if strong else rules.SUMMARY_WEAK,
            issues=["Summary too brief"] if len(summary) < rules.SUMMARY_MIN_LEN else [],
            suggestions=(
                ["Include more keywords from job description"]
                if len(matching) < rules.SUMMARY_MIN_KEYWORDS
                else ["Well-optimized summary section"]
            ),
        )

    def _analyze_experience(
        self, resume: StructuredResume, job_keywords: List[str]
    ) -> SectionAnalysis:
        rules = SectionScoreRules
        descriptions = " ".join(exp.description for exp in resume.experience)
        matching = _matching_keywords(descriptions, job_keywords)
        quantified = bool(QUANTIFIABLE_PATTERN.search(descriptions))
        strong = len(matching) >= rules.EXPERIENCE_MIN_KEYWORDS and quantified

        return SectionAnalysis(
            name=SECTION_EXPERIENCE,
            score=rules.EXPERIENCE_STRONG if strong else rules.EXPERIENCE_WEAK,
            issues=[] if quantified else ["Missing quantifiable achievements"],
            suggestions=(
                ["Add more relevant keywords and achievements"]
                if len(matching) < rules.EXPERIENCE_MIN_KEYWORDS
                else ["Strong experience section with good keyword coverage"]
            ),
        )

    def _analyze_skills(self, resume: StructuredResume, job_keywords: List[str]) -> SectionAnalysis:
        rules = SectionScoreRules
        lowered_keywords = [keyword.lower() for keyword in job_keywords]
        matching = [
            skill
            for skill in resume.skills.all()
            if any(
                skill.lower() in keyword or keyword in skill.lower() for keyword in lowered_keywords
            )
        ]

        return SectionAnalysis(
            name=SECTION_SKILLS,
            score=rules.SKILLS_STRONG if len(matching) >= rules.SKILLS_MIN_MATCHES else rules.SKILLS_WEAK,
            issues=(
                ["Limited relevant skills listed"]
                if len(matching) < rules.SKILLS_LIMITED_MATCHES
                else []
            ),
            suggestions=(
                ["Add more skills that match job requirements"]
                if len(matching) < rules.SKILLS_MIN_MATCHES
                else ["Good skills alignment with job requirements"]
            ),
        )

    def _analyze_education(self, resume: StructuredResume, job_description: str) -> SectionAnalysis:
        rules = SectionScoreRules
        job_lower = job_description.lower()
        relevant = any(
            (edu.degree and edu.degree.lower() in job_lower)
            or (edu.school and edu.school.lower() in job_lower)
            for edu in resume.education
        )

        return SectionAnalysis(
            name=SECTION_EDUCATION,
            score=rules.EDUCATION_RELEVANT if relevant else rules.EDUCATION_OTHER,
            issues=[],
            suggestions=(
                ["Education aligns well with job requirements"]
                if relevant
                else ["Consider highlighting relevant coursework or certifications"]
            ),
        )

    # -------------------------------------------------------------------------
    # Auxiliary metrics
    # -------------------------------------------------------------------------

    def readability_score(self, resume_text: str) -> int:
        """Score mean words per sentence: 85 in [15, 25], 75 in [10, 30], else 65."""
        rules = ReadabilityRules
        sentences = len(SENTENCE_BREAK.split(resume_text))
        words_per_sentence = count_words(resume_text) / sentences

        low, high = rules.OPTIMAL_RANGE
        if low <= words_per_sentence <= high:
            return rules.OPTIMAL
        low, high = rules.ACCEPTABLE_RANGE
        if low <= words_per_sentence <= high:
            return rules.ACCEPTABLE
        return rules.OTHER

    def length_analysis(self, resume_text: str) -> LengthAnalysis:
        word_count = count_words(resume_text)
        if LengthRules.MIN_WORDS <= word_count <= LengthRules.MAX_WORDS:
            return LengthAnalysis(word_count, True, LENGTH_OPTIMAL)
        if word_count < LengthRules.MIN_WORDS:
            return LengthAnalysis(word_count, False, LENGTH_TOO_SHORT)
        return LengthAnalysis(word_count, False, LENGTH_TOO_LONG)

    # -------------------------------------------------------------------------
    # Recommendations
    # -------------------------------------------------------------------------

    def recommendations(
        self,
        keyword_analysis: KeywordAnalysis,
        formatting: FindingGroup,
        format_score: int,
        content: ContentFindings,
        content_score: int,
    ) -> List[str]:
        """
        Aggregate recommendations in fixed rule order, capped at 8.

        Order: low keyword density, named missing keywords, formatting,
        content. No re-ranking by severity.
        """
        rules = RecommendationRules
        recommendations = []

        if keyword_analysis.density < rules.LOW_DENSITY:
            recommendations.append(REC_MORE_KEYWORDS)

        if len(keyword_analysis.missing) > rules.MANY_MISSING:
            named = ", ".join(keyword_analysis.missing[: rules.MISSING_TO_NAME])
            recommendations.append(REC_ADD_KEYWORDS.format(keywords=named))

        if format_score < rules.WEAK_SCORE:
            recommendations.append(REC_IMPROVE_FORMAT)
            recommendations.extend(formatting.recommendations[: rules.FROM_EACH_GROUP])

        if content_score < rules.WEAK_SCORE:
            recommendations.extend(content.improvements[: rules.FROM_EACH_GROUP])

        return recommendations[: rules.MAX]


def score_resume(
    resume: StructuredResume, job_description: Optional[str], tables: Optional[KeywordTables] = None
) -> ATSAnalysisResult:
    """
    Score a structured resume against a job description.

    Args:
        resume: Output of structure_resume() (or any StructuredResume)
        job_description: Raw job description text; "" and None are valid
        tables: Keyword dictionaries (None = packaged tables)

    Returns:
        ATSAnalysisResult
    """
    return ATSScorer(tables or load_keyword_tables()).score(resume, job_description)
