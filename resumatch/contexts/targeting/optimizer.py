"""
Keyword-driven resume optimization for the Targeting context.

Produces a copy of a StructuredResume with job keywords worked into the
summary, experience descriptions and skill lists, plus a list of keywords
the resume still lacks. The input resume is never modified.
"""

from dataclasses import dataclass, field, replace
from typing import List, Optional, Tuple

from resumatch.contexts.intake.resume_data_structure import (
    ExperienceEntry,
    Skills,
    StructuredResume,
)
from resumatch.contexts.intake.skills_extractor import MAX_SOFT_SKILLS, MAX_TECHNICAL_SKILLS
from resumatch.contexts.targeting.analysis_result import ATSAnalysisResult
from resumatch.contexts.targeting.ats_scorer import ATSScorer
from resumatch.contexts.targeting.job_keywords import extract_job_keywords
from resumatch.contexts.targeting.logger import _log_debug
from resumatch.contexts.targeting.scoring_rules import DESCRIPTION_KEYWORD_STEMS
from resumatch.utils.keyword_registry import KeywordTables, load_keyword_tables

SUMMARY_KEYWORDS_TO_ADD = 3
SUMMARY_SEED_KEYWORDS = 5
DESCRIPTION_KEYWORDS_TO_ADD = 2
TECHNICAL_SKILLS_TO_ADD = 5
SOFT_SKILLS_TO_ADD = 3
MAX_ADDITIONAL_KEYWORDS = 8


@dataclass
class OptimizedResume:
    """An optimized resume and the job keywords it still doesn't mention."""

    resume: StructuredResume
    additional_keywords: List[str] = field(default_factory=list)


def generate_summary(job_keywords: List[str]) -> str:
    """Write a generic summary around the top job keywords."""
    top_skills = ", ".join(job_keywords[:SUMMARY_SEED_KEYWORDS])
    return (
        f"Results-driven professional with expertise in {top_skills}. "
        "Proven ability to deliver high-quality solutions and drive business objectives "
        "through innovative approaches and collaborative teamwork."
    )


def optimize_summary(summary: str, job_keywords: List[str]) -> str:
    """Append up to three job keywords the summary lacks, or generate one if empty."""
    if not summary:
        return generate_summary(job_keywords)

    summary_lower = summary.lower()
    missing = [kw for kw in job_keywords if kw.lower() not in summary_lower]
    missing = missing[:SUMMARY_KEYWORDS_TO_ADD]
    if not missing:
        return summary
    return (
        f"{summary} Experienced in {', '.join(missing)} "
        "with a proven track record of delivering results."
    )


def enhance_description(description: str, job_keywords: List[str]) -> str:
    """Mention up to two missing management/development-style keywords."""
    description_lower = description.lower()
    relevant = [
        kw
        for kw in job_keywords
        if kw.lower() not in description_lower
        and any(stem in kw.lower() for stem in DESCRIPTION_KEYWORD_STEMS)
    ][:DESCRIPTION_KEYWORDS_TO_ADD]

    if not relevant:
        return description
    return (
        f"{description} Utilized {' and '.join(relevant)} "
        "to enhance project outcomes and team efficiency."
    )


def optimize_experience(
    experience: List[ExperienceEntry], job_keywords: List[str]
) -> List[ExperienceEntry]:
    return [
        replace(exp, description=enhance_description(exp.description, job_keywords))
        if exp.description
        else replace(exp)
        for exp in experience
    ]


def _lacks(skills: List[str], keyword: str) -> bool:
    keyword_lower = keyword.lower()
    return not any(keyword_lower in skill.lower() for skill in skills)


def optimize_skills(skills: Skills, job_keywords: List[str], tables: KeywordTables) -> Skills:
    """
    Add job keywords to the matching skill list.

    Keywords containing a technical term go to technical (up to five), those
    containing a soft term go to soft (up to three). The combined lists keep
    the structurer's caps of 15 technical and 12 soft skills.
    """
    technical = [
        kw
        for kw in job_keywords
        if any(term in kw.lower() for term in tables.technical_terms)
        and _lacks(skills.technical, kw)
    ]
    soft = [
        kw
        for kw in job_keywords
        if any(term in kw.lower() for term in tables.soft_terms) and _lacks(skills.soft, kw)
    ]
    return Skills(
        technical=(skills.technical + technical[:TECHNICAL_SKILLS_TO_ADD])[:MAX_TECHNICAL_SKILLS],
        soft=(skills.soft + soft[:SOFT_SKILLS_TO_ADD])[:MAX_SOFT_SKILLS],
    )


def suggest_additional_keywords(resume: StructuredResume, job_keywords: List[str]) -> List[str]:
    """Job keywords the original resume never mentions, up to eight."""
    resume_lower = resume.plain_text().lower()
    missing = [kw for kw in job_keywords if kw.lower() not in resume_lower]
    return missing[:MAX_ADDITIONAL_KEYWORDS]


def optimize_resume(
    resume: StructuredResume, job_description: Optional[str], tables: Optional[KeywordTables] = None
) -> OptimizedResume:
    """
    Rewrite a resume toward a job description.

    Args:
        resume: Resume to optimize (not modified)
        job_description: Raw job description text
        tables: Keyword dictionaries (None = packaged tables)

    Returns:
        OptimizedResume holding a new StructuredResume
    """
    if tables is None:
        tables = load_keyword_tables()

    job_keywords = extract_job_keywords(job_description or "", tables)
    optimized = replace(
        resume,
        personal_info=replace(resume.personal_info),
        summary=optimize_summary(resume.summary, job_keywords),
        experience=optimize_experience(resume.experience, job_keywords),
        education=[replace(edu) for edu in resume.education],
        skills=optimize_skills(resume.skills, job_keywords, tables),
        certifications=[replace(cert) for cert in resume.certifications],
    )
    additional = suggest_additional_keywords(resume, job_keywords)

    _log_debug(f"Optimized resume against {len(job_keywords)} keywords, {len(additional)} still missing")
    return OptimizedResume(resume=optimized, additional_keywords=additional)


def analyze_and_optimize(
    resume: StructuredResume, job_description: Optional[str], tables: Optional[KeywordTables] = None
) -> Tuple[ATSAnalysisResult, OptimizedResume]:
    """Score the original resume and produce its optimized copy."""
    if tables is None:
        tables = load_keyword_tables()

    analysis = ATSScorer(tables).score(resume, job_description)
    return analysis, optimize_resume(resume, job_description, tables)
