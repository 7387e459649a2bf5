"""
Template-driven cover-letter drafting.

A cover letter is assembled from a StructuredResume and a job posting by
picking the skills and roles that overlap the job description, rendering one
of the packaged Jinja2 templates, then grading the result with a small
ATS-style heuristic. Nothing here calls a generative model: the letter is
plain string interpolation.

Templates: professional (default), modern, creative, executive.
"""

import re
import string
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from resumatch.contexts.drafting.logger import _log_debug, _log_warning
from resumatch.contexts.drafting.registries import CoverLetterTemplateRegistry
from resumatch.contexts.intake.resume_data_structure import ExperienceEntry, StructuredResume
from resumatch.contexts.targeting.job_keywords import extract_job_keywords
from resumatch.utils.keyword_registry import KeywordTables, load_keyword_tables
from resumatch.utils.text_processing import ordered_unique, similarity

DEFAULT_TEMPLATE = "professional"

SKILLS_FALLBACK_COUNT = 6
EXPERIENCE_FALLBACK_COUNT = 2
MIN_JOB_WORD_LEN = 3
SKILL_SIMILARITY_THRESHOLD = 0.7

MAX_FREQUENT_WORDS = 10
MIN_WORD_FREQUENCY = 2
MAX_LETTER_KEYWORDS = 15

# Cover-letter score: weights sum to 1, result clamped to [60, 95]
EMPTY_JOB_SCORE = 75
DENSITY_WEIGHT = 0.5
LENGTH_WEIGHT = 0.3
STRUCTURE_WEIGHT = 0.2
TARGET_LETTER_CHARS = 500
MIN_LETTER_SCORE = 60
MAX_LETTER_SCORE = 95

MIN_KEYWORD_MATCHES = 5
MIN_LETTER_CHARS = 300

GREETINGS = ("Dear", "Hello")
CLOSINGS = ("Sincerely", "Best regards")
BULLET_MARKERS = ("•", "-")
ACHIEVEMENT_WORDS = ("achieved", "improved")

SUGGEST_MORE_KEYWORDS = "Consider adding more keywords from the job description"
SUGGEST_EXPAND = "Expand your cover letter to provide more detail about your qualifications"
SUGGEST_ACHIEVEMENTS = "Include specific achievements and quantifiable results"
SUGGEST_BULLETS = "Use bullet points to highlight key qualifications"

# Filler words never counted as frequent job terms
STOPWORDS = frozenset(
    """
    the and for with you your our are will this that from have has who what
    all any can not but their they them its into about more such able must
    well also other than per new via etc including work team role
    """.split()
)


@dataclass
class CoverLetterRequest:
    """Inputs for one cover letter."""

    resume: StructuredResume
    job_title: str
    company_name: str
    job_description: str = ""
    template: str = DEFAULT_TEMPLATE
    custom_instructions: str = ""


@dataclass
class CoverLetterDraft:
    """A rendered cover letter with its heuristic grading."""

    content: str
    ats_score: int
    keyword_matches: List[str] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)
    template: str = DEFAULT_TEMPLATE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "content": self.content,
            "atsScore": self.ats_score,
            "keywordMatches": list(self.keyword_matches),
            "suggestions": list(self.suggestions),
            "template": self.template,
        }


def _job_words(job_description: str) -> List[str]:
    """Lowercased job words with surrounding punctuation stripped, 3+ chars."""
    words = (word.strip(string.punctuation) for word in job_description.lower().split())
    return [word for word in words if len(word) >= MIN_JOB_WORD_LEN]


def extract_relevant_skills(resume: StructuredResume, job_description: str) -> List[str]:
    """
    Skills (technical then soft) that overlap a job word.

    A skill is relevant when it contains a job word, is contained in one, or
    is close to one by difflib similarity. Falls back to the first six skills
    when nothing overlaps or there is no job description.
    """
    all_skills = resume.skills.all()
    job_words = _job_words(job_description or "")
    if not job_words:
        return all_skills[:SKILLS_FALLBACK_COUNT]

    relevant = []
    for skill in all_skills:
        lowered = skill.lower()
        if any(
            word in lowered
            or lowered in word
            or similarity(lowered, word) > SKILL_SIMILARITY_THRESHOLD
            for word in job_words
        ):
            relevant.append(skill)

    return relevant or all_skills[:SKILLS_FALLBACK_COUNT]


def extract_relevant_experience(
    resume: StructuredResume, job_description: str
) -> List[ExperienceEntry]:
    """Experience entries whose title, company or description mention a job word."""
    job_words = _job_words(job_description or "")
    if not job_words:
        return resume.experience[:EXPERIENCE_FALLBACK_COUNT]

    relevant = [
        exp
        for exp in resume.experience
        if any(
            word in f"{exp.title} {exp.company} {exp.description}".lower() for word in job_words
        )
    ]
    return relevant or resume.experience[:EXPERIENCE_FALLBACK_COUNT]


def extract_letter_keywords(job_description: str, tables: KeywordTables) -> List[str]:
    """
    Keywords a cover letter should echo.

    Dictionary keywords from the job description first, then words repeated
    at least twice (most frequent first), capped at 15.
    """
    keywords = extract_job_keywords(job_description, tables)
    known = {kw.lower() for kw in keywords}

    counts = Counter(
        word
        for word in (re.sub(r"[^a-z]", "", token) for token in job_description.lower().split())
        if len(word) >= MIN_JOB_WORD_LEN and word not in STOPWORDS and word not in known
    )
    frequent = [
        word for word, count in counts.most_common() if count >= MIN_WORD_FREQUENCY
    ][:MAX_FREQUENT_WORDS]

    return ordered_unique(keywords + frequent)[:MAX_LETTER_KEYWORDS]


def find_keyword_matches(
    resume: StructuredResume, job_description: str, tables: KeywordTables
) -> List[str]:
    """Letter keywords that already appear in the resume."""
    resume_text = resume.plain_text().lower()
    return [
        kw for kw in extract_letter_keywords(job_description, tables) if kw.lower() in resume_text
    ]


def analyze_structure(content: str) -> float:
    """
    Structure score in [0.5, 1.0].

    Base 0.5; +0.1 greeting, +0.1 closing, +0.1 bullets, +0.2 for three to
    six paragraphs.
    """
    score = 0.5
    if any(greeting in content for greeting in GREETINGS):
        score += 0.1
    if any(closing in content for closing in CLOSINGS):
        score += 0.1
    if any(marker in content for marker in BULLET_MARKERS):
        score += 0.1
    if 3 <= len(content.split("\n\n")) <= 6:
        score += 0.2
    return min(1.0, score)


def cover_letter_ats_score(content: str, job_description: str) -> int:
    """
    Heuristic ATS score for a rendered letter, 60..95.

    Blends the share of job words (longer than three characters) echoed in
    the letter, letter length against ~500 characters, and structure.
    Returns 75 when there is no job description.
    """
    if not (job_description or "").strip():
        return EMPTY_JOB_SCORE

    job_words = job_description.lower().split()
    content_words = set(content.lower().split())
    matching = [word for word in job_words if len(word) > 3 and word in content_words]

    density = len(matching) / len(job_words)
    length_score = min(1.0, len(content) / TARGET_LETTER_CHARS)
    raw = (
        density * DENSITY_WEIGHT
        + length_score * LENGTH_WEIGHT
        + analyze_structure(content) * STRUCTURE_WEIGHT
    ) * 100
    return min(MAX_LETTER_SCORE, max(MIN_LETTER_SCORE, int(raw + 0.5)))


def generate_suggestions(content: str, keyword_matches: List[str]) -> List[str]:
    suggestions = []
    if len(keyword_matches) < MIN_KEYWORD_MATCHES:
        suggestions.append(SUGGEST_MORE_KEYWORDS)
    if len(content) < MIN_LETTER_CHARS:
        suggestions.append(SUGGEST_EXPAND)
    if not any(word in content for word in ACHIEVEMENT_WORDS):
        suggestions.append(SUGGEST_ACHIEVEMENTS)
    if not any(marker in content for marker in BULLET_MARKERS):
        suggestions.append(SUGGEST_BULLETS)
    return suggestions


def resolve_template_name(template: str, registry: CoverLetterTemplateRegistry) -> str:
    """Return template if the registry has it, otherwise the professional template."""
    if template in registry.available_templates():
        return template
    _log_warning(f"Unknown cover letter template '{template}', using {DEFAULT_TEMPLATE}")
    return DEFAULT_TEMPLATE


def render_cover_letter(
    request: CoverLetterRequest,
    skills: List[str],
    experience: List[ExperienceEntry],
    registry: CoverLetterTemplateRegistry,
    template_name: str = DEFAULT_TEMPLATE,
) -> str:
    """Render a template with the selected skills and roles."""
    resume = request.resume
    template = registry.get_template(template_name)
    content = template.render(
        name=resume.personal_info.name,
        job_title=request.job_title,
        company_name=request.company_name,
        summary=resume.summary,
        skills=skills,
        experience=experience,
        experience_count=len(resume.experience),
        lead=experience[0] if experience else None,
        custom_instructions=request.custom_instructions.strip(),
    )
    return content.strip()


def draft_cover_letter(
    request: CoverLetterRequest,
    tables: Optional[KeywordTables] = None,
    registry: Optional[CoverLetterTemplateRegistry] = None,
) -> CoverLetterDraft:
    """
    Draft a cover letter for one job.

    Args:
        request: Resume, job details and template choice
        tables: Keyword dictionaries (None = packaged tables)
        registry: Template registry (None = packaged templates)

    Returns:
        CoverLetterDraft with content, ATS score, keyword matches and suggestions

    Example:
        >>> request = CoverLetterRequest(resume, "Backend Engineer", "Acme")
        >>> draft_cover_letter(request).content.splitlines()[0]
        'Dear Hiring Manager,'
    """
    if tables is None:
        tables = load_keyword_tables()
    if registry is None:
        registry = CoverLetterTemplateRegistry()

    job_description = request.job_description or ""
    skills = extract_relevant_skills(request.resume, job_description)
    experience = extract_relevant_experience(request.resume, job_description)
    _log_debug(f"Selected {len(skills)} skills and {len(experience)} roles")

    template_name = resolve_template_name(request.template, registry)
    content = render_cover_letter(request, skills, experience, registry, template_name)
    keyword_matches = find_keyword_matches(request.resume, job_description, tables)

    return CoverLetterDraft(
        content=content,
        ats_score=cover_letter_ats_score(content, job_description),
        keyword_matches=keyword_matches,
        suggestions=generate_suggestions(content, keyword_matches),
        template=template_name,
    )
