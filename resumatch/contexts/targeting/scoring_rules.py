"""
Scoring constants for ATS analysis.

Weights, thresholds, clamps and the fixed feedback strings the scorer emits.
Kept apart from ats_scorer.py so the rules can be read (and tuned) in one place.
"""

import re
from dataclasses import dataclass

# =============================================================================
# KEYWORD EXTRACTION
# =============================================================================

MAX_JOB_KEYWORDS = 25

# =============================================================================
# SCORE WEIGHTS AND BOUNDS
# =============================================================================

# Overall = 0.4 keyword + 0.3 format + 0.3 content, as tenths to stay exact
KEYWORD_WEIGHT_TENTHS = 4
FORMAT_WEIGHT_TENTHS = 3
CONTENT_WEIGHT_TENTHS = 3


@dataclass(frozen=True)
class KeywordScoreRules:
    NO_KEYWORDS_SCORE: int = 75
    BONUS_THRESHOLD: int = 10
    BONUS: int = 10
    EXTRA_BONUS_THRESHOLD: int = 15
    EXTRA_BONUS: int = 5
    MIN: int = 30
    MAX: int = 95


@dataclass(frozen=True)
class FormatScoreRules:
    START: int = 100
    MISSING_NAME_PENALTY: int = 15
    MIN_SUMMARY_LEN: int = 50
    SHORT_SUMMARY_PENALTY: int = 10
    NO_EXPERIENCE_PENALTY: int = 20
    NO_SKILLS_PENALTY: int = 15
    MIN: int = 60


@dataclass(frozen=True)
class ContentScoreRules:
    START: int = 75
    QUANTIFIED_BONUS: int = 10
    UNQUANTIFIED_PENALTY: int = 10
    MIN_ACTION_VERBS: int = 5
    ACTION_VERB_BONUS: int = 5
    FEW_ACTION_VERBS_PENALTY: int = 5
    MIN: int = 50
    MAX: int = 95


@dataclass(frozen=True)
class SectionScoreRules:
    SUMMARY_MIN_LEN: int = 100
    SUMMARY_MIN_KEYWORDS: int = 3
    SUMMARY_STRONG: int = 85
    SUMMARY_WEAK: int = 65

    EXPERIENCE_MIN_KEYWORDS: int = 5
    EXPERIENCE_STRONG: int = 90
    EXPERIENCE_WEAK: int = 70

    SKILLS_MIN_MATCHES: int = 5
    SKILLS_LIMITED_MATCHES: int = 3
    SKILLS_STRONG: int = 85
    SKILLS_WEAK: int = 60

    EDUCATION_RELEVANT: int = 80
    EDUCATION_OTHER: int = 70


@dataclass(frozen=True)
class ReadabilityRules:
    # Mean words per sentence
    OPTIMAL_RANGE: tuple = (15, 25)
    ACCEPTABLE_RANGE: tuple = (10, 30)
    OPTIMAL: int = 85
    ACCEPTABLE: int = 75
    OTHER: int = 65


@dataclass(frozen=True)
class LengthRules:
    MIN_WORDS: int = 400
    MAX_WORDS: int = 800


@dataclass(frozen=True)
class RecommendationRules:
    LOW_DENSITY: float = 0.3
    MANY_MISSING: int = 5
    MISSING_TO_NAME: int = 3
    WEAK_SCORE: int = 80
    FROM_EACH_GROUP: int = 2
    MAX: int = 8


# =============================================================================
# PATTERNS
# =============================================================================

QUANTIFIABLE_PATTERN = re.compile(r"\d+%|\d+\$|\d+ years|\d+k|\d+ million", re.IGNORECASE)
SENTENCE_BREAK = re.compile(r"[.!?]+")

# Job keywords worth weaving into experience descriptions
DESCRIPTION_KEYWORD_STEMS = ("manage", "develop", "implement", "lead", "design", "optimize")

# =============================================================================
# FEEDBACK MESSAGES
# =============================================================================

ISSUE_MISSING_CONTACT = "Missing contact information"
ISSUE_WEAK_SUMMARY = "Missing or insufficient professional summary"
ISSUE_NO_EXPERIENCE = "No work experience listed"
ISSUE_NO_SKILLS = "Missing skills section"

REC_ADD_SUMMARY = "Add a compelling professional summary (100-200 words)"
REC_ADD_SKILLS = "Add a dedicated skills section with relevant technical and soft skills"

GENERAL_FORMAT_TIPS = (
    "Use standard section headings (Experience, Education, Skills)",
    "Maintain consistent formatting throughout",
    "Use bullet points for easy scanning",
)

STRENGTH_QUANTIFIED = "Contains quantifiable achievements"
STRENGTH_ACTION_VERBS = "Uses strong action verbs effectively"
IMPROVE_QUANTIFY = "Add specific numbers and metrics to demonstrate impact"
IMPROVE_ACTION_VERBS = "Use more action verbs to describe accomplishments"

REC_MORE_KEYWORDS = "Incorporate more keywords from the job description throughout your resume"
REC_ADD_KEYWORDS = "Add these important keywords: {keywords}"
REC_IMPROVE_FORMAT = "Improve resume formatting for better ATS compatibility"

SECTION_SUMMARY = "Professional Summary"
SECTION_EXPERIENCE = "Work Experience"
SECTION_SKILLS = "Skills"
SECTION_EDUCATION = "Education"

LENGTH_OPTIMAL = "Resume length is optimal for ATS processing"
LENGTH_TOO_SHORT = "Consider adding more detail to reach 400-800 words"
LENGTH_TOO_LONG = "Consider condensing content to stay within 400-800 words for optimal ATS processing"
