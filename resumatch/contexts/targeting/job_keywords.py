"""
Job keyword extraction and matching for ATS analysis.

Keywords come from three scans of the lowercased job description, in order:
industry dictionaries, the combined skills database, then 2- and 3-word
windows equal to a known relevant phrase. The result keeps scan order (no
frequency ranking) and is capped at 25.
"""

import string
from typing import List

from resumatch.contexts.targeting.analysis_result import KeywordAnalysis
from resumatch.contexts.targeting.scoring_rules import MAX_JOB_KEYWORDS
from resumatch.utils.keyword_registry import KeywordTables
from resumatch.utils.text_processing import ordered_unique, title_case


def _phrase_tokens(text: str) -> List[str]:
    """Whitespace tokens with surrounding punctuation removed ("management," -> "management")."""
    tokens = (token.strip(string.punctuation) for token in text.split())
    return [token for token in tokens if token]


def extract_job_keywords(job_description: str, tables: KeywordTables) -> List[str]:
    """
    Extract ATS keywords from a job description.

    Args:
        job_description: Raw job description text (None treated as "")
        tables: Keyword dictionaries

    Returns:
        Up to 25 keywords, unique case-insensitively, in extraction order

    Example:
        >>> extract_job_keywords("Need JavaScript and AWS", tables)
        ['JavaScript', 'AWS']
    """
    text = (job_description or "").lower()
    keywords = []

    for industry_terms in tables.industry_keywords.values():
        keywords.extend(term for term in industry_terms if term.lower() in text)

    keywords.extend(skill for skill in tables.skills_database if skill.lower() in text)

    phrases = {phrase.lower() for phrase in tables.relevant_phrases}
    tokens = _phrase_tokens(text)
    for i in range(len(tokens) - 1):
        two_words = " ".join(tokens[i : i + 2])
        if two_words in phrases:
            keywords.append(title_case(two_words))
        if i < len(tokens) - 2:
            three_words = " ".join(tokens[i : i + 3])
            if three_words in phrases:
                keywords.append(title_case(three_words))

    return ordered_unique(keywords)[:MAX_JOB_KEYWORDS]


def analyze_keywords(resume_text: str, job_keywords: List[str]) -> KeywordAnalysis:
    """
    Partition job keywords by case-insensitive presence in the resume text.

    Args:
        resume_text: StructuredResume.plain_text()
        job_keywords: Output of extract_job_keywords()

    Returns:
        KeywordAnalysis; density is found / total (0 with no keywords)
    """
    resume_lower = resume_text.lower()
    found, missing = [], []
    for keyword in job_keywords:
        (found if keyword.lower() in resume_lower else missing).append(keyword)

    density = len(found) / len(job_keywords) if job_keywords else 0.0
    return KeywordAnalysis(found=found, missing=missing, density=density)
