"""
Skills extraction for the Intake context.

Finds the skills section of a resume, splits it into candidate skills and
sorts each candidate into technical or soft using the keyword tables. When a
resume has no skills heading, the whole document is scanned against a
reduced set of unambiguous dictionary entries instead.

The dictionaries are data (resumatch/keywords/skills.yaml), passed in as a
KeywordTables instance; nothing here hard-codes a skill name.
"""

import re
from typing import List, Optional, Tuple

from resumatch.contexts.intake.logger import _log_debug
from resumatch.contexts.intake.resume_data_structure import Skills
from resumatch.contexts.intake.section_patterns import is_major_section_header, is_skills_heading
from resumatch.utils.keyword_registry import KeywordTables
from resumatch.utils.text_processing import find_term, ordered_unique, term_pattern

MAX_TECHNICAL_SKILLS = 15
MAX_SOFT_SKILLS = 12

MAX_FALLBACK_TECHNICAL = 10
MAX_FALLBACK_SOFT = 8

# Fallback scan only uses technical entries up to this many words
MAX_FALLBACK_ENTRY_WORDS = 3

# Short tokens may match inside longer dictionary entries, long ones may not
TECHNICAL_REVERSE_MATCH_MAX_LEN = 15
SOFT_REVERSE_MATCH_MAX_LEN = 20

# Candidate skill length bounds (exclusive)
MIN_TOKEN_LEN = 1
MAX_TOKEN_LEN = 50

# Below this many delimited tokens the section is treated as prose
MIN_DELIMITED_TOKENS = 3

# =============================================================================
# TOKENIZING AND CLEANING
# =============================================================================

SKILL_DELIMITERS = re.compile(r"[,;|•·\n\t▪◦●■►‣∙]")

# Characters a skill name may contain
_DISALLOWED_SKILL_CHARS = re.compile(r"[^\w\s.#+/&-]")

# "Languages: Python" -> "Python"
_CATEGORY_LABEL = re.compile(r"^[^:]{1,40}:\s*(.+)$")

# =============================================================================
# CLASSIFICATION HEURISTICS
# =============================================================================

TECHNICAL_SUFFIXES = (
    "software",
    "system",
    "systems",
    "platform",
    "framework",
    "library",
    "database",
    "language",
    "tool",
    "tools",
)

TECHNICAL_FRAGMENTS = ("programming", "development", "coding", "database", "framework", "library")

VENDOR_NAMES = (
    "microsoft",
    "google",
    "adobe",
    "oracle",
    "amazon",
    "aws",
    "ibm",
    "cisco",
    "salesforce",
    "sap",
    "apple",
    "autodesk",
    "atlassian",
)

_FILE_EXTENSION = re.compile(r"\.(js|py|java|cpp|cs|php|rb|go|rs|swift|kt)$")
_VERSION_NUMBER = re.compile(r"\b\d+(?:\.\d+)+\b|\bv\d+\b")

SOFT_SUFFIXES = ("skills", "ability", "abilities", "oriented")

SOFT_FRAGMENTS = (
    "team",
    "client",
    "creative",
    "management",
    "leadership",
    "communication",
    "problem",
    "organization",
)


def is_likely_technical_skill(skill: str) -> bool:
    """
    Guess whether an unrecognized skill is technical.

    Example:
        >>> is_likely_technical_skill("Inventory Management System")
        True
        >>> is_likely_technical_skill("Kafka 3.5")
        True
    """
    lowered = skill.lower()
    words = lowered.split()

    if words and words[-1] in TECHNICAL_SUFFIXES:
        return True
    if _FILE_EXTENSION.search(lowered) or _VERSION_NUMBER.search(lowered):
        return True
    if any(fragment in lowered for fragment in TECHNICAL_FRAGMENTS):
        return True
    return any(vendor in words for vendor in VENDOR_NAMES)


def is_likely_soft_skill(skill: str) -> bool:
    """
    Guess whether an unrecognized skill is soft.

    Example:
        >>> is_likely_soft_skill("Client Relationship Building")
        True
    """
    lowered = skill.lower()
    words = lowered.split()

    if words and (words[-1] in SOFT_SUFFIXES or lowered.endswith("-oriented")):
        return True
    return any(fragment in lowered for fragment in SOFT_FRAGMENTS)


# =============================================================================
# SECTION LOCATION
# =============================================================================


def find_skills_section(lines: List[str]) -> Optional[List[str]]:
    """
    Locate the body of the skills section.

    Args:
        lines: Cleaned, non-empty resume lines

    Returns:
        Lines between the skills heading and the next major section header
        (or end of document), or None if the resume has no skills heading
    """
    start = next((i for i, line in enumerate(lines) if is_skills_heading(line)), None)
    if start is None:
        return None

    end = len(lines)
    for i in range(start + 1, len(lines)):
        if is_major_section_header(lines[i]):
            end = i
            break

    return lines[start + 1 : end]


def tokenize_skills(text: str) -> List[str]:
    """Split a skills section body into candidate skills on list delimiters."""
    tokens = []
    for raw in SKILL_DELIMITERS.split(text):
        token = raw.strip()
        label = _CATEGORY_LABEL.match(token)
        if label:
            token = label.group(1).strip()
        if MIN_TOKEN_LEN < len(token) < MAX_TOKEN_LEN:
            tokens.append(token)
    return tokens


def scan_dictionary(text: str, terms: tuple) -> List[str]:
    """
    Find dictionary terms in free text, keeping the text's own casing.

    Args:
        text: Text to scan
        terms: Dictionary entries, checked in order

    Returns:
        First occurrence of each term that appears as a whole word
    """
    found = []
    for term in terms:
        match = find_term(text, term)
        if match:
            found.append(match)
    return found


def clean_skill(skill: str) -> str:
    """Drop punctuation that can't be part of a skill name and stray bullet marks."""
    cleaned = _DISALLOWED_SKILL_CHARS.sub("", skill).strip()
    return cleaned.lstrip("-*/& ").strip()


# =============================================================================
# CLASSIFICATION
# =============================================================================


def _matches_dictionary(skill: str, entries: tuple, reverse_max_len: int) -> bool:
    """
    Whole-word match between a skill and dictionary entries, either direction.

    Forward: an entry appears inside the skill ("AWS Lambda" contains "aws").
    Reverse: the skill appears inside an entry, only for short skills
    ("Excel" inside "microsoft excel").
    """
    pattern = term_pattern(skill)
    allow_reverse = len(skill) <= reverse_max_len
    for entry in entries:
        if term_pattern(entry).search(skill):
            return True
        if allow_reverse and pattern.search(entry):
            return True
    return False


def classify_skill(skill: str, tables: KeywordTables) -> Optional[str]:
    """
    Sort a cleaned skill into "technical", "soft" or neither.

    Order: exact dictionary match, then word-bounded dictionary match
    (technical before soft), then suffix/fragment heuristics. Anything still
    unrecognized returns None and is dropped.
    """
    lowered = skill.lower()

    if lowered in tables.technical_skills:
        return "technical"
    if lowered in tables.soft_skills:
        return "soft"
    if _matches_dictionary(skill, tables.technical_skills, TECHNICAL_REVERSE_MATCH_MAX_LEN):
        return "technical"
    if _matches_dictionary(skill, tables.soft_skills, SOFT_REVERSE_MATCH_MAX_LEN):
        return "soft"
    if is_likely_technical_skill(skill):
        return "technical"
    if is_likely_soft_skill(skill):
        return "soft"
    return None


def categorize_skills(candidates: List[str], tables: KeywordTables) -> Tuple[List[str], List[str]]:
    """
    Clean, deduplicate and classify candidate skills.

    Returns:
        (technical, soft), capped at MAX_TECHNICAL_SKILLS / MAX_SOFT_SKILLS
    """
    cleaned = [clean_skill(candidate) for candidate in candidates]
    unique = ordered_unique(skill for skill in cleaned if len(skill) > MIN_TOKEN_LEN)

    technical, soft = [], []
    for skill in unique:
        category = classify_skill(skill, tables)
        if category == "technical":
            technical.append(skill)
        elif category == "soft":
            soft.append(skill)
        else:
            _log_debug(f"Dropped unclassified skill: {skill!r}")

    return technical[:MAX_TECHNICAL_SKILLS], soft[:MAX_SOFT_SKILLS]


# =============================================================================
# ENTRY POINTS
# =============================================================================


def parse_skills_section(body: List[str], tables: KeywordTables) -> Skills:
    """
    Extract skills from the body of a skills section.

    Delimited lists are split into tokens. A body with fewer than three
    tokens reads as prose, so the whole dictionary is scanned against it.
    """
    text = "\n".join(body)
    candidates = tokenize_skills(text)

    if len(candidates) < MIN_DELIMITED_TOKENS:
        _log_debug(f"Skills section has {len(candidates)} tokens, scanning as prose")
        candidates = scan_dictionary(text, tables.all_skill_keywords)

    technical, soft = categorize_skills(candidates, tables)
    return Skills(technical=technical, soft=soft)


def extract_skills_from_full_text(text: str, tables: KeywordTables) -> Skills:
    """
    Fallback for resumes without a skills heading.

    Scans the whole document for short, unambiguous technical entries and the
    common soft skills only, since matching every dictionary entry against
    free prose produces noise ("go", "word", "express").
    """
    technical_terms = tuple(
        term
        for term in tables.technical_skills
        if len(term.split()) <= MAX_FALLBACK_ENTRY_WORDS and term not in tables.ambiguous_in_prose
    )

    technical = ordered_unique(scan_dictionary(text, technical_terms))
    soft = ordered_unique(scan_dictionary(text, tables.common_soft_skills))

    return Skills(technical=technical[:MAX_FALLBACK_TECHNICAL], soft=soft[:MAX_FALLBACK_SOFT])


def extract_skills(text: str, lines: List[str], tables: KeywordTables) -> Skills:
    """
    Extract categorized skills from a resume.

    Args:
        text: Full resume text
        lines: Cleaned, non-empty resume lines
        tables: Keyword dictionaries

    Returns:
        Skills with technical <= 15 and soft <= 12 entries
    """
    body = find_skills_section(lines)
    if body is None:
        _log_debug("No skills heading found, scanning full text")
        return extract_skills_from_full_text(text, tables)
    return parse_skills_section(body, tables)
