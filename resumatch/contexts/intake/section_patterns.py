"""
Pattern matching for resume section identification.

This module provides the heading patterns that anchor the windowed extractors
(summary, experience, education, certifications, skills) and the list of
major section headers that bound a section's body.

Pattern classes follow the convention from patterns.py:
- Dataclasses with frozen=True for immutability
- Class-level constants for patterns
- Helper functions that use these patterns
"""

import re
from dataclasses import dataclass
from typing import List, Optional

# =============================================================================
# SECTION HEADING PATTERNS
# =============================================================================


@dataclass(frozen=True)
class SectionHeadingPatterns:
    """
    Regex patterns for locating resume section headings.

    Each heading is searched case-insensitively anywhere in a line, which
    is deliberately loose: resumes rarely agree on heading wording.
    """

    SUMMARY: str = r"summary|objective|profile|about|overview"

    EXPERIENCE: str = r"experience|employment|work|career"

    EDUCATION: str = r"education|academic|degree|university|college"

    CERTIFICATIONS: str = r"certifications?|certificates?|licen[sc]es?"

    # A summary body ends at the first line opening another section
    SUMMARY_STOP: str = r"^(experience|education|skills|work|employment)"


# Lines no longer than this (in words) can be headings
MAX_HEADING_WORDS = 4

# Decoration that commonly wraps a heading: "## Skills:", "**EXPERIENCE**"
_HEADING_DECORATION = " \t#*:_-•|=~"

# =============================================================================
# SKILLS SECTION HEADINGS
# =============================================================================

# Exact (case-insensitive) headings that open a skills section
SKILLS_SECTION_HEADINGS = (
    "skills",
    "technical skills",
    "core competencies",
    "technologies",
    "expertise",
    "competencies",
    "proficiencies",
    "capabilities",
    "key skills",
    "areas of expertise",
)

# =============================================================================
# MAJOR SECTION HEADERS
# =============================================================================

# Headings that end the section before them (skills, experience, education,
# certifications)
MAJOR_SECTION_HEADERS = (
    "experience",
    "work experience",
    "professional experience",
    "employment",
    "employment history",
    "career history",
    "work history",
    "education",
    "academic background",
    "academic history",
    "qualifications",
    "certifications",
    "certificates",
    "licenses",
    "projects",
    "portfolio",
    "achievements",
    "accomplishments",
    "awards",
    "publications",
    "research",
    "patents",
    "volunteer",
    "volunteering",
    "community service",
    "interests",
    "hobbies",
    "personal interests",
    "references",
)


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================


def normalize_heading(line: str) -> str:
    """
    Normalize a line for heading comparison.

    Args:
        line: Raw resume line

    Returns:
        Lowercased line with heading decoration removed and whitespace collapsed

    Example:
        >>> normalize_heading("## Technical Skills:")
        'technical skills'
    """
    normalized = line.strip(_HEADING_DECORATION).lower()
    return re.sub(r"\s+", " ", normalized)


def is_heading_like(line: str) -> bool:
    """
    Check whether a line has the shape of a section heading.

    Headings are short and made of words only; a sentence containing the
    word "experience" is not a heading.
    """
    normalized = normalize_heading(line)
    if not normalized or len(normalized.split()) > MAX_HEADING_WORDS:
        return False
    return re.fullmatch(r"[a-z&/ ]+", normalized) is not None


def find_heading_index(
    lines: List[str], heading_pattern: str, allow_loose: bool = True
) -> Optional[int]:
    """
    Find the line that opens a section.

    Prefers the first heading-shaped line where the pattern matches a whole
    word ("Work History", not "Teamwork"). Falls back to the first line in
    which the pattern matches anywhere.

    Args:
        lines: Cleaned, non-empty resume lines
        heading_pattern: Alternation from SectionHeadingPatterns
        allow_loose: Use the match-anywhere fallback

    Returns:
        Index into lines, or None if the pattern never matches
    """
    bounded = re.compile(rf"\b(?:{heading_pattern})\b", re.IGNORECASE)
    for index, line in enumerate(lines):
        if is_heading_like(line) and bounded.search(line):
            return index

    if not allow_loose:
        return None

    loose = re.compile(heading_pattern, re.IGNORECASE)
    for index, line in enumerate(lines):
        if loose.search(line):
            return index

    return None


def is_skills_heading(line: str) -> bool:
    """Check whether a line is exactly one of the skills section headings."""
    return normalize_heading(line) in SKILLS_SECTION_HEADINGS


def is_major_section_header(line: str, allow_prefix: bool = True) -> bool:
    """
    Check whether a line opens a major resume section.

    Args:
        line: Resume line
        allow_prefix: Also accept lines that start with a header followed by
                      a word boundary ("Education & Training")

    Returns:
        True if the line opens a major section
    """
    normalized = normalize_heading(line)
    if normalized in MAJOR_SECTION_HEADERS:
        return True
    if not allow_prefix:
        return False
    return any(re.match(rf"{re.escape(header)}\b", normalized) for header in MAJOR_SECTION_HEADERS)


def section_window(
    lines: List[str], heading_index: int, size: int, keep_headers: tuple = ()
) -> List[str]:
    """
    Lines following a heading, up to size lines.

    The window also closes early at a line that is exactly a major section
    header or a skills heading, unless the header is listed in keep_headers.

    Args:
        lines: Cleaned, non-empty resume lines
        heading_index: Index of the section heading
        size: Maximum number of lines to return
        keep_headers: Headers that do not close the window (e.g., "work history"
                      directly under an experience heading)

    Returns:
        List of lines after the heading
    """
    window = []
    for line in lines[heading_index + 1 : heading_index + 1 + size]:
        normalized = normalize_heading(line)
        if normalized in MAJOR_SECTION_HEADERS and normalized not in keep_headers:
            break
        if is_skills_heading(line):
            break
        window.append(line)
    return window
