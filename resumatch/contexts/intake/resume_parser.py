"""
Resume structuring for the Intake context.

Turns raw extracted resume text into a StructuredResume. Structuring is a
bag of independent heuristics rather than a grammar: every extractor below
is a side-effect-free function over the text (or its cleaned lines), and a
miss leaves its field at the empty default without affecting the others.

Only input with no usable text at all is an error (EmptyDocumentError,
UnreadableDocumentError).
"""

import re
from typing import List, Optional

from resumatch.contexts.intake.exceptions import EmptyDocumentError, UnreadableDocumentError
from resumatch.contexts.intake.logger import _log_debug
from resumatch.contexts.intake.patterns import (
    LOCATION_PATTERNS,
    ContactPatterns,
    DatePatterns,
    EducationPatterns,
    is_date_line,
    is_website_candidate,
    split_date_range,
)
from resumatch.contexts.intake.resume_data_structure import (
    Certification,
    EducationEntry,
    ExperienceEntry,
    PersonalInfo,
    StructuredResume,
)
from resumatch.contexts.intake.section_patterns import (
    SectionHeadingPatterns,
    find_heading_index,
    is_major_section_header,
    is_skills_heading,
    section_window,
)
from resumatch.contexts.intake.skills_extractor import extract_skills
from resumatch.utils.keyword_registry import KeywordTables, load_keyword_tables
from resumatch.utils.text_processing import non_empty_lines

# Window sizes (lines after the heading)
SUMMARY_WINDOW = 4
EXPERIENCE_WINDOW = 19
EDUCATION_WINDOW = 9
CERTIFICATION_WINDOW = 9

# Name heuristics
NAME_SEARCH_LINES = 5
NAME_MIN_LEN = 3
NAME_MAX_LEN = 49

# Non-date lines shorter than this are not added to a job description
MIN_DESCRIPTION_LINE_LEN = 11

# Placeholders for fields the heuristics cannot recover
DEFAULT_POSITION = "Position"
DEFAULT_COMPANY = "Company"
DEFAULT_SCHOOL = "University"

# Headers that may sit directly under the section's own heading
EXPERIENCE_HEADERS = (
    "experience",
    "work experience",
    "professional experience",
    "employment",
    "employment history",
    "career history",
    "work history",
)
EDUCATION_HEADERS = ("education", "academic background", "academic history", "qualifications")

_BULLET_PREFIX = re.compile(r"^[-*•·▪◦●■►‣∙]+\s*")
_CERT_ISSUER_SEPARATOR = re.compile(r"\s+[-–—|]\s+|,\s*|\s+by\s+", re.IGNORECASE)
_TRAILING_PUNCTUATION = " ,;:-–—|()"


# =============================================================================
# PERSONAL INFO
# =============================================================================


def extract_email(text: str) -> str:
    match = ContactPatterns.EMAIL.search(text)
    return match.group(0) if match else ""


def extract_phone(text: str) -> str:
    match = ContactPatterns.PHONE.search(text)
    return match.group(0).strip() if match else ""


def extract_name(lines: List[str]) -> str:
    """
    Pick the line that most looks like a name.

    Takes the first of the opening lines made only of letters, spaces and
    name punctuation, without an '@'. Falls back to the first line verbatim.
    """
    for line in lines[:NAME_SEARCH_LINES]:
        if (
            NAME_MIN_LEN <= len(line) <= NAME_MAX_LEN
            and "@" not in line
            and ContactPatterns.NAME_LINE.match(line)
        ):
            return line
    return lines[0] if lines else ""


def extract_location(text: str) -> str:
    """First "City, ST", "City, State" or "City, Country" in the text."""
    earliest = None
    for pattern in LOCATION_PATTERNS:
        match = pattern.search(text)
        if match and (earliest is None or match.start() < earliest.start()):
            earliest = match
    return earliest.group(0) if earliest else ""


def extract_linkedin(text: str) -> str:
    match = ContactPatterns.LINKEDIN.search(text)
    return match.group(0) if match else ""


def extract_website(text: str, email: str = "") -> str:
    """
    First URL-like token that is a personal site.

    Skips email fragments, LinkedIn, mailbox providers and the domain of the
    resume's own email address.
    """
    email_domain = email.rsplit("@", 1)[-1].lower() if email else ""

    for match in ContactPatterns.URL.finditer(text):
        url = match.group(0).rstrip(".,;:)")
        preceding = text[match.start() - 1] if match.start() > 0 else ""
        following = text[match.end()] if match.end() < len(text) else ""
        if is_website_candidate(url, preceding, following, email_domain):
            return url
    return ""


def extract_personal_info(text: str, lines: List[str]) -> PersonalInfo:
    email = extract_email(text)
    return PersonalInfo(
        name=extract_name(lines),
        email=email,
        phone=extract_phone(text),
        location=extract_location(text),
        website=extract_website(text, email),
        linkedin=extract_linkedin(text),
    )


# =============================================================================
# SECTIONS
# =============================================================================


def extract_summary(lines: List[str]) -> str:
    """
    Collect the lines under the summary heading.

    Reads at most four lines, stopping early at the next section.
    """
    index = find_heading_index(lines, SectionHeadingPatterns.SUMMARY)
    if index is None:
        return ""

    stop = re.compile(SectionHeadingPatterns.SUMMARY_STOP, re.IGNORECASE)
    summary_lines = []
    for line in lines[index + 1 : index + 1 + SUMMARY_WINDOW]:
        if stop.match(line) or is_skills_heading(line) or is_major_section_header(line, False):
            break
        summary_lines.append(line)

    return " ".join(summary_lines)


def extract_experience(lines: List[str]) -> List[ExperienceEntry]:
    """
    Extract job entries from the experience section.

    A line with a year (or month/year) starts a new entry; the line before it
    is taken as the title. Longer non-date lines extend the current entry's
    description. The company is never recovered and stays a placeholder.
    """
    index = find_heading_index(lines, SectionHeadingPatterns.EXPERIENCE)
    if index is None:
        return []

    window = section_window(lines, index, EXPERIENCE_WINDOW, keep_headers=EXPERIENCE_HEADERS)
    entries: List[ExperienceEntry] = []
    current: Optional[ExperienceEntry] = None

    for position, line in enumerate(window):
        if is_date_line(line):
            if current is not None:
                entries.append(current)
            start_date, end_date = split_date_range(line)
            current = ExperienceEntry(
                title=window[position - 1] if position > 0 else DEFAULT_POSITION,
                company=DEFAULT_COMPANY,
                start_date=start_date,
                end_date=end_date,
                current=bool(DatePatterns.ONGOING.search(line)),
                id=f"exp-{len(entries)}",
            )
        elif current is not None and len(line) >= MIN_DESCRIPTION_LINE_LEN:
            current.description = f"{current.description} {line}".strip()

    if current is not None:
        entries.append(current)

    _log_debug(f"Found {len(entries)} experience entries")
    return entries


def extract_education(lines: List[str]) -> List[EducationEntry]:
    """
    Extract degrees from the education section.

    Only lines carrying both a year and a degree word (bachelor, master,
    degree) become entries. The school stays a placeholder.
    """
    index = find_heading_index(lines, SectionHeadingPatterns.EDUCATION)
    if index is None:
        return []

    window = section_window(lines, index, EDUCATION_WINDOW, keep_headers=EDUCATION_HEADERS)
    entries: List[EducationEntry] = []

    for line in window:
        year = DatePatterns.YEAR.search(line)
        if not year or not EducationPatterns.DEGREE_KEYWORD.search(line):
            continue

        degree = line[: year.start()].strip(_TRAILING_PUNCTUATION) or line
        gpa = EducationPatterns.GPA.search(line)
        entries.append(
            EducationEntry(
                degree=degree,
                school=DEFAULT_SCHOOL,
                graduation_year=year.group(0),
                gpa=gpa.group(1) if gpa else "",
                id=f"edu-{len(entries)}",
            )
        )

    _log_debug(f"Found {len(entries)} education entries")
    return entries


def parse_certification_line(line: str) -> Certification:
    """
    Split a certification line into name, issuer and date.

    Example:
        >>> parse_certification_line("AWS Solutions Architect - Amazon Web Services (2022)")
        Certification(name='AWS Solutions Architect', issuer='Amazon Web Services', date='2022', id='')
    """
    text = _BULLET_PREFIX.sub("", line).strip()

    date = ""
    years = list(DatePatterns.YEAR.finditer(text))
    if years:
        last = years[-1]
        date = last.group(0)
        text = (text[: last.start()] + text[last.end() :]).strip(_TRAILING_PUNCTUATION)

    parts = _CERT_ISSUER_SEPARATOR.split(text, maxsplit=1)
    name = parts[0].strip(_TRAILING_PUNCTUATION)
    issuer = parts[1].strip(_TRAILING_PUNCTUATION) if len(parts) > 1 else ""
    return Certification(name=name, issuer=issuer, date=date)


def extract_certifications(lines: List[str]) -> List[Certification]:
    """Extract certifications listed under a certifications/licenses heading."""
    index = find_heading_index(lines, SectionHeadingPatterns.CERTIFICATIONS, allow_loose=False)
    if index is None:
        return []

    certifications = []
    for line in section_window(lines, index, CERTIFICATION_WINDOW):
        cert = parse_certification_line(line)
        if cert.name:
            cert.id = f"cert-{len(certifications)}"
            certifications.append(cert)
    return certifications


# =============================================================================
# ENTRY POINT
# =============================================================================


def split_resume_lines(raw_text: Optional[str]) -> List[str]:
    """
    Validate raw text and split it into cleaned, non-empty lines.

    Raises:
        EmptyDocumentError: If the text is missing or whitespace-only
        UnreadableDocumentError: If no line survives trimming
    """
    if raw_text is None or not raw_text.strip():
        raise EmptyDocumentError()

    lines = non_empty_lines(raw_text)
    if not lines:
        raise UnreadableDocumentError()
    return lines


def structure_resume(raw_text: str, tables: Optional[KeywordTables] = None) -> StructuredResume:
    """
    Structure raw resume text into a StructuredResume.

    Args:
        raw_text: Plain text extracted from an uploaded resume
        tables: Keyword dictionaries (None = packaged tables)

    Returns:
        StructuredResume; fields the heuristics miss stay empty

    Raises:
        EmptyDocumentError: If raw_text is missing or whitespace-only
        UnreadableDocumentError: If no non-empty line survives trimming

    Example:
        >>> resume = structure_resume("Jane Doe\\njane@example.com")
        >>> resume.personal_info.email
        'jane@example.com'
    """
    lines = split_resume_lines(raw_text)
    if tables is None:
        tables = load_keyword_tables()

    _log_debug(f"Structuring {len(lines)} lines ({len(raw_text)} chars)")

    return StructuredResume(
        personal_info=extract_personal_info(raw_text, lines),
        summary=extract_summary(lines),
        experience=extract_experience(lines),
        education=extract_education(lines),
        skills=extract_skills(raw_text, lines, tables),
        certifications=extract_certifications(lines),
    )
