"""
Reusable patterns and constants for resume text structuring.

This module provides contact, geographic and date regex patterns used by
the field extractors in resume_parser.py.

Pattern classes follow the same convention throughout resumatch:
- Dataclasses with frozen=True for immutability
- Class-level constants for patterns
- Helper functions that use these patterns
"""

import re
from dataclasses import dataclass

# =============================================================================
# GEOGRAPHIC CONSTANTS
# =============================================================================

US_STATES = (
    "Alabama",
    "Alaska",
    "Arizona",
    "Arkansas",
    "California",
    "Colorado",
    "Connecticut",
    "Delaware",
    "Florida",
    "Georgia",
    "Hawaii",
    "Idaho",
    "Illinois",
    "Indiana",
    "Iowa",
    "Kansas",
    "Kentucky",
    "Louisiana",
    "Maine",
    "Maryland",
    "Massachusetts",
    "Michigan",
    "Minnesota",
    "Mississippi",
    "Missouri",
    "Montana",
    "Nebraska",
    "Nevada",
    "New Hampshire",
    "New Jersey",
    "New Mexico",
    "New York",
    "North Carolina",
    "North Dakota",
    "Ohio",
    "Oklahoma",
    "Oregon",
    "Pennsylvania",
    "Rhode Island",
    "South Carolina",
    "South Dakota",
    "Tennessee",
    "Texas",
    "Utah",
    "Vermont",
    "Virginia",
    "Washington",
    "West Virginia",
    "Wisconsin",
    "Wyoming",
)

# Two-letter postal codes, plus DC and the Canadian provinces
REGION_CODES = (
    "AL", "AK", "AZ", "AR", "CA", "CO", "CT", "DE", "FL", "GA",
    "HI", "ID", "IL", "IN", "IA", "KS", "KY", "LA", "ME", "MD",
    "MA", "MI", "MN", "MS", "MO", "MT", "NE", "NV", "NH", "NJ",
    "NM", "NY", "NC", "ND", "OH", "OK", "OR", "PA", "RI", "SC",
    "SD", "TN", "TX", "UT", "VT", "VA", "WA", "WV", "WI", "WY",
    "DC", "AB", "BC", "MB", "NB", "NL", "NS", "ON", "PE", "QC", "SK",
)

COUNTRIES = (
    "USA",
    "United States",
    "Canada",
    "United Kingdom",
    "UK",
    "Ireland",
    "Germany",
    "France",
    "Netherlands",
    "Spain",
    "India",
    "Australia",
    "Singapore",
)

# Build regex alternations from the constants
_US_STATE_PATTERN = "|".join(re.escape(s) for s in US_STATES)
_REGION_CODE_PATTERN = "|".join(REGION_CODES)
_COUNTRY_PATTERN = "|".join(re.escape(c) for c in COUNTRIES)

# Capitalized words separated by literal spaces, so a match never spans lines
_CITY = r"[A-Z][a-z]+(?:[ ][A-Z][a-z]+)*"


# =============================================================================
# CONTACT PATTERNS
# =============================================================================


@dataclass(frozen=True)
class ContactPatterns:
    """
    Regex patterns for contact details in a resume header.
    """

    EMAIL: re.Pattern = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")

    # Loose North-American number: optional country code, optional parens,
    # separators '.', '-' or space
    PHONE: re.Pattern = re.compile(r"(\+?1?[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}")

    # A line that reads like a person's name
    NAME_LINE: re.Pattern = re.compile(r"^[A-Za-z\s.'-]+$")

    LINKEDIN: re.Pattern = re.compile(
        r"(?:https?://)?(?:www\.)?linkedin\.com/in/[A-Za-z0-9-]+", re.IGNORECASE
    )

    # Any URL-like token; candidates are filtered by is_website_candidate()
    URL: re.Pattern = re.compile(
        r"(?:https?://)?(?:www\.)?[A-Za-z0-9-]+(?:\.[A-Za-z0-9-]+)*\.[A-Za-z]{2,}(?:/[^\s]*)?",
        re.IGNORECASE,
    )


# Domains that host mailboxes rather than personal sites
EMAIL_PROVIDER_DOMAINS = (
    "gmail.com",
    "yahoo.com",
    "outlook.com",
    "hotmail.com",
)

# Dotted tokens that are technologies or file names, not websites
NON_WEBSITE_SUFFIXES = (".js", ".ts", ".py", ".rb", ".md", ".txt", ".pdf", ".doc", ".docx")


# =============================================================================
# LOCATION PATTERNS
# =============================================================================


@dataclass(frozen=True)
class LocationPatterns:
    """
    Regex patterns for extracting a location from a resume.

    Supports various formats:
    - City, ST (two-letter state or province code)
    - City, State Name (full state name)
    - City, Country
    """

    # City, State (2-letter abbreviation) - e.g., "Baltimore, MD"
    CITY_STATE_ABBREV: re.Pattern = re.compile(rf"\b({_CITY}),[ ]*({_REGION_CODE_PATTERN})\b")

    # City, State (full name) - e.g., "Baltimore, Maryland"
    CITY_STATE_FULL: re.Pattern = re.compile(rf"\b({_CITY}),[ ]*({_US_STATE_PATTERN})\b")

    # City, Country - e.g., "Toronto, Canada"
    CITY_COUNTRY: re.Pattern = re.compile(rf"\b({_CITY}),[ ]*({_COUNTRY_PATTERN})\b")


# Convenience list for iteration
LOCATION_PATTERNS = [
    LocationPatterns.CITY_STATE_ABBREV,
    LocationPatterns.CITY_STATE_FULL,
    LocationPatterns.CITY_COUNTRY,
]


# =============================================================================
# DATE PATTERNS
# =============================================================================


@dataclass(frozen=True)
class DatePatterns:
    """
    Regex patterns for dates in experience and education entries.
    """

    # Four-digit year standing on its own - e.g., "2021" in "Jan 2021"
    YEAR: re.Pattern = re.compile(r"(?<!\d)\d{4}(?!\d)")

    # Month/year - e.g., "06/2021"
    MONTH_YEAR: re.Pattern = re.compile(r"\d{1,2}/\d{4}")

    # Separator between start and end of a range: hyphen, en dash or em dash
    RANGE_SEPARATOR: re.Pattern = re.compile(r"[-–—]")

    # Open-ended range markers
    ONGOING: re.Pattern = re.compile(r"present|current", re.IGNORECASE)

    # Quantifiable achievement - e.g., "30%", "5 years", "2 million"
    QUANTIFIABLE: re.Pattern = re.compile(
        r"\d+%|\d+\$|\d+ years|\d+k|\d+ million", re.IGNORECASE
    )


@dataclass(frozen=True)
class EducationPatterns:
    """
    Regex patterns for education entry details.
    """

    DEGREE_KEYWORD: re.Pattern = re.compile(r"bachelor|master|degree", re.IGNORECASE)

    # "GPA: 3.8", "GPA 3.8/4.0"
    GPA: re.Pattern = re.compile(r"\bGPA:?\s*(\d\.\d{1,2})(?:\s*/\s*\d\.\d{1,2})?", re.IGNORECASE)


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================


def is_date_line(line: str) -> bool:
    """Check whether a line carries a year or month/year and so starts an entry."""
    return bool(DatePatterns.YEAR.search(line) or DatePatterns.MONTH_YEAR.search(line))


def split_date_range(line: str) -> tuple[str, str]:
    """
    Split a date line into start and end on the first range separator.

    Returns:
        (start, end); end defaults to "Present" when the line has no separator

    Example:
        >>> split_date_range("Jan 2020 - Mar 2023")
        ('Jan 2020', 'Mar 2023')
        >>> split_date_range("2021")
        ('2021', 'Present')
    """
    parts = DatePatterns.RANGE_SEPARATOR.split(line, maxsplit=1)
    start = parts[0].strip()
    end = parts[1].strip() if len(parts) > 1 else ""
    return start, end or "Present"


def is_website_candidate(url: str, preceding: str, following: str, email_domain: str) -> bool:
    """
    Decide whether a URL-like match is a personal website.

    Args:
        url: The matched token
        preceding: Character immediately before the match ("" at start of text)
        following: Character immediately after the match ("" at end of text)
        email_domain: Domain part of the extracted email, lowercased ("" if none)

    Returns:
        False for email fragments, LinkedIn, mail providers, the email's own
        domain, technology names and sentence joins like "systems.Led"
    """
    lowered = url.lower()
    host = re.sub(r"^(?:https?://)?(?:www\.)?", "", lowered).split("/")[0]
    has_scheme = lowered.startswith(("http://", "https://", "www."))

    if "@" in url or preceding == "@" or following == "@":
        return False
    if preceding and (preceding.isalnum() or preceding in "._%+-"):
        return False
    if "linkedin.com" in lowered:
        return False
    if any(provider in lowered for provider in EMAIL_PROVIDER_DOMAINS):
        return False
    if email_domain and host == email_domain:
        return False
    if host.endswith(NON_WEBSITE_SUFFIXES):
        return False

    # Without a scheme, a capitalized "TLD" is almost always two sentences run together
    tld = url.split("/")[0].rsplit(".", 1)[-1]
    if not has_scheme and tld != tld.lower():
        return False

    return True
