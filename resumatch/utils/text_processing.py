"""
Text processing utilities shared by the structurer, scorer and drafter.
"""

import difflib
import re
from functools import lru_cache
from typing import Callable, Iterable, List, Optional

# ASCII control characters, excluding tab/newline/carriage return
CONTROL_CHARACTERS = "".join(chr(c) for c in range(32) if chr(c) not in "\t\n\r") + chr(127)


def truncate_display(text: str, max_len: int) -> str:
    """
    Truncate text for display with ellipsis if needed.

    Args:
        text: Text to truncate
        max_len: Maximum length including ellipsis

    Returns:
        Original text if within max_len, otherwise truncated with "..."

    Example:
        >>> truncate_display("short", 10)
        "short"
        >>> truncate_display("this is a very long string", 10)
        "this is..."
    """
    return text if len(text) <= max_len else text[: max_len - 3] + "..."


def clean_line(line: str) -> str:
    """Strip surrounding whitespace and control-character noise from a line."""
    return line.strip(" \t\r\n\f\v" + CONTROL_CHARACTERS)


def non_empty_lines(text: str) -> List[str]:
    """
    Split text into cleaned, non-empty lines.

    Example:
        >>> non_empty_lines("  Jane Doe \\n\\n\\t jane@example.com")
        ['Jane Doe', 'jane@example.com']
    """
    return [cleaned for cleaned in (clean_line(line) for line in text.split("\n")) if cleaned]


@lru_cache(maxsize=2048)
def term_pattern(term: str) -> re.Pattern:
    """
    Build a case-insensitive pattern matching a term as a whole word.

    Uses lookarounds rather than \\b so terms ending in symbols
    (e.g., "c++", "c#", ".net") still match.
    """
    return re.compile(rf"(?<![\w]){re.escape(term)}(?![\w])", re.IGNORECASE)


def find_term(text: str, term: str) -> Optional[str]:
    """Return the first whole-word occurrence of term in text as written, or None."""
    match = term_pattern(term).search(text)
    return match.group(0) if match else None


def contains_term(text: str, term: str) -> bool:
    """Check whether term occurs in text as a whole word (case-insensitive)."""
    return find_term(text, term) is not None


def title_case(phrase: str) -> str:
    """
    Uppercase the first character of every space-separated word.

    Unlike str.title(), leaves the rest of each word untouched.

    Example:
        >>> title_case("machine learning")
        'Machine Learning'
    """
    return " ".join(word[:1].upper() + word[1:] for word in phrase.split(" "))


def ordered_unique(items: Iterable[str], key: Callable[[str], str] = str.lower) -> List[str]:
    """
    Deduplicate while preserving first-seen order.

    Args:
        items: Strings to deduplicate
        key: Normalization used to decide equality (default: case-insensitive)

    Returns:
        List with later duplicates removed
    """
    seen = set()
    unique = []
    for item in items:
        normalized = key(item)
        if normalized in seen:
            continue
        seen.add(normalized)
        unique.append(item)
    return unique


def count_words(text: str) -> int:
    """Count whitespace-separated words."""
    return len(text.split())


def similarity(a: str, b: str) -> float:
    """
    Similarity ratio between two strings in [0, 1].

    Example:
        >>> similarity("python", "python3")
        0.9230769230769231
    """
    if not a and not b:
        return 1.0
    return difflib.SequenceMatcher(None, a, b).ratio()
