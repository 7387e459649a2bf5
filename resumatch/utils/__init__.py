"""
Shared utilities for resumatch.

Common functionality used across contexts:
- Keyword table loading
- Text processing
- Logging setup
- Timestamps
"""

from resumatch.utils.keyword_registry import KeywordRegistry, KeywordTables, load_keyword_tables
from resumatch.utils.timestamp import now_exact

__all__ = [
    "KeywordRegistry",
    "KeywordTables",
    "load_keyword_tables",
    "now_exact",
]
