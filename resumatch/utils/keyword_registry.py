"""
Keyword Registry

Loads and caches the versioned keyword tables (resumatch/keywords/*.yaml)
shared by the intake and targeting contexts.
"""

import os
from dataclasses import dataclass
from types import MappingProxyType
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from dotenv import load_dotenv
from omegaconf import OmegaConf

load_dotenv()
DEFAULT_KEYWORDS_PATH = Path(__file__).resolve().parent.parent / "keywords"
KEYWORDS_PATH = Path(os.getenv("RESUMATCH_KEYWORDS_PATH", str(DEFAULT_KEYWORDS_PATH)))

SKILLS_TABLE = "skills"
JOB_KEYWORDS_TABLE = "job_keywords"


class KeywordRegistry:
    """
    Registry for loading and caching keyword tables.

    Tables are stored as {keywords_path}/{table_name}.yaml. Every table
    carries a top-level ``version`` key so callers can tell which revision
    of a dictionary produced a result.
    """

    def __init__(self, keywords_path: Path = None):
        """
        Initialize the keyword registry.

        Args:
            keywords_path: Directory holding the keyword tables. Defaults to
                           RESUMATCH_KEYWORDS_PATH from environment, else the
                           tables packaged with resumatch
        """
        if keywords_path is None:
            keywords_path = KEYWORDS_PATH

        self.keywords_path = Path(keywords_path)
        self._cache: Dict[str, Dict[str, Any]] = {}

    def get_table(self, table_name: str) -> Dict[str, Any]:
        """
        Get a keyword table by name, loading and caching it if necessary.

        Args:
            table_name: Name of the table (e.g., 'skills')

        Returns:
            Dict containing the table contents

        Raises:
            FileNotFoundError: If table file doesn't exist
        """
        if table_name in self._cache:
            return self._cache[table_name]

        table_path = self.get_table_path(table_name)

        if not table_path.exists():
            raise FileNotFoundError(f"Keyword table '{table_name}' not found at {table_path}")

        table = OmegaConf.load(table_path)
        table_dict = OmegaConf.to_container(table, resolve=True)

        self._cache[table_name] = table_dict
        return table_dict

    def get_table_path(self, table_name: str) -> Path:
        """Get the file path for a keyword table."""
        return self.keywords_path / f"{table_name}.yaml"

    def clear_cache(self):
        """Clear the table cache."""
        self._cache.clear()

    def is_cached(self, table_name: str) -> bool:
        """Check if a table is in the cache."""
        return table_name in self._cache


@dataclass(frozen=True)
class KeywordTables:
    """
    Immutable view of every keyword table, injected into the structurer and scorer.

    All sequences are tuples and industry_keywords is a read-only mapping, so
    one instance can be shared freely between concurrent callers.
    """

    technical_skills: tuple
    soft_skills: tuple
    common_soft_skills: tuple
    ambiguous_in_prose: frozenset
    industry_keywords: Mapping[str, tuple]
    general_skills: tuple
    relevant_phrases: tuple
    action_verbs: tuple
    technical_terms: tuple
    soft_terms: tuple
    skills_version: int = 0
    job_keywords_version: int = 0

    @property
    def skills_database(self) -> tuple:
        """Industry terms of every industry followed by the general skills."""
        terms = []
        for industry_terms in self.industry_keywords.values():
            terms.extend(industry_terms)
        terms.extend(self.general_skills)
        return tuple(terms)

    @property
    def all_skill_keywords(self) -> tuple:
        """Technical then soft dictionary entries."""
        return self.technical_skills + self.soft_skills

    @classmethod
    def from_registry(cls, registry: KeywordRegistry) -> "KeywordTables":
        """Build tables from the YAML files a registry points at."""
        skills = registry.get_table(SKILLS_TABLE)
        job = registry.get_table(JOB_KEYWORDS_TABLE)

        return cls(
            technical_skills=tuple(skills.get("technical", [])),
            soft_skills=tuple(skills.get("soft", [])),
            common_soft_skills=tuple(skills.get("common_soft", [])),
            ambiguous_in_prose=frozenset(skills.get("ambiguous_in_prose", [])),
            industry_keywords=MappingProxyType(
                {industry: tuple(terms) for industry, terms in job.get("industries", {}).items()}
            ),
            general_skills=tuple(job.get("general_skills", [])),
            relevant_phrases=tuple(job.get("relevant_phrases", [])),
            action_verbs=tuple(job.get("action_verbs", [])),
            technical_terms=tuple(job.get("technical_terms", [])),
            soft_terms=tuple(job.get("soft_terms", [])),
            skills_version=skills.get("version", 0),
            job_keywords_version=job.get("version", 0),
        )


@lru_cache(maxsize=None)
def load_keyword_tables(keywords_path: Optional[str] = None) -> KeywordTables:
    """
    Load keyword tables, cached per directory.

    Args:
        keywords_path: Directory holding the tables (None = default location)

    Returns:
        KeywordTables instance
    """
    registry = KeywordRegistry(Path(keywords_path) if keywords_path else None)
    return KeywordTables.from_registry(registry)
