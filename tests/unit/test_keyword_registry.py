"""Unit tests for KeywordRegistry and KeywordTables."""

from pathlib import Path

import pytest

from resumatch.utils.keyword_registry import (
    DEFAULT_KEYWORDS_PATH,
    KeywordRegistry,
    KeywordTables,
    load_keyword_tables,
)


@pytest.mark.unit
def test_keyword_registry_init():
    """Test KeywordRegistry initialization."""
    registry = KeywordRegistry(DEFAULT_KEYWORDS_PATH)
    assert registry.keywords_path.exists()
    assert registry._cache == {}


@pytest.mark.unit
def test_get_table_caches():
    """Test that tables are cached after first load."""
    registry = KeywordRegistry(DEFAULT_KEYWORDS_PATH)

    table1 = registry.get_table("skills")
    assert registry.is_cached("skills")

    table2 = registry.get_table("skills")
    assert table1 is table2


@pytest.mark.unit
def test_tables_carry_version():
    registry = KeywordRegistry(DEFAULT_KEYWORDS_PATH)
    assert isinstance(registry.get_table("skills")["version"], int)
    assert isinstance(registry.get_table("job_keywords")["version"], int)


@pytest.mark.unit
def test_get_table_not_found():
    """Test error handling for missing table."""
    registry = KeywordRegistry(DEFAULT_KEYWORDS_PATH)

    with pytest.raises(FileNotFoundError):
        registry.get_table("nonexistent_table")


@pytest.mark.unit
def test_get_table_path():
    registry = KeywordRegistry(DEFAULT_KEYWORDS_PATH)
    path = registry.get_table_path("skills")

    assert isinstance(path, Path)
    assert path.name == "skills.yaml"


@pytest.mark.unit
def test_clear_cache():
    registry = KeywordRegistry(DEFAULT_KEYWORDS_PATH)
    registry.get_table("skills")
    assert len(registry._cache) == 1

    registry.clear_cache()
    assert registry._cache == {}
    assert not registry.is_cached("skills")


@pytest.mark.unit
class TestKeywordTables:
    """Test the immutable tables view."""

    def test_load_is_cached(self):
        assert load_keyword_tables() is load_keyword_tables()

    def test_sequences_are_tuples(self, tables):
        assert isinstance(tables.technical_skills, tuple)
        assert isinstance(tables.soft_skills, tuple)
        assert all(isinstance(terms, tuple) for terms in tables.industry_keywords.values())

    def test_industry_keywords_read_only(self, tables):
        with pytest.raises(TypeError):
            tables.industry_keywords["technology"] = ("COBOL",)
        with pytest.raises(TypeError):
            del tables.industry_keywords["finance"]

        assert "COBOL" not in load_keyword_tables().industry_keywords["technology"]
        assert "finance" in load_keyword_tables().industry_keywords

    def test_industries_present(self, tables):
        assert list(tables.industry_keywords) == [
            "technology",
            "healthcare",
            "finance",
            "marketing",
            "sales",
        ]

    def test_skills_database_order(self, tables):
        database = tables.skills_database
        assert database[0] == "JavaScript"
        assert database[-len(tables.general_skills) :] == tables.general_skills

    def test_dictionary_entries_are_lowercase(self, tables):
        assert all(entry == entry.lower() for entry in tables.all_skill_keywords)

    def test_frozen(self, tables):
        with pytest.raises(Exception):
            tables.technical_skills = ()

    def test_custom_directory(self, tmp_path):
        (tmp_path / "skills.yaml").write_text(
            "version: 9\ntechnical: [python]\nsoft: [teamwork]\n", encoding="utf-8"
        )
        (tmp_path / "job_keywords.yaml").write_text(
            "version: 1\nindustries:\n  technology: [Python]\n", encoding="utf-8"
        )

        custom = KeywordTables.from_registry(KeywordRegistry(tmp_path))

        assert custom.skills_version == 9
        assert custom.technical_skills == ("python",)
        assert custom.common_soft_skills == ()
        assert custom.skills_database == ("Python",)
