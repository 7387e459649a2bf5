"""Unit tests for the resume structuring heuristics."""

import pytest

from resumatch.contexts.intake.exceptions import (
    DocumentStructuringError,
    EmptyDocumentError,
    UnreadableDocumentError,
)
from resumatch.contexts.intake.resume_parser import (
    DEFAULT_COMPANY,
    DEFAULT_POSITION,
    DEFAULT_SCHOOL,
    extract_certifications,
    extract_education,
    extract_experience,
    extract_location,
    extract_name,
    extract_phone,
    extract_summary,
    extract_website,
    parse_certification_line,
    split_resume_lines,
    structure_resume,
)


@pytest.mark.unit
class TestInputValidation:
    """Test the only two failure modes of the structurer."""

    @pytest.mark.parametrize("raw_text", ["", "   \n\t  ", None])
    def test_blank_text_is_empty(self, raw_text):
        with pytest.raises(EmptyDocumentError):
            split_resume_lines(raw_text)

    def test_control_noise_is_unreadable(self):
        with pytest.raises(UnreadableDocumentError) as exc_info:
            split_resume_lines("\x00\x07\n\x08")
        assert not isinstance(exc_info.value, EmptyDocumentError)

    def test_errors_share_a_base(self):
        assert issubclass(EmptyDocumentError, UnreadableDocumentError)
        assert issubclass(UnreadableDocumentError, DocumentStructuringError)
        assert issubclass(DocumentStructuringError, ValueError)

    def test_single_word_is_valid(self, tables):
        resume = structure_resume("Hello", tables)
        assert resume.personal_info.name == "Hello"
        assert resume.experience == []


@pytest.mark.unit
class TestPersonalInfo:
    """Test contact field extraction."""

    def test_name_skips_email_line(self):
        assert extract_name(["jane@example.com", "Jane Doe"]) == "Jane Doe"

    def test_name_falls_back_to_first_line(self):
        assert extract_name(["jane@example.com", "555-123-4567"]) == "jane@example.com"

    def test_phone(self):
        assert extract_phone("Call 555-123-4567 anytime") == "555-123-4567"
        assert extract_phone("(555) 987-6543") == "(555) 987-6543"
        assert extract_phone("No number here") == ""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("Jane Doe\nBaltimore, MD", "Baltimore, MD"),
            ("Jane Doe\nNew York, NY 10001", "New York, NY"),
            ("Jane Doe\nPortland, Oregon", "Portland, Oregon"),
            ("Jane Doe\nToronto, Canada", "Toronto, Canada"),
            ("Jane Doe\nRemote", ""),
        ],
    )
    def test_location(self, text, expected):
        assert extract_location(text) == expected

    def test_location_takes_earliest_match(self):
        assert extract_location("Austin, Texas\nlater moved to Denver, CO") == "Austin, Texas"

    def test_website_skips_email_domain(self):
        text = "Jane\njane@acme.com\nacme.com\nhttps://janedoe.dev"
        assert extract_website(text, "jane@acme.com") == "https://janedoe.dev"

    def test_website_ignores_technologies(self):
        assert extract_website("Built services with Node.js and Next.js", "") == ""


@pytest.mark.unit
class TestSections:
    """Test the windowed section extractors."""

    def test_summary_stops_at_next_section(self):
        lines = ["Jane Doe", "Summary", "Engineer who ships.", "Skills", "Python"]
        assert extract_summary(lines) == "Engineer who ships."

    def test_summary_reads_at_most_four_lines(self):
        lines = ["Profile", "one", "two", "three", "four", "five"]
        assert extract_summary(lines) == "one two three four"

    def test_no_summary_heading(self):
        assert extract_summary(["Jane Doe", "Python"]) == ""

    def test_experience_entries(self):
        lines = [
            "Experience",
            "Staff Engineer",
            "Jan 2020 - Present",
            "Led platform migration to Kubernetes.",
            "Engineer",
            "2016 - 2019",
            "Built internal billing tools.",
            "Education",
        ]
        entries = extract_experience(lines)

        assert [entry.title for entry in entries] == ["Staff Engineer", "Engineer"]
        assert [entry.id for entry in entries] == ["exp-0", "exp-1"]
        assert entries[0].start_date == "Jan 2020"
        assert entries[0].end_date == "Present"
        assert entries[0].current
        assert not entries[1].current
        assert entries[1].description == "Built internal billing tools."
        assert all(entry.company == DEFAULT_COMPANY for entry in entries)

    def test_date_directly_under_heading_gets_default_title(self):
        entries = extract_experience(["Experience", "2018 - 2020", "Built things for years."])
        assert entries[0].title == DEFAULT_POSITION
        assert entries[0].description == "Built things for years."

    def test_short_lines_not_added_to_description(self):
        entries = extract_experience(["Experience", "2018 - 2020", "Python"])
        assert entries[0].description == ""

    def test_education_requires_degree_word(self):
        lines = [
            "Education",
            "Master of Science in Data Science 2019 GPA: 3.9",
            "Summer school 2015",
        ]
        entries = extract_education(lines)

        assert len(entries) == 1
        assert entries[0].degree == "Master of Science in Data Science"
        assert entries[0].graduation_year == "2019"
        assert entries[0].gpa == "3.9"
        assert entries[0].school == DEFAULT_SCHOOL
        assert entries[0].id == "edu-0"

    def test_certification_line(self):
        cert = parse_certification_line("• PMP, Project Management Institute, 2019")
        assert (cert.name, cert.issuer, cert.date) == ("PMP", "Project Management Institute", "2019")

    def test_certification_issuer_by(self):
        cert = parse_certification_line("Certified Scrum Master by Scrum Alliance")
        assert (cert.name, cert.issuer, cert.date) == ("Certified Scrum Master", "Scrum Alliance", "")

    def test_certifications_need_heading(self):
        lines = ["Earned several certifications over the years while working"]
        assert extract_certifications(lines) == []

    def test_certifications_section(self):
        lines = ["Licenses & Certifications", "CPA - State Board (2018)", "Projects", "Thing"]
        certs = extract_certifications(lines)

        assert len(certs) == 1
        assert certs[0].name == "CPA"
        assert certs[0].issuer == "State Board"
        assert certs[0].id == "cert-0"


@pytest.mark.unit
def test_structure_is_deterministic(sample_resume_text, tables):
    assert structure_resume(sample_resume_text, tables) == structure_resume(
        sample_resume_text, tables
    )
