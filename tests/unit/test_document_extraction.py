"""Unit tests for upload validation and text extraction."""

import pytest
from docx import Document

from resumatch.contexts.intake.document_extraction import (
    MAX_UPLOAD_BYTES,
    extract_text,
    page_count,
    structure_resume_file,
    validate_upload,
)
from resumatch.contexts.intake.exceptions import (
    DocumentExtractionError,
    EmptyDocumentError,
    UnsupportedDocumentError,
)


@pytest.mark.unit
class TestValidateUpload:
    """Test upload checks done before reading a file."""

    @pytest.mark.parametrize(
        "filename, source_type",
        [("resume.pdf", "pdf"), ("Resume.DOCX", "docx"), ("cv.txt", "txt")],
    )
    def test_supported_types(self, filename, source_type):
        assert validate_upload(filename, 1024) == source_type

    def test_unsupported_type(self):
        with pytest.raises(UnsupportedDocumentError) as exc_info:
            validate_upload("resume.rtf", 1024)
        assert exc_info.value.filename == "resume.rtf"

    def test_too_large(self):
        with pytest.raises(UnsupportedDocumentError):
            validate_upload("resume.pdf", MAX_UPLOAD_BYTES + 1)

    def test_limit_is_inclusive(self):
        assert validate_upload("resume.pdf", MAX_UPLOAD_BYTES) == "pdf"


@pytest.mark.unit
class TestExtractText:
    """Test per-format extraction."""

    def test_txt_from_path(self, sample_resume_path):
        document = extract_text(sample_resume_path)
        assert document.source_type == "txt"
        assert document.text.startswith("Jordan Rivera")

    def test_txt_from_bytes_strips_bom(self):
        document = extract_text("\ufeffJane Doe\n".encode("utf-8"), filename="cv.txt")
        assert document.text == "Jane Doe\n"

    def test_bytes_need_filename(self):
        with pytest.raises(ValueError):
            extract_text(b"Jane Doe")

    def test_docx_paragraphs_and_tables(self, tmp_path):
        path = tmp_path / "resume.docx"
        doc = Document()
        doc.add_paragraph("Jane Doe")
        doc.add_paragraph("jane@example.com")
        table = doc.add_table(rows=1, cols=2)
        table.rows[0].cells[0].text = "Python"
        table.rows[0].cells[1].text = "SQL"
        doc.save(str(path))

        document = extract_text(path)

        assert document.source_type == "docx"
        assert "Jane Doe\njane@example.com" in document.text
        assert "Python\tSQL" in document.text

    def test_corrupt_pdf_wrapped(self, tmp_path):
        path = tmp_path / "broken.pdf"
        path.write_bytes(b"this is not a pdf")

        with pytest.raises(DocumentExtractionError) as exc_info:
            extract_text(path)
        assert exc_info.value.source_path == path

    def test_missing_file(self, tmp_path):
        with pytest.raises(DocumentExtractionError):
            extract_text(tmp_path / "missing.txt")

    def test_page_count_unreadable(self):
        assert page_count(b"this is not a pdf") is None


@pytest.mark.unit
class TestStructureResumeFile:
    """Test extraction and structuring in one step."""

    def test_sample_resume(self, sample_resume_path):
        resume = structure_resume_file(sample_resume_path)
        assert resume.personal_info.name == "Jordan Rivera"

    def test_blank_file(self, tmp_path):
        path = tmp_path / "blank.txt"
        path.write_text("  \n\n ", encoding="utf-8")

        with pytest.raises(EmptyDocumentError):
            structure_resume_file(path)
