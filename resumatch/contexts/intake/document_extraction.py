"""
Document text extraction for the Intake context.

Boundary between uploaded files and the structurer: validates an upload,
pulls plain text out of PDF (pdfplumber), DOCX (python-docx) or TXT, and
hands it on as a RawDocument. Nothing past this module sees file bytes.
"""

import io
from pathlib import Path
from typing import Optional, Union

import pdfplumber
from docx import Document as DocxDocument
from PyPDF2 import PdfReader

from resumatch.contexts.intake.exceptions import DocumentExtractionError, UnsupportedDocumentError
from resumatch.contexts.intake.logger import _log_debug
from resumatch.contexts.intake.resume_data_structure import RawDocument, StructuredResume
from resumatch.contexts.intake.resume_parser import structure_resume
from resumatch.utils.keyword_registry import KeywordTables

MAX_UPLOAD_BYTES = 10 * 1024 * 1024

# Extension -> RawDocument.source_type
SUPPORTED_EXTENSIONS = {
    ".pdf": "pdf",
    ".docx": "docx",
    ".txt": "txt",
}


def validate_upload(filename: str, size_bytes: int) -> str:
    """
    Check an upload before reading it.

    Args:
        filename: Original file name (extension decides the format)
        size_bytes: File size

    Returns:
        Source type ("pdf", "docx" or "txt")

    Raises:
        UnsupportedDocumentError: If the file is too large or not PDF/DOCX/TXT
    """
    if size_bytes > MAX_UPLOAD_BYTES:
        raise UnsupportedDocumentError(
            filename, f"file is {size_bytes} bytes, limit is {MAX_UPLOAD_BYTES} (10 MB)"
        )

    extension = Path(filename).suffix.lower()
    if extension not in SUPPORTED_EXTENSIONS:
        raise UnsupportedDocumentError(
            filename, "unsupported file type, upload a PDF, DOCX or TXT file"
        )

    return SUPPORTED_EXTENSIONS[extension]


def page_count(data: bytes) -> Optional[int]:
    """Get page count from PDF bytes, or None if unreadable."""
    try:
        reader = PdfReader(io.BytesIO(data))
        return len(reader.pages)
    except Exception:
        return None


def _extract_pdf(data: bytes) -> str:
    with pdfplumber.open(io.BytesIO(data)) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    text = "\n".join(pages)

    if not text.strip():
        raise DocumentExtractionError(
            "No text layer found in this PDF (it may be a scanned image). "
            "Convert it to DOCX or TXT and upload again."
        )
    return text


def _extract_docx(data: bytes) -> str:
    doc = DocxDocument(io.BytesIO(data))
    parts = [paragraph.text for paragraph in doc.paragraphs]

    # Skills and contact blocks are often laid out in tables
    for table in doc.tables:
        for row in table.rows:
            parts.append("\t".join(cell.text for cell in row.cells))

    return "\n".join(parts)


def _extract_txt(data: bytes) -> str:
    return data.decode("utf-8-sig", errors="replace")


_EXTRACTORS = {
    "pdf": _extract_pdf,
    "docx": _extract_docx,
    "txt": _extract_txt,
}


def extract_text(source: Union[Path, str, bytes], filename: Optional[str] = None) -> RawDocument:
    """
    Extract plain text from an uploaded resume.

    Args:
        source: Path to the file, or the file's bytes
        filename: Original file name; required when source is bytes,
                  defaults to the path's name otherwise

    Returns:
        RawDocument with the extracted text and its source type

    Raises:
        UnsupportedDocumentError: If the upload fails validation
        DocumentExtractionError: If the file can't be read or parsed
    """
    source_path = None
    if isinstance(source, bytes):
        if not filename:
            raise ValueError("filename is required when extracting from bytes")
        data = source
    else:
        source_path = Path(source)
        filename = filename or source_path.name
        try:
            data = source_path.read_bytes()
        except OSError as e:
            raise DocumentExtractionError(
                "Could not read file", source_path=source_path, original_error=e
            ) from e

    source_type = validate_upload(filename, len(data))

    try:
        text = _EXTRACTORS[source_type](data)
    except DocumentExtractionError as e:
        e.source_path = e.source_path or source_path
        raise
    except Exception as e:
        raise DocumentExtractionError(
            f"Failed to extract text from {source_type.upper()} file",
            source_path=source_path,
            original_error=e,
        ) from e

    if source_type == "pdf":
        _log_debug(f"{filename}: {page_count(data)} PDF pages")
    _log_debug(f"{filename}: extracted {len(text)} chars as {source_type}")

    return RawDocument(text=text, source_type=source_type)


def structure_resume_file(
    path: Union[Path, str], tables: Optional[KeywordTables] = None
) -> StructuredResume:
    """
    Extract and structure a resume file in one step.

    Raises:
        UnsupportedDocumentError: If the file fails upload validation
        DocumentExtractionError: If no text can be extracted
        EmptyDocumentError / UnreadableDocumentError: If the text is unusable
    """
    document = extract_text(path)
    return structure_resume(document.text, tables)
