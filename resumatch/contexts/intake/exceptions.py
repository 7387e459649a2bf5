"""Custom exceptions for the intake context."""

from pathlib import Path
from typing import Optional


class DocumentStructuringError(ValueError):
    """Base class for input that cannot be structured into a resume at all."""

    pass


class UnreadableDocumentError(DocumentStructuringError):
    """
    Raised when no non-empty lines survive line splitting and trimming.

    Trimming removes whitespace and ASCII control characters, so text made
    only of control-character noise lands here.
    """

    def __init__(self, message: Optional[str] = None):
        super().__init__(
            message
            or "Unable to extract meaningful content from the resume. "
            "Check the file format and try again."
        )


class EmptyDocumentError(UnreadableDocumentError):
    """
    Raised when the raw text is missing or whitespace-only.

    An empty document is the degenerate unreadable one, so callers catching
    UnreadableDocumentError also see this.
    """

    def __init__(self, message: Optional[str] = None):
        super().__init__(
            message
            or "No readable content found in the uploaded file. "
            "Ensure the resume contains text content and try again."
        )


class UnsupportedDocumentError(ValueError):
    """
    Raised when an upload is rejected before extraction.

    Attributes:
        filename: Name of the rejected upload
        reason: Short description of why it was rejected
    """

    def __init__(self, filename: str, reason: str):
        self.filename = filename
        self.reason = reason
        super().__init__(f"{filename}: {reason}")


class DocumentExtractionError(Exception):
    """
    Raised when text cannot be pulled out of a supported document.

    Attributes:
        message: Error description
        source_path: Path to the document, when extracted from disk
        original_error: The underlying library error
    """

    def __init__(
        self,
        message: str,
        source_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.source_path = source_path
        self.original_error = original_error

        parts = [message]

        if source_path:
            parts.append(f"\nSource: {source_path}")

        if original_error:
            parts.append(f"\nOriginal error: {str(original_error)}")

        super().__init__("\n".join(parts))
