"""
Intake Context

Responsibilities:
- Validates resume uploads and extracts their plain text (PDF, DOCX, TXT)
- Structures raw resume text into a StructuredResume
- Categorizes skills against the keyword tables

Owns: Resume structuring heuristics and the resume data model
Never: Scores resumes or reads job descriptions
"""

from resumatch.contexts.intake.document_extraction import (
    extract_text,
    structure_resume_file,
    validate_upload,
)
from resumatch.contexts.intake.exceptions import (
    DocumentExtractionError,
    DocumentStructuringError,
    EmptyDocumentError,
    UnreadableDocumentError,
    UnsupportedDocumentError,
)
from resumatch.contexts.intake.resume_data_structure import (
    Certification,
    EducationEntry,
    ExperienceEntry,
    PersonalInfo,
    RawDocument,
    Skills,
    StructuredResume,
    VersionedResume,
)
from resumatch.contexts.intake.resume_parser import structure_resume

__all__ = [
    "structure_resume",
    "structure_resume_file",
    "extract_text",
    "validate_upload",
    "StructuredResume",
    "VersionedResume",
    "RawDocument",
    "PersonalInfo",
    "ExperienceEntry",
    "EducationEntry",
    "Skills",
    "Certification",
    "DocumentStructuringError",
    "EmptyDocumentError",
    "UnreadableDocumentError",
    "UnsupportedDocumentError",
    "DocumentExtractionError",
]
