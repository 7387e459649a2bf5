"""
Drafting Context

Responsibilities:
- Selects the resume skills and roles relevant to a job posting
- Renders cover letters from packaged Jinja2 templates
- Grades drafted letters with a heuristic ATS score and suggestions

Owns: Cover-letter templates and letter grading
Never: Parses raw resume text or calls a generative model
"""

from resumatch.contexts.drafting.cover_letter import (
    CoverLetterDraft,
    CoverLetterRequest,
    draft_cover_letter,
)
from resumatch.contexts.drafting.registries import CoverLetterTemplateRegistry

__all__ = [
    "draft_cover_letter",
    "CoverLetterRequest",
    "CoverLetterDraft",
    "CoverLetterTemplateRegistry",
]
