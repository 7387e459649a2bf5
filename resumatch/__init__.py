"""
resumatch - resume structuring and ATS keyword scoring

Turns the plain text of an uploaded resume into a structured record and scores
that record against a job description the way an Applicant Tracking System
would: keyword overlap, formatting heuristics and content-quality heuristics.

Architecture:
- Intake Context: Document text extraction and resume structuring
- Targeting Context: ATS scoring and keyword-driven resume optimization
- Drafting Context: Cover-letter template filling
"""

__version__ = "0.1.0"
