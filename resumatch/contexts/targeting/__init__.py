"""
Targeting Context

Responsibilities:
- Extracts ATS keywords from job descriptions
- Scores structured resumes against a job description (keyword, format, content)
- Produces keyword-optimized copies of a resume

Owns: ATS scoring rules and recommendation logic
Never: Reads files or raw resume text (works on StructuredResume only)
"""

from resumatch.contexts.targeting.analysis_result import (
    ATSAnalysisResult,
    ContentFindings,
    DetailedAnalysis,
    FindingGroup,
    LengthAnalysis,
    SectionAnalysis,
)
from resumatch.contexts.targeting.ats_scorer import ATSScorer, score_resume
from resumatch.contexts.targeting.job_keywords import analyze_keywords, extract_job_keywords
from resumatch.contexts.targeting.optimizer import (
    OptimizedResume,
    analyze_and_optimize,
    optimize_resume,
)

__all__ = [
    "score_resume",
    "ATSScorer",
    "extract_job_keywords",
    "analyze_keywords",
    "optimize_resume",
    "analyze_and_optimize",
    "OptimizedResume",
    "ATSAnalysisResult",
    "FindingGroup",
    "ContentFindings",
    "DetailedAnalysis",
    "SectionAnalysis",
    "LengthAnalysis",
]
