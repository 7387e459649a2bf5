"""
ATS analysis result types for the Targeting context.

Results are derived data: recomputed on demand from a StructuredResume and a
job description, never persisted as a source of truth.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class KeywordAnalysis:
    """Partition of job keywords by presence in the resume text."""

    found: List[str] = field(default_factory=list)
    missing: List[str] = field(default_factory=list)
    density: float = 0.0

    @property
    def total(self) -> int:
        return len(self.found) + len(self.missing)


@dataclass
class FindingGroup:
    issues: List[str] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)


@dataclass
class ContentFindings:
    strengths: List[str] = field(default_factory=list)
    improvements: List[str] = field(default_factory=list)


@dataclass
class SectionAnalysis:
    name: str
    score: int
    issues: List[str] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)


@dataclass
class LengthAnalysis:
    word_count: int
    optimal: bool
    recommendation: str


@dataclass
class DetailedAnalysis:
    sections: List[SectionAnalysis]
    readability_score: int
    length_analysis: LengthAnalysis


@dataclass
class ATSAnalysisResult:
    """
    Full ATS analysis of one resume against one job description.

    Scores are integers in [0, 100]; matched_keywords and missing_keywords are
    disjoint and together make up the extracted job keywords.
    """

    overall_score: int
    keyword_score: int
    format_score: int
    content_score: int
    matched_keywords: List[str]
    missing_keywords: List[str]
    keyword_density: float
    formatting: FindingGroup
    content: ContentFindings
    recommendations: List[str]
    detailed_analysis: DetailedAnalysis

    @property
    def job_keywords(self) -> List[str]:
        """All extracted job keywords (matched first, then missing)."""
        return self.matched_keywords + self.missing_keywords

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the camelCase plain-data shape."""
        length = self.detailed_analysis.length_analysis
        return {
            "overallScore": self.overall_score,
            "keywordScore": self.keyword_score,
            "formatScore": self.format_score,
            "contentScore": self.content_score,
            "matchedKeywords": list(self.matched_keywords),
            "missingKeywords": list(self.missing_keywords),
            "keywordDensity": self.keyword_density,
            "formatting": {
                "issues": list(self.formatting.issues),
                "recommendations": list(self.formatting.recommendations),
            },
            "content": {
                "strengths": list(self.content.strengths),
                "improvements": list(self.content.improvements),
            },
            "recommendations": list(self.recommendations),
            "detailedAnalysis": {
                "sections": [
                    {
                        "name": section.name,
                        "score": section.score,
                        "issues": list(section.issues),
                        "suggestions": list(section.suggestions),
                    }
                    for section in self.detailed_analysis.sections
                ],
                "readabilityScore": self.detailed_analysis.readability_score,
                "lengthAnalysis": {
                    "wordCount": length.word_count,
                    "optimal": length.optimal,
                    "recommendation": length.recommendation,
                },
            },
        }
