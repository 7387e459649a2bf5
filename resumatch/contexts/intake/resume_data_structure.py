"""
Structured resume data types for the Intake context.

StructuredResume is the canonical record produced by structure_resume() and
consumed by the Targeting and Drafting contexts. Every field defaults to an
empty string or empty list, so consumers only ever branch on "empty", never
on "missing".

to_dict()/from_dict() translate to and from the camelCase plain-data shape
used by downstream collaborators (exporters, storage, UI).
"""

from dataclasses import asdict, dataclass, field, replace
from typing import Any, Dict, List

from resumatch.utils.timestamp import now_exact

DEFAULT_TEMPLATE = "modern-professional"


@dataclass
class RawDocument:
    """
    Plain text pulled out of an uploaded file.

    Ephemeral: produced by the extraction boundary, consumed once by
    structure_resume(), then discarded.
    """

    text: str
    source_type: str  # "pdf", "docx" or "txt"


@dataclass
class PersonalInfo:
    name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    website: str = ""
    linkedin: str = ""


@dataclass
class ExperienceEntry:
    """One job, in order of appearance in the source document."""

    title: str = ""
    company: str = ""
    start_date: str = ""
    end_date: str = ""
    description: str = ""
    current: bool = False
    id: str = ""


@dataclass
class EducationEntry:
    degree: str = ""
    school: str = ""
    graduation_year: str = ""
    gpa: str = ""
    id: str = ""


@dataclass
class Certification:
    name: str = ""
    issuer: str = ""
    date: str = ""
    id: str = ""


@dataclass
class Skills:
    """Categorized skills, each list unique case-insensitively."""

    technical: List[str] = field(default_factory=list)
    soft: List[str] = field(default_factory=list)

    def all(self) -> List[str]:
        """Technical skills followed by soft skills."""
        return self.technical + self.soft

    def is_empty(self) -> bool:
        return not self.technical and not self.soft


@dataclass
class StructuredResume:
    """
    Canonical parsed resume.

    Created once per upload; treated as immutable afterwards. Edits produce
    a new VersionedResume via with_edits().
    """

    personal_info: PersonalInfo = field(default_factory=PersonalInfo)
    summary: str = ""
    experience: List[ExperienceEntry] = field(default_factory=list)
    education: List[EducationEntry] = field(default_factory=list)
    skills: Skills = field(default_factory=Skills)
    certifications: List[Certification] = field(default_factory=list)

    def plain_text(self) -> str:
        """
        Concatenate every section into one space-joined string.

        This is the text ATS keyword matching runs against. Empty parts are
        skipped so they don't leave double spaces.
        """
        parts = [self.personal_info.name, self.summary]
        for exp in self.experience:
            parts.append(f"{exp.title} {exp.company} {exp.description}")
        for edu in self.education:
            parts.append(f"{edu.degree} {edu.school}")
        parts.append(" ".join(self.skills.technical))
        parts.append(" ".join(self.skills.soft))
        for cert in self.certifications:
            parts.append(f"{cert.name} {cert.issuer}")
        return " ".join(part for part in parts if part.strip())

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the camelCase plain-data shape."""
        info = self.personal_info
        return {
            "personalInfo": asdict(info),
            "summary": self.summary,
            "experience": [
                {
                    "id": exp.id,
                    "title": exp.title,
                    "company": exp.company,
                    "startDate": exp.start_date,
                    "endDate": exp.end_date,
                    "description": exp.description,
                    "current": exp.current,
                }
                for exp in self.experience
            ],
            "education": [
                {
                    "id": edu.id,
                    "degree": edu.degree,
                    "school": edu.school,
                    "graduationYear": edu.graduation_year,
                    "gpa": edu.gpa,
                }
                for edu in self.education
            ],
            "skills": {
                "technical": list(self.skills.technical),
                "soft": list(self.skills.soft),
            },
            "certifications": [asdict(cert) for cert in self.certifications],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StructuredResume":
        """
        Build from the camelCase plain-data shape.

        Missing keys fall back to empty defaults; unknown keys are ignored.
        """
        info = data.get("personalInfo") or {}
        skills = data.get("skills") or {}

        return cls(
            personal_info=PersonalInfo(
                name=info.get("name") or "",
                email=info.get("email") or "",
                phone=info.get("phone") or "",
                location=info.get("location") or "",
                website=info.get("website") or "",
                linkedin=info.get("linkedin") or "",
            ),
            summary=data.get("summary") or "",
            experience=[
                ExperienceEntry(
                    title=exp.get("title") or "",
                    company=exp.get("company") or "",
                    start_date=exp.get("startDate") or "",
                    end_date=exp.get("endDate") or "",
                    description=exp.get("description") or "",
                    current=bool(exp.get("current", False)),
                    id=str(exp.get("id") or f"exp-{index}"),
                )
                for index, exp in enumerate(data.get("experience") or [])
            ],
            education=[
                EducationEntry(
                    degree=edu.get("degree") or "",
                    school=edu.get("school") or "",
                    graduation_year=edu.get("graduationYear") or "",
                    gpa=edu.get("gpa") or "",
                    id=str(edu.get("id") or f"edu-{index}"),
                )
                for index, edu in enumerate(data.get("education") or [])
            ],
            skills=Skills(
                technical=list(skills.get("technical") or []),
                soft=list(skills.get("soft") or []),
            ),
            certifications=[
                Certification(
                    name=cert.get("name") or "",
                    issuer=cert.get("issuer") or "",
                    date=cert.get("date") or "",
                    id=str(cert.get("id") or f"cert-{index}"),
                )
                for index, cert in enumerate(data.get("certifications") or [])
            ],
        )


@dataclass
class VersionedResume:
    """
    A saved resume with edit history metadata.

    Versioning happens outside the structurer: a human edit produces a new
    record through with_edits(), never an in-place change.
    """

    resume: StructuredResume
    id: str
    title: str
    template: str = DEFAULT_TEMPLATE
    version: int = 1
    last_modified: str = field(default_factory=now_exact)

    def with_edits(self, resume: StructuredResume) -> "VersionedResume":
        """
        Return a new record holding the edited resume.

        Args:
            resume: The edited resume content

        Returns:
            Copy with version incremented and last_modified refreshed
        """
        return replace(self, resume=resume, version=self.version + 1, last_modified=now_exact())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "template": self.template,
            "version": self.version,
            "lastModified": self.last_modified,
            "data": self.resume.to_dict(),
        }
