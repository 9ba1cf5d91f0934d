"""
Data models for the resume profile.

These dataclasses represent the canonical profile shape, independent of
whether it comes from LinkedIn, an external JSON feed or the baseline.
Field names on the wire are camelCase to match the JSON feed format.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from portfolio.utils.helpers import safe_optional_str, safe_str


def _list_of(data: Dict[str, Any], key: str) -> list:
    """A list field from raw data; None or non-lists become empty."""
    value = data.get(key)
    return value if isinstance(value, list) else []


@dataclass
class Experience:
    """A position held."""
    title: str
    company: str
    start_date: str
    description: str = ""
    current: bool = False
    location: Optional[str] = None
    end_date: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "company": self.company,
            "location": self.location,
            "startDate": self.start_date,
            "endDate": self.end_date,
            "description": self.description,
            "current": self.current,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Experience":
        return cls(
            title=safe_str(data.get("title")),
            company=safe_str(data.get("company")),
            location=safe_optional_str(data.get("location")),
            start_date=safe_str(data.get("startDate")),
            end_date=safe_optional_str(data.get("endDate")),
            description=safe_str(data.get("description")),
            current=bool(data.get("current", False)),
        )


@dataclass
class Education:
    """A degree or course of study."""
    school: str
    degree: str
    field: str
    start_year: str
    end_year: Optional[str] = None
    description: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "school": self.school,
            "degree": self.degree,
            "field": self.field,
            "startYear": self.start_year,
            "endYear": self.end_year,
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Education":
        return cls(
            school=safe_str(data.get("school")),
            degree=safe_str(data.get("degree")),
            field=safe_str(data.get("field")),
            start_year=safe_str(data.get("startYear")),
            end_year=safe_optional_str(data.get("endYear")),
            description=safe_optional_str(data.get("description")),
        )


@dataclass
class Certification:
    """A professional certification."""
    name: str
    issuer: str
    issue_date: str
    expiration_date: Optional[str] = None
    credential_id: Optional[str] = None
    credential_url: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "issuer": self.issuer,
            "issueDate": self.issue_date,
            "expirationDate": self.expiration_date,
            "credentialId": self.credential_id,
            "credentialUrl": self.credential_url,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Certification":
        return cls(
            name=safe_str(data.get("name")),
            issuer=safe_str(data.get("issuer")),
            issue_date=safe_str(data.get("issueDate")),
            expiration_date=safe_optional_str(data.get("expirationDate")),
            credential_id=safe_optional_str(data.get("credentialId")),
            credential_url=safe_optional_str(data.get("credentialUrl")),
        )


# Scalar and list fields, in the order the merge walks them
SCALAR_FIELDS = (
    "first_name", "last_name", "headline", "summary",
    "location", "industry", "profile_picture",
)
LIST_FIELDS = ("experience", "education", "skills", "certifications")


@dataclass
class ResolvedProfile:
    """
    Complete resume profile.

    List fields are always lists so renderers never branch on absence.
    """
    first_name: str = ""
    last_name: str = ""
    headline: str = ""
    summary: str = ""
    location: str = ""
    industry: str = ""
    profile_picture: Optional[str] = None
    experience: List[Experience] = field(default_factory=list)
    education: List[Education] = field(default_factory=list)
    skills: List[str] = field(default_factory=list)
    certifications: List[Certification] = field(default_factory=list)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "firstName": self.first_name,
            "lastName": self.last_name,
            "headline": self.headline,
            "summary": self.summary,
            "location": self.location,
            "industry": self.industry,
            "profilePicture": self.profile_picture,
            "experience": [e.to_dict() for e in self.experience],
            "education": [e.to_dict() for e in self.education],
            "skills": list(self.skills),
            "certifications": [c.to_dict() for c in self.certifications],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ResolvedProfile":
        """
        Create from the canonical JSON shape. Every field is optional.

        Raises:
            TypeError: If data is not a mapping
        """
        if not isinstance(data, dict):
            raise TypeError(f"profile must be an object, got {type(data).__name__}")
        return cls(
            first_name=safe_str(data.get("firstName")),
            last_name=safe_str(data.get("lastName")),
            headline=safe_str(data.get("headline")),
            summary=safe_str(data.get("summary")),
            location=safe_str(data.get("location")),
            industry=safe_str(data.get("industry")),
            profile_picture=safe_optional_str(data.get("profilePicture")),
            experience=[
                Experience.from_dict(e) for e in _list_of(data, "experience") if isinstance(e, dict)
            ],
            education=[
                Education.from_dict(e) for e in _list_of(data, "education") if isinstance(e, dict)
            ],
            skills=[safe_str(s) for s in _list_of(data, "skills") if s],
            certifications=[
                Certification.from_dict(c)
                for c in _list_of(data, "certifications")
                if isinstance(c, dict)
            ],
        )


def merge_over_baseline(primary: ResolvedProfile, baseline: ResolvedProfile) -> ResolvedProfile:
    """
    Field-level merge: a non-empty primary field wins, otherwise the
    baseline field is kept.
    """
    merged = {}
    for name in SCALAR_FIELDS + LIST_FIELDS:
        value = getattr(primary, name)
        merged[name] = value if value else getattr(baseline, name)
    return ResolvedProfile(**merged)
