# Copyright 2026 Justin Cook
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Data models for the CVision application.

Field names are snake_case in Python. The JSON produced by ``to_dict`` (and
accepted by ``from_dict``) uses the camelCase keys of the stored documents,
e.g. ``personalInfo.fullName``.
"""

import dataclasses
import logging
from dataclasses import dataclass, field, fields, is_dataclass
from enum import Enum
from typing import List, Optional

logger = logging.getLogger(__name__)


class SkillLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    EXPERT = "expert"


class TemplateType(str, Enum):
    MODERN = "modern"
    CLASSIC = "classic"
    CREATIVE = "creative"
    PROFESSIONAL = "professional"
    MINIMAL = "minimal"
    EXECUTIVE = "executive"


class FontSize(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class ApplicationStatus(str, Enum):
    APPLIED = "applied"
    INTERVIEWING = "interviewing"
    OFFERED = "offered"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def _plain(value):
    if isinstance(value, Enum):
        return value.value
    if is_dataclass(value):
        return value.to_dict()
    if isinstance(value, list):
        return [_plain(v) for v in value]
    return value


def _str(data: dict, key: str, default: str = "") -> str:
    value = data.get(key)
    return default if value is None else str(value)


def _opt_str(data: dict, key: str) -> Optional[str]:
    value = data.get(key)
    return None if value is None else str(value)


def _str_list(data: dict, key: str) -> List[str]:
    # Blank entries are kept; consumers filter them.
    return [str(item) for item in (data.get(key) or []) if item is not None]


def _enum(enum_cls, value, default):
    if value is None:
        return default
    try:
        return enum_cls(value)
    except ValueError:
        logger.warning(f"Unknown {enum_cls.__name__} value {value!r}, using '{default.value}'")
        return default


class _Record:
    """Shared JSON mapping for the dataclasses below."""

    def to_dict(self) -> dict:
        # None values are dropped, like undefined keys in the stored JSON.
        out = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            out[_camel(f.name)] = _plain(value)
        return out


@dataclass
class PersonalInfo(_Record):
    full_name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: Optional[str] = ""
    website: Optional[str] = ""
    summary: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "PersonalInfo":
        data = data or {}
        return cls(
            full_name=_str(data, "fullName"),
            email=_str(data, "email"),
            phone=_str(data, "phone"),
            location=_str(data, "location"),
            linkedin=_opt_str(data, "linkedin"),
            website=_opt_str(data, "website"),
            summary=_str(data, "summary"),
        )


@dataclass
class Experience(_Record):
    """A single professional experience entry."""
    id: str = ""
    company: str = ""
    position: str = ""
    start_date: str = ""
    end_date: str = ""
    current: bool = False  # end_date is not shown when set
    description: str = ""
    achievements: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "Experience":
        data = data or {}
        return cls(
            id=_str(data, "id"),
            company=_str(data, "company"),
            position=_str(data, "position"),
            start_date=_str(data, "startDate"),
            end_date=_str(data, "endDate"),
            current=bool(data.get("current", False)),
            description=_str(data, "description"),
            achievements=_str_list(data, "achievements"),
        )


@dataclass
class Education(_Record):
    id: str = ""
    institution: str = ""
    degree: str = ""
    field: str = ""
    start_date: str = ""
    end_date: str = ""
    gpa: Optional[str] = None
    # `field` is shadowed by the attribute above
    achievements: List[str] = dataclasses.field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "Education":
        data = data or {}
        return cls(
            id=_str(data, "id"),
            institution=_str(data, "institution"),
            degree=_str(data, "degree"),
            field=_str(data, "field"),
            start_date=_str(data, "startDate"),
            end_date=_str(data, "endDate"),
            gpa=_opt_str(data, "gpa"),
            achievements=_str_list(data, "achievements"),
        )


@dataclass
class Skill(_Record):
    id: str = ""
    name: str = ""
    level: SkillLevel = SkillLevel.INTERMEDIATE
    category: str = ""  # free-text grouping label

    @classmethod
    def from_dict(cls, data: dict) -> "Skill":
        data = data or {}
        return cls(
            id=_str(data, "id"),
            name=_str(data, "name"),
            level=_enum(SkillLevel, data.get("level"), SkillLevel.INTERMEDIATE),
            category=_str(data, "category"),
        )


@dataclass
class Project(_Record):
    """Represents a technical project or open source contribution."""
    id: str = ""
    name: str = ""
    description: str = ""
    technologies: List[str] = field(default_factory=list)
    link: Optional[str] = None
    highlights: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "Project":
        data = data or {}
        return cls(
            id=_str(data, "id"),
            name=_str(data, "name"),
            description=_str(data, "description"),
            technologies=_str_list(data, "technologies"),
            link=_opt_str(data, "link"),
            highlights=_str_list(data, "highlights"),
        )


@dataclass
class Certification(_Record):
    id: str = ""
    name: str = ""
    issuer: str = ""
    date: str = ""
    expiry: Optional[str] = None
    credential_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Certification":
        data = data or {}
        return cls(
            id=_str(data, "id"),
            name=_str(data, "name"),
            issuer=_str(data, "issuer"),
            date=_str(data, "date"),
            expiry=_opt_str(data, "expiry"),
            credential_id=_opt_str(data, "credentialId"),
        )


@dataclass
class ResumeData(_Record):
    """
    Structured data representing a complete resume.
    Sequence order is display order. Nothing here is validated: every field
    may be empty and consumers must cope with that.
    """
    personal_info: PersonalInfo = field(default_factory=PersonalInfo)
    experiences: List[Experience] = field(default_factory=list)
    education: List[Education] = field(default_factory=list)
    skills: List[Skill] = field(default_factory=list)
    projects: List[Project] = field(default_factory=list)
    certifications: List[Certification] = field(default_factory=list)
    target_role: Optional[str] = ""
    target_industry: Optional[str] = ""

    @classmethod
    def from_dict(cls, data: dict) -> "ResumeData":
        data = data or {}
        return cls(
            personal_info=PersonalInfo.from_dict(data.get("personalInfo")),
            experiences=[Experience.from_dict(e) for e in data.get("experiences") or []],
            education=[Education.from_dict(e) for e in data.get("education") or []],
            skills=[Skill.from_dict(s) for s in data.get("skills") or []],
            projects=[Project.from_dict(p) for p in data.get("projects") or []],
            certifications=[Certification.from_dict(c) for c in data.get("certifications") or []],
            target_role=_opt_str(data, "targetRole"),
            target_industry=_opt_str(data, "targetIndustry"),
        )


@dataclass
class TemplateSettings(_Record):
    """Presentation settings. Colours are hex strings and are not validated."""
    template: TemplateType = TemplateType.MODERN
    primary_color: str = "#1e3a5f"
    accent_color: str = "#2d9596"
    font_family: str = "Inter"
    font_size: FontSize = FontSize.MEDIUM

    @classmethod
    def from_dict(cls, data: dict) -> "TemplateSettings":
        data = data or {}
        defaults = cls()
        return cls(
            template=_enum(TemplateType, data.get("template"), defaults.template),
            primary_color=_str(data, "primaryColor", defaults.primary_color),
            accent_color=_str(data, "accentColor", defaults.accent_color),
            font_family=_str(data, "fontFamily", defaults.font_family),
            font_size=_enum(FontSize, data.get("fontSize"), defaults.font_size),
        )


@dataclass
class ATSScore(_Record):
    """Derived, never persisted."""
    overall: int
    formatting: int
    keywords: int
    readability: int
    suggestions: List[str] = field(default_factory=list)


@dataclass
class JobMatch(_Record):
    """Derived, never persisted."""
    score: int
    matched_keywords: List[str] = field(default_factory=list)
    missing_keywords: List[str] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)


@dataclass
class SavedCV(_Record):
    """A named snapshot of a resume and its settings."""
    id: str
    name: str
    resume_data: ResumeData
    settings: TemplateSettings
    created_at: str = ""
    updated_at: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "SavedCV":
        data = data or {}
        return cls(
            id=_str(data, "id"),
            name=_str(data, "name"),
            resume_data=ResumeData.from_dict(data.get("resumeData")),
            settings=TemplateSettings.from_dict(data.get("settings")),
            created_at=_str(data, "createdAt"),
            updated_at=_str(data, "updatedAt"),
        )


@dataclass
class CoverLetter(_Record):
    id: str
    name: str
    target_company: str = ""
    target_position: str = ""
    content: str = ""
    created_at: str = ""
    updated_at: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "CoverLetter":
        data = data or {}
        return cls(
            id=_str(data, "id"),
            name=_str(data, "name"),
            target_company=_str(data, "targetCompany"),
            target_position=_str(data, "targetPosition"),
            content=_str(data, "content"),
            created_at=_str(data, "createdAt"),
            updated_at=_str(data, "updatedAt"),
        )


@dataclass
class JobApplication(_Record):
    id: str
    company: str
    position: str
    status: ApplicationStatus = ApplicationStatus.APPLIED
    applied_date: str = ""
    notes: Optional[str] = None
    cv_id: Optional[str] = None
    cover_letter_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "JobApplication":
        data = data or {}
        return cls(
            id=_str(data, "id"),
            company=_str(data, "company"),
            position=_str(data, "position"),
            status=_enum(ApplicationStatus, data.get("status"), ApplicationStatus.APPLIED),
            applied_date=_str(data, "appliedDate"),
            notes=_opt_str(data, "notes"),
            cv_id=_opt_str(data, "cvId"),
            cover_letter_id=_opt_str(data, "coverLetterId"),
        )


@dataclass
class UserProfile(_Record):
    """Local profile. There is no real authentication behind it."""
    id: str = "local-user"
    name: str = ""
    email: str = ""
    avatar: Optional[str] = None
    created_at: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "UserProfile":
        data = data or {}
        return cls(
            id=_str(data, "id", "local-user"),
            name=_str(data, "name"),
            email=_str(data, "email"),
            avatar=_opt_str(data, "avatar"),
            created_at=_str(data, "createdAt"),
        )


@dataclass
class ContentSuggestions(_Record):
    """Content ideas returned by the suggestion service (or its fallback)."""
    summary: str = ""
    skills: List[str] = field(default_factory=list)
    achievements: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "ContentSuggestions":
        data = data or {}
        return cls(
            summary=_str(data, "summary"),
            skills=_str_list(data, "skills"),
            achievements=_str_list(data, "achievements"),
        )
