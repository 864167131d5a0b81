from pydantic import BaseModel, Field, field_validator
from typing import Any, Optional, List
from datetime import date, datetime

from devconnector.core.validation import FieldCheck

SOCIAL_FIELDS = ("youtube", "twitter", "facebook", "linkedin", "instagram")

# Top-level profile fields copied as-is when supplied
PROFILE_TEXT_FIELDS = ("company", "website", "location", "bio", "status", "github_username")


# ==================== Requests ====================

def _blank_as_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


class ProfileUpsert(BaseModel):
    """Create-or-update body. ``skills`` is a comma-separated string."""
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    status: Optional[str] = None
    github_username: Optional[str] = None
    skills: Optional[str] = None

    youtube: Optional[str] = None
    twitter: Optional[str] = None
    facebook: Optional[str] = None
    linkedin: Optional[str] = None
    instagram: Optional[str] = None


class ExperienceCreate(BaseModel):
    title: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None
    from_: Optional[date] = Field(None, alias="from")
    to: Optional[date] = None
    current: bool = False
    description: Optional[str] = None

    @field_validator("from_", "to", "location", "description", mode="before")
    @classmethod
    def blank_as_missing(cls, v: Any) -> Any:
        """Form clients send "" for untouched inputs"""
        return _blank_as_none(v)

    class Config:
        populate_by_name = True


class EducationCreate(BaseModel):
    school: Optional[str] = None
    degree: Optional[str] = None
    field_of_study: Optional[str] = None
    from_: Optional[date] = Field(None, alias="from")
    to: Optional[date] = None
    current: bool = False
    description: Optional[str] = None

    @field_validator("from_", "to", "description", mode="before")
    @classmethod
    def blank_as_missing(cls, v: Any) -> Any:
        return _blank_as_none(v)

    class Config:
        populate_by_name = True


def names_a_skill(value: Any) -> bool:
    """At least one non-empty item in the comma-separated list"""
    return isinstance(value, str) and any(part.strip() for part in value.split(","))


PROFILE_CHECKS = [
    FieldCheck("status", "Status is required"),
    FieldCheck("skills", "Skills is required", names_a_skill),
]

EXPERIENCE_CHECKS = [
    FieldCheck("title", "Title is required"),
    FieldCheck("company", "Company is required"),
    FieldCheck("from", "From date is required"),
]

EDUCATION_CHECKS = [
    FieldCheck("school", "School is required"),
    FieldCheck("degree", "Degree is required"),
    FieldCheck("field_of_study", "Field of study is required"),
    FieldCheck("from", "From date is required"),
]


# ==================== Responses ====================

class ProfileOwner(BaseModel):
    id: str
    name: str
    avatar: Optional[str] = None

    class Config:
        from_attributes = True


class SocialLinks(BaseModel):
    youtube: Optional[str] = None
    twitter: Optional[str] = None
    facebook: Optional[str] = None
    linkedin: Optional[str] = None
    instagram: Optional[str] = None


class ExperienceEntry(BaseModel):
    id: str
    title: str
    company: str
    location: Optional[str] = None
    from_: date = Field(alias="from")
    to: Optional[date] = None
    current: bool = False
    description: Optional[str] = None

    class Config:
        populate_by_name = True


class EducationEntry(BaseModel):
    id: str
    school: str
    degree: str
    field_of_study: str
    from_: date = Field(alias="from")
    to: Optional[date] = None
    current: bool = False
    description: Optional[str] = None

    class Config:
        populate_by_name = True


class ProfileResponse(BaseModel):
    id: str
    user: ProfileOwner
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    status: Optional[str] = None
    github_username: Optional[str] = None
    skills: List[str] = []
    social: Optional[SocialLinks] = None
    experience: List[ExperienceEntry] = []
    education: List[EducationEntry] = []
    date: datetime = Field(validation_alias="created_at")

    class Config:
        from_attributes = True
