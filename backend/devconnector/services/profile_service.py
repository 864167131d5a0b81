"""
Profile Service - profile upsert and experience/education list management

The module-level functions are pure: they build update documents and return
new lists without touching the database. ``ProfileService`` loads a profile,
applies their results and commits.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete
from sqlalchemy.orm import selectinload
from typing import Any, Dict, List, Optional
import logging

from devconnector.core.exceptions import ProfileNotFoundError
from devconnector.core.types import generate_uuid
from devconnector.models.profile import Profile
from devconnector.schemas.profile import (
    ProfileUpsert,
    ExperienceCreate,
    EducationCreate,
    PROFILE_TEXT_FIELDS,
    SOCIAL_FIELDS,
)

logger = logging.getLogger(__name__)

EXPERIENCE = "experience"
EDUCATION = "education"


# ==================== Pure helpers ====================

def _supplied(value: Optional[str]) -> bool:
    return value is not None and value != ""


def split_skills(skills: str) -> List[str]:
    """'node, react,css' -> ['node', 'react', 'css']"""
    return [skill.strip() for skill in skills.split(",") if skill.strip()]


def build_social(data: ProfileUpsert) -> Dict[str, str]:
    """Only the platforms that were supplied"""
    return {
        field: getattr(data, field)
        for field in SOCIAL_FIELDS
        if _supplied(getattr(data, field))
    }


def build_profile_fields(data: ProfileUpsert) -> Dict[str, Any]:
    """
    Update document for an upsert: supplied fields only.

    Absent (or empty) fields are left out entirely so an update never clears
    a stored value. ``social`` is included only when at least one platform
    was supplied.
    """
    fields: Dict[str, Any] = {}
    for field in PROFILE_TEXT_FIELDS:
        value = getattr(data, field)
        if _supplied(value):
            fields[field] = value

    if _supplied(data.skills):
        fields["skills"] = split_skills(data.skills)

    social = build_social(data)
    if social:
        fields["social"] = social

    return fields


def merge_profile_fields(current: Dict[str, Any], fields: Dict[str, Any]) -> Dict[str, Any]:
    """
    Apply an update document to the current values.

    Top-level fields are replaced; ``social`` is merged per platform.
    Keys not in ``fields`` keep their current value.
    """
    merged = dict(current)
    for key, value in fields.items():
        if key == "social":
            merged["social"] = {**(current.get("social") or {}), **value}
        else:
            merged[key] = value
    return merged


def new_experience(data: ExperienceCreate) -> Dict[str, Any]:
    return {
        "id": generate_uuid(),
        "title": data.title,
        "company": data.company,
        "location": data.location,
        "from": data.from_.isoformat(),
        "to": data.to.isoformat() if data.to else None,
        "current": data.current,
        "description": data.description,
    }


def new_education(data: EducationCreate) -> Dict[str, Any]:
    return {
        "id": generate_uuid(),
        "school": data.school,
        "degree": data.degree,
        "field_of_study": data.field_of_study,
        "from": data.from_.isoformat(),
        "to": data.to.isoformat() if data.to else None,
        "current": data.current,
        "description": data.description,
    }


def prepend_entry(entries: Optional[List[Dict[str, Any]]], entry: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Newest entry first"""
    return [entry] + list(entries or [])


def remove_entry(entries: Optional[List[Dict[str, Any]]], entry_id: str) -> List[Dict[str, Any]]:
    """Drop the entry with ``entry_id``; an unknown id leaves the list as it was"""
    return [entry for entry in (entries or []) if entry.get("id") != entry_id]


# ==================== Store ====================

class ProfileService:
    """Persistence operations on Profile records"""

    async def get_by_user(
        self,
        db: AsyncSession,
        user_id: str,
        reload: bool = False
    ) -> Optional[Profile]:
        """Profile for a user with its owner loaded"""
        query = (
            select(Profile)
            .options(selectinload(Profile.user))
            .where(Profile.user_id == user_id)
        )
        if reload:
            query = query.execution_options(populate_existing=True)
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def require_by_user(self, db: AsyncSession, user_id: str) -> Profile:
        profile = await self.get_by_user(db, user_id)
        if not profile:
            raise ProfileNotFoundError(user_id)
        return profile

    async def list_profiles(self, db: AsyncSession) -> List[Profile]:
        result = await db.execute(
            select(Profile)
            .options(selectinload(Profile.user))
            .order_by(Profile.created_at)
        )
        return list(result.scalars().all())

    async def upsert(self, db: AsyncSession, user_id: str, data: ProfileUpsert) -> Profile:
        """
        Create the profile from the supplied fields, or merge them into the
        existing one.
        """
        fields = build_profile_fields(data)
        profile = await self.get_by_user(db, user_id)

        if profile:
            current = {key: getattr(profile, key) for key in fields}
            merged = merge_profile_fields(current, fields)
            for key in fields:
                setattr(profile, key, merged[key])
            logger.info(f"Updated profile for user {user_id}: {sorted(fields)}")
        else:
            profile = Profile(
                user_id=user_id,
                skills=fields.pop("skills", []),
                experience=[],
                education=[],
                **fields
            )
            db.add(profile)
            logger.info(f"Created profile for user {user_id}")

        await db.commit()
        return await self.get_by_user(db, user_id, reload=True)

    async def _add_entry(self, db: AsyncSession, user_id: str, kind: str, entry: Dict[str, Any]) -> Profile:
        profile = await self.require_by_user(db, user_id)
        setattr(profile, kind, prepend_entry(getattr(profile, kind), entry))
        await db.commit()
        logger.info(f"Added {kind} entry {entry['id']} for user {user_id}")
        return await self.get_by_user(db, user_id, reload=True)

    async def _remove_entry(self, db: AsyncSession, user_id: str, kind: str, entry_id: str) -> Profile:
        profile = await self.require_by_user(db, user_id)
        entries = getattr(profile, kind)
        remaining = remove_entry(entries, entry_id)
        if len(remaining) == len(entries or []):
            logger.info(f"No {kind} entry {entry_id} for user {user_id}")
            return profile
        setattr(profile, kind, remaining)
        await db.commit()
        logger.info(f"Removed {kind} entry {entry_id} for user {user_id}")
        return await self.get_by_user(db, user_id, reload=True)

    async def add_experience(self, db: AsyncSession, user_id: str, data: ExperienceCreate) -> Profile:
        return await self._add_entry(db, user_id, EXPERIENCE, new_experience(data))

    async def remove_experience(self, db: AsyncSession, user_id: str, entry_id: str) -> Profile:
        return await self._remove_entry(db, user_id, EXPERIENCE, entry_id)

    async def add_education(self, db: AsyncSession, user_id: str, data: EducationCreate) -> Profile:
        return await self._add_entry(db, user_id, EDUCATION, new_education(data))

    async def remove_education(self, db: AsyncSession, user_id: str, entry_id: str) -> Profile:
        return await self._remove_entry(db, user_id, EDUCATION, entry_id)

    async def delete_for_user(self, db: AsyncSession, user_id: str) -> None:
        await db.execute(delete(Profile).where(Profile.user_id == user_id))
        await db.commit()
        logger.info(f"Deleted profile for user {user_id}")


profile_service = ProfileService()
