from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Any, List

from devconnector.core.database import get_db
from devconnector.core.exceptions import ProfileNotFoundError
from devconnector.core.logging_config import logger
from devconnector.core.types import is_valid_uuid
from devconnector.core.validation import validate_fields
from devconnector.modules.auth.dependencies import get_current_user_id
from devconnector.modules.github.github_client import GitHubClient, get_github_client
from devconnector.schemas.post import MessageResponse
from devconnector.schemas.profile import (
    EDUCATION_CHECKS,
    EXPERIENCE_CHECKS,
    PROFILE_CHECKS,
    EducationCreate,
    ExperienceCreate,
    ProfileResponse,
    ProfileUpsert,
)
from devconnector.services.post_service import post_service
from devconnector.services.profile_service import profile_service
from devconnector.services.user_service import user_service

router = APIRouter()

NO_CURRENT_PROFILE = "There is no current profile"


@router.get("/me", response_model=ProfileResponse, response_model_exclude_none=True)
async def get_my_profile(
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    """Profile of the authenticated user"""
    return await profile_service.require_by_user(db, user_id)


@router.post("", response_model=ProfileResponse, response_model_exclude_none=True)
async def upsert_profile(
    data: ProfileUpsert,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    """Create or update the authenticated user's profile"""
    validate_fields(data.model_dump(), PROFILE_CHECKS)
    return await profile_service.upsert(db, user_id, data)


@router.get("", response_model=List[ProfileResponse], response_model_exclude_none=True)
async def list_profiles(db: AsyncSession = Depends(get_db)):
    """All profiles"""
    return await profile_service.list_profiles(db)


@router.get("/user/{user_id}", response_model=ProfileResponse, response_model_exclude_none=True)
async def get_profile_by_user(user_id: str, db: AsyncSession = Depends(get_db)):
    """Profile of any user by user id"""
    if not is_valid_uuid(user_id):
        raise ProfileNotFoundError(user_id, message=NO_CURRENT_PROFILE)

    profile = await profile_service.get_by_user(db, user_id)
    if not profile:
        raise ProfileNotFoundError(user_id, message=NO_CURRENT_PROFILE)
    return profile


@router.delete("", response_model=MessageResponse)
async def delete_account(
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    """
    Delete the user's posts, profile and account.

    Each step commits on its own; a failure part-way leaves the earlier
    deletions in place.
    """
    await post_service.delete_posts_by_user(db, user_id)
    await profile_service.delete_for_user(db, user_id)
    await user_service.delete_user(db, user_id)

    logger.log_auth_event(event="delete_account", success=True, deleted_user=user_id)
    return {"msg": "User has been deleted"}


@router.put("/experience", response_model=ProfileResponse, response_model_exclude_none=True)
async def add_experience(
    data: ExperienceCreate,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    """Add an experience entry at the top of the list"""
    validate_fields(data.model_dump(by_alias=True), EXPERIENCE_CHECKS)
    return await profile_service.add_experience(db, user_id, data)


@router.delete("/experience/{exp_id}", response_model=ProfileResponse, response_model_exclude_none=True)
async def delete_experience(
    exp_id: str,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    """Remove an experience entry"""
    return await profile_service.remove_experience(db, user_id, exp_id)


@router.put("/education", response_model=ProfileResponse, response_model_exclude_none=True)
async def add_education(
    data: EducationCreate,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    """Add an education entry at the top of the list"""
    validate_fields(data.model_dump(by_alias=True), EDUCATION_CHECKS)
    return await profile_service.add_education(db, user_id, data)


@router.delete("/education/{edu_id}", response_model=ProfileResponse, response_model_exclude_none=True)
async def delete_education(
    edu_id: str,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    """Remove an education entry"""
    return await profile_service.remove_education(db, user_id, edu_id)


@router.get("/github/{username}")
async def get_github_repos(
    username: str,
    user_id: str = Depends(get_current_user_id),
    github: GitHubClient = Depends(get_github_client)
) -> Any:
    """Public repositories of a GitHub user, passed through unchanged"""
    return await github.get_user_repos(username)
