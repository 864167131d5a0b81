from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from devconnector.core.database import get_db
from devconnector.core.validation import validate_fields
from devconnector.models.user import User
from devconnector.modules.auth.dependencies import get_current_user, get_current_user_id
from devconnector.schemas.post import (
    TEXT_CHECKS,
    CommentCreate,
    CommentEntry,
    LikeEntry,
    MessageResponse,
    PostCreate,
    PostResponse,
)
from devconnector.services.post_service import post_service

router = APIRouter()


@router.post("", response_model=PostResponse)
async def create_post(
    data: PostCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Create a post; the author's name and avatar are copied onto it"""
    validate_fields(data.model_dump(), TEXT_CHECKS)
    return await post_service.create_post(db, current_user, data.text)


@router.get("", response_model=List[PostResponse])
async def list_posts(
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    """All posts, newest first"""
    return await post_service.list_posts(db)


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(
    post_id: str,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    return await post_service.get_post(db, post_id)


@router.delete("/{post_id}", response_model=MessageResponse)
async def delete_post(
    post_id: str,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    """Delete a post - author only"""
    await post_service.delete_post(db, post_id, user_id)
    return {"msg": "Post removed"}


@router.put("/like/{post_id}", response_model=List[LikeEntry])
async def like_post(
    post_id: str,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    return await post_service.like(db, post_id, user_id)


@router.put("/unlike/{post_id}", response_model=List[LikeEntry])
async def unlike_post(
    post_id: str,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    return await post_service.unlike(db, post_id, user_id)


@router.post("/comment/{post_id}", response_model=List[CommentEntry])
async def add_comment(
    post_id: str,
    data: CommentCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Comment on a post; newest comment first"""
    validate_fields(data.model_dump(), TEXT_CHECKS)
    return await post_service.add_comment(db, post_id, current_user, data.text)


@router.delete("/comment/{post_id}/{comment_id}", response_model=List[CommentEntry])
async def delete_comment(
    post_id: str,
    comment_id: str,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    """Remove a comment - comment author only"""
    return await post_service.remove_comment(db, post_id, comment_id, user_id)
