"""
Post Service - posts, likes and comments

Author name/avatar are copied onto posts and comments when they are written
so listings never need to join back to users.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete
from datetime import datetime
from typing import Any, Dict, List, Optional
import logging

from devconnector.core.exceptions import (
    AlreadyLikedError,
    AuthorizationError,
    CommentNotFoundError,
    NotLikedError,
    PostNotFoundError,
)
from devconnector.core.types import generate_uuid, is_valid_uuid
from devconnector.models.post import Post
from devconnector.models.user import User

logger = logging.getLogger(__name__)


# ==================== Pure helpers ====================

def has_liked(likes: Optional[List[Dict[str, Any]]], user_id: str) -> bool:
    return any(like.get("user") == user_id for like in (likes or []))


def add_like(likes: Optional[List[Dict[str, Any]]], user_id: str) -> List[Dict[str, Any]]:
    return [{"user": user_id}] + list(likes or [])


def remove_like(likes: Optional[List[Dict[str, Any]]], user_id: str) -> List[Dict[str, Any]]:
    return [like for like in (likes or []) if like.get("user") != user_id]


def new_comment(author: User, text: str) -> Dict[str, Any]:
    return {
        "id": generate_uuid(),
        "user": author.id,
        "text": text,
        "name": author.name,
        "avatar": author.avatar,
        "date": datetime.utcnow().isoformat(),
    }


def find_comment(comments: Optional[List[Dict[str, Any]]], comment_id: str) -> Optional[Dict[str, Any]]:
    for comment in comments or []:
        if comment.get("id") == comment_id:
            return comment
    return None


# ==================== Store ====================

class PostService:
    """Persistence operations on Post records"""

    async def create_post(self, db: AsyncSession, author: User, text: str) -> Post:
        post = Post(
            user_id=author.id,
            text=text,
            name=author.name,
            avatar=author.avatar,
            likes=[],
            comments=[],
        )
        db.add(post)
        await db.commit()
        await db.refresh(post)

        logger.info(f"User {author.id} created post {post.id}")
        return post

    async def list_posts(self, db: AsyncSession) -> List[Post]:
        """All posts, newest first"""
        result = await db.execute(
            select(Post).order_by(Post.created_at.desc())
        )
        return list(result.scalars().all())

    async def get_post(self, db: AsyncSession, post_id: str) -> Post:
        """
        Raises:
            PostNotFoundError: malformed id or no such post
        """
        if not is_valid_uuid(post_id):
            raise PostNotFoundError(post_id)

        result = await db.execute(select(Post).where(Post.id == post_id))
        post = result.scalar_one_or_none()
        if not post:
            raise PostNotFoundError(post_id)
        return post

    async def delete_post(self, db: AsyncSession, post_id: str, user_id: str) -> None:
        """Only the author may delete a post"""
        post = await self.get_post(db, post_id)
        if post.user_id != user_id:
            logger.warning(f"User {user_id} tried to delete post {post_id} owned by {post.user_id}")
            raise AuthorizationError()

        await db.delete(post)
        await db.commit()
        logger.info(f"User {user_id} deleted post {post_id}")

    async def delete_posts_by_user(self, db: AsyncSession, user_id: str) -> None:
        await db.execute(delete(Post).where(Post.user_id == user_id))
        await db.commit()
        logger.info(f"Deleted posts of user {user_id}")

    async def like(self, db: AsyncSession, post_id: str, user_id: str) -> List[Dict[str, Any]]:
        post = await self.get_post(db, post_id)
        if has_liked(post.likes, user_id):
            raise AlreadyLikedError()

        post.likes = add_like(post.likes, user_id)
        await db.commit()
        return post.likes

    async def unlike(self, db: AsyncSession, post_id: str, user_id: str) -> List[Dict[str, Any]]:
        post = await self.get_post(db, post_id)
        if not has_liked(post.likes, user_id):
            raise NotLikedError()

        post.likes = remove_like(post.likes, user_id)
        await db.commit()
        return post.likes

    async def add_comment(self, db: AsyncSession, post_id: str, author: User, text: str) -> List[Dict[str, Any]]:
        post = await self.get_post(db, post_id)
        comment = new_comment(author, text)

        post.comments = [comment] + list(post.comments or [])
        await db.commit()
        logger.info(f"User {author.id} commented {comment['id']} on post {post_id}")
        return post.comments

    async def remove_comment(
        self,
        db: AsyncSession,
        post_id: str,
        comment_id: str,
        user_id: str
    ) -> List[Dict[str, Any]]:
        """Only the comment's author may remove it"""
        post = await self.get_post(db, post_id)
        comment = find_comment(post.comments, comment_id)
        if not comment:
            raise CommentNotFoundError(comment_id)
        if comment.get("user") != user_id:
            raise AuthorizationError()

        post.comments = [c for c in post.comments if c.get("id") != comment_id]
        await db.commit()
        return post.comments


post_service = PostService()
