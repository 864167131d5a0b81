from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime

from devconnector.core.validation import FieldCheck


class PostCreate(BaseModel):
    text: Optional[str] = None


class CommentCreate(BaseModel):
    text: Optional[str] = None


TEXT_CHECKS = [
    FieldCheck("text", "Text is required"),
]


class LikeEntry(BaseModel):
    user: str


class CommentEntry(BaseModel):
    id: str
    user: str
    text: str
    name: Optional[str] = None
    avatar: Optional[str] = None
    date: datetime


class PostResponse(BaseModel):
    id: str
    user: str = Field(validation_alias="user_id")
    text: str
    name: Optional[str] = None
    avatar: Optional[str] = None
    likes: List[LikeEntry] = []
    comments: List[CommentEntry] = []
    date: datetime = Field(validation_alias="created_at")

    class Config:
        from_attributes = True


class MessageResponse(BaseModel):
    msg: str
