from devconnector.schemas.auth import (
    UserRegister,
    UserLogin,
    TokenResponse,
    UserResponse,
)
from devconnector.schemas.profile import (
    ProfileUpsert,
    ExperienceCreate,
    EducationCreate,
    ProfileResponse,
)
from devconnector.schemas.post import (
    PostCreate,
    CommentCreate,
    PostResponse,
    LikeEntry,
    CommentEntry,
    MessageResponse,
)

__all__ = [
    "UserRegister",
    "UserLogin",
    "TokenResponse",
    "UserResponse",
    "ProfileUpsert",
    "ExperienceCreate",
    "EducationCreate",
    "ProfileResponse",
    "PostCreate",
    "CommentCreate",
    "PostResponse",
    "LikeEntry",
    "CommentEntry",
    "MessageResponse",
]
