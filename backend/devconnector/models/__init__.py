# Re-export all models for convenient imports
from devconnector.models.user import User
from devconnector.models.profile import Profile
from devconnector.models.post import Post

__all__ = [
    "User",
    "Profile",
    "Post",
]
