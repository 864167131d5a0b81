from devconnector.services.user_service import user_service, UserService
from devconnector.services.profile_service import profile_service, ProfileService
from devconnector.services.post_service import post_service, PostService

__all__ = [
    "user_service",
    "UserService",
    "profile_service",
    "ProfileService",
    "post_service",
    "PostService",
]
