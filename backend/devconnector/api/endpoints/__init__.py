# API endpoints
from . import auth, users, profile, posts

__all__ = ["auth", "users", "profile", "posts"]
