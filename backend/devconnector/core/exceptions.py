"""
Custom Exceptions for DevConnector
==================================

Raise these from services and dependencies; the handlers registered in
``devconnector.main`` turn them into JSON responses.

Usage:
    from devconnector.core.exceptions import PostNotFoundError

    if not post:
        raise PostNotFoundError(post_id)

Response shapes:
    - field/credential errors:  {"errors": [{"msg": ..., "param": ..., "location": ...}]}
    - everything else:          {"msg": ...}
"""

from typing import Optional, Any, Dict, List


class DevConnectorError(Exception):
    """Base exception for all DevConnector errors"""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        details: Optional[Dict[str, Any]] = None,
        status_code: Optional[int] = None
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)

    def to_response(self) -> Dict[str, Any]:
        return {"msg": self.message}


# ============================================
# Validation Errors (400-type)
# ============================================

class ValidationError(DevConnectorError):
    """One or more request fields failed validation"""

    status_code = 400

    def __init__(self, errors: List[Dict[str, Any]]):
        self.errors = errors
        message = "; ".join(error.get("msg", "") for error in errors) or "Invalid request"
        super().__init__(message, code="VALIDATION_ERROR", details={"errors": errors})

    def to_response(self) -> Dict[str, Any]:
        return {"errors": self.errors}


class InvalidCredentialsError(ValidationError):
    """Login failed - deliberately does not say which check failed"""

    def __init__(self):
        super().__init__([{"msg": "Invalid Credentials"}])
        self.code = "INVALID_CREDENTIALS"


class UserAlreadyExistsError(ValidationError):
    """Registration with an email that is already taken"""

    def __init__(self):
        super().__init__([{"msg": "User already exists"}])
        self.code = "USER_EXISTS"


class AlreadyLikedError(DevConnectorError):
    """User tried to like a post twice"""

    status_code = 400

    def __init__(self):
        super().__init__("Post already liked", code="ALREADY_LIKED")


class NotLikedError(DevConnectorError):
    """User tried to unlike a post they never liked"""

    status_code = 400

    def __init__(self):
        super().__init__("Post has not yet been liked", code="NOT_LIKED")


# ============================================
# Authentication & Authorization Errors
# ============================================

class AuthenticationError(DevConnectorError):
    """User authentication failed"""

    status_code = 401

    def __init__(self, message: str = "Authentication failed"):
        super().__init__(message, code="AUTH_FAILED")


class MissingTokenError(AuthenticationError):
    """No token on a protected route"""

    def __init__(self):
        super().__init__("No token, authorization denied")
        self.code = "NO_TOKEN"


class InvalidTokenError(AuthenticationError):
    """Token failed signature, structure or expiry checks"""

    def __init__(self):
        super().__init__("Token is not valid")
        self.code = "INVALID_TOKEN"


class AuthorizationError(DevConnectorError):
    """User is not the owner of the resource"""

    status_code = 401

    def __init__(self, message: str = "User not authorized"):
        super().__init__(message, code="NOT_AUTHORIZED")


# ============================================
# Resource Errors
# ============================================

class ResourceNotFoundError(DevConnectorError):
    """Base class for not found errors"""

    status_code = 404

    def __init__(self, resource_type: str, resource_id: str, message: Optional[str] = None):
        super().__init__(
            message or f"{resource_type} not found",
            code=f"{resource_type.upper()}_NOT_FOUND",
            details={"resource_type": resource_type, "resource_id": resource_id}
        )


class UserNotFoundError(ResourceNotFoundError):
    """User not found"""

    def __init__(self, user_id: str):
        super().__init__("User", user_id)


class PostNotFoundError(ResourceNotFoundError):
    """Post not found (or malformed post id)"""

    def __init__(self, post_id: str):
        super().__init__("Post", post_id)


class CommentNotFoundError(ResourceNotFoundError):
    """Comment not found on a post"""

    def __init__(self, comment_id: str):
        super().__init__("Comment", comment_id, message="Comment does not exist")


class ProfileNotFoundError(ResourceNotFoundError):
    """Profile not found - the profile routes report this as a 400"""

    status_code = 400

    def __init__(self, user_id: str, message: str = "There is no profile for this user"):
        super().__init__("Profile", user_id, message=message)


class GitHubProfileNotFoundError(ResourceNotFoundError):
    """GitHub answered with a non-200 status"""

    def __init__(self, username: str):
        super().__init__("GitHub profile", username, message="No Github profile found")
        self.code = "GITHUB_PROFILE_NOT_FOUND"


SERVER_ERROR_RESPONSE: Dict[str, Any] = {"msg": "Server Error"}
