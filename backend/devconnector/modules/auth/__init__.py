# Authentication module

from devconnector.modules.auth.dependencies import (
    get_current_user,
    get_current_user_id,
    resolve_identity,
    TOKEN_HEADER,
)

__all__ = [
    "get_current_user",
    "get_current_user_id",
    "resolve_identity",
    "TOKEN_HEADER",
]
