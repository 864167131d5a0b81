from fastapi import Depends
from fastapi.security import APIKeyHeader, HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional

from devconnector.core.database import get_db
from devconnector.core.exceptions import InvalidTokenError, MissingTokenError, UserNotFoundError
from devconnector.core.logging_config import set_user_id
from devconnector.core.security import TokenIssuer, get_token_issuer
from devconnector.models.user import User
from devconnector.services.user_service import user_service

TOKEN_HEADER = "x-auth-token"

token_header = APIKeyHeader(name=TOKEN_HEADER, auto_error=False)
bearer = HTTPBearer(auto_error=False)


def resolve_identity(token: Optional[str], issuer: TokenIssuer) -> str:
    """
    Turn a raw token into a user id.

    Raises:
        MissingTokenError: no token was sent
        InvalidTokenError: bad signature, malformed or expired token
    """
    if not token:
        raise MissingTokenError()

    user_id = issuer.verify(token)
    if user_id is None:
        raise InvalidTokenError()
    return user_id


async def get_current_user_id(
    x_auth_token: Optional[str] = Depends(token_header),
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer),
    issuer: TokenIssuer = Depends(get_token_issuer),
) -> str:
    """Auth gate - identity from the x-auth-token (or Bearer) header"""
    token = x_auth_token or (credentials.credentials if credentials else None)
    user_id = resolve_identity(token, issuer)

    # Set user context for downstream logging
    set_user_id(user_id)
    return user_id


async def get_current_user(
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
) -> User:
    """Get current authenticated user record"""
    user = await user_service.get_by_id(db, user_id)
    if not user:
        raise UserNotFoundError(user_id)
    return user
