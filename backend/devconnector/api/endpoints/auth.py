from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from devconnector.core.database import get_db
from devconnector.core.exceptions import InvalidCredentialsError, UserNotFoundError
from devconnector.core.logging_config import logger, set_user_id
from devconnector.core.security import TokenIssuer, get_token_issuer, verify_password
from devconnector.core.validation import validate_fields
from devconnector.modules.auth.dependencies import get_current_user_id
from devconnector.schemas.auth import LOGIN_CHECKS, TokenResponse, UserLogin, UserResponse
from devconnector.services.user_service import user_service

router = APIRouter()


@router.get("", response_model=UserResponse)
async def get_authenticated_user(
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    """Current user, without the password hash"""
    user = await user_service.get_by_id(db, user_id)
    if not user:
        raise UserNotFoundError(user_id)
    return user


@router.post("", response_model=TokenResponse)
async def login(
    request: Request,
    credentials: UserLogin,
    db: AsyncSession = Depends(get_db),
    issuer: TokenIssuer = Depends(get_token_issuer)
):
    """Authenticate with email/password and get a token"""
    validate_fields(credentials.model_dump(), LOGIN_CHECKS)
    client_ip = request.client.host if request.client else "unknown"

    user = await user_service.get_by_email(db, credentials.email)
    if not user:
        logger.log_auth_event(
            event="login",
            success=False,
            user_email=credentials.email,
            reason="Unknown email",
            client_ip=client_ip
        )
        raise InvalidCredentialsError()

    if not verify_password(credentials.password, user.hashed_password):
        logger.log_auth_event(
            event="login",
            success=False,
            user_email=credentials.email,
            reason="Password mismatch",
            client_ip=client_ip
        )
        raise InvalidCredentialsError()

    set_user_id(str(user.id))
    token = issuer.issue(user.id)

    logger.log_auth_event(
        event="login",
        success=True,
        user_email=user.email,
        client_ip=client_ip
    )

    return {"token": token}
