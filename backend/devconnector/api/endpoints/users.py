from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from devconnector.core.database import get_db
from devconnector.core.exceptions import UserAlreadyExistsError
from devconnector.core.logging_config import logger
from devconnector.core.security import TokenIssuer, get_token_issuer
from devconnector.core.validation import validate_fields
from devconnector.schemas.auth import REGISTER_CHECKS, TokenResponse, UserRegister
from devconnector.services.user_service import user_service

router = APIRouter()


@router.post("", response_model=TokenResponse)
async def register(
    request: Request,
    user_data: UserRegister,
    db: AsyncSession = Depends(get_db),
    issuer: TokenIssuer = Depends(get_token_issuer)
):
    """Register a user and return a token for them"""
    validate_fields(user_data.model_dump(), REGISTER_CHECKS)
    client_ip = request.client.host if request.client else "unknown"

    try:
        user = await user_service.create_user(
            db,
            name=user_data.name,
            email=user_data.email,
            password=user_data.password,
        )
    except UserAlreadyExistsError:
        logger.log_auth_event(
            event="register",
            success=False,
            user_email=user_data.email,
            reason="Email already registered",
            client_ip=client_ip
        )
        raise

    logger.log_auth_event(
        event="register",
        success=True,
        user_email=user.email,
        client_ip=client_ip
    )

    return {"token": issuer.issue(user.id)}
