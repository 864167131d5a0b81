from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any
from jose import JWTError, jwt
import bcrypt

from devconnector.core.config import Settings, settings
from devconnector.core.exceptions import InvalidTokenError

ACCESS_TOKEN_TYPE = "access"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password - a mismatch or a malformed hash is False, never an exception"""
    if not plain_password or not hashed_password:
        return False
    # Bcrypt has a 72 byte limit - truncate password if necessary
    password_bytes = plain_password.encode('utf-8')[:72]
    try:
        return bcrypt.checkpw(password_bytes, hashed_password.encode('utf-8'))
    except (ValueError, TypeError):
        return False


def get_password_hash(password: str, rounds: Optional[int] = None) -> str:
    """Hash password with configurable rounds (BCRYPT_ROUNDS in .env)"""
    # Bcrypt has a 72 byte limit - truncate password if necessary
    password_bytes = password.encode('utf-8')[:72]
    hashed = bcrypt.hashpw(password_bytes, bcrypt.gensalt(rounds=rounds or settings.BCRYPT_ROUNDS))
    return hashed.decode('utf-8')


class TokenIssuer:
    """
    Signs and verifies the stateless access tokens.

    The token embeds the user id (``sub``) and an absolute expiry (``exp``).
    There is no server-side session store, so an issued token stays valid
    until it expires.
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256", expires_in: int = 360000):
        if not secret_key:
            raise ValueError("Token signing secret must not be empty")
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expires_in = expires_in

    @classmethod
    def from_settings(cls, config: Settings) -> "TokenIssuer":
        return cls(
            secret_key=config.JWT_SECRET_KEY,
            algorithm=config.JWT_ALGORITHM,
            expires_in=config.ACCESS_TOKEN_EXPIRE_SECONDS,
        )

    def issue(self, user_id: str, expires_in: Optional[int] = None) -> str:
        """Create a signed access token for ``user_id``"""
        now = datetime.now(timezone.utc)
        lifetime = self.expires_in if expires_in is None else expires_in
        to_encode = {
            "sub": str(user_id),
            "iat": now,
            "exp": now + timedelta(seconds=lifetime),
            "type": ACCESS_TOKEN_TYPE,
        }
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def decode(self, token: str) -> Dict[str, Any]:
        """Decode and check a token, raising InvalidTokenError on any failure"""
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError:
            raise InvalidTokenError()

        if payload.get("type") != ACCESS_TOKEN_TYPE:
            raise InvalidTokenError()

        user_id = payload.get("sub")
        if not isinstance(user_id, str) or not user_id:
            raise InvalidTokenError()

        return payload

    def verify(self, token: str) -> Optional[str]:
        """Return the embedded user id, or None if the token is not valid"""
        if not token:
            return None
        try:
            return self.decode(token)["sub"]
        except InvalidTokenError:
            return None


token_issuer = TokenIssuer.from_settings(settings)


def get_token_issuer() -> TokenIssuer:
    """FastAPI dependency - overridable in tests"""
    return token_issuer
