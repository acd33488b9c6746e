from datetime import datetime, timedelta
from typing import Optional
from jose import JWTError, jwt
from passlib.context import CryptContext
from fastapi import HTTPException, status
from pydantic import BaseModel

from .config import settings

# Password hashing
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)

class TokenPayload(BaseModel):
    email: Optional[str] = None
    exp: Optional[int] = None

# Password utilities
def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)

def get_password_hash(password: str) -> str:
    """Generate password hash."""
    return pwd_context.hash(password)

# JWT utilities
def create_access_token(
    email: str,
    expires_delta: Optional[timedelta] = None,
    secret_key: Optional[str] = None,
) -> str:
    """Create a signed JWT carrying the practitioner's email."""
    if expires_delta:
        expire = datetime.utcnow() + expires_delta
    else:
        expire = datetime.utcnow() + timedelta(
            days=settings.ACCESS_TOKEN_EXPIRE_DAYS
        )

    to_encode = {"email": email, "exp": expire}

    return jwt.encode(
        to_encode,
        secret_key or settings.JWT_SECRET,
        algorithm=settings.ALGORITHM
    )

def verify_token(token: str, secret_key: Optional[str] = None) -> Optional[TokenPayload]:
    """Verify and decode JWT token.

    Returns None when the signature is wrong, the token has expired or it
    carries no email claim.
    """
    try:
        payload = jwt.decode(
            token,
            secret_key or settings.JWT_SECRET,
            algorithms=[settings.ALGORITHM]
        )
    except JWTError:
        return None

    token_payload = TokenPayload(**payload)
    if not token_payload.email:
        return None
    return token_payload

def parse_bearer_header(authorization: Optional[str]) -> str:
    """Extract the token from an ``Authorization: Bearer <token>`` header."""
    if not authorization:
        raise AuthenticationError("Falta Authorization header")

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer":
        raise AuthenticationError("Token inválido o expirado")
    token = token.strip()
    if not token:
        raise AuthenticationError("Token ausente")
    return token

# Security exceptions
class AuthenticationError(HTTPException):
    def __init__(self, detail: str = "Could not validate credentials"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )
