"""
Credentials and bearer tokens for staff accounts.

Passwords are bcrypt hashes. An access token names the account and the
role it was issued for; a token stops being accepted as soon as the
account's role changes (see core.dependencies).
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt
from passlib.context import CryptContext

from database.models import User, UserRole
from .config import settings


pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

TOKEN_TYPE = "access"


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, password_hash: str) -> bool:
    return pwd_context.verify(plain_password, password_hash)


class TokenData:
    """Identity carried by an access token: account id and issued role."""

    def __init__(self, user_id: int, role: UserRole):
        self.user_id = user_id
        self.role = role

    @classmethod
    def for_user(cls, user: User) -> "TokenData":
        return cls(user_id=user.id, role=user.role)

    def matches(self, user: User) -> bool:
        """True while the account still has the role the token was issued for."""
        return user.id == self.user_id and user.role == self.role

    def to_claims(self, expires_delta: Optional[timedelta] = None) -> dict:
        lifetime = expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
        return {
            "sub": str(self.user_id),
            "role": self.role.value,
            "type": TOKEN_TYPE,
            "exp": datetime.now(timezone.utc) + lifetime,
        }

    @classmethod
    def from_claims(cls, claims: dict) -> Optional["TokenData"]:
        """Parse decoded claims; None when a claim is missing or malformed."""
        if claims.get("type") != TOKEN_TYPE:
            return None
        try:
            return cls(user_id=int(claims["sub"]), role=UserRole(claims["role"]))
        except (KeyError, TypeError, ValueError):
            return None


def create_access_token(user: User, expires_delta: Optional[timedelta] = None) -> str:
    claims = TokenData.for_user(user).to_claims(expires_delta)
    return jwt.encode(claims, settings.secret_key, algorithm=settings.algorithm)


def read_access_token(token: str) -> Optional[TokenData]:
    """
    Verify signature and expiry and return the token identity.
    Any failure (bad signature, expired, wrong type, bad claims) is None.
    """
    try:
        claims = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError:
        return None
    return TokenData.from_claims(claims)
