# server/core/security.py

import os
import logging
from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from dotenv import load_dotenv
from jose import JWTError, jwt
from passlib.context import CryptContext


load_dotenv()

logger = logging.getLogger(__name__)


# -------------------------------
# Credential Hasher
# -------------------------------

class PasswordHasher(ABC):
    """
    One-way password hashing. Implementations must salt every digest
    and compare in constant time.
    """

    @abstractmethod
    def hash(self, raw: str) -> str:
        ...

    @abstractmethod
    def verify(self, raw: str, digest: str) -> bool:
        ...


class BcryptPasswordHasher(PasswordHasher):
    def __init__(self, rounds: int = 12):
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    def hash(self, raw: str) -> str:
        return self._context.hash(raw)

    def verify(self, raw: str, digest: str) -> bool:
        try:
            return self._context.verify(raw, digest)
        except (ValueError, TypeError):
            # unrecognized or malformed digest
            return False


# -------------------------------
# Session Issuer
# -------------------------------

class TokenIssuer(ABC):
    """
    Issues bearer tokens carrying a username and an expiry.
    validate() returns the username, or None when the token is
    malformed, tampered with or expired.
    """

    @abstractmethod
    def issue(self, username: str) -> str:
        ...

    @abstractmethod
    def validate(self, token: str) -> str | None:
        ...


class JwtTokenIssuer(TokenIssuer):
    def __init__(self, secret_key: str, algorithm: str = "HS256", expire_minutes: int = 60):
        if not secret_key:
            raise ValueError("secret_key must not be empty")
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expire_delta = timedelta(minutes=expire_minutes)

    def issue(self, username: str) -> str:
        expire = datetime.now(timezone.utc) + self.expire_delta
        to_encode = {"sub": username, "exp": expire}
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def validate(self, token: str) -> str | None:
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError as e:
            logger.debug("Rejected token: %s", e)
            return None
        username = payload.get("sub")
        if not isinstance(username, str) or not username:
            return None
        return username


# -------------------------------
# Configured instances
# -------------------------------

@lru_cache
def get_password_hasher() -> PasswordHasher:
    return BcryptPasswordHasher(rounds=int(os.getenv("BCRYPT_ROUNDS", "12")))


@lru_cache
def get_token_issuer() -> TokenIssuer:
    secret_key = os.getenv("JWT_SECRET_KEY")
    if not secret_key:
        raise RuntimeError("JWT_SECRET_KEY is not set")
    return JwtTokenIssuer(
        secret_key=secret_key,
        algorithm=os.getenv("JWT_ALGORITHM", "HS256"),
        expire_minutes=int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60")),
    )
