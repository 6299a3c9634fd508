# security.py
"""
Password hashing and access tokens.

bcrypt through passlib, HS256 JWTs through python-jose. Token payloads carry
the user id, email and role; the role is informational only, every request
reloads the user from the database.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt
from passlib.context import CryptContext

from config import JWT_ALGORITHM, JWT_EXPIRE_HOURS, JWT_SECRET

# Bcrypt
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
     return pwd_context.hash(password)


def verify_password(password: str, hashed: str) -> bool:
     return pwd_context.verify(password, hashed)


def create_access_token(user_id: int, email: str, role: str, expires_in: Optional[timedelta] = None) -> str:
     expire = datetime.now(timezone.utc) + (expires_in or timedelta(hours=JWT_EXPIRE_HOURS))
     payload = {"id": user_id, "email": email, "role": role, "exp": expire}
     return jwt.encode(payload, JWT_SECRET, algorithm=JWT_ALGORITHM)


def decode_access_token(token: str) -> Optional[dict]:
     """Return the token payload, or None when the signature or expiry check fails."""
     try:
          return jwt.decode(token, JWT_SECRET, algorithms=[JWT_ALGORITHM])
     except JWTError:
          return None
