# dependencies.py
"""
Request dependencies: the authenticated user and role gates.
"""
import logging
from typing import Optional

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from database import get_session
from errors import AuthenticationFailed, Forbidden
from models import User, UserRole
from security import decode_access_token
from services.access_control import ensure_role

logger = logging.getLogger(__name__)


def get_language(request: Request) -> Optional[str]:
     return request.headers.get("Accept-Language")


def get_current_user(request: Request, db: Session = Depends(get_session)) -> User:
     """
     Resolve the bearer token to a User.

     Raises:
          AuthenticationFailed: missing, invalid or expired token, or unknown user (401)
          Forbidden: the account is inactive (403)
     """
     auth = request.headers.get("Authorization")
     if not auth or not auth.startswith("Bearer "):
          raise AuthenticationFailed("no_token")
     token = auth.split(" ", 1)[1].strip()

     payload = decode_access_token(token)
     if payload is None or payload.get("id") is None:
          logger.warning("Rejected bearer token for %s %s", request.method, request.url.path)
          raise AuthenticationFailed("invalid_token")

     user = db.get(User, payload["id"])
     if user is None:
          raise AuthenticationFailed("user_not_found")
     if not user.is_active:
          raise Forbidden("account_inactive")
     return user


def require_roles(*roles: UserRole):
     """Dependency factory: the current user must hold one of `roles`."""

     def dependency(user: User = Depends(get_current_user)) -> User:
          ensure_role(user, *roles)
          return user

     return dependency


require_admin = require_roles(UserRole.ADMIN)
