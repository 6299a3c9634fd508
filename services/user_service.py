# services/user_service.py
"""
User Service - registration, authentication, profile and admin management.
"""
import logging
import secrets
from datetime import timedelta
from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from config import CONFIRMATION_TOKEN_TTL_MINUTES
from errors import (
     AlreadyActive,
     AlreadyInactive,
     Conflict,
     DuplicateEmail,
     DuplicateIdNumber,
     DuplicatePhone,
     Forbidden,
     NotFound,
     ValidationFailed,
)
from models import Building, EmailConfirmationToken, RecordStatus, User, UserRole, Visit, utcnow
from security import create_access_token, hash_password, verify_password
from utils.email import EmailDeliveryError, send_confirmation_email

logger = logging.getLogger(__name__)

PROFILE_FIELDS = ("fullname", "email", "phone", "id_number", "city", "address")
ADMIN_FIELDS = PROFILE_FIELDS + ("role", "status", "email_confirmed", "phone_confirmed")


def _confirmation_code() -> str:
     return f"{secrets.randbelow(1_000_000):06d}"


class UserService:
     """Service class for user accounts."""

     @staticmethod
     def ensure_unique_identity(
          db: Session,
          email: Optional[str] = None,
          phone: Optional[str] = None,
          id_number: Optional[str] = None,
          exclude_user_id: Optional[int] = None,
     ) -> None:
          """
          Email, phone and ID number are unique across every role.

          Raises:
               DuplicateEmail / DuplicatePhone / DuplicateIdNumber
          """
          checks = (
               (User.email, email, DuplicateEmail),
               (User.phone, phone, DuplicatePhone),
               (User.id_number, id_number, DuplicateIdNumber),
          )
          for column, value, error in checks:
               if value is None:
                    continue
               query = db.query(User.id).filter(column == value)
               if exclude_user_id is not None:
                    query = query.filter(User.id != exclude_user_id)
               if query.first() is not None:
                    raise error()

     @staticmethod
     def get_user(db: Session, user_id: int) -> User:
          user = db.get(User, user_id)
          if user is None:
               raise NotFound("user_not_found")
          return user

     @staticmethod
     def list_users(db: Session, role: Optional[UserRole] = None) -> List[User]:
          query = db.query(User)
          if role is not None:
               query = query.filter(User.role == role)
          return query.order_by(User.id).all()

     # ------------------------------------------------------------------
     # Registration and login
     # ------------------------------------------------------------------

     @staticmethod
     def register_user(db: Session, data: dict) -> Tuple[User, EmailConfirmationToken]:
          """
          Self-registration. The account stays inactive until the emailed
          code is confirmed.
          """
          UserService.ensure_unique_identity(
               db, email=data["email"], phone=data["phone"], id_number=data["id_number"]
          )
          user = User(
               fullname=data["fullname"],
               email=data["email"],
               password=hash_password(data["password"]),
               phone=data["phone"],
               id_number=data["id_number"],
               city=data.get("city"),
               address=data.get("address"),
               role=UserRole.USER,
               status=RecordStatus.INACTIVE,
               email_confirmed=False,
          )
          db.add(user)
          db.flush()

          token = EmailConfirmationToken(
               user_id=user.id,
               token=_confirmation_code(),
               expires_at=utcnow() + timedelta(minutes=CONFIRMATION_TOKEN_TTL_MINUTES),
          )
          db.add(token)
          db.flush()

          try:
               send_confirmation_email(user.email, user.fullname, token.token)
          except EmailDeliveryError:
               logger.warning("Confirmation email to %s could not be delivered", user.email, exc_info=True)

          logger.info("User registered id=%s", user.id)
          return user, token

     @staticmethod
     def confirm_email(db: Session, code: str) -> User:
          token = db.query(EmailConfirmationToken).filter(EmailConfirmationToken.token == code).first()
          if token is None:
               raise ValidationFailed("invalid_confirmation_token")
          if token.expires_at < utcnow():
               db.delete(token)
               db.flush()
               raise ValidationFailed("confirmation_token_expired")

          user = UserService.get_user(db, token.user_id)
          user.email_confirmed = True
          user.status = RecordStatus.ACTIVE
          db.delete(token)
          db.flush()
          logger.info("Email confirmed for user id=%s", user.id)
          return user

     @staticmethod
     def authenticate(db: Session, email: str, password: str) -> Tuple[User, str]:
          """
          Returns:
               The user and a signed access token

          Raises:
               ValidationFailed: invalid_credentials / email_not_confirmed
          """
          user = db.query(User).filter(User.email == email).first()
          if user is None or not verify_password(password, user.password):
               logger.warning("Failed login for %s", email)
               raise ValidationFailed("invalid_credentials")
          if not user.email_confirmed:
               raise ValidationFailed("email_not_confirmed")

          token = create_access_token(user.id, user.email, user.role.value)
          logger.info("User logged in id=%s", user.id)
          return user, token

     # ------------------------------------------------------------------
     # Profile
     # ------------------------------------------------------------------

     @staticmethod
     def update_profile(db: Session, user: User, changes: dict) -> User:
          changes = {key: value for key, value in changes.items() if key in PROFILE_FIELDS and value is not None}
          UserService.ensure_unique_identity(
               db,
               email=changes.get("email"),
               phone=changes.get("phone"),
               id_number=changes.get("id_number"),
               exclude_user_id=user.id,
          )
          for key, value in changes.items():
               setattr(user, key, value)
          db.flush()
          return user

     @staticmethod
     def change_password(
          db: Session, user: User, current_password: str, new_password: str, confirm_password: str
     ) -> User:
          if not verify_password(current_password, user.password):
               raise ValidationFailed("invalid_current_password")
          if new_password != confirm_password:
               raise ValidationFailed("passwords_do_not_match")
          user.password = hash_password(new_password)
          db.flush()
          logger.info("Password changed for user id=%s", user.id)
          return user

     # ------------------------------------------------------------------
     # Admin
     # ------------------------------------------------------------------

     @staticmethod
     def create_user(db: Session, data: dict) -> User:
          """Admin-created accounts are active and confirmed immediately."""
          UserService.ensure_unique_identity(
               db, email=data["email"], phone=data["phone"], id_number=data["id_number"]
          )
          user = User(
               fullname=data["fullname"],
               email=data["email"],
               password=hash_password(data["password"]),
               phone=data["phone"],
               id_number=data["id_number"],
               city=data.get("city"),
               address=data.get("address"),
               role=data.get("role") or UserRole.USER,
               status=data.get("status") or RecordStatus.ACTIVE,
               email_confirmed=True,
          )
          db.add(user)
          db.flush()
          logger.info("User created by admin id=%s role=%s", user.id, user.role.value)
          return user

     @staticmethod
     def update_user(db: Session, user: User, changes: dict) -> User:
          password = changes.get("password")
          changes = {key: value for key, value in changes.items() if key in ADMIN_FIELDS and value is not None}
          UserService.ensure_unique_identity(
               db,
               email=changes.get("email"),
               phone=changes.get("phone"),
               id_number=changes.get("id_number"),
               exclude_user_id=user.id,
          )
          for key, value in changes.items():
               setattr(user, key, value)
          if password:
               user.password = hash_password(password)
          db.flush()
          return user

     @staticmethod
     def delete_user(db: Session, user: User, requester: User) -> None:
          if user.id == requester.id:
               raise Forbidden("cannot_delete_self")
          owns_buildings = db.query(Building.id).filter(Building.user_id == user.id).first() is not None
          recorded_visits = db.query(Visit.id).filter(Visit.user_id == user.id).first() is not None
          if owns_buildings or recorded_visits:
               raise Conflict("user_in_use")
          # Doormen outlive the account that registered them.
          db.query(User).filter(User.registrar_id == user.id).update(
               {User.registrar_id: None}, synchronize_session=False
          )
          db.delete(user)
          db.flush()
          logger.info("User deleted id=%s by admin id=%s", user.id, requester.id)

     @staticmethod
     def set_status(db: Session, user: User, status: RecordStatus) -> User:
          if user.status == status:
               if status == RecordStatus.ACTIVE:
                    raise AlreadyActive("user_already_active")
               raise AlreadyInactive("user_already_inactive")
          user.status = status
          db.flush()
          return user
