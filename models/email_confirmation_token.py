from sqlalchemy import Column, DateTime, ForeignKey, Integer, String

from .base import Base, TimestampMixin


class EmailConfirmationToken(TimestampMixin, Base):
     """Six-digit code mailed at registration; consumed by the confirm endpoint."""
     __tablename__ = "email_confirmation_tokens"

     id = Column(Integer, primary_key=True, autoincrement=True)
     user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
     token = Column(String(16), unique=True, nullable=False, index=True)
     expires_at = Column(DateTime, nullable=False)

     def __repr__(self):
          return f"<EmailConfirmationToken(id={self.id}, user_id={self.user_id})>"
