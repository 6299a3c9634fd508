# errors.py
"""
Business-rule errors raised by the service layer.

Each error carries a message key from the localized catalog and the HTTP
status it maps to. Routers never build error responses by hand: the handlers
registered in main.py translate these into `{"message": ...}` bodies.
"""
from typing import Any, List, Optional


class AppError(Exception):
     status_code = 500
     message_key = "internal_server_error"

     def __init__(self, message_key: Optional[str] = None, errors: Optional[List[Any]] = None):
          if message_key is not None:
               self.message_key = message_key
          self.errors = errors or []
          super().__init__(self.message_key)


class ValidationFailed(AppError):
     status_code = 400
     message_key = "validation_failed"


class AuthenticationFailed(AppError):
     status_code = 401
     message_key = "unauthorized"


class Forbidden(AppError):
     status_code = 403
     message_key = "not_authorized"


class NotFound(AppError):
     status_code = 404
     message_key = "not_found"


class Conflict(AppError):
     """Uniqueness or no-op state transition violations."""
     status_code = 400
     message_key = "conflict"


class DuplicateEmail(Conflict):
     message_key = "email_in_use"


class DuplicatePhone(Conflict):
     message_key = "phone_in_use"


class DuplicateIdNumber(Conflict):
     message_key = "id_number_in_use"


class DuplicateVisit(Conflict):
     message_key = "visit_already_exists"


class AlreadyAssigned(Conflict):
     message_key = "doorman_already_assigned"


class AlreadyActive(Conflict):
     message_key = "already_active"


class AlreadyInactive(Conflict):
     message_key = "already_inactive"


class EntitlementDenied(AppError):
     status_code = 403
     message_key = "not_authorized"


class NoActivePlan(EntitlementDenied):
     message_key = "no_active_plan"


class CreditExceeded(EntitlementDenied):
     message_key = "credit_exceeded"
