# utils/email.py
import logging

import requests

from config import BREVO_API_KEY, EMAIL_DELIVERY_ENABLED, EMAIL_SENDER

logger = logging.getLogger(__name__)

BREVO_URL = "https://api.brevo.com/v3/smtp/email"


class EmailDeliveryError(Exception):
     pass


def send_confirmation_email(to_email: str, fullname: str, code: str) -> bool:
     """
     Send the registration confirmation code through Brevo.

     Returns False when delivery is disabled (local runs, tests); raises
     EmailDeliveryError when Brevo rejects the request.
     """
     if not EMAIL_DELIVERY_ENABLED:
          logger.info("Email delivery disabled; confirmation code for %s not sent", to_email)
          return False
     if not BREVO_API_KEY:
          raise EmailDeliveryError("BREVO_API_KEY is not set")

     try:
          response = requests.post(
               BREVO_URL,
               headers={
                    "api-key": BREVO_API_KEY,
                    "Content-Type": "application/json",
               },
               json={
                    "sender": {"name": "HalaDesk", "email": EMAIL_SENDER},
                    "to": [{"email": to_email, "name": fullname}],
                    "subject": "Confirm your HalaDesk account",
                    "htmlContent": f"""
                         <h2>Welcome to HalaDesk, {fullname}</h2>
                         <p>Your confirmation code is:</p>
                         <h1 style="color:#F28D35">{code}</h1>
                         <p>This code expires in 1 hour.</p>
                    """,
               },
               timeout=10,
          )
     except requests.RequestException as exc:
          raise EmailDeliveryError(f"Brevo request failed: {exc}") from exc

     if response.status_code not in (200, 201):
          raise EmailDeliveryError(f"Brevo error: {response.text}")
     return True
