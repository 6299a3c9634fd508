# utils/qr.py
"""
Building QR codes.

The identifier is generated before the building row is inserted (it is a
unique column); the image encodes the building id, name and identifier, so
it is rendered after the insert has assigned an id.
"""
import base64
import json
import secrets

import qrcode
import qrcode.constants
from qrcode.image.svg import SvgPathImage

IDENTIFIER_PREFIX = "BLD_"


def new_building_identifier() -> str:
     return f"{IDENTIFIER_PREFIX}{secrets.token_hex(8)}"


def render_building_qr(building_id: int, name: str, identifier: str) -> str:
     """Return the QR code as an SVG data URL."""
     payload = json.dumps({"id": building_id, "name": name, "identifier": identifier})

     qr = qrcode.QRCode(
          error_correction=qrcode.constants.ERROR_CORRECT_H,
          border=1,
          box_size=10,
          image_factory=SvgPathImage,
     )
     qr.add_data(payload)
     qr.make(fit=True)
     svg = qr.make_image().to_string()
     if isinstance(svg, str):
          svg = svg.encode("utf-8")
     return "data:image/svg+xml;base64," + base64.b64encode(svg).decode("ascii")
