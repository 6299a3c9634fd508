# utils/messages.py
"""
Localized message catalog.

Catalogs live in utils/locales/messages.<lang>.json. The language comes from
the Accept-Language header ("ar-SA,ar;q=0.9" -> "ar"); languages without a
catalog resolve to the default one before any catalog is loaded.
"""
import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Dict, Optional

from config import DEFAULT_LANGUAGE

logger = logging.getLogger(__name__)

LOCALES_DIR = Path(__file__).resolve().parent / "locales"

AVAILABLE_LANGUAGES = frozenset(path.name.split(".")[1] for path in LOCALES_DIR.glob("messages.*.json"))


def base_language(accept_language: Optional[str]) -> str:
     if not accept_language:
          return DEFAULT_LANGUAGE
     first = accept_language.split(",")[0].split(";")[0].strip()
     lang = first.split("-")[0].lower()
     if lang not in AVAILABLE_LANGUAGES:
          return DEFAULT_LANGUAGE
     return lang


@lru_cache(maxsize=None)
def load_messages(lang: str) -> Dict[str, str]:
     """Keyed by catalog language only; callers go through base_language."""
     if lang not in AVAILABLE_LANGUAGES:
          if lang != DEFAULT_LANGUAGE:
               return load_messages(DEFAULT_LANGUAGE)
          logger.warning("No message catalog for default language %s", DEFAULT_LANGUAGE)
          return {}
     with (LOCALES_DIR / f"messages.{lang}.json").open(encoding="utf-8") as fh:
          return json.load(fh)


def get_message(key: str, accept_language: Optional[str] = None) -> str:
     """Resolve a message key; falls back to the default language, then to the key itself."""
     lang = base_language(accept_language)
     messages = load_messages(lang)
     if key in messages:
          return messages[key]
     return load_messages(DEFAULT_LANGUAGE).get(key, key)
