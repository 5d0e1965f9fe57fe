"""Romanian phone number normalization and validation.

Canonical form is ``+40`` followed by nine digits. ``normalize_phone`` never
fails: when no rule applies it hands back the original input, so callers must
check ``is_valid_phone`` separately.
"""
from __future__ import annotations
import re
from typing import Optional

COUNTRY_PREFIX = "+40"
INVALID_PHONE_MESSAGE = "Numărul de telefon nu este valid. Folosește formatul +40712345678"

_CANONICAL_RE = re.compile(r"^\+40[0-9]{9}$")
_STRIP_RE = re.compile(r"[^0-9+]")


def normalize_phone(raw: Optional[str]) -> str:
    if not raw:
        return ""
    cleaned = _STRIP_RE.sub("", raw)
    if cleaned.startswith(COUNTRY_PREFIX):
        return cleaned
    if cleaned.startswith("+"):
        cleaned = cleaned[1:]
    if cleaned and "+" not in cleaned:
        # Rule order matters: 0XXXXXXXXX, then 40XXXXXXXXX, then bare 9 digits.
        if cleaned.startswith("0") and len(cleaned) == 10:
            return COUNTRY_PREFIX + cleaned[1:]
        if cleaned.startswith("40") and len(cleaned) == 11:
            return "+" + cleaned
        if len(cleaned) == 9:
            return COUNTRY_PREFIX + cleaned
    return raw


def is_valid_phone(raw: Optional[str]) -> bool:
    return bool(_CANONICAL_RE.match(normalize_phone(raw)))


def autocomplete_phone(value: Optional[str]) -> str:
    """As-you-type completion: only touches values typed without a leading +."""
    if not value or value.startswith("+"):
        return value or ""
    return normalize_phone(value)


def validation_message(raw: Optional[str]) -> Optional[str]:
    if not raw or is_valid_phone(raw):
        return None
    return INVALID_PHONE_MESSAGE


def whatsapp_number(raw: Optional[str]) -> str:
    """Digits-only number for wa.me links.

    Numbers that fail canonical validation still get the country code glued on,
    the way tickets were shared before numbers were validated at creation.
    """
    if not raw:
        return ""
    normalized = normalize_phone(raw)
    if _CANONICAL_RE.match(normalized):
        return normalized[1:]
    digits = re.sub(r"[^0-9]", "", raw)
    if not digits:
        return ""
    if digits.startswith("0"):
        return "40" + digits[1:]
    if not digits.startswith("40"):
        return "40" + digits
    return digits
