"""
MIT License
Copyright (c) 2025 DarekDGB

Identifier normalization for PromptPay.

Rules (v1):
- Phone: trim, drop '-' and '+', drop a leading country code ("66" or
  "0066") only when it is a real prefix, drop leading zeros, then require
  exactly 9 ASCII digits.
- National ID: drop whitespace and '-', then require exactly 13 ASCII digits.
- Fail-closed: anything else raises InvalidIdentifierFormatError.
"""

from __future__ import annotations

import re

from .errors import InvalidIdentifierFormatError
from .models import FIELD_WIDTHS, FieldKind, Identifier, NationalID, NormalizedField, PhoneNumber

_COUNTRY_CODE_RE = re.compile(r"^(?:00)?66")
_WHITESPACE_RE = re.compile(r"\s+")


def _require_digits(value: str, kind: FieldKind) -> str:
    width = FIELD_WIDTHS[kind]
    if len(value) != width or not (value.isascii() and value.isdigit()):
        label = "phone number" if kind is FieldKind.PHONE else "national ID"
        raise InvalidIdentifierFormatError(
            f"Invalid {label} format: expected {width} digits after sanitization"
        )
    return value


def _require_str(raw: object) -> str:
    if not isinstance(raw, str):
        raise InvalidIdentifierFormatError("identifier must be a string")
    return raw


def normalize_phone_number(raw: str) -> NormalizedField:
    s = _require_str(raw).strip().replace("-", "").replace("+", "")
    # A 9-digit body that happens to start with 66 is left alone.
    if len(s) > FIELD_WIDTHS[FieldKind.PHONE]:
        s = _COUNTRY_CODE_RE.sub("", s, count=1)
    s = s.lstrip("0")
    return NormalizedField(FieldKind.PHONE, _require_digits(s, FieldKind.PHONE))


def normalize_national_id(raw: str) -> NormalizedField:
    s = _WHITESPACE_RE.sub("", _require_str(raw)).replace("-", "")
    return NormalizedField(FieldKind.NATIONAL_ID, _require_digits(s, FieldKind.NATIONAL_ID))


def normalize(identifier: Identifier) -> NormalizedField:
    if isinstance(identifier, PhoneNumber):
        return normalize_phone_number(identifier.raw)
    if isinstance(identifier, NationalID):
        return normalize_national_id(identifier.raw)
    raise TypeError(f"unsupported identifier type: {type(identifier).__name__}")
