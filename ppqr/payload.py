"""
MIT License
Copyright (c) 2025 DarekDGB

PromptPay payload assembly and parsing.

This module is the single source of truth for the payload template:

    00 02 "01"                  payload format indicator
    01 02 "11"                  point of initiation (static)
    29 37 00 16 <AID>           merchant account information
          01|02 13 <proxy>      phone ("0066" + 9 digits) or national ID
    58 02 "TH"                  country code
    53 03 "764"                 currency (THB)
    54 09 <amount>              transaction amount, "IIIIII.FF"
    63 04 <crc>                 CRC-16, see ppqr/crc.py

Encoding raises on bad input (fail-closed). `verify_payload` never raises.
"""

from __future__ import annotations

import logging

from .amount import AMOUNT_WIDTH, AmountLike, format_amount
from .crc import append_checksum, checksum
from .errors import InvalidPayloadError, PromptPayError
from .identifiers import normalize
from .models import (
    PROXY_PREFIXES,
    PROXY_TAGS,
    DecodedPayload,
    FieldKind,
    Identifier,
    NormalizedField,
)
from .tlv import format_field, split_fields

logger = logging.getLogger(__name__)

# These constants are also imported by tests.
PAYLOAD_FORMAT_INDICATOR = "01"
POINT_OF_INITIATION_STATIC = "11"
PROMPTPAY_AID = "A000000677010111"
COUNTRY_CODE = "TH"
CURRENCY_THB = "764"

TAG_PAYLOAD_FORMAT = "00"
TAG_POINT_OF_INITIATION = "01"
TAG_MERCHANT_ACCOUNT = "29"
TAG_COUNTRY = "58"
TAG_CURRENCY = "53"
TAG_AMOUNT = "54"
TAG_CRC = "63"

# Open CRC field: tag and length, value appended by ppqr.crc.
CRC_MARKER = TAG_CRC + "04"

_AID_SUBTAG = "00"


def _require_canonical_amount(value: str) -> str:
    if not isinstance(value, str) or len(value) != AMOUNT_WIDTH:
        raise InvalidPayloadError(f"formatted amount must be {AMOUNT_WIDTH} chars")
    try:
        canonical = format_amount(value)
    except PromptPayError as exc:
        raise InvalidPayloadError(f"invalid amount field: {exc.reason}") from exc
    if canonical != value:
        raise InvalidPayloadError(f"amount is not in canonical form: {value!r}")
    return value


def _merchant_account_info(identifier: NormalizedField) -> str:
    inner = format_field(_AID_SUBTAG, PROMPTPAY_AID) + identifier.canonical
    return format_field(TAG_MERCHANT_ACCOUNT, inner)


def assemble(normalized_identifier: NormalizedField, formatted_amount: str) -> str:
    """
    Build the payload up to and including the open CRC marker ("6304").
    """
    if not isinstance(normalized_identifier, NormalizedField) or not normalized_identifier.is_identifier:
        raise InvalidPayloadError("assemble() needs a normalized phone or national ID field")
    _require_canonical_amount(formatted_amount)

    return "".join(
        [
            format_field(TAG_PAYLOAD_FORMAT, PAYLOAD_FORMAT_INDICATOR),
            format_field(TAG_POINT_OF_INITIATION, POINT_OF_INITIATION_STATIC),
            _merchant_account_info(normalized_identifier),
            format_field(TAG_COUNTRY, COUNTRY_CODE),
            format_field(TAG_CURRENCY, CURRENCY_THB),
            format_field(TAG_AMOUNT, formatted_amount),
            CRC_MARKER,
        ]
    )


def generate_payload(identifier: Identifier, amount: AmountLike) -> str:
    """
    Normalize, format, assemble and checksum in one call.

    Nothing is assembled unless both the identifier and the amount are valid.
    """
    field = normalize(identifier)
    formatted_amount = format_amount(amount)
    payload = append_checksum(assemble(field, formatted_amount))
    logger.debug("generated PromptPay payload kind=%s length=%d", field.kind.value, len(payload))
    return payload


# ---------------------------------------------------------------------------
# Parsing / verification
# ---------------------------------------------------------------------------


def _expect(fields: list, index: int, tag: str, value: str | None = None) -> str:
    if index >= len(fields):
        raise InvalidPayloadError(f"missing field {tag}")
    got_tag, got_value = fields[index]
    if got_tag != tag:
        raise InvalidPayloadError(f"expected field {tag} at position {index}, got {got_tag}")
    if value is not None and got_value != value:
        raise InvalidPayloadError(f"field {tag} must be {value!r}, got {got_value!r}")
    return got_value


def _parse_identifier(merchant_info: str) -> NormalizedField:
    sub = split_fields(merchant_info)
    if len(sub) != 2:
        raise InvalidPayloadError("merchant account information must hold AID and one proxy")
    _expect(sub, 0, _AID_SUBTAG, PROMPTPAY_AID)

    proxy_tag, proxy_value = sub[1]
    for kind, tag in PROXY_TAGS.items():
        if tag != proxy_tag:
            continue
        prefix = PROXY_PREFIXES[kind]
        if not proxy_value.startswith(prefix):
            raise InvalidPayloadError(f"proxy {proxy_tag} must start with {prefix!r}")
        body = proxy_value[len(prefix) :]
        if not (body.isascii() and body.isdigit()):
            raise InvalidPayloadError(f"proxy {proxy_tag} must be numeric")
        try:
            return NormalizedField(kind, body)
        except ValueError as exc:
            raise InvalidPayloadError(str(exc)) from exc
    raise InvalidPayloadError(f"unsupported proxy type {proxy_tag!r}")


def _parse_amount(value: str) -> NormalizedField:
    return NormalizedField(FieldKind.AMOUNT, _require_canonical_amount(value))


def parse_payload(payload: str) -> DecodedPayload:
    """
    Decode a payload produced by generate_payload().

    The checksum is verified first; hex digits are compared case-insensitively.
    Raises InvalidPayloadError on any deviation from the template.
    """
    if not isinstance(payload, str):
        raise InvalidPayloadError("payload must be a string")
    if not payload.isascii():
        raise InvalidPayloadError("payload must be ASCII")

    body, crc = payload[:-4], payload[-4:]
    if len(payload) < 8 or not body.endswith(CRC_MARKER):
        raise InvalidPayloadError("payload must end with the CRC field")
    if crc.upper() != checksum(body):
        raise InvalidPayloadError("checksum mismatch")

    fields = split_fields(body[: -len(CRC_MARKER)])
    if len(fields) != 6:
        raise InvalidPayloadError(f"expected 6 fields before CRC, got {len(fields)}")

    _expect(fields, 0, TAG_PAYLOAD_FORMAT, PAYLOAD_FORMAT_INDICATOR)
    _expect(fields, 1, TAG_POINT_OF_INITIATION, POINT_OF_INITIATION_STATIC)
    identifier = _parse_identifier(_expect(fields, 2, TAG_MERCHANT_ACCOUNT))
    _expect(fields, 3, TAG_COUNTRY, COUNTRY_CODE)
    _expect(fields, 4, TAG_CURRENCY, CURRENCY_THB)
    amount = _parse_amount(_expect(fields, 5, TAG_AMOUNT))

    return DecodedPayload(identifier=identifier, amount=amount, checksum=crc.upper())


def verify_payload(payload: str) -> bool:
    """
    Fail-closed check: True only for a well-formed payload with a valid CRC.
    """
    try:
        parse_payload(payload)
    except PromptPayError as exc:
        logger.debug("payload rejected: %s", exc.reason)
        return False
    return True
