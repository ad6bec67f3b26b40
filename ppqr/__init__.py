"""
PromptPay QR payload encoder.

Typical use:

    from ppqr import PhoneNumber, generate_payload

    payload = generate_payload(PhoneNumber("081-234-5678"), 123.45)

Rendering the payload as a QR image is left to the caller.
"""

from .errors import (
    InvalidAmountError,
    InvalidIdentifierFormatError,
    InvalidPayloadError,
    PromptPayError,
)
from .models import NationalID, NormalizedField, PhoneNumber
from .payload import generate_payload, parse_payload, verify_payload

__all__ = [
    "InvalidAmountError",
    "InvalidIdentifierFormatError",
    "InvalidPayloadError",
    "NationalID",
    "NormalizedField",
    "PhoneNumber",
    "PromptPayError",
    "generate_payload",
    "parse_payload",
    "verify_payload",
]
