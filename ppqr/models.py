"""
Core data models for PromptPay payloads.

These describe the values flowing through the encoder:
- identifiers (mobile number or national ID), as supplied by the caller
- normalized fixed-width fields (identifier body or amount)
- decoded payloads returned by the parser
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .tlv import format_field


class FieldKind(str, Enum):
    PHONE = "phone"
    NATIONAL_ID = "national_id"
    AMOUNT = "amount"


# Fixed widths of the normalized value for each kind.
FIELD_WIDTHS = {
    FieldKind.PHONE: 9,
    FieldKind.NATIONAL_ID: 13,
    FieldKind.AMOUNT: 9,
}

# Proxy sub-tag inside merchant account information (tag 29).
PROXY_TAGS = {
    FieldKind.PHONE: "01",
    FieldKind.NATIONAL_ID: "02",
}

# Marker placed before the identifier body inside the proxy sub-field.
PROXY_PREFIXES = {
    FieldKind.PHONE: "0066",
    FieldKind.NATIONAL_ID: "",
}


@dataclass(frozen=True)
class PhoneNumber:
    raw: str


@dataclass(frozen=True)
class NationalID:
    raw: str


Identifier = Union[PhoneNumber, NationalID]


@dataclass(frozen=True)
class NormalizedField:
    """
    A fixed-width field ready for the payload.

    For identifiers `value` is the bare body (9 phone digits without the
    country code, or 13 national ID digits). `canonical` is the proxy
    sub-field exactly as it is embedded in the payload.
    """
    kind: FieldKind
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.kind, FieldKind):
            raise TypeError("kind must be a FieldKind")
        if len(self.value) != self.width:
            raise ValueError(
                f"{self.kind.value} field must be {self.width} chars, got {len(self.value)}"
            )

    @property
    def width(self) -> int:
        return FIELD_WIDTHS[self.kind]

    @property
    def is_identifier(self) -> bool:
        return self.kind in PROXY_TAGS

    @property
    def proxy_value(self) -> str:
        if not self.is_identifier:
            raise ValueError("amount fields have no proxy value")
        return PROXY_PREFIXES[self.kind] + self.value

    @property
    def canonical(self) -> str:
        if not self.is_identifier:
            return self.value
        return format_field(PROXY_TAGS[self.kind], self.proxy_value)

    def __str__(self) -> str:
        return self.canonical


@dataclass(frozen=True)
class DecodedPayload:
    identifier: NormalizedField
    amount: NormalizedField
    checksum: str
