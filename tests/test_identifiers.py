"""
MIT License
Copyright (c) 2025 DarekDGB
"""

from __future__ import annotations

import pytest

from ppqr.errors import InvalidIdentifierFormatError
from ppqr.identifiers import normalize, normalize_national_id, normalize_phone_number
from ppqr.models import FieldKind, NationalID, NormalizedField, PhoneNumber


@pytest.mark.parametrize(
    "raw",
    [
        "+66-812345678",
        "66812345678",
        "0066812345678",
        "0812345678",
        "081-234-5678",
        "  0812345678\n",
        "+66-0812345678",
        "812345678",
    ],
)
def test_phone_number_forms(raw: str) -> None:
    f = normalize_phone_number(raw)
    assert f.kind is FieldKind.PHONE
    assert f.value == "812345678"
    assert f.canonical == "01130066812345678"


def test_phone_country_code_only_removed_at_start() -> None:
    # "66" inside the number must survive.
    assert normalize_phone_number("0866123456").value == "866123456"
    assert normalize_phone_number("+66866123456").value == "866123456"
    assert normalize_phone_number("0812366661").value == "812366661"


def test_phone_nine_digit_body_starting_with_66_is_kept() -> None:
    assert normalize_phone_number("661234567").value == "661234567"
    assert normalize_phone_number("0661234567").value == "661234567"


def test_phone_normalization_is_idempotent() -> None:
    for raw in ["+66-812345678", "0866123456", "0661234567", "0999999999"]:
        first = normalize(PhoneNumber(raw))
        again = normalize(PhoneNumber(first.value))
        assert again == first


@pytest.mark.parametrize(
    "raw",
    [
        "+66-81234",
        "",
        "   ",
        "08123456789",
        "08123456a8",
        "081 234 5678",
        "081.234.5678",
        "０８１２３４５６７８",  # full-width digits
    ],
)
def test_phone_rejects_malformed(raw: str) -> None:
    with pytest.raises(InvalidIdentifierFormatError) as ei:
        normalize_phone_number(raw)
    assert ei.value.kind == "InvalidIdentifierFormat"
    assert "phone number" in ei.value.reason


@pytest.mark.parametrize(
    "raw",
    ["1234567890123", "1-2345-67890-12-3", " 1 2345 67890 12 3 ", "\t1234567890123\n"],
)
def test_national_id_forms(raw: str) -> None:
    f = normalize_national_id(raw)
    assert f.kind is FieldKind.NATIONAL_ID
    assert f.value == "1234567890123"
    assert f.canonical == "02131234567890123"


@pytest.mark.parametrize(
    "raw",
    ["1234-5678", "12345678901234", "123456789012A", "+1234567890123", ""],
)
def test_national_id_rejects_malformed(raw: str) -> None:
    with pytest.raises(InvalidIdentifierFormatError) as ei:
        normalize_national_id(raw)
    assert "national ID" in ei.value.reason


def test_normalize_dispatches_on_variant() -> None:
    assert normalize(PhoneNumber("0812345678")) == NormalizedField(FieldKind.PHONE, "812345678")
    assert normalize(NationalID("1234567890123")) == NormalizedField(
        FieldKind.NATIONAL_ID, "1234567890123"
    )


def test_normalize_rejects_unknown_identifier_type() -> None:
    with pytest.raises(TypeError):
        normalize("0812345678")  # type: ignore[arg-type]


def test_non_string_raw_is_format_error() -> None:
    with pytest.raises(InvalidIdentifierFormatError):
        normalize(PhoneNumber(812345678))  # type: ignore[arg-type]
    with pytest.raises(InvalidIdentifierFormatError):
        normalize(NationalID(None))  # type: ignore[arg-type]


def test_format_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        normalize(NationalID("1234-5678"))
