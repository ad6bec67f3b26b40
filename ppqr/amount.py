"""
Amount formatting for the transaction amount field (tag 54).

The field is fixed width: six zero-padded baht digits, a dot, two satang
digits ("000123.45"). Conversion to satang uses ROUND_HALF_UP.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

from .errors import InvalidAmountError
from .models import FIELD_WIDTHS, FieldKind

AmountLike = Union[int, float, Decimal, str]

AMOUNT_WIDTH = FIELD_WIDTHS[FieldKind.AMOUNT]
# Largest satang value whose rendering fits AMOUNT_WIDTH.
MAX_SATANG = 10 ** (AMOUNT_WIDTH - 1) - 1
_SATANG = Decimal("0.01")


def _to_decimal(amount: AmountLike) -> Decimal:
    if isinstance(amount, bool):
        raise InvalidAmountError("amount must be a number, not bool")
    if isinstance(amount, Decimal):
        return amount
    if isinstance(amount, (int, float, str)):
        try:
            # str() keeps floats at their shortest repr (123.45, not 123.4499...)
            return Decimal(str(amount).strip())
        except InvalidOperation as exc:
            raise InvalidAmountError(f"amount is not numeric: {amount!r}") from exc
    raise InvalidAmountError(f"unsupported amount type: {type(amount).__name__}")


def _too_large() -> InvalidAmountError:
    return InvalidAmountError(
        f"amount too large: max {MAX_SATANG // 100}.{MAX_SATANG % 100:02d}"
    )


def to_satang(amount: AmountLike) -> int:
    value = _to_decimal(amount)
    if not value.is_finite():
        raise InvalidAmountError("amount must be finite")
    if value < 0:
        raise InvalidAmountError("amount must not be negative")

    # Magnitude first: no arithmetic on exponents the decimal context cannot hold.
    if value and value.adjusted() >= AMOUNT_WIDTH - 3:
        raise _too_large()

    satang = int(value.quantize(_SATANG, rounding=ROUND_HALF_UP).scaleb(2))
    if satang > MAX_SATANG:
        raise _too_large()
    return satang


def format_amount(amount: AmountLike) -> str:
    satang = to_satang(amount)
    return f"{satang // 100:0{AMOUNT_WIDTH - 3}d}.{satang % 100:02d}"
