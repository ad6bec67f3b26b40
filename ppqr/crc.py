"""
CRC-16 checksum for PromptPay payloads (tag 63).

Parameterization (contract-locked):
- width 16, poly 0x1021, init 0xFFFF
- no input/output reflection, xorout 0x0000

The checksum covers the UTF-8 bytes of the payload up to and including the
open "6304" marker, and is rendered as 4 uppercase hex digits.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import crcmod


@dataclass(frozen=True)
class CRCParameters:
    width: int
    poly: int
    init: int
    refin: bool
    refout: bool
    xorout: int
    check: int  # CRC of b"123456789"

    def __post_init__(self) -> None:
        # crcmod reflects input and output together.
        if self.refin != self.refout:
            raise ValueError("refin and refout must match")

    def make_function(self) -> Callable[[bytes], int]:
        return crcmod.mkCrcFun(
            (1 << self.width) | self.poly,
            initCrc=self.init,
            rev=self.refin,
            xorOut=self.xorout,
        )


CRC16_XMODEM = CRCParameters(
    width=16,
    poly=0x1021,
    init=0xFFFF,
    refin=False,
    refout=False,
    xorout=0x0000,
    check=0x29B1,
)

_crc16_xmodem = CRC16_XMODEM.make_function()


def crc16(data: bytes, params: CRCParameters = CRC16_XMODEM) -> int:
    fn = _crc16_xmodem if params == CRC16_XMODEM else params.make_function()
    return fn(data)


def checksum(payload_prefix: str) -> str:
    return f"{crc16(payload_prefix.encode('utf-8')):04X}"


def append_checksum(payload_prefix: str) -> str:
    return payload_prefix + checksum(payload_prefix)
