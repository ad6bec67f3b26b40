"""
MIT License
Copyright (c) 2025 DarekDGB

Error types for PromptPay payload encoding.

Every failure is a ValueError subclass so callers that only care about
"bad input" can catch ValueError. `kind` is a stable machine-readable
name, `reason` is the human readable message.
"""

from __future__ import annotations


class PromptPayError(ValueError):
    kind = "PromptPayError"

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class InvalidIdentifierFormatError(PromptPayError):
    kind = "InvalidIdentifierFormat"


class InvalidAmountError(PromptPayError):
    kind = "InvalidAmount"


class InvalidPayloadError(PromptPayError):
    kind = "InvalidPayload"
