"""
EMV-style TLV helpers.

Each field is rendered as:
    <tag: 2 digits><length: 2 digits><value>

Length is always computed from the value, never hard-coded, so template
constants stay consistent when a field width changes.
"""

from __future__ import annotations

from typing import List, Tuple

from .errors import InvalidPayloadError

MAX_VALUE_LENGTH = 99


def format_field(tag: str, value: str) -> str:
    if len(tag) != 2 or not tag.isdigit():
        raise ValueError(f"TLV tag must be two digits: {tag!r}")
    if len(value) > MAX_VALUE_LENGTH:
        raise ValueError(f"TLV value too long for tag {tag}: {len(value)} > {MAX_VALUE_LENGTH}")
    return f"{tag}{len(value):02d}{value}"


def split_fields(text: str) -> List[Tuple[str, str]]:
    """
    Split a TLV string into ordered (tag, value) pairs.

    Fail-closed: a malformed header or a value running past the end of the
    input raises InvalidPayloadError.
    """
    fields: List[Tuple[str, str]] = []
    pos = 0
    while pos < len(text):
        header = text[pos : pos + 4]
        if len(header) != 4 or not header.isdigit() or not header.isascii():
            raise InvalidPayloadError(f"malformed TLV header at offset {pos}: {header!r}")
        tag, length = header[:2], int(header[2:])
        start = pos + 4
        end = start + length
        if end > len(text):
            raise InvalidPayloadError(f"TLV field {tag} truncated: need {length} chars")
        fields.append((tag, text[start:end]))
        pos = end
    return fields
