"""
Simple end-to-end PromptPay payload example.

This simulates:

1. A shop building a payload for a mobile-number payee.
2. The same for a national-ID payee.
3. A checkout page checking a payload before rendering it as a QR code.

QR rendering itself is not part of this library.
"""

import logging

from ppqr import (
    InvalidIdentifierFormatError,
    NationalID,
    PhoneNumber,
    generate_payload,
    parse_payload,
    verify_payload,
)


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)

    # 1. Mobile number payee
    phone_payload = generate_payload(PhoneNumber("+66-812345678"), 123.45)
    print("Phone payload:")
    print(phone_payload)
    print()

    # 2. National ID payee
    id_payload = generate_payload(NationalID("1-2345-67890-12-3"), "50")
    print("National ID payload:")
    print(id_payload)
    print()

    # 3. Verify before rendering
    decoded = parse_payload(phone_payload)
    print("Decoded:", decoded.identifier.kind.value, decoded.identifier.value, decoded.amount.value)

    tampered = phone_payload[:-4] + "0000"
    print("Tampered payload accepted:", verify_payload(tampered))

    try:
        generate_payload(NationalID("1234-5678"), 10)
    except InvalidIdentifierFormatError as exc:
        print(f"❌ {exc.kind}: {exc.reason}")


if __name__ == "__main__":
    main()
