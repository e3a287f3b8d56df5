#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Binary and text framing of DoubleClick price tokens.

A token is 28 bytes, web-safe base64 encoded:

    iv (16) | encrypted price (8) | signature (4)
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from attrs import define, field

from pricers.config.defaults import (
    IV_OFFSET,
    IV_SIZE,
    PRICE_OFFSET,
    PRICE_SIZE,
    SIGNATURE_OFFSET,
    SIGNATURE_SIZE,
    TOKEN_SIZE,
)
from pricers.exceptions import MalformedTokenError
from pricers.helpers.encoding import decode_base64, encode_websafe_base64


def _fixed_size(size: int) -> Callable[[Any, Any, bytes], None]:
    def validator(instance: Any, attribute: Any, value: bytes) -> None:
        if not isinstance(value, bytes) or len(value) != size:
            name = getattr(attribute, "name", "field")
            actual = len(value) if isinstance(value, bytes) else type(value).__name__
            raise MalformedTokenError(f"Token {name} must be {size} bytes, got {actual}")

    return validator


@define(frozen=True)
class PriceToken:
    """The three fields of an encrypted price."""

    iv: bytes = field(validator=_fixed_size(IV_SIZE))
    encrypted_price: bytes = field(validator=_fixed_size(PRICE_SIZE))
    signature: bytes = field(validator=_fixed_size(SIGNATURE_SIZE))

    def to_bytes(self) -> bytes:
        """Pack the token into its 28-byte binary form."""
        return self.iv + self.encrypted_price + self.signature

    def encode(self, padding: bool = True) -> str:
        """Frame the token as web-safe base64 text."""
        return encode_websafe_base64(self.to_bytes(), padding=padding)

    @classmethod
    def from_bytes(cls, raw: bytes) -> PriceToken:
        """Split a 28-byte binary token into its fields."""
        if len(raw) != TOKEN_SIZE:
            raise MalformedTokenError(f"Token must decode to {TOKEN_SIZE} bytes, got {len(raw)}")
        return cls(
            iv=bytes(raw[IV_OFFSET : IV_OFFSET + IV_SIZE]),
            encrypted_price=bytes(raw[PRICE_OFFSET : PRICE_OFFSET + PRICE_SIZE]),
            signature=bytes(raw[SIGNATURE_OFFSET : SIGNATURE_OFFSET + SIGNATURE_SIZE]),
        )

    @classmethod
    def decode(cls, text: str) -> PriceToken:
        """Parse web-safe base64 text, with or without padding."""
        if not isinstance(text, str):
            raise MalformedTokenError(f"Token must be text, got {type(text).__name__}")
        try:
            raw = decode_base64(text.strip(), websafe=True)
        except ValueError as e:
            raise MalformedTokenError(f"Token is not valid web-safe base64: {e}") from e
        return cls.from_bytes(raw)


# 🌶️📦🔚
