#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Decoding of raw exchange key strings into key bytes."""

from __future__ import annotations

import binascii
from enum import Enum

from provide.foundation import logger

from pricers.exceptions import KeyDecodeError
from pricers.helpers.encoding import decode_base64


class KeyDecodingMode(str, Enum):
    """How a raw key string is turned into key bytes."""

    HEX = "hex"
    BASE64 = "base64"
    URLSAFE_BASE64 = "urlsafe_base64"
    PLAIN = "plain"

    @classmethod
    def parse(cls, value: str | KeyDecodingMode) -> KeyDecodingMode:
        """Resolve a mode from its name or one of the accepted aliases."""
        if isinstance(value, KeyDecodingMode):
            return value
        normalized = str(value).strip().lower().replace("-", "_")
        mode = _ALIASES.get(normalized)
        if mode is None:
            raise KeyDecodeError(f"Unknown key decoding mode: {value!r}")
        return mode


_ALIASES = {
    "hex": KeyDecodingMode.HEX,
    "hexa": KeyDecodingMode.HEX,
    "base64": KeyDecodingMode.BASE64,
    "b64": KeyDecodingMode.BASE64,
    "urlsafe_base64": KeyDecodingMode.URLSAFE_BASE64,
    "urlsafe": KeyDecodingMode.URLSAFE_BASE64,
    "websafe": KeyDecodingMode.URLSAFE_BASE64,
    "plain": KeyDecodingMode.PLAIN,
    "utf8": KeyDecodingMode.PLAIN,
    "raw": KeyDecodingMode.PLAIN,
}


def decode_key(raw_key: str, mode: KeyDecodingMode | str = KeyDecodingMode.HEX) -> bytes:
    """
    Decode a raw key string into bytes.

    Args:
        raw_key: Key as handed out by the exchange
        mode: Decoding mode, or its name

    Returns:
        Key bytes, treated as opaque by the pricers

    Raises:
        KeyDecodeError: If the key is not valid for the mode
    """
    decoding = KeyDecodingMode.parse(mode)
    if not isinstance(raw_key, str):
        raise KeyDecodeError(f"Key must be a string, got {type(raw_key).__name__}")

    # Plain keys are used byte for byte, surrounding whitespace included
    key = raw_key if decoding is KeyDecodingMode.PLAIN else raw_key.strip()

    try:
        if decoding is KeyDecodingMode.HEX:
            decoded = bytes.fromhex(key)
        elif decoding is KeyDecodingMode.BASE64:
            decoded = decode_base64(key)
        elif decoding is KeyDecodingMode.URLSAFE_BASE64:
            decoded = decode_base64(key, websafe=True)
        else:
            decoded = key.encode("utf-8")
    except (ValueError, binascii.Error) as e:
        logger.debug("Key decoding failed", mode=decoding.value, error=str(e))
        raise KeyDecodeError(f"Failed to decode {decoding.value} key: {e}") from e

    return decoded


# 🌶️📦🔚
