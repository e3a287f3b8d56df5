#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Base64 helpers shared by key decoding and token framing."""

from __future__ import annotations

import base64
import binascii
import re

_STANDARD_ALPHABET = re.compile(r"[A-Za-z0-9+/]*={0,2}")
_WEBSAFE_ALPHABET = re.compile(r"[A-Za-z0-9_-]*={0,2}")


def add_base64_padding(text: str) -> str:
    """Restore the ``=`` padding that web-safe producers usually strip."""
    return text + "=" * (-len(text) % 4)


def strip_base64_padding(text: str) -> str:
    """Remove trailing ``=`` padding."""
    return text.rstrip("=")


def decode_base64(text: str, websafe: bool = False) -> bytes:
    """
    Strictly decode base64 text, tolerating missing padding.

    Args:
        text: Base64 text, with or without trailing padding
        websafe: Use the URL-safe alphabet (``-`` and ``_``)

    Returns:
        Decoded bytes

    Raises:
        ValueError: If the text uses characters outside the alphabet, has a
            length no padding can fix, or is not the canonical encoding of
            its bytes.
    """
    alphabet = _WEBSAFE_ALPHABET if websafe else _STANDARD_ALPHABET
    if not alphabet.fullmatch(text):
        raise ValueError("Invalid base64 alphabet")

    padded = add_base64_padding(text)
    try:
        if websafe:
            decoded = base64.urlsafe_b64decode(padded)
        else:
            decoded = base64.b64decode(padded, validate=True)
    except binascii.Error as e:
        raise ValueError(f"Invalid base64 text: {e}") from e

    # Reject encodings with non-zero trailing bits so every byte string has a single text form
    reencoded = base64.urlsafe_b64encode(decoded) if websafe else base64.b64encode(decoded)
    if strip_base64_padding(reencoded.decode("ascii")) != strip_base64_padding(text):
        raise ValueError("Non-canonical base64 text")

    return decoded


def encode_websafe_base64(data: bytes, padding: bool = True) -> str:
    """Encode bytes as URL-safe base64 text."""
    text = base64.urlsafe_b64encode(data).decode("ascii")
    return text if padding else strip_base64_padding(text)


# 🌶️📦🔚
