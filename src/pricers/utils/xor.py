#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Fixed-width XOR used to obfuscate the price field."""

from __future__ import annotations


def xor_bytes(data: bytes, pad: bytes) -> bytes:
    """
    XOR data with a pad of the same length.

    Args:
        data: Bytes to obfuscate or recover
        pad: Keystream bytes, exactly as long as data

    Returns:
        XOR combined bytes

    Raises:
        ValueError: If the lengths differ
    """
    if len(data) != len(pad):
        raise ValueError(f"XOR operands differ in length: {len(data)} != {len(pad)}")
    return bytes(d ^ p for d, p in zip(data, pad, strict=True))


def xor_decode(data: bytes, pad: bytes) -> bytes:
    """
    Recover bytes obfuscated with xor_bytes.

    Since XOR is symmetric, this is the same as encoding.
    """
    return xor_bytes(data, pad)  # XOR is its own inverse


# 🌶️📦🔚
