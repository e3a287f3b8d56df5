#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Hash primitives of the DoubleClick price encryption scheme.

    iv        = md5(seed)
    pad       = hmac_sha1(e_key, iv)[:8]
    signature = hmac_sha1(i_key, price || iv)[:4]
"""

from __future__ import annotations

from cryptography.hazmat.primitives import constant_time, hashes, hmac

from pricers.config.defaults import IV_SIZE, PRICE_SIZE, SIGNATURE_SIZE


def _require_size(name: str, data: bytes, size: int) -> None:
    if len(data) != size:
        raise ValueError(f"{name} must be {size} bytes, got {len(data)}")


def _seed_bytes(seed: str | bytes) -> bytes:
    if isinstance(seed, str):
        return seed.encode("utf-8")
    return bytes(seed)


def hmac_sum(key: bytes, data: bytes) -> bytes:
    """Compute HMAC-SHA1 of data; keys of any length are accepted."""
    h = hmac.HMAC(key, hashes.SHA1())
    h.update(data)
    return h.finalize()


def derive_iv(seed: str | bytes) -> bytes:
    """Derive the 16-byte initialization vector from a seed."""
    digest = hashes.Hash(hashes.MD5())
    digest.update(_seed_bytes(seed))
    iv = digest.finalize()
    _require_size("IV", iv, IV_SIZE)
    return iv


def generate_pad(encryption_key: bytes, iv: bytes) -> bytes:
    """Derive the 8-byte keystream pad for an IV."""
    _require_size("IV", iv, IV_SIZE)
    pad = hmac_sum(encryption_key, iv)[:PRICE_SIZE]
    _require_size("Pad", pad, PRICE_SIZE)
    return pad


def generate_signature(integrity_key: bytes, price: bytes, iv: bytes) -> bytes:
    """Derive the 4-byte integrity signature over plaintext micros and IV."""
    _require_size("Price", price, PRICE_SIZE)
    _require_size("IV", iv, IV_SIZE)
    signature = hmac_sum(integrity_key, price + iv)[:SIGNATURE_SIZE]
    _require_size("Signature", signature, SIGNATURE_SIZE)
    return signature


def signatures_match(expected: bytes, received: bytes) -> bool:
    """Compare two signatures in constant time."""
    return constant_time.bytes_eq(expected, received)


# 🌶️📦🔚
