#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""DoubleClick price encryption and decryption.

Implements the Google Ad Exchange price encryption scheme:

    iv        = md5(seed)
    pad       = hmac(e_key, iv), first 8 bytes
    enc_price = pad <xor> price
    signature = hmac(i_key, price || iv), first 4 bytes
    token     = WebSafeBase64Encode(iv || enc_price || signature)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from attrs import define, field

from pricers.config.defaults import DEFAULT_SCALE_FACTOR
from pricers.doubleclick.token import PriceToken
from pricers.exceptions import IntegrityError
from pricers.helpers.hashing import derive_iv, generate_pad, generate_signature, signatures_match
from pricers.helpers.keys import KeyDecodingMode, decode_key
from pricers.helpers.scale import (
    from_micros,
    micros_from_bytes,
    micros_to_bytes,
    to_micros,
    validate_scale_factor,
)
from pricers.tracing import LoggerTracer, PriceTracer, safe_trace
from pricers.utils.xor import xor_bytes, xor_decode

if TYPE_CHECKING:
    from pricers.config.runtime import PricerRuntimeConfig


def _key_bytes(instance: Any, attribute: Any, value: bytes) -> None:
    if not isinstance(value, bytes):
        raise ValueError(f"{attribute.name} must be bytes, got {type(value).__name__}")


@define(frozen=True)
class DoubleClickPricer:
    """Encrypts and decrypts prices with a pair of DoubleClick keys.

    Instances are immutable and can be shared between threads.

    Example:
        ```python
        pricer = DoubleClickPricer.from_keys(e_key, i_key, KeyDecodingMode.HEX)
        token = pricer.encrypt("auction-123", 1.50)
        assert pricer.decrypt(token) == 1.50
        ```
    """

    encryption_key: bytes = field(validator=_key_bytes, repr=False)
    integrity_key: bytes = field(validator=_key_bytes, repr=False)
    scale_factor: float = field(default=DEFAULT_SCALE_FACTOR, converter=validate_scale_factor)
    debug: bool = field(default=False)
    tracer: PriceTracer = field(factory=LoggerTracer, repr=False)
    strip_padding: bool = field(default=False)

    @classmethod
    def from_keys(
        cls,
        encryption_key: str,
        integrity_key: str,
        key_decoding: KeyDecodingMode | str = KeyDecodingMode.HEX,
        scale_factor: float = DEFAULT_SCALE_FACTOR,
        debug: bool = False,
        tracer: PriceTracer | None = None,
        strip_padding: bool = False,
    ) -> DoubleClickPricer:
        """Build a pricer from raw key strings.

        Raises:
            KeyDecodeError: If either key cannot be decoded
            ScaleFactorError: If the scale factor is not positive
        """
        mode = KeyDecodingMode.parse(key_decoding)
        pricer = cls(
            encryption_key=decode_key(encryption_key, mode),
            integrity_key=decode_key(integrity_key, mode),
            scale_factor=scale_factor,
            debug=debug,
            tracer=tracer if tracer is not None else LoggerTracer(),
            strip_padding=strip_padding,
        )
        if debug:
            safe_trace(
                pricer.tracer,
                "Pricer keys decoded",
                key_decoding=mode.value,
                encryption_key=pricer.encryption_key,
                integrity_key=pricer.integrity_key,
                scale_factor=pricer.scale_factor,
            )
        return pricer

    @classmethod
    def from_config(
        cls,
        config: PricerRuntimeConfig,
        debug: bool = False,
        tracer: PriceTracer | None = None,
    ) -> DoubleClickPricer:
        """Build a pricer from runtime configuration."""
        return cls.from_keys(
            config.encryption_key,
            config.integrity_key,
            key_decoding=config.key_decoding,
            scale_factor=config.scale_factor,
            debug=debug,
            tracer=tracer,
        )

    def _tracing(self, debug: bool | None) -> bool:
        return self.debug if debug is None else debug

    def encrypt(self, seed: str | bytes, price: float, debug: bool | None = None) -> str:
        """Encrypt a price into a web-safe token.

        Args:
            seed: Per-impression value the IV is derived from
            price: Non-negative price in currency units
            debug: Trace intermediate values; defaults to the pricer setting

        Returns:
            Web-safe base64 token

        Raises:
            PriceRangeError: If the price does not fit the micros field
        """
        data = to_micros(price, self.scale_factor)
        if self._tracing(debug):
            safe_trace(self.tracer, "Price scaled", price=price, scale_factor=self.scale_factor, micros=data)
        return self._seal(seed, data, debug)

    def encrypt_micros(self, seed: str | bytes, micros: int, debug: bool | None = None) -> str:
        """Encrypt a price already expressed in micros."""
        return self._seal(seed, micros_to_bytes(micros), debug)

    def _seal(self, seed: str | bytes, data: bytes, debug: bool | None) -> str:
        tracing = self._tracing(debug)

        iv = derive_iv(seed)
        if tracing:
            safe_trace(self.tracer, "Initialization vector", seed=seed, iv=iv)

        # pad = hmac(e_key, iv), first 8 bytes
        pad = generate_pad(self.encryption_key, iv)

        # enc_price = pad <xor> price
        encrypted_price = xor_bytes(data, pad)

        # signature = hmac(i_key, price || iv), first 4 bytes
        signature = generate_signature(self.integrity_key, data, iv)

        token = PriceToken(iv=iv, encrypted_price=encrypted_price, signature=signature)
        encoded = token.encode(padding=not self.strip_padding)
        if tracing:
            safe_trace(
                self.tracer,
                "Price encrypted",
                pad=pad,
                encrypted_price=encrypted_price,
                signature=signature,
                token=encoded,
            )
        return encoded

    def decrypt(self, token: str, debug: bool | None = None) -> float:
        """Decrypt and verify a token into a price.

        Raises:
            MalformedTokenError: If the token is not 28 bytes of web-safe base64
            IntegrityError: If the signature does not match
        """
        return from_micros(self._open(token, debug), self.scale_factor)

    def decrypt_micros(self, token: str, debug: bool | None = None) -> int:
        """Decrypt and verify a token into integer micros."""
        return micros_from_bytes(self._open(token, debug))

    def _open(self, token: str, debug: bool | None) -> bytes:
        tracing = self._tracing(debug)
        parsed = PriceToken.decode(token)

        pad = generate_pad(self.encryption_key, parsed.iv)
        if tracing:
            safe_trace(
                self.tracer,
                "Token decoded",
                token=token,
                iv=parsed.iv,
                encrypted_price=parsed.encrypted_price,
                signature=parsed.signature,
                pad=pad,
            )

        data = xor_decode(parsed.encrypted_price, pad)
        expected = generate_signature(self.integrity_key, data, parsed.iv)
        if not signatures_match(expected, parsed.signature):
            if tracing:
                safe_trace(self.tracer, "Price integrity check failed")
            raise IntegrityError("failed to verify price integrity")

        if tracing:
            safe_trace(self.tracer, "Price decrypted", micros=data, scale_factor=self.scale_factor)
        return data


def new_doubleclick_pricer(
    encryption_key: str,
    integrity_key: str,
    key_decoding: KeyDecodingMode | str = KeyDecodingMode.HEX,
    scale_factor: float = DEFAULT_SCALE_FACTOR,
    debug: bool = False,
    tracer: PriceTracer | None = None,
) -> DoubleClickPricer:
    """Build a DoubleClick pricer from raw key strings."""
    return DoubleClickPricer.from_keys(
        encryption_key,
        integrity_key,
        key_decoding=key_decoding,
        scale_factor=scale_factor,
        debug=debug,
        tracer=tracer,
    )


# 🌶️📦🔚
