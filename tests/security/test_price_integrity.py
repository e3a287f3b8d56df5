#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tamper detection and malformed input handling for encrypted prices."""

from __future__ import annotations

import base64
import string
from unittest.mock import patch

import pytest

from pricers.doubleclick import DoubleClickPricer
from pricers.exceptions import IntegrityError, MalformedTokenError, PricerError
from pricers.helpers.hashing import signatures_match

WEBSAFE_ALPHABET = string.ascii_letters + string.digits + "-_"


def flip_bit(token: str, byte_index: int, bit: int) -> str:
    raw = bytearray(base64.urlsafe_b64decode(token))
    raw[byte_index] ^= 1 << bit
    return base64.urlsafe_b64encode(bytes(raw)).decode()


class TestTamperDetection:
    """Any modification of a token must be detected."""

    @pytest.mark.security
    @pytest.mark.parametrize("byte_index", range(16, 28))
    @pytest.mark.parametrize("bit", range(8))
    def test_bit_flip_in_price_or_signature(self, pricer: DoubleClickPricer, byte_index: int, bit: int) -> None:
        """Flipping any bit of the encrypted price or signature fails verification."""
        token = pricer.encrypt("auction-123", 1.50)
        with pytest.raises(IntegrityError):
            pricer.decrypt(flip_bit(token, byte_index, bit))

    @pytest.mark.security
    @pytest.mark.parametrize("byte_index", range(16))
    def test_bit_flip_in_iv(self, pricer: DoubleClickPricer, byte_index: int) -> None:
        """Changing the IV changes both pad and signature input."""
        token = pricer.encrypt("auction-123", 1.50)
        with pytest.raises(IntegrityError):
            pricer.decrypt(flip_bit(token, byte_index, 0))

    @pytest.mark.security
    def test_any_altered_character(self, pricer: DoubleClickPricer) -> None:
        """Altering any character yields MalformedTokenError or IntegrityError."""
        token = pricer.encrypt("auction-123", 1.50)
        assert pricer.decrypt(token) == 1.50

        for position, original in enumerate(token):
            for replacement in ("A", "z", "=", "+"):
                if replacement == original:
                    continue
                altered = token[:position] + replacement + token[position + 1 :]
                with pytest.raises((MalformedTokenError, IntegrityError)):
                    pricer.decrypt(altered)

    @pytest.mark.security
    def test_error_does_not_reveal_position(self, pricer: DoubleClickPricer) -> None:
        token = pricer.encrypt("seed", 1.0)
        messages = set()
        for byte_index in (24, 27):
            with pytest.raises(IntegrityError) as exc_info:
                pricer.decrypt(flip_bit(token, byte_index, 0))
            messages.add(str(exc_info.value))
        assert messages == {"failed to verify price integrity"}

    @pytest.mark.security
    def test_signature_compared_in_constant_time(self, pricer: DoubleClickPricer) -> None:
        token = pricer.encrypt("seed", 1.0)
        with patch(
            "pricers.doubleclick.pricer.signatures_match", wraps=signatures_match
        ) as mock_match, patch("cryptography.hazmat.primitives.constant_time.bytes_eq", return_value=True) as mock_eq:
            pricer.decrypt(flip_bit(token, 27, 0))
        mock_match.assert_called_once()
        mock_eq.assert_called_once()


class TestMalformedInput:
    """Malformed tokens raise typed errors, never crash."""

    @pytest.mark.security
    @pytest.mark.parametrize(
        "token",
        [
            "",
            " ",
            "====",
            "not a token",
            "YWJjMTIzZGVmNDU2Z2hpN7fhCuPemCce_6msaw*",
            base64.urlsafe_b64encode(b"\x00" * 24).decode(),
            base64.urlsafe_b64encode(b"\x00" * 56).decode(),
            "\x00" * 38,
            "ü" * 38,
        ],
    )
    def test_malformed_tokens(self, pricer: DoubleClickPricer, token: str) -> None:
        with pytest.raises(MalformedTokenError):
            pricer.decrypt(token)

    @pytest.mark.security
    def test_all_failures_share_a_base(self, pricer: DoubleClickPricer) -> None:
        for token in ("", base64.urlsafe_b64encode(b"\x01" * 28).decode()):
            with pytest.raises(PricerError):
                pricer.decrypt(token)


# 🌶️📦🔚
