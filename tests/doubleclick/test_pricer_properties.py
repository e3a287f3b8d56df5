#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Property-based tests for DoubleClick price encryption."""

from __future__ import annotations

import base64

from hypothesis import assume, given, settings, strategies as st
import pytest

from pricers.doubleclick import DoubleClickPricer
from pricers.exceptions import IntegrityError, MalformedTokenError
from pricers.tracing import NullTracer

ENCRYPTION_KEY = bytes.fromhex("b2453b031fcd2f9a4f005c8a7647d98d9cf6f9584837c6e38f5ad514e689ff9a")
INTEGRITY_KEY = bytes.fromhex("6ab3b6df291d36a510e4b12843415598f90177bc41e423bcf4f0d99528e9171a")

seeds = st.one_of(st.text(max_size=64), st.binary(max_size=64))
prices = st.floats(min_value=0, max_value=1e9, allow_nan=False, allow_infinity=False)
scale_factors = st.sampled_from([1.0, 100.0, 1_000.0, 1_000_000.0])


def make_pricer(scale_factor: float = 1_000_000.0) -> DoubleClickPricer:
    return DoubleClickPricer(
        encryption_key=ENCRYPTION_KEY,
        integrity_key=INTEGRITY_KEY,
        scale_factor=scale_factor,
        tracer=NullTracer(),
    )


@pytest.mark.slow
class TestPricerProperties:
    """Invariants that hold for every seed, price and scale."""

    @given(seed=seeds, price=prices, scale_factor=scale_factors)
    @settings(max_examples=200)
    def test_round_trip_within_resolution(self, seed: str | bytes, price: float, scale_factor: float) -> None:
        pricer = make_pricer(scale_factor)
        assert abs(pricer.decrypt(pricer.encrypt(seed, price)) - price) <= 1 / scale_factor

    @given(seed=seeds, micros=st.integers(min_value=0, max_value=2**64 - 1))
    def test_micros_round_trip_is_exact(self, seed: str | bytes, micros: int) -> None:
        pricer = make_pricer()
        assert pricer.decrypt_micros(pricer.encrypt_micros(seed, micros)) == micros

    @given(seed=seeds, price=prices)
    def test_deterministic(self, seed: str | bytes, price: float) -> None:
        pricer = make_pricer()
        assert pricer.encrypt(seed, price) == pricer.encrypt(seed, price)

    @given(first=st.text(max_size=32), second=st.text(max_size=32), price=prices)
    def test_seed_sensitivity(self, first: str, second: str, price: float) -> None:
        assume(first != second)
        pricer = make_pricer()
        assert pricer.encrypt(first, price) != pricer.encrypt(second, price)

    @given(seed=seeds, price=prices, data=st.data())
    def test_single_bit_flip_is_detected(self, seed: str | bytes, price: float, data: st.DataObject) -> None:
        pricer = make_pricer()
        raw = bytearray(base64.urlsafe_b64decode(pricer.encrypt(seed, price)))
        index = data.draw(st.integers(min_value=16, max_value=27))
        bit = data.draw(st.integers(min_value=0, max_value=7))
        raw[index] ^= 1 << bit
        with pytest.raises(IntegrityError):
            pricer.decrypt(base64.urlsafe_b64encode(bytes(raw)).decode())

    @given(text=st.text(max_size=80))
    def test_arbitrary_text_never_crashes(self, text: str) -> None:
        pricer = make_pricer()
        try:
            pricer.decrypt(text)
        except (MalformedTokenError, IntegrityError):
            pass


# 🌶️📦🔚
