#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Conversion between float prices and fixed-point micros.

Prices are scaled by the pricer's scale factor and rounded half up to an
unsigned 64-bit integer. Rounding happens once, on the encode path; the
decode path is a plain division, so a round trip is exact within
``1 / scale_factor``.
"""

from __future__ import annotations

import math
import struct

from pricers.config.defaults import MAX_MICROS, PRICE_SIZE
from pricers.exceptions import PriceRangeError, ScaleFactorError

_MICROS_FORMAT = ">Q"


def validate_scale_factor(scale_factor: float) -> float:
    """Return the scale factor as a float, or raise ScaleFactorError."""
    try:
        value = float(scale_factor)
    except OverflowError as e:
        raise ScaleFactorError("Scale factor is too large to represent as a float") from e
    except (TypeError, ValueError) as e:
        raise ScaleFactorError(f"Invalid scale factor: {scale_factor!r}") from e
    if not math.isfinite(value) or value <= 0:
        raise ScaleFactorError(f"Scale factor must be a finite positive number, got {scale_factor!r}")
    return value


def apply_scale_factor(price: float, scale_factor: float) -> int:
    """Scale a price into integer micros, rounding half up."""
    scale = validate_scale_factor(scale_factor)
    if isinstance(price, bool) or not isinstance(price, (int, float)):
        raise PriceRangeError(f"Price must be a number, got {type(price).__name__}")
    try:
        value = float(price)
    except OverflowError as e:
        raise PriceRangeError("Price is too large to represent as a float") from e
    if not math.isfinite(value) or value < 0:
        raise PriceRangeError(f"Price must be a finite non-negative number, got {price!r}")

    scaled = value * scale
    if not math.isfinite(scaled):
        raise PriceRangeError(f"Price {price!r} overflows at scale factor {scale}")
    return math.floor(scaled + 0.5)


def micros_to_bytes(micros: int) -> bytes:
    """Pack micros into the 8-byte big-endian price field."""
    if isinstance(micros, bool) or not isinstance(micros, int):
        raise PriceRangeError(f"Micros must be an integer, got {type(micros).__name__}")
    if not 0 <= micros <= MAX_MICROS:
        raise PriceRangeError(f"Micros {micros} outside [0, {MAX_MICROS}]")
    return struct.pack(_MICROS_FORMAT, micros)


def micros_from_bytes(data: bytes) -> int:
    """Unpack the 8-byte big-endian price field."""
    if len(data) != PRICE_SIZE:
        raise PriceRangeError(f"Price field must be {PRICE_SIZE} bytes, got {len(data)}")
    value: int = struct.unpack(_MICROS_FORMAT, data)[0]
    return value


def to_micros(price: float, scale_factor: float) -> bytes:
    """Convert a price into its 8-byte micros representation."""
    return micros_to_bytes(apply_scale_factor(price, scale_factor))


def from_micros(data: bytes, scale_factor: float) -> float:
    """Convert an 8-byte micros representation back into a price."""
    scale = validate_scale_factor(scale_factor)
    return micros_from_bytes(data) / scale


# 🌶️📦🔚
