#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Custom exceptions for openrtb-pricers."""

from __future__ import annotations

from provide.foundation.errors import FoundationError


class PricerError(FoundationError):
    """Base exception for all pricer-related errors."""

    pass


class KeyDecodeError(PricerError):
    """Raised when a raw key string cannot be decoded under its decoding mode."""

    pass


class ScaleFactorError(PricerError, ValueError):
    """Raised when the scale factor is not a finite positive number."""

    pass


class PriceRangeError(PricerError, ValueError):
    """Raised when a price does not fit the 8-byte micros field."""

    pass


class MalformedTokenError(PricerError):
    """Raised when a token is not valid web-safe base64 or has the wrong length."""

    pass


class IntegrityError(PricerError):
    """Raised when the price signature does not match."""

    pass


# 🌶️📦🔚
