#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""openrtb-pricers core package exports."""

from __future__ import annotations

from provide.foundation.utils import get_version

from pricers.doubleclick import DoubleClickPricer, PriceToken, new_doubleclick_pricer
from pricers.exceptions import (
    IntegrityError,
    KeyDecodeError,
    MalformedTokenError,
    PriceRangeError,
    PricerError,
    ScaleFactorError,
)
from pricers.helpers.keys import KeyDecodingMode
from pricers.pricer import Pricer
from pricers.tracing import LoggerTracer, NullTracer, PriceTracer

__version__ = get_version("openrtb-pricers", caller_file=__file__)

__all__ = [
    "DoubleClickPricer",
    "IntegrityError",
    "KeyDecodeError",
    "KeyDecodingMode",
    "LoggerTracer",
    "MalformedTokenError",
    "NullTracer",
    "PriceRangeError",
    "PriceToken",
    "PriceTracer",
    "Pricer",
    "PricerError",
    "ScaleFactorError",
    "__version__",
    "new_doubleclick_pricer",
]

# 🌶️📦🔚
