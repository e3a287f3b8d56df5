#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""DoubleClick (Google Ad Exchange) price encryption."""

from __future__ import annotations

from pricers.doubleclick.pricer import DoubleClickPricer, new_doubleclick_pricer
from pricers.doubleclick.token import PriceToken

__all__ = [
    "DoubleClickPricer",
    "PriceToken",
    "new_doubleclick_pricer",
]

# 🌶️📦🔚
