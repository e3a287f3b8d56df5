#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Centralized default values for pricer configuration."""

from __future__ import annotations

# =================================
# DoubleClick token layout
# =================================
IV_SIZE = 16  # md5(seed)
PRICE_SIZE = 8  # uint64 big-endian micros
SIGNATURE_SIZE = 4  # hmac(i_key, price || iv), first 4 bytes
TOKEN_SIZE = IV_SIZE + PRICE_SIZE + SIGNATURE_SIZE

IV_OFFSET = 0
PRICE_OFFSET = IV_OFFSET + IV_SIZE
SIGNATURE_OFFSET = PRICE_OFFSET + PRICE_SIZE

# =================================
# Micros
# =================================
MAX_MICROS = 2**64 - 1
DEFAULT_SCALE_FACTOR = 1_000_000.0

# =================================
# Key decoding
# =================================
DEFAULT_KEY_DECODING = "hex"

# =================================
# Runtime defaults
# =================================
DEFAULT_LOG_LEVEL = "WARNING"
SERVICE_NAME = "openrtb-pricers"

# 🌶️📦🔚
