#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Byte utilities."""

from __future__ import annotations

from pricers.utils.xor import xor_bytes, xor_decode

__all__ = [
    "xor_bytes",
    "xor_decode",
]

# 🌶️📦🔚
