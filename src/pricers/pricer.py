#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Interface shared by exchange pricers."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Pricer(Protocol):
    """Encrypts prices into tokens and decrypts them back."""

    def encrypt(self, seed: str | bytes, price: float, debug: bool | None = None) -> str: ...

    def decrypt(self, token: str, debug: bool | None = None) -> float: ...


# 🌶️📦🔚
