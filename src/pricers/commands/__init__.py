#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Command modules for the pricer CLI."""

from __future__ import annotations

from pricers.commands.decrypt import decrypt_command
from pricers.commands.encrypt import encrypt_command

__all__ = [
    "decrypt_command",
    "encrypt_command",
]

# 🌶️📦🔚
