#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Pricer runtime configuration loaded from the environment."""

from __future__ import annotations

from attrs import define
from provide.foundation.config.base import field
from provide.foundation.config.env import RuntimeConfig

from pricers.config.defaults import DEFAULT_KEY_DECODING, DEFAULT_LOG_LEVEL, DEFAULT_SCALE_FACTOR
from pricers.helpers.keys import KeyDecodingMode
from pricers.helpers.scale import validate_scale_factor

VALID_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def parse_log_level(value: str) -> str:
    """Validate and normalize log levels."""
    normalized = value.strip().upper()
    if normalized not in VALID_LOG_LEVELS:
        raise ValueError(f"Invalid log level: {value}")
    return normalized


def parse_key_decoding(value: str | KeyDecodingMode) -> str:
    """Validate a key decoding mode and return its canonical name."""
    return KeyDecodingMode.parse(value).value


def parse_scale_factor(value: str | float) -> float:
    """Validate a scale factor given as text or number."""
    return validate_scale_factor(value)


@define
class PricerRuntimeConfig(RuntimeConfig):
    """Keys, scale and logging for pricer commands."""

    log_level: str = field(
        default=DEFAULT_LOG_LEVEL,
        env_var="PRICER_LOG_LEVEL",
        converter=parse_log_level,
        metadata={"help": "Log level for pricer operations (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL)"},
    )

    encryption_key: str = field(
        default="",
        env_var="PRICER_ENCRYPTION_KEY",
        metadata={"help": "Raw encryption key, decoded with key_decoding", "sensitive": True},
    )

    integrity_key: str = field(
        default="",
        env_var="PRICER_INTEGRITY_KEY",
        metadata={"help": "Raw integrity key, decoded with key_decoding", "sensitive": True},
    )

    key_decoding: str = field(
        default=DEFAULT_KEY_DECODING,
        env_var="PRICER_KEY_DECODING",
        converter=parse_key_decoding,
        metadata={"help": "Key decoding mode (hex, base64, urlsafe_base64, plain)"},
    )

    scale_factor: float = field(
        default=DEFAULT_SCALE_FACTOR,
        env_var="PRICER_SCALE_FACTOR",
        converter=parse_scale_factor,
        metadata={"help": "Units per currency unit in encrypted prices (1000000 for micros)"},
    )


# 🌶️📦🔚
