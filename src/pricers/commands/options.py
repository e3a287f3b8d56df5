#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Options shared by the encrypt and decrypt commands."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from attrs import evolve
import click

from pricers.config import PricerRuntimeConfig
from pricers.doubleclick import DoubleClickPricer

F = TypeVar("F", bound=Callable[..., Any])


def pricer_options(func: F) -> F:
    """Attach key, decoding and scale options; unset options fall back to the environment."""
    options = [
        click.option(
            "--encryption-key",
            "-e",
            default=None,
            help="Encryption key (default: $PRICER_ENCRYPTION_KEY)",
        ),
        click.option(
            "--integrity-key",
            "-i",
            default=None,
            help="Integrity key (default: $PRICER_INTEGRITY_KEY)",
        ),
        click.option(
            "--key-decoding",
            "-k",
            default=None,
            type=click.Choice(["hex", "base64", "urlsafe_base64", "plain"], case_sensitive=False),
            help="How keys are decoded (default: $PRICER_KEY_DECODING or hex)",
        ),
        click.option(
            "--scale-factor",
            "-s",
            default=None,
            type=float,
            help="Units per currency unit (default: $PRICER_SCALE_FACTOR or 1000000)",
        ),
        click.option(
            "--micros",
            is_flag=True,
            help="Read or print prices as integer micros instead of currency units",
        ),
        click.option(
            "--debug",
            is_flag=True,
            help="Trace intermediate values to the debug log",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def resolve_config(
    ctx: click.Context,
    encryption_key: str | None,
    integrity_key: str | None,
    key_decoding: str | None,
    scale_factor: float | None,
) -> PricerRuntimeConfig:
    """Overlay command-line values on the runtime configuration."""
    config = (ctx.obj or {}).get("config") or PricerRuntimeConfig.from_env()
    overrides: dict[str, Any] = {
        "encryption_key": encryption_key,
        "integrity_key": integrity_key,
        "key_decoding": key_decoding,
        "scale_factor": scale_factor,
    }
    return evolve(config, **{name: value for name, value in overrides.items() if value is not None})


def build_pricer(config: PricerRuntimeConfig, debug: bool) -> DoubleClickPricer:
    """Create the DoubleClick pricer for a command."""
    if not config.encryption_key or not config.integrity_key:
        raise click.UsageError(
            "Both keys are required: pass --encryption-key/--integrity-key "
            "or set PRICER_ENCRYPTION_KEY/PRICER_INTEGRITY_KEY"
        )
    return DoubleClickPricer.from_config(config, debug=debug)


# 🌶️📦🔚
