#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Encrypt command for the pricer CLI."""

from __future__ import annotations

import click
from provide.foundation import logger
from provide.foundation.console import perr, pout

from pricers.commands.options import build_pricer, pricer_options, resolve_config
from pricers.exceptions import PricerError


@click.command("encrypt")
@click.argument("price", type=str, required=True)
@click.option(
    "--seed",
    required=True,
    help="Per-impression seed the initialization vector is derived from",
)
@pricer_options
@click.pass_context
def encrypt_command(
    ctx: click.Context,
    price: str,
    seed: str,
    encryption_key: str | None,
    integrity_key: str | None,
    key_decoding: str | None,
    scale_factor: float | None,
    micros: bool,
    debug: bool,
) -> None:
    """Encrypts PRICE into a web-safe DoubleClick token."""
    logger.debug("Encrypting price", seed=seed, micros=micros)

    try:
        value: int | float = int(price) if micros else float(price)
    except ValueError as e:
        raise click.BadParameter(f"{price!r} is not a valid {'integer' if micros else 'number'}") from e

    try:
        config = resolve_config(ctx, encryption_key, integrity_key, key_decoding, scale_factor)
        pricer = build_pricer(config, debug)
        if micros:
            token = pricer.encrypt_micros(seed, int(value), debug=debug)
        else:
            token = pricer.encrypt(seed, value, debug=debug)
    except PricerError as e:
        logger.error("Encryption failed", error=str(e))
        perr(f"❌ Encryption failed: {e}")
        raise click.Abort() from e

    pout(token)


# 🌶️📦🔚
