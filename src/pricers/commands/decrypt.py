#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Decrypt command for the pricer CLI."""

from __future__ import annotations

import click
from provide.foundation import logger
from provide.foundation.console import perr, pout

from pricers.commands.options import build_pricer, pricer_options, resolve_config
from pricers.exceptions import IntegrityError, PricerError


@click.command("decrypt")
@click.argument("token", type=str, required=True)
@pricer_options
@click.pass_context
def decrypt_command(
    ctx: click.Context,
    token: str,
    encryption_key: str | None,
    integrity_key: str | None,
    key_decoding: str | None,
    scale_factor: float | None,
    micros: bool,
    debug: bool,
) -> None:
    """Decrypts and verifies a DoubleClick TOKEN."""
    logger.debug("Decrypting token", micros=micros)

    try:
        config = resolve_config(ctx, encryption_key, integrity_key, key_decoding, scale_factor)
        pricer = build_pricer(config, debug)
        price: int | float = pricer.decrypt_micros(token, debug=debug) if micros else pricer.decrypt(token, debug=debug)
    except IntegrityError as e:
        logger.warning("Token failed integrity check")
        perr(f"❌ Integrity check failed: {e}")
        raise click.Abort() from e
    except PricerError as e:
        logger.error("Decryption failed", error=str(e))
        perr(f"❌ Decryption failed: {e}")
        raise click.Abort() from e

    pout(str(price))


# 🌶️📦🔚
