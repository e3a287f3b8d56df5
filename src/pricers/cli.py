#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Pricer command-line interface entrypoint."""

from __future__ import annotations

from attrs import evolve
import click
from provide.foundation import TelemetryConfig, get_hub
from provide.foundation.utils import get_version

from pricers.commands.decrypt import decrypt_command
from pricers.commands.encrypt import encrypt_command
from pricers.config import PricerRuntimeConfig
from pricers.config.defaults import SERVICE_NAME

__version__ = get_version("openrtb-pricers", caller_file=__file__)


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.version_option(
    __version__,
    "-V",
    "--version",
    prog_name="pricer",
    message="%(prog)s version %(version)s",
)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """OpenRTB price encryption tool (DoubleClick scheme).

    Configure via environment variables:
    - PRICER_ENCRYPTION_KEY / PRICER_INTEGRITY_KEY: Exchange keys
    - PRICER_KEY_DECODING: hex, base64, urlsafe_base64 or plain
    - PRICER_SCALE_FACTOR: Units per currency unit (default 1000000)
    - PRICER_LOG_LEVEL: Log level (trace, debug, info, warning, error)
    """
    ctx.ensure_object(dict)

    # Load pricer configuration from environment
    pricer_config = PricerRuntimeConfig.from_env()

    # Get base telemetry config from environment
    base_telemetry = TelemetryConfig.from_env()

    # Merge with pricer-specific settings
    telemetry_config = evolve(
        base_telemetry,
        service_name=SERVICE_NAME,
        logging=evolve(
            base_telemetry.logging,
            default_level=pricer_config.log_level,  # type: ignore[arg-type]
        ),
    )

    hub = get_hub()
    hub.initialize_foundation(telemetry_config)

    ctx.obj["config"] = pricer_config


cli.add_command(encrypt_command, name="encrypt")
cli.add_command(decrypt_command, name="decrypt")

main = cli

if __name__ == "__main__":
    cli()

# 🌶️📦🔚
