#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Diagnostic tracing collaborators for the pricers.

Pricers never log through global state while encrypting or decrypting. They
hand trace events to an injected tracer, and only when debug is enabled.
"""

from __future__ import annotations

import contextlib
from typing import Any, Protocol, runtime_checkable

from attrs import define, field
from provide.foundation import logger


@runtime_checkable
class PriceTracer(Protocol):
    """Receives structured trace events from a pricer."""

    def trace(self, event: str, **fields: Any) -> None: ...


def _render(value: Any) -> Any:
    if isinstance(value, bytes | bytearray):
        return bytes(value).hex()
    return value


@define(frozen=True)
class LoggerTracer:
    """Forward trace events to the foundation structured logger at DEBUG level."""

    prefix: str = field(default="💲")
    log: Any = field(default=logger)

    def trace(self, event: str, **fields: Any) -> None:
        rendered = {name: _render(value) for name, value in fields.items()}
        self.log.debug(f"{self.prefix} {event}", **rendered)


@define(frozen=True)
class NullTracer:
    """Discard every trace event."""

    def trace(self, event: str, **fields: Any) -> None:
        return None


def safe_trace(tracer: PriceTracer, event: str, **fields: Any) -> None:
    """Emit a trace event; tracer failures never reach the caller."""
    with contextlib.suppress(Exception):
        tracer.trace(event, **fields)


# 🌶️📦🔚
