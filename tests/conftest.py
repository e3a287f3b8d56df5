#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shared pytest fixtures and helpers for pricer tests."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import provide.testkit  # noqa: F401 - Installs setproctitle blocker early
from provide.testkit.logger import reset_foundation_setup_for_testing
import pytest

from pricers.doubleclick import DoubleClickPricer
from pricers.tracing import NullTracer

# Fixed 32-byte keys so failures reproduce
ENCRYPTION_KEY_HEX = "b2453b031fcd2f9a4f005c8a7647d98d9cf6f9584837c6e38f5ad514e689ff9a"
INTEGRITY_KEY_HEX = "6ab3b6df291d36a510e4b12843415598f90177bc41e423bcf4f0d99528e9171a"
SCALE_FACTOR = 1_000_000.0


class RecordingTracer:
    """Collects trace events for assertions."""

    def __init__(self) -> None:
        self.events: list[tuple[str, dict[str, Any]]] = []

    def trace(self, event: str, **fields: Any) -> None:
        self.events.append((event, fields))

    @property
    def names(self) -> list[str]:
        return [name for name, _ in self.events]


class ExplodingTracer:
    """Fails on every trace event."""

    def trace(self, event: str, **fields: Any) -> None:
        raise RuntimeError("tracer is broken")


@pytest.fixture(autouse=True)
def reset_foundation_logging() -> Iterator[None]:
    """Reset foundation logging state before each test to avoid conflicts."""
    reset_foundation_setup_for_testing()
    yield
    reset_foundation_setup_for_testing()


@pytest.fixture
def encryption_key_hex() -> str:
    return ENCRYPTION_KEY_HEX


@pytest.fixture
def integrity_key_hex() -> str:
    return INTEGRITY_KEY_HEX


@pytest.fixture
def encryption_key() -> bytes:
    return bytes.fromhex(ENCRYPTION_KEY_HEX)


@pytest.fixture
def integrity_key() -> bytes:
    return bytes.fromhex(INTEGRITY_KEY_HEX)


@pytest.fixture
def pricer() -> DoubleClickPricer:
    """Pricer with the fixed test keys and micros scale."""
    return DoubleClickPricer.from_keys(
        ENCRYPTION_KEY_HEX,
        INTEGRITY_KEY_HEX,
        key_decoding="hex",
        scale_factor=SCALE_FACTOR,
        tracer=NullTracer(),
    )


@pytest.fixture
def recording_tracer() -> RecordingTracer:
    return RecordingTracer()


@pytest.fixture
def exploding_tracer() -> ExplodingTracer:
    return ExplodingTracer()


@pytest.fixture(autouse=True)
def clear_pricer_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's environment out of configuration tests."""
    for name in (
        "PRICER_LOG_LEVEL",
        "PRICER_ENCRYPTION_KEY",
        "PRICER_INTEGRITY_KEY",
        "PRICER_KEY_DECODING",
        "PRICER_SCALE_FACTOR",
    ):
        monkeypatch.delenv(name, raising=False)


# 🌶️📦🔚
