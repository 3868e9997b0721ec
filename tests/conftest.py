"""
Pytest configuration and fixtures
"""
import asyncio
import random

import pytest

from satire_api.core.engine import RequestOrchestrator
from satire_api.fallback.generator import FallbackGenerator
from satire_api.llm.provider_config import ServiceConfig


class StaticGenerator:
    """Text generator returning a fixed payload and recording instructions."""

    def __init__(self, text):
        self.text = text
        self.calls = []

    async def __call__(self, instruction):
        self.calls.append(instruction)
        return self.text


class HangingGenerator:
    """Text generator that never answers until cancelled."""

    def __init__(self):
        self.calls = 0
        self.cancelled = False

    async def __call__(self, instruction):
        self.calls += 1
        try:
            await asyncio.Event().wait()
        except asyncio.CancelledError:
            self.cancelled = True
            raise


class RaisingGenerator:
    def __init__(self, exc):
        self.exc = exc

    async def __call__(self, instruction):
        raise self.exc


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep real credentials and service knobs out of unit tests."""
    for name in (
        "PROVIDER",
        "XAI_API_KEY",
        "XAI_MODEL",
        "MODEL_NAME",
        "SATIRE_UPSTREAM_TIMEOUT_SECONDS",
        "SATIRE_FALLBACK_MODE",
        "SATIRE_INSTRUCTION_VARIANT",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def seeded_fallback():
    return FallbackGenerator("templated", rng=random.Random(7))


@pytest.fixture
def configured():
    """Config with a credential and a short deadline."""
    return ServiceConfig(api_key="test-key", timeout_seconds=0.2)


@pytest.fixture
def unconfigured():
    return ServiceConfig(api_key=None)


@pytest.fixture
def make_orchestrator(seeded_fallback):
    def _make(config, text_generator=None):
        return RequestOrchestrator(
            config=config,
            text_generator=text_generator,
            fallback_generator=seeded_fallback,
        )
    return _make
