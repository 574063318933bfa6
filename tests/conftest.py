"""Shared pytest fixtures for footwork tests."""

from __future__ import annotations

import pytest

from footwork.core.catalog import FootworkCatalog, build_default_catalog
from footwork.core.planning.generator import PlanGenerator
from footwork.core.planning.models import Plan, Tempo

# ============================================================================
# Clock
# ============================================================================


class FakeClock:
    """Manually advanced millisecond clock."""

    def __init__(self, start: float = 0.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


@pytest.fixture
def clock() -> FakeClock:
    """Fake clock starting at t=0."""
    return FakeClock()


# ============================================================================
# Catalog / Plan Fixtures
# ============================================================================


@pytest.fixture
def catalog() -> FootworkCatalog:
    """Fresh builtin catalog."""
    return build_default_catalog()


@pytest.fixture
def generator(catalog: FootworkCatalog) -> PlanGenerator:
    return PlanGenerator(catalog)


@pytest.fixture
def default_tempo() -> Tempo:
    """Speed 1.0, reaction 180 ms."""
    return Tempo(speed_multiplier=1.0, reaction_ms=180.0)


@pytest.fixture
def front_plan(generator: PlanGenerator, default_tempo: Tempo) -> Plan:
    """F_C plan: SPLIT 220 -> LUNGE_FH 420 -> RECOVER 520, reaction 180."""
    return generator.plan("F_C", default_tempo)


@pytest.fixture
def rear_plan(generator: PlanGenerator, default_tempo: Tempo) -> Plan:
    """R_L plan: SPLIT -> CROSS_TO_REAR -> SCISSOR -> RECOVER."""
    return generator.plan("R_L", default_tempo)
