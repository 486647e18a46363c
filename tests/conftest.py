"""Shared test fixtures."""

import random
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from creature_sim.core.creature.models import Creature
from creature_sim.core.event_bus import EventBus
from creature_sim.main import app
from creature_sim.services.creature_repository import InMemoryCreatureRepository
from creature_sim.services.social_service import SocialService

FIXED_NOW = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


class FakeClock:
    """수동으로 진행시키는 시계"""

    def __init__(self, start: datetime = FIXED_NOW) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture()
def make_creature(clock, rng):
    """Creature 팩토리 (고정 시계 + 시드 rng)"""

    def _make(creature_id: str, name: str = "", **kwargs) -> Creature:
        return Creature(
            id=creature_id,
            name=name or creature_id.title(),
            rng=kwargs.pop("rng", rng),
            clock=kwargs.pop("clock", clock),
            **kwargs,
        )

    return _make


@pytest.fixture()
def event_bus() -> EventBus:
    return EventBus()


@pytest.fixture()
def social_service(event_bus, clock) -> SocialService:
    """인메모리 저장소 + EventBus + SocialService"""
    return SocialService(
        repository=InMemoryCreatureRepository(),
        event_bus=event_bus,
        rng=random.Random(42),
        clock=clock,
    )


@pytest.fixture()
def client(social_service) -> TestClient:
    """FastAPI TestClient wired to a fresh in-memory SocialService."""
    app.state.social_service = social_service
    return TestClient(app)
