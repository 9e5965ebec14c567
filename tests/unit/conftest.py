"""Shared fixtures for unit tests."""

import asyncio
from dataclasses import asdict
from typing import Any
from unittest.mock import AsyncMock
from uuid import UUID, uuid4

import pytest

from domain.entities.profile import ProfileRecord, ProfileUpdate


class FakeUnitOfWork:
    """Fake Unit of Work with a profile repository mock for unit testing."""

    def __init__(self) -> None:
        self.profiles = AsyncMock()
        self.committed = False
        self.rolled_back = False

    async def commit(self) -> None:
        self.committed = True

    async def rollback(self) -> None:
        self.rolled_back = True

    async def __aenter__(self) -> "FakeUnitOfWork":
        return self

    async def __aexit__(self, *args: Any) -> None:
        pass


class FakeProfileStore:
    """In-memory IProfileStore.

    Calls read their inputs on entry. ``fail_with`` makes calls raise.
    ``hold()`` queues an event that the next call waits on before
    answering, so a test decides the order in which concurrent calls
    complete.
    """

    def __init__(self) -> None:
        self.records: dict[UUID, ProfileRecord] = {}
        self.fail_with: Exception | None = None
        self.upserts: list[ProfileUpdate] = []
        self._gates: list[asyncio.Event] = []

    def hold(self) -> asyncio.Event:
        gate = asyncio.Event()
        self._gates.append(gate)
        return gate

    async def _wait_turn(self) -> None:
        if self._gates:
            await self._gates.pop(0).wait()
        else:
            await asyncio.sleep(0)

    async def get(self, identity: UUID) -> ProfileRecord | None:
        fail_with = self.fail_with
        record = self.records.get(identity)
        await self._wait_turn()
        if fail_with:
            raise fail_with
        return record

    async def upsert(self, identity: UUID, update: ProfileUpdate) -> ProfileRecord:
        fail_with = self.fail_with
        await self._wait_turn()
        if fail_with:
            raise fail_with
        self.upserts.append(update)
        self.records[identity] = ProfileRecord(id=identity, **asdict(update))
        return self.records[identity]


@pytest.fixture
def uow() -> FakeUnitOfWork:
    """Create a fresh FakeUnitOfWork."""
    return FakeUnitOfWork()


@pytest.fixture
def store() -> FakeProfileStore:
    """Create an empty FakeProfileStore."""
    return FakeProfileStore()


@pytest.fixture
def user_id() -> UUID:
    """A random user ID."""
    return uuid4()


@pytest.fixture
def email() -> str:
    """Session email paired with ``user_id``."""
    return "u1@x.com"
