"""Pytest fixtures for Parish tests."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date
from uuid import uuid4

import pytest

from parish.domain.entities import EventTemplate
from parish.domain.exceptions import NotFound
from parish.domain.services import (
    AccessEvaluator,
    RecurrenceExpander,
    RoleRegistry,
    build_default_registry,
)
from parish.domain.value_objects import RecurrencePattern


# --- Fake document store ---


class FakeDocumentStore:
    """In-memory document store keyed by collection name."""

    def __init__(self) -> None:
        self._collections: dict[str, dict[str, dict]] = {}
        self.fail_when: Callable[[dict], bool] | None = None
        self.create_calls = 0

    async def create(self, collection: str, record: dict) -> dict:
        self.create_calls += 1
        if self.fail_when and self.fail_when(record):
            raise ConnectionError("write rejected")
        doc_id = str(uuid4())
        stored = {**record, "id": doc_id}
        self._collections.setdefault(collection, {})[doc_id] = stored
        return dict(stored)

    async def get(self, collection: str, document_id: str) -> dict | None:
        record = self._collections.get(collection, {}).get(document_id)
        return dict(record) if record else None

    async def list(self, collection: str) -> list[dict]:
        return [dict(r) for r in self._collections.get(collection, {}).values()]

    async def update(self, collection: str, document_id: str, patch: dict) -> dict:
        records = self._collections.get(collection, {})
        if document_id not in records:
            raise NotFound(collection, document_id)
        records[document_id] = {**records[document_id], **patch, "id": document_id}
        return dict(records[document_id])

    async def delete(self, collection: str, document_id: str) -> None:
        records = self._collections.get(collection, {})
        if document_id not in records:
            raise NotFound(collection, document_id)
        del records[document_id]

    def seed(self, collection: str, records: list[dict]) -> list[str]:
        """Helper to insert records synchronously (for tests)."""
        ids = []
        for record in records:
            doc_id = record.get("id") or str(uuid4())
            self._collections.setdefault(collection, {})[doc_id] = {**record, "id": doc_id}
            ids.append(doc_id)
        return ids

    def records(self, collection: str) -> list[dict]:
        return list(self._collections.get(collection, {}).values())


# --- Builders ---


def make_template(**overrides) -> EventTemplate:
    """EventTemplate with sensible defaults; overrides replace any field."""
    fields = {
        "title": "Sunday Worship",
        "start_date": date(2024, 1, 1),
        "description": "Weekly service",
        "time": "10:00",
        "location": "Main Hall",
        "type": "worship",
    }
    fields.update(overrides)
    return EventTemplate(**fields)


def make_recurring(
    pattern: RecurrencePattern,
    start: date,
    end: date,
    days: tuple[int, ...] = (),
    **overrides,
) -> EventTemplate:
    return make_template(
        start_date=start,
        is_recurring=True,
        recurring_pattern=pattern,
        recurring_end_date=end,
        recurring_days=days,
        **overrides,
    )


# --- Fixtures ---


@pytest.fixture
def registry() -> RoleRegistry:
    return build_default_registry()


@pytest.fixture
def access_evaluator(registry: RoleRegistry) -> AccessEvaluator:
    return AccessEvaluator(registry)


@pytest.fixture
def expander() -> RecurrenceExpander:
    return RecurrenceExpander()


@pytest.fixture
def document_store() -> FakeDocumentStore:
    """Fresh in-memory document store for each test."""
    return FakeDocumentStore()
