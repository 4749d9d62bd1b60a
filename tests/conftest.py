"""
Shared pytest fixtures for the daily selection tests.
"""

import pytest
from typing import List, Optional
from unittest.mock import AsyncMock

from core.entities import ContentItem
from ingestion.base import ContentRow, ContentSource
from services.kv_store import InMemoryKeyValueStore, KeyValueStore


CATEGORIES = ["Self-Love", "Gratitude", "Confidence", "Calm", "Motivation", "Positivity"]

FIXED_DAY = "2026-02-05"


def spread_id(i: int) -> str:
    """Ids whose hashes are spread across the 32-bit range, like real uuids."""
    return format((i * 2654435761) % 2**32, "08x")


def make_pool(size: int = 60) -> List[ContentItem]:
    return [
        ContentItem(
            id=spread_id(i),
            text=f"Affirmation number {i}",
            category=CATEGORIES[i % len(CATEGORIES)],
        )
        for i in range(size)
    ]


# --- Collaborators ---

class FailingStore(KeyValueStore):
    """A store where every operation blows up."""

    async def get(self, key: str) -> Optional[str]:
        raise OSError("disk unavailable")

    async def set(self, key: str, value: str) -> None:
        raise OSError("disk full")

    async def delete(self, key: str) -> None:
        raise OSError("disk unavailable")


def make_source(rows: Optional[List[ContentRow]] = None) -> ContentSource:
    """Mock content source whose fetch_rows call count can be asserted."""
    source = AsyncMock(spec=ContentSource)
    source.name = "mock"
    source.fetch_rows = AsyncMock(return_value=list(rows or []))
    return source


def rows_from_pool(pool: List[ContentItem]) -> List[ContentRow]:
    return [
        ContentRow(id=item.id, text=item.text, category=item.category, image_url=item.image or None)
        for item in pool
    ]


# --- Fixtures ---

@pytest.fixture
def pool() -> List[ContentItem]:
    return make_pool()


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def failing_store() -> FailingStore:
    return FailingStore()


@pytest.fixture
def fixed_clock():
    """A clock pinned to FIXED_DAY."""
    return lambda: FIXED_DAY
