"""
Daily selection cache and the engine entry point.

The cache is a single slot: it remembers the most recent (day, user)
selection only. A different user on the same device replaces it.
"""
import logging
from typing import Callable, Iterable, List, Optional

from pydantic import ValidationError

from core.entities import ContentItem, DailySelectionCacheEntry
from core.schemas import DailySelectionSchema
from selection.picker import DAILY_PICKS_PER_DAY, filter_by_categories, pick_daily, today_str
from selection.pool_loader import PoolLoader
from services.kv_store import KeyValueStore

logger = logging.getLogger(__name__)

DAILY_SELECTION_KEY = "daily-selection-cache"


class DailySelectionCache:
    """
    Owns the persisted daily selection slot.
    Storage and payload errors are logged and treated as a miss.
    """

    def __init__(self, store: KeyValueStore, key: str = DAILY_SELECTION_KEY):
        self.store = store
        self.key = key

    async def load(self) -> Optional[DailySelectionCacheEntry]:
        try:
            raw = await self.store.get(self.key)
        except Exception as e:
            logger.warning(f"Could not read daily selection cache: {e}")
            return None

        if not raw:
            return None

        try:
            return DailySelectionSchema.model_validate_json(raw).to_entry()
        except ValidationError as e:
            logger.warning(f"Ignoring corrupt daily selection cache: {e.error_count()} error(s)")
            return None

    async def save(self, entry: DailySelectionCacheEntry) -> bool:
        try:
            await self.store.set(self.key, DailySelectionSchema.from_entry(entry).model_dump_json())
        except Exception as e:
            logger.warning(f"Could not persist daily selection: {e}")
            return False
        return True

    async def clear(self) -> None:
        try:
            await self.store.delete(self.key)
        except Exception as e:
            logger.warning(f"Could not clear daily selection cache: {e}")


class DailySelectionEngine:
    """
    Returns the user's affirmations for today, computing them at most once per (day, user).
    """

    def __init__(
        self,
        loader: PoolLoader,
        cache: DailySelectionCache,
        count: int = DAILY_PICKS_PER_DAY,
        clock: Callable[[], str] = today_str,
    ):
        self.loader = loader
        self.cache = cache
        self.count = count
        self.clock = clock

    async def _cached_selection(self, today: str, enabled: set, user_id: str) -> List[ContentItem]:
        entry = await self.cache.load()
        if entry is None or not entry.is_valid_for(today, user_id):
            return []

        # Categories may have been toggled since the entry was written
        return filter_by_categories(entry.selection, enabled)

    async def get_daily_selection(self, enabled_categories: Iterable[str], user_id: str) -> List[ContentItem]:
        today = self.clock()
        enabled = set(enabled_categories)

        cached = await self._cached_selection(today, enabled, user_id)
        if cached:
            logger.debug(f"Daily selection cache hit for {user_id} on {today}")
            return cached

        pool = await self.loader.load_pool()
        selection = pick_daily(pool, enabled, user_id, count=self.count, today=today)

        await self.cache.save(
            DailySelectionCacheEntry(calendar_day=today, user_id=user_id, selection=selection)
        )

        logger.info(f"Computed {len(selection)} daily items for {user_id} on {today}")
        return selection

    async def invalidate(self) -> None:
        await self.cache.clear()
