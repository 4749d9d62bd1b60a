"""
PoolLoader - resolves today's content pool.
Priority: remote source -> key-value cache -> bundled defaults.
"""
import logging
from typing import Callable, List, Optional

from core.bundled import bundled_pool
from core.categories import category_image
from core.entities import ContentItem
from core.schemas import dump_pool, parse_pool
from ingestion.base import ContentRow, ContentSource
from services.kv_store import KeyValueStore

logger = logging.getLogger(__name__)

POOL_CACHE_KEY = "pool-cache"


def row_to_item(row: ContentRow, image_lookup: Callable[[str], str] = category_image) -> ContentItem:
    """Convert a backend row to a ContentItem, borrowing the category image when the row has none."""
    return ContentItem(
        id=row.id,
        text=row.text,
        category=row.category,
        image=row.image_url or image_lookup(row.category) or "",
    )


class PoolLoader:
    """
    Loads the full content pool. Never raises.
    """

    def __init__(
        self,
        store: KeyValueStore,
        source: Optional[ContentSource] = None,
        cache_key: str = POOL_CACHE_KEY,
        default_pool: Optional[List[ContentItem]] = None,
        image_lookup: Callable[[str], str] = category_image,
    ):
        self.store = store
        self.source = source
        self.cache_key = cache_key
        self.default_pool = default_pool if default_pool is not None else bundled_pool()
        self.image_lookup = image_lookup

    async def _fetch_remote(self) -> List[ContentRow]:
        if self.source is None:
            return []
        try:
            return await self.source.fetch_rows()
        except Exception as e:
            logger.error(f"Source {self.source.__class__.__name__} failed: {e}")
            return []

    async def _write_cache(self, pool: List[ContentItem]) -> None:
        try:
            await self.store.set(self.cache_key, dump_pool(pool))
        except Exception as e:
            logger.warning(f"Could not cache content pool: {e}")

    async def _read_cache(self) -> List[ContentItem]:
        try:
            raw = await self.store.get(self.cache_key)
        except Exception as e:
            logger.warning(f"Could not read cached content pool: {e}")
            return []

        if not raw:
            return []

        try:
            return parse_pool(raw)
        except (ValueError, TypeError) as e:
            logger.warning(f"Ignoring corrupt cached content pool: {e}")
            return []

    async def load_pool(self) -> List[ContentItem]:
        rows = await self._fetch_remote()
        if rows:
            pool = [row_to_item(row, self.image_lookup) for row in rows]
            await self._write_cache(pool)
            logger.info(f"Loaded {len(pool)} items from remote source")
            return pool

        cached = await self._read_cache()
        if cached:
            logger.info(f"Loaded {len(cached)} items from cache")
            return cached

        logger.info(f"Falling back to bundled pool ({len(self.default_pool)} items)")
        return list(self.default_pool)
