"""
Engine Factory - Wires the daily selection engine from configuration.
"""
import logging
from typing import Optional

from ingestion.base import ContentSource
from ingestion.source_factory import create_content_source
from selection.daily_cache import DailySelectionCache, DailySelectionEngine
from selection.pool_loader import PoolLoader
from services.config import Config
from services.kv_store import KeyValueStore, SqliteKeyValueStore

logger = logging.getLogger(__name__)


def create_engine_from_config(
    config: Config,
    store: Optional[KeyValueStore] = None,
    source: Optional[ContentSource] = None,
) -> DailySelectionEngine:
    """
    Factory function to create the daily selection engine.

    Args:
        config: Application configuration
        store: Key-value store to use instead of the configured SQLite file
        source: Content source to use instead of the configured backend

    Returns:
        Configured DailySelectionEngine instance
    """
    store = store or SqliteKeyValueStore(config.DATABASE_PATH)
    source = source or create_content_source(config)

    loader = PoolLoader(
        store=store,
        source=source,
        cache_key=config.POOL_CACHE_KEY,
    )
    cache = DailySelectionCache(store, key=config.DAILY_SELECTION_KEY)

    logger.info(
        f"Created daily selection engine (picks={config.DAILY_PICKS_PER_DAY}, "
        f"source={source.name if source else 'none'}, store={store.__class__.__name__})"
    )
    return DailySelectionEngine(loader=loader, cache=cache, count=config.DAILY_PICKS_PER_DAY)
