"""
Selection module - Deterministic daily affirmation selection.
"""
from selection.daily_cache import DailySelectionCache, DailySelectionEngine
from selection.engine_factory import create_engine_from_config
from selection.picker import pick_daily, string_hash
from selection.pool_loader import PoolLoader

__all__ = [
    "DailySelectionCache",
    "DailySelectionEngine",
    "PoolLoader",
    "create_engine_from_config",
    "pick_daily",
    "string_hash",
]
