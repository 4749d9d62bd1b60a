"""
Deterministic daily picker.

Every eligible item is scored with a 32-bit string hash of
"{user_id}:{calendar_day}:{item_id}" and the lowest scores win. The same
user sees the same set all day, the set changes the next day, and two users
on the same day get unrelated sets, without any server-side state.
"""
import logging
import struct
from datetime import date
from typing import Iterable, List, Optional

from core.entities import ContentItem, SelectionSeed

logger = logging.getLogger(__name__)

DAILY_PICKS_PER_DAY = 5

_INT32_MASK = 0xFFFFFFFF
_INT32_SIGN = 0x80000000


def today_str() -> str:
    """Today's date in local time, formatted YYYY-MM-DD."""
    return date.today().isoformat()


def string_hash(value: str) -> int:
    """
    Versioned selection hash; changing it changes every user's picks.

    acc = int32(acc * 31 + unit) over the UTF-16 code units of `value`,
    then the absolute value. abs() is taken on a Python int, so the
    most-negative int32 maps to 2147483648 instead of overflowing.
    """
    acc = 0
    encoded = value.encode("utf-16-le", errors="surrogatepass")
    for (unit,) in struct.iter_unpack("<H", encoded):
        acc = (acc * 31 + unit) & _INT32_MASK
    if acc & _INT32_SIGN:
        acc -= 1 << 32
    return abs(acc)


def filter_by_categories(items: Iterable[ContentItem], enabled_categories: Iterable[str]) -> List[ContentItem]:
    enabled = set(enabled_categories)
    return [item for item in items if item.category in enabled]


def pick_daily(
    pool: List[ContentItem],
    enabled_categories: Iterable[str],
    user_id: str,
    count: int = DAILY_PICKS_PER_DAY,
    today: Optional[str] = None,
) -> List[ContentItem]:
    """
    Pick today's items for a user.

    Returns every eligible item when there are no more than `count` of them,
    and an empty list when no category is enabled.
    """
    eligible = filter_by_categories(pool, enabled_categories)

    if not eligible:
        return []
    if len(eligible) <= count:
        return eligible

    seed = SelectionSeed(user_id=user_id, calendar_day=today or today_str())

    # sorted() is stable, so equal hashes keep their filtered order
    ranked = sorted(eligible, key=lambda item: string_hash(seed.hash_key(item.id)))

    logger.debug(f"Picked {count} of {len(eligible)} eligible items for {seed.user_id} on {seed.calendar_day}")
    return ranked[:count]
