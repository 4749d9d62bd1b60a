"""
Tests for the reminder text and widget item of the day.
"""

from datetime import date

from core.bundled import BUNDLED_POOL
from selection.daily_message import (
    NOTIFICATION_MESSAGES,
    notification_message,
    widget_day_index,
    widget_item,
)

from conftest import make_pool


def test_notification_rotates_with_day_of_month():
    assert notification_message(date(2026, 3, 1)) == NOTIFICATION_MESSAGES[1]
    assert notification_message(date(2026, 3, 8)) == NOTIFICATION_MESSAGES[0]
    assert notification_message(date(2026, 3, 9)) == notification_message(date(2026, 7, 9))


def test_widget_day_index_uses_zero_based_month():
    assert widget_day_index(date(2026, 1, 1)) == 2026 * 366 + 1
    assert widget_day_index(date(2026, 2, 5)) == 2026 * 366 + 31 + 5


def test_widget_item_from_bundled_pool():
    today = date(2026, 2, 5)
    expected = BUNDLED_POOL[(2026 * 366 + 31 + 5) % len(BUNDLED_POOL)]

    assert widget_item(today=today) == expected


def test_widget_item_changes_daily():
    pool = make_pool(10)
    assert widget_item(pool, date(2026, 2, 5)) != widget_item(pool, date(2026, 2, 6))


def test_widget_item_empty_pool():
    assert widget_item([], date(2026, 2, 5)) is None
