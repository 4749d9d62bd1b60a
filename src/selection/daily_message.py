"""
Day-keyed helpers for the reminder notification and the home-screen widget
"""
from datetime import date
from typing import List, Optional

from core.bundled import BUNDLED_POOL
from core.entities import ContentItem


NOTIFICATION_MESSAGES = [
    "Your daily affirmation is waiting for you",
    "Start your day with a powerful thought",
    "A moment of positivity awaits you",
    "Take a deep breath, your affirmation is ready",
    "Time for your daily dose of inspiration",
    "Your mind deserves this moment of peace",
    "Ready for today's affirmation? Open up!",
    "A little reminder: you are amazing. See today's affirmation",
]


def notification_message(today: Optional[date] = None) -> str:
    """Reminder text for the day; rotates with the day of the month."""
    today = today or date.today()
    return NOTIFICATION_MESSAGES[today.day % len(NOTIFICATION_MESSAGES)]


def widget_day_index(today: date) -> int:
    # zero-based month
    return today.year * 366 + (today.month - 1) * 31 + today.day


def widget_item(
    pool: Optional[List[ContentItem]] = None,
    today: Optional[date] = None,
) -> Optional[ContentItem]:
    """
    The widget's item of the day. Same for every user, uses the bundled pool by default.
    """
    pool = BUNDLED_POOL if pool is None else pool
    if not pool:
        return None
    today = today or date.today()
    return pool[widget_day_index(today) % len(pool)]
