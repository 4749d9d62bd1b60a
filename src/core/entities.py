from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import List, Dict, Any


@dataclass(frozen=True)
class ContentItem:
    """
    A single affirmation as shown to the user.
    Identity is `id`; other fields may differ between remote, cache and bundled copies.
    """
    id: str
    text: str
    category: str
    image: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class SelectionSeed:
    """
    Deterministic input of the picker: who is asking, and on which local day.
    """
    user_id: str
    calendar_day: str

    def hash_key(self, item_id: str) -> str:
        return f"{self.user_id}:{self.calendar_day}:{item_id}"


@dataclass
class DailySelectionCacheEntry:
    """
    The persisted daily selection. Only reusable on the same day for the same user.
    """
    calendar_day: str
    user_id: str
    selection: List[ContentItem] = field(default_factory=list)

    def is_valid_for(self, calendar_day: str, user_id: str) -> bool:
        return (
            self.calendar_day == calendar_day
            and self.user_id == user_id
            and len(self.selection) > 0
        )


@dataclass(frozen=True)
class CategoryDef:
    """
    Declarative category definition.
    """
    name: str
    icon: str
    description: str
    image: str
    enabled: bool = True
