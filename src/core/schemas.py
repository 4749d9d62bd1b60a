"""
Pydantic schemas for the JSON payloads kept in the key-value store
"""
import json
from typing import List

from pydantic import BaseModel

from core.entities import ContentItem, DailySelectionCacheEntry


class ContentItemSchema(BaseModel):
    """
    Serialized form of a ContentItem
    """
    id: str
    text: str
    category: str
    image: str = ""

    @classmethod
    def from_item(cls, item: ContentItem) -> "ContentItemSchema":
        return cls(id=item.id, text=item.text, category=item.category, image=item.image)

    def to_item(self) -> ContentItem:
        return ContentItem(id=self.id, text=self.text, category=self.category, image=self.image)


class DailySelectionSchema(BaseModel):
    """
    Serialized form of the daily selection slot
    """
    calendar_day: str
    user_id: str
    selection: List[ContentItemSchema] = []

    @classmethod
    def from_entry(cls, entry: DailySelectionCacheEntry) -> "DailySelectionSchema":
        return cls(
            calendar_day=entry.calendar_day,
            user_id=entry.user_id,
            selection=[ContentItemSchema.from_item(item) for item in entry.selection],
        )

    def to_entry(self) -> DailySelectionCacheEntry:
        return DailySelectionCacheEntry(
            calendar_day=self.calendar_day,
            user_id=self.user_id,
            selection=[item.to_item() for item in self.selection],
        )


def dump_pool(pool: List[ContentItem]) -> str:
    return json.dumps([ContentItemSchema.from_item(item).model_dump() for item in pool])


def parse_pool(raw: str) -> List[ContentItem]:
    """
    Parse a cached pool payload.
    Raises ValueError (json.JSONDecodeError, pydantic.ValidationError) or TypeError on bad payloads.
    """
    data = json.loads(raw)
    if not isinstance(data, list):
        raise TypeError(f"Expected a JSON array, got {type(data).__name__}")
    return [ContentItemSchema.model_validate(entry).to_item() for entry in data]
