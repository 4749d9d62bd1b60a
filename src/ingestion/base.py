"""
Base classes for content ingestion
"""
from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel


class ContentRow(BaseModel):
    """
    A row of the backend `affirmations` table
    """
    id: str
    text: str
    category: str
    image_url: Optional[str] = None
    is_premium: bool = False
    created_at: Optional[datetime] = None


class ContentSource(ABC):
    """
    Base interface for all remote content sources.
    """

    name: str

    @abstractmethod
    async def fetch_rows(self) -> List[ContentRow]:
        """
        Fetch every content row.
        Must NEVER raise uncaught exceptions; failures yield an empty list.
        """
        raise NotImplementedError
