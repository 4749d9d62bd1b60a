"""
Ingest affirmations from the hosted Supabase backend (PostgREST)
"""
import asyncio
import logging
from typing import Any, List, Optional

import httpx
from pydantic import ValidationError

from ingestion.base import ContentSource, ContentRow

logger = logging.getLogger(__name__)


class SupabaseContentSource(ContentSource):
    name = "supabase"

    def __init__(
        self,
        base_url: str,
        api_key: str,
        table: str = "affirmations",
        timeout: float = 30.0,
        max_retries: int = 3,
        retry_delay: float = 1.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip('/')
        self.api_key = api_key
        self.table = table
        self.timeout = timeout
        self.max_retries = max(1, max_retries)
        self.retry_delay = retry_delay
        self.transport = transport

    @property
    def url(self) -> str:
        return f"{self.base_url}/rest/v1/{self.table}"

    @property
    def headers(self) -> dict:
        return {
            "apikey": self.api_key,
            "Authorization": f"Bearer {self.api_key}",
            "Accept": "application/json",
        }

    async def _get_with_retry(self, client: httpx.AsyncClient) -> httpx.Response:
        """
        GET the table, retrying connection failures and timeouts.
        """
        last_exception: Optional[Exception] = None

        for attempt in range(1, self.max_retries + 1):
            try:
                return await client.get(
                    self.url,
                    params={"select": "*", "order": "id.asc"},
                    headers=self.headers,
                )
            except (httpx.ConnectError, httpx.TimeoutException) as e:
                last_exception = e
                logger.warning(
                    f"Attempt {attempt}/{self.max_retries}: {e.__class__.__name__} fetching {self.url}"
                )

            if attempt < self.max_retries:
                await asyncio.sleep(self.retry_delay * attempt)

        raise last_exception or httpx.ConnectError("All connection attempts failed")

    def _parse_rows(self, data: Any) -> List[ContentRow]:
        if not isinstance(data, list):
            logger.warning(f"Unexpected payload from {self.url}: {type(data).__name__}")
            return []

        rows: List[ContentRow] = []
        for entry in data:
            try:
                rows.append(ContentRow.model_validate(entry))
            except ValidationError as e:
                logger.warning(f"Skipping invalid content row: {e.error_count()} error(s)")
        return rows

    async def fetch_rows(self) -> List[ContentRow]:
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                resp = await self._get_with_retry(client)
                resp.raise_for_status()
                rows = self._parse_rows(resp.json())

        except Exception as e:
            # Offline or backend down: the pool loader falls back to the cache
            logger.warning(f"Fetching content from {self.name} failed: {e}")
            return []

        logger.info(f"Fetched {len(rows)} content rows from {self.name}")
        return rows
