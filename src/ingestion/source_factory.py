"""
Source Factory - Creates the remote content source from configuration.
"""
import logging
from typing import Optional

from ingestion.base import ContentSource
from ingestion.supabase import SupabaseContentSource
from services.config import Config

logger = logging.getLogger(__name__)


def create_content_source(config: Config) -> Optional[ContentSource]:
    """
    Create the remote content source from configuration.

    Args:
        config: Application configuration

    Returns:
        Configured ContentSource, or None when the backend is not configured
    """
    if not config.SUPABASE_URL or not config.SUPABASE_ANON_KEY:
        logger.warning("Supabase is not configured, content will come from cache or the bundled pool")
        return None

    source = SupabaseContentSource(
        base_url=config.SUPABASE_URL,
        api_key=config.SUPABASE_ANON_KEY,
        table=config.SUPABASE_TABLE,
        timeout=config.SUPABASE_TIMEOUT,
        max_retries=config.SUPABASE_MAX_RETRIES,
    )
    logger.info(f"Created {source.name} content source: {source.url}")
    return source
