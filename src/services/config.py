"""
Loads and handles config from config.yml
Backend credentials (SUPABASE_URL, SUPABASE_ANON_KEY) are loaded from .env for security
"""
import os
from typing import List, Dict, Any, Optional, Set

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel

from core.categories import ALL_CATEGORIES


class CategoryConfig(BaseModel):
    """A category and whether the user has it switched on."""
    name: str
    enabled: bool = True


class Config(BaseModel):
    # Core
    DATABASE_PATH: str = "data/affirm.db"

    # Backend
    SUPABASE_URL: Optional[str] = None
    SUPABASE_ANON_KEY: Optional[str] = None
    SUPABASE_TABLE: str = "affirmations"
    SUPABASE_TIMEOUT: float = 30.0
    SUPABASE_MAX_RETRIES: int = 3

    # Selection
    DAILY_PICKS_PER_DAY: int = 5
    POOL_CACHE_KEY: str = "pool-cache"
    DAILY_SELECTION_KEY: str = "daily-selection-cache"

    categories: List[CategoryConfig] = []


def _bool(value: str | bool) -> bool:
    """Convert string or bool to boolean."""
    if isinstance(value, bool):
        return value
    return str(value).lower() in ("1", "true", "yes", "on")


def _get_config_path() -> str:
    """Get the path to config.yml, handling different working directories."""
    # Try relative path first
    if os.path.exists('resources/config.yml'):
        return 'resources/config.yml'

    # Try from project root
    project_root = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
    config_path = os.path.join(project_root, 'resources', 'config.yml')
    if os.path.exists(config_path):
        return config_path

    raise FileNotFoundError("Cannot find resources/config.yml")


def _parse_categories(data: Any) -> List[CategoryConfig]:
    """
    Accepts either a list of names, a list of {name, enabled} mappings,
    or a {name: enabled} mapping. Missing section means every built-in category is on.
    """
    if not data:
        return [CategoryConfig(name=c.name, enabled=c.enabled) for c in ALL_CATEGORIES.values()]

    if isinstance(data, dict):
        return [CategoryConfig(name=str(name), enabled=_bool(enabled)) for name, enabled in data.items()]

    categories = []
    for entry in data:
        if isinstance(entry, str):
            categories.append(CategoryConfig(name=entry))
        else:
            categories.append(CategoryConfig(
                name=entry.get("name", ""),
                enabled=_bool(entry.get("enabled", True)),
            ))
    return categories


def load_config(path: Optional[str] = None) -> Config:
    """Load configuration from config.yml and backend credentials from .env."""
    # Load .env for sensitive credentials
    load_dotenv()

    config_path = path or _get_config_path()

    with open(config_path, 'r') as file:
        config: Dict[str, Any] = yaml.safe_load(file) or {}

    return Config(
        DATABASE_PATH=config.get("DATABASE_PATH", "data/affirm.db"),

        SUPABASE_URL=os.getenv("SUPABASE_URL") or config.get("SUPABASE_URL"),
        SUPABASE_ANON_KEY=os.getenv("SUPABASE_ANON_KEY") or config.get("SUPABASE_ANON_KEY"),
        SUPABASE_TABLE=config.get("SUPABASE_TABLE", "affirmations"),
        SUPABASE_TIMEOUT=float(config.get("SUPABASE_TIMEOUT", 30.0)),
        SUPABASE_MAX_RETRIES=int(config.get("SUPABASE_MAX_RETRIES", 3)),

        DAILY_PICKS_PER_DAY=int(config.get("DAILY_PICKS_PER_DAY", 5)),
        POOL_CACHE_KEY=config.get("POOL_CACHE_KEY", "pool-cache"),
        DAILY_SELECTION_KEY=config.get("DAILY_SELECTION_KEY", "daily-selection-cache"),

        categories=_parse_categories(config.get("categories")),
    )


def enabled_categories(config: Config) -> Set[str]:
    """Get the names of all enabled categories."""
    return {c.name for c in config.categories if c.enabled}
