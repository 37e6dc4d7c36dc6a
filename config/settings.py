"""
Configuration settings for the What To Eat engine.
Scoring constants are exposed here so the bonus:jitter regime is explicit.
"""

from pathlib import Path
from pydantic_settings import BaseSettings
from functools import lru_cache


DEFAULT_DATA_DIR = Path(__file__).resolve().parent.parent / "whattoeat" / "data"


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Application settings
    app_name: str = "What To Eat"
    app_version: str = "1.0.0"
    debug: bool = False

    # Server settings
    host: str = "0.0.0.0"
    port: int = 5000

    # Data paths
    data_dir: str = str(DEFAULT_DATA_DIR)
    catalog_file: str = "catalog.json"

    # Scoring weights
    search_bonus: float = 100.0
    like_bonus: float = 60.0
    jitter: float = 50.0

    # Sampling pool
    high_score_threshold: float = 45.0
    pool_fraction: float = 0.6

    # Lunch/dinner composition when the caller sends no config
    default_meat_count: int = 1
    default_veg_count: int = 1
    default_soup_count: int = 1

    # Anti-repetition buffer size suggested to callers
    seen_limit: int = 12

    # Presentational pacing in seconds (the original UI used 0.6 / 0.4)
    recommend_delay: float = 0.0
    replace_delay: float = 0.0

    # Search cache settings
    cache_maxsize: int = 100
    cache_ttl: int = 3600

    class Config:
        env_file = ".env"
        env_prefix = "WTE_"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Image search template used for GeneratedDish.image_url
IMAGE_URL_TEMPLATE = "https://tse2.mm.bing.net/th?q={query}&w=800&h=600&c=7&rs=1&p=0"
IMAGE_QUERY_SUFFIX = " 高清美食摄影"
