"""Configuration management for the Threadle puzzle service."""

from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_SUBREDDITS = [
    "AskReddit",
    "tifu",
    "todayilearned",
    "explainlikeimfive",
    "unpopularopinion",
    "AmItheAsshole",
    "relationship_advice",
    "LifeProTips",
    "Showerthoughts",
    "mildlyinfuriating",
]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Reddit API
    reddit_client_id: Optional[str] = Field(None)
    reddit_client_secret: Optional[str] = Field(None)
    reddit_user_agent: str = Field("threadle/1.0 (daily comment puzzle)")

    # Redis Configuration
    redis_url: str = Field("redis://localhost:6379")

    # Application Settings
    environment: str = Field("development")
    log_level: str = Field("INFO")
    api_host: str = Field("0.0.0.0")
    api_port: int = Field(8000)

    # Puzzle Construction
    puzzle_subreddits: List[str] = Field(default_factory=lambda: list(DEFAULT_SUBREDDITS))
    recent_items_limit: int = Field(10, ge=1)
    replies_limit: int = Field(10, ge=1)
    comments_per_puzzle: int = Field(5, ge=1)
    min_reply_count: int = Field(6, ge=0)
    provider_timeout_seconds: float = Field(10.0, gt=0)

    # Daily Cache
    daily_cache_ttl_seconds: int = Field(25 * 60 * 60, gt=24 * 60 * 60)
    cache_key_prefix: str = Field("puzzle_")

    # Reveal Policy
    max_attempts: int = Field(6, ge=1)
    words_per_attempt: int = Field(2, ge=0)
    max_revealed_words: int = Field(8, ge=0)

    @property
    def reddit_configured(self) -> bool:
        return bool(self.reddit_client_id and self.reddit_client_secret)


def get_settings() -> Settings:
    """Get application settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
