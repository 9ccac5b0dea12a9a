"""Settings for neo-resources.

Values come from ``NEO_RESOURCES_*`` environment variables or a ``.env`` file.
"""

import re
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_IDENTIFIER = re.compile(r"^[a-z_][a-z0-9_]*$")


class ResourceAclSettings(BaseSettings):
    """Runtime configuration for stores, caching and pagination."""

    model_config = SettingsConfigDict(
        env_prefix="NEO_RESOURCES_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field(default="neo-resources")

    # Database Configuration
    database_url: str = Field(default="postgresql://localhost:5432/neo_resources")
    db_schema: str = Field(default="public")
    db_pool_min_size: int = Field(default=2, ge=0)
    db_pool_max_size: int = Field(default=10, ge=1)
    db_command_timeout: float = Field(default=60.0, gt=0)

    # Ownership cache
    redis_url: Optional[str] = Field(default=None)
    ownership_cache_enabled: bool = Field(default=False)
    ownership_cache_ttl: int = Field(default=300, ge=1)  # 5 minutes
    cache_key_prefix: str = Field(default="neo:resources:")

    # Pagination Configuration
    default_page_size: int = Field(default=20, ge=1)
    max_page_size: int = Field(default=1000, ge=1)

    @field_validator("db_schema")
    @classmethod
    def validate_schema(cls, value: str) -> str:
        """Schema names are interpolated into SQL, so only plain identifiers pass."""
        if not _IDENTIFIER.match(value):
            raise ValueError(f"Invalid schema name: {value}")
        return value

    @field_validator("database_url")
    @classmethod
    def strip_driver_suffix(cls, value: str) -> str:
        # SQLAlchemy style URLs are accepted; asyncpg wants the bare scheme
        return value.replace("+asyncpg", "")

    @model_validator(mode="after")
    def validate_sizes(self) -> "ResourceAclSettings":
        if self.db_pool_max_size < self.db_pool_min_size:
            raise ValueError("db_pool_max_size must be >= db_pool_min_size")
        if self.default_page_size > self.max_page_size:
            raise ValueError("default_page_size must be <= max_page_size")
        return self

    @property
    def is_cache_enabled(self) -> bool:
        """Whether the ownership cache should be used at all."""
        return self.ownership_cache_enabled


@lru_cache()
def get_settings() -> ResourceAclSettings:
    """Get cached settings instance."""
    return ResourceAclSettings()
