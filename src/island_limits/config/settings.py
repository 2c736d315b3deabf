"""
Settings for island-limits.

Environment-driven configuration for the permission grammar and the
limit lifecycle, loaded with pydantic-settings.
"""
from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import EntityTypes, PermissionGrammar


class LimitsSettings(BaseSettings):
    """Settings for permission-based island limits."""

    model_config = SettingsConfigDict(
        env_prefix="ISLAND_LIMITS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Permission grammar
    permission_suffix: str = Field(default=PermissionGrammar.LIMIT_SUFFIX)
    max_limit: int = Field(default=PermissionGrammar.MAX_LIMIT, ge=0)

    # Entity eligibility
    always_allowed_entities: List[str] = Field(
        default_factory=lambda: sorted(EntityTypes.ALWAYS_ALLOWED)
    )

    @field_validator("permission_suffix")
    @classmethod
    def _suffix_ends_with_separator(cls, value: str) -> str:
        if value and not value.endswith(PermissionGrammar.SEPARATOR):
            return value + PermissionGrammar.SEPARATOR
        return value

    @field_validator("always_allowed_entities")
    @classmethod
    def _normalize_entities(cls, value: List[str]) -> List[str]:
        return [entity.strip().upper() for entity in value if entity.strip()]

    def build_prefix(self, game_mode_prefix: str) -> str:
        """Build the full capability prefix for a game mode's permission prefix."""
        return f"{game_mode_prefix}{self.permission_suffix}"


@lru_cache()
def get_settings() -> LimitsSettings:
    """Get cached settings instance."""
    return LimitsSettings()
