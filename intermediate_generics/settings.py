from __future__ import annotations

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from intermediate_generics.containers.policies import (
    RemovalPolicy,
    coerce_removal_policy,
)


class Settings(BaseSettings):
    counted_set_removal_policy: RemovalPolicy = RemovalPolicy.CLAMP

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        extra="ignore",
    )

    @field_validator("counted_set_removal_policy", mode="before")
    @classmethod
    def _normalize_removal_policy(cls, value: object) -> object:
        if isinstance(value, str):
            return coerce_removal_policy(value)
        return value

    @property
    def counted_set_allows_negative(self) -> bool:
        return self.counted_set_removal_policy == RemovalPolicy.SIGNED


@lru_cache
def get_settings() -> Settings:
    return Settings()
