# src/tweets/config.py
from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PaginationSettings(BaseSettings):
    DEFAULT_PAGE_SIZE: int = 10
    # Unset means no upper bound; the requested size goes straight to the store.
    MAX_PAGE_SIZE: int | None = None
    PAGINATION_LOOKAHEAD: Literal["inclusive", "exclusive"] = "inclusive"

    @field_validator("DEFAULT_PAGE_SIZE")
    def validate_default_page_size(cls, v: int) -> int:
        if v < 1:
            raise ValueError("DEFAULT_PAGE_SIZE must be a positive integer")
        return v

    @model_validator(mode="after")
    def validate_max_page_size(self) -> "PaginationSettings":
        if self.MAX_PAGE_SIZE is not None and self.MAX_PAGE_SIZE < self.DEFAULT_PAGE_SIZE:
            raise ValueError("MAX_PAGE_SIZE must be at least DEFAULT_PAGE_SIZE")
        return self

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


pagination_settings = PaginationSettings()
