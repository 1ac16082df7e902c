# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_aem_client

"""
Configuration management for the AEM client.
"""

from functools import lru_cache
from typing import TYPE_CHECKING, Literal, Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

if TYPE_CHECKING:
    from coreason_aem_client.domain.retry import RetryPolicy


class Settings(BaseSettings):
    """
    Application configuration using environment variables.
    """

    model_config = SettingsConfigDict(
        env_prefix="AEM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Convergence defaults, used when a caller supplies no retry options
    retry_max_tries: int = Field(default=30, ge=1, description="Maximum number of status checks.")
    retry_base_sleep_seconds: float = Field(default=2, ge=0, description="Initial delay between status checks.")
    retry_max_sleep_seconds: float = Field(default=2, ge=0, description="Upper bound of the delay between checks.")

    log_level: Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Minimum loguru level."
    )
    log_file: Optional[str] = Field(default=None, description="Optional path of a rotating log file.")

    @model_validator(mode="after")
    def validate_retry_bounds(self) -> "Settings":
        """
        Ensure the backoff cap is not below the initial delay.
        """
        if self.retry_max_sleep_seconds < self.retry_base_sleep_seconds:
            raise ValueError("retry_max_sleep_seconds must be greater than or equal to retry_base_sleep_seconds.")
        return self

    def default_retry_policy(self) -> "RetryPolicy":
        from coreason_aem_client.domain.retry import RetryPolicy

        return RetryPolicy(
            max_tries=self.retry_max_tries,
            base_sleep_seconds=self.retry_base_sleep_seconds,
            max_sleep_seconds=self.retry_max_sleep_seconds,
        )


@lru_cache
def get_settings() -> Settings:
    """
    Returns a cached instance of the Settings class.
    """
    return Settings()
