from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, Field, model_validator
from tenacity import wait_exponential

RetryOptions = Union["RetryPolicy", Mapping[str, Any], None]


class RetryPolicy(BaseModel):
    """
    Bounded exponential backoff for convergence checks.

    Field values may arrive as numeric strings (e.g. from Puppet manifests); pydantic coerces them.
    """

    max_tries: int = Field(default=30, ge=1, description="Maximum number of status checks.")
    base_sleep_seconds: float = Field(default=2, ge=0, description="Delay after the first failed check.")
    max_sleep_seconds: float = Field(default=2, ge=0, description="Upper bound of the delay.")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_bounds(self) -> "RetryPolicy":
        if self.max_sleep_seconds < self.base_sleep_seconds:
            raise ValueError("max_sleep_seconds must be greater than or equal to base_sleep_seconds.")
        return self

    @classmethod
    def from_options(cls, options: RetryOptions = None, defaults: Optional["RetryPolicy"] = None) -> "RetryPolicy":
        """
        Merges caller-supplied retry options over defaults.

        Args:
            options: A RetryPolicy, a partial mapping of its fields, or None.
            defaults: Policy supplying missing fields. Defaults to RetryPolicy().

        Returns:
            A validated RetryPolicy.
        """
        if isinstance(options, RetryPolicy):
            return options

        base = defaults or cls()
        supplied = {k: v for k, v in (options or {}).items() if k in cls.model_fields and v is not None}
        merged = {**base.model_dump(), **supplied}

        # Only a base delay was supplied: widen the default cap rather than reject it
        if "base_sleep_seconds" in supplied and "max_sleep_seconds" not in supplied:
            try:
                base_sleep = float(supplied["base_sleep_seconds"])
            except (TypeError, ValueError):
                base_sleep = None  # left for model validation to report
            if base_sleep is not None and base_sleep > base.max_sleep_seconds:
                merged["max_sleep_seconds"] = base_sleep

        return cls.model_validate(merged)

    def wait_strategy(self) -> wait_exponential:
        """Doubling delay starting at base_sleep_seconds, capped at max_sleep_seconds."""
        return wait_exponential(
            multiplier=self.base_sleep_seconds,
            min=self.base_sleep_seconds,
            max=self.max_sleep_seconds,
        )
