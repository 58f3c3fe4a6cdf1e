"""Configuration settings using Pydantic Settings.

Usage:
    from influxline.config import WriterSettings

    # Load from environment variables (INFLUXLINE_*)
    settings = WriterSettings()

    # Or override with explicit values
    settings = WriterSettings(precision="s", timestamp_policy="use", timestamp=1613925577)
"""

from __future__ import annotations

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from influxline.core.point import TimestampOptions, TimestampPolicy
from influxline.writer.models import Precision


class WriterSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for LineWriter.

    Attributes:
        precision: Timestamp unit declared with each batch (ns, us, ms, s).
        timestamp_policy: none, use or from_point.
        timestamp: Fixed timestamp, required when timestamp_policy is use.
        strict: Reject field-less points.
        insert_to_stdout: Print batches instead of sending them.

    Environment Variables:
        INFLUXLINE_PRECISION
        INFLUXLINE_TIMESTAMP_POLICY
        INFLUXLINE_TIMESTAMP
        INFLUXLINE_STRICT
        INFLUXLINE_INSERT_TO_STDOUT
    """

    model_config = SettingsConfigDict(
        env_prefix="INFLUXLINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    precision: Precision = Precision.NS
    timestamp_policy: TimestampPolicy = TimestampPolicy.FROM_POINT
    timestamp: int | str | None = None
    strict: bool = False
    insert_to_stdout: bool = False

    @model_validator(mode="after")
    def _check_timestamp(self) -> WriterSettings:
        if self.timestamp_policy is TimestampPolicy.USE and self.timestamp is None:
            raise ValueError("timestamp is required when timestamp_policy is 'use'")
        if self.timestamp_policy is not TimestampPolicy.USE and self.timestamp is not None:
            raise ValueError(
                f"timestamp is only allowed when timestamp_policy is 'use', "
                f"not '{self.timestamp_policy.value}'"
            )
        return self

    def timestamp_options(self) -> TimestampOptions:
        """Build the batch timestamp policy described by these settings."""
        if self.timestamp_policy is TimestampPolicy.USE:
            return TimestampOptions.use(self.timestamp)  # type: ignore[arg-type]
        if self.timestamp_policy is TimestampPolicy.NONE:
            return TimestampOptions.none()
        return TimestampOptions.from_point()
