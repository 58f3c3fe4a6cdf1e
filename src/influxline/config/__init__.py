"""Configuration module using Pydantic Settings.

Usage:
    from influxline.config import WriterSettings

    settings = WriterSettings(precision="ms")
"""

from influxline.config.settings import WriterSettings

__all__ = [
    "WriterSettings",
]
