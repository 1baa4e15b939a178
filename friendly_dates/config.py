"""
Configuration for friendly-dates.
Loads display and logging settings from environment variables with sensible defaults.
"""

import os
from datetime import timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

# Load environment variables from .env file (local development only)
load_dotenv()


def resolve_timezone(name: str) -> tzinfo:
    """
    Look up a timezone by IANA name.

    UTC resolves without the system timezone database.

    Raises:
        ValueError: If the name is unknown
    """
    if name.upper() == "UTC":
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"Unknown timezone: {name}") from e


class Settings(BaseSettings):
    """Application settings with validation"""

    # Display Settings
    DISPLAY_TIMEZONE: str = os.getenv("FRIENDLY_DATES_TIMEZONE", "UTC")

    # Relative phrasing thresholds
    JUST_NOW_SECONDS: int = int(os.getenv("FRIENDLY_DATES_JUST_NOW_SECONDS", "10"))
    MOMENT_AGO_SECONDS: int = int(os.getenv("FRIENDLY_DATES_MOMENT_AGO_SECONDS", "60"))
    RELATIVE_MINUTES: int = int(os.getenv("FRIENDLY_DATES_RELATIVE_MINUTES", "5"))

    # Logging Settings
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING")
    LOG_TO_FILE: bool = os.getenv("LOG_TO_FILE", "false").lower() == "true"
    LOG_DIRECTORY: str = os.getenv("LOG_DIRECTORY", "./logs")

    def get_display_timezone(self) -> tzinfo:
        """Resolve DISPLAY_TIMEZONE to a tzinfo"""
        return resolve_timezone(self.DISPLAY_TIMEZONE)

    def validate_config(self) -> bool:
        """Validate timezone and threshold ordering"""
        try:
            self.get_display_timezone()
        except ValueError as e:
            raise ValueError(
                f"DISPLAY_TIMEZONE '{self.DISPLAY_TIMEZONE}' is not a known timezone"
            ) from e

        if self.JUST_NOW_SECONDS <= 0:
            raise ValueError("JUST_NOW_SECONDS must be positive")
        if self.MOMENT_AGO_SECONDS < self.JUST_NOW_SECONDS:
            raise ValueError("MOMENT_AGO_SECONDS must not be below JUST_NOW_SECONDS")
        # Below a full minute the minute phrasing would read "0 minutes ago"
        if self.MOMENT_AGO_SECONDS < 60:
            raise ValueError("MOMENT_AGO_SECONDS must be at least 60")
        # Minute phrasing starts where "a moment ago" stops
        if self.RELATIVE_MINUTES * 60 < self.MOMENT_AGO_SECONDS:
            raise ValueError(
                "RELATIVE_MINUTES must cover at least MOMENT_AGO_SECONDS"
            )

        return True

    class Config:
        case_sensitive = True


# Global settings instance
settings = Settings()

# Validate on import
settings.validate_config()
