"""Configuration for the reminder sync using pydantic-settings."""

from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.paths import ENV_FILE


class ReminderSyncConfig(BaseSettings):
    """Configuration for the reminder sync.

    All settings are loaded from environment variables with the TODOIST_ prefix.

    :param token: Todoist API token.
    :param content_prefix: Only tasks whose content starts with this are handled.
    :param reminder_timezone: IANA timezone sent with every created reminder.
    :param reminder_hour: Local hour of the day the created reminder fires at.
    :param include_completed: Also handle tasks marked as completed.
    :param dry_run: Decide and log, but do not create reminders.
    :param request_timeout: Timeout in seconds for each Todoist request.
    """

    model_config = SettingsConfigDict(
        env_prefix="TODOIST_",
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    token: str = Field(..., min_length=1, description="Todoist API token")
    content_prefix: str = Field(
        default="Test Reminder",
        description="Content prefix marking tasks this tool manages",
    )
    reminder_timezone: str = Field(
        default="America/New_York",
        description="IANA timezone for created reminders",
    )
    reminder_hour: int = Field(
        default=8,
        ge=0,
        le=23,
        description="Local hour the created reminder fires at",
    )
    include_completed: bool = Field(
        default=False,
        description="Also handle completed tasks",
    )
    dry_run: bool = Field(
        default=False,
        description="Log decisions without creating reminders",
    )
    request_timeout: int = Field(
        default=30,
        ge=1,
        le=300,
        description="Timeout in seconds for each Todoist request",
    )

    @field_validator("reminder_timezone")
    @classmethod
    def validate_reminder_timezone(cls, v: str) -> str:
        """Validate that the timezone is a known IANA zone.

        :param v: Raw timezone name from environment.
        :returns: The validated timezone name.
        :raises ValueError: If the zone is unknown.
        """
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {v}") from e
        return v


@lru_cache
def get_reminder_settings() -> ReminderSyncConfig:
    """Get cached reminder sync settings.

    Settings are loaded once and cached for the lifetime of the process.

    :returns: Configured ReminderSyncConfig instance.
    """
    return ReminderSyncConfig()  # type: ignore[call-arg]
