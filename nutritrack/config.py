"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    secret_key: str = Field(
        description="Secret key for signing JWT tokens", min_length=1
    )
    access_token_expire_minutes: int = Field(
        default=72 * 60,
        description="Number of minutes before access tokens expire",
        gt=0,
    )
    app_timezone: str = Field(
        default="UTC",
        description="Timezone used to interpret workout dates and reminder hours",
    )
    frontend_url: str = Field(
        default="http://localhost:5173",
        description="Base URL of the web client, used to build password reset links",
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://127.0.0.1:5173"],
    )
    log_level: str = Field(default="INFO")

    notification_cooldown_hours: int = Field(
        default=24,
        description="Hours during which an identical alert is suppressed",
        gt=0,
    )
    near_completion_ratio: float = Field(
        default=0.8,
        description="Share of a goal target that triggers the near-completion alert",
        gt=0,
        lt=1,
    )
    same_day_lookahead_hours: int = Field(default=3, gt=0)
    overdue_goal_days: int = Field(default=3, gt=0)

    scheduler_enabled: bool = Field(
        default=True, description="Start the background reminder jobs on startup"
    )
    workout_reminder_hour: int = Field(default=8, ge=0, le=23)
    workout_reminder_minute: int = Field(default=0, ge=0, le=59)
    same_day_reminder_interval_minutes: int = Field(default=30, gt=0)
    overdue_goal_reminders_enabled: bool = Field(default=False)
    overdue_goal_reminder_hour: int = Field(default=9, ge=0, le=23)
    overdue_goal_reminder_minute: int = Field(default=0, ge=0, le=59)

    password_reset_expire_minutes: int = Field(default=60, gt=0)
    expose_reset_token: bool = Field(
        default=False,
        description="Return the reset link in the API response (development only)",
    )

    sendgrid_api_key: str | None = Field(
        default=None,
        description="SendGrid API key used for sending transactional emails via the REST API",
    )
    sendgrid_sender: str | None = Field(
        default=None,
        description="Email address that will appear as the sender of transactional messages",
        min_length=3,
    )

    openai_api_key: str | None = Field(default=None)
    openai_base_url: str | None = Field(default=None)
    openai_model: str = Field(default="gpt-3.5-turbo")
    openai_timeout_seconds: float = Field(default=30.0, gt=0)

    @model_validator(mode="after")
    def _validate_sendgrid_pair(self) -> "Settings":
        if bool(self.sendgrid_api_key) ^ bool(self.sendgrid_sender):
            raise ValueError(
                "SENDGRID_API_KEY and SENDGRID_SENDER must both be provided to enable email"
            )
        if self.sendgrid_sender and "@" not in self.sendgrid_sender:
            raise ValueError("SENDGRID_SENDER must be a valid email address")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
