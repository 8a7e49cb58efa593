"""Application configuration loaded from the environment.

Values are read once at import time from ``TICKETSWIFT_*`` variables (or a
``.env`` file in the working directory) and copied into Django settings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Environment-driven settings for the TicketSwift service."""

    model_config = SettingsConfigDict(
        env_prefix="TICKETSWIFT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Django core
    secret_key: str = "dev-insecure-change-me"
    debug: bool = False
    allowed_hosts: str = "localhost,127.0.0.1"

    # Database
    db_engine: str = "django.db.backends.sqlite3"
    db_name: str = "db.sqlite3"
    db_user: str = ""
    db_password: str = ""
    db_host: str = ""
    db_port: str = ""

    # Cache
    redis_url: str | None = None
    cache_ttl_seconds: int = 300

    # Booking rules
    max_tickets_per_event: int = 3
    id_upload_max_bytes: int = 1024 * 1024

    # Hosted AI screening service (OpenAI-compatible chat completions)
    ai_base_url: str = "https://api.openai.com/v1"
    ai_api_key: str | None = None
    ai_model: str = "gpt-4o-mini"
    ai_timeout_seconds: float = 30.0

    # Notifications
    email_backend: str = "django.core.mail.backends.console.EmailBackend"
    default_from_email: str = "TicketSwift <no-reply@ticketswift.local>"

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    @property
    def allowed_host_list(self) -> list[str]:
        return [host.strip() for host in self.allowed_hosts.split(",") if host.strip()]


app_settings = AppSettings()
