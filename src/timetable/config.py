"""Client configuration loaded from environment variables."""

from pydantic import Field
from pydantic_settings import BaseSettings


class TimetableConfig(BaseSettings):
    """Timetable client configuration loaded from environment variables.

    Every field can be overridden with a ``TIMETABLE_``-prefixed variable,
    e.g. ``TIMETABLE_REQUEST_TIMEOUT=30``. For local development, create a
    .env file in the project root.
    """

    # Portal endpoint (Joomla component rendering HTML fragments)
    base_url: str = Field(
        default="https://dvgups.ru/index.php",
        description="Timetable endpoint URL",
    )
    item_id: str = Field(default="1246", description="Joomla Itemid query value")
    option: str = Field(default="com_timetable", description="Joomla component")
    view: str = Field(default="newtimetable", description="Joomla component view")

    # Transport
    request_timeout: float = Field(
        default=20.0,
        description="Total request timeout in seconds",
    )
    max_attempts: int = Field(
        default=3,
        description="Attempts per request before a transient error is raised",
    )
    retry_backoff: float = Field(
        default=1.0,
        description="Exponential backoff multiplier between attempts, in seconds",
    )
    user_agent: str = Field(
        default=(
            "Mozilla/5.0 (Linux; Android 10; Mobile) AppleWebKit/537.36 "
            "(KHTML, like Gecko) Chrome/91.0.4472.120 Mobile Safari/537.36"
        ),
        description="User-Agent header sent with every request",
    )

    # Logging
    log_json: bool = Field(
        default=False,
        description="Output logs in JSON format (for production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    model_config = {
        "env_prefix": "TIMETABLE_",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


_config: TimetableConfig | None = None


def get_config() -> TimetableConfig:
    """Get the timetable configuration singleton."""
    global _config
    if _config is None:
        _config = TimetableConfig()
    return _config
