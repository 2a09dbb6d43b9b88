from pydantic_settings import BaseSettings, SettingsConfigDict
import logging

# Set up logging
logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Runtime settings from the environment (PEG_*) or a .env file."""
    model_config = SettingsConfigDict(
        env_prefix="PEG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Conversion tool to invoke; a bare name is looked up on PATH
    ffmpeg_binary: str = "ffmpeg"
    # Log level: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = "WARNING"


# In-memory cache of settings
_cached_settings: Settings | None = None


def get_settings() -> Settings:
    """Load settings once and return the cached instance."""
    global _cached_settings

    if _cached_settings is None:
        _cached_settings = Settings()
        logger.debug("Loaded settings: ffmpeg_binary=%s log_level=%s",
                     _cached_settings.ffmpeg_binary, _cached_settings.log_level)
    return _cached_settings


def clear_settings_cache() -> None:
    """Clear the cached settings (forces reload)."""
    global _cached_settings
    _cached_settings = None


def normalize_log_level(level: str) -> str:
    """Upper-case a level name, falling back to INFO if it is unknown."""
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        logger.warning("Invalid log level '%s', using INFO", level)
        level_upper = "INFO"
    return level_upper


def set_log_level(level: str) -> None:
    """Set the logging level on the root logger."""
    level_upper = normalize_log_level(level)
    logging.getLogger().setLevel(getattr(logging, level_upper))
    logger.debug("Log level set to %s", level_upper)
