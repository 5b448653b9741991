"""
Configuration module - centralized settings for the layout repair service.
Uses pydantic-settings to load values from environment variables and .env file.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Service settings loaded from environment variables.

    Pydantic-settings automatically:
    1. Reads from environment variables (highest priority)
    2. Falls back to .env file values
    3. Uses default values if neither exists

    To disable a repair family in a deployment, set for example:
        export NAVBAR_REPAIR_ENABLED=false
    """

    # ---------------------------------------------------------------------------
    # PYDANTIC SETTINGS CONFIGURATION
    # ---------------------------------------------------------------------------
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ---------------------------------------------------------------------------
    # APPLICATION SETTINGS
    # ---------------------------------------------------------------------------
    # APP_NAME: Display name shown in API docs and logging
    APP_NAME: str = "Layout Repair Service"

    # DEBUG: Enable debug mode (more verbose errors, auto-reload in dev)
    DEBUG: bool = False

    # LOG_LEVEL: Level for the layout_repair logger tree
    LOG_LEVEL: str = "INFO"

    # ---------------------------------------------------------------------------
    # REPAIR PASS SETTINGS
    # ---------------------------------------------------------------------------
    # Each family can be switched off independently. The per-tree and
    # per-project functions in layout_repair.repair.runner ignore these; only
    # the HTTP endpoints and the CLI script consult them.
    FOOTER_REPAIR_ENABLED: bool = True
    NAVBAR_REPAIR_ENABLED: bool = True

    # REPAIR_LOG_PATCHES: log every applied patch at INFO (DEBUG otherwise)
    REPAIR_LOG_PATCHES: bool = True


# Global settings instance, imported wherever configuration is needed
settings = Settings()
