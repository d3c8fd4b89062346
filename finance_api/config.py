"""
Application configuration using Pydantic settings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    # App
    app_name: str = "Finance Transactions API"
    log_level: str = "INFO"

    # Database
    database_url: str = "sqlite:///./data/finance.db"
    sql_echo: bool = False
    # Abort startup when the transactions table cannot be created
    schema_bootstrap_strict: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: list[str] = ["*"]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False
    )


# Global settings instance
settings = Settings()
