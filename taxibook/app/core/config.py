"""
Configuration settings for the Taxibook Backend.

This module handles application configuration using Pydantic settings.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # Application
    app_name: str = "Taxibook Backend"
    api_version: str = "1.0.0"
    api_prefix: str = "/api"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # Database Configuration
    database_url: str = "postgresql+asyncpg://root:@localhost:5432/taxibook"
    db_echo: bool = False
    db_pool_size: int = 10
    db_max_overflow: int = 10
    create_tables_on_startup: bool = True

    # Password hashing cost (bcrypt work factor)
    bcrypt_rounds: int = 10

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
