"""
Configuration management via environment variables.

This module loads configuration from .env file using python-dotenv.
All configuration values are accessed through the Settings class.

Required variables:
- MONGODB_URI: connection string for the user database
- GROQ_API_KEY: API key for the hosted LLM provider
"""
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv


# Load .env file from project root
# This must happen before accessing os.environ
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(env_path)


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    frozen=True makes the dataclass immutable, preventing accidental
    modification of settings at runtime.

    Attributes:
        app_name: Application identifier for logging
        app_env: Environment name (development, staging, production)
        log_level: Console logging verbosity (DEBUG, INFO, WARNING, ...)
        log_to_file: Whether to also write daily log files
        log_dir: Directory for log files
        mongodb_uri: MongoDB connection string
        mongodb_database: Database holding the users collection
        users_collection: Name of the users collection
        groq_api_key: API key for the Groq LLM service
        llm_chat_model: Model used for chat and roadmap generation
        llm_vision_model: Model used for image analysis
        chat_max_tokens: Output limit for /chat
        roadmap_max_tokens: Output limit for /roadmap-generator
        image_max_tokens: Output limit for /analyze-image
        cors_origins: Allowed CORS origins
        enable_audit_logging: Log every request with timing
        app_host: Bind address for the development server
        app_port: Port for the development server
    """
    # Application settings
    app_name: str
    app_env: str
    log_level: str
    log_to_file: bool
    log_dir: str

    # Database settings
    mongodb_uri: str
    mongodb_database: str
    users_collection: str

    # LLM settings
    groq_api_key: str
    llm_chat_model: str
    llm_vision_model: str
    chat_max_tokens: int
    roadmap_max_tokens: int
    image_max_tokens: int

    # HTTP settings
    cors_origins: Tuple[str, ...]
    enable_audit_logging: bool
    app_host: str
    app_port: int

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.app_env.lower() == "development"


def _get_env(key: str, default: Optional[str] = None) -> str:
    """
    Get environment variable with optional default.

    Args:
        key: Environment variable name
        default: Default value if not set

    Returns:
        Environment variable value

    Raises:
        ValueError: If required variable is not set and no default provided
    """
    value = os.environ.get(key, default)
    if value is None:
        raise ValueError(
            f"Required environment variable '{key}' is not set. "
            f"Please check your .env file."
        )
    return value


def _get_bool(key: str, default: str) -> bool:
    return _get_env(key, default).strip().lower() in {"1", "true", "yes", "on"}


def _split_origins(raw: str) -> Tuple[str, ...]:
    return tuple(origin.strip() for origin in raw.split(",") if origin.strip())


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are read once at startup; maxsize=1 ensures only one
    instance exists. Call get_settings.cache_clear() after changing
    the environment (tests do this).

    Returns:
        Settings instance with all configuration values

    Raises:
        ValueError: If required environment variables are missing
    """
    return Settings(
        # Application
        app_name=_get_env("APP_NAME", "EduPilot"),
        app_env=_get_env("APP_ENV", "development"),
        log_level=_get_env("LOG_LEVEL", "INFO"),
        log_to_file=_get_bool("LOG_TO_FILE", "true"),
        log_dir=_get_env("LOG_DIR", "logs"),

        # Database
        mongodb_uri=_get_env("MONGODB_URI"),
        mongodb_database=_get_env("MONGODB_DATABASE", "database"),
        users_collection=_get_env("MONGODB_USERS_COLLECTION", "users"),

        # LLM
        groq_api_key=_get_env("GROQ_API_KEY"),
        llm_chat_model=_get_env("LLM_CHAT_MODEL", "llama-3.3-70b-versatile"),
        llm_vision_model=_get_env(
            "LLM_VISION_MODEL", "meta-llama/llama-4-scout-17b-16e-instruct"
        ),
        chat_max_tokens=int(_get_env("CHAT_MAX_TOKENS", "150")),
        roadmap_max_tokens=int(_get_env("ROADMAP_MAX_TOKENS", "1000")),
        image_max_tokens=int(_get_env("IMAGE_MAX_TOKENS", "300")),

        # HTTP
        cors_origins=_split_origins(_get_env("CORS_ORIGINS", "*")),
        enable_audit_logging=_get_bool("ENABLE_AUDIT_LOGGING", "true"),
        app_host=_get_env("APP_HOST", "0.0.0.0"),
        app_port=int(_get_env("APP_PORT", "3001")),
    )
