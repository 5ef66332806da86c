"""
Core configuration management for langsift.

This module provides centralized application settings using Pydantic settings
with support for environment variables and ``.env`` files. Settings cover
where language profiles are found, which languages are loaded, and how the
application logs. Tuning of the detection algorithm itself lives in
``langsift.core.config.validation.DetectionConfig``.

Classes:
    Settings: Main configuration class with all application settings

Environment Variables:
    Application settings can be overridden using environment variables with the
    same names as the class attributes (case-sensitive).

Example:
    >>> from langsift.core.config.settings import Settings
    >>> settings = Settings(PROFILE_DIR="/data/profiles", LANGUAGES="en,de")
    >>> settings.language_list
    ['en', 'de']

Configuration Sections:
    - Application: Basic app configuration (name, version, environment)
    - Profiles: Profile directory, profile set name, language list, code map
    - Detection: Optional path to a detection configuration file
    - Logging: Application logging configuration
"""

from typing import List, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Attributes:
        APP_NAME: Application name identifier
        APP_VERSION: Current application version
        ENVIRONMENT: Deployment environment (development/testing/production)
        DEBUG: Enable debug mode with rich console logging

        PROFILE_DIR: Directory holding one JSON profile file per language
        PROFILE_NAME: Optional sub-directory of PROFILE_DIR selecting a
            profile set (for example ``short-text``)
        LANGUAGES: Comma separated language codes, in load order. Empty
            means the built-in default language list
        CODE_MAP_PATH: Optional JSON/YAML file mapping internal language
            codes to display codes

        DETECTION_CONFIG_PATH: Optional JSON/YAML detection configuration

        LOG_LEVEL: Logging level (DEBUG/INFO/WARNING/ERROR/CRITICAL)
        LOG_FORMAT: Log format (json/text)
        LOG_FILE_PATH: Path for log file output (optional)

    Properties:
        language_list: LANGUAGES split into a list, or None when unset
    """

    # Application
    APP_NAME: str = "langsift"
    APP_VERSION: str = "0.1.0"
    ENVIRONMENT: str = "production"
    DEBUG: bool = False

    # Profiles
    PROFILE_DIR: Optional[str] = None
    PROFILE_NAME: Optional[str] = None
    LANGUAGES: str = ""
    CODE_MAP_PATH: Optional[str] = None

    # Detection
    DETECTION_CONFIG_PATH: Optional[str] = None

    # Logging Configuration
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: str = "text"
    LOG_FILE_PATH: Optional[str] = None

    @property
    def language_list(self) -> Optional[List[str]]:
        """
        Split the LANGUAGES setting into codes.

        Returns:
            Optional[List[str]]: Language codes in configured order with
                blanks removed, or None when no language is configured so
                that callers fall back to the default language list.
        """
        codes = [code.strip() for code in self.LANGUAGES.split(",")]
        codes = [code for code in codes if code]
        return codes or None

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Validate logging level is a supported value.

        Ensures the log level is one of the standard Python logging
        levels. Converts to uppercase for consistency.

        Raises:
            ValueError: If log level is not supported
        """
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"LOG_LEVEL must be one of: {valid_levels}")
        return v.upper()

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        valid_formats = ["json", "text"]
        if v.lower() not in valid_formats:
            raise ValueError(f"LOG_FORMAT must be one of: {valid_formats}")
        return v.lower()

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",  # This will ignore extra fields from environment
    )


def get_settings() -> Settings:
    """Get application settings instance"""
    return Settings()


settings = Settings()
