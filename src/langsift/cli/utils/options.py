"""
Shared option handling for langsift CLI commands.

Command line options take precedence over settings read from the
environment (``PROFILE_DIR``, ``PROFILE_NAME``, ``LANGUAGES``,
``CODE_MAP_PATH``, ``DETECTION_CONFIG_PATH``).
"""

from typing import Any, List, Optional

import typer
from rich.console import Console

from langsift.core.config.settings import settings
from langsift.core.config.validation import (
    DetectionConfig,
    DetectionConfigLoader,
    load_detection_config,
)
from langsift.core.exceptions.custom_exceptions import LangSiftError
from langsift.core.logging.logger import get_logger
from langsift.detection.service import LanguageDetectionService
from langsift.resources.loader import load_code_map

logger = get_logger(__name__)


def parse_languages(languages: Optional[str]) -> Optional[List[str]]:
    """Split a comma separated language option, falling back to settings"""
    if languages is None:
        return settings.language_list
    codes = [code.strip() for code in languages.split(",") if code.strip()]
    return codes or None


def resolve_profile_dir(profiles: Optional[str], console: Console) -> str:
    profile_dir = profiles or settings.PROFILE_DIR
    if not profile_dir:
        console.print(
            "No profile directory given, use --profiles or set PROFILE_DIR",
            style="red",
        )
        raise typer.Exit(1)
    return profile_dir


def build_config(config_file: Optional[str], **overrides: Any) -> DetectionConfig:
    config_path = config_file or settings.DETECTION_CONFIG_PATH
    if config_path:
        return DetectionConfigLoader.load_file(config_path, **overrides)
    return load_detection_config(**overrides)


def build_service(
    console: Console,
    profiles: Optional[str],
    profile: Optional[str],
    languages: Optional[str],
    code_map_file: Optional[str],
    config_file: Optional[str],
    **overrides: Any,
) -> LanguageDetectionService:
    """
    Build a detection service from CLI options.

    Exits with code 1 after printing the error when configuration or
    profiles cannot be loaded.
    """
    profile_dir = resolve_profile_dir(profiles, console)
    try:
        config = build_config(config_file, **overrides)
        map_path = code_map_file or settings.CODE_MAP_PATH
        code_map = load_code_map(map_path) if map_path else None
        return LanguageDetectionService.from_directory(
            profile_dir,
            languages=parse_languages(languages),
            profile=profile or settings.PROFILE_NAME,
            config=config,
            code_map=code_map,
        )
    except LangSiftError as e:
        logger.error("Service setup failed", error_code=e.error_code, details=e.details)
        console.print(f"Error: {e.message}", style="red")
        raise typer.Exit(1)
