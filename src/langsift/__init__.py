"""
langsift - Statistical language identification

langsift estimates which languages a span of text is written in. It compares
the character n-grams of the text with precomputed per-language frequency
profiles using a randomized Naive-Bayes procedure whose results are
reproducible from call to call.

Modules:
    core: Configuration, logging and exceptions
    detection: Profile store, n-gram extraction, classifier and ranking
    resources: Profile file and code map loading
    cli: Command-line interface tools

Example:
    >>> from langsift import LanguageDetectionService
    >>> service = LanguageDetectionService.from_directory(
    ...     "/data/profiles", languages=["en", "de"]
    ... )
    >>> service.detect_all("the quick brown fox")
    [Language(code='en', probability=0.9999...)]
"""

__version__ = "0.1.0"
__author__ = "langsift"
__description__ = (
    "Statistical language identification with character n-gram profiles "
    "and a reproducible Monte-Carlo Naive-Bayes classifier."
)

from langsift.core.config.settings import Settings
from langsift.core.config.validation import DetectionConfig, load_detection_config
from langsift.core.logging.logger import get_logger
from langsift.detection import (
    Language,
    LanguageDetectionService,
    LanguageProfile,
    ProfileStore,
    ProfileStoreBuilder,
)
from langsift.resources.loader import load_profile_store

__all__ = [
    "DetectionConfig",
    "Language",
    "LanguageDetectionService",
    "LanguageProfile",
    "ProfileStore",
    "ProfileStoreBuilder",
    "Settings",
    "get_logger",
    "load_detection_config",
    "load_profile_store",
]
