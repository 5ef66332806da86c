"""
Profile and code map resource loading.

Profiles live in a directory, one JSON file per language named after the
language code (``en`` or ``en.json``). A directory may hold several profile
sets in sub-directories, selected by name::

    profiles/
    ├── en
    ├── de
    ├── language.json          # optional code map for the default set
    └── short-text/
        ├── en
        └── de

Profile file format::

    {"name": "en", "freq": {"t": 1043, "th": 310, "the": 201},
     "n_words": [48022, 43950, 39866]}

Code maps are JSON or YAML objects mapping internal codes to display codes,
for example ``{"en": "eng", "de": "deu"}``.

Example:
    >>> store = load_profile_store("/data/profiles", ["en", "de"])
    >>> code_map = find_code_map("/data/profiles")
"""

import json
from pathlib import Path
from typing import Dict, Optional, Sequence, Union

import yaml

from langsift.core.exceptions.custom_exceptions import (
    ConfigurationError,
    LangSiftError,
    ProfileError,
    ProfileNotFoundError,
)
from langsift.core.logging.logger import get_logger
from langsift.detection.profiles import (
    LanguageProfile,
    ProfileStore,
    ProfileStoreBuilder,
)

logger = get_logger(__name__)

PathLike = Union[str, Path]

DEFAULT_LANGUAGES = (
    "ar",
    "bg",
    "bn",
    "cs",
    "da",
    "de",
    "el",
    "en",
    "es",
    "et",
    "fa",
    "fi",
    "fr",
    "gu",
    "he",
    "hi",
    "hr",
    "hu",
    "id",
    "it",
    "ja",
    "ko",
    "lt",
    "lv",
    "mk",
    "ml",
    "nl",
    "no",
    "pa",
    "pl",
    "pt",
    "ro",
    "ru",
    "sq",
    "sv",
    "ta",
    "te",
    "th",
    "tl",
    "tr",
    "uk",
    "ur",
    "vi",
    "zh-cn",
    "zh-tw",
)

CODE_MAP_RESOURCE = "language.json"


def profile_base_dir(profile_dir: PathLike, profile: Optional[str] = None) -> Path:
    base = Path(profile_dir)
    return base / profile if profile else base


def resolve_profile_path(
    profile_dir: PathLike, code: str, profile: Optional[str] = None
) -> Path:
    """
    Locate the profile file of a language.

    Raises:
        ProfileNotFoundError: If neither ``<code>`` nor ``<code>.json``
            exists in the profile set directory
    """
    base = profile_base_dir(profile_dir, profile)
    for candidate in (base / code, base / f"{code}.json"):
        if candidate.is_file():
            return candidate
    raise ProfileNotFoundError(
        f"profile '{code}' not found",
        details={"language": code, "profile_dir": str(base)},
    )


def read_profile(path: PathLike) -> LanguageProfile:
    """
    Read one JSON profile file.

    Raises:
        ProfileError: If the file cannot be read or is not a valid profile
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise ProfileError(
            f"Failed to read profile {path}: {e}", details={"path": str(path)}
        ) from e
    return LanguageProfile.from_dict(data)


def load_profile_store(
    profile_dir: PathLike,
    languages: Optional[Sequence[str]] = None,
    profile: Optional[str] = None,
) -> ProfileStore:
    """
    Load the profiles of the given languages, in order, into a new store.

    Args:
        profile_dir: Directory holding the profile files
        languages: Language codes in load order; empty codes are skipped.
            Defaults to ``DEFAULT_LANGUAGES``
        profile: Optional profile set sub-directory

    Returns:
        ProfileStore: The built, immutable store

    Raises:
        ProfileNotFoundError: If a language has no profile file
        DuplicateLanguageError: If a language is listed twice
        ProfileError: If a profile file is malformed
    """
    codes = list(languages) if languages else list(DEFAULT_LANGUAGES)
    builder = ProfileStoreBuilder(expected_total_languages=len(codes))
    try:
        for code in codes:
            if not code:
                continue
            path = resolve_profile_path(profile_dir, code, profile)
            builder.add_profile(read_profile(path))
    except LangSiftError as e:
        logger.error(
            "Profile loading failed",
            error=e.message,
            error_code=e.error_code,
            profile_dir=str(profile_dir),
            profile=profile,
        )
        raise

    store = builder.build()
    logger.debug(
        "language detection service installed",
        languages=list(store.languages),
        profile=profile,
    )
    return store


def load_code_map(path: PathLike) -> Dict[str, str]:
    """
    Read a code map from a JSON or YAML file.

    Raises:
        ConfigurationError: If the file is missing, unreadable or is not a
            mapping
    """
    path = Path(path)
    if not path.exists():
        raise ConfigurationError(f"Code map file not found: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() in [".yaml", ".yml"]:
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Failed to load code map: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Code map must be a mapping: {path}")
    return {str(k): str(v) for k, v in data.items()}


def find_code_map(
    profile_dir: PathLike, profile: Optional[str] = None
) -> Dict[str, str]:
    """The ``language.json`` code map of a profile set, or an empty map"""
    path = profile_base_dir(profile_dir, profile) / CODE_MAP_RESOURCE
    if not path.is_file():
        return {}
    return load_code_map(path)
