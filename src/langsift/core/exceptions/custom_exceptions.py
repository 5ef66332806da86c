"""
Custom exception hierarchy for langsift error handling.

Every error raised by langsift carries a human-readable message, a
machine-readable error code and a details dictionary with the context that
caused it (language codes, file paths, offending patterns).

Exception Hierarchy:
    LangSiftError (base)
    ├── ConfigurationError: Settings and detection configuration issues
    │   └── PatternCompileError: Invalid whole-text filter pattern
    └── ProfileError: Malformed profile data or profile store misuse
        ├── ProfileNotFoundError: Profile resource could not be located
        └── DuplicateLanguageError: Same language added twice to a store

Detection itself never raises for unrecognized input. Text without any known
n-gram yields an empty result list, not an exception.

Example:
    >>> try:
    ...     store = load_profile_store("/data/profiles", ["en", "de"])
    ... except ProfileNotFoundError as e:
    ...     logger.error("Profile missing", error_code=e.error_code,
    ...                  details=e.details)
"""

from typing import Any, Dict, Optional


class LangSiftError(Exception):
    """
    Base exception class for all langsift errors.

    Attributes:
        message (str): Human-readable error description
        error_code (str): Machine-readable error identifier, defaults to the
            class name
        details (Dict[str, Any]): Additional contextual information

    Example:
        >>> raise LangSiftError(
        ...     "Profile store is sealed",
        ...     error_code="STORE_SEALED",
        ...     details={"languages": ["en", "de"]}
        ... )
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


class ConfigurationError(LangSiftError):
    """
    Raised when configuration validation or setup fails.

    Common scenarios:
        - Out of range detection options (negative trial count, thresholds
          outside [0, 1])
        - Unknown options in a detection configuration file
        - A prior vector that does not match the loaded languages
        - Unreadable or unsupported configuration files

    Example:
        >>> raise ConfigurationError(
        ...     "prior length does not match language count",
        ...     error_code="CONFIG_PRIOR_LENGTH",
        ...     details={"prior_length": 3, "languages": 2}
        ... )
    """

    pass


class PatternCompileError(ConfigurationError):
    """Raised when the whole-text filter pattern is not a valid regex"""

    pass


class ProfileError(LangSiftError):
    """
    Raised when profile data cannot be used.

    Common scenarios:
        - Profile JSON missing the ``name``, ``freq`` or ``n_words`` keys
        - Non-positive per-length n-gram totals
        - Adding profiles to a store that was already built
        - Adding more profiles than the store was sized for
    """

    pass


class ProfileNotFoundError(ProfileError):
    """Raised when a requested language profile resource does not exist"""

    pass


class DuplicateLanguageError(ProfileError):
    """Raised when a language code is added twice to the same profile store"""

    pass
