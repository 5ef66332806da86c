"""
Language detection service.

``LanguageDetectionService`` wires the n-gram extractor, the classifier and
the ranker around an immutable ``ProfileStore``. Everything is validated and
built in the constructor; detection calls never load, reload or modify
anything, so one instance can serve any number of threads.

Detection Flow:
    1. Optional base64 decoding (``binary``)
    2. Whole-text filter gate (``text_filter``): non-matching text yields []
    3. N-gram extraction against the store index
    4. Monte-Carlo Naive-Bayes classification
    5. Threshold filtering, ordering, code remapping and truncation

Example Usage:
    >>> service = LanguageDetectionService.from_directory(
    ...     "/data/profiles", languages=["en", "de"], code_map={"en": "eng"}
    ... )
    >>> service.detect_all("the quick brown fox")
    [Language(code='eng', probability=0.9999...)]
    >>> service.detect("der schnelle braune Fuchs")
    'de'
"""

import base64
import binascii
import re
from pathlib import Path
from types import MappingProxyType
from typing import List, Mapping, Optional, Pattern, Sequence, Union

from langsift.core.config.validation import DetectionConfig
from langsift.core.exceptions.custom_exceptions import (
    ConfigurationError,
    PatternCompileError,
)
from langsift.core.logging.logger import get_logger
from langsift.detection.classifier import NaiveBayesClassifier
from langsift.detection.ngrams import NGramExtractor
from langsift.detection.profiles import ProfileStore
from langsift.detection.ranker import Language, rank

logger = get_logger(__name__)


def compile_text_filter(pattern: Optional[str]) -> Optional[Pattern]:
    """
    Compile the whole-text filter pattern.

    Raises:
        PatternCompileError: If the pattern is not a valid regular expression
    """
    if pattern is None:
        return None
    try:
        return re.compile(pattern)
    except re.error as e:
        raise PatternCompileError(
            f"Invalid text filter pattern: {e}",
            details={"pattern": pattern},
        ) from e


def decode_binary(text: str) -> str:
    """Decode base64 encoded UTF-8, returning ``text`` unchanged on failure"""
    try:
        return base64.b64decode(text, validate=True).decode("utf-8")
    except (binascii.Error, ValueError):
        return text


class LanguageDetectionService:
    """
    Detects the languages of text spans.

    Args:
        store (ProfileStore): Built profile store
        config (Optional[DetectionConfig]): Detection configuration,
            defaults to ``DetectionConfig()``
        code_map (Optional[Mapping[str, str]]): Internal code to display
            code mapping applied to results

    Raises:
        PatternCompileError: If ``config.text_filter`` does not compile
        ConfigurationError: If ``config.prior`` does not have one entry per
            loaded language
    """

    def __init__(
        self,
        store: ProfileStore,
        config: Optional[DetectionConfig] = None,
        code_map: Optional[Mapping[str, str]] = None,
    ):
        self._store = store
        self._config = config or DetectionConfig()
        self._code_map = MappingProxyType(dict(code_map or {}))
        self._filter = compile_text_filter(self._config.text_filter)

        prior = self._config.prior
        if prior is not None and len(prior) != store.language_count:
            raise ConfigurationError(
                "prior length does not match the number of languages",
                error_code="CONFIG_PRIOR_LENGTH",
                details={
                    "prior_length": len(prior),
                    "languages": list(store.languages),
                },
            )

        self._extractor = NGramExtractor(store)
        self._classifier = NaiveBayesClassifier(store)

    @classmethod
    def from_directory(
        cls,
        profile_dir: Union[str, Path],
        languages: Optional[Sequence[str]] = None,
        profile: Optional[str] = None,
        config: Optional[DetectionConfig] = None,
        code_map: Optional[Mapping[str, str]] = None,
    ) -> "LanguageDetectionService":
        """
        Load profiles from a directory and build a service.

        When ``code_map`` is None the profile set's ``language.json`` is used
        if present.
        """
        from langsift.resources.loader import find_code_map, load_profile_store

        store = load_profile_store(profile_dir, languages, profile)
        if code_map is None:
            code_map = find_code_map(profile_dir, profile)
        return cls(store, config=config, code_map=code_map)

    @property
    def store(self) -> ProfileStore:
        return self._store

    @property
    def languages(self):
        return self._store.languages

    @property
    def config(self) -> DetectionConfig:
        return self._config

    @property
    def code_map(self) -> Mapping[str, str]:
        return self._code_map

    def extract(self, text: str) -> List[str]:
        return self._extractor.extract(text)

    def detect_all(self, text: Optional[str]) -> List[Language]:
        """
        Detect all languages of ``text`` above the probability threshold.

        Args:
            text: Text to analyze. None and empty text yield no result

        Returns:
            List[Language]: Results by descending probability, at most
                ``max_results`` long. Empty when no language is recognized
                or the text filter rejects the text
        """
        if not text:
            return []
        if self._config.binary:
            text = decode_binary(text)
        if self._filter is not None and not self._filter.fullmatch(text):
            logger.debug("Text rejected by filter", text_length=len(text))
            return []

        ngrams = self._extractor.extract(text)
        probabilities = self._classifier.classify(ngrams, self._config)
        results = rank(
            probabilities, self._store.languages, self._code_map, self._config
        )
        logger.debug(
            "Detection finished",
            text_length=len(text),
            ngrams=len(ngrams),
            results=len(results),
        )
        return results

    def detect(self, text: Optional[str]) -> Optional[str]:
        """Code of the most probable language, or None if none qualifies"""
        results = self.detect_all(text)
        return results[0].code if results else None
