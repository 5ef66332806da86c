"""
Language profiles and the n-gram probability index.

A ``LanguageProfile`` holds the n-gram counts observed for one language.
Profiles are added, in load order, to a ``ProfileStoreBuilder`` which turns
the counts into per-language probabilities keyed by n-gram. ``build()``
seals the builder and returns a ``ProfileStore``: an immutable index that can
be shared by any number of concurrent detection calls without locking.

Nothing can add to or modify a store once it has been built. Changing the
language set means building a new store.

Index layout:
    For an n-gram ``w`` of length 1..3 and the language at position ``i``::

        probabilities[w][i] = freq_i(w) / n_words_i[len(w) - 1]

    Languages that never observed ``w`` keep 0.0 at their position.

Example:
    >>> builder = ProfileStoreBuilder(expected_total_languages=2)
    >>> builder.add_profile(english_profile)
    >>> builder.add_profile(german_profile)
    >>> store = builder.build()
    >>> store.languages
    ('en', 'de')
    >>> store.get("th")
    array([0.0123, 0.0004])
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterator, Optional, Tuple

import numpy as np

from langsift.core.exceptions.custom_exceptions import (
    DuplicateLanguageError,
    ProfileError,
)
from langsift.core.logging.logger import get_logger

logger = get_logger(__name__)

# Longest n-gram used by profiles and by the extractor
MAX_NGRAM_LENGTH = 3


@dataclass(frozen=True)
class LanguageProfile:
    """
    N-gram frequency table of a single language.

    Attributes:
        name (str): Language code, for example ``en`` or ``zh-cn``
        frequency (Mapping[str, int]): Occurrence count per n-gram
        word_count_by_length (Tuple[int, int, int]): Total number of
            n-grams observed for lengths 1, 2 and 3
    """

    name: str
    frequency: Mapping[str, int] = field(repr=False)
    word_count_by_length: Tuple[int, ...]

    def __post_init__(self) -> None:
        if not self.name:
            raise ProfileError("Profile name cannot be empty")
        if len(self.word_count_by_length) != MAX_NGRAM_LENGTH:
            raise ProfileError(
                f"Profile '{self.name}' must have {MAX_NGRAM_LENGTH} "
                "per-length totals",
                details={"n_words": list(self.word_count_by_length)},
            )
        for ngram in self.frequency:
            length = len(ngram)
            total = (
                self.word_count_by_length[length - 1]
                if 1 <= length <= MAX_NGRAM_LENGTH
                else 1
            )
            if total <= 0:
                raise ProfileError(
                    f"Profile '{self.name}' has {length}-grams but a "
                    f"non-positive {length}-gram total",
                    details={"n_words": list(self.word_count_by_length)},
                )
        object.__setattr__(
            self, "frequency", MappingProxyType(dict(self.frequency))
        )
        object.__setattr__(
            self, "word_count_by_length", tuple(self.word_count_by_length)
        )

    @classmethod
    def from_dict(cls, data: Mapping) -> "LanguageProfile":
        """
        Create a profile from its serialized form.

        Args:
            data: Mapping with ``name``, ``freq`` (n-gram to count) and
                ``n_words`` (three per-length totals)

        Raises:
            ProfileError: If a key is missing or has the wrong shape
        """
        try:
            name = data["name"]
            freq = data["freq"]
            n_words = data["n_words"]
        except (KeyError, TypeError) as e:
            raise ProfileError(f"Malformed profile, missing {e}") from e
        if not isinstance(freq, Mapping) or not isinstance(n_words, (list, tuple)):
            raise ProfileError(
                f"Malformed profile '{name}': freq must be an object and "
                "n_words a list"
            )
        try:
            return cls(
                name=str(name),
                frequency={str(k): int(v) for k, v in freq.items()},
                word_count_by_length=tuple(int(n) for n in n_words),
            )
        except (TypeError, ValueError) as e:
            raise ProfileError(f"Malformed profile '{name}': {e}") from e

    def to_dict(self) -> Dict:
        return {
            "name": self.name,
            "freq": dict(self.frequency),
            "n_words": list(self.word_count_by_length),
        }


class ProfileStore(Mapping):
    """
    Immutable n-gram to per-language probability index.

    Behaves as a read-only mapping from n-gram to a read-only float64 vector
    with one entry per language, in the order of ``languages``.
    """

    def __init__(
        self, languages: Tuple[str, ...], probabilities: Dict[str, np.ndarray]
    ):
        self._languages = tuple(languages)
        self._probabilities = MappingProxyType(probabilities)

    @property
    def languages(self) -> Tuple[str, ...]:
        return self._languages

    @property
    def ngram_probabilities(self) -> Mapping[str, np.ndarray]:
        return self._probabilities

    @property
    def language_count(self) -> int:
        return len(self._languages)

    def index_of(self, code: str) -> int:
        """Position of a language code in the index vectors"""
        return self._languages.index(code)

    def __getitem__(self, ngram: str) -> np.ndarray:
        return self._probabilities[ngram]

    def __contains__(self, ngram: object) -> bool:
        return ngram in self._probabilities

    def __iter__(self) -> Iterator[str]:
        return iter(self._probabilities)

    def __len__(self) -> int:
        return len(self._probabilities)

    def __repr__(self) -> str:
        return (
            f"ProfileStore(languages={list(self._languages)!r}, "
            f"ngrams={len(self._probabilities)})"
        )


class ProfileStoreBuilder:
    """
    Accumulates language profiles and produces a ``ProfileStore``.

    The builder is append-only. Each added profile receives the next index,
    so load order decides vector positions and, through the ranker, which
    language comes first on equal scores.

    Args:
        expected_total_languages (int): Number of languages that will be
            added; index vectors are allocated at this size
    """

    def __init__(self, expected_total_languages: int):
        if expected_total_languages < 1:
            raise ProfileError(
                "expected_total_languages must be at least 1",
                details={"expected_total_languages": expected_total_languages},
            )
        self.expected_total_languages = expected_total_languages
        self._languages = []
        self._probabilities: Dict[str, np.ndarray] = {}
        self._built = False

    @property
    def languages(self) -> Tuple[str, ...]:
        return tuple(self._languages)

    def add_profile(
        self,
        profile: LanguageProfile,
        expected_total_languages: Optional[int] = None,
    ) -> None:
        """
        Add a profile at the next language index.

        Args:
            profile (LanguageProfile): Profile to add
            expected_total_languages (Optional[int]): Total number of
                languages the caller is loading; defaults to the size the
                builder was created with and may not exceed it

        Raises:
            DuplicateLanguageError: If the language code was already added
            ProfileError: If the builder is sealed or already full
        """
        size = expected_total_languages or self.expected_total_languages
        if self._built:
            raise ProfileError(
                "Profile store already built, create a new builder to reload",
                error_code="STORE_SEALED",
                details={"language": profile.name},
            )
        if size > self.expected_total_languages:
            raise ProfileError(
                f"Vector size {size} exceeds the store size "
                f"{self.expected_total_languages}",
                details={"language": profile.name},
            )
        if profile.name in self._languages:
            raise DuplicateLanguageError(
                f"duplicate of the same language profile: {profile.name}",
                details={"language": profile.name, "languages": self.languages},
            )
        index = len(self._languages)
        if index >= size:
            raise ProfileError(
                f"Cannot add '{profile.name}', store sized for {size} languages",
                error_code="STORE_FULL",
                details={"language": profile.name, "languages": self.languages},
            )

        self._languages.append(profile.name)
        word_counts = profile.word_count_by_length
        added = 0
        for ngram, count in profile.frequency.items():
            length = len(ngram)
            if not 1 <= length <= MAX_NGRAM_LENGTH:
                continue
            vector = self._probabilities.get(ngram)
            if vector is None:
                vector = np.zeros(self.expected_total_languages, dtype=np.float64)
                self._probabilities[ngram] = vector
            vector[index] = count / word_counts[length - 1]
            added += 1

        logger.debug(
            "Profile added", language=profile.name, index=index, ngrams=added
        )

    def build(self) -> ProfileStore:
        """
        Seal the builder and return the immutable store.

        Vectors are cut to the number of languages actually added and marked
        read-only.

        Raises:
            ProfileError: If no profile was added or the builder was already
                built
        """
        if self._built:
            raise ProfileError("Profile store already built", error_code="STORE_SEALED")
        if not self._languages:
            raise ProfileError("Cannot build a profile store without profiles")
        self._built = True

        count = len(self._languages)
        probabilities = {}
        for ngram, vector in self._probabilities.items():
            if len(vector) != count:
                vector = vector[:count].copy()
            vector.flags.writeable = False
            probabilities[ngram] = vector
        self._probabilities = {}

        store = ProfileStore(tuple(self._languages), probabilities)
        logger.info(
            "Profile store built", languages=list(store.languages), ngrams=len(store)
        )
        return store
