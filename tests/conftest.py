"""
Pytest configuration and fixtures for langsift tests
"""

import json
from collections import Counter
from pathlib import Path
from typing import Dict

import pytest

from langsift.core.config.validation import DetectionConfig
from langsift.detection.ngrams import iter_ngrams
from langsift.detection.profiles import (
    LanguageProfile,
    ProfileStore,
    ProfileStoreBuilder,
)
from langsift.detection.service import LanguageDetectionService

ENGLISH_CORPUS = """
The quick brown fox jumps over the lazy dog. This is a sample of English
text which is used to build a small profile for testing. The weather was
warm and the children were playing in the garden while their mother was
reading a book about the history of the city. We should have known that the
train would be late again, so we walked through the park and talked about
everything we wanted to do this summer. Where there is a will there is a way.
"""

GERMAN_CORPUS = """
Der schnelle braune Fuchs springt über den faulen Hund. Dies ist ein
kleiner deutscher Beispieltext für die Prüfung. Das Wetter war schön und
die Kinder spielten im Garten, während ihre Mutter ein Buch über die
Geschichte der Stadt las. Wir hätten wissen sollen, dass der Zug wieder
verspätet sein würde, also gingen wir durch den Park und sprachen über
alles, was wir in diesem Sommer machen wollten. Wo ein Wille ist, ist auch
ein Weg.
"""

ENGLISH_TEXT = "the quick brown fox"
GERMAN_TEXT = "Der schnelle braune Fuchs springt über den faulen Hund"


def build_profile(name: str, corpus: str) -> LanguageProfile:
    """Count the n-grams of a corpus into a profile"""
    counts = Counter(ngram for ngram in iter_ngrams(corpus) if ngram.strip())
    n_words = [0, 0, 0]
    for ngram, count in counts.items():
        n_words[len(ngram) - 1] += count
    return LanguageProfile(
        name=name, frequency=dict(counts), word_count_by_length=tuple(n_words)
    )


def make_store(profiles: Dict[str, Dict[str, int]]) -> ProfileStore:
    """Build a store from hand-written frequency tables (n_words = 10 each)"""
    builder = ProfileStoreBuilder(expected_total_languages=len(profiles))
    for name, frequency in profiles.items():
        builder.add_profile(
            LanguageProfile(
                name=name, frequency=frequency, word_count_by_length=(10, 10, 10)
            )
        )
    return builder.build()


@pytest.fixture(scope="session")
def english_profile() -> LanguageProfile:
    return build_profile("en", ENGLISH_CORPUS)


@pytest.fixture(scope="session")
def german_profile() -> LanguageProfile:
    return build_profile("de", GERMAN_CORPUS)


@pytest.fixture(scope="session")
def store(english_profile, german_profile) -> ProfileStore:
    builder = ProfileStoreBuilder(expected_total_languages=2)
    builder.add_profile(english_profile)
    builder.add_profile(german_profile)
    return builder.build()


@pytest.fixture
def service(store) -> LanguageDetectionService:
    return LanguageDetectionService(store, DetectionConfig())


@pytest.fixture
def profile_dir(tmp_path: Path, english_profile, german_profile) -> Path:
    """Profile directory with an en file and a de.json file"""
    directory = tmp_path / "profiles"
    directory.mkdir()
    (directory / "en").write_text(
        json.dumps(english_profile.to_dict()), encoding="utf-8"
    )
    (directory / "de.json").write_text(
        json.dumps(german_profile.to_dict()), encoding="utf-8"
    )
    return directory


@pytest.fixture
def store_factory():
    return make_store


@pytest.fixture
def english_text() -> str:
    return ENGLISH_TEXT


@pytest.fixture
def german_text() -> str:
    return GERMAN_TEXT
