"""
Language detection components.

    - profiles: LanguageProfile, ProfileStoreBuilder and the immutable
      ProfileStore index
    - ngrams: Character n-gram extraction
    - classifier: Monte-Carlo Naive-Bayes classifier
    - ranker: Result ordering and the Language result type
    - service: LanguageDetectionService, the detection entry point
"""

from .classifier import NaiveBayesClassifier
from .ngrams import NGramExtractor
from .profiles import LanguageProfile, ProfileStore, ProfileStoreBuilder
from .ranker import Language, rank
from .service import LanguageDetectionService

__all__ = [
    "Language",
    "LanguageDetectionService",
    "LanguageProfile",
    "NGramExtractor",
    "NaiveBayesClassifier",
    "ProfileStore",
    "ProfileStoreBuilder",
    "rank",
]
