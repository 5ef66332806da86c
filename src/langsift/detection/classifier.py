"""
Monte-Carlo Naive-Bayes language classifier.

Each trial starts from a prior over the loaded languages and repeatedly
draws one n-gram at random from the input, multiplying every language's
probability by the smoothed likelihood of that n-gram::

    prob[i] *= alpha / base_freq + P(ngram | language i)

Every ``CONVERGENCE_CHECK_INTERVAL`` iterations the vector is normalized and
the trial stops once one language holds more than ``conv_threshold`` of the
mass or ``iteration_limit`` is reached. The smoothing weight ``alpha`` is
jittered per trial with Gaussian noise, and the final result is the average
of all trials.

Reproducibility:
    The random source is rebuilt from a fixed seed on every call. Each trial
    draws from its own generator spawned from that seed, so results are
    bit-identical across calls and processes, and running trials on a thread
    pool (``workers > 1``) does not change them.
"""

from concurrent.futures import ThreadPoolExecutor
from functools import partial
from itertools import count
from typing import List, Optional, Sequence

import numpy as np

from langsift.core.config.validation import DetectionConfig
from langsift.core.exceptions.custom_exceptions import ConfigurationError
from langsift.core.logging.logger import get_logger
from langsift.detection.profiles import ProfileStore

logger = get_logger(__name__)

CONVERGENCE_CHECK_INTERVAL = 5


def normalize_probabilities(prob: np.ndarray) -> float:
    """
    Normalize ``prob`` in place so it sums to one.

    Returns:
        float: The largest entry after normalization, 0.0 if the vector has
            no mass left to normalize
    """
    total = prob.sum()
    if total <= 0.0:
        return 0.0
    prob /= total
    return float(prob.max())


def initial_probabilities(config: DetectionConfig, language_count: int) -> np.ndarray:
    """Starting vector of a trial: the configured prior, else uniform"""
    if config.prior is not None:
        return np.array(config.prior, dtype=np.float64)
    return np.full(language_count, 1.0 / language_count, dtype=np.float64)


class NaiveBayesClassifier:
    """
    Estimates per-language probabilities for a sequence of n-grams.

    Args:
        store (ProfileStore): Index of per-language n-gram probabilities
    """

    def __init__(self, store: ProfileStore):
        self.store = store

    def classify(
        self,
        ngrams: Sequence[str],
        config: DetectionConfig,
        seed: Optional[int] = None,
    ) -> np.ndarray:
        """
        Run all trials and return the averaged probability vector.

        Args:
            ngrams: N-grams extracted from the text, with repetition
            config: Detection configuration
            seed: Seed of the random source, defaults to ``config.seed``

        Returns:
            np.ndarray: One probability per language in store order, all
                zero when ``ngrams`` is empty

        Raises:
            ConfigurationError: If ``config.prior`` does not have one entry
                per language
        """
        language_count = self.store.language_count
        if config.prior is not None and len(config.prior) != language_count:
            raise ConfigurationError(
                "prior length does not match the number of languages",
                error_code="CONFIG_PRIOR_LENGTH",
                details={
                    "prior_length": len(config.prior),
                    "languages": language_count,
                },
            )

        aggregate = np.zeros(language_count, dtype=np.float64)
        if not ngrams:
            return aggregate

        seed = config.seed if seed is None else seed
        trial_seeds = np.random.SeedSequence(seed).spawn(config.n_trials)
        run_trial = partial(self._run_trial, list(ngrams), config)

        if config.workers > 1 and config.n_trials > 1:
            workers = min(config.workers, config.n_trials)
            with ThreadPoolExecutor(max_workers=workers) as executor:
                trials = list(executor.map(run_trial, trial_seeds))
        else:
            trials = [run_trial(trial_seed) for trial_seed in trial_seeds]

        # Summed in trial order regardless of completion order
        for prob in trials:
            aggregate += prob / config.n_trials
        return aggregate

    def _run_trial(
        self,
        ngrams: List[str],
        config: DetectionConfig,
        trial_seed: np.random.SeedSequence,
    ) -> np.ndarray:
        rng = np.random.default_rng(trial_seed)
        prob = initial_probabilities(config, self.store.language_count)
        alpha = config.alpha + rng.standard_normal() * config.alpha_width
        weight = alpha / config.base_freq
        lookup = self.store.ngram_probabilities

        for i in count():
            vector = lookup.get(ngrams[rng.integers(len(ngrams))])
            if vector is not None:
                prob *= weight + vector
            if i % CONVERGENCE_CHECK_INTERVAL == 0:
                max_prob = normalize_probabilities(prob)
                if max_prob > config.conv_threshold or i >= config.iteration_limit:
                    logger.debug(
                        "Trial finished", iterations=i + 1, max_prob=max_prob
                    )
                    break
        return prob
