"""
Character n-gram extraction.

Text is reduced to word characters and spaces, then scanned one character at
a time. At every position the 1-, 2- and 3-gram ending there are produced,
and only the ones known to the profile store are kept. The output keeps
order and repetition: the classifier samples from it with replacement, so an
n-gram occurring twice is twice as likely to be drawn.

Every non-word character becomes exactly one space. Runs of punctuation are
not collapsed; consecutive spaces are n-grams of their own.

Example:
    >>> extractor = NGramExtractor(store)
    >>> extractor.extract("Hi!")
    ['H', 'i', 'Hi', ' ', 'i ', 'Hi ']   # those present in the store
"""

import re
from typing import Container, Iterator, List

from langsift.detection.profiles import MAX_NGRAM_LENGTH

NON_WORD = re.compile(r"\W")


def clean_text(text: str) -> str:
    """Replace every non-word character with a single space"""
    return NON_WORD.sub(" ", text)


class NGramWindow:
    """Rolling buffer over the last characters seen"""

    def __init__(self, size: int = MAX_NGRAM_LENGTH):
        self.size = size
        self._buffer = ""

    def add_char(self, ch: str) -> None:
        self._buffer = (self._buffer + ch)[-self.size :]

    def get(self, n: int):
        """The n-gram ending at the current character, or None if too short"""
        if n < 1 or n > len(self._buffer):
            return None
        return self._buffer[-n:]


def iter_ngrams(text: str, max_length: int = MAX_NGRAM_LENGTH) -> Iterator[str]:
    """Yield every n-gram of the cleaned text, shortest first per position"""
    window = NGramWindow(max_length)
    for ch in clean_text(text):
        window.add_char(ch)
        for n in range(1, max_length + 1):
            ngram = window.get(n)
            if ngram is not None:
                yield ngram


class NGramExtractor:
    """
    Turns raw text into the sequence of n-grams the store knows about.

    Args:
        index: Anything supporting ``in`` for n-gram strings, normally a
            ``ProfileStore``
    """

    def __init__(self, index: Container[str]):
        self.index = index

    def extract(self, text: str) -> List[str]:
        index = self.index
        return [ngram for ngram in iter_ngrams(text) if ngram in index]
