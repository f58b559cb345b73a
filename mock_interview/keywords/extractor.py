"""
Keyword extraction for uploaded résumés.

Pipeline: tokenize -> filter (length, stop words, digits, boilerplate)
-> Porter stem -> frequency count -> top N stems.
"""
from collections import Counter
from typing import Iterable, List, Optional

from ..utils.config import (
    BOILERPLATE_TOKENS,
    DEFAULT_TOP_N_KEYWORDS,
    MIN_KEYWORD_LENGTH
)
from ..utils.logger import setup_logger
from ..utils.text_utils import contains_digit, get_stopwords, stem, tokenize

logger = setup_logger("keyword_extractor")


class KeywordExtractor:
    """
    Deterministic frequency-based keyword extractor.

    Equal counts are ordered by stem so repeated calls on the same text
    always return the same sequence.
    """

    def __init__(
        self,
        stop_words: Optional[Iterable[str]] = None,
        boilerplate: Iterable[str] = BOILERPLATE_TOKENS,
        min_length: int = MIN_KEYWORD_LENGTH
    ):
        """
        Initialize the extractor.

        Args:
            stop_words: Words to ignore. If None, uses the NLTK English list.
            boilerplate: Extra tokens to ignore (URL fragments and the like).
            min_length: Shortest token kept.
        """
        self._stop_words = frozenset(stop_words) if stop_words is not None else None
        self.boilerplate = frozenset(boilerplate)
        self.min_length = min_length

    @property
    def stop_words(self):
        if self._stop_words is None:
            self._stop_words = get_stopwords()
        return self._stop_words

    def is_candidate(self, token: str) -> bool:
        """Check whether a token survives the filters."""
        return (
            len(token) >= self.min_length
            and token not in self.stop_words
            and not contains_digit(token)
            and token not in self.boilerplate
        )

    def count_stems(self, text: str) -> Counter:
        """Count stem occurrences over the filtered tokens of text."""
        return Counter(stem(token) for token in tokenize(text) if self.is_candidate(token))

    def extract(self, text: str, top_n: int = DEFAULT_TOP_N_KEYWORDS) -> List[str]:
        """
        Extract the top_n most frequent stems from text.

        Args:
            text: Raw document text
            top_n: Maximum number of keywords to return

        Returns:
            Stems ordered by descending frequency, ties ordered alphabetically.
            Empty list for empty or fully filtered text.
        """
        if top_n <= 0:
            return []

        counts = self.count_stems(text)
        ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
        keywords = [word for word, _ in ranked[:top_n]]

        logger.debug(f"Extracted {len(keywords)} keywords from {len(counts)} distinct stems")
        return keywords


_default_extractor = None


def extract_keywords(text: str, top_n: int = DEFAULT_TOP_N_KEYWORDS) -> List[str]:
    """Extract keywords with the shared default extractor."""
    global _default_extractor
    if _default_extractor is None:
        _default_extractor = KeywordExtractor()
    return _default_extractor.extract(text, top_n=top_n)
