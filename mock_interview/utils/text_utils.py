"""
Text processing utilities: tokenization, stop words and stemming.
"""
import re
from typing import FrozenSet, List

import nltk
from nltk.corpus import stopwords
from nltk.stem import PorterStemmer
from nltk.tokenize import RegexpTokenizer

from .logger import setup_logger
from ..errors import KeywordExtractionError

logger = setup_logger("text_utils")

# Word-boundary tokenizer: "node.js" -> ["node", "js"]
_tokenizer = RegexpTokenizer(r"\w+")
_stemmer = PorterStemmer()
_stop_words = None

_DIGIT_RE = re.compile(r"\d")


def get_stopwords() -> FrozenSet[str]:
    """
    Get the NLTK English stop-word set, downloading the corpus if needed.

    Raises:
        KeywordExtractionError: If the corpus is missing and cannot be downloaded
    """
    global _stop_words
    if _stop_words is None:
        try:
            words = stopwords.words('english')
        except LookupError:
            logger.info("NLTK stopwords corpus not found, downloading...")
            nltk.download('stopwords', quiet=True)
            try:
                words = stopwords.words('english')
            except LookupError as e:
                logger.error("❌ NLTK stopwords corpus unavailable after download attempt")
                raise KeywordExtractionError(
                    "Stop-word list unavailable", details=str(e)
                ) from e
        _stop_words = frozenset(words)
    return _stop_words


def tokenize(text: str) -> List[str]:
    """
    Lowercase text and split it into word tokens.

    Args:
        text: Raw text

    Returns:
        List of lowercase tokens (punctuation removed)
    """
    if not text:
        return []
    return _tokenizer.tokenize(text.lower())


def stem(word: str) -> str:
    """Reduce a word to its Porter stem ("running" -> "run")."""
    return _stemmer.stem(word)


def contains_digit(token: str) -> bool:
    """Check whether a token contains any digit character."""
    return _DIGIT_RE.search(token) is not None


def make_text_sample(text: str, max_chars: int = 200) -> str:
    """Truncate text for display, always marking it with a trailing ellipsis."""
    return (text or "")[:max_chars] + "..."
