"""
Utility modules for configuration, logging and text processing.
"""
from .logger import setup_logger
from .text_utils import get_stopwords, tokenize, stem, contains_digit, make_text_sample

__all__ = [
    'setup_logger',
    'get_stopwords',
    'tokenize',
    'stem',
    'contains_digit',
    'make_text_sample'
]
