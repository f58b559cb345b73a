"""
Keyword extraction from résumé text.
"""
from .extractor import KeywordExtractor, extract_keywords

__all__ = ['KeywordExtractor', 'extract_keywords']
