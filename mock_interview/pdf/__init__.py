"""
PDF parsing utilities for extracting text from uploaded résumés.
"""
from .parser import extract_text_from_pdf

__all__ = ['extract_text_from_pdf']
