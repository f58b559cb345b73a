"""
LLM service modules for Groq Cloud integration.
"""
from .groq_service import initialize_llm

__all__ = ['initialize_llm']
