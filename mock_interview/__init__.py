"""
Mock Interview service: résumé keyword extraction, LLM-generated interview
questions and answer scoring.
"""
__version__ = "1.0.0"
