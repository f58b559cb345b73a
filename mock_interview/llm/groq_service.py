"""
Groq Cloud LLM service for interview question generation and answer scoring.

Both the question generator and the answer evaluator share one chat model
instance built here; tests substitute any LangChain chat model.
"""
import os
from langchain_groq import ChatGroq

from ..utils.config import (
    GROQ_API_KEY,
    GROQ_MODEL_NAME,
    GROQ_TEMPERATURE,
    GROQ_MAX_TOKENS
)
from ..utils.logger import setup_logger

logger = setup_logger("groq_service")


def initialize_llm(
    api_key: str = None,
    model_name: str = None,
    temperature: float = None,
    max_tokens: int = None
) -> ChatGroq:
    """
    Initialize Groq Cloud LLM.

    Args:
        api_key: Groq API key. If None, uses environment variable or config.
        model_name: Model name. If None, uses config default.
        temperature: Temperature setting. If None, uses config default.
        max_tokens: Max tokens. If None, uses config default.

    Returns:
        ChatGroq LLM instance

    Raises:
        ValueError: If no API key is configured
    """
    if api_key is None:
        api_key = os.environ.get("GROQ_API_KEY", GROQ_API_KEY)

    if not api_key:
        raise ValueError("GROQ_API_KEY not found. Please set it in environment or .env file.")

    if model_name is None:
        model_name = GROQ_MODEL_NAME
    if temperature is None:
        temperature = GROQ_TEMPERATURE
    if max_tokens is None:
        max_tokens = GROQ_MAX_TOKENS

    try:
        llm = ChatGroq(
            groq_api_key=api_key,
            model_name=model_name,
            temperature=temperature,
            max_tokens=max_tokens
        )
        logger.info(
            f"✅ Groq Cloud LLM initialized: {model_name} "
            f"(temp={temperature}, max_tokens={max_tokens})"
        )
        return llm
    except Exception as e:
        logger.error(f"❌ Groq initialization failed: {e}")
        raise
