"""
Configuration settings for the Mock Interview service.
"""
import os

from dotenv import load_dotenv

load_dotenv()

# LLM configuration
GROQ_API_KEY = os.environ.get("GROQ_API_KEY")
GROQ_MODEL_NAME = os.environ.get("GROQ_MODEL_NAME", "llama-3.3-70b-versatile")
GROQ_TEMPERATURE = float(os.environ.get("GROQ_TEMPERATURE", "0.7"))
GROQ_MAX_TOKENS = int(os.environ.get("GROQ_MAX_TOKENS", "2048"))

# Server configuration
HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", "3000"))

# Logging configuration
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
LOG_FILE = os.environ.get("LOG_FILE")  # console only when unset

# Upload configuration
MAX_UPLOAD_BYTES = 5 * 1024 * 1024  # 5 MB, single file
TEXT_SAMPLE_CHARS = 200  # Characters of extracted text echoed back to the client

# Keyword extraction configuration
DEFAULT_TOP_N_KEYWORDS = 15
MIN_KEYWORD_LENGTH = 4  # Tokens of 3 characters or fewer are dropped
BOILERPLATE_TOKENS = frozenset({"http", "https", "com"})

# Question generation configuration
DEFAULT_NUM_QUESTIONS = 5
