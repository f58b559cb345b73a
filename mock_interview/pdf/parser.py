"""
PDF parsing utilities for extracting text from uploaded résumés.
"""
import io

import pdfplumber

from ..errors import DocumentParseError
from ..utils.logger import setup_logger

logger = setup_logger("pdf_parser")


def extract_text_from_pdf(data: bytes) -> str:
    """
    Extract text from an in-memory PDF document.

    Args:
        data: Raw PDF bytes

    Returns:
        Extracted text as string (pages separated by newlines)

    Raises:
        DocumentParseError: If the bytes are empty or not a readable PDF
    """
    if not data:
        raise DocumentParseError("Empty document")

    try:
        text = ""
        with pdfplumber.open(io.BytesIO(data)) as pdf:
            for page in pdf.pages:
                page_text = page.extract_text()
                if page_text:
                    text += page_text + "\n"
    except Exception as e:
        raise DocumentParseError("Failed to parse PDF document", details=str(e)) from e

    text = text.strip()
    logger.info(f"Extracted {len(text)} characters from PDF ({len(data)} bytes)")
    return text
