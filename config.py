"""
Configuration for the SkillLens extraction service.

Values come from the environment (or a local .env file).
"""

from dotenv import load_dotenv
load_dotenv()
import os
from typing import Optional


def vocabulary_path(value: Optional[str]) -> Optional[str]:
    """Validate SKILL_VOCABULARY_PATH up front so a bad path fails at startup."""
    if not value:
        return None
    if not os.path.isfile(value):
        raise ValueError(f"SKILL_VOCABULARY_PATH does not point to a file: {value}")
    return value


# Uploads above this size are refused before decoding
MAX_UPLOAD_BYTES = int(os.getenv("MAX_UPLOAD_BYTES", str(16 * 1024 * 1024)))

# pypdf output shorter than this is retried with pdfminer
PDF_MIN_TEXT_CHARS = int(os.getenv("PDF_MIN_TEXT_CHARS", "500"))

# Optional plain-text file (one skill per line) replacing the built-in vocabulary
SKILL_VOCABULARY_PATH = vocabulary_path(os.getenv("SKILL_VOCABULARY_PATH"))
