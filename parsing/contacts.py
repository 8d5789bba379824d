import re
from typing import Optional

EMAIL_RE = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
# +CC, then (area) or a bare 3-digit group, then 3 + 4 digits; roughly ten digits in all
PHONE_RE = re.compile(
    r"(?<![\d+])"
    r"(?:\+\d{1,3}[\s.-]?)?"
    r"(?:\(\d{2,4}\)[\s.-]?|\d{3}[\s.-]?)"
    r"\d{3}[\s.-]?\d{4}"
    r"(?!\d)"
)


def extract_email(text: str) -> Optional[str]:
    m = EMAIL_RE.search(text or "")
    return m.group(0) if m else None


def extract_phone(text: str) -> Optional[str]:
    """First phone-like run in document order, returned exactly as written."""
    m = PHONE_RE.search(text or "")
    return m.group(0) if m else None
