import re
from typing import List, Optional

NUL_RE = re.compile(r"\x00")
WHITESPACE_RE = re.compile(r"\s+")


def strip_nul(txt: str) -> str:
    return NUL_RE.sub(" ", txt)


def collapse_whitespace(txt: str) -> str:
    return WHITESPACE_RE.sub(" ", txt).strip()


def normalize_text(txt: Optional[str]) -> str:
    """Flatten text to a single line: NULs become spaces, whitespace runs become one space."""
    return collapse_whitespace(strip_nul(txt or ""))


def normalize_lines(txt: Optional[str]) -> List[str]:
    """Line-preserving variant of normalize_text, used by the layout heuristics.

    Each line is collapsed and trimmed on its own; blank lines are dropped.
    """
    lines = (collapse_whitespace(l) for l in strip_nul(txt or "").splitlines())
    return [l for l in lines if l]
