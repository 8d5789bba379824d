import logging
import re
from typing import Iterable, Optional

logger = logging.getLogger(__name__)

# letters (any script), spaces and periods only
NAME_LINE_RE = re.compile(r"^(?:[^\W\d_]|[ .]){2,50}$")
HAS_LETTER_RE = re.compile(r"[^\W\d_]")
MAX_NAME_TOKENS = 3

# Words that open a résumé section rather than a person's name.
NON_NAME_WORDS = {
    "resume", "résumé", "cv", "curriculum", "vitae", "summary", "qualifications",
    "profile", "objective", "skills", "expertise", "experience", "education",
    "projects", "certifications", "contact", "references", "languages",
}


def is_name_shaped(line: str) -> bool:
    if not NAME_LINE_RE.match(line) or not HAS_LETTER_RE.search(line):
        return False
    tokens = line.split()
    if len(tokens) > MAX_NAME_TOKENS:
        return False
    return not any(t.strip(".").lower() in NON_NAME_WORDS for t in tokens)


def extract_name(lines: Iterable[str]) -> Optional[str]:
    """Candidate name from the first non-empty line, or None.

    Later lines are never considered: a first line that doesn't look like a
    name means the layout is unknown and no name is reported.
    """
    first = next((l.strip() for l in lines if l and l.strip()), None)
    if first is None:
        return None
    if not is_name_shaped(first):
        logger.debug("First line rejected as name: %r", first[:60])
        return None
    return first
