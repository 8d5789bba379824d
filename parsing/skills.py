"""
Skill extraction scoped to the résumé's skills section.

The section is located by heading, cut at the next known section heading,
split into tokens and every token is resolved against a SkillVocabulary, so
only canonical vocabulary spellings ever come out.
"""
import logging
import re
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

SKILL_HEADINGS = [
    "technical skills", "professional skills", "areas of expertise",
    "core skills", "key skills", "skills", "expertise",
]
STOP_HEADINGS = [
    "work experience", "professional experience", "volunteer experience",
    "employment history", "employment", "experience", "education", "projects?",
]
# Section breaks only when alone on the line; "Languages: Python, Go" inside
# a skills section is a sub-heading.
BARE_STOP_HEADINGS = [
    "certifications?", "summary", "profile", "objective", "languages?",
    "interests?", "awards?", "achievements?", "publications?", "references?",
]

SKILLS_HEADING_RE = re.compile(
    r"^(?:" + "|".join(re.escape(h) for h in SKILL_HEADINGS) + r")"
    r"\s*(?:[:|\-–—]\s*(?P<rest>.*))?$",
    re.IGNORECASE,
)
STOP_HEADING_RE = re.compile(
    r"^(?:(?:" + "|".join(STOP_HEADINGS) + r")\s*(?::.*)?"
    r"|(?:" + "|".join(BARE_STOP_HEADINGS) + r")\s*:?\s*)$",
    re.IGNORECASE,
)

BULLET_GLYPHS_RE = re.compile(r"[•●▪◦∙·►▸✓✔*]")
LEADING_DASH_RE = re.compile(r"^\s*[-–—]\s+", re.MULTILINE)
TOKEN_SPLIT_RE = re.compile(r"[,;|\n]")


def _term_pattern(term: str) -> re.Pattern:
    # neighbours may be digits or punctuation, never letters
    return re.compile(r"(?<![^\W\d_])" + re.escape(term) + r"(?![^\W\d_])", re.IGNORECASE)


class SkillVocabulary:
    """Ordered, read-only set of canonical (lower-case) skill names."""

    __slots__ = ("_terms", "_patterns")

    def __init__(self, terms: Iterable[str]) -> None:
        canonical = (t.strip().lower() for t in terms)
        self._terms: Tuple[str, ...] = tuple(dict.fromkeys(t for t in canonical if t))
        self._patterns: Tuple[Tuple[str, re.Pattern], ...] = tuple(
            (t, _term_pattern(t)) for t in self._terms
        )

    @property
    def terms(self) -> Tuple[str, ...]:
        return self._terms

    def __iter__(self) -> Iterator[str]:
        return iter(self._terms)

    def __len__(self) -> int:
        return len(self._terms)

    def __contains__(self, term: object) -> bool:
        return isinstance(term, str) and term.strip().lower() in self._terms

    def __repr__(self) -> str:
        return f"SkillVocabulary({len(self._terms)} terms)"

    def find_in(self, text: str) -> List[str]:
        """Vocabulary terms occurring as whole words in text, in vocabulary order."""
        if not text:
            return []
        return [t for t, rx in self._patterns if rx.search(text)]


def find_skills_section(lines: Sequence[str]) -> Optional[str]:
    start = None
    body: List[str] = []
    for i, line in enumerate(lines):
        m = SKILLS_HEADING_RE.match(line.strip())
        if m:
            start = i
            if m.group("rest"):
                body.append(m.group("rest"))
            break
    if start is None:
        return None
    for line in lines[start + 1:]:
        if STOP_HEADING_RE.match(line.strip()):
            break
        body.append(line)
    return "\n".join(body)


def split_skill_tokens(span: str) -> List[str]:
    span = LEADING_DASH_RE.sub("", BULLET_GLYPHS_RE.sub(" ", span or ""))
    tokens = (t.strip() for t in TOKEN_SPLIT_RE.split(span))
    return [t for t in tokens if len(t) > 1]


def extract_skills(lines: Sequence[str], vocabulary: SkillVocabulary) -> Tuple[str, ...]:
    span = find_skills_section(lines)
    if span is None:
        logger.debug("No skills section found")
        return ()
    found = set()
    for token in split_skill_tokens(span):
        found.update(vocabulary.find_in(token))
    return tuple(sorted(found))
