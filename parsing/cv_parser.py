from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from .contacts import extract_email, extract_phone
from .names import extract_name
from .normalizers import normalize_lines, normalize_text
from .skills import SkillVocabulary, extract_skills
from .skills_vocab import DEFAULT_VOCABULARY


@dataclass(frozen=True)
class ExtractionResult:
    """Structured fields pulled from one document; missing fields are None."""

    text: str
    email: Optional[str] = None
    phone: Optional[str] = None
    name: Optional[str] = None
    skills: Tuple[str, ...] = field(default_factory=tuple)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "email": self.email,
            "phone": self.phone,
            "name": self.name,
            "skills": list(self.skills),
        }


def extract_fields(raw_text: Optional[str], vocabulary: Optional[SkillVocabulary] = None) -> ExtractionResult:
    """Run every extractor over the same document text.

    Contacts are matched on the flattened text; the name and skills section
    need line breaks and read the line-preserving variant instead.
    """
    vocabulary = vocabulary if vocabulary is not None else DEFAULT_VOCABULARY
    text = normalize_text(raw_text)
    lines = normalize_lines(raw_text)

    return ExtractionResult(
        text=text,
        email=extract_email(text),
        phone=extract_phone(text),
        name=extract_name(lines),
        skills=extract_skills(lines, vocabulary),
    )
