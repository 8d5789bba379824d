import logging
from pathlib import Path
from typing import List, Union

import config
from .skills import SkillVocabulary

logger = logging.getLogger(__name__)

DEFAULT_SKILLS = (
    # languages
    "python", "java", "javascript", "typescript", "c++", "c#", "go", "golang",
    "rust", "ruby", "php", "kotlin", "swift", "scala", "matlab", "bash",
    "sql", "html", "css",
    # frameworks & libraries
    "react", "angular", "vue", "next.js", "node.js", "express", "django", "flask",
    "fastapi", "spring", "spring boot", ".net", "asp.net", "rails", "jquery",
    "tailwind", "bootstrap", "graphql", "rest",
    # data & ml
    "pandas", "numpy", "scikit-learn", "tensorflow", "pytorch", "keras", "spark",
    "hadoop", "airflow", "kafka", "tableau", "power bi", "excel",
    "machine learning", "deep learning", "nlp", "computer vision",
    # databases
    "postgresql", "mysql", "sqlite", "mongodb", "redis", "elasticsearch",
    "oracle", "dynamodb", "cassandra",
    # cloud & devops
    "aws", "azure", "gcp", "docker", "kubernetes", "terraform", "ansible",
    "jenkins", "git", "github", "gitlab", "ci/cd", "linux", "nginx",
    # practice
    "agile", "scrum", "jira", "figma", "unit testing", "microservices",
)


def load_vocabulary_file(path: Union[str, Path]) -> List[str]:
    """One skill per line; blank lines and '#' comments are skipped."""
    terms = []
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith("#"):
                terms.append(line)
    return terms


def build_default_vocabulary() -> SkillVocabulary:
    if config.SKILL_VOCABULARY_PATH:
        terms = load_vocabulary_file(config.SKILL_VOCABULARY_PATH)
        logger.info("Loaded %d skills from %s", len(terms), config.SKILL_VOCABULARY_PATH)
        return SkillVocabulary(terms)
    return SkillVocabulary(DEFAULT_SKILLS)


# Built once at import: file problems surface at startup, never mid-extraction.
DEFAULT_VOCABULARY = build_default_vocabulary()
