"""Fixed lookup tables used by profile extraction and candidate scoring.

The tables are plain tuples inside a frozen dataclass. Extractors and scorers
take a ``Vocabulary`` argument (defaulting to ``DEFAULT_VOCABULARY``) so tests
and callers can supply their own without touching module state.
"""

from dataclasses import dataclass

# Skill categories
TECHNICAL = "technical"
SOFT = "soft"


@dataclass(frozen=True)
class Vocabulary:
    technical_skills: tuple[str, ...]
    soft_skills: tuple[str, ...]
    industries: tuple[str, ...]
    degree_keywords: tuple[str, ...]
    summary_keywords: tuple[str, ...]
    goal_keywords: tuple[str, ...]
    senior_indicators: tuple[str, ...]
    preferred_company_sizes: tuple[str, ...]
    goal_fallback: str = "Seeking new opportunities"


DEFAULT_VOCABULARY = Vocabulary(
    technical_skills=(
        "javascript", "python", "java", "c++", "react", "vue", "angular", "node.js",
        "typescript", "go", "rust", "sql", "postgresql", "mongodb", "redis",
        "docker", "kubernetes", "aws", "azure", "gcp", "git", "ci/cd",
        "machine learning", "ai", "data science", "tensorflow", "pytorch",
    ),
    soft_skills=(
        "leadership", "communication", "teamwork", "problem-solving",
        "critical thinking", "time management", "collaboration", "adaptability",
        "creativity", "emotional intelligence", "negotiation", "public speaking",
    ),
    industries=(
        "Technology", "Finance", "Healthcare", "Education", "Retail",
        "Manufacturing", "Consulting", "SaaS", "Fintech", "E-commerce",
    ),
    degree_keywords=("bachelor", "master", "phd", "mba", "b.s.", "m.s.", "b.a.", "m.a."),
    summary_keywords=("summary", "objective", "profile", "about"),
    goal_keywords=("seeking", "looking for", "interested in", "goal", "objective"),
    senior_indicators=("senior", "lead", "manager", "director"),
    # Mid-size buckets get the size bonus
    preferred_company_sizes=("51-200", "201-500"),
)
