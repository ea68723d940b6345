from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class SectionRule:
    key: str
    triggers: tuple[str, ...]
    weight: int = 5

    @property
    def title(self) -> str:
        return self.key[:1].upper() + self.key[1:]


@dataclass(frozen=True)
class Indicator:
    key: str
    pattern: re.Pattern[str]
    weight: int
    suggestion: str | None = None


SECTION_RULES: tuple[SectionRule, ...] = (
    SectionRule(
        key="contact",
        triggers=("contact", "email", "phone", "address", "@", "+", "linkedin", "github", "portfolio"),
    ),
    SectionRule(
        key="summary",
        triggers=("summary", "profile", "objective", "about", "overview", "professional"),
    ),
    SectionRule(
        key="experience",
        triggers=("experience", "employment", "work", "career", "position", "role", "job", "developer", "engineer"),
    ),
    SectionRule(
        key="education",
        triggers=("education", "degree", "university", "college", "bachelor", "master", "phd", "academic"),
    ),
    SectionRule(
        key="skills",
        triggers=("skills", "technologies", "tools", "languages", "frameworks", "competencies", "abilities"),
    ),
)

TECH_SKILLS: tuple[str, ...] = (
    "javascript", "typescript", "react", "nextjs", "next.js", "nodejs", "node.js",
    "python", "java", "html", "css", "tailwind", "bootstrap", "git", "github",
    "aws", "docker", "kubernetes", "mongodb", "sql", "mysql", "postgresql",
    "angular", "vue", "express", "api", "rest", "graphql", "firebase", "redux",
)
# (minimum matches, points), checked top down.
TECH_SKILL_TIERS: tuple[tuple[int, int], ...] = ((5, 15), (3, 10), (1, 5))

ACTION_VERBS: tuple[str, ...] = (
    "developed", "built", "created", "designed", "implemented", "managed", "led",
    "improved", "optimized", "maintained", "collaborated", "delivered", "achieved",
)
ACTION_VERB_TIERS: tuple[tuple[int, int], ...] = ((5, 10), (3, 7))

# Digits and word boundaries are ASCII-only; \s stays Unicode.
CONTACT_INDICATORS: tuple[Indicator, ...] = (
    Indicator("email", re.compile(r"@"), 3, "Add email address"),
    Indicator("phone", re.compile(r"[+0-9\-()\s]{10,}"), 3, "Add phone number"),
    Indicator("linkedin", re.compile(r"linkedin", re.ASCII | re.IGNORECASE), 2, "Add LinkedIn profile"),
    Indicator("github", re.compile(r"github", re.ASCII | re.IGNORECASE), 2),
)

EXPERIENCE_INDICATORS: tuple[Indicator, ...] = (
    Indicator(
        "company",
        re.compile(
            r"(?<![A-Za-z0-9_])[A-Z][a-zA-Z\s]+"
            r"(?:Inc|LLC|Corp|Ltd|Studio|Co|Company|Technologies|Tech|Systems)(?![A-Za-z0-9_])"
        ),
        4,
        "Include company names in experience section",
    ),
    Indicator(
        "dates",
        re.compile(r"\d{4}|\d{1,2}/\d{4}|20\d{2}|19\d{2}", re.ASCII),
        4,
        "Add employment dates",
    ),
    Indicator(
        "job_title",
        re.compile(
            r"(developer|engineer|designer|manager|lead|senior|junior|analyst|specialist|coordinator)",
            re.ASCII | re.IGNORECASE,
        ),
        4,
        "Include specific job titles",
    ),
)
DESCRIPTION_MIN_LENGTH = 800
DESCRIPTION_WEIGHT = 3

EDUCATION_INDICATORS: tuple[Indicator, ...] = (
    Indicator(
        "institution",
        re.compile(r"(university|college|institute|school)", re.ASCII | re.IGNORECASE),
        4,
        "Include educational institution",
    ),
    Indicator(
        "degree",
        re.compile(r"(bachelor|master|phd|degree|diploma|certificate)", re.ASCII | re.IGNORECASE),
        3,
        "Specify degree type",
    ),
    Indicator(
        "field_of_study",
        re.compile(
            r"(engineering|science|computer|software|business|arts|design)",
            re.ASCII | re.IGNORECASE,
        ),
        3,
    ),
)

WORD_COUNT_TIERS: tuple[tuple[int, int], ...] = ((300, 10), (200, 7), (100, 4))

# Upper-case header lines; [A-Z\s] may run across line breaks.
SECTION_HEADER_PATTERN = re.compile(r"^[A-Z\s]{3,}$", re.MULTILINE)
SECTION_HEADER_WEIGHT = 3
SPECIAL_CHAR_PATTERN = re.compile(r"[^A-Za-z0-9_\s\-.,;:()\[\]@+/]")
SPECIAL_CHAR_LIMIT = 10
SPECIAL_CHAR_WEIGHT = 2

ACHIEVEMENT_PATTERN = re.compile(
    r"\d+[%+]|\d+\s*(years?|months?|projects?|people|users|clients|revenue|growth)",
    re.ASCII | re.IGNORECASE,
)
ACHIEVEMENT_WEIGHT = 5

MAX_SCORE = 100

MISSING_SECTION_ISSUE = "Missing {title} section"
MISSING_SECTION_SUGGESTION = "Add a clear {title} section with appropriate heading"
TECH_SKILLS_SUGGESTION = "Include more technical skills and technologies"
ACTION_VERBS_SUGGESTION = "Use more action verbs and professional keywords"
CONTENT_VOLUME_SUGGESTION = "Add more detailed content to your CV"
SECTION_HEADER_SUGGESTION = "Use clear section headers (EXPERIENCE, EDUCATION, etc.)"
SPECIAL_CHAR_ISSUE = "Too many special characters detected"
SPECIAL_CHAR_SUGGESTION = "Remove unnecessary special characters and symbols"
ACHIEVEMENT_SUGGESTION = "Include quantifiable achievements (numbers, percentages, metrics)"

LOW_SCORE_SUGGESTIONS: tuple[str, ...] = (
    "Your CV needs significant improvements for ATS compatibility",
    "Consider using our CV builder to create an ATS-optimized version",
)
FAIR_SCORE_SUGGESTION = "Good foundation, but some improvements needed for optimal ATS performance"
EXCELLENT_SCORE_SUGGESTION = "Excellent ATS compatibility! Your CV should perform well with most ATS systems"
LOW_SCORE_THRESHOLD = 60
FAIR_SCORE_THRESHOLD = 80
EXCELLENT_SCORE_THRESHOLD = 90
