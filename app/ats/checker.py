from __future__ import annotations

import re

from app.ats import rules
from app.schemas.ats import ATSCheckResult, ContactMatches, SectionFlags

_EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Z|a-z]{2,}\b", re.ASCII)
_PHONE_RE = re.compile(r"(\+?[0-9]{1,4}[-.\s]?)?\(?[0-9]{1,4}\)?[-.\s]?[0-9]{1,4}[-.\s]?[0-9]{1,9}")
_LINKEDIN_RE = re.compile(r"linkedin\.com/in/[\w-]+", re.ASCII | re.IGNORECASE)


def _count_matches(lowered: str, keywords: tuple[str, ...]) -> int:
    return sum(1 for keyword in keywords if keyword in lowered)


def _tier_points(count: int, tiers: tuple[tuple[int, int], ...]) -> int:
    for minimum, points in tiers:
        if count >= minimum:
            return points
    return 0


def _score_indicators(
    text: str,
    indicators: tuple[rules.Indicator, ...],
    suggestions: list[str],
) -> int:
    points = 0
    missing: list[str] = []
    for indicator in indicators:
        if indicator.pattern.search(text):
            points += indicator.weight
        elif indicator.suggestion:
            missing.append(indicator.suggestion)
    suggestions.extend(missing)
    return points


def closing_suggestions(score: int) -> list[str]:
    """Band messages appended after clamping. Scores in [80, 90) get none."""
    if score < rules.LOW_SCORE_THRESHOLD:
        return list(rules.LOW_SCORE_SUGGESTIONS)
    if score < rules.FAIR_SCORE_THRESHOLD:
        return [rules.FAIR_SCORE_SUGGESTION]
    if score >= rules.EXCELLENT_SCORE_THRESHOLD:
        return [rules.EXCELLENT_SCORE_SUGGESTION]
    return []


def check_ats_compliance(text: str) -> ATSCheckResult:
    """Score plain CV text against fixed ATS heuristics.

    Total over every string: empty or junk input yields a low score with
    issues and suggestions, never an exception. Issues and suggestions keep
    rule evaluation order and are not deduplicated.
    """
    text = text or ""
    lowered = text.lower()
    issues: list[str] = []
    suggestions: list[str] = []
    sections: dict[str, bool] = {}
    total = 0

    for rule in rules.SECTION_RULES:
        found = any(trigger in lowered for trigger in rule.triggers)
        sections[rule.key] = found
        if found:
            total += rule.weight
        else:
            issues.append(rules.MISSING_SECTION_ISSUE.format(title=rule.title))
            suggestions.append(rules.MISSING_SECTION_SUGGESTION.format(title=rule.title))

    tech_points = _tier_points(_count_matches(lowered, rules.TECH_SKILLS), rules.TECH_SKILL_TIERS)
    total += tech_points
    if not tech_points:
        suggestions.append(rules.TECH_SKILLS_SUGGESTION)

    verb_points = _tier_points(_count_matches(lowered, rules.ACTION_VERBS), rules.ACTION_VERB_TIERS)
    total += verb_points
    if not verb_points:
        suggestions.append(rules.ACTION_VERBS_SUGGESTION)

    total += _score_indicators(text, rules.CONTACT_INDICATORS, suggestions)

    total += _score_indicators(text, rules.EXPERIENCE_INDICATORS, suggestions)
    if len(text) > rules.DESCRIPTION_MIN_LENGTH:
        total += rules.DESCRIPTION_WEIGHT

    total += _score_indicators(text, rules.EDUCATION_INDICATORS, suggestions)

    volume_points = _tier_points(len(text.split()), rules.WORD_COUNT_TIERS)
    total += volume_points
    if not volume_points:
        suggestions.append(rules.CONTENT_VOLUME_SUGGESTION)

    if rules.SECTION_HEADER_PATTERN.search(text):
        total += rules.SECTION_HEADER_WEIGHT
    else:
        suggestions.append(rules.SECTION_HEADER_SUGGESTION)

    if len(rules.SPECIAL_CHAR_PATTERN.findall(text)) < rules.SPECIAL_CHAR_LIMIT:
        total += rules.SPECIAL_CHAR_WEIGHT
    else:
        issues.append(rules.SPECIAL_CHAR_ISSUE)
        suggestions.append(rules.SPECIAL_CHAR_SUGGESTION)

    if rules.ACHIEVEMENT_PATTERN.search(text):
        total += rules.ACHIEVEMENT_WEIGHT
    else:
        suggestions.append(rules.ACHIEVEMENT_SUGGESTION)

    score = max(0, min(rules.MAX_SCORE, total))
    suggestions.extend(closing_suggestions(score))

    return ATSCheckResult(
        score=score,
        issues=issues,
        suggestions=suggestions,
        sections=SectionFlags(**sections),
    )


def extract_contact_info(text: str) -> ContactMatches:
    """Every email, phone-like run and LinkedIn profile URL found in the text."""
    text = text or ""
    return ContactMatches(
        emails=[match.group(0) for match in _EMAIL_RE.finditer(text)],
        phones=[match.group(0) for match in _PHONE_RE.finditer(text)],
        linkedin=[match.group(0) for match in _LINKEDIN_RE.finditer(text)],
    )
