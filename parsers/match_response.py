import re
from typing import List, Optional, Sequence

from schemas import (
    DEFAULT_GROWTH_POTENTIAL,
    DEFAULT_LOCAL_COMPETITION,
    DEFAULT_SALARY_RANGE,
    JobMatchResponse,
    LocalMarketInsights,
    UpskillingSuggestions,
)

# Section labels, in the order the advisor is asked to emit them
RECOMMENDATIONS = r"recommendations?"
SKILL_GAPS = r"skill gaps?"
LOCAL_MARKET_INSIGHTS = r"local market insights?"
UPSKILLING = r"upskilling(?: suggestions?)?"
SECTION_LABELS = (RECOMMENDATIONS, SKILL_GAPS, LOCAL_MARKET_INSIGHTS, UPSKILLING)

# Nested labels inside the upskilling section
COURSES = r"courses?"
CERTIFICATIONS = r"certifications?"
RESOURCES = r"resources?"
UPSKILLING_LABELS = (COURSES, CERTIFICATIONS, RESOURCES)

# "match score", then punctuation/markdown/whitespace, then the first integer
SCORE_RE = re.compile(r"match score[^\w]*?(-?\d+)", re.IGNORECASE)
BLANK_LINE = r"\n[ \t]*\n"
BULLET_RE = re.compile(r"^[-•]\s*")
SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")


def extract_match_score(text: str) -> int:
    """First 'match score' integer, clamped to 0..100; 0 when absent."""
    m = SCORE_RE.search(text)
    if not m:
        return 0
    return min(100, max(0, int(m.group(1))))


def extract_section(text: str, label: str, siblings: Sequence[str] = SECTION_LABELS) -> Optional[str]:
    """
    Text following `label` up to the next sibling label, a blank line or the end.

    Returns None when the label does not occur and "" when it occurs with nothing
    after it. Matching is case-insensitive and spans newlines; whitespace right
    after the label (and its colon) is skipped.
    """
    stops = [s for s in siblings if s != label]
    stop = "|".join([rf"\b(?:{s})\b" for s in stops] + [BLANK_LINE, r"\Z"])
    pattern = rf"\b(?:{label})\b:?\s*(.*?)(?={stop})"
    m = re.search(pattern, text, re.IGNORECASE | re.DOTALL)
    return m.group(1) if m else None


def extract_bullet_points(text: Optional[str]) -> List[str]:
    if not text:
        return []
    lines = (line.strip() for line in text.split("\n"))
    return [BULLET_RE.sub("", line) for line in lines if line.startswith(("-", "•"))]


def extract_sentence(text: str, keyword: str) -> str:
    """First sentence mentioning `keyword` (case-insensitive), trimmed; "" if none."""
    keyword = keyword.lower()
    for sentence in SENTENCE_SPLIT_RE.split(text):
        if keyword in sentence.lower():
            return sentence.strip()
    return ""


def extract_local_market_insights(text: str) -> LocalMarketInsights:
    section = extract_section(text, LOCAL_MARKET_INSIGHTS)
    if section is None:
        return LocalMarketInsights()

    lowered = section.lower()
    if "high demand" in lowered:
        demand = "high"
    elif "medium demand" in lowered:
        demand = "medium"
    else:
        demand = "low"

    return LocalMarketInsights(
        demand_level=demand,
        growth_potential=extract_sentence(section, "growth potential") or DEFAULT_GROWTH_POTENTIAL,
        local_competition=extract_sentence(section, "competition") or DEFAULT_LOCAL_COMPETITION,
        salary_range=extract_sentence(section, "salary") or DEFAULT_SALARY_RANGE,
    )


def extract_upskilling_suggestions(text: str) -> UpskillingSuggestions:
    section = extract_section(text, UPSKILLING)
    if not section:
        return UpskillingSuggestions()

    def sub_list(label: str) -> List[str]:
        return extract_bullet_points(extract_section(section, label, UPSKILLING_LABELS))

    return UpskillingSuggestions(
        courses=sub_list(COURSES),
        certifications=sub_list(CERTIFICATIONS),
        resources=sub_list(RESOURCES),
    )


def parse_match_response(text: str) -> JobMatchResponse:
    """Turn a free-form advisor reply into a fully populated JobMatchResponse."""
    text = (text or "").replace("\r\n", "\n").replace("\r", "\n")
    return JobMatchResponse(
        match_score=extract_match_score(text),
        recommendations=extract_bullet_points(extract_section(text, RECOMMENDATIONS)),
        skill_gaps=extract_bullet_points(extract_section(text, SKILL_GAPS)),
        local_market_insights=extract_local_market_insights(text),
        upskilling_suggestions=extract_upskilling_suggestions(text),
    )
