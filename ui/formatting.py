from typing import List, Tuple

from sources.adzuna import COUNTRY_NAMES, is_supported_country


def match_badge(score: int) -> Tuple[str, str]:
    """(label, colour) for a match score badge."""
    if score >= 70:
        colour = "green"
    elif score >= 40:
        colour = "orange"
    else:
        colour = "red"
    return f"{score}% Match", colour


def parse_csv(text: str) -> List[str]:
    return [s.strip() for s in (text or "").split(",") if s.strip()]


def country_label(code: str) -> str:
    name = COUNTRY_NAMES.get(code, code.upper())
    return name if is_supported_country(code) else f"{name} (Coming Soon)"
