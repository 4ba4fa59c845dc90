from __future__ import annotations

from typing import Iterable

from config import settings


def contains_any(text: str, terms: Iterable[str]) -> bool:
    # literal, case-sensitive substring checks unless configured otherwise
    if settings.case_insensitive_matching:
        lowered = text.lower()
        return any(term.lower() in lowered for term in terms)
    return any(term in text for term in terms)
