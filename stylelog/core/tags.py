import re
import unicodedata
from datetime import datetime
from typing import Iterable

ALLOWED_SEASONS = {"spring", "summer", "fall", "winter"}
SEASON_ALIASES = {"autumn": "fall"}

# Published to tool schemas as suggestions; values outside these sets are accepted.
KNOWN_OCCASIONS = ["work", "casual", "formal", "date", "travel", "exercise", "social"]
KNOWN_STYLES = ["minimalist", "bohemian", "classic", "trendy", "edgy", "romantic", "formal", "casual"]
KNOWN_MOODS = ["confident", "comfortable", "playful", "professional", "relaxed"]

TAG_MAX_LEN = 32


def slugify(s: str) -> str:
    s = unicodedata.normalize("NFKD", s or "").encode("ascii", "ignore").decode()
    s = s.strip().lower()
    s = re.sub(r"[^a-z0-9]+", "-", s)
    return re.sub(r"-{2,}", "-", s).strip("-")

def normalize_tag(s: str) -> str:
    s = slugify(s)
    if not (1 <= len(s) <= TAG_MAX_LEN):
        raise ValueError("invalid_length")
    return s

def filter_slug(s: str | None) -> str | None:
    """Slug a caller-supplied filter value so it compares against stored tags; blank gives None."""
    s = slugify(s or "")
    return s or None

def filter_season(s: str | None) -> str | None:
    s = filter_slug(s)
    return SEASON_ALIASES.get(s, s) if s else None

def normalize_many(xs: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    out: list[str] = []
    for x in xs or []:
        if not (x or "").strip():
            continue
        t = normalize_tag(x)
        if t and t not in seen:
            seen.add(t)
            out.append(t)
    return out

def normalize_season(s: str) -> str:
    t = normalize_tag(s)
    t = SEASON_ALIASES.get(t, t)
    if t not in ALLOWED_SEASONS:
        raise ValueError("invalid_season")
    return t

def clean_labels(xs: Iterable[str], max_len: int = 120) -> list[str]:
    """Trim free-text labels (garment names) without slugging them."""
    seen: set[str] = set()
    out: list[str] = []
    for x in xs or []:
        trimmed = " ".join((x or "").split())[:max_len]
        if trimmed and trimmed.lower() not in seen:
            seen.add(trimmed.lower())
            out.append(trimmed)
    return out

def current_season(dt: datetime) -> str:
    month = dt.month
    if 3 <= month <= 5:
        return "spring"
    if 6 <= month <= 8:
        return "summer"
    if 9 <= month <= 11:
        return "fall"
    return "winter"
