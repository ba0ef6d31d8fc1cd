from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional
from zoneinfo import ZoneInfo

from app.core.config import settings

DE_WEEKDAYS = ["Montag", "Dienstag", "Mittwoch", "Donnerstag", "Freitag", "Samstag", "Sonntag"]
DE_MONTHS = [
    "Januar", "Februar", "März", "April", "Mai", "Juni",
    "Juli", "August", "September", "Oktober", "November", "Dezember",
]
EN_WEEKDAYS = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]

def _build_weekday_tokens() -> dict:
    tokens = {}
    for idx, (de, en) in enumerate(zip(DE_WEEKDAYS, EN_WEEKDAYS)):
        de = de.lower()
        tokens[de] = idx
        tokens[de[:2]] = idx
        tokens[de[:2] + "."] = idx
        tokens[en] = idx
        tokens[en[:3]] = idx
    return tokens

WEEKDAY_TOKENS = _build_weekday_tokens()

@dataclass(frozen=True)
class ResolvedDate:
    date: date
    week: int
    year: int
    weekday_index: int  # 0=Monday

def now_local() -> datetime:
    """Current instant in the configured timezone"""
    return datetime.now(ZoneInfo(settings.TIMEZONE))

def parse_weekday(token: Optional[str]) -> Optional[int]:
    """Map a weekday name or abbreviation to 0=Monday .. 6=Sunday, or None."""
    if not token:
        return None
    return WEEKDAY_TOKENS.get(token.strip().lower())

def resolve_date(token: Optional[str], now: Optional[datetime] = None) -> ResolvedDate:
    """
    Resolve an optional weekday token against the current Monday-first week.
    Unknown tokens fall back to today.
    """
    today = (now or now_local()).date()
    target = today
    weekday = parse_weekday(token)
    if weekday is not None:
        target = today + timedelta(days=weekday - today.weekday())

    iso = target.isocalendar()
    return ResolvedDate(date=target, week=iso[1], year=iso[0], weekday_index=target.weekday())

def format_title_date(d: date) -> str:
    """German long date, e.g. 'Montag, Oktober 19. 2026'"""
    return f"{DE_WEEKDAYS[d.weekday()]}, {DE_MONTHS[d.month - 1]} {d.day}. {d.year}"
