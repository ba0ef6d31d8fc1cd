from dataclasses import dataclass
from typing import Optional

@dataclass(frozen=True)
class FeedUrls:
    meal_plan: str
    labels: str

class FeedUnavailable(Exception):
    """An upstream feed could not be fetched or did not parse."""

    def __init__(self, url: str, reason: str, status_code: Optional[int] = None):
        super().__init__(reason)
        self.url = url
        self.reason = reason
        self.status_code = status_code

def build_feed_urls(base_url: str, location: str, year: int, week: int) -> FeedUrls:
    """Locate the week's meal plan and the global label dictionary. No I/O."""
    base = base_url.rstrip("/")
    return FeedUrls(
        meal_plan=f"{base}/{location}/{year}/{week:02d}.json",
        labels=f"{base}/enums/labels.json",
    )
