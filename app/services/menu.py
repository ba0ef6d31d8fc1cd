import logging
from typing import List, Optional

from app.core.config import settings
from app.fetch import feeds
from app.fetch.base import build_feed_urls
from app.fetch.utils import ResolvedDate, format_title_date, now_local, resolve_date
from app.render.labels import build_label_index, resolve_labels
from app.render.layout import Segment, layout_dish, rule
from app.render.price import format_price
from app.render.style import render_segments
from app.schemas import LabelEntry, MealPlan

logger = logging.getLogger(__name__)

NO_MENU_MESSAGE = "Kein Menü!\n"

def title_line(location: str, resolved: ResolvedDate) -> Segment:
    return Segment(f"Menü {location} für {format_title_date(resolved.date)}:\n", "title")

def render_menu(
    plan: MealPlan,
    labels: List[LabelEntry],
    location: str,
    resolved: ResolvedDate,
    width: int = 80,
) -> List[Segment]:
    """
    Lay out the resolved day's dishes under a title line.

    A missing day or a day without dishes renders the no-menu message.
    """
    segments = [title_line(location, resolved), Segment("\n")]

    idx = resolved.weekday_index
    day = plan.days[idx] if 0 <= idx < len(plan.days) else None
    if day is None or not day.dishes:
        logger.info("No menu for %s on %s", location, resolved.date.isoformat())
        segments.append(Segment(NO_MENU_MESSAGE, "error"))
        return segments

    index = build_label_index(labels)
    for i, dish in enumerate(day.dishes):
        if i > 0:
            segments.append(rule(width))
        price = format_price(dish.prices.students)
        label_text = resolve_labels(dish.labels, index)
        segments.extend(layout_dish(dish.name, price, label_text, width))
    return segments

async def build_menu(
    location: Optional[str] = None,
    day_token: Optional[str] = None,
    color: Optional[bool] = None,
) -> str:
    """
    Main pipeline for a menu request.

    1. Resolve the requested weekday within the current week
    2. Locate and fetch both feeds concurrently (FeedUnavailable propagates)
    3. Render the day's dishes as fixed-width text
    """
    location = location or settings.DEFAULT_LOCATION
    color = settings.COLOR_OUTPUT if color is None else color

    resolved = resolve_date(day_token, now_local())
    urls = build_feed_urls(settings.FEED_BASE_URL, location, resolved.year, resolved.week)
    logger.debug("Menu for %s: week %s/%s, day %s", location, resolved.year, resolved.week, resolved.weekday_index)

    plan, labels = await feeds.fetch_feeds(urls)
    segments = render_menu(plan, labels, location, resolved, settings.LINE_WIDTH)
    return render_segments(segments, color=color)
