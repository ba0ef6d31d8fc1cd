import asyncio
import logging
from typing import Any, List, Optional, Tuple

import httpx
from pydantic import TypeAdapter, ValidationError

from app.core.config import settings
from app.fetch.base import FeedUnavailable, FeedUrls
from app.schemas import LabelEntry, MealPlan

logger = logging.getLogger(__name__)

_LABELS = TypeAdapter(List[LabelEntry])

async def fetch_json(client: httpx.AsyncClient, url: str) -> Any:
    """GET a JSON document, mapping every failure to FeedUnavailable."""
    logger.debug("Fetching %s", url)
    try:
        response = await client.get(url)
        response.raise_for_status()
        return response.json()
    except httpx.TimeoutException:
        raise FeedUnavailable(url, f"Timeout while fetching {url}")
    except httpx.HTTPStatusError as e:
        raise FeedUnavailable(url, e.response.reason_phrase, e.response.status_code)
    except httpx.HTTPError as e:
        raise FeedUnavailable(url, f"Failed to fetch {url}: {e}")
    except ValueError:
        raise FeedUnavailable(url, f"Invalid JSON from {url}")

async def fetch_feeds(
    urls: FeedUrls,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Tuple[MealPlan, List[LabelEntry]]:
    """
    Fetch the meal plan and the label dictionary concurrently.

    Both must succeed; the first failure is raised and the request ends there.
    """
    headers = {"User-Agent": settings.USER_AGENT, "Accept": "application/json"}
    async with httpx.AsyncClient(
        timeout=settings.REQUEST_TIMEOUT,
        headers=headers,
        follow_redirects=True,
        transport=transport,
    ) as client:
        tasks = [
            asyncio.ensure_future(fetch_json(client, urls.meal_plan)),
            asyncio.ensure_future(fetch_json(client, urls.labels)),
        ]
        try:
            plan_raw, labels_raw = await asyncio.gather(*tasks)
        except FeedUnavailable as e:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            logger.warning("Feed unavailable: %s (%s)", e.url, e.reason)
            raise

    try:
        plan = MealPlan.model_validate(plan_raw)
    except ValidationError as e:
        raise FeedUnavailable(urls.meal_plan, f"Malformed meal plan: {e.error_count()} errors")
    try:
        labels = _LABELS.validate_python(labels_raw)
    except ValidationError as e:
        raise FeedUnavailable(urls.labels, f"Malformed label list: {e.error_count()} errors")
    return plan, labels
