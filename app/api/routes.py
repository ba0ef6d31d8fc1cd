from typing import Optional

from fastapi import APIRouter, status
from fastapi.responses import PlainTextResponse

from app.fetch.base import FeedUnavailable
from app.services.menu import build_menu

router = APIRouter()

TEXT_MEDIA_TYPE = "text/plain; charset=utf-8"

async def _menu_response(location: Optional[str], day: Optional[str], color: Optional[bool]) -> PlainTextResponse:
    try:
        body = await build_menu(location, day, color)
    except FeedUnavailable as e:
        return PlainTextResponse(
            f"Error accessing TUM-Eat API: {e.reason}\n",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            media_type=TEXT_MEDIA_TYPE,
        )
    return PlainTextResponse(body, media_type=TEXT_MEDIA_TYPE)

@router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "Mensa Menu"}

@router.get("/", response_class=PlainTextResponse)
async def menu_today(color: Optional[bool] = None):
    """Today's menu for the default location"""
    return await _menu_response(None, None, color)

@router.get("/{day}", response_class=PlainTextResponse)
async def menu_for_day(day: str, color: Optional[bool] = None):
    """Menu of the given weekday (current week) for the default location"""
    return await _menu_response(None, day, color)

@router.get("/{location}/{day}", response_class=PlainTextResponse)
async def menu_for_location(location: str, day: str, color: Optional[bool] = None):
    """Menu of the given weekday (current week) for a location"""
    return await _menu_response(location, day, color)

@router.get("/{location}/", response_class=PlainTextResponse)
async def menu_today_for_location(location: str, color: Optional[bool] = None):
    """Today's menu for a location"""
    return await _menu_response(location, None, color)
