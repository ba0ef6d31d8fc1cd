from typing import Iterable

import click

from app.render.layout import Segment

STYLES = {
    "name": {"bold": True},
    "price": {"fg": "cyan"},
    "rule": {"dim": True},
    "title": {"fg": "bright_blue"},
    "error": {"fg": "red", "bold": True},
}

def render_segments(segments: Iterable[Segment], color: bool = True) -> str:
    """Join segments into text, applying ANSI styles when color is on."""
    parts = []
    for segment in segments:
        if color and segment.style and segment.text:
            parts.append(click.style(segment.text, **STYLES[segment.style]))
        else:
            parts.append(segment.text)
    return "".join(parts)
