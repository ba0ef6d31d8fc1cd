"""
Fixed-width text layout for the menu.

Layout functions return ``Segment`` lists rather than styled strings so the
alignment logic can be checked without terminal escape codes. ``style`` is a
tag understood by ``app.render.style``; ``None`` means plain text.
"""
from dataclasses import dataclass
from typing import List, Optional

RULE_CHAR = "─"
RULE_END = "┘"

@dataclass(frozen=True)
class Segment:
    text: str
    style: Optional[str] = None

def split_name(name: str, price: str, width: int) -> tuple:
    """
    Split a dish name so that head + one space + price fits the line.
    Returns (head, tail); tail is empty when no wrap is needed.
    """
    if len(name) + len(price) + 1 <= width:
        return name, ""
    # price alone overflowing the line puts the whole name on the second line
    avail = max(0, width - (len(price) + 1))
    return name[:avail], name[avail:]

def layout_dish(name: str, price: str, labels: str, width: int = 80) -> List[Segment]:
    pad = " " * max(1, width - (len(name) + len(price)))
    head, tail = split_name(name, price, width)

    segments = [
        Segment(head, "name"),
        Segment(pad),
        Segment(price, "price"),
        Segment("\n"),
    ]
    if tail:
        segments.append(Segment(tail + "\n", "name"))
    segments.append(Segment(labels + "\n"))
    return segments

def rule(width: int = 80) -> Segment:
    return Segment(RULE_CHAR * (width - 1) + RULE_END + "\n", "rule")
