import logging
from typing import Dict, Iterable, List

from app.schemas import LabelEntry

logger = logging.getLogger(__name__)

def build_label_index(entries: Iterable[LabelEntry]) -> Dict[str, str]:
    """Map label code -> abbreviation. Later entries win on duplicate codes."""
    return {entry.enum_name: entry.abbreviation for entry in entries}

def resolve_labels(codes: List[str], index: Dict[str, str]) -> str:
    """
    Space-join the abbreviations of a dish's labels in their original order.
    Unknown codes are left out.
    """
    abbreviations = []
    for code in codes:
        abbreviation = index.get(code)
        if abbreviation is None:
            logger.warning("Unknown label code %r", code)
            continue
        abbreviations.append(abbreviation)
    return " ".join(abbreviations)
