"""
Semantic tag generation for chart filenames.

Tags are kept in insertion order and never repeat: procedure markers first,
then ILS/LOC, then explicit runways, then runways expanded from symbolic
groups against the canonical runway set of the aerodrome.
"""

import re
from typing import Iterable, List, Optional

from ..models.chart import ChartCategory
from .runway import extract_runways, resolve_runway_groups

# IAC only, (marker, tag)
APPROACH_PHASE_TAGS = [
    ('_FNA', 'Final Approach'),
    ('_INA', 'Initial Approach'),
    ('_VPT', 'VPT'),
    ('_MVL', 'MVL'),
]

PROCEDURE_TAGS = [
    ('_NIGHT', 'Night'),
    ('_RNAV', 'RNAV'),
    ('_RNP', 'RNP'),
]

# Most specific first, only the first match is kept
ILS_CATEGORY_PATTERNS = [
    (re.compile(r'(?:_| |^)CAT[\W_]*(?:1(?:_| )?2(?:_| )?3|I(?:_| )?II(?:_| )?III|123)(?:_| |\.|$)', re.IGNORECASE),
     'ILS I/II/III'),
    (re.compile(r'(?:_| |^)CAT[\W_]*(?:1(?:_| )?2|I(?:_| )?II|12)(?:_| |\.|$)', re.IGNORECASE),
     'ILS I/II'),
    (re.compile(r'(?:_| |^)CAT[\W_]*(?:1|I)(?:_| |\.|$)', re.IGNORECASE),
     'ILS I'),
]


def _append(tags: List[str], values: Iterable[str]) -> None:
    for value in values:
        if value not in tags:
            tags.append(value)


def ils_tag(filename: str) -> Optional[str]:
    """Most specific ILS tag for a filename, or None."""
    for pattern, tag in ILS_CATEGORY_PATTERNS:
        if pattern.search(filename):
            return tag
    if '_ILS' in filename:
        return 'ILS'
    return None


def generate_tags(filename: str, category: ChartCategory, airport_runways: Iterable[str]) -> List[str]:
    """
    Derive the tags of a chart.

    Args:
        filename: Decoded chart filename
        category: Category the filename classified to
        airport_runways: Canonical runway set of the aerodrome

    Returns:
        Ordered list of unique tags (e.g. ['Final Approach', 'ILS I', '08R'])
    """
    tags: List[str] = []

    if category == ChartCategory.IAC:
        _append(tags, [tag for marker, tag in APPROACH_PHASE_TAGS if marker in filename])

    _append(tags, [tag for marker, tag in PROCEDURE_TAGS if marker in filename])

    ils = ils_tag(filename)
    if ils:
        _append(tags, [ils])
    if '_LOC' in filename:
        _append(tags, ['LOC'])

    _append(tags, extract_runways(filename))
    _append(tags, resolve_runway_groups(filename, airport_runways))

    return tags
