"""
Subtitle and pagination extraction for chart filenames.

A filename such as AD_2_LFBO_SID_RWY32L-32R_RNAV_INSTR_02.pdf is split on
underscores; structural tokens are dropped, the runway token is moved to the
category label, a trailing page number is kept apart and the remaining
tokens form the subtitle ("RNAV INSTR").
"""

import logging
import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from ..models.chart import Chart, ChartCategory

logger = logging.getLogger(__name__)

PAGE_TOKEN_PATTERN = re.compile(r'^\d{1,2}$')

# Categories whose runway token is shown with the category label
RUNWAY_LABEL_CATEGORIES = (ChartCategory.SID, ChartCategory.STAR, ChartCategory.IAC)


@dataclass
class SubtitleInfo:
    """Result of subtitle extraction for one filename."""
    subtitle: str
    page: Optional[str] = None  # raw page token, e.g. "02"
    runway_label: str = ''  # e.g. "RWY26L-26R" or "RWY ALL"


def strip_extension(filename: str) -> str:
    if filename.lower().endswith('.pdf'):
        return filename[:-4]
    return filename


def extract_subtitle(filename: str, icao: str, keyword: str, category: ChartCategory) -> SubtitleInfo:
    """
    Extract subtitle, page token and runway label from a filename.

    Args:
        filename: Decoded chart filename
        icao: Aerodrome identifier, ignored as a token
        keyword: Classification keyword, ignored as a token
        category: Chart category

    Returns:
        SubtitleInfo for the filename
    """
    parts = strip_extension(filename).split('_')
    ignored = {'AD', '2', icao.upper(), keyword.upper()}

    runway_label = ''
    runway_parts: List[str] = []
    if category in RUNWAY_LABEL_CATEGORIES:
        for i, part in enumerate(parts):
            if part.startswith('RWY'):
                runway_label = part
                runway_parts.append(part)
                # RWY_ALL, RWY_WEST: group name is the next token
                if part == 'RWY' and i + 1 < len(parts):
                    runway_label += ' ' + parts[i + 1]
                    runway_parts.append(parts[i + 1])
                break
    ignored.update(part.upper() for part in runway_parts)

    page = None
    subtitle_parts = []
    for part in parts:
        if part.upper() in ignored:
            continue
        if PAGE_TOKEN_PATTERN.match(part):
            page = part
            continue
        subtitle_parts.append(part)

    return SubtitleInfo(subtitle=' '.join(subtitle_parts), page=page, runway_label=runway_label)


def _page_number(page: Optional[str]) -> int:
    if page and page.isdigit():
        return int(page)
    return 0


def apply_pagination(charts: List[Chart]) -> List[Chart]:
    """
    Rewrite raw page tokens into "n/m" over a whole batch.

    Charts sharing the same label and subtitle form a group. In a group of at
    least two where some page token is a positive number, each chart's page
    becomes "<own page>/<group size>". Every other page is cleared.

    Charts are modified in place; the list is returned for chaining.
    """
    groups: Dict[Tuple[str, str], List[Chart]] = {}
    for chart in charts:
        groups.setdefault((chart.label, chart.subtitle), []).append(chart)

    for (label, subtitle), group in groups.items():
        numbered = len(group) > 1 and max(_page_number(chart.page) for chart in group) > 0
        for chart in group:
            number = _page_number(chart.page)
            chart.page = f"{number}/{len(group)}" if numbered and number > 0 else None
        if numbered:
            logger.debug(f"Paginated {len(group)} charts for {label} '{subtitle}'")

    return charts
