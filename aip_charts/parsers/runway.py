"""
Runway designator extraction from chart filenames.

Runways are harvested in two phases: every filename of a batch is scanned
for designators first, and the union is normalized into the canonical runway
set of the aerodrome. Symbolic runway groups (RWY_ALL, RWY_WEST, ...) are then
expanded against that canonical set, so a group mentioned in one file can
resolve to runways only named in other files.
"""

import logging
import re
from typing import Callable, Dict, Iterable, List

logger = logging.getLogger(__name__)

# "RWY" token, optional separator, then the designator segment
RUNWAY_MARKER_PATTERN = re.compile(r'(?:^|_)RWY[_ -]?([A-Z0-9\-/]+)(?:_|\.)', re.IGNORECASE)
RUNWAY_SEPARATOR_PATTERN = re.compile(r'[-_/]')
RUNWAY_DESIGNATOR_PATTERN = re.compile(r'^\d{2}[LRC]?$')


def _heading(runway: str) -> int:
    """Approximate magnetic heading (QFU) of a runway, in degrees."""
    return int(runway[:2]) * 10


# Symbolic group -> heading predicate, in expansion order
RUNWAY_GROUPS: Dict[str, Callable[[int], bool]] = {
    'ALL': lambda qfu: True,
    'WEST': lambda qfu: 0 < qfu <= 180,
    'EAST': lambda qfu: 180 < qfu <= 360,
    'NORTH': lambda qfu: qfu >= 270 or qfu <= 90,
    'SOUTH': lambda qfu: 90 <= qfu <= 270,
}

RUNWAY_GROUP_PATTERNS = {
    'ALL': re.compile(r'RWY[_ -]?(ALL|TOUTES)', re.IGNORECASE),
    'WEST': re.compile(r'RWY[_ -]?WEST', re.IGNORECASE),
    'EAST': re.compile(r'RWY[_ -]?EAST', re.IGNORECASE),
    'NORTH': re.compile(r'RWY[_ -]?NORTH', re.IGNORECASE),
    'SOUTH': re.compile(r'RWY[_ -]?SOUTH', re.IGNORECASE),
}


def is_runway_designator(value: str) -> bool:
    """True for designators such as '09', '26L'."""
    return bool(RUNWAY_DESIGNATOR_PATTERN.match(value))


def extract_runways(filename: str) -> List[str]:
    """
    Extract the explicit runway designators of a filename.

    Args:
        filename: Chart filename (e.g. 'AD_2_LFPO_SID_RWY06-07_RNAV_01.pdf')

    Returns:
        Designators in order of appearance (e.g. ['06', '07'])
    """
    match = RUNWAY_MARKER_PATTERN.search(filename)
    if not match:
        return []
    fragments = RUNWAY_SEPARATOR_PATTERN.split(match.group(1))
    return [fragment for fragment in fragments if is_runway_designator(fragment)]


def normalize_runways(runways: Iterable[str]) -> List[str]:
    """
    Build the canonical runway set from raw designators.

    A bare designator is dropped when a suffixed variant of it exists
    ('26' goes when '26L' or '26R' is present). The result is sorted.
    """
    unique = set(runways)
    cleaned = [
        runway for runway in unique
        if len(runway) != 2 or not any(other != runway and other.startswith(runway) for other in unique)
    ]
    return sorted(cleaned)


def collect_airport_runways(filenames: Iterable[str]) -> List[str]:
    """
    Canonical runway set of an aerodrome from all the filenames of a batch.

    This is the first phase of the pipeline and must complete before any
    document of the batch is tagged.
    """
    raw = set()
    for filename in filenames:
        raw.update(extract_runways(filename))
    runways = normalize_runways(raw)
    logger.debug(f"Detected runways {runways} from {len(raw)} raw designators")
    return runways


def runways_in_group(group: str, airport_runways: Iterable[str]) -> List[str]:
    """
    Runways of the canonical set belonging to a symbolic group.

    Args:
        group: One of ALL, WEST, EAST, NORTH, SOUTH
        airport_runways: Canonical runway set

    Returns:
        Matching runways in canonical order
    """
    predicate = RUNWAY_GROUPS[group.upper()]
    return [runway for runway in airport_runways if predicate(_heading(runway))]


def find_runway_groups(filename: str) -> List[str]:
    """Symbolic runway groups referenced by a filename."""
    return [group for group, pattern in RUNWAY_GROUP_PATTERNS.items() if pattern.search(filename)]


def resolve_runway_groups(filename: str, airport_runways: Iterable[str]) -> List[str]:
    """Expand the symbolic runway groups of a filename, without duplicates."""
    airport_runways = list(airport_runways)
    resolved: List[str] = []
    for group in find_runway_groups(filename):
        for runway in runways_in_group(group, airport_runways):
            if runway not in resolved:
                resolved.append(runway)
    return resolved
