from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional


class ChartCategory(Enum):
    """Closed set of chart categories, valued by their short code."""

    AERODROME = 'AERODROME'
    PARKING = 'PARKING'
    GROUND = 'GROUND'
    SID = 'SID'
    STAR = 'STAR'
    IAC = 'IAC'
    VAC = 'VAC'
    VLC = 'VLC'  # Visual landing
    TEM = 'TEM'  # Time/movements
    SUPPLEMENT = 'SupAIP'
    OTHER = 'OTHER'


@dataclass
class Chart:
    """Data class for a classified chart document."""

    category: ChartCategory
    subtitle: str  # e.g. "RNAV INSTR"
    filename: str  # published filename, URL-decoded (e.g. "AD_2_LFPG_VAC_AVEC BALISAGE_01.pdf")
    url: str  # absolute url, unique across a lookup
    page: Optional[str] = None  # e.g. "1/2"
    tags: List[str] = field(default_factory=list)  # e.g. ["RNAV", "26L", "26R"]
    source: Optional[str] = None  # provider name
    label: Optional[str] = None  # e.g. "SID RWY26L-26R"

    def __post_init__(self):
        if self.label is None:
            self.label = self.category.value

    @property
    def runways(self) -> List[str]:
        """Runway designators among the tags (e.g. ['09', '27'])."""
        from ..parsers.runway import is_runway_designator
        return [tag for tag in self.tags if is_runway_designator(tag)]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        data = {
            'category': self.category.value,
            'label': self.label,
            'subtitle': self.subtitle,
            'filename': self.filename,
            'url': self.url,
            'tags': list(self.tags),
            'runways': self.runways,
            'source': self.source,
        }
        if self.page:
            data['page'] = self.page
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Chart':
        """Create from dictionary."""
        return cls(
            category=ChartCategory(data['category']),
            subtitle=data.get('subtitle', ''),
            filename=data.get('filename', ''),
            url=data['url'],
            page=data.get('page'),
            tags=list(data.get('tags', [])),
            source=data.get('source'),
            label=data.get('label'),
        )


def unique_by_url(charts: Iterable[Chart]) -> List[Chart]:
    """Drop charts whose url was already seen, keeping the first occurrence."""
    seen = set()
    unique = []
    for chart in charts:
        if chart.url in seen:
            continue
        seen.add(chart.url)
        unique.append(chart)
    return unique
