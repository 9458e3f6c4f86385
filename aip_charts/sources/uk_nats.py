#!/usr/bin/env python3

import logging
import re
from datetime import datetime
from typing import List, Optional
from urllib.parse import unquote, urljoin

from .base import ChartSource
from .http import HttpFetcher
from ..models.chart import Chart, ChartCategory, unique_by_url
from ..models.document_reference import DocumentReference
from ..parsers.document_reference_extractor import extract_document_references

logger = logging.getLogger(__name__)

# Checked in order against the upper-cased chart title, first match wins
UK_TITLE_CATEGORIES = [
    (('AERODROME CHART', 'AERODROME OBSTACLE'), ChartCategory.AERODROME),
    (('AIRCRAFT PARKING', 'DOCKING'), ChartCategory.PARKING),
    (('GROUND MOVEMENT', 'TAXI'), ChartCategory.GROUND),
    (('INSTRUMENT APPROACH', 'IAC'), ChartCategory.IAC),
    (('VISUAL APPROACH', 'VAC'), ChartCategory.VAC),
    (('STANDARD DEPARTURE', 'SID'), ChartCategory.SID),
    (('STANDARD ARRIVAL', 'STAR'), ChartCategory.STAR),
    (('INITIAL APPROACH',), ChartCategory.IAC),
    (('ATC SURVEILLANCE', 'MINIMUM ALTITUDE'), ChartCategory.IAC),
]

UK_PROCEDURE_TAGS = ['ILS', 'LOC', 'RNP', 'RNAV', 'VOR', 'NDB', 'DME', 'VISUAL']

UK_RUNWAY_PATTERN = re.compile(r'(?:RWY|RUNWAY)\s*(\d{2}[LRC]?)')

UK_TITLE_CLEANUPS = [
    (re.compile(r'^[A-Z]{2}\s+AD\s+2\.\S+\s+'), ''),
    (re.compile(r'AD 2\.\S+\s+'), ''),
    (re.compile(r'^INSTRUMENT APPROACH CHART\s*', re.IGNORECASE), ''),
    (re.compile(r'INITIAL APPROACH PROCEDURES?\s*', re.IGNORECASE), 'INITIAL '),
    (re.compile(r'STANDARD ARRIVAL CHART\s*(?:-\s*INSTRUMENT\s*)?(?:\(\s*\))?\s*', re.IGNORECASE), ''),
    (re.compile(r'STANDARD DEPARTURE CHART\s*(?:-\s*INSTRUMENT\s*)?(?:\(?SID\)?\s*)?(?:\(\s*\))?\s*', re.IGNORECASE), ''),
]


class UKNATSSource(ChartSource):
    """
    Charts from the aerodrome pages of the UK eAIP (NATS Aurora).

    UK chart filenames carry no usable structure, so charts are classified
    from their title instead. The AD 2.24 table puts the title on the row
    above the link, which the link extractor reports as the link context.
    """

    NAME = 'UK'
    BASE_URL = "https://www.aurora.nats.co.uk/htmlAIP/Publications"

    def __init__(self, airac_date: str, fetcher: Optional[HttpFetcher] = None):
        """
        Args:
            airac_date: AIRAC effective date in YYYY-MM-DD format
            fetcher: HttpFetcher to use, a default one is created if None
        """
        self.airac_date = airac_date
        self._validate_airac_date()
        self.fetcher = fetcher or HttpFetcher()

    def _validate_airac_date(self):
        """Validate AIRAC date format."""
        try:
            datetime.strptime(self.airac_date, '%Y-%m-%d')
        except ValueError:
            raise ValueError(f"Invalid AIRAC date format: {self.airac_date}. Expected YYYY-MM-DD")

    def get_source_name(self) -> str:
        return self.NAME

    def _build_url(self, path: str) -> str:
        """Build URL for any path within the UK eAIP structure."""
        return f"{self.BASE_URL}/{self.airac_date}-AIRAC/{path}"

    def get_airport_url(self, icao: str) -> str:
        """Get URL for a specific airport page."""
        return self._build_url(f"html/eAIP/EG-AD-2.{icao}-en-GB.html")

    def get_charts(self, icao: str) -> List[Chart]:
        page_url = self.get_airport_url(icao)
        logger.info(f"Fetching UK eAIP aerodrome page for {icao}")
        html = self.fetcher.get_text(page_url)
        charts = self.parse_charts(html, page_url)
        logger.info(f"UK eAIP returned {len(charts)} charts for {icao}")
        return charts

    def parse_charts(self, html: str, page_url: str) -> List[Chart]:
        charts = []
        for reference in extract_document_references(html):
            chart = self._build_chart(reference, page_url)
            if chart:
                charts.append(chart)
        return unique_by_url(charts)

    def _build_chart(self, reference: DocumentReference, page_url: str) -> Optional[Chart]:
        title = chart_title(reference)
        filename = unquote(reference.filename)
        category = classify_title(title, filename)
        if category is None:
            return None

        return Chart(
            category=category,
            subtitle=clean_title(title, category) or reference.text,
            filename=filename,
            url=urljoin(page_url, reference.url),
            tags=title_tags(title),
            source=self.NAME,
        )


def chart_title(reference: DocumentReference) -> str:
    """Most descriptive title of a chart link: its table context, else the link text."""
    if len(reference.context) > 3:
        return reference.context
    return reference.text


def classify_title(title: str, filename: str = '') -> Optional[ChartCategory]:
    """Category of a UK chart from its title, None if it is not a chart."""
    text = title.upper()
    for phrases, category in UK_TITLE_CATEGORIES:
        if any(phrase in text for phrase in phrases):
            return category
        if category == ChartCategory.IAC and 'IAC' in filename.upper():
            return category
    return None


def title_tags(title: str) -> List[str]:
    """Runway and procedure tags found in a UK chart title."""
    text = title.upper()
    tags: List[str] = []

    def add(tag: str):
        if tag not in tags:
            tags.append(tag)

    for runway in UK_RUNWAY_PATTERN.findall(text):
        add(runway)
    for procedure in UK_PROCEDURE_TAGS:
        if procedure in text:
            add(procedure)
    if 'CAT II' in text or 'CAT III' in text:
        add('ILS I/II/III')
    return tags


def clean_title(title: str, category: ChartCategory) -> str:
    """Strip the structural prefixes and chart type phrases of a UK title."""
    subtitle = title
    for pattern, replacement in UK_TITLE_CLEANUPS:
        subtitle = pattern.sub(replacement, subtitle, count=1)
    subtitle = subtitle.replace(category.value, '', 1)
    subtitle = re.sub(r'\bCHART\b', '', subtitle, count=1, flags=re.IGNORECASE)
    subtitle = subtitle.replace(' - ICAO', '', 1)
    subtitle = re.sub(r'\s+', ' ', subtitle).strip(' -')
    return re.sub(r'\.pdf$', '', subtitle, flags=re.IGNORECASE)
