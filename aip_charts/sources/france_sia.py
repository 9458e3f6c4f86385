#!/usr/bin/env python3

import logging
from datetime import datetime
from typing import List, Optional
from urllib.parse import unquote, urljoin

from .base import ChartSource
from .http import HttpFetcher
from ..models.chart import Chart, ChartCategory, unique_by_url
from ..parsers.classifier import FilenameClassifier
from ..parsers.document_reference_extractor import extract_document_references
from ..parsers.runway import collect_airport_runways
from ..parsers.subtitle import RUNWAY_LABEL_CATEGORIES, apply_pagination, extract_subtitle
from ..parsers.tags import generate_tags
from ..utils.airac_date_calculator import parse_airac_date

logger = logging.getLogger(__name__)

# Highest priority first
SIA_KEYWORDS = [
    ('ADC', ChartCategory.AERODROME),
    ('APDC', ChartCategory.PARKING),
    ('GMC', ChartCategory.GROUND),
    ('IAC', ChartCategory.IAC),
    ('SID', ChartCategory.SID),
    ('STAR', ChartCategory.STAR),
    ('VAC', ChartCategory.VAC),
    ('VLC', ChartCategory.VLC),
    ('TEM', ChartCategory.TEM),
]

# Textual data, tables and charts not wanted in the catalog
SIA_EXCLUSIONS = ['DATA', 'TEXT', 'TXT', 'VPE', 'PATC']


def sia_cycle_root(airac_date: str) -> str:
    """
    Root of an SIA publication cycle, e.g.
    https://www.sia.aviation-civile.gouv.fr/media/dvd/eAIP_22_JAN_2026
    """
    dt = parse_airac_date(airac_date)
    return f"{FranceSIASource.BASE_URL}/eAIP_{dt.strftime('%d')}_{dt.strftime('%b').upper()}_{dt.strftime('%Y')}"


class FranceSIASource(ChartSource):
    """
    Charts from the aerodrome pages of the French eAIP (SIA).

    Each aerodrome page (AD 2) links the chart PDFs of the aerodrome. The
    filenames follow the SIA convention AD_2_<ICAO>_<TYPE>_..._<PAGE>.pdf and
    carry everything needed to classify and tag the chart.

    The batch is processed in two phases: the runways of all the filenames
    are collected into the canonical runway set first, then each filename
    is classified, tagged and given a subtitle.
    """

    NAME = 'SIA'
    BASE_URL = "https://www.sia.aviation-civile.gouv.fr/media/dvd"
    FRANCE_PATH = "FRANCE"

    def __init__(self, airac_date: str, fetcher: Optional[HttpFetcher] = None):
        """
        Args:
            airac_date: AIRAC effective date in YYYY-MM-DD format
            fetcher: HttpFetcher to use, a default one is created if None
        """
        self.airac_date = airac_date
        parse_airac_date(airac_date)
        self.fetcher = fetcher or HttpFetcher()
        self.classifier = FilenameClassifier(SIA_KEYWORDS, SIA_EXCLUSIONS)

    def get_source_name(self) -> str:
        return self.NAME

    def _build_url(self, path: str) -> str:
        """
        Build URL for any path within the France eAIP structure.

        Args:
            path: Relative path from the AIRAC root (e.g., 'html/index-fr-FR.html')
        """
        dt = datetime.strptime(self.airac_date, '%Y-%m-%d')
        return f"{sia_cycle_root(self.airac_date)}/{self.FRANCE_PATH}/AIRAC-{dt.strftime('%Y-%m-%d')}/{path}"

    def get_airport_url(self, icao: str) -> str:
        """Get URL for a specific airport page."""
        return self._build_url(f"html/eAIP/FR-AD-2.{icao}-fr-FR.html")

    def get_charts(self, icao: str) -> List[Chart]:
        page_url = self.get_airport_url(icao)
        logger.info(f"Fetching SIA aerodrome page for {icao}")
        html = self.fetcher.get_text(page_url)
        charts = self.parse_charts(html, icao, page_url)
        logger.info(f"SIA returned {len(charts)} charts for {icao}")
        return charts

    def parse_charts(self, html: str, icao: str, page_url: str) -> List[Chart]:
        """
        Build the charts of an aerodrome page.

        Args:
            html: Aerodrome page content
            icao: Aerodrome identifier
            page_url: URL of the page, used to resolve relative links
        """
        references = extract_document_references(html)
        filenames = [unquote(reference.filename) for reference in references]

        # Phase 1: runways of the whole batch
        airport_runways = collect_airport_runways(filenames)

        # Phase 2: per document
        charts = []
        for reference, filename in zip(references, filenames):
            chart = self._build_chart(reference.url, filename, icao, page_url, airport_runways)
            if chart:
                charts.append(chart)

        return apply_pagination(unique_by_url(charts))

    def _build_chart(self, href: str, filename: str, icao: str, page_url: str,
                     airport_runways: List[str]) -> Optional[Chart]:
        classification = self.classifier.classify(filename)
        if classification is None:
            return None

        category = classification.category
        info = extract_subtitle(filename, icao, classification.keyword, category)
        label = category.value
        if category in RUNWAY_LABEL_CATEGORIES and info.runway_label:
            label = f"{label} {info.runway_label}"

        return Chart(
            category=category,
            subtitle=info.subtitle,
            filename=filename,
            url=urljoin(page_url, href),
            page=info.page,
            tags=generate_tags(filename, category, airport_runways),
            source=self.NAME,
            label=label,
        )
