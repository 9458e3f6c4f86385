"""Visual approach chart (VAC) atlas of the French SIA."""

import logging
from typing import List, Optional

from .base import ChartSource
from .france_sia import sia_cycle_root
from .http import HttpFetcher
from ..models.chart import Chart, ChartCategory
from ..utils.airac_date_calculator import parse_airac_date

logger = logging.getLogger(__name__)


class FranceAtlasVACSource(ChartSource):
    """
    The VAC atlas publishes one PDF per aerodrome at a predictable location,
    so a HEAD request is enough to know whether an aerodrome has one.
    Redirects are followed so a redirect to a missing PDF surfaces as
    DocumentNotFoundError like a direct 404.
    """

    NAME = 'ATLAS'

    def __init__(self, airac_date: str, fetcher: Optional[HttpFetcher] = None):
        self.airac_date = airac_date
        parse_airac_date(airac_date)
        self.fetcher = fetcher or HttpFetcher()

    def get_source_name(self) -> str:
        return self.NAME

    def get_chart_url(self, icao: str) -> str:
        return f"{sia_cycle_root(self.airac_date)}/Atlas-VAC/PDF_AIPparSSection/VAC/AD/AD-2.{icao}.pdf"

    def get_charts(self, icao: str) -> List[Chart]:
        url = self.get_chart_url(icao)
        self.fetcher.head(url, follow_redirects=True)
        logger.info(f"VAC atlas chart available for {icao}")
        return [Chart(
            category=ChartCategory.VAC,
            subtitle='VAC',
            filename=f"AD-2.{icao}.pdf",
            url=url,
            tags=['VAC'],
            source=self.NAME,
        )]
