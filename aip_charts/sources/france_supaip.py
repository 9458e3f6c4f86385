"""AIP supplements (SUP AIP) published by the French SIA."""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from typing import Callable, List, Optional
from urllib.parse import urljoin

from .base import ChartSource
from .http import HttpFetcher
from ..exceptions import ChartSourceError
from ..models.chart import Chart, ChartCategory, unique_by_url
from ..models.document_reference import DocumentReference
from ..parsers.document_reference_extractor import extract_document_references, find_input_value

logger = logging.getLogger(__name__)


class FranceSupAIPSource(ChartSource):
    """
    AIP supplements in force for a French aerodrome.

    The SIA search page is a form protected by a form key: the page is read
    once to get the key and the session cookies, then the search is posted
    for the aerodrome. Result links point to download pages that redirect to
    the PDF, so each one is resolved with a HEAD request. Links are resolved
    in worker threads, each with its own HttpFetcher carrying the search
    session cookies, as a requests.Session is not shared across threads.

    Link text has the form "<identifier> - <title>", e.g.
    "SUP 009/26 - LFPG Travaux piste 09L/27R".
    """

    NAME = 'SUPAIP'
    SITE_URL = 'https://www.sia.aviation-civile.gouv.fr'
    SEARCH_URL = 'https://www.sia.aviation-civile.gouv.fr/documents/supaip/aip/id/6'
    LINK_SELECTOR = 'a.lien_sup_aip'
    MAX_RESOLVE_WORKERS = 4

    def __init__(self, fetcher: Optional[HttpFetcher] = None,
                 resolver_factory: Optional[Callable[[], HttpFetcher]] = None):
        """
        Args:
            fetcher: HttpFetcher for the search, a default one is created if None
            resolver_factory: Creates the HttpFetcher of each resolving thread,
                              defaults to one matching the search fetcher settings
        """
        self.fetcher = fetcher or HttpFetcher()
        self.resolver_factory = resolver_factory or self._new_resolver
        self._local = threading.local()

    def get_source_name(self) -> str:
        return self.NAME

    def get_charts(self, icao: str) -> List[Chart]:
        search_page = self.fetcher.get_text(self.SEARCH_URL)
        form_key = find_input_value(search_page, 'form_key')
        if not form_key:
            logger.warning(f"SUPAIP search form key not found ({len(search_page)} bytes), skipping {icao}")
            return []

        if not self.fetcher.has_cookie('form_key'):
            self.fetcher.set_cookie('form_key', form_key)

        results = self.fetcher.post_text(
            self.SEARCH_URL,
            data={'title': '', 'location': icao, 'form_key': form_key},
            headers={'Origin': self.SITE_URL, 'Referer': self.SEARCH_URL},
        )
        references = extract_document_references(results, selector=self.LINK_SELECTOR, extension=None)
        logger.info(f"SUPAIP search found {len(references)} supplements for {icao}")

        cookie_header = self.fetcher.cookie_header()
        with ThreadPoolExecutor(max_workers=self.MAX_RESOLVE_WORKERS) as executor:
            resolved = list(executor.map(partial(self._resolve, cookie_header=cookie_header), references))

        return unique_by_url(chart for chart in resolved if chart is not None)

    def _absolute_url(self, href: str) -> str:
        if href.startswith('http'):
            return href
        if href.startswith('/'):
            return urljoin(self.SITE_URL, href)
        return f"{self.SEARCH_URL}/{href}"

    def _new_resolver(self) -> HttpFetcher:
        return HttpFetcher(timeout=self.fetcher.timeout, user_agent=self.fetcher.user_agent)

    def _resolver(self) -> HttpFetcher:
        """HttpFetcher of the calling thread."""
        resolver = getattr(self._local, 'fetcher', None)
        if resolver is None:
            resolver = self.resolver_factory()
            self._local.fetcher = resolver
        return resolver

    def _resolve(self, reference: DocumentReference, cookie_header: str = '') -> Optional[Chart]:
        """Follow the download link of a supplement to its PDF."""
        url = self._absolute_url(reference.url)
        headers = {'Cookie': cookie_header} if cookie_header else None
        try:
            response = self._resolver().head(url, follow_redirects=True, headers=headers)
        except ChartSourceError as e:
            logger.warning(f"SUPAIP could not resolve {url}: {e}")
            return None

        final_url = response.url or url
        content_type = response.headers.get('content-type', '')
        if not (final_url.lower().endswith('.pdf') or 'application/pdf' in content_type):
            logger.debug(f"SUPAIP skipped {final_url}, not a PDF ({content_type})")
            return None

        return build_supplement_chart(reference.text, final_url, self.NAME)


def build_supplement_chart(text: str, url: str, source: str = None) -> Chart:
    """
    Chart for a supplement link.

    Args:
        text: Link text, "<identifier> - <title>"
        url: Resolved PDF url
        source: Provider name
    """
    parts = text.split(' - ')
    identifier = parts[0] or 'Unknown'
    title = ' - '.join(parts[1:]) or identifier
    return Chart(
        category=ChartCategory.SUPPLEMENT,
        subtitle=f"SUPAIP {identifier}",
        filename=title,
        url=url,
        tags=['SUPAIP'],
        source=source,
    )
