"""
Chart lookup across all the providers relevant to an aerodrome.

The providers of an identifier are queried in parallel and every one of them
is allowed to finish: a provider that fails contributes nothing, it never
aborts the others. Results are merged in provider order and deduplicated by
url, the first provider to return a document keeping it.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .config import ChartSettings
from .exceptions import ChartSourceError, DocumentNotFoundError, NoChartsFoundError
from .models.chart import Chart, unique_by_url
from .sources.base import ChartSource
from .sources.france_atlas_vac import FranceAtlasVACSource
from .sources.france_sia import FranceSIASource
from .sources.france_supaip import FranceSupAIPSource
from .sources.http import HttpFetcher
from .sources.uk_nats import UKNATSSource

logger = logging.getLogger(__name__)

# Identifier prefix -> provider names, checked in order
PROVIDER_RULES: List[Tuple[str, List[str]]] = [
    ('LF', [FranceSIASource.NAME, FranceSupAIPSource.NAME]),
    ('EG', [UKNATSSource.NAME]),
]
DEFAULT_PROVIDERS = [FranceSIASource.NAME]


@dataclass
class ChartLookup:
    """
    Outcome of a lookup for one identifier.

    Attributes:
        icao: Aerodrome identifier
        charts: Merged and deduplicated charts
        providers: Providers queried, in merge order
        failures: Provider name -> error message for providers that failed
        not_found: Providers that have no publication for the identifier
    """
    icao: str
    charts: List[Chart] = field(default_factory=list)
    providers: List[str] = field(default_factory=list)
    failures: Dict[str, str] = field(default_factory=dict)
    not_found: List[str] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return bool(self.charts)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'icao': self.icao,
            'count': len(self.charts),
            'charts': [chart.to_dict() for chart in self.charts],
            'providers': list(self.providers),
            'failures': dict(self.failures),
            'not_found': list(self.not_found),
        }


def _default_providers(settings: ChartSettings) -> Dict[str, Callable[[], ChartSource]]:
    """Provider factories; each provider gets its own HTTP session."""

    def fetcher() -> HttpFetcher:
        return HttpFetcher(timeout=settings.timeout, user_agent=settings.user_agent)

    return {
        FranceSIASource.NAME: lambda: FranceSIASource(settings.airac_date, fetcher()),
        FranceSupAIPSource.NAME: lambda: FranceSupAIPSource(fetcher()),
        FranceAtlasVACSource.NAME: lambda: FranceAtlasVACSource(settings.airac_date, fetcher()),
        UKNATSSource.NAME: lambda: UKNATSSource(settings.uk_airac_date, fetcher()),
    }


class ChartAggregator:
    """
    Resolve an aerodrome identifier into its charts from every relevant provider.

    Example:
        aggregator = ChartAggregator(ChartSettings.from_env())
        lookup = aggregator.lookup('LFPG')
        for chart in lookup.charts:
            print(chart.label, chart.subtitle, chart.page)
    """

    def __init__(self, settings: Optional[ChartSettings] = None,
                 providers: Optional[Dict[str, Callable[[], ChartSource]]] = None):
        """
        Args:
            settings: Settings, read from the environment if None
            providers: Provider name -> factory, replacing the default providers
        """
        self.settings = settings or ChartSettings.from_env()
        self.providers = providers if providers is not None else _default_providers(self.settings)

    def select_providers(self, icao: str) -> List[str]:
        """Names of the providers to query for an identifier, in merge order."""
        names = DEFAULT_PROVIDERS
        for prefix, rule_names in PROVIDER_RULES:
            if icao.startswith(prefix):
                names = list(rule_names)
                if prefix == 'LF' and self.settings.enable_atlas_vac:
                    names.append(FranceAtlasVACSource.NAME)
                break
        return [name for name in names if name in self.providers]

    def lookup(self, icao: str, sources: Optional[Sequence[str]] = None) -> ChartLookup:
        """
        Query the providers of an identifier in parallel and merge their charts.

        Args:
            icao: Aerodrome identifier, already validated and upper-cased
            sources: Provider names to query instead of the selection rules

        Returns:
            ChartLookup, possibly with no charts
        """
        names = list(sources) if sources is not None else self.select_providers(icao)
        result = ChartLookup(icao=icao, providers=names)
        if not names:
            logger.warning(f"No provider available for {icao}")
            return result

        logger.info(f"Looking up charts for {icao} from {', '.join(names)}")
        with ThreadPoolExecutor(max_workers=min(self.settings.max_workers, len(names))) as executor:
            futures = [executor.submit(self._run_provider, name, icao) for name in names]
            # Joined in submission order so the merge does not depend on timing
            outcomes = [future.result() for future in futures]

        merged: List[Chart] = []
        for name, (charts, error, not_found) in zip(names, outcomes):
            if not_found:
                result.not_found.append(name)
            elif error:
                result.failures[name] = error
            merged.extend(charts)

        result.charts = unique_by_url(merged)
        logger.info(f"Found {len(result.charts)} charts for {icao} "
                    f"({len(merged) - len(result.charts)} duplicates dropped)")
        return result

    def get_charts(self, icao: str, sources: Optional[Sequence[str]] = None) -> List[Chart]:
        """
        Charts of an identifier.

        Raises:
            NoChartsFoundError: If no provider returned any chart
        """
        lookup = self.lookup(icao, sources)
        if not lookup.found:
            raise NoChartsFoundError(icao)
        return lookup.charts

    def _run_provider(self, name: str, icao: str) -> Tuple[List[Chart], Optional[str], bool]:
        """
        Run one provider, containing its failures.

        Returns:
            (charts, error message or None, True if the source has no publication)
        """
        try:
            provider = self.providers[name]()
            return provider.get_charts(icao), None, False
        except DocumentNotFoundError as e:
            logger.info(f"{name} has no publication for {icao}: {e}")
            return [], None, True
        except ChartSourceError as e:
            logger.warning(f"{name} failed for {icao}: {e}")
            return [], str(e), False
        except Exception as e:
            logger.exception(f"Unexpected error from {name} for {icao}")
            return [], str(e), False
