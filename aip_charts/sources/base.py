from abc import ABC, abstractmethod
from typing import List

from ..models.chart import Chart


class ChartSource(ABC):
    """
    Contract shared by all chart providers.

    Each provider owns its own fetching and parsing heuristics; only the
    output shape is common. Implementations are stateless across calls and
    let fetch errors (DocumentNotFoundError, TransportError) propagate.
    """

    @abstractmethod
    def get_charts(self, icao: str) -> List[Chart]:
        """
        Return the charts published for an aerodrome.

        Args:
            icao: 4-letter aerodrome identifier, already upper-cased

        Returns:
            Charts with absolute, unique urls
        """
        pass

    def get_source_name(self) -> str:
        """
        Get the name of this source.

        Returns:
            String identifier for this source
        """
        return self.__class__.__name__.lower()
