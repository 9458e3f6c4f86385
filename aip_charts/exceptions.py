"""
Exceptions raised while discovering charts.

Fetch faults are split in two so callers can tell a source that is down from
a source that simply has no publication for an identifier.
"""


class ChartError(Exception):
    """Base class for all aip_charts errors."""


class ChartSourceError(ChartError):
    """A source could not provide the requested content."""

    def __init__(self, message: str, url: str = None):
        super().__init__(message)
        self.url = url


class TransportError(ChartSourceError):
    """The source was unreachable or answered with an error status."""


class DocumentNotFoundError(ChartSourceError):
    """The source has no publication at the requested location (HTTP 404)."""


class NoChartsFoundError(ChartError):
    """No provider returned any chart for an identifier."""

    def __init__(self, icao: str):
        super().__init__(f"No charts found for {icao}")
        self.icao = icao
