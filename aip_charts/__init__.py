"""
Aerodrome chart discovery from European eAIP publications.

This package resolves an ICAO aerodrome identifier into the list of charts
published for it, classified and tagged from their filenames.

The main public API includes:
- ChartAggregator: Query every relevant provider and merge the charts
- ChartSettings: Configuration (AIRAC cycle, timeouts, providers)
- Chart, ChartCategory: Output model
- NoChartsFoundError: Raised when no chart exists for an identifier
"""

from .aggregator import ChartAggregator, ChartLookup
from .config import ChartSettings
from .exceptions import (
    ChartError,
    ChartSourceError,
    DocumentNotFoundError,
    NoChartsFoundError,
    TransportError,
)
from .models import Chart, ChartCategory, DocumentReference

__version__ = '0.1.0'
__all__ = [
    'ChartAggregator',
    'ChartLookup',
    'ChartSettings',
    'Chart',
    'ChartCategory',
    'DocumentReference',
    'ChartError',
    'ChartSourceError',
    'DocumentNotFoundError',
    'NoChartsFoundError',
    'TransportError',
]
