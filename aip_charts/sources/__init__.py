"""
Chart providers for the aip_charts library.

Each provider fetches one publication source and turns it into Chart objects.
"""

from .base import ChartSource
from .france_atlas_vac import FranceAtlasVACSource
from .france_sia import FranceSIASource
from .france_supaip import FranceSupAIPSource
from .http import HttpFetcher
from .uk_nats import UKNATSSource

__all__ = [
    'ChartSource',
    'FranceAtlasVACSource',
    'FranceSIASource',
    'FranceSupAIPSource',
    'HttpFetcher',
    'UKNATSSource',
]
