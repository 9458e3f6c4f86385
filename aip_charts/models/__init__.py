from .chart import Chart, ChartCategory, unique_by_url
from .document_reference import DocumentReference

__all__ = ['Chart', 'ChartCategory', 'DocumentReference', 'unique_by_url']
