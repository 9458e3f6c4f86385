from .classifier import Classification, FilenameClassifier
from .document_reference_extractor import extract_document_references, find_input_value
from .runway import (
    collect_airport_runways,
    extract_runways,
    is_runway_designator,
    normalize_runways,
    resolve_runway_groups,
    runways_in_group,
)
from .subtitle import SubtitleInfo, apply_pagination, extract_subtitle
from .tags import generate_tags, ils_tag

__all__ = [
    'Classification',
    'FilenameClassifier',
    'extract_document_references',
    'find_input_value',
    'collect_airport_runways',
    'extract_runways',
    'is_runway_designator',
    'normalize_runways',
    'resolve_runway_groups',
    'runways_in_group',
    'SubtitleInfo',
    'apply_pagination',
    'extract_subtitle',
    'generate_tags',
    'ils_tag',
]
