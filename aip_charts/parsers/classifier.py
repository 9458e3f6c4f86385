"""Keyword-based chart filename classification."""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..models.chart import ChartCategory


@dataclass(frozen=True)
class Classification:
    """Category of a filename and the keyword that selected it."""
    keyword: str
    category: ChartCategory


class FilenameClassifier:
    """
    Map a chart filename to a category through delimiter-bounded keywords.

    A keyword matches when the filename contains `_KEYWORD_` or `_KEYWORD.`.
    Keywords are checked in order and the first match wins, so the order of
    the list is the tie-break when several keywords appear in one filename.
    Filenames carrying an exclusion marker, or no keyword at all, are not
    charts and classify to None.

    Example:
        classifier = FilenameClassifier(SIA_KEYWORDS, SIA_EXCLUSIONS)
        classifier.classify('AD_2_LFPG_SID_RWY26L_01.pdf').category  # ChartCategory.SID
    """

    def __init__(self, keywords: Sequence[Tuple[str, ChartCategory]], exclusions: Sequence[str] = ()):
        """
        Args:
            keywords: Ordered (keyword, category) pairs, highest priority first
            exclusions: Markers (e.g. 'DATA') of documents that are not charts
        """
        self.keywords: List[Tuple[str, ChartCategory]] = list(keywords)
        self.exclusions: List[str] = list(exclusions)

    def is_excluded(self, filename: str) -> bool:
        return any(f"_{marker}_" in filename for marker in self.exclusions)

    def classify(self, filename: str) -> Optional[Classification]:
        """
        Classify a filename.

        Args:
            filename: Decoded filename, extension included

        Returns:
            Classification or None if the document is excluded or unknown
        """
        if self.is_excluded(filename):
            return None
        for keyword, category in self.keywords:
            if f"_{keyword}_" in filename or f"_{keyword}." in filename:
                return Classification(keyword, category)
        return None
