"""
Document link extraction from eAIP HTML pages.

Enumerates the document links of a page, with their display text and the
descriptive text found next to them. Pure: no network access and the same
page always yields the same references in the same order.
"""

import logging
import re
from typing import List, Optional, Union
from urllib.parse import urlparse

from bs4 import BeautifulSoup

from ..models.document_reference import DocumentReference

logger = logging.getLogger(__name__)

DOCUMENT_EXTENSION = '.pdf'


def _clean_text(text: str) -> str:
    return re.sub(r'\s+', ' ', text or '').strip()


def _has_extension(href: str, extension: str) -> bool:
    return urlparse(href).path.lower().endswith(extension.lower())


def _adjacent_text(link) -> str:
    """
    Descriptive text next to a link inside a table.

    The previous row is preferred (NATS puts the chart title on the row above
    the link); otherwise the enclosing row without the link text.
    """
    row = link.find_parent('tr')
    if row is None:
        return ''
    previous_row = row.find_previous_sibling('tr')
    if previous_row is not None:
        return _clean_text(previous_row.get_text(separator=' '))
    link_text = _clean_text(link.get_text())
    row_text = _clean_text(row.get_text(separator=' '))
    if link_text:
        row_text = _clean_text(row_text.replace(link_text, ''))
    return row_text


def extract_document_references(content: Union[str, bytes],
                                selector: str = 'a[href]',
                                extension: Optional[str] = DOCUMENT_EXTENSION) -> List[DocumentReference]:
    """
    Extract document links from an HTML page.

    Args:
        content: Page content, bytes are decoded as UTF-8
        selector: CSS selector of the link elements
        extension: Required extension of the link target path, compared
                   case-insensitively; None keeps every link

    Returns:
        DocumentReference list in document order
    """
    if isinstance(content, bytes):
        content = content.decode('utf-8', errors='ignore')
    soup = BeautifulSoup(content, 'html.parser')

    references = []
    for link in soup.select(selector):
        href = (link.get('href') or '').strip()
        if not href:
            continue
        if extension and not _has_extension(href, extension):
            continue
        text = _clean_text(link.get_text()) or _clean_text(link.get('title', ''))
        references.append(DocumentReference(url=href, text=text, context=_adjacent_text(link)))

    logger.debug(f"Found {len(references)} document links matching '{selector}'")
    return references


def find_input_value(content: Union[str, bytes], name: str) -> Optional[str]:
    """Value of the named <input> of a page (e.g. a hidden form key)."""
    if isinstance(content, bytes):
        content = content.decode('utf-8', errors='ignore')
    soup = BeautifulSoup(content, 'html.parser')
    field = soup.find('input', attrs={'name': name})
    if field is None:
        return None
    return field.get('value') or None
