"""
Document reference model for links found in a source page.

Transient: created for each document link found in a provider's content and
discarded once the link has been classified.
"""

from dataclasses import dataclass


@dataclass
class DocumentReference:
    """
    Link to a published document as found in a source page.

    Attributes:
        url: Link target, relative or absolute as found in the page
        text: Display text of the link
        context: Descriptive text adjacent to the link (e.g. the previous
                 table row in the UK eAIP), empty when none
    """
    url: str
    text: str = ''
    context: str = ''

    @property
    def filename(self) -> str:
        """Last path component of the link target."""
        return self.url.split('?', 1)[0].split('#', 1)[0].rstrip('/').split('/')[-1]
