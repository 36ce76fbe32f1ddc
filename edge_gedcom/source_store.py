"""
source_store.py - Numbering of cited source titles.

Each distinct source title gets the next number the first time it is cited;
the numbers are stable for the rest of the run and become the pointers of
the SOUR records written at the end of the file.
"""

import logging
from typing import Dict, Iterable, List

from .gedcom_node import GedcomNode

logger = logging.getLogger(__name__)

class CitationStore:
    """
    Assigns sequential ids to source titles. One store per conversion run.

    Attributes:
        sources (Dict[str, int]): Id of each title, in first-cited order.
    """
    __slots__ = ['sources']

    def __init__(self) -> None:
        self.sources: Dict[str, int] = {}

    def get_id(self, title: str) -> int:
        if not isinstance(title, str):
            raise TypeError(f"Title of source must be a string, got {type(title).__name__}")
        if title not in self.sources:
            self.sources[title] = len(self.sources) + 1
            logger.debug(f"New source S{self.sources[title]}: {title}")
        return self.sources[title]

    def get_pointer(self, title: str) -> str:
        return f'@S{self.get_id(title)}@'

    def get_citation(self, title: str, note: str = '') -> GedcomNode:
        """
        Citation node for a title.

        Args:
            title (str): Source title.
            note (str): Optional note, added as a NOTE child.

        Returns:
            GedcomNode: SOUR node whose payload is the source pointer.
        """
        citation = GedcomNode('SOUR', self.get_pointer(title))
        if note:
            citation.add('NOTE', note)
        return citation

    def get_citations(self, titles: Iterable[str]) -> List[GedcomNode]:
        return [self.get_citation(title) for title in titles]

    def get_all_records(self) -> List[GedcomNode]:
        """
        One SOUR record per title, in the order the titles were first cited.
        """
        return [GedcomNode('SOUR', pointer=f'@S{source_id}@', children=[GedcomNode('TITL', title)])
                for title, source_id in self.sources.items()]

    def __len__(self) -> int:
        return len(self.sources)
