"""
family.py - Family records read from Family Edge family pages.

A family may be printed over several pages; all of them share the same
family key and their children are merged by the assembler.
"""

__all__ = ['ChildEntry', 'Family']

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from .family_key import family_key
from .marriage import Marriage

logger = logging.getLogger(__name__)

@dataclass
class ChildEntry:
    """
    A child row of a family page.

    Attributes:
        sex (Optional[str]): 'M', 'F' or None when the sex column is blank.
        uncertain (bool): The row was marked as uncertain parentage.
    """
    sex: Optional[str] = None
    uncertain: bool = False

class Family:
    """
    Represents a couple (or single parent) and their children.

    Attributes:
        husband_id (Optional[int]): Person in the HUSBAND slot.
        wife_id (Optional[int]): Person in the WIFE slot.
        spouse_ids (List[int]): Parents from SPOUSE lines, not yet placed in a slot.
        events (List[Marriage]): Marriages and divorces.
        children (Dict[int, ChildEntry]): Children by person id, in page order.
        pages (int): Number of pages merged into this record.
    """
    __slots__ = ['husband_id', 'wife_id', 'spouse_ids', 'events', 'children', 'pages']

    def __init__(self, husband_id: Optional[int] = None, wife_id: Optional[int] = None,
                 spouse_ids: Optional[List[int]] = None):
        self.husband_id: Optional[int] = husband_id
        self.wife_id: Optional[int] = wife_id
        self.spouse_ids: List[int] = list(spouse_ids) if spouse_ids else []
        self.events: List[Marriage] = []
        self.children: Dict[int, ChildEntry] = {}
        self.pages: int = 1

    @property
    def parent_ids(self) -> List[int]:
        ids = [pid for pid in (self.husband_id, self.wife_id) if pid]
        ids.extend(pid for pid in self.spouse_ids if pid not in ids)
        return ids

    @property
    def key(self) -> Optional[str]:
        return family_key(self.parent_ids)

    def merge_children(self, other: "Family") -> List[int]:
        """
        Union the children of another page of the same family into this one.

        Entries already present are kept; a blank sex may be filled in from the
        other page. The uncertain flag is kept if either page set it.

        Args:
            other (Family): A later page of the same family.

        Returns:
            List[int]: Ids of children whose sex differs between the pages.
        """
        conflicts = []
        for child_id, entry in other.children.items():
            existing = self.children.get(child_id)
            if existing is None:
                self.children[child_id] = ChildEntry(entry.sex, entry.uncertain)
                continue
            if existing.sex is None:
                existing.sex = entry.sex
            elif entry.sex is not None and entry.sex != existing.sex:
                conflicts.append(child_id)
            existing.uncertain = existing.uncertain or entry.uncertain
        self.pages += other.pages
        return conflicts

    def __str__(self) -> str:
        return f"Family(key={self.key}, children={list(self.children)})"

    def __repr__(self) -> str:
        return f"[ {self.key} : {self.husband_id} & {self.wife_id} - {list(self.children)} ]"
