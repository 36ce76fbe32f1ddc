"""
person.py - Person records read from Family Edge person pages.

This module provides the Person class and the ParentSet it uses to record
candidate parents. It supports:
    - Holding the name, events, notes, occupation and sources of a person
    - Holding one or more candidate parent sets, each with an annotation
    - Deriving the keys of the person's parent and spouse families

Module: edge_gedcom.person
Last updated: 2026-10-18
"""

__all__ = ['Person', 'ParentSet']

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .family_key import family_key
from .life_event import LifeEvent

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class ParentSet:
    """
    One candidate set of parents of a person.

    Attributes:
        parent_ids (Tuple[int, ...]): One or two parent ids.
        note (str): Annotation from the report, e.g. "adopted, see notes".
    """
    parent_ids: Tuple[int, ...]
    note: str = ''

    @property
    def family_key(self) -> Optional[str]:
        return family_key(self.parent_ids)

class Person:
    """
    Represents a person from the person report.

    Attributes:
        person_id (int): Family Edge person number.
        full_name (str): Name as printed in the report, including the "(#id)".
        name (str): Name in GEDCOM form ("John /Smith/").
        sex (Optional[str]): 'M', 'F' or None; filled in from the family pages.
        events (List[LifeEvent]): Life events in page order.
        occupation (Optional[str]): Occupation text.
        notes (List[str]): Free text notes.
        sources (Dict[str, List[str]]): Source titles keyed by source type ('Name', 'Birth', ...).
        parent_sets (List[ParentSet]): Candidate parent sets; the first is the primary one
            (FATHER/MOTHER fields) when the page names any parent.
        has_primary_parents (bool): Whether parent_sets[0] came from FATHER/MOTHER.
        spouse_ids (List[int]): Spouses in page order.
        uncertain_parents (bool): The person's row in the primary family was marked uncertain.
    """
    __slots__ = ['person_id', 'full_name', 'name', 'sex',
                 'events', 'occupation', 'notes', 'sources',
                 'parent_sets', 'has_primary_parents', 'spouse_ids',
                 'uncertain_parents']

    def __init__(self, person_id: int, full_name: str, name: str):
        self.person_id: int = person_id
        self.full_name: str = full_name
        self.name: str = name
        self.sex: Optional[str] = None

        self.events: List[LifeEvent] = []
        self.occupation: Optional[str] = None
        self.notes: List[str] = []
        self.sources: Dict[str, List[str]] = {}

        self.parent_sets: List[ParentSet] = []
        self.has_primary_parents: bool = False
        self.spouse_ids: List[int] = []
        self.uncertain_parents: bool = False

    def __str__(self) -> str:
        return f"Person(id={self.person_id}, name={self.name})"

    def __repr__(self) -> str:
        return f"[ {self.person_id} : {self.name} - {self.sex} ]"

    @property
    def primary_family_key(self) -> Optional[str]:
        """
        Key of the family of the parents named in FATHER/MOTHER, if any.
        """
        if self.has_primary_parents:
            return self.parent_sets[0].family_key
        return None

    @property
    def child_family_keys(self) -> List[str]:
        return [parent_set.family_key for parent_set in self.parent_sets]

    @property
    def spouse_family_keys(self) -> List[str]:
        return [family_key([self.person_id, spouse_id]) for spouse_id in self.spouse_ids]

    def get_events(self, what: str) -> List[LifeEvent]:
        return [event for event in self.events if event.what == what]
