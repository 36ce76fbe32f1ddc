"""
life_event.py - Life events of a person as read from a Family Edge person page.

This module provides the LifeEvent class holding the GEDCOM tag, date, place
and any note of one event (birth, death, burial, christening, residence,
will, probate).

Module: edge_gedcom.life_event
Last updated: 2026-10-18
"""

from typing import Optional
from .gedcom_date import GedcomDate

# Person page labels of event fields and the GEDCOM tag of each
EVENT_LABELS = {
    'BORN': 'BIRT',
    'CHRISTENED': 'CHR',
    'DIED': 'DEAT',
    'BURIED': 'BURI',
    'LOCATION': 'RESI',
    'WILL': 'WILL',
    'WILL/ESTATE': 'PROB',
}

# Labels whose value may carry a second, parenthesised date (the probate date)
WILL_LABELS = ('WILL', 'WILL/ESTATE')

# Tags treated as events when writing (family events included)
EVENT_TAGS = frozenset(EVENT_LABELS.values()) | {'MARR', 'DIV', 'ADOP'}

class LifeEvent:
    """
    Represents a life event of a person.

    Attributes:
        what (str): GEDCOM tag of the event (e.g. 'BIRT', 'DEAT').
        date (Optional[GedcomDate]): Date of the event.
        place (str): Place text as written in the report ('' if none).
        label (Optional[str]): Report label the event came from (e.g. 'BORN').
        note (Optional[str]): Note attached to the event (e.g. gravestone text).
    """
    __slots__ = ['what', 'date', 'place', 'label', 'note']

    def __init__(self, what: str, date: Optional[GedcomDate] = None, place: str = '',
                 label: Optional[str] = None, note: Optional[str] = None):
        self.what: str = what
        self.date: Optional[GedcomDate] = date
        self.place: str = place or ''
        self.label: Optional[str] = label
        self.note: Optional[str] = note

    def __repr__(self) -> str:
        return f"[ {self.what} : {self.date} : {self.place} ]"
