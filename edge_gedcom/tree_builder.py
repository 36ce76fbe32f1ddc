"""
tree_builder.py - Maps people and families onto GEDCOM node trees.

Provides GedcomTreeBuilder, which turns each Person into an INDI record and
each Family into a FAM record, and produces the HEAD, SUBM and TRLR records.
Source titles are cited through a CitationStore, so the SOUR records can be
written once at the end of the file.

Module: edge_gedcom.tree_builder
Last updated: 2026-10-18
"""

import logging
import re
from datetime import datetime
from typing import Dict, List, Optional, Tuple

from .config import ConverterConfig
from .family import Family
from .family_key import family_key, family_pointer, make_pointer, person_pointer
from .field_extract import normalize_place, search_date
from .gedcom_date import MONTHS, GedcomDate
from .gedcom_node import GedcomNode
from .issues import IssueLog
from .life_event import LifeEvent
from .person import ParentSet, Person
from .source_store import CitationStore

logger = logging.getLogger(__name__)

# Source types of the person SOURCES section cited on an event and on its place
EVENT_SOURCE_TYPES: Dict[str, Tuple[str, str]] = {
    'BIRT': ('Birth', 'BPlace'),
    'DEAT': ('Death', 'DPlace'),
}
# Source types cited on the record as a whole, in the order they are grouped
RECORD_SOURCE_TYPES = ('Father', 'Mother', 'Other')
KNOWN_SOURCE_TYPES = ('Name',) + tuple(t for types in EVENT_SOURCE_TYPES.values() for t in types) + RECORD_SOURCE_TYPES

PEDIGREE_RE = re.compile(r'\b(adopted|foster)\b', re.I)

class GedcomTreeBuilder:
    """
    Builds GEDCOM node trees for one conversion run.

    Attributes:
        citations (CitationStore): Numbering of cited source titles.
        config (ConverterConfig): Header data, date flavour and state table.
        issues (IssueLog): Where unrecognised source types are recorded.
    """
    __slots__ = ['citations', 'config', 'issues']

    def __init__(self, citations: CitationStore, config: ConverterConfig, issues: Optional[IssueLog] = None):
        self.citations = citations
        self.config = config
        self.issues = issues if issues is not None else IssueLog()

    def person_tree(self, person: Person) -> GedcomNode:
        """
        INDI record of a person.

        Children, in order: NAME, SEX, events, OCCU, NOTEs, FAMS per spouse,
        FAMC per parent set, ADOP events, record citations.
        """
        record = GedcomNode('INDI', pointer=person_pointer(person.person_id))
        sources = person.sources

        name = record.add('NAME', person.name)
        name.children.extend(self.citations.get_citations(sources.get('Name', [])))
        if person.sex:
            record.add('SEX', person.sex)

        for event in person.events:
            record.children.append(self.event_tree(event, sources))
        if person.occupation:
            record.add('OCCU', person.occupation)
        for note in person.notes:
            record.add('NOTE', note)
        for spouse_id in person.spouse_ids:
            record.add('FAMS', family_pointer(family_key([person.person_id, spouse_id])))

        adoptions: List[GedcomNode] = []
        for index, parent_set in enumerate(person.parent_sets):
            challenged = index == 0 and person.has_primary_parents and person.uncertain_parents
            famc, adoption = self.child_family_tree(parent_set, challenged)
            record.children.append(famc)
            if adoption is not None:
                adoptions.append(adoption)
        record.children.extend(adoptions)

        record.children.extend(self.record_citations(person))
        return record

    def event_tree(self, event: LifeEvent, sources: Optional[Dict[str, List[str]]] = None) -> GedcomNode:
        """
        Event node with DATE, PLAC (with place citations), NOTE and event citations.
        An event with nothing under it gets the payload 'Y'.
        """
        sources = sources or {}
        node = GedcomNode(event.what)
        event_type, place_type = EVENT_SOURCE_TYPES.get(event.what, (None, None))
        event_titles = list(sources.get(event_type, [])) if event_type else []
        place_titles = list(sources.get(place_type, [])) if place_type else []

        if event.date:
            node.add('DATE', self.format_date(event.date))
        if event.place:
            place = node.add('PLAC', normalize_place(event.place, self.config.state_abbreviations))
            place.children.extend(self.citations.get_citations(t for t in place_titles if t not in event_titles))
        else:
            event_titles.extend(t for t in place_titles if t not in event_titles)
        if event.note:
            node.add('NOTE', event.note)
        node.children.extend(self.citations.get_citations(event_titles))
        if not node.children:
            node.value = 'Y'
        return node

    def child_family_tree(self, parent_set: ParentSet, challenged: bool = False) -> Tuple[GedcomNode, Optional[GedcomNode]]:
        """
        FAMC node for one parent set, and the ADOP event it implies, if any.

        Args:
            parent_set (ParentSet): The candidate parents and their annotation.
            challenged (bool): The child's row in this family was marked uncertain.

        Returns:
            Tuple[GedcomNode, Optional[GedcomNode]]: FAMC node, ADOP node or None.
        """
        pointer = family_pointer(parent_set.family_key)
        famc = GedcomNode('FAMC', pointer)
        if challenged:
            famc.add('STAT', 'challenged')
        note = parent_set.note
        m = PEDIGREE_RE.search(note)
        if not m:
            if note:
                famc.add('NOTE', note)
            return famc, None

        pedigree = m.group(1).lower()
        famc.add('PEDI', pedigree)
        rest = note[m.end():]
        date = None
        if pedigree == 'adopted':
            date_match = search_date(rest)
            if date_match:
                date = GedcomDate.from_match(date_match)
                rest = rest[:date_match.start()] + rest[date_match.end():]
        # The annotation is written whole unless it holds nothing but the keyword and the date
        if not ' '.join(f'{note[:m.start()]} {rest}'.split()).strip(' ,;:.-'):
            note = ''
        if note:
            famc.add('NOTE', note)
        if pedigree != 'adopted':
            return famc, None

        adoption = GedcomNode('ADOP')
        adoption.add('FAMC', pointer)
        if date is not None:
            adoption.add('DATE', self.format_date(date))
        if note:
            adoption.add('NOTE', note)
        return famc, adoption

    def record_citations(self, person: Person) -> List[GedcomNode]:
        """
        Citations of the sources that support the person's relationships.

        Titles are grouped; the note names the relationship types citing the
        title ('Father, Mother' becomes 'Parents'), and is left out when the
        title is cited under 'Other'.
        """
        types_by_title: Dict[str, List[str]] = {}
        source_types = list(RECORD_SOURCE_TYPES)
        for source_type in person.sources:
            if source_type not in KNOWN_SOURCE_TYPES:
                self.issues.add('unknown_source_type', f'Unknown source type "{source_type}" for person '
                                f'{person.person_id}, citing it on the record', person_id=person.person_id)
                source_types.append(source_type)
        for source_type in source_types:
            for title in person.sources.get(source_type, []):
                types = types_by_title.setdefault(title, [])
                if source_type not in types:
                    types.append(source_type)

        citations = []
        for title, types in types_by_title.items():
            note = '' if 'Other' in types else ', '.join(types)
            if note == 'Father, Mother':
                note = 'Parents'
            citations.append(self.citations.get_citation(title, note))
        return citations

    def family_tree(self, family: Family) -> GedcomNode:
        """
        FAM record: HUSB, WIFE, marriage and divorce events, CHIL per child in recorded order.
        """
        record = GedcomNode('FAM', pointer=family_pointer(family.key))
        if family.husband_id:
            record.add('HUSB', person_pointer(family.husband_id))
        if family.wife_id:
            record.add('WIFE', person_pointer(family.wife_id))
        for marriage in family.events:
            event = record.add(marriage.what)
            if marriage.date:
                event.add('DATE', self.format_date(marriage.date))
            else:
                event.value = 'Y'
        for child_id in family.children:
            record.add('CHIL', person_pointer(child_id))
        return record

    def format_date(self, date: GedcomDate) -> str:
        return date.validate().render(self.config.ancestry_format)

    def header_tree(self, now: datetime) -> GedcomNode:
        """
        HEAD record.

        Args:
            now (datetime): Export time, written as DATE and TIME (pass UTC).
        """
        system = self.config.source_system
        head = GedcomNode('HEAD')
        source = head.add('SOUR', system['id'])
        source.add('VERS', str(system['version']))
        source.add('NAME', system['name'])
        date = head.add('DATE', f'{now.day:02d} {MONTHS[now.month - 1]} {now.year}')
        date.add('TIME', now.strftime('%H:%M:%S'))
        if self.config.submitter:
            head.add('SUBM', self.config.submitter_pointer)
        gedc = head.add('GEDC')
        gedc.add('VERS', str(self.config.gedcom_version))
        gedc.add('FORM', self.config.gedcom_form)
        head.add('CHAR', self.config.charset)
        return head

    def submitter_tree(self) -> Optional[GedcomNode]:
        submitter = self.config.submitter
        if not submitter:
            return None
        record = GedcomNode('SUBM', pointer=make_pointer(submitter['id']))
        record.add('NAME', submitter['name'])
        for key, tag in (('address', 'ADDR'), ('phone', 'PHON'), ('email', 'EMAIL'), ('fax', 'FAX'), ('www', 'WWW')):
            if submitter.get(key):
                record.add(tag, str(submitter[key]))
        return record

    def trailer_tree(self) -> GedcomNode:
        return GedcomNode('TRLR')
