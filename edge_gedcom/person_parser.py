"""
person_parser.py - Parser for the pages of the Family Edge person report.

A person page is a list of "LABEL: value" fields, optionally followed by a
HISTORY NOTES section and a SOURCES section:

    FULL NAME: John SMITH (#5)
         BORN: 12 Jan 1900 Boston MA
       FATHER: William SMITH (#3)
    -- HISTORY NOTES ------------------
    Free text ...
    -- SOURCES ------------------------
    Birth..........Parish register

The whole page must be consumed; anything left over is a ParseError.

Module: edge_gedcom.person_parser
Last updated: 2026-10-18
"""

import logging
import re
from typing import Any, Dict, List, Optional

from .errors import ParseError
from .field_extract import extract_id, extract_ids, parse_event_value, parse_name
from .issues import IssueLog
from .life_event import EVENT_LABELS, WILL_LABELS, LifeEvent
from .page import normalize_page
from .person import ParentSet, Person

logger = logging.getLogger(__name__)

class PersonPageParser:
    """
    Parses one person page into a property map and a Person.

    Attributes:
        page (str): Raw page text.
        issues (IssueLog): Where data-consistency problems are recorded.
    """
    __slots__ = ['page', 'issues', '_properties']

    SOURCES_RE = re.compile(r'\n-- SOURCES -+\n(.*)$', re.S)
    SOURCE_ENTRY_RE = re.compile(r'([^.\n]+)\.{2,}(.+)\n')
    HISTORY_RE = re.compile(r'\n-- HISTORY NOTES -+\n(.*)$', re.S)
    FIELD_RE = re.compile(r" *([A-Z][A-Z '/]*):[ ]?(.*(?:\n {10,}.+)*)\n")
    BLANK_RE = re.compile(r'[ \t]*\n')
    PARENTS_LEAD_IN_RE = re.compile(r'^also child of:?\s*', re.I)
    PARENTS_NOTE_RE = re.compile(r'^(.+?)\s*\[NOTE: (.+)\]$', re.S)

    # Labels that carry nothing for the GEDCOM output (handled through the family pages)
    SKIPPED_LABELS = ('CHILDREN', "FULL SIBL'G", 'SEX')
    # Labels handled while building the record
    HANDLED_LABELS = ('ID', 'FULL NAME', 'NICKNAME', 'TOMBSTONE', 'OCCUPATION', 'NOTE',
                      'HISTORY NOTES', 'FATHER', 'MOTHER', 'PARENTS', 'SPOUSES', 'SOURCES')

    def __init__(self, page: str, issues: Optional[IssueLog] = None):
        self.page = page
        self.issues = issues if issues is not None else IssueLog()
        self._properties: Optional[Dict[str, Any]] = None

    def get_properties(self) -> Dict[str, Any]:
        """
        Parse the page into labelled fields.

        Returns:
            Dict[str, Any]: 'ID' (int), 'FULL NAME' and the other labels in page order;
                event labels map to EventValue, 'PARENTS' to a list of strings,
                'SOURCES' (if present) to a dict of title lists.

        Raises:
            ParseError: If the page has an unexpected format or no FULL NAME.
        """
        if self._properties is None:
            try:
                self._properties = self._parse(normalize_page(self.page))
            except ParseError as e:
                if e.page is None:
                    e.page = self.page
                raise
        return self._properties

    def get_property(self, key: str):
        return self.get_properties().get(key)

    def get_record_key(self) -> int:
        return self.get_properties()['ID']

    def _parse(self, text: str) -> Dict[str, Any]:
        text, sources = self._extract_sources(text)
        text, history = self._extract_history_notes(text)
        fields = self._extract_fields(text)
        if not fields.get('FULL NAME'):
            raise ParseError('Full name is missing from page', residue=text)
        properties: Dict[str, Any] = {'ID': parse_name(fields['FULL NAME'])[1]}
        for label, value in fields.items():
            properties[label] = self._convert_field(label, value)
        if history:
            properties['HISTORY NOTES'] = history
        if sources is not None:
            properties['SOURCES'] = sources
        return properties

    def _extract_sources(self, text: str):
        m = self.SOURCES_RE.search(text)
        if not m:
            return text, None
        body = m.group(1)
        sources: Dict[str, List[str]] = {}
        pos = 0
        while pos < len(body):
            entry = self.SOURCE_ENTRY_RE.match(body, pos)
            if entry:
                label = entry.group(1).strip()
                title = entry.group(2).strip()
                titles = sources.setdefault(label, [])
                if title not in titles:
                    titles.append(title)
                pos = entry.end()
                continue
            blank = self.BLANK_RE.match(body, pos)
            if blank:
                pos = blank.end()
                continue
            raise ParseError(f'Unexpected format in sources "{body[pos:]}"', residue=body[pos:])
        return text[:m.start()] + '\n', sources

    def _extract_history_notes(self, text: str):
        m = self.HISTORY_RE.search(text)
        if not m:
            return text, None
        paragraphs = re.split(r'\n[ \t]*\n', m.group(1).strip())
        notes = '\n'.join(' '.join(p.split()) for p in paragraphs if p.strip())
        return text[:m.start()] + '\n', notes

    def _extract_fields(self, text: str) -> Dict[str, str]:
        fields: Dict[str, str] = {}
        pos = 0
        while pos < len(text):
            m = self.FIELD_RE.match(text, pos)
            if m:
                label = m.group(1).strip()
                value = ' '.join(m.group(2).split())
                if label in fields:
                    if label in EVENT_LABELS or label == 'FULL NAME':
                        raise ParseError(f'Repeated {label} field', residue=m.group(0))
                    value = fields[label] + '\n' + value
                fields[label] = value
                pos = m.end()
                continue
            blank = self.BLANK_RE.match(text, pos)
            if blank:
                pos = blank.end()
                continue
            break
        if text[pos:].strip():
            raise ParseError(f'Unexpected format at end of page "{text[pos:]}"', residue=text[pos:])
        return fields

    def _convert_field(self, label: str, value: str):
        if label in EVENT_LABELS:
            return parse_event_value(value, allow_second_date=label in WILL_LABELS)
        if label == 'PARENTS':
            value = self.PARENTS_LEAD_IN_RE.sub('', value).rstrip(' .;')
            return [item.strip() for item in value.split('; ') if item.strip()]
        return value

    def get_record(self) -> Person:
        """
        Build the Person described by the page.

        Returns:
            Person: The person, without sex (person pages do not carry it).

        Raises:
            ParseError: If a field cannot be interpreted.
        """
        properties = self.get_properties()
        name, person_id = parse_name(properties['FULL NAME'])
        nickname = properties.get('NICKNAME')
        if nickname:
            name = name.replace('/', f'"{nickname}" /', 1) if '/' in name else f'{name} "{nickname}"'
        person = Person(person_id=person_id, full_name=properties['FULL NAME'], name=name)

        primary: List[int] = []
        tombstone = properties.get('TOMBSTONE')
        for label, value in properties.items():
            if label in EVENT_LABELS:
                person.events.extend(self._make_events(label, value))
            elif label in ('FATHER', 'MOTHER'):
                parent_id = extract_id(value)
                if parent_id and parent_id not in primary:
                    primary.append(parent_id)
            elif label == 'PARENTS':
                for text in value:
                    person.parent_sets.append(self._make_parent_set(person_id, text))
            elif label == 'SPOUSES':
                person.spouse_ids = extract_ids(value)
            elif label == 'OCCUPATION':
                person.occupation = value or None
            elif label in ('NOTE', 'HISTORY NOTES'):
                if value:
                    person.notes.append(value)
            elif label == 'SOURCES':
                person.sources = {key: list(titles) for key, titles in value.items()}
            elif label in self.HANDLED_LABELS or label in self.SKIPPED_LABELS:
                continue
            else:
                self.issues.add('unmapped_field', f'Skipping {label} for person {person_id}: no GEDCOM mapping',
                                person_id=person_id)

        if tombstone:
            note = 'Gravestone: ' + re.sub(r';?\.?$', '', tombstone)
            burials = person.get_events('BURI')
            if burials:
                burials[0].note = note
            else:
                person.events.append(LifeEvent('BURI', label='TOMBSTONE', note=note))

        if primary:
            person.parent_sets.insert(0, ParentSet(tuple(primary)))
            person.has_primary_parents = True
        return person

    def _make_events(self, label: str, value) -> List[LifeEvent]:
        what = EVENT_LABELS[label]
        if value.date2 is None:
            return [LifeEvent(what, value.date, value.place, label=label)]
        # A will with a second date: the will itself and its probate
        return [
            LifeEvent('WILL', value.date, value.place, label=label),
            LifeEvent('PROB', value.date2, value.place, label=label),
        ]

    def _make_parent_set(self, person_id: int, text: str) -> ParentSet:
        note = ''
        m = self.PARENTS_NOTE_RE.match(text)
        if m:
            text, note = m.group(1), m.group(2).strip()
        parent_ids = extract_ids(text)
        if not parent_ids or len(parent_ids) > 2:
            raise ParseError(f'Unexpected text in PARENTS for {person_id}: "{text}"', residue=text, page=self.page)
        return ParentSet(tuple(parent_ids), note)
