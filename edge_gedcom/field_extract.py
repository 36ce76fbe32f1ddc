"""
field_extract.py - Field extraction helpers shared by the page parsers.

Stateless regex helpers for pulling person ids, dates, places and names out
of Family Edge report text. Every helper takes the text it works on as an
argument; nothing here keeps state between calls.
"""

import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .errors import ParseError
from .gedcom_date import GedcomDate, MONTHS, QUALIFIERS

ID_RE = re.compile(r'\(#(\d+)\)')
SPACE_RE = re.compile(r'[^\S\n]+')

EVENT_DATE_RE = re.compile(GedcomDate.PATTERN + r'(?=[\s,.;]|$)')
QUALIFIER_ONLY_RE = re.compile(r'(?:%s)\b' % '|'.join(QUALIFIERS))
SECOND_DATE_RE = re.compile(r'\s*\((?:(?!%s)[a-z]+ )?(' % '|'.join(QUALIFIERS) + GedcomDate.PATTERN + r')\)')

NAME_RE = re.compile(r'^(.+?)(?: (Jr|Sr|I{1,3}|IV|VI{0,3}))?\.? \(#(\d+)\)$')
SURNAME_RE = re.compile(r"\b[A-Z'-]{2,}(?:\b \b[A-Z'-]{2,})*$|\?{3}$")
STATE_RE = re.compile(r'(^|,? )([A-Z]{2})$')


@dataclass(frozen=True)
class EventValue:
    """
    Date and place decomposed from an event field.

    Attributes:
        date (Optional[GedcomDate]): Date of the event, if given.
        place (str): Remaining free text, usually a place.
        date2 (Optional[GedcomDate]): Second parenthesised date (probate date of a will).
    """
    date: Optional[GedcomDate] = None
    place: str = ''
    date2: Optional[GedcomDate] = None


def extract_id(text: Optional[str]) -> Optional[int]:
    """
    Return the first embedded "(#123)" person id in text, or None.
    """
    if not text:
        return None
    m = ID_RE.search(text)
    return int(m.group(1)) if m else None


def extract_ids(text: Optional[str]) -> List[int]:
    """
    Return all distinct embedded person ids in text, in the order first seen.
    """
    ids: List[int] = []
    if not text:
        return ids
    for m in ID_RE.finditer(text):
        person_id = int(m.group(1))
        if person_id not in ids:
            ids.append(person_id)
    return ids


def collapse_whitespace(text: str) -> str:
    """
    Collapse runs of blanks to a single space and trim each line. Newlines are kept.
    """
    lines = [SPACE_RE.sub(' ', line).strip() for line in text.split('\n')]
    return '\n'.join(lines).strip()


def search_date(text: str) -> Optional[re.Match]:
    """
    Find the first date expression anywhere in text, skipping words that only look like months.
    """
    pos = 0
    while True:
        m = GedcomDate.DATE_RE.search(text, pos)
        if not m:
            return None
        if not m.group('month') or m.group('month').upper() in MONTHS:
            return m
        pos = m.start('year')


def parse_event_value(text: str, allow_second_date: bool = False) -> EventValue:
    """
    Split an event field into date and place.

    Args:
        text (str): Field value, e.g. "circa 12 Jan 1900 Some City".
        allow_second_date (bool): Whether a parenthesised second date may follow.

    Returns:
        EventValue: The decomposed value.

    Raises:
        ParseError: If a qualifier is not followed by a valid date, the month is
            not a month, or an unexpected second date is present.
    """
    text = SPACE_RE.sub(' ', text).strip()
    date = None
    m = EVENT_DATE_RE.match(text)
    if m:
        date = GedcomDate.from_match(m)
        rest = text[m.end():]
    elif QUALIFIER_ONLY_RE.match(text):
        raise ParseError(f'Invalid date format "{text}"', residue=text)
    else:
        rest = text

    date2 = None
    m = SECOND_DATE_RE.search(rest)
    if m:
        if not allow_second_date:
            raise ParseError(f'Unexpected second date in "{text}"', residue=m.group(0).strip())
        date2 = GedcomDate.parse(m.group(1))
        rest = rest[:m.start()] + rest[m.end():]

    place = rest.strip().lstrip(',;').strip()
    if place.endswith('.'):
        place = place[:-1].rstrip()
    return EventValue(date=date, place=place, date2=date2)


def initial_cap(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def title_case(text: str) -> str:
    """
    Title-case an all-caps surname: "MCDONALD" -> "McDonald", "O'BRIEN" -> "O'Brien".
    """
    text = re.sub(r'[^\W_]+', lambda m: initial_cap(m.group(0)), text)
    return re.sub(r'\b(Mc)(\w+)', lambda m: m.group(1) + initial_cap(m.group(2)), text)


def parse_name(full_name: str) -> Tuple[str, int]:
    """
    Convert a report name to GEDCOM name form.

    Args:
        full_name (str): e.g. "John Henry SMITH Jr. (#12)".

    Returns:
        Tuple[str, int]: ("John Henry /Smith/ Jr", 12)

    Raises:
        ParseError: If the name does not end with an embedded id.
    """
    m = NAME_RE.match(full_name.strip())
    if not m:
        raise ParseError(f'Unexpected person format "{full_name}"', residue=full_name)
    name, suffix, person_id = m.groups()
    name = SURNAME_RE.sub(lambda s: '/' + title_case(s.group(0)) + '/', name, count=1)
    name = re.sub(r' ?/\?{3}/$', '', name)  # unknown surname
    name = re.sub(r'^\?{3} ', '', name)  # unknown given name
    if suffix:
        name += ' ' + suffix
    return name, int(person_id)


def normalize_place(text: str, states: Dict[str, str]) -> str:
    """
    Expand a trailing US state abbreviation: "Boston MA" -> "Boston, Massachusetts, USA".
    """
    def _expand(m: re.Match) -> str:
        prefix, abbr = m.groups()
        state = states.get(abbr)
        if not state:
            return m.group(0)
        if prefix == ' ':
            prefix = ', '
        return f'{prefix}{state}, USA'
    return STATE_RE.sub(_expand, text)
