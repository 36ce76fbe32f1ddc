"""
family_parser.py - Parser for the pages of the Family Edge family report.

A family page starts with a parent block (HUSBAND and WIFE lines, or two
SPOUSE lines on remarriage pages) closed by a rule of '=' characters,
followed by one row per child, each closed by a rule of '=' or '-':

    HUSBAND: John SMITH (#3)
       WIFE: Mary JONES (#4)
       MARR: Married 12 Jun 1920
    ==============================
     1 | NAME: Alice SMITH (#7)
     F | BORN: 3 Mar 1921
    ------------------------------

The divider of a child row is '|' normally and '?' when the parentage of the
child is uncertain; the column under the row number holds the child's sex.
"""

import logging
import re
from typing import Any, Dict, List, Optional

from .errors import ParseError
from .family import ChildEntry, Family
from .family_key import family_key
from .field_extract import extract_id, parse_event_value
from .issues import IssueLog
from .marriage import Marriage
from .page import normalize_page

logger = logging.getLogger(__name__)

class FamilyPageParser:
    """
    Parses one family page into a property map and a Family.

    Attributes:
        page (str): Raw page text.
        issues (IssueLog): Where data-consistency problems are recorded.
    """
    __slots__ = ['page', 'issues', '_properties']

    PARENT_BLOCK_RE = re.compile(r'(?: *(?:HUSBAND|WIFE|SPOUSE):(?: .*)?\n(?:.*\n)*?){2}={30,}\n')
    PARENT_LINE_RE = re.compile(r'^\s*(HUSBAND|WIFE|SPOUSE):[ ]?(.*)$', re.M)
    MARR_RE = re.compile(r'^\s*MARR:[ ]?(.*(?:\n {10,}.+)*)$', re.M)
    MARR_ITEM_RE = re.compile(r'(?:(Married|Divorced)\b\s*)?(.*)$', re.S)
    ROW_RE = re.compile(r'(.*?\n)[=-]{30,}\n', re.S)
    CHILD_RE = re.compile(r'[ \d]\d ([|?]) NAME:[ ]?(.*)\n ([FM ])(?=[ \n])')

    def __init__(self, page: str, issues: Optional[IssueLog] = None):
        self.page = page
        self.issues = issues if issues is not None else IssueLog()
        self._properties: Optional[Dict[str, Any]] = None

    def get_properties(self) -> Dict[str, Any]:
        """
        Parse the page.

        Returns:
            Dict[str, Any]: 'HUSBAND' and 'WIFE' (or 'SPOUSES') ids where known,
                'MARR' (list of Marriage) and 'CHILDREN' (child id -> ChildEntry).

        Raises:
            ParseError: If the parent block or a child row has an unexpected format,
                no parent id is found, or text is left over.
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

    def get_record_key(self) -> str:
        return self.get_record().key

    def _parse(self, text: str) -> Dict[str, Any]:
        m = self.PARENT_BLOCK_RE.match(text)
        if not m:
            raise ParseError(f'No parent block found: "{text}"', residue=text)
        properties = self._parse_parent_block(m.group(0))
        properties['CHILDREN'] = self._parse_children(text[m.end():])
        return properties

    def _parse_parent_block(self, block: str) -> Dict[str, Any]:
        properties: Dict[str, Any] = {}
        lines = self.PARENT_LINE_RE.findall(block)
        labels = [label for label, _ in lines]
        if 'SPOUSE' in labels:
            if set(labels) != {'SPOUSE'}:
                raise ParseError(f'Mixed SPOUSE and HUSBAND/WIFE lines: "{block}"', residue=block)
            spouse_ids = [extract_id(value) for _, value in lines]
            properties['SPOUSES'] = [pid for pid in spouse_ids if pid]
            found = bool(properties['SPOUSES'])
        else:
            found = False
            for key in ('HUSBAND', 'WIFE'):
                values = [value for label, value in lines if label == key]
                if not values:
                    raise ParseError(f'No {key} line found: "{block}"', residue=block)
                parent_id = extract_id(values[0])
                if parent_id:
                    properties[key] = parent_id
                    found = True
        if not found:
            raise ParseError(f'No parents found: "{block}"', residue=block)
        m = self.MARR_RE.search(block)
        properties['MARR'] = self._parse_marriages(m.group(1)) if m else []
        return properties

    def _parse_marriages(self, value: str) -> List[Marriage]:
        events = []
        for item in ' '.join(value.split()).split('; '):
            item = item.strip().rstrip('.')
            if not item:
                continue
            m = self.MARR_ITEM_RE.match(item)
            what = Marriage.TYPES[m.group(1) or 'Married']
            rest = m.group(2).strip()
            date = None
            if rest:
                event_value = parse_event_value(rest)
                if event_value.place or event_value.date is None:
                    raise ParseError(f'Unexpected marriage format "{item}"', residue=item)
                date = event_value.date
            events.append(Marriage(what, date))
        return events

    def _parse_children(self, text: str) -> Dict[int, ChildEntry]:
        children: Dict[int, ChildEntry] = {}
        pos = 0
        while True:
            m = self.ROW_RE.match(text, pos)
            if not m:
                break
            pos = m.end()
            row = m.group(1).lstrip('\n')
            child = self.CHILD_RE.match(row)
            if not child:
                raise ParseError(f'Unexpected child format: "{row}"', residue=row)
            divider, name, sex = child.groups()
            child_id = extract_id(name)
            if child_id is None:
                self.issues.add('blank_child_row', f'Skipping child row with no person id: "{row.strip()}"')
                continue
            uncertain = divider == '?'
            if uncertain:
                self.issues.add('uncertain_child', f'Child {child_id} is marked as uncertain parentage',
                                person_id=child_id)
            if child_id in children:
                raise ParseError(f'Child {child_id} listed twice', residue=row)
            children[child_id] = ChildEntry(sex=sex if sex != ' ' else None, uncertain=uncertain)
        residue = text[pos:]
        if residue.strip():
            raise ParseError(f'Unexpected format at end of page "{residue}"', residue=residue)
        return children

    def get_record(self) -> Family:
        """
        Build the Family described by the page.

        Returns:
            Family: The family.
        """
        properties = self.get_properties()
        family = Family(husband_id=properties.get('HUSBAND'), wife_id=properties.get('WIFE'),
                        spouse_ids=properties.get('SPOUSES'))
        family.events = list(properties['MARR'])
        family.children = {child_id: ChildEntry(entry.sex, entry.uncertain)
                           for child_id, entry in properties['CHILDREN'].items()}
        if len(family.parent_ids) > 2:
            raise ParseError(f'Too many parents on family page: {family.parent_ids}', page=self.page)
        logger.debug(f"Parsed family page {family_key(family.parent_ids)}")
        return family
