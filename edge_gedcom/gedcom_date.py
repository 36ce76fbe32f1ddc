"""
gedcom_date.py - Family Edge date expressions and their GEDCOM renderings.

Provides the GedcomDate class holding the parts of a date as written in a
Family Edge report ("circa 12 Jan 1900", "1750/1", "Mar 1802(?)") and
rendering them either as standard GEDCOM ("ABT 12 JAN 1900", "1750/51") or
in the mixed-case style that Ancestry.com expects ("abt 12 Jan 1900").
The standard rendering is checked with ged4py's DateValue parser.

Module: edge_gedcom.gedcom_date
Last updated: 2026-10-18
"""

import logging
import re
from typing import Optional

from ged4py.date import DateValue

from .errors import ParseError

logger = logging.getLogger(__name__)

MONTHS = ('JAN', 'FEB', 'MAR', 'APR', 'MAY', 'JUN', 'JUL', 'AUG', 'SEP', 'OCT', 'NOV', 'DEC')

QUALIFIERS = {
    'after': 'AFT',
    'before': 'BEF',
    'circa': 'ABT',
    'roughly': 'EST',
}

class GedcomDate:
    """
    A date parsed from report text.

    Attributes:
        qualifier (Optional[str]): 'circa', 'roughly', 'before' or 'after'.
        day (Optional[int]): Day of month.
        month (Optional[str]): Upper-case three letter month abbreviation.
        year (int): Four digit year.
        dual_year (Optional[str]): Digits after the slash of a dual-dated year, as written.
        uncertain (bool): True when the date was followed by "(?)".
    """
    __slots__ = ['qualifier', 'day', 'month', 'year', 'dual_year', 'uncertain']

    PATTERN = (
        r'(?:(?P<qualifier>circa|roughly|before|after) )?'
        r'(?:(?:(?P<day>\d\d?) )?(?P<month>[A-Za-z]{3}) )?'
        r'(?P<year>\d{4})'
        r'(?:/(?P<dual>\d\d?))?'
        r'(?P<uncertain>\(\?\))?'
    )
    DATE_RE = re.compile(PATTERN)
    FULL_RE = re.compile(PATTERN + r'$')

    def __init__(self, year: int, month: Optional[str] = None, day: Optional[int] = None,
                 qualifier: Optional[str] = None, dual_year: Optional[str] = None, uncertain: bool = False):
        if month is not None and month.upper() not in MONTHS:
            raise ParseError(f'Invalid month "{month}"')
        if day is not None and month is None:
            raise ParseError(f'Day {day} given without a month')
        if qualifier is not None and qualifier not in QUALIFIERS:
            raise ParseError(f'Invalid date qualifier "{qualifier}"')
        self.qualifier = qualifier
        self.day = day
        self.month = month.upper() if month else None
        self.year = year
        self.dual_year = dual_year
        self.uncertain = uncertain

    @classmethod
    def from_match(cls, m: re.Match) -> "GedcomDate":
        """
        Build a GedcomDate from a match of DATE_RE or FULL_RE.
        """
        return cls(
            year=int(m.group('year')),
            month=m.group('month'),
            day=int(m.group('day')) if m.group('day') else None,
            qualifier=m.group('qualifier'),
            dual_year=m.group('dual'),
            uncertain=bool(m.group('uncertain')),
        )

    @classmethod
    def parse(cls, text: str) -> "GedcomDate":
        """
        Parse a complete date expression.

        Args:
            text (str): Date text such as "circa 12 Jan 1900".

        Returns:
            GedcomDate: The parsed date.

        Raises:
            ParseError: If the text is not a date expression.
        """
        m = cls.FULL_RE.match(text.strip())
        if not m:
            raise ParseError(f'Invalid date format "{text}"', residue=text)
        return cls.from_match(m)

    @property
    def prefix(self) -> Optional[str]:
        if self.qualifier:
            return QUALIFIERS[self.qualifier]
        if self.uncertain:
            return 'ABT'
        return None

    @property
    def year_str(self) -> str:
        """
        Year with the dual-year suffix widened to two digits (1750/1 -> 1750/51).
        """
        if self.dual_year is None:
            return str(self.year)
        if len(self.dual_year) == 2:
            return f'{self.year}/{self.dual_year}'
        return f'{self.year}/{(self.year + 1) % 100:02d}'

    def _format(self, month: Optional[str], prefix: Optional[str]) -> str:
        parts = []
        if prefix:
            parts.append(prefix)
        if self.day is not None:
            parts.append(str(self.day))
        if month:
            parts.append(month)
        parts.append(self.year_str)
        return ' '.join(parts)

    @property
    def gedcom(self) -> str:
        return self._format(self.month, self.prefix)

    @property
    def ancestry(self) -> str:
        month = self.month.capitalize() if self.month else None
        prefix = self.prefix.lower() if self.prefix else None
        return self._format(month, prefix)

    def render(self, ancestry_format: bool = False) -> str:
        return self.ancestry if ancestry_format else self.gedcom

    @property
    def value(self) -> DateValue:
        return DateValue.parse(self.gedcom)

    @property
    def kind(self):
        """
        Returns the ged4py DateValueTypes kind of the standard rendering.
        """
        return self.value.kind

    def validate(self) -> "GedcomDate":
        """
        Check the standard rendering with ged4py's date parser.

        Returns:
            GedcomDate: self, for chaining.

        Raises:
            ParseError: If ged4py can only read the rendering as a date phrase.
        """
        if self.kind.name == 'PHRASE':
            raise ParseError(f'Date "{self.gedcom}" is not a valid GEDCOM date', residue=self.gedcom)
        return self

    def __str__(self) -> str:
        return self.gedcom

    def __repr__(self) -> str:
        return f'GedcomDate({self.gedcom!r})'

    def __eq__(self, other) -> bool:
        if isinstance(other, GedcomDate):
            return self.gedcom == other.gedcom
        if isinstance(other, str):
            return self.gedcom == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.gedcom)
