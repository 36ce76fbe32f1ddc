"""
assembler.py - Builds the in-memory genealogy from parsed person and family pages.

The assembler merges multi-page families, works out the sex of each person
from the family pages (the person pages do not carry it), places the parents
of SPOUSE pages into the husband and wife slots, and checks that every family
a person links to exists.

Module: edge_gedcom.assembler
Last updated: 2026-10-18
"""

__all__ = ['Genealogy', 'GenealogyAssembler']

import logging
from typing import Dict, Iterator, Optional

from .errors import CrossReferenceError, ParseError
from .family import Family
from .issues import IssueLog
from .person import Person

logger = logging.getLogger(__name__)

class Genealogy:
    """
    The assembled people and families of one conversion run.

    Attributes:
        persons (Dict[int, Person]): People in person file order.
        families (Dict[str, Family]): Families by key, in first-seen order.
    """
    __slots__ = ['persons', 'families']

    def __init__(self, persons: Dict[int, Person], families: Dict[str, Family]):
        self.persons = persons
        self.families = families

    def get_person(self, person_id: int) -> Optional[Person]:
        return self.persons.get(person_id)

    def get_family(self, key: str) -> Optional[Family]:
        return self.families.get(key)

    def iter_persons(self) -> Iterator[Person]:
        return iter(self.persons.values())

    def iter_families(self) -> Iterator[Family]:
        return iter(self.families.values())

    def __repr__(self) -> str:
        return f"Genealogy(persons={len(self.persons)}, families={len(self.families)})"

class GenealogyAssembler:
    """
    Collects Person and Family records and assembles them into a Genealogy.

    Attributes:
        issues (IssueLog): Where data-consistency problems are recorded.
        persons (Dict[int, Person]): People added so far.
        families (Dict[str, Family]): Families added so far.
    """
    __slots__ = ['issues', 'persons', 'families', '_reported_conflicts']

    def __init__(self, issues: Optional[IssueLog] = None):
        self.issues = issues if issues is not None else IssueLog()
        self.persons: Dict[int, Person] = {}
        self.families: Dict[str, Family] = {}
        self._reported_conflicts = set()

    def add_family(self, family: Family) -> Family:
        """
        Add a family page. A page with the key of a family already seen is merged
        into it (children unioned, first-seen order kept).

        Returns:
            Family: The stored family for the key.
        """
        key = family.key
        if key is None:
            raise ParseError('Family page has no parents')
        existing = self.families.get(key)
        if existing is None:
            self.families[key] = family
            return family
        logger.debug(f"Merging continuation page of family {key}")
        for child_id in existing.merge_children(family):
            self._record_sex_conflict(child_id, f'Child {child_id} of family {key} has a different sex on another page')
        if not existing.events:
            existing.events = list(family.events)
        if existing.spouse_ids and (family.husband_id or family.wife_id):
            existing.husband_id, existing.wife_id = family.husband_id, family.wife_id
            existing.spouse_ids = []
        return existing

    def add_person(self, person: Person) -> Person:
        if person.person_id in self.persons:
            raise ParseError(f'Person {person.person_id} appears twice in the person report')
        self.persons[person.person_id] = person
        return person

    def _record_sex_conflict(self, person_id: int, message: str) -> None:
        if person_id in self._reported_conflicts:
            return
        self._reported_conflicts.add(person_id)
        self.issues.add('sex_conflict', message, person_id=person_id)

    def sex_lookup(self) -> Dict[int, str]:
        """
        Derive the sex of each person from the family pages.

        The husband slot gives 'M', the wife slot 'F' and the sex column of a
        child row gives its letter. The first value found for a person is kept;
        a conflicting later one is recorded as an issue. Spouses from SPOUSE lines
        that are not yet placed in a slot give no sex.

        Returns:
            Dict[int, str]: Sex letter by person id.
        """
        sexes: Dict[int, str] = {}

        def assign(person_id: Optional[int], sex: Optional[str]) -> None:
            if not person_id or not sex:
                return
            current = sexes.setdefault(person_id, sex)
            if current != sex:
                self._record_sex_conflict(
                    person_id, f'Person {person_id} is both {current} and {sex} in the family report, keeping {current}')

        for family in self.families.values():
            assign(family.husband_id, 'M')
            assign(family.wife_id, 'F')
            for child_id, entry in family.children.items():
                assign(child_id, entry.sex)
        return sexes

    def resolve_spouse_pages(self, sexes: Optional[Dict[int, str]] = None) -> None:
        """
        Place the parents of families read from SPOUSE lines into the husband
        and wife slots, using the sex of each parent where it is known.

        Args:
            sexes (Optional[Dict[int, str]]): Sex lookup; computed if not given.
        """
        if sexes is None:
            sexes = self.sex_lookup()
        for key, family in self.families.items():
            if not family.spouse_ids:
                continue
            spouse_ids = list(family.spouse_ids)
            if len(spouse_ids) == 1:
                spouse_id = spouse_ids[0]
                if sexes.get(spouse_id) == 'F':
                    family.wife_id = spouse_id
                else:
                    family.husband_id = spouse_id
                    if sexes.get(spouse_id) != 'M':
                        self.issues.add('unknown_spouse_sex', f'Sex of {spouse_id} in family {key} is unknown, '
                                        'placing as husband', person_id=spouse_id)
            else:
                first, second = spouse_ids
                sex_first, sex_second = sexes.get(first), sexes.get(second)
                if (sex_first == 'M' and sex_second != 'M') or (sex_second == 'F' and sex_first != 'F'):
                    family.husband_id, family.wife_id = first, second
                elif (sex_first == 'F' and sex_second != 'F') or (sex_second == 'M' and sex_first != 'M'):
                    family.husband_id, family.wife_id = second, first
                else:
                    self.issues.add('unknown_spouse_sex', f'Cannot tell husband from wife in family {key}, '
                                    'using line order', related_ids=(first, second))
                    family.husband_id, family.wife_id = first, second
            family.spouse_ids = []

    def assemble(self) -> Genealogy:
        """
        Finish the genealogy.

        Returns:
            Genealogy: People with their sex and parentage flags set, and the families.

        Raises:
            CrossReferenceError: If a person links to a family that is not in the family report.
        """
        # Sex comes from the pages as read; placing SPOUSE lines adds none
        sexes = self.sex_lookup()
        self.resolve_spouse_pages(sexes)

        for person in self.persons.values():
            person.sex = sexes.get(person.person_id)
            key = person.primary_family_key
            if key is not None and key in self.families:
                entry = self.families[key].children.get(person.person_id)
                if entry is None:
                    self.issues.add('missing_child_row', f'Person {person.person_id} is not listed as a child '
                                    f'of family {key}', person_id=person.person_id)
                else:
                    person.uncertain_parents = entry.uncertain
            self._check_links(person)

        for key, family in self.families.items():
            members = family.parent_ids + list(family.children)
            for member_id in members:
                if member_id not in self.persons:
                    self.issues.add('missing_person', f'Person {member_id} of family {key} is not in the person report',
                                    person_id=member_id)

        logger.info(f"Assembled {len(self.persons)} people and {len(self.families)} families")
        return Genealogy(dict(self.persons), dict(self.families))

    def _check_links(self, person: Person) -> None:
        for key in person.child_family_keys:
            if key not in self.families:
                raise CrossReferenceError(f'Family {key} (parents of {person.person_id}) is not in the family report',
                                          person_id=person.person_id, family_key=key)
        for key in person.spouse_family_keys:
            if key not in self.families:
                raise CrossReferenceError(f'Family {key} (spouse of {person.person_id}) is not in the family report',
                                          person_id=person.person_id, family_key=key)
