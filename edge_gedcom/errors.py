"""
errors.py - Exceptions raised while converting Family Edge reports.

Structural problems in the report text and broken cross references are fatal:
they stop the run before any GEDCOM output is written.
"""

from typing import Optional


class ParseError(ValueError):
    """
    A page (or part of a page) does not have the expected shape.

    Attributes:
        residue (Optional[str]): Text that could not be parsed, if any.
        page (Optional[str]): The page being parsed, for diagnostics.
    """
    def __init__(self, message: str, residue: Optional[str] = None, page: Optional[str] = None):
        super().__init__(message)
        self.residue = residue
        self.page = page


class CrossReferenceError(ValueError):
    """
    A person links to a family that is not present in the family report.

    Attributes:
        person_id (int): The person with the dangling link.
        family_key (str): The family key that could not be found.
    """
    def __init__(self, message: str, person_id: int, family_key: str):
        super().__init__(message)
        self.person_id = person_id
        self.family_key = family_key
