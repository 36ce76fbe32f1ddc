from typing import Optional

from edge_gedcom.gedcom_date import GedcomDate

class Marriage:
    """Represents a marriage or divorce of a couple, as listed on a family page.

    Family Edge records only a date for these events: no place or source.

    Attributes:
        what (str): 'MARR' or 'DIV'.
        date (Optional[GedcomDate]): Date of the event, if known.
    """

    __slots__ = ['what', 'date']

    TYPES = {'Married': 'MARR', 'Divorced': 'DIV'}

    def __init__(self, what: str = 'MARR', date: Optional[GedcomDate] = None):
        """Initializes a Marriage instance.

        Args:
            what (str, optional): 'MARR' or 'DIV'. Defaults to 'MARR'.
            date (GedcomDate, optional): Date of the event. Defaults to None.
        """
        if what not in self.TYPES.values():
            raise ValueError(f"Unknown family event '{what}'")
        self.what: str = what
        self.date: Optional[GedcomDate] = date

    def __str__(self) -> str:
        return f"Marriage(what={self.what}, date={self.date})"

    def __repr__(self) -> str:
        return f'Marriage({self.what!r}, {self.date!r})'

    def __eq__(self, other) -> bool:
        if not isinstance(other, Marriage):
            return NotImplemented
        return self.what == other.what and self.date == other.date
