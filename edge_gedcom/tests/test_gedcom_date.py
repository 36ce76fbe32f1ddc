import pytest
from ged4py.date import DateValue, DateValuePhrase
from edge_gedcom.errors import ParseError
from edge_gedcom.gedcom_date import GedcomDate

@pytest.mark.parametrize("date_str,gedcom,ancestry", [
    ("1900", "1900", "1900"),
    ("Jul 1913", "JUL 1913", "Jul 1913"),
    ("15 Jul 1913", "15 JUL 1913", "15 Jul 1913"),
    ("circa 12 Jan 1900", "ABT 12 JAN 1900", "abt 12 Jan 1900"),
    ("roughly 1755", "EST 1755", "est 1755"),
    ("before 1820", "BEF 1820", "bef 1820"),
    ("after Mar 1802", "AFT MAR 1802", "aft Mar 1802"),
    ("Mar 1802(?)", "ABT MAR 1802", "abt Mar 1802"),
    ("before 1802(?)", "BEF 1802", "bef 1802"),
])
def test_renderings(date_str, gedcom, ancestry):
    """Test the standard and the Ancestry.com renderings."""
    gd = GedcomDate.parse(date_str)
    assert gd.gedcom == gedcom
    assert str(gd) == gedcom
    assert gd.ancestry == ancestry
    assert gd.render(ancestry_format=True) == ancestry
    assert gd.render() == gedcom

@pytest.mark.parametrize("date_str,expected", [
    ("1750/1", "1750/51"),
    ("1799/0", "1799/00"),
    ("1699/00", "1699/00"),
    ("12 Feb 1731/32", "12 FEB 1731/32"),
])
def test_dual_years(date_str, expected):
    """Dual years always get two digits after the slash."""
    assert GedcomDate.parse(date_str).gedcom == expected

@pytest.mark.parametrize("date_str,kind", [
    ("12 Jan 1900", "SIMPLE"),
    ("circa 1900", "ABOUT"),
    ("1900(?)", "ABOUT"),
    ("roughly 1900", "ESTIMATED"),
    ("before 1900", "BEFORE"),
    ("after 1900", "AFTER"),
])
def test_kind_from_ged4py(date_str, kind):
    """The standard rendering is a date ged4py understands."""
    assert GedcomDate.parse(date_str).kind.name == kind

def test_validate_accepts_standard_renderings():
    for date_str in ("circa 12 Jan 1900", "1750/1", "Mar 1802(?)", "roughly 1755"):
        date = GedcomDate.parse(date_str)
        assert date.validate() is date

@pytest.mark.parametrize("date_str", [
    "",
    "circa",
    "12 Foo 1900",
    "sometime in 1900",
    "1900 Boston",
])
def test_invalid_date(date_str):
    with pytest.raises(ParseError):
        GedcomDate.parse(date_str)

def test_invalid_parts():
    with pytest.raises(ParseError):
        GedcomDate(1900, day=3)
    with pytest.raises(ParseError):
        GedcomDate(1900, month="Foo")
    with pytest.raises(ParseError):
        GedcomDate(1900, qualifier="maybe")

def test_equality_and_hash():
    a = GedcomDate.parse("circa 1900")
    b = GedcomDate(1900, qualifier="circa")
    assert a == b
    assert a == "ABT 1900"
    assert hash(a) == hash(b)
    assert a != GedcomDate(1901)

def test_validate_rejects_what_ged4py_reads_as_a_phrase(monkeypatch):
    monkeypatch.setattr(DateValue, "parse", classmethod(lambda cls, datestr: DateValuePhrase(datestr)))
    with pytest.raises(ParseError):
        GedcomDate(1900).validate()
