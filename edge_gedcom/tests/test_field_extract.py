import pytest

from edge_gedcom.errors import ParseError
from edge_gedcom.field_extract import (
    EventValue,
    collapse_whitespace,
    extract_id,
    extract_ids,
    normalize_place,
    parse_event_value,
    parse_name,
    search_date,
    title_case,
)

STATES = {"MA": "Massachusetts", "IL": "Illinois"}


def test_extract_id():
    assert extract_id("John SMITH (#12)") == 12
    assert extract_id("John SMITH") is None
    assert extract_id("") is None
    assert extract_id(None) is None


def test_extract_ids_first_seen_order_without_duplicates():
    assert extract_ids("Ann (#6); Bob (#2); Ann again (#6)") == [6, 2]
    assert extract_ids("nobody") == []


def test_collapse_whitespace_keeps_newlines():
    assert collapse_whitespace("  a   b \n\t c  d ") == "a b\nc d"


@pytest.mark.parametrize("text,date,place", [
    ("12 Jan 1900 Boston MA", "12 JAN 1900", "Boston MA"),
    ("Jan 1900", "JAN 1900", ""),
    ("1900, Boston.", "1900", "Boston"),
    ("circa 1806 Springfield IL", "ABT 1806", "Springfield IL"),
    ("roughly 1755", "EST 1755", ""),
    ("before 1820", "BEF 1820", ""),
    ("after 3 Mar 1900 at sea", "AFT 3 MAR 1900", "at sea"),
    ("1870(?)", "ABT 1870", ""),
    ("1750/1 Boston", "1750/51", "Boston"),
    ("Oak Hill Cemetery", None, "Oak Hill Cemetery"),
])
def test_parse_event_value(text, date, place):
    value = parse_event_value(text)
    if date is None:
        assert value.date is None
    else:
        assert value.date.gedcom == date
    assert value.place == place
    assert value.date2 is None


def test_parse_event_value_empty():
    assert parse_event_value("") == EventValue()


@pytest.mark.parametrize("text", [
    "circa Boston",
    "before the war",
    "12 Foo 1900 Boston",
])
def test_parse_event_value_bad_date(text):
    with pytest.raises(ParseError):
        parse_event_value(text)


def test_second_date_needs_permission():
    with pytest.raises(ParseError, match="second date"):
        parse_event_value("3 Mar 1819 Boston (probated 5 Jun 1820)")


def test_second_date_allowed():
    value = parse_event_value("3 Mar 1819 Boston MA (probated 5 Jun 1820)", allow_second_date=True)
    assert value.date == "3 MAR 1819"
    assert value.date2 == "5 JUN 1820"
    assert value.place == "Boston MA"


def test_search_date_skips_words_that_are_not_months():
    assert search_date("adopted by the Kew 1905 family").group(0) == "1905"
    assert search_date("adopted 4 Jul 1810, see notes").group(0) == "4 Jul 1810"
    assert search_date("no date here") is None


@pytest.mark.parametrize("text,expected", [
    ("SMITH", "Smith"),
    ("MCDONALD", "McDonald"),
    ("O'BRIEN", "O'Brien"),
    ("VAN DYKE", "Van Dyke"),
    ("SMITH-JONES", "Smith-Jones"),
])
def test_title_case(text, expected):
    assert title_case(text) == expected


@pytest.mark.parametrize("full_name,name,person_id", [
    ("John SMITH (#5)", "John /Smith/", 5),
    ("John Henry SMITH Jr. (#12)", "John Henry /Smith/ Jr", 12),
    ("William SMITH III (#13)", "William /Smith/ III", 13),
    ("Mary VAN DYKE (#7)", "Mary /Van Dyke/", 7),
    ("Ann MCDONALD (#6)", "Ann /McDonald/", 6),
    ("??? SMITH (#20)", "/Smith/", 20),
    ("Jane ??? (#21)", "Jane", 21),
])
def test_parse_name(full_name, name, person_id):
    assert parse_name(full_name) == (name, person_id)


def test_parse_name_without_id():
    with pytest.raises(ParseError):
        parse_name("John SMITH")


@pytest.mark.parametrize("text,expected", [
    ("Boston MA", "Boston, Massachusetts, USA"),
    ("Boston, MA", "Boston, Massachusetts, USA"),
    ("Springfield IL", "Springfield, Illinois, USA"),
    ("Paris XX", "Paris XX"),
    ("Oak Hill Cemetery", "Oak Hill Cemetery"),
])
def test_normalize_place(text, expected):
    assert normalize_place(text, STATES) == expected
