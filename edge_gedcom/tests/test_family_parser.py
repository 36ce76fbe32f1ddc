import pytest

from edge_gedcom.errors import ParseError
from edge_gedcom.family import ChildEntry
from edge_gedcom.family_parser import FamilyPageParser
from edge_gedcom.issues import IssueLog

RULE = "=" * 30
DASH = "-" * 30


def test_properties(smith_jones_page):
    issues = IssueLog()
    properties = FamilyPageParser(smith_jones_page, issues).get_properties()
    assert properties["HUSBAND"] == 3
    assert properties["WIFE"] == 4
    assert [(m.what, m.date) for m in properties["MARR"]] == [("MARR", "3 JUN 1778")]
    assert properties["CHILDREN"] == {
        5: ChildEntry("M", False),
        8: ChildEntry("F", True),
    }
    assert [issue.issue_type for issue in issues] == ["uncertain_child"]


def test_record_key(smith_jones_page):
    parser = FamilyPageParser(smith_jones_page)
    assert parser.get_record_key() == "3-4"
    family = parser.get_record()
    assert family.parent_ids == [3, 4]
    assert list(family.children) == [5, 8]
    assert family.events[0].what == "MARR"
    assert family.events[0].date == "3 JUN 1778"


def test_marriage_and_divorce():
    page = (
        "HUSBAND: John SMITH (#5)\n"
        "   WIFE: Ann BROWN (#6)\n"
        "   MARR: Married 1 May 1805; Divorced 1830; Married\n"
        f"{RULE}\n"
    )
    family = FamilyPageParser(page).get_record()
    assert [(m.what, m.date) for m in family.events] == [("MARR", "1 MAY 1805"), ("DIV", "1830"), ("MARR", None)]
    assert family.children == {}


def test_single_parent():
    page = f"HUSBAND: Peter GREEN (#10)\n   WIFE:\n{RULE}\n 1 | NAME: Robert SMITH (#9)\n   | BORN: 1806\n{RULE}\n"
    family = FamilyPageParser(page).get_record()
    assert family.key == "10-0"
    assert family.children == {9: ChildEntry(None, False)}


def test_spouse_page():
    page = (
        " SPOUSE: Ann BROWN (#6)\n"
        " SPOUSE: John SMITH (#5)\n"
        f"{RULE}\n"
    )
    parser = FamilyPageParser(page)
    assert parser.get_property("SPOUSES") == [6, 5]
    family = parser.get_record()
    assert family.husband_id is None and family.wife_id is None
    assert family.key == "5-6"


def test_blank_child_row_is_skipped():
    issues = IssueLog()
    page = (
        f"HUSBAND: John SMITH (#5)\n   WIFE: Ann BROWN (#6)\n{RULE}\n"
        f" 1 | NAME:\n   |\n{DASH}\n"
        f" 2 | NAME: Robert SMITH (#9)\n M | BORN: 1806\n{RULE}\n"
    )
    family = FamilyPageParser(page, issues).get_record()
    assert list(family.children) == [9]
    assert [issue.issue_type for issue in issues] == ["blank_child_row"]


def test_ten_or_more_children():
    rows = "".join(f"{n:2d} | NAME: Child SMITH (#{100 + n})\n F | BORN: 1800\n{DASH}\n" for n in range(1, 12))
    page = f"HUSBAND: John SMITH (#5)\n   WIFE: Ann BROWN (#6)\n{RULE}\n{rows}"
    family = FamilyPageParser(page).get_record()
    assert list(family.children) == [100 + n for n in range(1, 12)]


@pytest.mark.parametrize("page", [
    "just some text\n",
    f"HUSBAND:\n   WIFE:\n{RULE}\n",
    f"HUSBAND: John SMITH (#5)\n   WIFE: Ann BROWN (#6)\n   MARR: Engaged 1800\n{RULE}\n",
    f"HUSBAND: John SMITH (#5)\n   WIFE: Ann BROWN (#6)\n{RULE}\nNAME: Robert SMITH (#9)\n{RULE}\n",
    f"HUSBAND: John SMITH (#5)\n   WIFE: Ann BROWN (#6)\n{RULE}\n 1 | NAME: Robert SMITH (#9)\n M | BORN: 1806\n",
])
def test_bad_pages(page):
    with pytest.raises(ParseError):
        FamilyPageParser(page).get_properties()
