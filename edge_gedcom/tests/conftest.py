import pytest

RULE = "=" * 30
DASH = "-" * 30

WILLIAM_PAGE = """PERSON REPORT
=============
FULL NAME: William SMITH (#3)
     BORN: 1750/1 Boston MA
     DIED: before 1820
     WILL: 3 Mar 1819 Boston MA (probated 5 Jun 1820)
  SPOUSES: Mary JONES (#4)
     NOTE: William kept a diary for most of his life, and the diary was handed down through
           the family until it was given to the historical society in 1950.
From: The Family Edge Plus
"""

MARY_PAGE = """PERSON REPORT
=============
FULL NAME: Mary JONES (#4)
     BORN: roughly 1755
  SPOUSES: William SMITH (#3)
From: The Family Edge Plus
"""

JOHN_PAGE = """PERSON REPORT
=============
FULL NAME: John SMITH (#5)
     BORN: 12 Jan 1780 Boston MA
   FATHER: William SMITH (#3)
   MOTHER: Mary JONES (#4)
  SPOUSES: Ann BROWN (#6)
 CHILDREN: Robert SMITH (#9)
From: The Family Edge Plus
"""

ANN_PAGE = """PERSON REPORT
=============
FULL NAME: Ann MCDONALD (#6)
  SPOUSES: John SMITH (#5)
From: The Family Edge Plus
"""

JANE_PAGE = """PERSON REPORT
=============
FULL NAME: Jane SMITH (#8)
     BORN: 1782
   FATHER: William SMITH (#3)
   MOTHER: Mary JONES (#4)
From: The Family Edge Plus
"""

ROBERT_PAGE = """PERSON REPORT
=============
FULL NAME: Robert SMITH (#9)
 NICKNAME: Bob
     BORN: circa 1806 Springfield IL
     DIED: 1870(?)
   BURIED: 1870 Oak Hill Cemetery
TOMBSTONE: Beloved father.
OCCUPATION: Carpenter; [NOTE: per 1850 census]
   FATHER: John SMITH (#5)
   MOTHER: Ann MCDONALD (#6)
  PARENTS: Also child of Peter GREEN (#10) [NOTE: adopted 4 Jul 1810, see notes].
-- HISTORY NOTES ---------------------
Robert grew up in
  Springfield.

He moved west in 1850.
-- SOURCES ---------------------------
Name..........Family Bible
Birth.........Parish register
BPlace........Parish register
Father........Family Bible
Mother........Family Bible
From: The Family Edge Plus
"""

PETER_PAGE = """PERSON REPORT
=============
FULL NAME: Peter GREEN (#10)
From: The Family Edge Plus
"""

SMITH_JONES_PAGE = f"""FAMILY REPORT
=============
HUSBAND: William SMITH (#3)
   WIFE: Mary JONES (#4)
   MARR: Married 3 Jun 1778
{RULE}
 1 | NAME: John SMITH (#5)
 M | BORN: 12 Jan 1780
{DASH}
 2 ? NAME: Jane SMITH (#8)
 F | BORN: 1782
{RULE}
From: The Family Edge Plus
"""

SMITH_BROWN_PAGE = f"""FAMILY REPORT
=============
HUSBAND: John SMITH (#5)
   WIFE: Ann MCDONALD (#6)
   MARR: Married 1 May 1805; Divorced 1830
{RULE}
 1 | NAME: Robert SMITH (#9)
 M | BORN: circa 1806
{RULE}
From: The Family Edge Plus
"""

GREEN_PAGE = f"""FAMILY REPORT
=============
HUSBAND: Peter GREEN (#10)
   WIFE:
{RULE}
 1 | NAME: Robert SMITH (#9)
   | BORN: circa 1806
{RULE}
From: The Family Edge Plus
"""

PERSON_PAGES = [WILLIAM_PAGE, MARY_PAGE, JOHN_PAGE, ANN_PAGE, JANE_PAGE, ROBERT_PAGE, PETER_PAGE]
FAMILY_PAGES = [SMITH_JONES_PAGE, SMITH_BROWN_PAGE, GREEN_PAGE]


def write_report(path, pages):
    path.write_text("\f".join(pages), encoding="utf-8")
    return path


@pytest.fixture
def robert_page():
    return ROBERT_PAGE


@pytest.fixture
def william_page():
    return WILLIAM_PAGE


@pytest.fixture
def smith_jones_page():
    return SMITH_JONES_PAGE


@pytest.fixture
def report_files(tmp_path):
    """Person and family report files of a small three generation family."""
    person_path = write_report(tmp_path / "person.doc", PERSON_PAGES)
    family_path = write_report(tmp_path / "family.doc", FAMILY_PAGES)
    return person_path, family_path


@pytest.fixture
def jane_page():
    return JANE_PAGE


@pytest.fixture
def smith_brown_page():
    return SMITH_BROWN_PAGE


@pytest.fixture
def make_report_files(tmp_path):
    """Write report files from lists of pages; defaults to the full sample family."""
    def make(person_pages=None, family_pages=None):
        person_path = write_report(tmp_path / "person.doc", PERSON_PAGES if person_pages is None else person_pages)
        family_path = write_report(tmp_path / "family.doc", FAMILY_PAGES if family_pages is None else family_pages)
        return person_path, family_path
    return make
