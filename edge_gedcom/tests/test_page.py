from edge_gedcom.page import iter_pages, normalize_page


def test_normalize_page_strips_header_and_footer():
    page = "PERSON REPORT\r\n=============\r\nFULL NAME: John SMITH (#5)\r\nFrom: The Family Edge Plus\r\n"
    assert normalize_page(page) == "FULL NAME: John SMITH (#5)\n"


def test_normalize_page_without_header_or_footer():
    assert normalize_page("\nFULL NAME: John SMITH (#5)") == "FULL NAME: John SMITH (#5)\n"


def test_normalize_page_keeps_rules_that_are_not_a_header():
    page = "HUSBAND: John SMITH (#5)\n   WIFE: Ann BROWN (#6)\n" + "=" * 30 + "\n"
    assert normalize_page(page) == page


def test_iter_pages_splits_on_form_feed(tmp_path):
    path = tmp_path / "report.doc"
    path.write_text("page one\n\fpage two\n\f  \n\fpage three", encoding="utf-8")
    assert list(iter_pages(path)) == ["page one\n", "page two\n", "page three"]


def test_iter_pages_across_chunks(tmp_path):
    pages = [f"page {n}\n" + "x" * 50 for n in range(10)]
    path = tmp_path / "report.doc"
    path.write_text("\f".join(pages), encoding="utf-8")
    assert list(iter_pages(path, chunk_size=7)) == pages


def test_iter_pages_empty_file(tmp_path):
    path = tmp_path / "empty.doc"
    path.write_text("", encoding="utf-8")
    assert list(iter_pages(path)) == []


def test_normalize_page_only_strips_the_last_from_line():
    page = "FULL NAME: John SMITH (#5)\nFrom: a letter\nmore text\nFrom: The Family Edge Plus\n\n"
    assert normalize_page(page) == "FULL NAME: John SMITH (#5)\nFrom: a letter\nmore text\n"
