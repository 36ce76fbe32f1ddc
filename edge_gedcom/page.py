"""
page.py - Page handling shared by the person and family page parsers.

Provides:
    - iter_pages(): stream the form-feed separated pages of a report file
    - normalize_page(): strip the page header and footer, normalize line endings
    - PageParser: the protocol both page parsers implement
"""

import logging
import re
from pathlib import Path
from typing import Any, Dict, Iterator, Protocol, Union

logger = logging.getLogger(__name__)

PAGE_SEPARATOR = '\f'
HEADER_RE = re.compile(r'^.+\n=+\n')
FOOTER_RE = re.compile(r'\nFrom: [^\n]*\s*\Z')

class PageParser(Protocol):
    """
    Protocol implemented by the person and family page parsers.

    Methods:
        get_properties() -> Dict[str, Any]:
            Labelled fields of the page.
        get_record_key():
            Person id of a person page, family key of a family page.
        get_record():
            The Person or Family built from the page.
    """
    def get_properties(self) -> Dict[str, Any]:
        ...

    def get_record_key(self):
        ...

    def get_record(self):
        ...

def normalize_page(page: str) -> str:
    """
    Prepare a raw page for parsing.

    Normalizes line endings, removes the two-line header (title and a rule of
    '=' characters) and the trailing "From: ..." footer, and makes sure the
    text ends with a newline.

    Args:
        page (str): Raw page text.

    Returns:
        str: The page body.
    """
    text = page.replace('\r\n', '\n').replace('\r', '\n').lstrip('\n')
    text = HEADER_RE.sub('', text, count=1)
    text = FOOTER_RE.sub('\n', text, count=1)
    if text and not text.endswith('\n'):
        text += '\n'
    return text

def iter_pages(path: Union[str, Path], encoding: str = 'utf-8', chunk_size: int = 4096) -> Iterator[str]:
    """
    Yield the pages of a report file one at a time.

    Pages are separated by form feeds; empty or blank pages are skipped.

    Args:
        path (Union[str, Path]): Report file.
        encoding (str): Text encoding of the file.
        chunk_size (int): Number of characters read at a time.

    Yields:
        str: Raw page text.
    """
    pending = ''
    count = 0
    with open(path, 'r', encoding=encoding, newline='') as f:
        while True:
            chunk = f.read(chunk_size)
            if not chunk:
                break
            pending += chunk
            *pages, pending = pending.split(PAGE_SEPARATOR)
            for page in pages:
                if page.strip():
                    count += 1
                    yield page
    if pending.strip():
        count += 1
        yield pending
    logger.debug(f"Read {count} pages from {path}")
