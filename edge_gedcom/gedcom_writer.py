"""
gedcom_writer.py - Serializes GEDCOM node trees to text.

The writer prepares each record with a series of passes, each returning a
new tree:

    - transliterate payloads to ASCII (only with charset ASCII, uses unidecode)
    - normalise whitespace (runs of blanks become one space, newlines are kept)
    - turn a trailing "[NOTE: ...]" annotation into a NOTE child
    - Ancestry.com flavour (only when configured): move the first NOTE of an
      event with an empty payload into the payload
    - fold long payloads into CONC children and embedded newlines into CONT
      children, so that no line is longer than max_line_length

and then emits one "level [@pointer@] TAG [payload]" line per node, depth first.

Usage:
    writer = GedcomWriter(ConverterConfig())
    text = writer.render([head, *records, trailer])
"""

import logging
import re
from typing import Iterable, Iterator, List, Optional

from unidecode import unidecode

from .config import ConverterConfig
from .field_extract import collapse_whitespace
from .gedcom_node import GedcomNode
from .life_event import EVENT_TAGS

logger = logging.getLogger(__name__)

class GedcomWriter:
    """
    GEDCOM serializer.

    Attributes:
        config (ConverterConfig): Supplies max_line_length, charset and ancestry_format.
    """
    __slots__ = ['config']

    NOTE_RE = re.compile(r';? \[NOTE: ([^\]]+)\]$')
    # Tags whose payload is note text already and is never searched for annotations
    TEXT_TAGS = ('NOTE', 'CONC', 'CONT')

    def __init__(self, config: Optional[ConverterConfig] = None):
        self.config = config if config is not None else ConverterConfig()

    # ---------- passes ----------

    def transliterate(self, node: GedcomNode) -> GedcomNode:
        return node.copy(value=unidecode(node.value), children=[self.transliterate(c) for c in node.children])

    def normalize_whitespace(self, node: GedcomNode) -> GedcomNode:
        return node.copy(value=collapse_whitespace(node.value),
                         children=[self.normalize_whitespace(c) for c in node.children])

    def extract_notes(self, node: GedcomNode) -> GedcomNode:
        """
        Move a trailing ";? [NOTE: ...]" annotation of a payload into a NOTE child.
        """
        children = [self.extract_notes(c) for c in node.children]
        value = node.value
        if node.tag not in self.TEXT_TAGS:
            m = self.NOTE_RE.search(value)
            if m:
                value = value[:m.start()].rstrip()
                children.append(GedcomNode('NOTE', m.group(1).strip()))
        return node.copy(value=value, children=children)

    def move_event_notes(self, node: GedcomNode) -> GedcomNode:
        """
        Ancestry.com flavour: an event with an empty payload takes the text of
        its first NOTE child as its payload, and the NOTE child is dropped.
        """
        children = [self.move_event_notes(c) for c in node.children]
        value = node.value
        if node.tag in EVENT_TAGS and not value:
            for index, child in enumerate(children):
                if child.tag == 'NOTE':
                    value = ' '.join(child.value.split())
                    del children[index]
                    break
        return node.copy(value=value, children=children)

    def fold(self, node: GedcomNode, level: int = 0) -> GedcomNode:
        """
        Split payloads that do not fit on one line.

        Newlines in a payload become CONT children; a line longer than the
        room left after level, pointer and tag is cut at the last space that
        fits (the space starts the next piece) into CONC children. A word
        longer than the room is cut where the room runs out. The continuations
        become the first children of the node.
        """
        budget = self.payload_budget(level, node.pointer, node.tag)
        continuation_budget = self.payload_budget(level + 1, None, 'CONC')
        continuations: List[GedcomNode] = []
        value = ''
        for index, line in enumerate(node.value.split('\n')):
            if index == 0:
                pieces = self.split_line(line, budget, continuation_budget)
                value = pieces[0]
            else:
                pieces = self.split_line(line, continuation_budget, continuation_budget)
                continuations.append(GedcomNode('CONT', pieces[0]))
            continuations.extend(GedcomNode('CONC', piece) for piece in pieces[1:])
        children = continuations + [self.fold(c, level + 1) for c in node.children]
        return node.copy(value=value, children=children)

    def payload_budget(self, level: int, pointer: Optional[str], tag: str) -> int:
        used = len(str(level)) + 1 + len(tag) + 1
        if pointer:
            used += len(pointer) + 1
        return max(self.config.max_line_length - used, 1)

    @staticmethod
    def split_line(line: str, first_budget: int, budget: int) -> List[str]:
        pieces = []
        room = first_budget
        while len(line) > room:
            cut = line.rfind(' ', 1, room + 1)
            if cut <= 0:
                cut = room
            pieces.append(line[:cut])
            line = line[cut:]
            room = budget
        pieces.append(line)
        return pieces

    def prepare(self, node: GedcomNode) -> GedcomNode:
        """
        Run all passes over a record.
        """
        if self.config.charset == 'ASCII':
            node = self.transliterate(node)
        node = self.normalize_whitespace(node)
        node = self.extract_notes(node)
        if self.config.ancestry_format:
            node = self.move_event_notes(node)
        return self.fold(node)

    # ---------- output ----------

    def lines(self, node: GedcomNode) -> Iterator[str]:
        """
        Yield the output lines of a record, depth first.
        """
        for level, item in self.prepare(node).walk():
            parts = [str(level)]
            if item.pointer:
                parts.append(item.pointer)
            parts.append(item.tag)
            if item.value:
                parts.append(item.value)
            line = ' '.join(parts)
            if len(line) > self.config.max_line_length:
                logger.warning(f"Line longer than {self.config.max_line_length} characters: {line}")
            yield line

    def render(self, records: Iterable[GedcomNode]) -> str:
        """
        Render records as GEDCOM text, one line per node, with a final newline.
        """
        out = []
        for record in records:
            out.extend(self.lines(record))
        return '\n'.join(out) + '\n'
