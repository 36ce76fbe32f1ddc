"""
gedcom_check.py - Checks a written GEDCOM file.

Re-reads the file with ged4py to count its records, and scans its lines for
lines over the length limit and for pointers to records that do not exist.
"""

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Tuple, Union

from ged4py.parser import GedcomReader

logger = logging.getLogger(__name__)

RECORD_RE = re.compile(r'^0 (@[^@]+@) ')
REFERENCE_RE = re.compile(r'^\d+ [A-Z_]+ (@[^@#][^@]*@)$')

@dataclass
class CheckReport:
    """
    Result of a GEDCOM check.

    Attributes:
        counts (Dict[str, int]): Number of INDI, FAM and SOUR records.
        long_lines (List[Tuple[int, str]]): (line number, line) of each line over the limit.
        dangling_pointers (List[Tuple[int, str]]): (line number, pointer) of each reference to a missing record.
    """
    counts: Dict[str, int] = field(default_factory=dict)
    long_lines: List[Tuple[int, str]] = field(default_factory=list)
    dangling_pointers: List[Tuple[int, str]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.long_lines and not self.dangling_pointers

class GedcomChecker:
    """
    Checks line lengths, pointer integrity and record counts of a GEDCOM file.

    Attributes:
        path (Path): GEDCOM file to check.
        max_line_length (int): Longest allowed line.
    """
    __slots__ = ['path', 'max_line_length']

    RECORD_TAGS = ('INDI', 'FAM', 'SOUR')

    def __init__(self, path: Union[str, Path], max_line_length: int = 80):
        self.path = Path(path)
        self.max_line_length = max_line_length

    def check(self) -> CheckReport:
        report = CheckReport()
        with GedcomReader(str(self.path)) as reader:
            for tag in self.RECORD_TAGS:
                report.counts[tag] = sum(1 for _ in reader.records0(tag))

        defined = set()
        references: List[Tuple[int, str]] = []
        with open(self.path, 'r', encoding='utf-8') as f:
            for number, line in enumerate(f, start=1):
                line = line.rstrip('\r\n')
                if len(line) > self.max_line_length:
                    report.long_lines.append((number, line))
                m = RECORD_RE.match(line)
                if m:
                    defined.add(m.group(1))
                    continue
                m = REFERENCE_RE.match(line)
                if m:
                    references.append((number, m.group(1)))
        report.dangling_pointers = [(number, pointer) for number, pointer in references if pointer not in defined]

        for number, line in report.long_lines:
            logger.warning(f"{self.path}:{number}: line longer than {self.max_line_length} characters")
        for number, pointer in report.dangling_pointers:
            logger.warning(f"{self.path}:{number}: pointer {pointer} has no record")
        logger.info(f"Checked {self.path}: " + ", ".join(f"{count} {tag}" for tag, count in report.counts.items()))
        return report
