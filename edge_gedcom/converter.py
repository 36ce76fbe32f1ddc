"""
converter.py - Runs a complete Family Edge to GEDCOM conversion.

Reads every family page, then every person page, assembles the genealogy
and renders HEAD, SUBM, INDI, FAM, SOUR and TRLR records. The whole output is
built in memory before anything is written, so a ParseError or
CrossReferenceError leaves no partial GEDCOM behind.

Usage:
    converter = EdgeConverter(ConverterConfig())
    text = converter.convert(Path('person.doc'), Path('family.doc'))
"""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, TextIO, Union

from .app_hooks import AppHooks
from .assembler import Genealogy, GenealogyAssembler
from .config import ConverterConfig
from .family_parser import FamilyPageParser
from .gedcom_writer import GedcomWriter
from .issues import IssueLog
from .page import iter_pages
from .person_parser import PersonPageParser
from .source_store import CitationStore
from .tree_builder import GedcomTreeBuilder

logger = logging.getLogger(__name__)

class EdgeConverter:
    """
    Converts a pair of Family Edge report files to GEDCOM text.

    Attributes:
        config (ConverterConfig): Conversion settings.
        app_hooks (Optional[AppHooks]): Optional progress hooks.
        issues (IssueLog): Warnings recorded during the last run.
        genealogy (Optional[Genealogy]): People and families of the last run.
    """
    __slots__ = ['config', 'app_hooks', 'issues', 'genealogy']

    def __init__(self, config: Optional[ConverterConfig] = None, app_hooks: Optional[AppHooks] = None) -> None:
        self.config = config if config is not None else ConverterConfig()
        self.app_hooks = app_hooks
        self.issues = IssueLog()
        self.genealogy: Optional[Genealogy] = None

    def _report_step(self, info: str = "", target: Optional[int] = None, reset_counter: bool = False, plus_step: int = 0) -> None:
        """
        Report a step via app hooks if available. (Private method)

        Args:
            info (str): Information message.
            target (int): Target count for progress.
            reset_counter (bool): Whether to reset the counter.
            plus_step (int): Incremental step count.
        """
        if self.app_hooks and callable(getattr(self.app_hooks, "report_step", None)):
            self.app_hooks.report_step(info=info, target=target, reset_counter=reset_counter, plus_step=plus_step)
        elif info:
            logger.info(info)

    def _update_key_value(self, key: str, value) -> None:
        if self.app_hooks and callable(getattr(self.app_hooks, "update_key_value", None)):
            self.app_hooks.update_key_value(key, value)

    def read(self, person_path: Union[str, Path], family_path: Union[str, Path]) -> Genealogy:
        """
        Parse both report files and assemble the genealogy.

        Raises:
            ParseError: If a page does not have the expected shape.
            CrossReferenceError: If a person links to a family missing from the family report.
        """
        self.issues = IssueLog()
        assembler = GenealogyAssembler(self.issues)
        encoding = self.config.input_encoding

        self._report_step(f"Reading families from {family_path}", reset_counter=True)
        for page in iter_pages(family_path, encoding=encoding):
            assembler.add_family(FamilyPageParser(page, self.issues).get_record())
            self._report_step(plus_step=1)
        self._update_key_value('families', len(assembler.families))

        self._report_step(f"Reading people from {person_path}", reset_counter=True)
        for page in iter_pages(person_path, encoding=encoding):
            assembler.add_person(PersonPageParser(page, self.issues).get_record())
            self._report_step(plus_step=1)
        self._update_key_value('people', len(assembler.persons))

        self.genealogy = assembler.assemble()
        return self.genealogy

    def convert(self, person_path: Union[str, Path], family_path: Union[str, Path],
                now: Optional[datetime] = None) -> str:
        """
        Convert the two report files to GEDCOM text.

        Args:
            person_path: Person report file.
            family_path: Family report file.
            now (Optional[datetime]): Export time for the header; defaults to the current UTC time.

        Returns:
            str: The complete GEDCOM file contents.
        """
        genealogy = self.read(person_path, family_path)
        citations = CitationStore()
        builder = GedcomTreeBuilder(citations, self.config, self.issues)

        records = [builder.header_tree(now or datetime.now(timezone.utc))]
        submitter = builder.submitter_tree()
        if submitter is not None:
            records.append(submitter)

        self._report_step("Building GEDCOM records", target=len(genealogy.persons) + len(genealogy.families),
                          reset_counter=True)
        for person in genealogy.iter_persons():
            records.append(builder.person_tree(person))
            self._report_step(plus_step=1)
        for family in genealogy.iter_families():
            records.append(builder.family_tree(family))
            self._report_step(plus_step=1)
        records.extend(citations.get_all_records())
        records.append(builder.trailer_tree())
        self._update_key_value('sources', len(citations))

        text = GedcomWriter(self.config).render(records)
        logger.info(f"Converted {len(genealogy.persons)} people, {len(genealogy.families)} families "
                    f"and {len(citations)} sources; {self.issues.summary()}")
        return text

    def write(self, person_path: Union[str, Path], family_path: Union[str, Path], out: TextIO,
              now: Optional[datetime] = None) -> None:
        """
        Convert and write the GEDCOM text to an open text stream.
        """
        out.write(self.convert(person_path, family_path, now=now))
