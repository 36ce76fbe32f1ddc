"""edge_gedcom package: Converts Family Edge person and family reports to GEDCOM 5.5.1."""

from edge_gedcom.assembler import Genealogy, GenealogyAssembler
from edge_gedcom.config import ConverterConfig
from edge_gedcom.converter import EdgeConverter
from edge_gedcom.errors import CrossReferenceError, ParseError
from edge_gedcom.family import ChildEntry, Family
from edge_gedcom.family_key import family_key
from edge_gedcom.family_parser import FamilyPageParser
from edge_gedcom.gedcom_check import CheckReport, GedcomChecker
from edge_gedcom.gedcom_date import GedcomDate
from edge_gedcom.gedcom_node import GedcomNode
from edge_gedcom.gedcom_writer import GedcomWriter
from edge_gedcom.issues import Issue, IssueLog
from edge_gedcom.life_event import LifeEvent
from edge_gedcom.marriage import Marriage
from edge_gedcom.person import ParentSet, Person
from edge_gedcom.person_parser import PersonPageParser
from edge_gedcom.source_store import CitationStore
from edge_gedcom.tree_builder import GedcomTreeBuilder

__all__ = [
    "CheckReport",
    "ChildEntry",
    "CitationStore",
    "ConverterConfig",
    "CrossReferenceError",
    "EdgeConverter",
    "Family",
    "FamilyPageParser",
    "GedcomChecker",
    "GedcomDate",
    "GedcomNode",
    "GedcomTreeBuilder",
    "GedcomWriter",
    "Genealogy",
    "GenealogyAssembler",
    "Issue",
    "IssueLog",
    "LifeEvent",
    "Marriage",
    "ParentSet",
    "ParseError",
    "Person",
    "PersonPageParser",
    "family_key",
]
