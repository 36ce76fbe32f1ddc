"""
issues.py - Data-consistency issues found during a conversion run.

Issues are problems that do not stop the run (a blank child row, a child
marked with uncertain parentage, a field with no GEDCOM mapping, conflicting
sex information). Each one is logged when it is recorded and the log keeps
them so that a summary can be given at the end of the run.
"""

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Literal, Optional, Tuple

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class Issue:
    issue_type: str
    severity: Literal["info", "warning"]
    message: str
    person_id: Optional[int] = None
    related_ids: Tuple[int, ...] = ()

class IssueLog:
    """
    Collects issues for one conversion run.

    Attributes:
        issues (List[Issue]): Issues in the order they were recorded.
    """
    __slots__ = ['issues']

    def __init__(self) -> None:
        self.issues: List[Issue] = []

    def add(self, issue_type: str, message: str, person_id: Optional[int] = None,
            related_ids: Tuple[int, ...] = (), severity: str = "warning") -> Issue:
        """
        Record an issue and log it.

        Args:
            issue_type (str): Short machine-readable category, e.g. 'blank_child_row'.
            message (str): Human readable description.
            person_id (Optional[int]): Person the issue is about, if any.
            related_ids (Tuple[int, ...]): Other person ids involved.
            severity (str): 'warning' or 'info'.

        Returns:
            Issue: The recorded issue.
        """
        issue = Issue(issue_type=issue_type, severity=severity, message=message,
                      person_id=person_id, related_ids=tuple(related_ids))
        self.issues.append(issue)
        if severity == "warning":
            logger.warning(message)
        else:
            logger.info(message)
        return issue

    @property
    def warning_count(self) -> int:
        return sum(1 for issue in self.issues if issue.severity == "warning")

    def counts_by_type(self) -> Dict[str, int]:
        return dict(Counter(issue.issue_type for issue in self.issues))

    def summary(self) -> str:
        """
        One line summary of the issues recorded so far.
        """
        if not self.issues:
            return "No warnings"
        by_type = ", ".join(f"{name}: {count}" for name, count in sorted(self.counts_by_type().items()))
        return f"{self.warning_count} warnings ({by_type})"

    def __len__(self) -> int:
        return len(self.issues)

    def __iter__(self):
        return iter(self.issues)
