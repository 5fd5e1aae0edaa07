"""Accumulators for test outcomes recorded during a conformance run."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Tuple, Union

from .models import OutcomeRecord
from .logging_config import get_logger

logger = get_logger(__name__)

Outcome = Union[OutcomeRecord, Mapping[str, Any]]


class OutcomeCollector:
    """Ordered accumulator of outcome records."""

    def __init__(self):
        self._records: List[OutcomeRecord] = []

    def record(self, outcome: Outcome) -> OutcomeRecord:
        """Append an outcome; no validation is done."""
        record = OutcomeRecord.from_dict(outcome)
        self._records.append(record)
        return record

    def is_empty(self) -> bool:
        return not self._records

    def all(self) -> Tuple[OutcomeRecord, ...]:
        return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)


class FailureCollector(OutcomeCollector):
    """Failed test cases: value mismatches and diagnostic-format mismatches."""


class SkipCollector(OutcomeCollector):
    """Skipped test cases."""


class ErrorKindCollector:
    """Error-kind verification outcomes, grouped by source file name.

    Groups keep the order in which their file name was first recorded and
    records keep their append order within a group.
    """

    def __init__(self):
        self._groups: Dict[str, List[OutcomeRecord]] = {}

    def record(self, outcome: Outcome) -> OutcomeRecord:
        """
        Append an outcome to the group of its file name.

        Raises:
            ValueError: If the outcome carries no file name
        """
        record = OutcomeRecord.from_dict(outcome)
        if not record.file_name:
            raise ValueError("Error-kind outcome has no file name")
        if record.file_name not in self._groups:
            logger.debug(f"New error-kind group: {record.file_name}")
        self._groups.setdefault(record.file_name, []).append(record)
        return record

    def is_empty(self) -> bool:
        return not self._groups

    def groups(self) -> List[Tuple[str, Tuple[OutcomeRecord, ...]]]:
        """(file name, records) pairs in first-seen order."""
        return [(name, tuple(records)) for name, records in self._groups.items()]

    def all(self) -> Tuple[OutcomeRecord, ...]:
        return tuple(record for records in self._groups.values() for record in records)

    def __len__(self) -> int:
        return sum(len(records) for records in self._groups.values())


@dataclass
class OutcomeCollectors:
    """The collectors owned by one test run."""
    failures: FailureCollector = field(default_factory=FailureCollector)
    skips: SkipCollector = field(default_factory=SkipCollector)
    error_kinds: ErrorKindCollector = field(default_factory=ErrorKindCollector)

    def is_empty(self) -> bool:
        return self.failures.is_empty() and self.skips.is_empty() and self.error_kinds.is_empty()
