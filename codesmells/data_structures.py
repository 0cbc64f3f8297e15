"""
Data structures for analysis results.

Findings are immutable. A FileRecord is frozen once the single
analysis pass over its tree has finished.
"""
from dataclasses import dataclass, field
from enum import Enum
from pathlib import PurePath
from typing import Tuple


class SmellKind(Enum):
    LONG_PARAM_LIST = "LongParamList"
    LONG_METHOD     = "LongMethod"
    MAGIC_ATTRIBUTE = "MagicAttribute"
    DATA_CLASS      = "DataClass"


# Sentinel line for whole-method / whole-class findings
UNLOCATED = 0


@dataclass(frozen=True)
class Finding:
    """A single smell occurrence in a file."""

    kind: SmellKind
    line: int  # 1-based, UNLOCATED when the smell has no single line

    @property
    def is_located(self) -> bool:
        return self.line != UNLOCATED


@dataclass(frozen=True, order=True)
class FileRecord:
    """
    Analysis result for one source file.

    Records compare and sort by path only.
    """

    path: str
    name: str = field(default="", compare=False)
    findings: Tuple[Finding, ...] = field(default=(), compare=False)

    @property
    def file_name(self) -> str:
        """Base name of the source file."""
        return PurePath(self.path).name

    @property
    def total_smell_count(self) -> int:
        return len(self.findings)

    def count_by_kind(self, kind: SmellKind) -> int:
        """Count findings of one smell kind."""
        return sum(1 for finding in self.findings if finding.kind == kind)

    def __str__(self) -> str:
        return f"{self.file_name}: {self.total_smell_count} smells."
