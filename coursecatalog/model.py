"""
Central data model definitions used across the project.

This module defines the canonical structure of Course, Diagnosis and
LoadResult objects so that:
- parser, loader, index and UI layers share the same field names
- per-line problems are reported as data instead of exceptions
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


@dataclass
class Course:
    """
    Represents one course record as read from the catalog file.

    key           -> course number as written in the file (e.g. "CS101")
    title         -> course title
    prerequisites -> prerequisite course numbers, in file order
    """

    key: str
    title: str
    prerequisites: List[str] = field(default_factory=list)


class DiagnosisKind(str, Enum):
    MALFORMED_LINE = "malformed_line"
    MISSING_REQUIRED_FIELD = "missing_required_field"
    SOURCE_UNAVAILABLE = "source_unavailable"


@dataclass
class Diagnosis:
    """
    One problem found while loading a catalog.

    A diagnosis never stops a load. line_number is 1-based;
    it is 0 for problems that concern the whole source.
    """

    kind: DiagnosisKind
    line_number: int
    raw: str
    message: str = ""


@dataclass
class LoadResult:
    loaded: int = 0
    diagnoses: List[Diagnosis] = field(default_factory=list)
    ok: bool = True
    source: Optional[str] = None
    skipped_blank: int = 0

    @property
    def has_problems(self) -> bool:
        return bool(self.diagnoses)
