"""
Parsing (catalog text line -> Course).

Each non-blank line of a catalog file describes exactly one course:

    CS200,Data Structures,CS100,MATH201

Rules:
- first field = course number, second field = title
- every further field is a prerequisite course number
- no quoting / escaping: the delimiter can never be part of a field
- bad lines are reported as a Diagnosis, never raised
"""

from __future__ import annotations

from typing import List, Union

from coursecatalog.config import (
    DELIMITER,
    MALFORMED_LINE_MSG,
    MIN_FIELDS,
    MISSING_FIELD_MSG,
    TRIM_CHARS,
)
from coursecatalog.model import Course, Diagnosis, DiagnosisKind

ParseOutcome = Union[Course, Diagnosis, None]


def trim(text: str) -> str:
    return text.strip(TRIM_CHARS)


def split_fields(line: str, delimiter: str = DELIMITER) -> List[str]:
    """
    Split one line on the delimiter and trim every field.

    Empty fields are kept here; dropping them is up to the caller.
    """
    return [trim(part) for part in line.split(delimiter)]


def parse_course_line(
    line: str,
    line_number: int,
    delimiter: str = DELIMITER,
) -> ParseOutcome:
    """
    Parse exactly one catalog line.

    Returns:
    - Course     for a valid record
    - Diagnosis  for a line that must be skipped (malformed / missing field)
    - None       for a blank line (skipped silently, not an error)
    """
    raw = line.rstrip("\r\n")
    text = trim(raw)
    if not text:
        return None

    fields = split_fields(raw, delimiter)
    # A trailing delimiter ends the last field, it does not open an empty one
    if raw.endswith(delimiter):
        fields.pop()

    # We expect at least course number + title
    if len(fields) < MIN_FIELDS:
        return Diagnosis(
            kind=DiagnosisKind.MALFORMED_LINE,
            line_number=line_number,
            raw=raw,
            message=MALFORMED_LINE_MSG.format(line=line_number),
        )

    key, title = fields[0], fields[1]
    if not key or not title:
        return Diagnosis(
            kind=DiagnosisKind.MISSING_REQUIRED_FIELD,
            line_number=line_number,
            raw=raw,
            message=MISSING_FIELD_MSG.format(line=line_number),
        )

    # Trailing commas and ",," gaps do not create empty prerequisites
    prerequisites = [f for f in fields[MIN_FIELDS:] if f]

    return Course(key=key, title=title, prerequisites=prerequisites)
