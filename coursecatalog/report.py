"""
Text output for the two catalog queries.

Both the CLI and the interactive menu print these lines, so the wording
(and the "course not found in data" fallback) is defined in one place.
"""

from __future__ import annotations

from typing import Optional

from coursecatalog.config import (
    MALFORMED_LINE_MSG,
    MISSING_FIELD_MSG,
    NO_COURSES_MSG,
    NO_PREREQS_MSG,
    OFFENDING_LINE_MSG,
    PREREQ_MISSING_SUFFIX,
    PREREQS_HEADER,
    SOURCE_UNAVAILABLE_MSG,
)
from coursecatalog.index import CourseIndex, normalize_key
from coursecatalog.model import Course, Diagnosis, DiagnosisKind


def course_line(course: Course) -> str:
    return f"{course.key}, {course.title}"


def format_course_list(index: CourseIndex) -> list[str]:
    """
    One "KEY, Title" line per course, in ascending key order.
    """
    lines = [course_line(c) for c in index.iter_ordered()]
    return lines or [NO_COURSES_MSG]


def resolve_prerequisites(index: CourseIndex, course: Course) -> list[tuple[str, Optional[Course]]]:
    """
    Pair every prerequisite key (normalized) with its Course, or None if it is not loaded.
    """
    out: list[tuple[str, Optional[Course]]] = []
    for raw_key in course.prerequisites:
        key = normalize_key(raw_key)
        out.append((key, index.lookup(key)))
    return out


def format_course_detail(index: CourseIndex, key: str) -> list[str]:
    """
    Detail view of one course: title line, then its prerequisites.
    """
    search_key = normalize_key(key)
    course = index.lookup(search_key)
    if course is None:
        return [f"Course {search_key} not found."]

    lines = [course_line(course)]
    if not course.prerequisites:
        lines.append(NO_PREREQS_MSG)
        return lines

    lines.append(PREREQS_HEADER)
    for prereq_key, prereq in resolve_prerequisites(index, course):
        if prereq is not None:
            lines.append(f"  {course_line(prereq)}")
        else:
            lines.append(f"  {prereq_key} {PREREQ_MISSING_SUFFIX}")
    return lines


def format_diagnosis(diag: Diagnosis) -> str:
    if diag.kind is DiagnosisKind.MALFORMED_LINE:
        return "\n".join(
            [
                MALFORMED_LINE_MSG.format(line=diag.line_number),
                OFFENDING_LINE_MSG.format(raw=diag.raw),
            ]
        )
    if diag.kind is DiagnosisKind.MISSING_REQUIRED_FIELD:
        return MISSING_FIELD_MSG.format(line=diag.line_number)
    return SOURCE_UNAVAILABLE_MSG.format(source=diag.raw)
