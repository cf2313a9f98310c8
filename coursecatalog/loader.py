"""
Catalog loading (lines / file -> CourseIndex).

Loading is a destructive replace: the target index is cleared first and
then filled from the source. A bad line is skipped and reported as a
Diagnosis, so one broken row never aborts the whole load.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

from coursecatalog.config import DEFAULT_ENCODING, DELIMITER, SOURCE_UNAVAILABLE_MSG
from coursecatalog.index import CourseIndex
from coursecatalog.model import Diagnosis, DiagnosisKind, LoadResult
from coursecatalog.parse import parse_course_line

logger = logging.getLogger(__name__)


def load_catalog(
    lines: Iterable[str],
    index: CourseIndex,
    source: Optional[str] = None,
    delimiter: str = DELIMITER,
) -> LoadResult:
    """
    Replace the contents of `index` with the courses parsed from `lines`.

    Line numbers in the returned diagnoses are 1-based positions in `lines`.
    """
    index.clear()
    result = LoadResult(source=source)

    for line_number, line in enumerate(lines, start=1):
        outcome = parse_course_line(line, line_number, delimiter)

        if outcome is None:
            result.skipped_blank += 1
            continue

        if isinstance(outcome, Diagnosis):
            logger.warning("%s (%s)", outcome.message, outcome.raw)
            result.diagnoses.append(outcome)
            continue

        if not index.insert(outcome):
            logger.debug("line %d: course %s updated by later record", line_number, outcome.key)
        result.loaded += 1

    logger.info(
        "loaded %d record(s) into %d course(s) from %s (%d problem line(s))",
        result.loaded,
        len(index),
        source or "<lines>",
        len(result.diagnoses),
    )
    return result


def read_source_lines(path: str | Path, encoding: str = DEFAULT_ENCODING) -> list[str]:
    """
    Read a catalog file into a list of lines (without line endings).

    Raises OSError / UnicodeDecodeError; load_catalog_file() turns those
    into a SOURCE_UNAVAILABLE result.
    """
    with Path(path).open("r", encoding=encoding) as f:
        return [line.rstrip("\r\n") for line in f]


def load_catalog_file(
    path: str | Path,
    index: CourseIndex,
    encoding: str = DEFAULT_ENCODING,
) -> LoadResult:
    """
    Load a catalog file into `index`.

    If the file cannot be opened or decoded, the index is left untouched
    and the result has ok=False with one SOURCE_UNAVAILABLE diagnosis.
    """
    source = str(path)
    try:
        lines = read_source_lines(path, encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("cannot read catalog %s: %s", source, exc)
        diag = Diagnosis(
            kind=DiagnosisKind.SOURCE_UNAVAILABLE,
            line_number=0,
            raw=source,
            message=SOURCE_UNAVAILABLE_MSG.format(source=source),
        )
        return LoadResult(ok=False, source=source, diagnoses=[diag])

    return load_catalog(lines, index, source=source)
