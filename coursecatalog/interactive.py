"""
Interactive menu.

The numbered menu of the course planner:

    1. Load Data Structure
    2. Print Course List
    3. Print Course
    9. Exit

Note:
- Courses can only be listed or shown after a successful load
- A failed load marks the session as not loaded again
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from coursecatalog.config import (
    APP_TITLE,
    CHOICE_EXIT,
    CHOICE_LIST,
    CHOICE_LOAD,
    CHOICE_SHOW,
    DEFAULT_ENCODING,
    GOODBYE_MSG,
    INVALID_CHOICE_MSG,
    LOAD_SUCCESS_MSG,
    MENU_ITEMS,
    NO_COURSES_MSG,
    NOT_LOADED_MSG,
)
from coursecatalog.index import CourseIndex
from coursecatalog.loader import load_catalog_file
from coursecatalog.model import DiagnosisKind
from coursecatalog.report import format_course_detail, format_diagnosis

logger = logging.getLogger(__name__)

console = Console()


@dataclass
class Session:
    index: CourseIndex = field(default_factory=CourseIndex)
    loaded: bool = False
    source: Optional[str] = None
    encoding: str = DEFAULT_ENCODING


def _println(msg: str = "", style: Optional[str] = None) -> None:
    # Course data may contain "[...]", which rich would read as markup
    console.print(msg, style=style, markup=False, highlight=False)


def _prompt(msg: str) -> str:
    return console.input(msg)


def _print_menu() -> None:
    _println()
    _println("*" * 31)
    _println(APP_TITLE, style="bold")
    _println("*" * 31)
    for choice, label in MENU_ITEMS:
        _println(f"{choice}. {label}")


def run_interactive(
    initial_file: Optional[str] = None,
    encoding: str = DEFAULT_ENCODING,
    session: Optional[Session] = None,
) -> Session:
    """
    Numbered menu loop: load a catalog, list courses, show one course.

    Returns the session so callers (and tests) can inspect the final state.
    """
    session = session or Session(encoding=encoding)

    if initial_file:
        _load_into_session(session, initial_file)

    while True:
        _print_menu()
        try:
            choice = _prompt("Please enter your choice: ").strip()
        except (EOFError, KeyboardInterrupt):
            choice = CHOICE_EXIT

        if choice == CHOICE_EXIT:
            _println(GOODBYE_MSG)
            return session

        if choice == CHOICE_LOAD:
            _flow_load(session)
        elif choice == CHOICE_LIST:
            _flow_list(session)
        elif choice == CHOICE_SHOW:
            _flow_show(session)
        else:
            _println(INVALID_CHOICE_MSG)


def _load_into_session(session: Session, file_name: str) -> bool:
    result = load_catalog_file(file_name, session.index, encoding=session.encoding)

    for diag in result.diagnoses:
        style = "red" if diag.kind is DiagnosisKind.SOURCE_UNAVAILABLE else "yellow"
        _println(format_diagnosis(diag), style=style)

    if not result.ok:
        # Previous data stays in the index but may not be queried until a load succeeds
        session.loaded = False
        session.source = None
        return False

    session.loaded = True
    session.source = result.source
    _println(LOAD_SUCCESS_MSG.format(source=file_name), style="green")
    logger.debug("session now holds %d courses", len(session.index))
    return True


def _flow_load(session: Session) -> None:
    file_name = _prompt("Enter course data file name: ").strip()
    if not file_name:
        _println("File name cannot be empty.")
        return
    _load_into_session(session, file_name)


def _flow_list(session: Session) -> None:
    if not session.loaded:
        _println(NOT_LOADED_MSG)
        return

    _println()
    _println("Here is the list of courses:")
    if not session.index:
        _println(NO_COURSES_MSG)
        return

    table = Table(box=box.SIMPLE, show_header=True)
    table.add_column("Course", style="bold cyan", no_wrap=True)
    table.add_column("Title")
    for course in session.index.iter_ordered():
        table.add_row(Text(course.key), Text(course.title))
    console.print(table)


def _flow_show(session: Session) -> None:
    if not session.loaded:
        _println(NOT_LOADED_MSG)
        return

    key = _prompt("Please enter the course number (for example, CS200): ").strip()
    if not key:
        _println("Course number cannot be empty.")
        return

    _println()
    for line in format_course_detail(session.index, key):
        _println(line)
