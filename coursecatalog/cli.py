"""
CLI (Command Line Interface).

This module provides quick terminal commands for scripting and testing, e.g.:

    coursecatalog list <file.csv>
    coursecatalog show <file.csv> <course_number>
    coursecatalog check <file.csv>
    coursecatalog interactive [file.csv]

Note:
- The interactive menu lives in coursecatalog/interactive.py
- This CLI is intentionally simple and prints plain text (no rich formatting)
"""

from __future__ import annotations

import argparse
import logging

from coursecatalog.config import DEFAULT_ENCODING, DEFAULT_LOG_LEVEL, LOG_FORMAT
from coursecatalog.index import CourseIndex
from coursecatalog.loader import load_catalog_file
from coursecatalog.model import LoadResult
from coursecatalog.report import format_course_detail, format_course_list, format_diagnosis


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else DEFAULT_LOG_LEVEL,
        format=LOG_FORMAT,
    )


def _load(args: argparse.Namespace, index: CourseIndex) -> LoadResult:
    """
    Load the catalog file given on the command line into `index`.
    Prints the error message if the file cannot be read.
    """
    result = load_catalog_file(args.file, index, encoding=args.encoding)
    if not result.ok:
        for diag in result.diagnoses:
            print(format_diagnosis(diag))
    return result


def _cmd_list(args: argparse.Namespace) -> int:
    """
    Print all courses in alphanumeric order.
    """
    index = CourseIndex()
    if not _load(args, index).ok:
        return 1

    for line in format_course_list(index):
        print(line)
    return 0


def _cmd_show(args: argparse.Namespace) -> int:
    """
    Print one course with its prerequisites.
    """
    key = (args.course or "").strip()
    if not key:
        print("Please provide a course number.")
        return 1

    index = CourseIndex()
    if not _load(args, index).ok:
        return 1

    for line in format_course_detail(index, key):
        print(line)
    return 0 if key in index else 1


def _cmd_check(args: argparse.Namespace) -> int:
    """
    Validate a catalog file and print every problem line.
    """
    index = CourseIndex()
    result = _load(args, index)
    if not result.ok:
        return 1

    for diag in result.diagnoses:
        print(format_diagnosis(diag))

    print(f"{len(index)} courses, {len(result.diagnoses)} problem line(s) in {result.source}")
    return 1 if result.has_problems else 0


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.
    """
    parser = argparse.ArgumentParser(prog="coursecatalog", description="Course catalog CLI")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--encoding", default=DEFAULT_ENCODING, help="Catalog file encoding")
    sub = parser.add_subparsers(dest="command", required=True)

    p_list = sub.add_parser("list", help="Print the sorted course list")
    p_list.add_argument("file", type=str, help="Catalog file (e.g. courses.csv)")

    p_show = sub.add_parser("show", help="Print one course and its prerequisites")
    p_show.add_argument("file", type=str, help="Catalog file (e.g. courses.csv)")
    p_show.add_argument("course", type=str, help="Course number (e.g. CS200)")

    p_check = sub.add_parser("check", help="Report malformed lines in a catalog file")
    p_check.add_argument("file", type=str, help="Catalog file (e.g. courses.csv)")

    p_inter = sub.add_parser("interactive", help="Interactive menu mode")
    p_inter.add_argument("file", type=str, nargs="?", default=None, help="Catalog file to load at start")

    return parser


def main(argv: list[str] | None = None) -> None:
    """
    CLI entry point. Parses args, dispatches to command handlers,
    and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    if args.command == "list":
        raise SystemExit(_cmd_list(args))
    if args.command == "show":
        raise SystemExit(_cmd_show(args))
    if args.command == "check":
        raise SystemExit(_cmd_check(args))

    if args.command == "interactive":
        from coursecatalog.interactive import run_interactive

        run_interactive(initial_file=args.file, encoding=args.encoding)
        raise SystemExit(0)

    raise SystemExit(2)
