"""
Configuration constants for the course catalog.

All file-format details and user-facing texts live here so that the
parser, the CLI and the interactive menu print exactly the same messages.
"""

from __future__ import annotations

import logging

# =============================================================================
# FILE FORMAT
# =============================================================================

# One record per line: key,title[,prereq]*
# There is no quoting, so a comma inside a title cannot be represented.
DELIMITER = ","

# Characters stripped from the whole line and from every field
TRIM_CHARS = " \t\r\n"

# Minimum number of fields per record (key + title)
MIN_FIELDS = 2

DEFAULT_ENCODING = "utf-8"


# =============================================================================
# LOGGING
# =============================================================================

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
DEFAULT_LOG_LEVEL = logging.WARNING


# =============================================================================
# USER-FACING MESSAGES
# =============================================================================

NO_COURSES_MSG = "No courses loaded."
NO_PREREQS_MSG = "Prerequisites: None"
PREREQS_HEADER = "Prerequisites:"
PREREQ_MISSING_SUFFIX = "(course not found in data)"

MALFORMED_LINE_MSG = "File format error on line {line}: fewer than two fields."
OFFENDING_LINE_MSG = "Offending line: {raw}"
MISSING_FIELD_MSG = "File format warning on line {line}: missing course number or title."
SOURCE_UNAVAILABLE_MSG = "Error opening file: {source}"
LOAD_SUCCESS_MSG = "Courses successfully loaded from file: {source}"


# =============================================================================
# INTERACTIVE MENU
# =============================================================================

APP_TITLE = "Welcome to the ABCU Course Planner"

CHOICE_LOAD = "1"
CHOICE_LIST = "2"
CHOICE_SHOW = "3"
CHOICE_EXIT = "9"

MENU_ITEMS = (
    (CHOICE_LOAD, "Load Data Structure"),
    (CHOICE_LIST, "Print Course List"),
    (CHOICE_SHOW, "Print Course"),
    (CHOICE_EXIT, "Exit"),
)

NOT_LOADED_MSG = "Please load the data structure first (option 1)."
INVALID_CHOICE_MSG = "Invalid choice. Please enter 1, 2, 3, or 9."
GOODBYE_MSG = "Thank you for using the ABCU Course Planner. Goodbye!"
