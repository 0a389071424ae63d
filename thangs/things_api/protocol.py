"""Literal fragments of the text protocol spoken with Things 3.

The AppleScript generated in :mod:`script_builder` prints these tokens and
:mod:`response_parser` reads them back. Keep both sides pointed at this
module; nothing else should spell a sentinel out by hand.
"""
from typing import Dict, Final, Tuple

# Built-in list views, keyed by the lower-cased ``--list`` value.
LIST_VIEWS: Final[Dict[str, str]] = {
    "today": "Today",
    "upcoming": "Upcoming",
    "anytime": "Anytime",
    "someday": "Someday",
}

# Task list records
KEY_ID: Final = "ID"
KEY_NAME: Final = "NAME"
KEY_STATUS: Final = "STATUS"
KEY_NOTES: Final = "NOTES"
KEY_PROJECT: Final = "PROJECT"
KEY_AREA: Final = "AREA"
KEY_DUE: Final = "DUE"
KEY_TAGS: Final = "TAGS"

RECORD_END: Final = "TASK_END"
FIELD_SEP: Final = "||"
CANDIDATE_FIELD_SEP: Final = "|"
KEY_VALUE_SEP: Final = ":"
TAG_SEP: Final = ","

# Single-entity results
NOT_FOUND: Final = "NOT_FOUND:"
MULTIPLE: Final = "MULTIPLE:"
ALREADY_COMPLETED: Final = "ALREADY_COMPLETED:"
ALREADY_CANCELED: Final = "ALREADY_CANCELED:"
COMPLETED: Final = "COMPLETED:"
CANCELED: Final = "CANCELED:"
FOUND: Final = "FOUND:"

# Checked in this order; a sentinel must never be a prefix of one listed after it.
SINGLE_RESULT_SENTINELS: Final[Tuple[str, ...]] = (
    NOT_FOUND,
    MULTIPLE,
    ALREADY_COMPLETED,
    ALREADY_CANCELED,
    COMPLETED,
    CANCELED,
    FOUND,
)

# Raised from inside mutation scripts when a nested lookup fails.
PROJECT_NOT_FOUND: Final = "PROJECT_NOT_FOUND:"
AREA_NOT_FOUND: Final = "AREA_NOT_FOUND:"

EMBEDDED_ERROR_TAGS: Final[Dict[str, str]] = {
    PROJECT_NOT_FOUND: "project",
    AREA_NOT_FOUND: "area",
}

# osascript error text meaning the application itself could not be reached.
NOT_ACCESSIBLE_MARKERS: Final[Tuple[str, ...]] = (
    "application isn't running",
    "application is not running",
    "Can't get application",
    "not found",
)
