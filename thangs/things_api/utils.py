"""Utility functions for the Things 3 API layer."""
import re
from datetime import datetime
from typing import List, Optional

import dateparser
from dateutil import parser as date_parser

_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def escape_applescript_string(text: Optional[str]) -> str:
    """Escape special characters for AppleScript strings.

    Order matters: backslashes first so the escapes added for quotes and
    line breaks are not escaped a second time.
    """
    if not text:
        return ""
    return (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
    )


def is_valid_date_format(date_str: Optional[str]) -> bool:
    """True for a real calendar date written as YYYY-MM-DD."""
    if not date_str or not _ISO_DATE_RE.match(date_str):
        return False
    try:
        datetime.strptime(date_str, "%Y-%m-%d")
    except ValueError:
        return False
    return True


def to_applescript_date(date_str: str) -> str:
    """Convert 'YYYY-MM-DD' to AppleScript's expected date format."""
    dt = datetime.strptime(date_str, "%Y-%m-%d")
    # Format: 'Wednesday, December 31, 2025 at 12:00:00 AM'
    return dt.strftime("%A, %B %d, %Y at %I:%M:%S %p")


def normalize_due_date(value: str) -> str:
    """
    Normalize a date as printed by AppleScript to YYYY-MM-DD.

    AppleScript coerces dates with the user's locale, typically
    "Monday, December 9, 2025 at 12:00:00 AM". Anything we cannot read is
    returned unchanged.
    """
    text = value.strip()
    if is_valid_date_format(text):
        return text
    try:
        return date_parser.parse(text.replace(" at ", " ")).strftime("%Y-%m-%d")
    except (ValueError, OverflowError):
        pass
    parsed = dateparser.parse(text)
    if parsed:
        return parsed.strftime("%Y-%m-%d")
    return value


def split_tags(tags_str: Optional[str]) -> List[str]:
    """Split a comma-separated tag string, dropping blank entries."""
    if not tags_str:
        return []
    return [tag.strip() for tag in tags_str.split(",") if tag.strip()]
