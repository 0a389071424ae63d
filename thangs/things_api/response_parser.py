"""Parsing of the text Things 3 prints back through AppleScript.

Two shapes come back:

* task lists, ``KEY:value||KEY:value||TASK_END`` followed by a line break,
  one record per to do;
* single-entity results, one sentinel-prefixed line such as
  ``COMPLETED:Buy milk`` or ``MULTIPLE:ID:1|NAME:...||ID:2|...||``.

Single results go through a small state machine (expect a sentinel,
dispatch on it, parse the body) so the set of accepted replies is exactly
the sentinel table in :mod:`.protocol`.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from ..utils.logger import get_logger
from . import protocol
from .data_models import TaskCandidate, TaskStatus, Things3Task
from .errors import AppleScriptExecutionError
from .utils import normalize_due_date

log = get_logger(__name__)

# stdout is stripped, so the final record may end without its line break.
_RECORD_SPLIT_RE = re.compile(re.escape(protocol.RECORD_END) + r"(?:\r?\n|$)")

_EMBEDDED_ERROR_RE = re.compile(
    "(" + "|".join(re.escape(tag) for tag in protocol.EMBEDDED_ERROR_TAGS) + r")(.*?)(?:\s*\(-?\d+\))?\s*$",
    re.MULTILINE,
)


@dataclass
class SingleResult:
    """A decoded single-entity reply."""

    sentinel: str
    value: str = ""
    candidates: List[TaskCandidate] = field(default_factory=list)


def _split_key_value(text: str) -> Optional[Tuple[str, str]]:
    key, sep, value = text.partition(protocol.KEY_VALUE_SEP)
    if not sep:
        return None
    return key.strip(), value


def _parse_status(value: str) -> TaskStatus:
    try:
        return TaskStatus(value.lower())
    except ValueError:
        log.debug("Unknown task status %r, treating as open", value)
        return TaskStatus.open


def _parse_fields(record: str) -> Dict[str, str]:
    fields: Dict[str, str] = {}
    for raw_field in record.split(protocol.FIELD_SEP):
        pair = _split_key_value(raw_field)
        if pair is None:
            continue
        key, value = pair
        value = value.strip()
        if value:
            fields[key] = value
    return fields


def _parse_task_record(record: str) -> Optional[Things3Task]:
    fields = _parse_fields(record)
    task_id = fields.get(protocol.KEY_ID)
    name = fields.get(protocol.KEY_NAME)
    if not task_id or not name:
        log.debug("Dropping incomplete task record: %r", record)
        return None

    task = Things3Task(id=task_id, name=name)
    if protocol.KEY_STATUS in fields:
        task.status = _parse_status(fields[protocol.KEY_STATUS])
    task.notes = fields.get(protocol.KEY_NOTES)
    task.project = fields.get(protocol.KEY_PROJECT)
    task.area = fields.get(protocol.KEY_AREA)
    if protocol.KEY_DUE in fields:
        task.due_date = normalize_due_date(fields[protocol.KEY_DUE])
    if protocol.KEY_TAGS in fields:
        task.tags = [tag.strip() for tag in fields[protocol.KEY_TAGS].split(protocol.TAG_SEP) if tag.strip()]
    return task


def parse_task_list(raw: Optional[str]) -> List[Things3Task]:
    """Parse a list reply; empty output means no tasks, bad records are skipped."""
    if not raw or not raw.strip():
        return []

    tasks = []
    for record in _RECORD_SPLIT_RE.split(raw):
        if not record.strip():
            continue
        task = _parse_task_record(record)
        if task is not None:
            tasks.append(task)
    return tasks


def parse_created_entity(raw: str) -> Tuple[str, str]:
    """Read the ``ID:<id>||NAME:<name>||`` reply of a create script."""
    fields = _parse_fields((raw or "").strip())
    entity_id = fields.get(protocol.KEY_ID)
    name = fields.get(protocol.KEY_NAME)
    if not entity_id or not name:
        raise AppleScriptExecutionError(f"Unexpected result from AppleScript: {raw}")
    return entity_id, name


def parse_candidates(payload: str) -> List[TaskCandidate]:
    """Parse the body of a ``MULTIPLE:`` reply."""
    candidates = []
    for chunk in payload.split(protocol.FIELD_SEP):
        if not chunk.strip():
            continue
        fields: Dict[str, str] = {}
        for part in chunk.split(protocol.CANDIDATE_FIELD_SEP):
            pair = _split_key_value(part)
            if pair is not None:
                fields[pair[0]] = pair[1]
        candidates.append(TaskCandidate(
            id=fields.get(protocol.KEY_ID, ""),
            name=fields.get(protocol.KEY_NAME, ""),
            status=fields.get(protocol.KEY_STATUS, ""),
            project=fields.get(protocol.KEY_PROJECT) or None,
            area=fields.get(protocol.KEY_AREA) or None,
        ))
    return candidates


class _SingleResultParser:
    """expect-sentinel -> dispatch -> parse-body."""

    def __init__(self, raw: str):
        self.text = (raw or "").strip()
        self.sentinel: Optional[str] = None
        self.body = ""

    def expect_sentinel(self) -> None:
        for sentinel in protocol.SINGLE_RESULT_SENTINELS:
            if self.text.startswith(sentinel):
                self.sentinel = sentinel
                self.body = self.text[len(sentinel):]
                return
        raise AppleScriptExecutionError(f"Unexpected result from AppleScript: {self.text}")

    def dispatch(self) -> SingleResult:
        if self.sentinel == protocol.MULTIPLE:
            return self.parse_multiple_body()
        return self.parse_value_body()

    def parse_multiple_body(self) -> SingleResult:
        return SingleResult(self.sentinel, self.body, parse_candidates(self.body))

    def parse_value_body(self) -> SingleResult:
        return SingleResult(self.sentinel, self.body)

    def run(self) -> SingleResult:
        self.expect_sentinel()
        return self.dispatch()


def parse_single_result(raw: str) -> SingleResult:
    """Decode a sentinel-prefixed reply; anything else is an execution failure."""
    return _SingleResultParser(raw).run()


def parse_embedded_error(message: str) -> Optional[Tuple[str, str]]:
    """
    Find a ``PROJECT_NOT_FOUND:<name>`` / ``AREA_NOT_FOUND:<name>`` tag in error text.

    osascript reports script errors as ``execution error: <text> (-2700)``;
    the trailing error number is not part of the name.
    Returns ``(entity, name)`` or ``None``.
    """
    match = _EMBEDDED_ERROR_RE.search(message or "")
    if not match:
        return None
    return protocol.EMBEDDED_ERROR_TAGS[match.group(1)], match.group(2).strip()
