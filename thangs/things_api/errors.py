"""Error taxonomy for the Things 3 bridge.

Every failure raised by :mod:`thangs.things_api` derives from
:class:`ThingsError` and carries a ``kind`` discriminant so programmatic
callers can branch without matching on message text. The CLI only ever
shows ``str(error)``.
"""
from __future__ import annotations

from typing import List, Optional


class ThingsError(Exception):
    """Base class for everything the Things 3 layer raises."""

    kind = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class AppleScriptExecutionError(ThingsError):
    """Raised when AppleScript execution fails for any reason not covered below."""

    kind = "execution_failed"

    def __init__(self, message: str, original_error: Optional[BaseException] = None):
        super().__init__(message)
        self.original_error = original_error


class Things3NotAccessibleError(AppleScriptExecutionError):
    """Raised when Things 3 is not running or cannot be reached."""

    kind = "not_accessible"

    def __init__(self, message: str = "Things 3 is not running or not accessible"):
        super().__init__(message)


class ValidationError(ThingsError):
    """Raised for bad input, always before any script is sent to Things 3."""

    kind = "validation"


class NotFoundError(ThingsError):
    kind = "not_found"

    def __init__(self, entity: str, name: str):
        super().__init__(f"{entity.capitalize()} not found: {name}")
        self.entity = entity
        self.name = name


class AmbiguousNameError(ThingsError):
    """Raised when a name matches more than one task.

    ``candidates`` holds the :class:`~thangs.things_api.data_models.TaskCandidate`
    entries reported by Things 3, in the order they were returned.
    """

    kind = "ambiguous_name"

    def __init__(self, name: str, candidates: List["TaskCandidate"]):  # noqa: F821
        lines = [f'Multiple tasks found with name "{name}":']
        for index, candidate in enumerate(candidates, start=1):
            lines.append(f"  {index}. {candidate.describe()}")
        lines.append("")
        lines.append("Please be more specific or use unique task names.")
        super().__init__("\n".join(lines))
        self.name = name
        self.candidates = candidates


class AlreadyInTerminalStateError(ThingsError):
    kind = "already_terminal"

    def __init__(self, name: str, status: str):
        super().__init__(f'Task "{name}" is already {status}')
        self.name = name
        self.status = status
