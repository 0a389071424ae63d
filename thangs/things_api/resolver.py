"""Turn a task name into the id of exactly one to do.

Edit, complete and cancel all address tasks by name. Names are not unique
in Things 3, so every one of those operations resolves through
:func:`resolve_task` first and only then touches the task, by id.
"""
from typing import Optional

from ..utils.logger import get_logger
from . import protocol
from .apple_script_client import ThingsBridge, get_default_bridge
from .errors import AmbiguousNameError, AppleScriptExecutionError, NotFoundError
from .response_parser import parse_single_result
from .script_builder import generate_find_task_applescript

log = get_logger(__name__)


def resolve_task(name: str, bridge: Optional[ThingsBridge] = None) -> str:
    """
    Look *name* up with an exact match and return the task id.

    Raises:
        NotFoundError: no to do has that name.
        AmbiguousNameError: more than one to do has that name; the error
            lists every candidate with its status and project or area.
    """
    bridge = bridge or get_default_bridge()
    result = parse_single_result(bridge.run(generate_find_task_applescript(name)))

    if result.sentinel == protocol.NOT_FOUND:
        raise NotFoundError("task", result.value or name)
    if result.sentinel == protocol.MULTIPLE:
        raise AmbiguousNameError(name, result.candidates)
    if result.sentinel == protocol.FOUND and result.value:
        log.debug("Resolved task %r to id %s", name, result.value)
        return result.value
    raise AppleScriptExecutionError(f"Unexpected result from AppleScript: {result.sentinel}{result.value}")
