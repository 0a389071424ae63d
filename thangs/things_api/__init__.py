"""
Things 3 API layer package.
Builds AppleScript for each operation, runs it through osascript and
parses the replies into typed records.
"""

from .apple_script_client import ThingsBridge, execute_applescript
from .data_models import TaskStatus, Things3Area, Things3Project, Things3Task
from .errors import (
    AlreadyInTerminalStateError,
    AmbiguousNameError,
    AppleScriptExecutionError,
    NotFoundError,
    Things3NotAccessibleError,
    ThingsError,
    ValidationError,
)
from .task_operations import (
    add_area,
    add_project,
    add_task,
    cancel_task,
    complete_task,
    edit_task,
    list_tasks,
)

__all__ = [
    'ThingsBridge',
    'execute_applescript',
    'TaskStatus',
    'Things3Task',
    'Things3Project',
    'Things3Area',
    'ThingsError',
    'AppleScriptExecutionError',
    'Things3NotAccessibleError',
    'ValidationError',
    'NotFoundError',
    'AmbiguousNameError',
    'AlreadyInTerminalStateError',
    'list_tasks',
    'add_task',
    'edit_task',
    'complete_task',
    'cancel_task',
    'add_project',
    'add_area',
]
