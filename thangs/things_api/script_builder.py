"""AppleScript generation for every Things 3 operation.

Each ``generate_*`` function returns a complete script. User-supplied text
only ever reaches a script through :func:`escape_applescript_string`;
dates are validated by the option models before they get here.

Scripts print the tokens defined in :mod:`.protocol` and nothing else, so
:mod:`.response_parser` can read every reply.
"""
from typing import List, Optional

from ..utils.config import get_config
from . import protocol
from .errors import ValidationError
from .options import AddProjectOptions, AddTaskOptions, EditTaskOptions
from .utils import escape_applescript_string, to_applescript_date

_INDENT = "    "


def _app_name() -> str:
    return escape_applescript_string(get_config("THANGS_APP_NAME", "Things3"))


def _tell_things(body: List[str]) -> str:
    script_parts = [f'tell application "{_app_name()}"']
    script_parts.extend(_INDENT + line if line else line for line in body)
    script_parts.append("end tell")
    return "\n".join(script_parts)


def _field(key: str, expression: str) -> str:
    return f'set output to output & "{key}{protocol.KEY_VALUE_SEP}" & {expression} & "{protocol.FIELD_SEP}"'


def _candidate_field(key: str, expression: str) -> str:
    return f'set output to output & "{protocol.CANDIDATE_FIELD_SEP}{key}{protocol.KEY_VALUE_SEP}" & {expression}'


def _lookup_lines(kind: str, variable: str, name: str, error_tag: str) -> List[str]:
    """Nested lookup that raises ``<error_tag><name>`` when nothing matches."""
    s_name = escape_applescript_string(name)
    return [
        "try",
        f'    set {variable} to first {kind} whose name is "{s_name}"',
        "on error",
        f'    error "{error_tag}{s_name}"',
        "end try",
    ]


def _container_lookup_lines(project: Optional[str], area: Optional[str]) -> List[str]:
    if project:
        return _lookup_lines("project", "targetProject", project, protocol.PROJECT_NOT_FOUND)
    if area:
        return _lookup_lines("area", "targetArea", area, protocol.AREA_NOT_FOUND)
    return []


def _tag_lines(variable: str, tags: List[str]) -> List[str]:
    """Create-or-lookup every tag, then assign the whole set in one go."""
    lines: List[str] = []
    for tag in tags:
        s_tag = escape_applescript_string(tag)
        lines.extend([
            "try",
            f'    set targetTag to first tag whose name is "{s_tag}"',
            "on error",
            f'    set targetTag to make new tag with properties {{name:"{s_tag}"}}',
            "end try",
        ])
    s_tag_names = escape_applescript_string(", ".join(tags))
    lines.append(f'set tag names of {variable} to "{s_tag_names}"')
    return lines


def _detach_lines(variable: str, container: str) -> List[str]:
    return ["try", f"    delete {container} of {variable}", "end try"]


def _container_assignment_lines(
    variable: str, project: Optional[str], area: Optional[str], detach: bool = False
) -> List[str]:
    """Put *variable* in its new container; with *detach* the other kind is cleared first."""
    # A to do sits in at most one container.
    lines: List[str] = []
    if project:
        if detach:
            lines.extend(_detach_lines(variable, "area"))
        lines.append(f"move {variable} to targetProject")
    elif area:
        if detach:
            lines.extend(_detach_lines(variable, "project"))
        lines.append(f"set area of {variable} to targetArea")
    return lines


def generate_process_check_applescript(process_name: str) -> str:
    """Small probe asking System Events whether the app process exists."""
    s_process = escape_applescript_string(process_name)
    return "\n".join([
        'tell application "System Events"',
        f'    return exists (processes where name is "{s_process}")',
        "end tell",
    ])


def get_list_source_expression(list_name: Optional[str]) -> str:
    """Return the AppleScript statement selecting which to dos to list."""
    if not list_name:
        return "set theTasks to to dos"

    view = protocol.LIST_VIEWS.get(list_name.lower())
    if view is None:
        valid = ", ".join(protocol.LIST_VIEWS.values())
        raise ValidationError(f"Unknown list: {list_name}. Valid lists are: {valid}")
    return f'set theTasks to to dos of list "{view}"'


def generate_list_tasks_applescript(list_name: Optional[str] = None) -> str:
    """One ``KEY:value||...TASK_END`` record per to do."""
    body = [
        get_list_source_expression(list_name),
        'set output to ""',
        "repeat with t in theTasks",
        _INDENT + _field(protocol.KEY_ID, "id of t"),
        _INDENT + _field(protocol.KEY_NAME, "name of t"),
        _INDENT + _field(protocol.KEY_STATUS, "(status of t as string)"),
        _INDENT + "try",
        _INDENT * 2 + "set taskNotes to notes of t",
        _INDENT * 2 + 'if taskNotes is not missing value and taskNotes is not "" then',
        _INDENT * 3 + _field(protocol.KEY_NOTES, "taskNotes"),
        _INDENT * 2 + "end if",
        _INDENT + "end try",
        _INDENT + "try",
        _INDENT * 2 + "set taskProject to name of project of t",
        _INDENT * 2 + "if taskProject is not missing value then",
        _INDENT * 3 + _field(protocol.KEY_PROJECT, "taskProject"),
        _INDENT * 2 + "end if",
        _INDENT + "end try",
        _INDENT + "try",
        _INDENT * 2 + "set taskArea to name of area of t",
        _INDENT * 2 + "if taskArea is not missing value then",
        _INDENT * 3 + _field(protocol.KEY_AREA, "taskArea"),
        _INDENT * 2 + "end if",
        _INDENT + "end try",
        _INDENT + "try",
        _INDENT * 2 + "set taskDue to due date of t",
        _INDENT * 2 + "if taskDue is not missing value then",
        _INDENT * 3 + _field(protocol.KEY_DUE, "(taskDue as string)"),
        _INDENT * 2 + "end if",
        _INDENT + "end try",
        _INDENT + "try",
        _INDENT * 2 + "set taskTags to tag names of t",
        _INDENT * 2 + 'if taskTags is not missing value and taskTags is not "" then',
        _INDENT * 3 + _field(protocol.KEY_TAGS, "taskTags"),
        _INDENT * 2 + "end if",
        _INDENT + "end try",
        _INDENT + f'set output to output & "{protocol.RECORD_END}" & linefeed',
        "end repeat",
        "return output",
    ]
    return _tell_things(body)


def generate_add_task_applescript(name: str, options: AddTaskOptions) -> str:
    """Create a to do; the container lookup runs first so a bad name creates nothing."""
    s_name = escape_applescript_string(name)
    body = _container_lookup_lines(options.project, options.area)
    body.append(f'set newTodo to make new to do with properties {{name:"{s_name}"}}')
    if options.notes:
        body.append(f'set notes of newTodo to "{escape_applescript_string(options.notes)}"')
    if options.due:
        body.append(f'set due date of newTodo to date "{to_applescript_date(options.due)}"')
    if options.tags:
        body.extend(_tag_lines("newTodo", options.tags))
    body.extend(_container_assignment_lines("newTodo", options.project, options.area))
    body.append("return name of newTodo")
    return _tell_things(body)


def generate_find_task_applescript(name: str) -> str:
    """Exact-name lookup answering NOT_FOUND:, MULTIPLE: or FOUND:<id>."""
    s_name = escape_applescript_string(name)
    body = [
        f'set matchingTasks to (to dos whose name is "{s_name}")',
        "set taskCount to count of matchingTasks",
        "if taskCount is 0 then",
        f'    return "{protocol.NOT_FOUND}" & "{s_name}"',
        "else if taskCount > 1 then",
        f'    set output to "{protocol.MULTIPLE}"',
        "    repeat with t in matchingTasks",
        f'        set output to output & "{protocol.KEY_ID}{protocol.KEY_VALUE_SEP}" & id of t',
        "        " + _candidate_field(protocol.KEY_NAME, "name of t"),
        "        " + _candidate_field(protocol.KEY_STATUS, "(status of t as string)"),
        "        try",
        "            set taskProject to name of project of t",
        "            if taskProject is not missing value then",
        "                " + _candidate_field(protocol.KEY_PROJECT, "taskProject"),
        "            end if",
        "        end try",
        "        try",
        "            set taskArea to name of area of t",
        "            if taskArea is not missing value then",
        "                " + _candidate_field(protocol.KEY_AREA, "taskArea"),
        "            end if",
        "        end try",
        f'        set output to output & "{protocol.FIELD_SEP}"',
        "    end repeat",
        "    return output",
        "end if",
        f'return "{protocol.FOUND}" & id of (first item of matchingTasks)',
    ]
    return _tell_things(body)


def _status_change_applescript(task_id: str, new_status: str, done_sentinel: str) -> str:
    s_id = escape_applescript_string(task_id)
    body = [
        f'set theTask to to do id "{s_id}"',
        "set taskStatus to status of theTask",
        "if taskStatus is completed then",
        f'    return "{protocol.ALREADY_COMPLETED}" & name of theTask',
        "else if taskStatus is canceled then",
        f'    return "{protocol.ALREADY_CANCELED}" & name of theTask',
        "end if",
        f"set status of theTask to {new_status}",
        f'return "{done_sentinel}" & name of theTask',
    ]
    return _tell_things(body)


def generate_complete_task_applescript(task_id: str) -> str:
    return _status_change_applescript(task_id, "completed", protocol.COMPLETED)


def generate_cancel_task_applescript(task_id: str) -> str:
    return _status_change_applescript(task_id, "canceled", protocol.CANCELED)


def ensure_edit_has_updates(options: EditTaskOptions) -> None:
    if not options.has_updates():
        raise ValidationError(
            "No changes specified. Use --name, --notes, --due, --when, --tags, --project or --area."
        )


def generate_edit_task_applescript(task_id: str, options: EditTaskOptions) -> str:
    """Update a resolved to do in place and return its (possibly new) name."""
    ensure_edit_has_updates(options)

    s_id = escape_applescript_string(task_id)
    body = _container_lookup_lines(options.project, options.area)
    body.append(f'set theTask to to do id "{s_id}"')
    if options.name is not None:
        body.append(f'set name of theTask to "{escape_applescript_string(options.name)}"')
    if options.notes is not None:
        body.append(f'set notes of theTask to "{escape_applescript_string(options.notes)}"')
    if options.due:
        body.append(f'set due date of theTask to date "{to_applescript_date(options.due)}"')
    if options.when:
        body.append(f'schedule theTask for date "{to_applescript_date(options.when)}"')
    if options.tags is not None:
        body.extend(_tag_lines("theTask", options.tags))
    body.extend(_container_assignment_lines("theTask", options.project, options.area, detach=True))
    body.append("return name of theTask")
    return _tell_things(body)


def _created_entity_lines(variable: str) -> List[str]:
    """Reply with ``ID:<id>||NAME:<name>||`` for a freshly made project or area."""
    return [
        'set output to ""',
        _field(protocol.KEY_ID, f"id of {variable}"),
        _field(protocol.KEY_NAME, f"name of {variable}"),
        "return output",
    ]


def generate_add_project_applescript(name: str, options: AddProjectOptions) -> str:
    s_name = escape_applescript_string(name)
    body = _container_lookup_lines(None, options.area)
    body.append(f'set newProject to make new project with properties {{name:"{s_name}"}}')
    if options.notes:
        body.append(f'set notes of newProject to "{escape_applescript_string(options.notes)}"')
    if options.deadline:
        body.append(f'set due date of newProject to date "{to_applescript_date(options.deadline)}"')
    if options.area:
        body.append("set area of newProject to targetArea")
    body.extend(_created_entity_lines("newProject"))
    return _tell_things(body)


def generate_add_area_applescript(name: str) -> str:
    s_name = escape_applescript_string(name)
    body = [f'set newArea to make new area with properties {{name:"{s_name}"}}']
    body.extend(_created_entity_lines("newArea"))
    return _tell_things(body)
