"""Task, project and area operations for Things 3.

Each function performs one logical operation: validate, build the script,
send it through the bridge (twice for name-addressed mutations: resolve,
then mutate) and decode the reply. Errors propagate to the caller as
:class:`~thangs.things_api.errors.ThingsError` subclasses; nothing is retried.
"""
from typing import Any, List, Optional

from . import protocol
from .apple_script_client import ThingsBridge, get_default_bridge
from .data_models import Things3Area, Things3Project, Things3Task
from .errors import (
    AlreadyInTerminalStateError,
    AppleScriptExecutionError,
    NotFoundError,
    Things3NotAccessibleError,
)
from .options import (
    AddProjectOptions,
    AddTaskOptions,
    EditTaskOptions,
    ListOptions,
    build_options,
    check_name,
)
from .resolver import resolve_task
from .response_parser import (
    parse_created_entity,
    parse_embedded_error,
    parse_single_result,
    parse_task_list,
)
from .script_builder import (
    ensure_edit_has_updates,
    generate_add_area_applescript,
    generate_add_project_applescript,
    generate_add_task_applescript,
    generate_cancel_task_applescript,
    generate_complete_task_applescript,
    generate_edit_task_applescript,
    generate_list_tasks_applescript,
)
from .search_filters import filter_tasks


def _ensure(options: Any, model: type) -> Any:
    if options is None:
        return build_options(model)
    if isinstance(options, dict):
        return build_options(model, **options)
    return options


def _run_mutation(bridge: ThingsBridge, script: str) -> str:
    """Run a script that may fail with an embedded ``*_NOT_FOUND:`` tag."""
    try:
        return bridge.run(script).strip()
    except Things3NotAccessibleError:
        raise
    except AppleScriptExecutionError as e:
        embedded = parse_embedded_error(e.message)
        if embedded is not None:
            entity, name = embedded
            raise NotFoundError(entity, name) from e
        raise


def list_tasks(options: Optional[ListOptions] = None, bridge: Optional[ThingsBridge] = None) -> List[Things3Task]:
    """Get tasks from Things 3, optionally from one built-in list, then filter them."""
    options = _ensure(options, ListOptions)
    # Unknown list names fail here, before Things 3 is contacted.
    script = generate_list_tasks_applescript(options.list_name)
    bridge = bridge or get_default_bridge()
    tasks = parse_task_list(bridge.run(script))
    return filter_tasks(tasks, project=options.project, area=options.area, tag=options.tag)


def add_task(name: str, options: Optional[AddTaskOptions] = None, bridge: Optional[ThingsBridge] = None) -> str:
    """Create a to do and return its name as stored by Things 3."""
    check_name(name)
    options = _ensure(options, AddTaskOptions)
    script = generate_add_task_applescript(name, options)
    return _run_mutation(bridge or get_default_bridge(), script)


def edit_task(task_name: str, options: EditTaskOptions, bridge: Optional[ThingsBridge] = None) -> str:
    """Update the single task named *task_name*; returns a confirmation message."""
    check_name(task_name)
    options = _ensure(options, EditTaskOptions)
    ensure_edit_has_updates(options)

    bridge = bridge or get_default_bridge()
    task_id = resolve_task(task_name, bridge)
    updated_name = _run_mutation(bridge, generate_edit_task_applescript(task_id, options))
    return f"Task updated: {updated_name}"


def _change_status(task_name: str, script_factory, done_sentinel: str, bridge: Optional[ThingsBridge]) -> str:
    check_name(task_name)
    bridge = bridge or get_default_bridge()
    task_id = resolve_task(task_name, bridge)
    result = parse_single_result(bridge.run(script_factory(task_id)))

    if result.sentinel == protocol.ALREADY_COMPLETED:
        raise AlreadyInTerminalStateError(result.value, "completed")
    if result.sentinel == protocol.ALREADY_CANCELED:
        raise AlreadyInTerminalStateError(result.value, "canceled")
    if result.sentinel == done_sentinel:
        return result.value
    raise AppleScriptExecutionError(f"Unexpected result from AppleScript: {result.sentinel}{result.value}")


def complete_task(task_name: str, bridge: Optional[ThingsBridge] = None) -> str:
    """Mark the task named *task_name* completed and return its name."""
    return _change_status(task_name, generate_complete_task_applescript, protocol.COMPLETED, bridge)


def cancel_task(task_name: str, bridge: Optional[ThingsBridge] = None) -> str:
    """Cancel the task named *task_name* and return its name."""
    return _change_status(task_name, generate_cancel_task_applescript, protocol.CANCELED, bridge)


def add_project(
    name: str, options: Optional[AddProjectOptions] = None, bridge: Optional[ThingsBridge] = None
) -> Things3Project:
    check_name(name, "Project")
    options = _ensure(options, AddProjectOptions)
    script = generate_add_project_applescript(name, options)
    project_id, created_name = parse_created_entity(_run_mutation(bridge or get_default_bridge(), script))
    return Things3Project(
        id=project_id,
        name=created_name,
        notes=options.notes,
        area=options.area,
        deadline=options.deadline,
    )


def add_area(name: str, bridge: Optional[ThingsBridge] = None) -> Things3Area:
    check_name(name, "Area")
    script = generate_add_area_applescript(name)
    area_id, created_name = parse_created_entity(_run_mutation(bridge or get_default_bridge(), script))
    return Things3Area(id=area_id, name=created_name)
