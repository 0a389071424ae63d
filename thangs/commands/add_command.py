"""
Handles the 'add', 'add-project' and 'add-area' commands.
"""
from ..things_api import ThingsError, add_area, add_project, add_task
from ..things_api.options import AddProjectOptions, AddTaskOptions, build_options
from ..utils.logger import get_logger
from ..utils.output import report_failure, report_success

log = get_logger(__name__)


def handle_add(args, bridge=None):
    """
    Creates a new task in Things 3 with the provided arguments.
    """
    json_output = getattr(args, 'json_output', False)
    try:
        options = build_options(
            AddTaskOptions,
            notes=args.notes,
            due=args.due,
            tags=args.tags,
            project=args.project,
            area=args.area,
        )
        created = add_task(args.name, options, bridge=bridge)
    except ThingsError as e:
        log.debug("add failed (%s)", e.kind)
        report_failure(json_output, str(e))
        return False
    report_success(json_output, f"Task created: {created}", task=created)
    return True


def handle_add_project(args, bridge=None):
    """Handles creation of a new project, optionally inside an area."""
    json_output = getattr(args, 'json_output', False)
    try:
        options = build_options(
            AddProjectOptions,
            area=args.area,
            notes=args.notes,
            deadline=args.deadline,
        )
        project = add_project(args.name, options, bridge=bridge)
    except ThingsError as e:
        log.debug("add-project failed (%s)", e.kind)
        report_failure(json_output, str(e))
        return False
    report_success(json_output, f"Project created: {project.name}", project=project.name, id=project.id)
    return True


def handle_add_area(args, bridge=None):
    json_output = getattr(args, 'json_output', False)
    try:
        area = add_area(args.name, bridge=bridge)
    except ThingsError as e:
        log.debug("add-area failed (%s)", e.kind)
        report_failure(json_output, str(e))
        return False
    report_success(json_output, f"Area created: {area.name}", area=area.name, id=area.id)
    return True
