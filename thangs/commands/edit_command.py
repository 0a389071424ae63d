"""
Handles the logic for the 'edit' command.
"""
from ..things_api import ThingsError, edit_task
from ..things_api.options import EditTaskOptions, build_options
from ..utils.logger import get_logger
from ..utils.output import report_failure, report_success

log = get_logger(__name__)


def handle_edit(args, bridge=None):
    """Update the task named ``args.task``; only the options given are changed."""
    json_output = getattr(args, 'json_output', False)
    try:
        options = build_options(
            EditTaskOptions,
            name=args.name,
            notes=args.notes,
            due=args.due,
            when=args.when,
            tags=args.tags,
            project=args.project,
            area=args.area,
        )
        message = edit_task(args.task, options, bridge=bridge)
    except ThingsError as e:
        log.debug("edit failed (%s)", e.kind)
        report_failure(json_output, str(e))
        return False
    report_success(json_output, message, message=message)
    return True
