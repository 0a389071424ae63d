from ..things_api import ThingsError, cancel_task, complete_task
from ..utils.logger import get_logger
from ..utils.output import report_failure, report_success

log = get_logger(__name__)


def handle_complete(args, bridge=None):
    """Mark the task named ``args.task`` complete in Things 3."""
    json_output = getattr(args, 'json_output', False)
    try:
        name = complete_task(args.task, bridge=bridge)
    except ThingsError as e:
        log.debug("complete failed (%s)", e.kind)
        report_failure(json_output, str(e))
        return False
    report_success(json_output, f"Task completed: {name}", task=name)
    return True


def handle_cancel(args, bridge=None):
    """Cancel the task named ``args.task`` in Things 3."""
    json_output = getattr(args, 'json_output', False)
    try:
        name = cancel_task(args.task, bridge=bridge)
    except ThingsError as e:
        log.debug("cancel failed (%s)", e.kind)
        report_failure(json_output, str(e))
        return False
    report_success(json_output, f"Task canceled: {name}", task=name)
    return True
