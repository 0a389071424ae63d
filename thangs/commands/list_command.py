from ..things_api import ThingsError, list_tasks
from ..things_api.options import ListOptions, build_options
from ..utils.logger import get_logger
from ..utils.output import display_tasks_json, display_tasks_table, report_failure

log = get_logger(__name__)


def handle_list(args, bridge=None):
    """
    Lists tasks from Things 3, optionally from one built-in list and
    filtered by project, area and/or tag.
    """
    json_output = getattr(args, 'json_output', False)
    try:
        options = build_options(
            ListOptions,
            list_name=getattr(args, 'list_name', None),
            project=getattr(args, 'project', None),
            area=getattr(args, 'area', None),
            tag=getattr(args, 'tag', None),
        )
        tasks = list_tasks(options, bridge=bridge)
    except ThingsError as e:
        log.debug("list failed (%s)", e.kind)
        report_failure(json_output, str(e))
        return False

    if json_output:
        display_tasks_json(tasks)
    else:
        display_tasks_table(tasks)
    return True
