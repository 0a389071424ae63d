"""
Rendering of tasks and command results for the terminal.

Tables use rich; colours are dropped when NO_COLOR is set. JSON output is
plain ``json.dumps`` so it can be piped into other tools.
"""

import json
import sys
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..things_api.data_models import Things3Task
from .config import get_config


def colors_disabled() -> bool:
    return get_config("NO_COLOR") is not None


def _console(stderr: bool = False) -> Console:
    return Console(file=sys.stderr if stderr else sys.stdout, no_color=colors_disabled(), highlight=False)


def due_date_style(due_date: str, today: Optional[date] = None) -> str:
    """Red when overdue, yellow within three days, plain otherwise."""
    try:
        due = datetime.strptime(due_date, "%Y-%m-%d").date()
    except ValueError:
        return ""
    days_left = (due - (today or date.today())).days
    if days_left < 0:
        return "red"
    if days_left <= 3:
        return "yellow"
    return ""


def build_tasks_table(tasks: List[Things3Task]) -> Table:
    table = Table(show_header=True, header_style="bold cyan", border_style="grey50")
    table.add_column("Task", style="white")
    table.add_column("Project", style="blue")
    table.add_column("Area", style="green")
    table.add_column("Tags", style="yellow")
    table.add_column("Due Date")
    table.add_column("Status", style="grey50")

    for task in tasks:
        due = task.due_date or ""
        table.add_row(
            Text(task.name),
            Text(task.project or ""),
            Text(task.area or ""),
            Text(", ".join(task.tags)),
            Text(due, style=due_date_style(due)) if due else "",
            task.status.value,
            style="dim" if task.status.is_terminal else None,
        )
    return table


def display_tasks_table(tasks: List[Things3Task]) -> None:
    if not tasks:
        print("No tasks found.")
        return
    _console().print(build_tasks_table(tasks))


def display_json(payload: Any) -> None:
    print(json.dumps(payload, indent=2, ensure_ascii=False))


def display_tasks_json(tasks: List[Things3Task]) -> None:
    display_json([task.to_dict() for task in tasks])


def display_error(message: str) -> None:
    _console(stderr=True).print(Text(f"Error: {message}", style="red"))


def display_success(message: str) -> None:
    _console().print(Text(message, style="green"))


def success_payload(**fields: Any) -> Dict[str, Any]:
    return {"success": True, **fields}


def failure_payload(message: str) -> Dict[str, Any]:
    return {"success": False, "error": message}


def report_success(json_output: bool, text: str, **fields: Any) -> None:
    """Print *text*, or with --json a success document carrying *fields*."""
    if json_output:
        display_json(success_payload(**fields))
    else:
        display_success(text)


def report_failure(json_output: bool, message: str) -> None:
    if json_output:
        display_json(failure_payload(message))
    else:
        display_error(message)
