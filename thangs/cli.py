#!/usr/bin/env python3
import logging
from typing import Optional

import typer

from . import __version__
from .utils.config import load_env_vars
from .utils.logger import configure_logging

# Load environment variables
load_env_vars()

# Create app instance
app = typer.Typer(
    name="thangs",
    help="thangs - A CLI wrapper around Things 3.",
    no_args_is_help=True,
)

from .commands.add_command import handle_add, handle_add_area, handle_add_project
from .commands.complete_command import handle_cancel, handle_complete
from .commands.edit_command import handle_edit
from .commands.install_skill_command import handle_install_skill
from .commands.list_command import handle_list


def _version_callback(value: bool):
    if value:
        print(f"thangs {__version__}")
        raise typer.Exit()


def _finish(ok: bool) -> None:
    if not ok:
        raise typer.Exit(code=1)


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log generated AppleScript and raw replies to stderr."),
):
    """thangs - A CLI wrapper around Things 3."""
    if verbose:
        configure_logging(logging.DEBUG)


@app.command("list")
def list_command(
    list_name: Optional[str] = typer.Option(None, "--list", help="Filter by built-in list (Today, Upcoming, Anytime, Someday)."),
    project: Optional[str] = typer.Option(None, "--project", help="Filter by project name."),
    area: Optional[str] = typer.Option(None, "--area", help="Filter by area name."),
    tag: Optional[str] = typer.Option(None, "--tag", help="Filter by tag name."),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON instead of formatted table."),
):
    """Display tasks from Things 3."""
    args = type('Args', (), {
        'list_name': list_name,
        'project': project,
        'area': area,
        'tag': tag,
        'json_output': json_output,
    })
    _finish(handle_list(args))


@app.command("add")
def add(
    name: str = typer.Argument(..., help="Name of the new task."),
    notes: Optional[str] = typer.Option(None, "--notes", help="Task notes."),
    due: Optional[str] = typer.Option(None, "--due", help="Due date (YYYY-MM-DD format)."),
    tags: Optional[str] = typer.Option(None, "--tags", help="Comma-separated list of tags."),
    project: Optional[str] = typer.Option(None, "--project", help="Assign to project by name."),
    area: Optional[str] = typer.Option(None, "--area", help="Assign to area by name."),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON."),
):
    """Create a new task in Things 3 Inbox."""
    args = type('Args', (), {
        'name': name,
        'notes': notes,
        'due': due,
        'tags': tags,
        'project': project,
        'area': area,
        'json_output': json_output,
    })
    _finish(handle_add(args))


@app.command("edit")
def edit(
    task: str = typer.Argument(..., help="Exact name of the task to modify."),
    name: Optional[str] = typer.Option(None, "--name", help="Rename the task."),
    notes: Optional[str] = typer.Option(None, "--notes", help="Update task notes."),
    due: Optional[str] = typer.Option(None, "--due", help="Change due date (YYYY-MM-DD format)."),
    when: Optional[str] = typer.Option(None, "--when", help="Schedule the task for a date (YYYY-MM-DD format)."),
    tags: Optional[str] = typer.Option(None, "--tags", help="Replace tags (comma-separated list)."),
    project: Optional[str] = typer.Option(None, "--project", help="Move to different project by name."),
    area: Optional[str] = typer.Option(None, "--area", help="Move to different area by name."),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON."),
):
    """Modify an existing task in Things 3."""
    args = type('Args', (), {
        'task': task,
        'name': name,
        'notes': notes,
        'due': due,
        'when': when,
        'tags': tags,
        'project': project,
        'area': area,
        'json_output': json_output,
    })
    _finish(handle_edit(args))


@app.command("complete")
def complete(
    task: str = typer.Argument(..., help="Exact name of the task to complete."),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON."),
):
    """Mark a task as completed in Things 3."""
    args = type('Args', (), {'task': task, 'json_output': json_output})
    _finish(handle_complete(args))


@app.command("cancel")
def cancel(
    task: str = typer.Argument(..., help="Exact name of the task to cancel."),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON."),
):
    """Cancel a task in Things 3."""
    args = type('Args', (), {'task': task, 'json_output': json_output})
    _finish(handle_cancel(args))


@app.command("add-project")
def add_project_command(
    name: str = typer.Argument(..., help="Name of the new project."),
    area: Optional[str] = typer.Option(None, "--area", help="Create project within specific area."),
    notes: Optional[str] = typer.Option(None, "--notes", help="Project notes."),
    deadline: Optional[str] = typer.Option(None, "--deadline", help="Project deadline (YYYY-MM-DD format)."),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON."),
):
    """Create a new project in Things 3."""
    args = type('Args', (), {
        'name': name,
        'area': area,
        'notes': notes,
        'deadline': deadline,
        'json_output': json_output,
    })
    _finish(handle_add_project(args))


@app.command("add-area")
def add_area_command(
    name: str = typer.Argument(..., help="Name of the new area."),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON."),
):
    """Create a new area in Things 3."""
    args = type('Args', (), {'name': name, 'json_output': json_output})
    _finish(handle_add_area(args))


@app.command("install-skill")
def install_skill_command(
    force: bool = typer.Option(False, "--force", help="Overwrite existing installation."),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON."),
):
    """Install the Things 3 Claude skill to ~/.claude/skills/."""
    args = type('Args', (), {'force': force, 'json_output': json_output})
    _finish(handle_install_skill(args))


if __name__ == "__main__":
    app()
