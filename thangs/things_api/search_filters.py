"""
Client-side filtering of tasks already fetched from Things 3.
"""

from typing import Iterable, List, Optional

from .data_models import Things3Task


def _contains(haystack: Optional[str], needle: str) -> bool:
    return haystack is not None and needle in haystack.lower()


def filter_tasks(
    tasks: Iterable[Things3Task],
    project: Optional[str] = None,
    area: Optional[str] = None,
    tag: Optional[str] = None,
) -> List[Things3Task]:
    """
    Keep tasks matching every supplied filter.

    Each filter is a case-insensitive substring match against the task's
    project name, area name, or any of its tags. A task lacking the field
    never matches a non-empty filter. With no filters all tasks are kept.
    """
    filtered = list(tasks)

    if project:
        project_lower = project.lower()
        filtered = [t for t in filtered if _contains(t.project, project_lower)]

    if area:
        area_lower = area.lower()
        filtered = [t for t in filtered if _contains(t.area, area_lower)]

    if tag:
        tag_lower = tag.lower()
        filtered = [t for t in filtered if any(_contains(name, tag_lower) for name in t.tags)]

    return filtered
