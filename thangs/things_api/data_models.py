"""
Data models representing Things 3 objects (tasks, projects, areas).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class TaskStatus(str, Enum):
    open = "open"
    completed = "completed"
    canceled = "canceled"

    @property
    def is_terminal(self) -> bool:
        return self is not TaskStatus.open


@dataclass
class Things3Task:
    id: str
    name: str
    status: TaskStatus = TaskStatus.open
    notes: Optional[str] = None
    due_date: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    project: Optional[str] = None
    area: Optional[str] = None
    creation_date: Optional[str] = None
    modification_date: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "status": self.status.value,
            "tags": list(self.tags),
        }
        optional = {
            "notes": self.notes,
            "dueDate": self.due_date,
            "project": self.project,
            "area": self.area,
            "creationDate": self.creation_date,
            "modificationDate": self.modification_date,
        }
        data.update({key: value for key, value in optional.items() if value is not None})
        return data


@dataclass
class Things3Project:
    id: str
    name: str
    notes: Optional[str] = None
    area: Optional[str] = None
    deadline: Optional[str] = None
    tags: List[str] = field(default_factory=list)


@dataclass
class Things3Area:
    id: str
    name: str
    tags: List[str] = field(default_factory=list)


@dataclass
class TaskCandidate:
    """One of several tasks sharing a name, as reported in a MULTIPLE: reply."""

    id: str
    name: str
    status: str
    project: Optional[str] = None
    area: Optional[str] = None

    def describe(self) -> str:
        details = f"Status: {self.status}"
        if self.project:
            details += f", Project: {self.project}"
        if self.area:
            details += f", Area: {self.area}"
        return f"{self.name} ({details})"
