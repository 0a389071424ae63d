"""Validated request options for the Things 3 operations.

Built with pydantic so every check runs when the options are constructed,
which is always before a script is generated. :func:`build_options`
turns pydantic's error into our own :class:`ValidationError`.
"""
from __future__ import annotations

from typing import Any, List, Optional, Type, TypeVar

from pydantic import BaseModel, field_validator, model_validator
from pydantic import ValidationError as PydanticValidationError

from .errors import ValidationError
from .utils import is_valid_date_format, split_tags

OptionsT = TypeVar("OptionsT", bound=BaseModel)


def _check_date(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    if not is_valid_date_format(value):
        raise ValueError(f"Invalid date format: {value}. Expected YYYY-MM-DD format (e.g., 2025-12-31)")
    return value


def _coerce_tags(value: Any) -> Optional[List[str]]:
    if value is None:
        return None
    if isinstance(value, str):
        return split_tags(value)
    return [str(tag).strip() for tag in value if str(tag).strip()]


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _check_single_container(project: Optional[str], area: Optional[str]) -> None:
    if project and area:
        raise ValueError("--project and --area cannot be used together")


def check_name(name: Optional[str], entity: str = "Task") -> str:
    if name is None or not name.strip():
        raise ValidationError(f"{entity} name cannot be empty")
    return name


class ListOptions(BaseModel):
    list_name: Optional[str] = None
    project: Optional[str] = None
    area: Optional[str] = None
    tag: Optional[str] = None


class AddTaskOptions(BaseModel):
    notes: Optional[str] = None
    due: Optional[str] = None
    tags: Optional[List[str]] = None
    project: Optional[str] = None
    area: Optional[str] = None

    check_due = field_validator("due")(_check_date)
    split_tag_list = field_validator("tags", mode="before")(_coerce_tags)
    drop_blank_container = field_validator("project", "area", mode="before")(_blank_to_none)

    @model_validator(mode="after")
    def one_container(self) -> "AddTaskOptions":
        _check_single_container(self.project, self.area)
        return self


class EditTaskOptions(BaseModel):
    """The seven updatable fields of a task; at least one must be set."""

    name: Optional[str] = None
    notes: Optional[str] = None
    due: Optional[str] = None
    when: Optional[str] = None
    tags: Optional[List[str]] = None
    project: Optional[str] = None
    area: Optional[str] = None

    check_dates = field_validator("due", "when")(_check_date)
    split_tag_list = field_validator("tags", mode="before")(_coerce_tags)
    drop_blank_container = field_validator("project", "area", mode="before")(_blank_to_none)

    @field_validator("name")
    @classmethod
    def non_empty_name(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            raise ValueError("Task name cannot be empty")
        return value

    @model_validator(mode="after")
    def one_container(self) -> "EditTaskOptions":
        _check_single_container(self.project, self.area)
        return self

    def has_updates(self) -> bool:
        return any(value is not None for value in self.model_dump().values())


class AddProjectOptions(BaseModel):
    area: Optional[str] = None
    notes: Optional[str] = None
    deadline: Optional[str] = None

    check_deadline = field_validator("deadline")(_check_date)
    drop_blank_area = field_validator("area", mode="before")(_blank_to_none)


def build_options(model: Type[OptionsT], **values: Any) -> OptionsT:
    """Instantiate *model*, re-raising validation failures as :class:`ValidationError`."""
    try:
        return model(**values)
    except PydanticValidationError as exc:
        first = exc.errors()[0]
        reason = first.get("ctx", {}).get("error") or first["msg"]
        raise ValidationError(str(reason)) from exc
