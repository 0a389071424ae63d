import pytest

from thangs.things_api.errors import ValidationError
from thangs.things_api.options import (
    AddProjectOptions,
    AddTaskOptions,
    EditTaskOptions,
    build_options,
    check_name,
)
from thangs.things_api.utils import (
    escape_applescript_string,
    is_valid_date_format,
    normalize_due_date,
    split_tags,
    to_applescript_date,
)


@pytest.mark.parametrize("value", ["2025-12-31", "2024-02-29", "2025-01-01"])
def test_valid_dates(value):
    assert is_valid_date_format(value)


@pytest.mark.parametrize(
    "value",
    ["2025-13-01", "2025-02-30", "2023-02-29", "2025-1-01", "25-01-01", "2025/01/01", "tomorrow", "", None],
)
def test_invalid_dates(value):
    assert not is_valid_date_format(value)


def test_escape_quotes_and_backslash():
    assert escape_applescript_string('He said "hi"\\') == 'He said \\"hi\\"\\\\'


def test_escape_line_breaks():
    assert escape_applescript_string("a\nb\rc") == "a\\nb\\rc"


def test_escape_empty():
    assert escape_applescript_string("") == ""
    assert escape_applescript_string(None) == ""


def test_to_applescript_date():
    assert to_applescript_date("2025-12-31") == "Wednesday, December 31, 2025 at 12:00:00 AM"


def test_normalize_applescript_due_date():
    assert normalize_due_date("Monday, December 9, 2024 at 12:00:00 AM") == "2024-12-09"


def test_normalize_keeps_iso_dates():
    assert normalize_due_date("2025-03-15") == "2025-03-15"


def test_normalize_falls_back_to_raw_text():
    assert normalize_due_date("???") == "???"


def test_split_tags_trims_and_drops_blanks():
    assert split_tags(" work, home ,,errand ") == ["work", "home", "errand"]
    assert split_tags(None) == []


class TestOptions:
    def test_add_options_split_tag_string(self):
        options = build_options(AddTaskOptions, tags="a, b")
        assert options.tags == ["a", "b"]

    def test_add_options_reject_bad_due(self):
        with pytest.raises(ValidationError, match="Invalid date format: 2025-02-30"):
            build_options(AddTaskOptions, due="2025-02-30")

    def test_project_and_area_are_exclusive(self):
        with pytest.raises(ValidationError, match="cannot be used together"):
            build_options(AddTaskOptions, project="Q1", area="Work")

    def test_edit_options_validate_when(self):
        with pytest.raises(ValidationError, match="Invalid date format"):
            build_options(EditTaskOptions, when="next week")

    def test_edit_options_reject_blank_name(self):
        with pytest.raises(ValidationError, match="cannot be empty"):
            build_options(EditTaskOptions, name="   ")

    def test_edit_options_has_updates(self):
        assert not build_options(EditTaskOptions).has_updates()
        assert build_options(EditTaskOptions, notes="").has_updates()

    @pytest.mark.parametrize("field", ["project", "area"])
    def test_blank_container_is_no_change(self, field):
        options = build_options(EditTaskOptions, **{field: "  "})
        assert getattr(options, field) is None
        assert not options.has_updates()
        assert build_options(AddTaskOptions, **{field: ""}).model_dump()[field] is None

    def test_project_deadline_checked(self):
        with pytest.raises(ValidationError):
            build_options(AddProjectOptions, deadline="2025-13-01")

    def test_check_name(self):
        assert check_name("Buy milk") == "Buy milk"
        with pytest.raises(ValidationError, match="Area name cannot be empty"):
            check_name(" ", "Area")
