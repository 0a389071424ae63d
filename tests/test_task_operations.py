import pytest

from thangs.things_api.data_models import Things3Area, Things3Project
from thangs.things_api.errors import (
    AlreadyInTerminalStateError,
    AmbiguousNameError,
    AppleScriptExecutionError,
    NotFoundError,
    Things3NotAccessibleError,
    ValidationError,
)
from thangs.things_api.options import AddTaskOptions, EditTaskOptions, ListOptions, build_options
from thangs.things_api.task_operations import (
    add_area,
    add_project,
    add_task,
    cancel_task,
    complete_task,
    edit_task,
    list_tasks,
)

LIST_REPLY = (
    "ID:1||NAME:Mockups||STATUS:open||PROJECT:Website Redesign||TAGS:design||TASK_END\n"
    "ID:2||NAME:API||STATUS:open||PROJECT:Backend||TASK_END\n"
    "ID:3||NAME:Groceries||STATUS:open||TASK_END\n"
    "NAME:broken||TASK_END\n"
)


class TestListTasks:
    def test_lists_and_filters(self, make_bridge):
        bridge, transport = make_bridge(LIST_REPLY)
        tasks = list_tasks(build_options(ListOptions, project="web"), bridge=bridge)
        assert [t.name for t in tasks] == ["Mockups"]
        assert "set theTasks to to dos" in transport.scripts[0]

    def test_dict_options(self, make_bridge):
        bridge, transport = make_bridge(LIST_REPLY)
        tasks = list_tasks({"list_name": "today"}, bridge=bridge)
        assert len(tasks) == 3
        assert 'to dos of list "Today"' in transport.scripts[0]

    def test_unknown_list_never_reaches_things(self, make_bridge):
        bridge, transport = make_bridge()
        with pytest.raises(ValidationError, match="Unknown list"):
            list_tasks(build_options(ListOptions, list_name="inbox"), bridge=bridge)
        assert transport.probes == 0
        assert transport.scripts == []

    def test_empty_reply(self, make_bridge):
        bridge, _ = make_bridge("")
        assert list_tasks(bridge=bridge) == []

    def test_not_running(self, make_bridge):
        bridge, _ = make_bridge(running=False)
        with pytest.raises(Things3NotAccessibleError):
            list_tasks(bridge=bridge)


class TestAddTask:
    def test_returns_created_name(self, make_bridge):
        bridge, transport = make_bridge("Buy milk\n")
        assert add_task("Buy milk", build_options(AddTaskOptions, tags="home"), bridge=bridge) == "Buy milk"
        assert 'set tag names of newTodo to "home"' in transport.scripts[0]

    def test_empty_name_rejected_before_bridge(self, make_bridge):
        bridge, transport = make_bridge()
        with pytest.raises(ValidationError, match="Task name cannot be empty"):
            add_task("  ", bridge=bridge)
        assert transport.probes == 0

    def test_project_not_found(self, make_bridge):
        error = AppleScriptExecutionError(
            "AppleScript execution failed (code 1): execution error: PROJECT_NOT_FOUND:Q9 (-2700)"
        )
        bridge, _ = make_bridge(error)
        with pytest.raises(NotFoundError) as excinfo:
            add_task("Report", build_options(AddTaskOptions, project="Q9"), bridge=bridge)
        assert excinfo.value.entity == "project"
        assert str(excinfo.value) == "Project not found: Q9"

    def test_area_not_found(self, make_bridge):
        bridge, _ = make_bridge(AppleScriptExecutionError("execution error: AREA_NOT_FOUND:Hobbies (-2700)"))
        with pytest.raises(NotFoundError, match="Area not found: Hobbies"):
            add_task("Paint", build_options(AddTaskOptions, area="Hobbies"), bridge=bridge)

    def test_other_failures_propagate(self, make_bridge):
        bridge, _ = make_bridge(AppleScriptExecutionError("AppleScript execution failed: weird"))
        with pytest.raises(AppleScriptExecutionError, match="weird"):
            add_task("Paint", bridge=bridge)


class TestCompleteAndCancel:
    def test_complete_resolves_then_mutates(self, make_bridge):
        bridge, transport = make_bridge("FOUND:abc", "COMPLETED:Buy milk")
        assert complete_task("Buy milk", bridge=bridge) == "Buy milk"
        assert len(transport.scripts) == 2
        assert 'to do id "abc"' in transport.scripts[1]

    def test_complete_already_completed(self, make_bridge):
        bridge, _ = make_bridge("FOUND:abc", "ALREADY_COMPLETED:Buy milk")
        with pytest.raises(AlreadyInTerminalStateError, match='Task "Buy milk" is already completed'):
            complete_task("Buy milk", bridge=bridge)

    def test_cancel_on_completed_task(self, make_bridge):
        bridge, _ = make_bridge("FOUND:abc", "ALREADY_COMPLETED:X")
        with pytest.raises(AlreadyInTerminalStateError) as excinfo:
            cancel_task("X", bridge=bridge)
        assert excinfo.value.kind == "already_terminal"
        assert excinfo.value.status == "completed"

    def test_cancel_already_canceled(self, make_bridge):
        bridge, _ = make_bridge("FOUND:abc", "ALREADY_CANCELED:X")
        with pytest.raises(AlreadyInTerminalStateError, match="already canceled"):
            cancel_task("X", bridge=bridge)

    def test_cancel(self, make_bridge):
        bridge, transport = make_bridge("FOUND:abc", "CANCELED:X")
        assert cancel_task("X", bridge=bridge) == "X"
        assert "set status of theTask to canceled" in transport.scripts[1]

    def test_ambiguous_name_stops_before_mutation(self, make_bridge):
        bridge, transport = make_bridge("MULTIPLE:ID:1|NAME:X|STATUS:open||ID:2|NAME:X|STATUS:open||")
        with pytest.raises(AmbiguousNameError):
            complete_task("X", bridge=bridge)
        assert len(transport.scripts) == 1

    def test_not_found(self, make_bridge):
        bridge, _ = make_bridge("NOT_FOUND:Foo")
        with pytest.raises(NotFoundError, match="Task not found: Foo"):
            cancel_task("Foo", bridge=bridge)


class TestEditTask:
    def test_no_op_edit_rejected_before_bridge(self, make_bridge):
        bridge, transport = make_bridge()
        with pytest.raises(ValidationError, match="No changes specified"):
            edit_task("X", EditTaskOptions(), bridge=bridge)
        assert transport.probes == 0

    @pytest.mark.parametrize("field", ["project", "area"])
    def test_blank_container_edit_rejected_before_bridge(self, make_bridge, field):
        bridge, transport = make_bridge()
        with pytest.raises(ValidationError, match="No changes specified"):
            edit_task("Buy milk", EditTaskOptions(**{field: ""}), bridge=bridge)
        assert transport.probes == 0
        assert transport.scripts == []

    def test_rename(self, make_bridge):
        bridge, transport = make_bridge("FOUND:abc", "Y")
        assert edit_task("X", build_options(EditTaskOptions, name="Y"), bridge=bridge) == "Task updated: Y"
        assert 'set name of theTask to "Y"' in transport.scripts[1]

    def test_move_to_missing_project(self, make_bridge):
        bridge, _ = make_bridge("FOUND:abc", AppleScriptExecutionError("PROJECT_NOT_FOUND:Nope"))
        with pytest.raises(NotFoundError, match="Project not found: Nope"):
            edit_task("X", {"project": "Nope"}, bridge=bridge)


class TestProjectsAndAreas:
    def test_add_project(self, make_bridge):
        bridge, transport = make_bridge("ID:p1||NAME:Website||")
        project = add_project("Website", {"deadline": "2026-03-01", "notes": "n"}, bridge=bridge)
        assert project == Things3Project(id="p1", name="Website", notes="n", deadline="2026-03-01")
        assert "set due date of newProject" in transport.scripts[0]

    def test_add_project_bad_deadline(self, make_bridge):
        bridge, transport = make_bridge()
        with pytest.raises(ValidationError, match="Invalid date format"):
            add_project("Website", {"deadline": "2026-02-30"}, bridge=bridge)
        assert transport.probes == 0

    def test_add_project_missing_area(self, make_bridge):
        bridge, _ = make_bridge(AppleScriptExecutionError("AREA_NOT_FOUND:Work"))
        with pytest.raises(NotFoundError, match="Area not found: Work"):
            add_project("Website", {"area": "Work"}, bridge=bridge)

    def test_add_area(self, make_bridge):
        bridge, _ = make_bridge("ID:a1||NAME:Health||")
        assert add_area("Health", bridge=bridge) == Things3Area(id="a1", name="Health")

    def test_add_area_garbled_reply(self, make_bridge):
        bridge, _ = make_bridge("Health")
        with pytest.raises(AppleScriptExecutionError, match="Unexpected result"):
            add_area("Health", bridge=bridge)

    def test_add_area_empty_name(self, make_bridge):
        bridge, _ = make_bridge()
        with pytest.raises(ValidationError, match="Area name cannot be empty"):
            add_area("", bridge=bridge)


def test_default_bridge_is_used_when_none_given(mocker, make_bridge):
    bridge, transport = make_bridge("ID:1||NAME:From default||STATUS:open||TASK_END\n")
    default = mocker.patch("thangs.things_api.task_operations.get_default_bridge", return_value=bridge)
    tasks = list_tasks()
    default.assert_called_once_with()
    assert [t.name for t in tasks] == ["From default"]
