from thangs.things_api.data_models import Things3Task
from thangs.things_api.search_filters import filter_tasks


def _tasks():
    return [
        Things3Task(id="1", name="Mockups", project="Website Redesign", tags=["Design", "work"]),
        Things3Task(id="2", name="API", project="Backend", area="Work"),
        Things3Task(id="3", name="Groceries", area="Home", tags=["errand"]),
    ]


def test_project_substring_case_insensitive():
    tasks = [
        Things3Task(id="1", name="a", project="Website Redesign"),
        Things3Task(id="2", name="b", project="Backend"),
        Things3Task(id="3", name="c", project=None),
    ]
    assert [t.id for t in filter_tasks(tasks, project="web")] == ["1"]


def test_no_filters_is_identity():
    tasks = _tasks()
    assert filter_tasks(tasks) == tasks


def test_area_filter_skips_tasks_without_area():
    assert [t.id for t in filter_tasks(_tasks(), area="WORK")] == ["2"]


def test_tag_filter_matches_any_tag():
    assert [t.id for t in filter_tasks(_tasks(), tag="des")] == ["1"]


def test_filters_are_combined_with_and():
    assert filter_tasks(_tasks(), project="backend", tag="work") == []
    assert [t.id for t in filter_tasks(_tasks(), project="site", tag="work")] == ["1"]
