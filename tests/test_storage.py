import json

import pytest

from overview import Overview
from storage import DEFAULT_FILENAME, Storage, StateFormatError, StorageError, migrate_state


def test_default_path_is_in_home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert Storage.default_path() == tmp_path / DEFAULT_FILENAME


def test_ensure_exists_creates_empty_file(tmp_path):
    path = tmp_path / ".clover"
    Storage.ensure_exists(path)
    assert path.read_text() == ""
    path.write_text("{}")
    Storage.ensure_exists(path)
    assert path.read_text() == "{}"


def test_ensure_exists_fails_for_missing_directory(tmp_path):
    with pytest.raises(StorageError):
        Storage.ensure_exists(tmp_path / "missing" / ".clover")


def test_empty_file_loads_as_empty_state(tmp_path):
    path = tmp_path / ".clover"
    path.write_text("  \n")
    assert Storage.load_state(path) == {}


def test_unreadable_file_is_fatal(tmp_path):
    with pytest.raises(StorageError):
        Storage.load_state(tmp_path / "absent.json")


@pytest.mark.parametrize("content", [
    "{not json",
    "[1, 2]",
    '{"Math": 3}',
    '{"Math": {"Homework": "yes"}}',
    '{"overview": 5}',
    '{"overview": [3], "class_names": ["Math"], "task_names": ["HW"]}',
    '{"overview": [[["x"]]], "class_names": ["Math"], "task_names": ["HW"]}',
    '{"overview": [[[1]]], "class_names": ["Math"], "task_names": ["HW"]}',
    '{"class_names": 7}',
    '{"version": 1, "class_names": ["Math", 2]}',
    '{"version": 1, "task_names": "HW"}',
])
def test_malformed_content_raises_format_error(tmp_path, content):
    path = tmp_path / ".clover"
    path.write_text(content)
    with pytest.raises(StateFormatError):
        Storage.load_state(path)


def test_save_then_load_round_trip(tmp_path):
    ov = Overview()
    ov.add_class("Math")
    ov.add_class("Physics")
    ov.add_task("Homework")
    ov.set_time_span(3)
    ov.complete_task(2, "Physics", "Homework")
    path = tmp_path / ".clover"
    Storage.save_state(path, ov.get_state())

    on_disk = json.loads(path.read_text())
    assert on_disk["version"] == 1
    assert on_disk["overview"][2] == [[False], [True]]

    loaded = Overview(Storage.load_state(path))
    assert loaded.grid == ov.grid
    assert loaded.class_names == ov.class_names
    assert loaded.task_names == ov.task_names


def test_unversioned_grid_document_is_accepted(tmp_path):
    path = tmp_path / ".clover"
    path.write_text(json.dumps({
        "overview": [[[True]]],
        "class_names": ["Math"],
        "task_names": ["Homework"],
    }))
    ov = Overview(Storage.load_state(path))
    assert ov.grid == [[[True]]]


def test_class_map_is_migrated_into_one_week():
    state = migrate_state({
        "Math": {"Homework": True, "Quiz": False},
        "Physics": {"Lab": True, "Homework": False},
    })
    assert state == {
        "version": 1,
        "overview": [[[True, False, False], [False, False, True]]],
        "class_names": ["Math", "Physics"],
        "task_names": ["Homework", "Quiz", "Lab"],
    }
    ov = Overview(state)
    assert ov.is_completed(0, "Physics", "Lab")


def test_newer_version_is_refused():
    with pytest.raises(StorageError):
        migrate_state({"version": 2, "overview": []})
    with pytest.raises(StorageError):
        migrate_state({"version": "1"})


def test_save_failure_leaves_file_untouched(tmp_path):
    path = tmp_path / ".clover"
    path.write_text("original")
    with pytest.raises(StorageError):
        Storage.save_state(path, {"bad": object()})
    assert path.read_text() == "original"


def test_save_into_missing_directory_is_fatal(tmp_path):
    with pytest.raises(StorageError):
        Storage.save_state(tmp_path / "missing" / ".clover", {})
