"""Persistence helpers (locate/load/migrate/save) for the overview state.

The canonical file is a versioned grid document:

    {"version": 1, "overview": [[[false]]], "class_names": [...], "task_names": [...]}

Older files without "version" are read as-is. Files in the loose
{class: {task: bool}} shape are migrated into a single week on load and
only ever written back in the canonical shape.
"""
import json
from pathlib import Path
from typing import Any, Dict, List
from overview import SCHEMA_VERSION

DEFAULT_FILENAME = '.clover'

StateDict = Dict[str, Any]
GRID_KEYS = ('overview', 'class_names', 'task_names')


class StorageError(Exception):
    """The state file cannot be located, read or written. Not recoverable."""


class StateFormatError(ValueError):
    """The state file was read but does not hold a usable document."""


class Storage:
    @staticmethod
    def default_path() -> Path:
        try:
            home = Path.home()
        except (RuntimeError, KeyError) as e:
            raise StorageError('Failed to find home directory') from e
        return home / DEFAULT_FILENAME

    @staticmethod
    def ensure_exists(path: Path) -> None:
        """Create an empty state file at path if there is none yet."""
        if path.exists():
            return
        try:
            path.touch()
        except OSError as e:
            raise StorageError(
                'Failed to create config file, does the directory exist or is it read-only?'
            ) from e

    @staticmethod
    def load_state(path: Path) -> StateDict:
        """Read and migrate the state at path.

        Empty file -> empty dict. Unreadable file -> StorageError.
        Unparseable content -> StateFormatError.
        """
        try:
            text = path.read_text(encoding='utf-8')
        except OSError as e:
            raise StorageError(f'Failed to read config file {path}') from e
        if not text.strip():
            return {}
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise StateFormatError(f'{path} is not valid JSON: {e.msg}') from e
        if not isinstance(data, dict):
            raise StateFormatError(f'{path} does not hold a JSON object')
        return migrate_state(data)

    @staticmethod
    def save_state(path: Path, state: StateDict) -> None:
        """Persist state to path (pretty-printed)."""
        # serialize first so a failure never leaves a truncated file behind
        try:
            payload = json.dumps(state, indent=4)
        except (TypeError, ValueError) as e:
            raise StorageError('Failed to serialize current configuration!') from e
        try:
            path.write_text(payload, encoding='utf-8')
        except OSError as e:
            raise StorageError(f'Failed to write to config file {path}') from e


def migrate_state(data: Dict[str, Any]) -> StateDict:
    """Bring any known on-disk shape up to the current schema."""
    if 'version' in data:
        version = data['version']
        if not isinstance(version, int) or isinstance(version, bool) or version > SCHEMA_VERSION:
            raise StorageError(f'Unsupported config version {version!r}, refusing to overwrite it')
        return _check_grid_document(data)
    if not data:
        return data
    if any(key in data for key in GRID_KEYS):
        return _check_grid_document(data)
    if all(isinstance(tasks, dict) and all(isinstance(v, bool) for v in tasks.values())
           for tasks in data.values()):
        return _migrate_class_map(data)
    raise StateFormatError('Unrecognized config layout')


def _is_list_of(value: Any, kind: type) -> bool:
    return isinstance(value, list) and all(isinstance(item, kind) for item in value)


def _check_grid_document(data: StateDict) -> StateDict:
    """Reject grid documents whose names or cells have the wrong JSON types."""
    for key in ('class_names', 'task_names'):
        if key in data and not _is_list_of(data[key], str):
            raise StateFormatError(f'"{key}" must be a list of strings')
    weeks = data.get('overview', [])
    if not _is_list_of(weeks, list) or not all(
        _is_list_of(week, list) and all(_is_list_of(tasks, bool) for tasks in week)
        for week in weeks
    ):
        raise StateFormatError('"overview" must be a list of weeks of classes of booleans')
    return data


def _migrate_class_map(data: Dict[str, Dict[str, Any]]) -> StateDict:
    """Turn a {class: {task: bool}} map into a one-week grid document."""
    class_names = list(data)
    task_names: List[str] = []
    for tasks in data.values():
        for task in tasks:
            if task not in task_names:
                task_names.append(task)
    week = [[bool(data[c].get(t, False)) for t in task_names] for c in class_names]
    return {
        'version': SCHEMA_VERSION,
        'overview': [week],
        'class_names': class_names,
        'task_names': task_names,
    }
