"""Overview logic: the week x class x task completion grid and its name axes.

Class and task names are append-only; a name's position in its list is
its index into every week of the grid. Rendering lives in table.py.
"""
from typing import Any, Dict, List, Mapping, Optional
from models import (
    ClassEntry, Coordinate, Grid, Week,
    DuplicateClass, DuplicateTask, InvalidClass, InvalidTask, InvalidWeek,
)

SCHEMA_VERSION = 1


class Overview:
    def __init__(self, state: Optional[Mapping[str, Any]] = None):
        self.class_names: List[str] = []
        self.task_names: List[str] = []
        self.grid: Grid = []
        if state:
            self._load_from_dict(state)

    # -------------------- loading --------------------
    def _load_from_dict(self, state: Mapping[str, Any]) -> None:
        self.class_names = [str(name) for name in state.get('class_names') or []]
        self.task_names = [str(name) for name in state.get('task_names') or []]
        grid: Grid = []
        for raw_week in state.get('overview') or []:
            week: Week = []
            raw_week = list(raw_week or [])
            for class_index in range(len(self.class_names)):
                raw_class = raw_week[class_index] if class_index < len(raw_week) else []
                week.append(self._fit_class_entry(raw_class or []))
            grid.append(week)
        self.grid = grid

    def _fit_class_entry(self, raw: List[Any]) -> ClassEntry:
        # hand-edited files may hold ragged rows; pad or cut them to the task axis
        entry = [bool(value) for value in raw[:len(self.task_names)]]
        entry.extend(False for _ in range(len(self.task_names) - len(entry)))
        return entry

    # -------------------- sizes --------------------
    @property
    def week_count(self) -> int:
        return len(self.grid)

    @property
    def class_count(self) -> int:
        return len(self.class_names)

    @property
    def task_count(self) -> int:
        return len(self.task_names)

    def _empty_class(self) -> ClassEntry:
        return [False] * self.task_count

    def _empty_week(self) -> Week:
        return [self._empty_class() for _ in range(self.class_count)]

    # -------------------- structural mutation --------------------
    def add_class(self, class_name: str) -> None:
        if class_name in self.class_names:
            raise DuplicateClass(class_name)
        self.class_names.append(class_name)
        for week in self.grid:
            week.append(self._empty_class())

    def add_task(self, task_name: str) -> None:
        if task_name in self.task_names:
            raise DuplicateTask(task_name)
        self.task_names.append(task_name)
        for week in self.grid:
            for tasks in week:
                tasks.append(False)

    def set_time_span(self, week_count: int) -> None:
        """Resize the week dimension to exactly week_count weeks.

        Shrinking drops trailing weeks and their completions for good;
        growing appends all-False weeks. Retained weeks are untouched.
        """
        if week_count < 0:
            raise ValueError(f'week count must be non-negative, got {week_count}')
        if len(self.grid) > week_count:
            del self.grid[week_count:]
        else:
            for _ in range(len(self.grid), week_count):
                self.grid.append(self._empty_week())

    # -------------------- lookups --------------------
    def locate(self, week: int, class_name: str, task_name: str) -> Coordinate:
        """Resolve names to indices, checking week, then class, then task."""
        if week < 0 or week >= len(self.grid):
            raise InvalidWeek(week)
        try:
            class_index = self.class_names.index(class_name)
        except ValueError:
            raise InvalidClass(class_name) from None
        try:
            task_index = self.task_names.index(task_name)
        except ValueError:
            raise InvalidTask(task_name) from None
        return Coordinate(week, class_index, task_index)

    def is_completed(self, week: int, class_name: str, task_name: str) -> bool:
        coord = self.locate(week, class_name, task_name)
        return self.grid[coord.week][coord.class_index][coord.task_index]

    # -------------------- completion --------------------
    def complete_task(self, week: int, class_name: str, task_name: str) -> Coordinate:
        coord = self.locate(week, class_name, task_name)
        self.grid[coord.week][coord.class_index][coord.task_index] = True
        return coord

    # -------------------- serialization --------------------
    def get_state(self) -> Dict[str, Any]:
        return {
            'version': SCHEMA_VERSION,
            'overview': [[list(tasks) for tasks in week] for week in self.grid],
            'class_names': list(self.class_names),
            'task_names': list(self.task_names),
        }

    def __str__(self) -> str:
        return (f'Classes: {self.class_count}, '
                f'Tasks: {self.task_count}, '
                f'Weeks: {self.week_count}')
