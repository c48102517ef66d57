"""Data models for the clover progress tracker.

The grid is stored as plain nested lists so it serializes straight to
JSON: grid[week][class_index][task_index] -> completed?
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import List

ClassEntry = List[bool]
Week = List[ClassEntry]
Grid = List[Week]


@dataclass(frozen=True)
class Coordinate:
    """A validated position in the grid.

    Fields:
        week: Index into the week dimension.
        class_index: Position of the class in class_names.
        task_index: Position of the task in task_names.
    """
    week: int
    class_index: int
    task_index: int


class OverviewError(Exception):
    """Base class for recoverable errors raised by the Overview."""


class InvalidWeek(OverviewError):
    def __init__(self, week: int):
        super().__init__('Invalid week supplied!')
        self.week = week


class InvalidClass(OverviewError):
    def __init__(self, class_name: str):
        super().__init__('Invalid class supplied!')
        self.class_name = class_name


class InvalidTask(OverviewError):
    def __init__(self, task_name: str):
        super().__init__('Invalid task supplied!')
        self.task_name = task_name


class DuplicateClass(OverviewError):
    def __init__(self, class_name: str):
        super().__init__(f'Class "{class_name}" already exists!')
        self.class_name = class_name


class DuplicateTask(OverviewError):
    def __init__(self, task_name: str):
        super().__init__(f'Task "{task_name}" already exists!')
        self.task_name = task_name
