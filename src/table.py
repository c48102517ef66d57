"""Fixed-width text rendering of an Overview.

Layout: a first column holding " week NN " labels, then one column per
class. Every class column is wide enough for its own name and for one
full row of task labels, whichever is wider:

    -------------------------------
            | Math     | Physics  |
            -----------------------
            | Homework | Homework |
    -------------------------------
     week 0 | ████████ |          |
    -------------------------------

Widths are always measured on the raw names, so styled output lines up
exactly like plain output.
"""
from dataclasses import dataclass
from typing import Callable, List, Sequence, Tuple
from overview import Overview
from theme import color, HEADER_COLOR, RULE_COLOR, DONE_COLOR

GLYPH = '█'
WEEK_LABEL = ' week '
SEP = '|'


@dataclass(frozen=True)
class TableLayout:
    first_column_width: int
    task_block_width: int
    column_widths: Tuple[int, ...]

    @property
    def total_width(self) -> int:
        return self.first_column_width + sum(self.column_widths) + len(self.column_widths) + 1


def compute_layout(overview: Overview) -> TableLayout:
    digits = len(str(overview.week_count))
    first_column_width = len(WEEK_LABEL) + digits + 1
    task_block_width = sum(1 + len(t) + 1 for t in overview.task_names) + max(overview.task_count - 1, 0)
    column_widths = tuple(max(len(c) + 2, task_block_width) for c in overview.class_names)
    return TableLayout(first_column_width, task_block_width, column_widths)


def _column(cells: Sequence[str], layout: TableLayout, width: int) -> str:
    # cells are " text " blocks; the last one absorbs the leftover width
    return SEP.join(cells) + ' ' * (width - layout.task_block_width) + SEP


def render_table(overview: Overview, styled: bool = False) -> str:
    paint: Callable[..., str] = color if styled else (lambda text, *styles: text)
    layout = compute_layout(overview)
    fcw = layout.first_column_width
    blank = ' ' * fcw
    rule = paint('-' * layout.total_width, RULE_COLOR)
    lines: List[str] = [rule]

    header = blank + SEP
    for name, width in zip(overview.class_names, layout.column_widths):
        header += ' ' + paint(name, HEADER_COLOR) + ' ' * (width - len(name) - 1) + SEP
    lines.append(header)
    lines.append(blank + paint('-' * (layout.total_width - fcw), RULE_COLOR))

    task_cells = [f' {task} ' for task in overview.task_names]
    lines.append(blank + SEP + ''.join(_column(task_cells, layout, w) for w in layout.column_widths))

    digits = len(str(overview.week_count))
    for week_index, week in enumerate(overview.grid):
        lines.append(rule)
        row = f'{WEEK_LABEL}{week_index:0{digits}d} ' + SEP
        for states, width in zip(week, layout.column_widths):
            cells = []
            for done, task in zip(states, overview.task_names):
                run = paint(GLYPH * len(task), DONE_COLOR) if done else ' ' * len(task)
                cells.append(f' {run} ')
            row += _column(cells, layout, width)
        lines.append(row)

    lines.append(rule)
    return '\n'.join(lines)
