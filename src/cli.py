"""Command-line surface for the clover tracker.

One invocation runs one subcommand against one Overview. The CLI only
translates arguments into Overview calls and prints the outcome; loading
and saving happen in main.py.
"""
import argparse
from models import OverviewError
from overview import Overview
from table import render_table

MUTATING_COMMANDS = ('addclass', 'addtask', 'settime', 'complete')


def _non_negative_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f'invalid integer: {raw!r}') from None
    if value < 0:
        raise argparse.ArgumentTypeError(f'must be non-negative: {value}')
    return value


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog='clover',
        description='Track which tasks are done for which class, week by week.',
    )
    ap.add_argument('-c', '--config', default=None, metavar='FILE',
                    help='Use a custom state file (must already exist; default: ~/.clover)')
    sub = ap.add_subparsers(dest='command', metavar='<command>')

    p = sub.add_parser('addclass', help='Adds a new class to the overview')
    p.add_argument('class_name', help='The class name')

    p = sub.add_parser('addtask', help='Adds a new task to the overview')
    p.add_argument('task_name', help='The task name')

    p = sub.add_parser('settime', help='Sets the amount of weeks the overview is supposed to track')
    p.add_argument('week_count', type=_non_negative_int, help='The week count')

    p = sub.add_parser('complete', help='Completes the task for the given class')
    p.add_argument('-c', '--class', dest='class_name', required=True,
                   help='The class to complete the task in')
    p.add_argument('-t', '--task', dest='task_name', required=True, help='The task to complete')
    p.add_argument('-w', '--week', type=_non_negative_int, required=True,
                   help='The week to complete the task for')

    sub.add_parser('show', help='Shows the class overview')
    return ap


class CLI:
    def __init__(self, overview: Overview, styled: bool = True):
        self.overview: Overview = overview
        self.styled: bool = styled

    def dispatch(self, args: argparse.Namespace) -> bool:
        """Run the parsed subcommand. Returns True when state should be saved."""
        cmd = args.command
        if cmd == 'addclass':
            self._cmd_addclass(args.class_name)
        elif cmd == 'addtask':
            self._cmd_addtask(args.task_name)
        elif cmd == 'settime':
            self._cmd_settime(args.week_count)
        elif cmd == 'complete':
            self._cmd_complete(args.week, args.class_name, args.task_name)
        elif cmd == 'show':
            self._cmd_show()
        return cmd in MUTATING_COMMANDS

    # ---- individual command helpers ----
    def _cmd_addclass(self, class_name: str) -> None:
        if not class_name.strip():
            print("Class name required.")
            return
        try:
            self.overview.add_class(class_name)
        except OverviewError as e:
            print(e)
            return
        print(f"Added class {class_name}")

    def _cmd_addtask(self, task_name: str) -> None:
        if not task_name.strip():
            print("Task name required.")
            return
        try:
            self.overview.add_task(task_name)
        except OverviewError as e:
            print(e)
            return
        print(f"Added task {task_name}")

    def _cmd_settime(self, week_count: int) -> None:
        self.overview.set_time_span(week_count)
        print(f"Set week count to {week_count}")

    def _cmd_complete(self, week: int, class_name: str, task_name: str) -> None:
        try:
            self.overview.complete_task(week, class_name, task_name)
        except OverviewError as e:
            print(f"Failed to complete {task_name} for {class_name} in week {week}: {e}")
            return
        print(f"Completed {task_name} for {class_name} in week {week}")

    def _cmd_show(self) -> None:
        print(render_table(self.overview, styled=self.styled))

