"""Main entry point for clover.

Resolves the state file, loads it into an Overview, runs one command and
writes the state back when the command may have changed it.
"""
from pathlib import Path
from typing import List, Optional
from cli import CLI, build_parser
from overview import Overview
from storage import Storage, StorageError, StateFormatError


def resolve_state_path(config: Optional[str]) -> Path:
    """Custom paths must already exist; the default one is created on demand."""
    if config:
        path = Path(config).expanduser()
        print(f"Loaded custom config file {path}")
        if not path.is_file():
            raise StorageError(f"Invalid config file path {path}")
        return path
    path = Storage.default_path()
    Storage.ensure_exists(path)
    return path


def load_overview(path: Path, custom: bool = False) -> Overview:
    """Unparseable default files start over empty; custom ones are never replaced."""
    try:
        state = Storage.load_state(path)
    except StateFormatError as e:
        if custom:
            raise StorageError(f"Invalid config file {path}: {e}") from e
        print("Failed to parse config file!")
        state = {}
    return Overview(state)


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return
    try:
        path = resolve_state_path(args.config)
        overview = load_overview(path, custom=bool(args.config))
        if CLI(overview).dispatch(args):
            Storage.save_state(path, overview.get_state())
    except StorageError as e:
        raise SystemExit(str(e)) from e


if __name__ == "__main__":
    main()
