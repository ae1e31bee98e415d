import sys

from app_state import AppState
from config_paths import ensure_config_dirs, load_config
from console import Console
from errors import CsvManError
from orchestrator import Orchestrator
from row_io import CsvRowHandler
from table import Table

try:
    from _version import __version__
except ImportError:
    __version__ = "0.0.0"

USAGE = "csvman - terminal CSV cell editor\n\nUsage:\n  csvman [path]\n  csvman -v\n"


def load_state(path: str, config: dict) -> AppState:
    handler = CsvRowHandler(path, config["DELIMITER"])
    table = Table.load(handler)
    return AppState(table, path, save_dir=config["SAVE_DIR"])


def main(argv=None, console=None):
    args = sys.argv[1:] if argv is None else argv

    if "-v" in args or "-V" in args:
        print(__version__)
        return 0

    if "-h" in args or len(args) > 1:
        print(USAGE)
        return 0 if "-h" in args else 2

    ensure_config_dirs()
    config = load_config()
    path = args[0] if args else config["DEFAULT_PATH"]

    try:
        state = load_state(path, config)
    except CsvManError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if console is None:
        console = Console(pause_seconds=config["PAUSE_SECONDS"])
    Orchestrator(state, console, config).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
