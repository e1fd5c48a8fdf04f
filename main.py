import logging
import os
import sys

from _version import __version__
from command_loop import CommandLoop
from config_paths import HISTORY_PATH, ensure_config_dirs, load_config
from errors import RowEditError
from file_handler import DelimitedFileHandler
from grid_editor import GridEditor
from history_manager import HistoryManager

DEFAULT_PATH = "./testdata.csv"
LOG_LEVELS = {"debug", "info", "warning", "error", "critical"}

USAGE = (
    "rowedit - terminal editor for delimited text files\n\nUsage:\n"
    "  rowedit [-d <delimiter>] [--log-level <level>] [path]\n"
    "  rowedit -v\n"
)


def parse_args(args):
    """Split argv into options. Returns a dict, or a str describing the error."""
    opts = {"path": None, "delimiter": None, "log_level": "warning", "help": False, "version": False}
    it = iter(args)
    for arg in it:
        if arg in ("-h", "--help"):
            opts["help"] = True
        elif arg in ("-v", "-V", "--version"):
            opts["version"] = True
        elif arg in ("-d", "--delimiter"):
            value = next(it, None)
            if value is None or len(value) != 1:
                return f"{arg} needs a single-character delimiter"
            opts["delimiter"] = value
        elif arg == "--log-level":
            value = next(it, None)
            if value is None or value.lower() not in LOG_LEVELS:
                return f"--log-level must be one of {', '.join(sorted(LOG_LEVELS))}"
            opts["log_level"] = value.lower()
        elif arg.startswith("-") and arg != "-":
            return f"Unknown option: {arg}"
        elif opts["path"] is None:
            opts["path"] = arg
        else:
            return "Only one path may be given"
    return opts


def configure_logging(level: str):
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv=None):
    opts = parse_args(sys.argv[1:] if argv is None else argv)
    if isinstance(opts, str):
        print(opts, file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return 2

    if opts["version"]:
        print(__version__)
        return 0

    if opts["help"]:
        print(USAGE)
        return 0

    configure_logging(opts["log_level"])
    cfg = load_config()

    path = opts["path"] or DEFAULT_PATH
    handler = DelimitedFileHandler(path, delimiter=opts["delimiter"] or cfg["DELIMITER"])
    try:
        editor = GridEditor(handler, rollback_on_save_failure=cfg["ROLLBACK_ON_SAVE_FAILURE"])
    except RowEditError as e:
        print(f"Unable to load {path}: {e}", file=sys.stderr)
        return 1

    readline = _load_readline()
    history = None
    try:
        ensure_config_dirs()
    except OSError as e:
        logging.getLogger(__name__).warning("History disabled: %s", e)
    else:
        history = HistoryManager(HISTORY_PATH, max_items=cfg["HISTORY_SIZE"])
        history.load()
        if readline is not None:
            _install_readline_history(history, readline)

    loop = CommandLoop(
        editor,
        history=history,
        page_size=cfg["PAGE_SIZE"],
        color=cfg["COLOR"] and sys.stdout.isatty() and "NO_COLOR" not in os.environ,
        reload_each_command=cfg["RELOAD_EACH_COMMAND"],
        answer_fn=_answer_reader(readline),
    )
    return loop.run()


def _load_readline():
    try:
        import readline
    except ImportError:
        # missing on some platforms
        return None
    return readline


def _install_readline_history(history, readline):
    for item in history.items:
        readline.add_history(item)


def _answer_reader(readline):
    """input() for sub-prompt answers that leaves command history untouched."""
    if readline is None:
        return None

    def read_answer(prompt=""):
        before = readline.get_current_history_length()
        try:
            return input(prompt)
        finally:
            # readline skips empty lines and repeats of the last entry
            while readline.get_current_history_length() > before:
                readline.remove_history_item(readline.get_current_history_length() - 1)

    return read_answer


if __name__ == "__main__":
    sys.exit(main())
