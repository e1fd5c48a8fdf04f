# ~/Apps/rowedit/command_loop.py
import logging
import sys

from errors import RowEditError
from pagination import Paginator
from status_bar import render_status
from table_row import format_rows

logger = logging.getLogger(__name__)

HELP_TEXT = """rowedit prompt:
1. DISPLAY [<page> [<limit>]] - Display all data, or one page of <limit> rows
2. DELETE <row_index> - Delete row
3. DELCOL <col_index> - Delete column
4. MODIFY <row_index> <col_index> - Modify field
5. RELOAD - Re-read the file
Type 'help' for this text, 'quit' or 'exit' to exit"""

PAGER_HINT = "Press 'n' for next page , 'b' to back page, 'q' to quit: "
VALUE_PROMPT = "Please Enter the new value: "
PROMPT = "> "
QUIT_WORDS = {"quit", "exit", "q"}


class CommandLoop:
    """Line-oriented prompt driving a GridEditor.

    Bad input and editor errors are reported as ``[ERR] ...`` lines and the
    session goes on; it ends only on quit/exit or end of input.
    """

    def __init__(
        self,
        editor,
        input_fn=None,
        output=None,
        error_output=None,
        history=None,
        page_size: int = 10,
        color: bool = True,
        reload_each_command: bool = True,
        answer_fn=None,
    ):
        self.editor = editor
        self.input_fn = input_fn if input_fn is not None else input
        self.output = output if output is not None else sys.stdout
        self.error_output = error_output if error_output is not None else sys.stderr
        self.history = history
        self.page_size = page_size
        self.color = color
        self.reload_each_command = reload_each_command
        # reads pager keys and field values, kept out of command history
        self.answer_fn = answer_fn
        self.loaded = True

    # ---------- output ----------
    def _print(self, text=""):
        print(text, file=self.output)

    def _error(self, text):
        print(f"[ERR] {text}", file=self.error_output)

    def _show(self, rendered):
        for line in format_rows(rendered, color=self.color):
            self._print(line)

    # ---------- main loop ----------
    def run(self) -> int:
        self._print(HELP_TEXT)
        while True:
            if self.reload_each_command:
                self._reload()
            try:
                line = self.input_fn(PROMPT)
            except (EOFError, KeyboardInterrupt):
                self._print()
                return 0
            if not self.execute(line):
                return 0

    def _reload(self) -> bool:
        try:
            self.editor.reload()
        except RowEditError as e:
            self.loaded = False
            self._error(f"Unable to read data: {e}")
            return False
        self.loaded = True
        return True

    def execute(self, line: str) -> bool:
        """Run one command line. Returns False when the session should end."""
        line = (line or "").strip()
        if not line:
            return True
        if self.history is not None:
            self.history.record(line)

        parts = line.lower().split()
        command, params = parts[0], parts[1:]

        if len(parts) == 1 and command in QUIT_WORDS:
            return False

        handler = {
            1: self._dispatch_no_args,
            2: self._dispatch_one_arg,
            3: self._dispatch_two_args,
        }.get(len(parts))
        if handler is None:
            self._error("Invalid input")
            return True

        try:
            handler(command, params)
        except RowEditError as e:
            logger.debug("Command %r failed: %s", line, e)
            self._error(str(e))
        return True

    # ---------- dispatch ----------
    def _dispatch_no_args(self, command, _params):
        if command == "display":
            if self._require_loaded():
                self._show(self.editor.display())
        elif command == "reload":
            if self._reload():
                self._print(f"Reloaded {self.editor.row_count} rows")
        elif command == "help":
            self._print(HELP_TEXT)
        else:
            self._error(f"Unknown command: {command}")

    def _dispatch_one_arg(self, command, params):
        if command not in {"delete", "delcol", "display"}:
            self._error(f"Unknown command: {command}")
            return
        value = self._parse_param(params[0])
        if value is None:
            return
        if command == "display":
            self._page(value, self.page_size)
        elif self._require_loaded():
            if command == "delete":
                self.editor.delete_row(value)
            else:
                self.editor.delete_column(value)

    def _dispatch_two_args(self, command, params):
        if command not in {"modify", "display"}:
            self._error(f"Unknown command: {command}")
            return
        first = self._parse_param(params[0])
        if first is None:
            return
        second = self._parse_param(params[1])
        if second is None:
            return
        if command == "display":
            if second < 1:
                self._error(f"Invalid parameter: {params[1]}")
                return
            self._page(first, second)
        elif self._require_loaded():
            try:
                value = self._ask(VALUE_PROMPT).strip()
            except (EOFError, KeyboardInterrupt):
                self._print()
                self._error("Modify canceled")
                return
            self.editor.modify(first, second, value)

    def _parse_param(self, text):
        try:
            value = int(text)
        except ValueError:
            value = -1
        if value < 0:
            self._error(f"Invalid parameter: {text}")
            return None
        return value

    def _ask(self, prompt):
        if self.answer_fn is not None:
            return self.answer_fn(prompt)
        return self.input_fn(prompt)

    def _require_loaded(self) -> bool:
        if not self.loaded:
            self._error("Data is not loaded; fix the file and use 'reload'")
            return False
        return True

    # ---------- paging ----------
    def _show_page(self, paginator: Paginator, window):
        start_row, end_row = window
        self._show(self.editor.display_page(paginator.page_size, paginator.page))
        self._print(render_status({
            "file_path": self.editor.path,
            "page_index": paginator.page,
            "page_size": paginator.page_size,
            "page_start": start_row,
            "page_end": end_row,
            "total_rows": self.editor.row_count,
            "total_cols": self.editor.col_count,
        }).rstrip())

    def _page(self, page: int, limit: int):
        if not self._require_loaded():
            return
        paginator = Paginator(limit, page)
        self._show_page(paginator, paginator.window(self.editor.row_count))

        self._print(PAGER_HINT)
        while True:
            try:
                choice = self._ask(PROMPT).strip().lower()
            except (EOFError, KeyboardInterrupt):
                self._print()
                return
            if choice == "q":
                return
            if choice not in {"n", "b"}:
                self._error("Invalid input")
                continue
            move = paginator.next_page if choice == "n" else paginator.prev_page
            try:
                window = move(self.editor.row_count)
            except RowEditError as e:
                self._error(str(e))
                continue
            self._show_page(paginator, window)
