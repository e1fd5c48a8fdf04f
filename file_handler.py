import logging
import os
import shutil
import tempfile

from errors import EmptyDataset, StorageUnreadable, StorageUnwritable
from grid import Grid

logger = logging.getLogger(__name__)


class DelimitedFileHandler:
    """Reads and writes a delimited text file holding one Grid.

    The format is deliberately plain: one row per line, fields joined by a
    single delimiter character, no header and no quoting.
    """

    DEFAULT_DELIMITER = ","

    def __init__(self, path: str, delimiter: str = DEFAULT_DELIMITER, encoding: str = "utf-8"):
        if not isinstance(delimiter, str) or len(delimiter) != 1:
            raise ValueError(f"delimiter must be a single character, got {delimiter!r}")
        self.path = path
        self.delimiter = delimiter
        self.encoding = encoding

    def load(self) -> Grid:
        try:
            with open(self.path, "r", encoding=self.encoding, newline="") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise StorageUnreadable(self.path, str(e)) from e

        rows = self.parse(text)
        if not rows:
            raise EmptyDataset(f"{self.path} has no rows")
        logger.debug("Loaded %d rows from %s", len(rows), self.path)
        return Grid(rows)

    def parse(self, text: str) -> list[list[str]]:
        if text == "":
            return []
        lines = text.split("\n")
        if lines[-1] == "":
            # a trailing newline ends the last row, it does not start a new one
            lines.pop()
        return [self._strip_cr(line).split(self.delimiter) for line in lines]

    def serialize(self, rows) -> str:
        return "\n".join(self.delimiter.join(row) for row in rows)

    def save(self, rows) -> None:
        content = self.serialize(rows)
        # write through symlinks to the real file
        target = os.path.realpath(self.path)
        dir_name = os.path.dirname(target) or "."
        temp_filename = None
        try:
            with tempfile.NamedTemporaryFile(
                mode="w",
                encoding=self.encoding,
                newline="",
                dir=dir_name,
                prefix=".rowedit-",
                suffix=os.path.splitext(target)[1],
                delete=False,
            ) as temp_file:
                temp_filename = temp_file.name
                temp_file.write(content)
                temp_file.flush()
                os.fsync(temp_file.fileno())
            self._match_mode(temp_filename, target)
            os.replace(temp_filename, target)
        except OSError as e:
            if temp_filename and os.path.exists(temp_filename):
                try:
                    os.remove(temp_filename)
                except OSError:
                    logger.warning("Could not remove temporary file %s", temp_filename)
            logger.error("Saving %s failed: %s", self.path, e)
            raise StorageUnwritable(self.path, str(e)) from e
        logger.debug("Wrote %d bytes to %s", len(content), target)

    @staticmethod
    def _match_mode(temp_filename: str, target: str) -> None:
        if os.path.exists(target):
            shutil.copymode(target, temp_filename)
            return
        # new files get the usual 0666 & ~umask instead of mkstemp's 0600
        umask = os.umask(0)
        os.umask(umask)
        os.chmod(temp_filename, 0o666 & ~umask)

    @staticmethod
    def _strip_cr(line: str) -> str:
        return line[:-1] if line.endswith("\r") else line
