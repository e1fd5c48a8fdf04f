from dataclasses import dataclass

RESET = "\x1b[0m"
SERIAL_STYLE = "\x1b[37;1m"
CELL_STYLE = "\x1b[32m"


@dataclass(frozen=True)
class RenderedRow:
    serial_number: int
    fields: tuple[str, ...]


def format_row(row: RenderedRow, color: bool = True, serial_width: int = 5, cell_width: int = 10) -> str:
    serial = f"{row.serial_number:>{serial_width}}"
    cells = [f"{cell:<{cell_width}}" for cell in row.fields]
    if not color:
        return f"{serial} " + "".join(cells)
    return f"{SERIAL_STYLE}{serial}{RESET} " + "".join(
        f"{CELL_STYLE}{cell}{RESET}" for cell in cells
    )


def format_rows(rows, color: bool = True) -> list[str]:
    return [format_row(row, color=color) for row in rows]
