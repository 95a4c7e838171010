from __future__ import annotations


class HexViewError(Exception):
    pass


class InvalidLayoutError(HexViewError, ValueError):
    """Raised when a view cannot be laid out, i.e. for a row width below one."""

    def __init__(self, row_width: int) -> None:
        super().__init__(f"invalid row width: {row_width}")
        self.row_width = row_width
