from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from hexview.core.codepage import DEFAULT_CODEPAGE, as_char
from hexview.core.errors import InvalidLayoutError

if TYPE_CHECKING:
    from hexview.core.view import HexView

ADDRESS_WIDTH = 8
HEX_PLACEHOLDER = "  "
CHAR_PLACEHOLDER = " "


@dataclass(frozen=True)
class Padding:
    """Placeholder columns drawn before and after the real bytes of a row."""

    left: int = 0
    right: int = 0

    @classmethod
    def from_left(cls, left: int) -> Padding:
        return cls(left=left)

    @classmethod
    def from_right(cls, right: int) -> Padding:
        return cls(right=right)


def calculate_begin_padding(address_offset: int, row_width: int) -> int:
    if row_width <= 0:
        raise InvalidLayoutError(row_width)
    return address_offset % row_width


def calculate_end_padding(data_size: int, row_width: int) -> int:
    if row_width <= 0:
        raise InvalidLayoutError(row_width)
    return (row_width - data_size % row_width) % row_width


def byte_view(data: bytes | bytearray | memoryview) -> memoryview:
    view = memoryview(data)
    if view.format != "B" or view.ndim != 1:
        view = view.cast("B")
    return view


def format_hex(chunk: Sequence[int], padding: Padding) -> str:
    columns = [HEX_PLACEHOLDER] * padding.left
    columns.extend(f"{b:02X}" for b in chunk)
    columns.extend([HEX_PLACEHOLDER] * padding.right)
    return " ".join(columns)


def format_chars(codepage: Sequence[str], chunk: Sequence[int], padding: Padding) -> str:
    chars = "".join(as_char(b, codepage) for b in chunk)
    return f"{CHAR_PLACEHOLDER * padding.left}{chars}{CHAR_PLACEHOLDER * padding.right}"


def format_line(
    address: int,
    codepage: Sequence[str],
    chunk: Sequence[int],
    padding: Padding,
) -> str:
    addr_text = f"{address:0{ADDRESS_WIDTH}X}"
    hex_text = format_hex(chunk, padding)
    char_text = format_chars(codepage, chunk, padding)
    return f"{addr_text}  {hex_text}  | {char_text} |"


def hexdump(
    data: bytes | bytearray | memoryview,
    base_addr: int = 0,
    bytes_per_line: int = 16,
    codepage: Sequence[str] | None = None,
) -> list[str]:
    """Lay out ``data`` as rows aligned to multiples of ``bytes_per_line``.

    ``base_addr`` is the address of ``data[0]``. The first row starts at the
    aligned address below it and is left-padded; the last row is
    right-padded to full width. Every row renders exactly
    ``bytes_per_line`` columns. The buffer is sliced through a memoryview
    and never copied.
    """
    if bytes_per_line <= 0:
        raise InvalidLayoutError(bytes_per_line)
    if codepage is None:
        codepage = DEFAULT_CODEPAGE

    view = byte_view(data)
    width = bytes_per_line
    size = len(view)
    begin_padding = calculate_begin_padding(base_addr, width)
    end_padding = calculate_end_padding(begin_padding + size, width)
    address = base_addr - begin_padding

    if begin_padding + size + end_padding <= width:
        # empty data on an aligned address still gets one full row
        right = width - begin_padding - size
        return [format_line(address, codepage, view, Padding(begin_padding, right))]

    lines: list[str] = []
    offset = 0
    if begin_padding != 0:
        head = width - begin_padding
        lines.append(
            format_line(address, codepage, view[:head], Padding.from_left(begin_padding))
        )
        offset += head
        address += width

    while offset + width <= size:
        lines.append(format_line(address, codepage, view[offset : offset + width], Padding()))
        offset += width
        address += width

    if end_padding != 0:
        lines.append(
            format_line(address, codepage, view[offset:], Padding.from_right(end_padding))
        )
    return lines


def render(view: HexView) -> str:
    return "\n".join(
        hexdump(
            view.data,
            view.address_offset,
            bytes_per_line=view.row_width,
            codepage=view.codepage,
        )
    )
