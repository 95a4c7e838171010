from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field, replace

from hexview.core.codepage import DEFAULT_CODEPAGE, get_codepage
from hexview.core.settings import Settings
from hexview.core.state import SETTINGS
from hexview.ui.hexdump import (
    byte_view,
    calculate_begin_padding,
    calculate_end_padding,
    hexdump,
    render,
)


@dataclass(frozen=True)
class HexView:
    """How to display one buffer.

    The view keeps references to ``data`` and ``codepage``; the caller must
    not mutate either while the view is being rendered. A zero or negative
    ``row_width`` is accepted here and rejected by rendering.
    """

    data: bytes | bytearray | memoryview = field(repr=False)
    address_offset: int = 0
    codepage: Sequence[str] = field(default=DEFAULT_CODEPAGE, repr=False)
    row_width: int = 16

    def begin_padding(self) -> int:
        return calculate_begin_padding(self.address_offset, self.row_width)

    def end_padding(self) -> int:
        return calculate_end_padding(
            self.begin_padding() + len(byte_view(self.data)),
            self.row_width,
        )

    def lines(self) -> list[str]:
        return hexdump(
            self.data,
            self.address_offset,
            bytes_per_line=self.row_width,
            codepage=self.codepage,
        )

    def render(self) -> str:
        return render(self)

    def __str__(self) -> str:
        return render(self)


class HexViewBuilder:
    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        self._view = HexView(data)

    @classmethod
    def _from_view(cls, view: HexView) -> HexViewBuilder:
        builder = cls.__new__(cls)
        builder._view = view
        return builder

    def address_offset(self, offset: int) -> HexViewBuilder:
        return self._from_view(replace(self._view, address_offset=offset))

    def codepage(self, codepage: Sequence[str]) -> HexViewBuilder:
        return self._from_view(replace(self._view, codepage=codepage))

    def row_width(self, width: int) -> HexViewBuilder:
        return self._from_view(replace(self._view, row_width=width))

    def finish(self) -> HexView:
        return self._view


def view_from_settings(
    data: bytes | bytearray | memoryview, settings: Settings | None = None
) -> HexView:
    if settings is None:
        settings = SETTINGS
    return (
        HexViewBuilder(data)
        .address_offset(settings.address_offset)
        .row_width(settings.row_width)
        .codepage(get_codepage(settings.codepage))
        .finish()
    )
