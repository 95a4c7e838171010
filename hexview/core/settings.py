from __future__ import annotations

from dataclasses import dataclass

from hexview.core.codepage import DEFAULT_CODEPAGE_NAME


@dataclass
class Settings:
    row_width: int = 16
    address_offset: int = 0
    codepage: str = DEFAULT_CODEPAGE_NAME
