from __future__ import annotations

import codecs

PLACEHOLDER = "."
NON_PRINTABLE = "\x00"

Codepage = tuple[str, ...]


def as_char(byte: int, codepage: Codepage) -> str:
    ch = codepage[byte]
    if len(ch) != 1 or not ch.isprintable():
        return PLACEHOLDER
    return ch


def codepage_from_encoding(encoding: str) -> Codepage:
    codecs.lookup(encoding)
    table: list[str] = []
    for value in range(256):
        try:
            ch = bytes([value]).decode(encoding)
        except UnicodeDecodeError:
            ch = NON_PRINTABLE
        if len(ch) != 1 or not ch.isprintable():
            ch = NON_PRINTABLE
        table.append(ch)
    return tuple(table)


def _ascii_table() -> Codepage:
    return tuple(
        chr(value) if 0x20 <= value <= 0x7E else NON_PRINTABLE
        for value in range(256)
    )


CODEPAGE_ASCII = _ascii_table()
CODEPAGE_0437 = codepage_from_encoding("cp437")
CODEPAGE_0850 = codepage_from_encoding("cp850")
CODEPAGE_1252 = codepage_from_encoding("cp1252")
CODEPAGE_LATIN_1 = codepage_from_encoding("latin-1")

CODEPAGES = {
    "ascii": CODEPAGE_ASCII,
    "cp437": CODEPAGE_0437,
    "cp850": CODEPAGE_0850,
    "cp1252": CODEPAGE_1252,
    "latin-1": CODEPAGE_LATIN_1,
}

DEFAULT_CODEPAGE_NAME = "cp850"
DEFAULT_CODEPAGE = CODEPAGE_0850


def get_codepage(name: str) -> Codepage:
    return CODEPAGES.get(name, DEFAULT_CODEPAGE)
