import unittest

from hexview.core.codepage import (
    CODEPAGE_0437,
    CODEPAGE_0850,
    CODEPAGE_1252,
    CODEPAGE_ASCII,
    CODEPAGE_LATIN_1,
    CODEPAGES,
    DEFAULT_CODEPAGE,
    PLACEHOLDER,
    as_char,
    codepage_from_encoding,
    get_codepage,
)


class TestCodepage(unittest.TestCase):
    def test_tables_have_256_entries(self):
        for name, table in CODEPAGES.items():
            self.assertEqual(len(table), 256, name)

    def test_printable_ascii_is_shared(self):
        for table in CODEPAGES.values():
            self.assertEqual(as_char(0x41, table), "A")
            self.assertEqual(as_char(0x20, table), " ")

    def test_control_bytes_use_placeholder(self):
        for table in CODEPAGES.values():
            for value in list(range(0x20)) + [0x7F]:
                self.assertEqual(as_char(value, table), PLACEHOLDER)

    def test_high_bytes(self):
        self.assertEqual(as_char(0xE9, CODEPAGE_ASCII), PLACEHOLDER)
        self.assertEqual(as_char(0xE9, CODEPAGE_LATIN_1), "é")
        self.assertEqual(as_char(0x82, CODEPAGE_0850), "é")
        self.assertEqual(as_char(0xB0, CODEPAGE_0437), "░")
        self.assertEqual(as_char(0x80, CODEPAGE_1252), "€")

    def test_undefined_bytes_use_placeholder(self):
        self.assertEqual(as_char(0x81, CODEPAGE_1252), PLACEHOLDER)

    def test_custom_table(self):
        table = tuple("x" for _ in range(256))
        self.assertEqual(as_char(0, table), "x")
        self.assertEqual(as_char(0, ("ab",) * 256), PLACEHOLDER)

    def test_get_codepage(self):
        self.assertIs(get_codepage("cp437"), CODEPAGE_0437)
        self.assertIs(get_codepage("nope"), DEFAULT_CODEPAGE)

    def test_codepage_from_encoding(self):
        table = codepage_from_encoding("cp1251")
        self.assertEqual(as_char(0xC0, table), "А")
        with self.assertRaises(LookupError):
            codepage_from_encoding("no-such-codec")


if __name__ == "__main__":
    unittest.main()
