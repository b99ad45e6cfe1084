"""Document loading tests: line splitting and terminator stripping."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from kilo.document import Document, Row, load_document, split_lines
from kilo.errors import TerminalError


class DocumentLoadingTests(unittest.TestCase):
    def _load(self, data: bytes) -> Document:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "doc.txt"
            path.write_bytes(data)
            return load_document(path)

    def test_line_endings_are_stripped(self) -> None:
        document = self._load(b"one\ntwo\r\nthree\r\r\n")

        self.assertEqual(document.rows, (Row(b"one"), Row(b"two"), Row(b"three")))
        self.assertEqual(document.num_rows, 3)

    def test_last_line_without_newline_is_kept(self) -> None:
        document = self._load(b"alpha\nbeta")

        self.assertEqual([row.chars for row in document.rows], [b"alpha", b"beta"])
        self.assertEqual(document[1].size, 4)

    def test_blank_lines_are_rows(self) -> None:
        self.assertEqual(split_lines(b"\n\nx\n"), [b"", b"", b"x"])

    def test_empty_file_has_no_rows(self) -> None:
        self.assertEqual(self._load(b"").num_rows, 0)
        self.assertEqual(Document.empty().num_rows, 0)

    def test_bytes_are_not_decoded(self) -> None:
        document = self._load(b"\xff\xfe raw\n")

        self.assertEqual(document[0].chars, b"\xff\xfe raw")

    def test_missing_file_raises_open_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(TerminalError) as ctx:
                load_document(Path(tmp) / "absent.txt")

        self.assertEqual(ctx.exception.label, "open")
        self.assertEqual(str(ctx.exception), "open: No such file or directory")


if __name__ == "__main__":
    unittest.main()
