"""Tests for raw byte decoding into key tokens."""

from __future__ import annotations

import os
import unittest

from treeglide.input import KeyMap, reader


class ReadKeyTests(unittest.TestCase):
    def setUp(self) -> None:
        self.read_fd, self.write_fd = os.pipe()
        reader._PENDING_BYTES.clear()

    def tearDown(self) -> None:
        os.close(self.read_fd)
        os.close(self.write_fd)
        reader._PENDING_BYTES.clear()

    def _keys(self, data: bytes, count: int) -> list[str]:
        os.write(self.write_fd, data)
        return [reader.read_key(self.read_fd, timeout_ms=50) for _ in range(count)]

    def test_csi_arrow_keys(self) -> None:
        self.assertEqual(
            self._keys(b"\x1b[A\x1b[B\x1b[C\x1b[D", 4),
            ["UP", "DOWN", "RIGHT", "LEFT"],
        )

    def test_ss3_arrow_keys(self) -> None:
        self.assertEqual(self._keys(b"\x1bOA\x1bOD", 2), ["UP", "LEFT"])

    def test_plain_and_control_characters(self) -> None:
        self.assertEqual(self._keys(b"q?\x03\r", 4), ["q", "?", "CTRL_C", "ENTER"])

    def test_lone_escape(self) -> None:
        self.assertEqual(self._keys(b"\x1b", 1), ["ESC"])

    def test_escape_followed_by_other_byte_keeps_that_byte(self) -> None:
        self.assertEqual(self._keys(b"\x1bq", 2), ["ESC", "q"])

    def test_unrecognised_csi_sequence_is_consumed_and_not_quit(self) -> None:
        keys = self._keys(b"\x1b[6~\x1b[1;5Aj", 3)

        self.assertEqual(keys, [reader.UNKNOWN_KEY, reader.UNKNOWN_KEY, "j"])
        self.assertFalse(KeyMap().is_quit(keys[0]))

    def test_unrecognised_ss3_sequence_is_not_escape(self) -> None:
        self.assertEqual(self._keys(b"\x1bOPk", 2), [reader.UNKNOWN_KEY, "k"])

    def test_multibyte_character_is_decoded_whole(self) -> None:
        self.assertEqual(self._keys("é".encode("utf-8"), 1), ["é"])

    def test_timeout_returns_empty_token(self) -> None:
        self.assertEqual(reader.read_key(self.read_fd, timeout_ms=10), "")


if __name__ == "__main__":
    unittest.main()
