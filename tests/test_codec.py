"""
todo Test Suite: Storage Codec
==============================
Tests for the line format and storage file handling.

Usage:
    python -m pytest tests/test_codec.py -v
    python tests/test_codec.py
"""
import sys
import os
import tempfile
import unittest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from todo.codec import (
    COMPLETE_PREFIX, INCOMPLETE_PREFIX,
    decode, encode, load_list, save_list, prefix_for,
)
from todo.errors import StorageUnavailable
from todo.store import Todo


def pairs(todos):
    return [(t.description, t.complete) for t in todos]


# ─────────────────────────────────────────────
#  Decoding
# ─────────────────────────────────────────────

class TestDecode(unittest.TestCase):

    def test_prefixes(self):
        self.assertEqual(COMPLETE_PREFIX, "[x] ")
        self.assertEqual(INCOMPLETE_PREFIX, "[ ] ")
        self.assertEqual(prefix_for(True), COMPLETE_PREFIX)
        self.assertEqual(prefix_for(False), INCOMPLETE_PREFIX)

    def test_canonical_lines(self):
        todos = decode("[x] done\n[ ] not done\n")
        self.assertEqual(pairs(todos), [("done", True), ("not done", False)])

    def test_empty_text(self):
        self.assertEqual(decode(""), [])

    def test_line_without_prefix_kept_verbatim(self):
        todos = decode("just text\n[y] odd\n")
        self.assertEqual(pairs(todos), [("just text", False), ("[y] odd", False)])

    def test_missing_final_newline(self):
        todos = decode("[ ] a\n[x] b")
        self.assertEqual(pairs(todos), [("a", False), ("b", True)])

    def test_blank_line_is_an_empty_todo(self):
        todos = decode("[ ] a\n\n")
        self.assertEqual(pairs(todos), [("a", False), ("", False)])

    def test_crlf_line_endings(self):
        todos = decode("[x] a\r\n[ ] b\r\n")
        self.assertEqual(pairs(todos), [("a", True), ("b", False)])

    def test_description_may_look_like_a_prefix(self):
        todos = decode("[ ] [x] nested\n")
        self.assertEqual(pairs(todos), [("[x] nested", False)])


# ─────────────────────────────────────────────
#  Encoding
# ─────────────────────────────────────────────

class TestEncode(unittest.TestCase):

    def test_encode(self):
        text = encode([Todo("a", True), Todo("b")])
        self.assertEqual(text, "[x] a\n[ ] b\n")

    def test_encode_empty(self):
        self.assertEqual(encode([]), "")

    def test_roundtrip_canonical(self):
        text = "[x] one\n[ ] two / three\n[ ] \n"
        self.assertEqual(encode(decode(text)), text)

    def test_malformed_input_is_normalized(self):
        self.assertEqual(encode(decode("loose line")), "[ ] loose line\n")


# ─────────────────────────────────────────────
#  Storage file
# ─────────────────────────────────────────────

class TestStorage(unittest.TestCase):

    def test_load_creates_missing_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, ".todo")
            todos = load_list(path)
            self.assertEqual(len(todos), 0)
            self.assertTrue(os.path.exists(path))

    def test_save_and_load(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, ".todo")
            save_list(path, [Todo("café ☕", True), Todo("b")])
            with open(path, "rb") as f:
                self.assertEqual(f.read(), "[x] café ☕\n[ ] b\n".encode("utf-8"))
            self.assertEqual(pairs(load_list(path)), [("café ☕", True), ("b", False)])

    def test_save_overwrites(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, ".todo")
            save_list(path, [Todo("a"), Todo("b")])
            save_list(path, [Todo("c")])
            self.assertEqual(pairs(load_list(path)), [("c", False)])

    def test_load_unreadable_location(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "missing_dir", ".todo")
            with self.assertRaises(StorageUnavailable):
                load_list(path)

    def test_save_unwritable_location(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            with self.assertRaises(StorageUnavailable):
                save_list(tmpdir, [Todo("a")])  # a directory, not a file

    def test_invalid_utf8_bytes_roundtrip(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, ".todo")
            with open(path, "wb") as f:
                f.write(b"[ ] \xff\xfe\n")
            todos = load_list(path)
            self.assertEqual(todos[0].description, "\udcff\udcfe")
            save_list(path, todos)
            with open(path, "rb") as f:
                self.assertEqual(f.read(), b"[ ] \xff\xfe\n")

    def test_save_raw_byte_from_command_line(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, ".todo")
            save_list(path, [Todo("a", True), Todo("keep me")])
            todos = load_list(path)
            todos.edit(0, "bad\udcff")
            save_list(path, todos)
            with open(path, "rb") as f:
                self.assertEqual(f.read(), b"[x] bad\xff\n[ ] keep me\n")

    def test_unencodable_description_keeps_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, ".todo")
            save_list(path, [Todo("a", True), Todo("keep me")])
            with self.assertRaises(StorageUnavailable):
                save_list(path, [Todo("bad\ud800", True), Todo("keep me")])
            with open(path, "rb") as f:
                self.assertEqual(f.read(), b"[x] a\n[ ] keep me\n")


if __name__ == "__main__":
    unittest.main(verbosity=2)
