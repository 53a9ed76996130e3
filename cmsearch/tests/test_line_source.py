#!/usr/bin/env python3
"""
Unit tests for the one-line lookahead LineSource
"""
import os
import shutil
import tempfile
import unittest

from cmsearch.core.line_source import LineSource
from cmsearch.exceptions import FileOperationError, ParserStateError


class TestLineSource(unittest.TestCase):
    """Test cases for LineSource"""

    def test_pull_in_order_then_none(self):
        source = LineSource(["a\n", "b\n"])
        self.assertEqual(source.pull(), "a\n")
        self.assertEqual(source.pull(), "b\n")
        self.assertIsNone(source.pull())
        self.assertIsNone(source.pull(), "Exhausted source should keep returning None")

    def test_push_back_is_returned_next(self):
        source = LineSource(["a\n", "b\n", "c\n"])
        source.pull()
        line = source.pull()
        source.push_back(line)
        self.assertTrue(source.has_pending)
        self.assertEqual(source.pull(), "b\n")
        self.assertFalse(source.has_pending)
        self.assertEqual(source.pull(), "c\n")

    def test_push_back_after_end_of_input(self):
        source = LineSource(["only\n"])
        line = source.pull()
        self.assertIsNone(source.pull())
        source.push_back(line)
        self.assertEqual(source.pull(), "only\n")
        self.assertIsNone(source.pull())

    def test_line_number_tracks_pushback(self):
        source = LineSource(["a\n", "b\n"])
        source.pull()
        source.pull()
        self.assertEqual(source.line_number, 2)
        source.push_back("b\n")
        self.assertEqual(source.line_number, 1)
        source.pull()
        self.assertEqual(source.line_number, 2)

    def test_second_push_back_rejected(self):
        source = LineSource(["a\n", "b\n"])
        source.push_back(source.pull())
        with self.assertRaises(ParserStateError):
            source.push_back("extra\n")

    def test_generator_input(self):
        source = LineSource(f"line {i}\n" for i in range(3))
        self.assertEqual([source.pull() for _ in range(4)],
                         ["line 0\n", "line 1\n", "line 2\n", None])


class TestLineSourceFiles(unittest.TestCase):
    """File handling for LineSource"""

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()
        self.path = os.path.join(self.test_dir, "out.cmsearch")
        with open(self.path, 'w') as f:
            f.write("sequence: x\nhit 0 : 1 2 3.0 bits\n")

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def test_from_path_reads_and_closes(self):
        with LineSource.from_path(self.path) as source:
            handle = source._handle
            self.assertEqual(source.pull(), "sequence: x\n")
        self.assertTrue(handle.closed)

    def test_missing_file(self):
        with self.assertRaises(FileOperationError) as ctx:
            LineSource.from_path(os.path.join(self.test_dir, "missing.cmsearch"))
        self.assertIn('path', ctx.exception.details)

    def write_bytes(self, name, data):
        path = os.path.join(self.test_dir, name)
        with open(path, 'wb') as f:
            f.write(data)
        return path

    def test_undecodable_line(self):
        path = self.write_bytes("latin1.cmsearch", b"sequence: ok\nsequence: s\xff\xfe\nhit 0 : 1 2 3.0 bits\n")
        with LineSource.from_path(path) as source:
            self.assertEqual(source.pull(), "sequence: ok\n")
            with self.assertRaises(FileOperationError) as ctx:
                source.pull()
            self.assertIsNone(source.pull())
        details = ctx.exception.details
        self.assertEqual(details['line_number'], 2)
        self.assertEqual(details['path'], path)
        self.assertIn("line 2", ctx.exception.message)

    def test_undecodable_text_handle(self):
        path = self.write_bytes("latin1.cmsearch", b"sequence: s\xff\xfe\n")
        with open(path, encoding='utf-8') as handle:
            with self.assertRaises(FileOperationError) as ctx:
                LineSource(handle).pull()
        self.assertEqual(ctx.exception.details['line_number'], 1)
        self.assertEqual(ctx.exception.details['path'], path)

    def test_crlf_line_endings(self):
        path = self.write_bytes("dos.cmsearch", b"sequence: x\r\nhit 0 : 1 2 3.0 bits\r\n")
        with LineSource.from_path(path) as source:
            self.assertEqual(source.pull(), "sequence: x\n")
            self.assertEqual(source.pull(), "hit 0 : 1 2 3.0 bits\n")

    def test_close_leaves_caller_handle_open(self):
        with open(self.path) as handle:
            source = LineSource(handle)
            source.pull()
            source.close()
            self.assertFalse(handle.closed)


if __name__ == '__main__':
    unittest.main()
