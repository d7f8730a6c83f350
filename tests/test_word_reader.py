import io
from unittest import TestCase

from dirstore.services.word_reader import WordReader

SAMPLE = b"hello\nworld 10 apple sc__y\n34hee\n"


class WordReaderTests(TestCase):
    def test_reads_ascii_words(self):
        reader = WordReader(io.BytesIO(SAMPLE))
        for word in ("hello", "world", "apple", "sc", "y", "hee"):
            self.assertEqual(next(reader), word)
        self.assertIsNone(next(reader, None))
        self.assertIsNone(next(reader, None))

    def test_same_words_for_any_buffer_size(self):
        expected = ["hello", "world", "apple", "sc", "y", "hee"]
        for size in (1, 2, 3, 7, 1024):
            with self.subTest(size=size):
                self.assertEqual(list(WordReader(io.BytesIO(SAMPLE), size)), expected)

    def test_final_word_without_separator(self):
        reader = WordReader(io.BytesIO(b"  last"))
        self.assertEqual(list(reader), ["last"])
        self.assertEqual(list(reader), [])

    def test_case_preserved(self):
        self.assertEqual(list(WordReader(io.BytesIO(b"Hello WORLD"))), ["Hello", "WORLD"])

    def test_non_ascii_bytes_separate_words(self):
        data = "café naïve".encode("utf-8")
        self.assertEqual(list(WordReader(io.BytesIO(data))), ["caf", "na", "ve"])

    def test_no_words(self):
        self.assertEqual(list(WordReader(io.BytesIO(b""))), [])
        self.assertEqual(list(WordReader(io.BytesIO(b"12 -- 34\n\n"))), [])

    def test_read_errors_propagate(self):
        class Broken(io.RawIOBase):
            def readable(self):
                return True

            def read(self, size=-1):
                raise OSError("disk gone")

        with self.assertRaises(OSError):
            next(WordReader(Broken()))
