from __future__ import annotations
from typing import BinaryIO, Iterator

_CHUNK = 1024

# ASCII letters only; every other byte, including non-ASCII, separates words.
_LETTERS = frozenset(b"abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")


class WordReader(Iterator[str]):
    """
    Single-pass scanner yielding maximal runs of ASCII letters from a
    binary stream.

    Reads ``buffer_size`` bytes at a time, so memory stays bounded by the
    longest word. Once the stream is exhausted every further ``next()``
    raises StopIteration. Errors from the underlying stream propagate.
    """

    def __init__(self, stream: BinaryIO, buffer_size: int = _CHUNK) -> None:
        self._stream = stream
        self._buffer_size = buffer_size
        self._chunk = b""
        self._pos = 0
        self._word = bytearray()
        self._done = False

    def __iter__(self) -> "WordReader":
        return self

    def __next__(self) -> str:
        if self._done:
            raise StopIteration
        while True:
            while self._pos < len(self._chunk):
                b = self._chunk[self._pos]
                self._pos += 1
                if b in _LETTERS:
                    self._word.append(b)
                elif self._word:
                    return self._flush()

            self._chunk = self._stream.read(self._buffer_size)
            self._pos = 0
            if not self._chunk:
                self._done = True
                if self._word:
                    return self._flush()
                raise StopIteration

    def _flush(self) -> str:
        word = self._word.decode("ascii")
        self._word = bytearray()
        return word
