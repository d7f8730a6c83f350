from __future__ import annotations
import os
import statistics
from typing import List

from ..schemas import DirectoryStatistics
from .word_reader import WordReader


def _mean(values: List[float]) -> float:
    return statistics.fmean(values) if values else 0.0


def _pstdev(values: List[float]) -> float:
    return statistics.pstdev(values) if values else 0.0


def compute_directory_statistics(path: str) -> DirectoryStatistics:
    """
    Summarise the regular files directly inside ``path``.

    Sub-directories are skipped. A file's alpha character count is the sum
    of the lengths of its words. Both standard deviations are population
    deviations; an empty directory reports 0.0 for every mean and deviation.
    """
    if not os.path.isdir(path):
        if not os.path.exists(path):
            raise FileNotFoundError(path)
        raise NotADirectoryError(path)

    file_count = 0
    total_bytes = 0
    alpha_chars_per_file: List[float] = []
    word_lengths: List[float] = []

    with os.scandir(path) as it:
        entries = sorted(it, key=lambda e: e.name)

    for entry in entries:
        if entry.is_dir() or not entry.is_file():
            continue
        file_count += 1
        total_bytes += entry.stat().st_size

        alpha_chars = 0
        with open(entry.path, "rb") as f:
            for word in WordReader(f):
                alpha_chars += len(word)
                word_lengths.append(len(word))
        alpha_chars_per_file.append(alpha_chars)

    return DirectoryStatistics(
        file_count=file_count,
        total_bytes=total_bytes,
        avg_alpha_chars_per_file=_mean(alpha_chars_per_file),
        std_alpha_chars_per_file=_pstdev(alpha_chars_per_file),
        avg_word_length=_mean(word_lengths),
        std_word_length=_pstdev(word_lengths),
    )
