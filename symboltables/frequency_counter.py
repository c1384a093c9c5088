"""
Sample client program to test symbol tables.

Reads text and, for each word at least `min_length` characters long, adds
the word to an ordered symbol table counting its occurrences. Then finds the
word with the highest frequency.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from os import PathLike

from symboltables.balanced_tree import RedBlackBST
from symboltables.ordered import BST
from symboltables.statistics import SymbolTableStatistics
from utils.loader import path_to_lines

logger = logging.getLogger(__name__)

type TableFactory = Callable[[], BST[str, int]]

# Space, tab, line feed, form feed and carriage return only
ASCII_WHITESPACE = re.compile(r"[ \t\n\x0c\r]+")


@dataclass
class FrequencyCounter:
    words: int  # total number of words
    distinct: int  # number of distinct words
    max: str  # most frequent word
    frequency: int  # frequency of the most frequent word
    table: BST[str, int] = field(repr=False, compare=False)
    puts: int = field(default=0, repr=False, compare=False)

    @staticmethod
    def split_words(line: str) -> list[str]:
        """Split a line on ASCII whitespace; other Unicode spaces stay in words."""
        return [word for word in ASCII_WHITESPACE.split(line) if word]

    @classmethod
    def from_lines(
        cls,
        lines: Iterable[str],
        min_length: int = 1,
        table_factory: TableFactory = RedBlackBST,
    ) -> FrequencyCounter:
        if min_length < 0:
            raise ValueError(f"Minimum length must be non-negative, got {min_length}")

        words = 0
        distinct = 0
        puts = 0
        table = table_factory()

        # Build symbol table and count frequencies
        for line in lines:
            for word in cls.split_words(line):
                if len(word) < min_length:
                    continue
                words += 1
                current = table.get(word)
                if current is None:
                    table.put(word, 1)
                    distinct += 1
                else:
                    table.put(word, current + 1)
                puts += 1

        # Find the key with the highest frequency; ties go to the smallest key
        most_frequent = ""
        frequency = 0
        for word in table.keys():
            count = table.get(word)
            assert count is not None
            if count > frequency:
                most_frequent, frequency = word, count

        logger.debug(
            f"Counted {words} words ({distinct} distinct) with min length {min_length}"
        )
        return cls(words, distinct, most_frequent, frequency, table, puts)

    @classmethod
    def from_path(
        cls,
        path: str | PathLike[str],
        min_length: int = 1,
        table_factory: TableFactory = RedBlackBST,
    ) -> FrequencyCounter:
        logger.debug(f"Reading words from {path}")
        return cls.from_lines(path_to_lines(path), min_length, table_factory)

    def statistics(self) -> SymbolTableStatistics:
        """Average put cost over every put issued while counting."""
        return self.table.statistics(self.puts)
