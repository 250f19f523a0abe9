"""
Front-coded dictionary files.

Each dictionary file holds the accepted words of one length starting with one
letter, identified by a key such as ``6v``. Words are sorted, their common
first letter is dropped, and every record keeps only the suffix that differs
from the previous word:

    valeur, valide, valise  ->  aleur / ide / se

Decoding is a sequential fold: record i is only meaningful after record i-1
has been reconstructed.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import AsyncIterable, Callable, Iterable, Optional, Union

from utils.errors import InvalidDictionaryKey
from utils.line_stream import Chunk, decode_lines, adecode_lines

logger = logging.getLogger(__name__)

_KEY_PATTERN = re.compile(r"([0-9]+)([a-z])")


@dataclass(frozen=True)
class DictionaryKey:
    """
    Identifier of one dictionary partition.

    Attributes:
        length: Word length
        first: First letter shared by every word
    """
    length: int
    first: str

    @staticmethod
    def parse(key: Union[str, DictionaryKey]) -> DictionaryKey:
        """
        Parse a ``<length><first letter>`` key such as ``6v``.

        Raises:
            InvalidDictionaryKey: If the key does not match or the length is 0
        """
        if isinstance(key, DictionaryKey):
            return key
        match = _KEY_PATTERN.fullmatch(key) if isinstance(key, str) else None
        if match is None or int(match.group(1)) == 0:
            raise InvalidDictionaryKey(key)
        return DictionaryKey(int(match.group(1)), match.group(2))

    @staticmethod
    def for_word(word: str) -> DictionaryKey:
        """Key of the partition a word belongs to."""
        return DictionaryKey.parse(f"{len(word)}{word[:1]}")

    def __str__(self) -> str:
        return f"{self.length}{self.first}"


class _FrontDecoder:
    """Running state of the front-coding fold."""

    def __init__(self, key: DictionaryKey):
        self.length = key.length
        self.word = key.first
        self.words: set[str] = set()

    def push(self, line: str) -> None:
        suffix = line.strip()
        prefix = self.word[:max(0, self.length - len(suffix))]
        self.word = prefix + suffix
        self.words.add(self.word)


def decode_dictionary(
    key: Union[str, DictionaryKey],
    open_source: Callable[[DictionaryKey], Iterable[Chunk]],
    encoding: str = "utf-8"
) -> set[str]:
    """
    Decode the dictionary identified by key.

    The key is validated before open_source is called. Records are assumed to
    come from encode_dictionary (or an equivalent offline build); word length
    and first letter are not re-checked.

    Args:
        key: Dictionary key, e.g. "6v"
        open_source: Returns the chunk source for a parsed key
        encoding: Encoding for byte chunks

    Returns:
        Set of decoded words

    Raises:
        InvalidDictionaryKey: If key is malformed (no I/O is attempted)
        EmptySource: If the source has no body
    """
    key = DictionaryKey.parse(key)
    decoder = _FrontDecoder(key)

    with decode_lines(open_source(key), encoding=encoding) as lines:
        for line in lines:
            decoder.push(line)

    logger.debug("Decoded dictionary %s: %d words", key, len(decoder.words))
    return decoder.words


async def adecode_dictionary(
    key: Union[str, DictionaryKey],
    open_source: Callable[[DictionaryKey], AsyncIterable[Chunk]],
    encoding: str = "utf-8"
) -> set[str]:
    """Asynchronous variant of decode_dictionary for async chunk sources."""
    key = DictionaryKey.parse(key)
    decoder = _FrontDecoder(key)

    async with adecode_lines(open_source(key), encoding=encoding) as lines:
        async for line in lines:
            decoder.push(line)

    logger.debug("Decoded dictionary %s: %d words", key, len(decoder.words))
    return decoder.words


def _common_prefix_length(a: str, b: str) -> int:
    n = 0
    for x, y in zip(a, b):
        if x != y:
            break
        n += 1
    return n


def encode_dictionary(words: Iterable[str]) -> str:
    """
    Front-code a dictionary partition.

    Words are sorted and de-duplicated first; sorting maximizes the shared
    prefixes but decoding does not depend on it.

    Args:
        words: Words sharing one length and one first letter

    Returns:
        Records joined with "\\n", without a trailing newline. A one-letter
        partition has a single empty record and is written as "\\n".

    Raises:
        ValueError: If words is empty or mixes lengths or first letters
    """
    words = sorted(set(words))
    if not words:
        raise ValueError("Cannot encode an empty dictionary")

    key = (len(words[0]), words[0][:1])
    records = []
    previous = ""
    for word in words:
        if (len(word), word[:1]) != key:
            raise ValueError(
                f"Word {word!r} does not belong to dictionary {key[0]}{key[1]}"
            )
        tail = word[1:]
        records.append(tail[_common_prefix_length(previous, tail):])
        previous = tail

    if records == [""]:
        return "\n"
    return "\n".join(records)


def partition_words(
    words: Iterable[str],
    min_length: int = 1,
    max_length: Optional[int] = None
) -> dict[DictionaryKey, list[str]]:
    """
    Group words into dictionary partitions.

    Words whose length is out of range or that do not start with a lowercase
    ASCII letter are skipped.

    Returns:
        Mapping of key to the sorted, de-duplicated words of that partition
    """
    partitions: dict[DictionaryKey, set[str]] = {}
    for word in words:
        if len(word) < min_length or (max_length is not None and len(word) > max_length):
            continue
        if not ("a" <= word[:1] <= "z"):
            continue
        partitions.setdefault(DictionaryKey(len(word), word[0]), set()).add(word)

    return {key: sorted(group) for key, group in sorted(
        partitions.items(), key=lambda item: (item[0].length, item[0].first)
    )}
