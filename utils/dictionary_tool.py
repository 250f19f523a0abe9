"""
Command-line tool for front-coded dictionary files.

    python -m utils.dictionary_tool encode words.txt public
    python -m utils.dictionary_tool decode public/dictionary/6v.txt
    python -m utils.dictionary_tool check 6v valeur --root public
"""

from __future__ import annotations

import argparse
import logging
import pathlib
import sys
from typing import Iterable

from utils.dictionary import DictionaryKey, decode_dictionary, encode_dictionary, partition_words
from utils.wordlist import file_source, load_dictionary

logger = logging.getLogger(__name__)


def read_words(path: pathlib.Path) -> list[str]:
    """Read one word per line, lowercased, skipping empty lines."""
    with open(path, "r", encoding="utf-8") as f:
        return [word.lower() for word in (line.strip() for line in f) if word]


def encode_words(
    words: Iterable[str],
    output: pathlib.Path,
    min_length: int = 1,
    max_length: int | None = None
) -> list[DictionaryKey]:
    """
    Write one front-coded file per dictionary partition.

    Args:
        words: Word list
        output: Data root; files go to <output>/dictionary/<key>.txt
        min_length: Shortest word length kept
        max_length: Longest word length kept (None for no limit)

    Returns:
        Keys of the files written
    """
    directory = output / "dictionary"
    directory.mkdir(parents=True, exist_ok=True)

    keys = []
    for key, group in partition_words(words, min_length, max_length).items():
        path = directory / f"{key}.txt"
        path.write_text(encode_dictionary(group), encoding="utf-8")
        logger.info("Wrote %d words to %s", len(group), path)
        keys.append(key)
    return keys


def _cmd_encode(args: argparse.Namespace) -> int:
    keys = encode_words(read_words(args.wordlist), args.output, args.min_length, args.max_length)
    print(f"Wrote {len(keys)} dictionaries to {args.output / 'dictionary'}")
    return 0


def _cmd_decode(args: argparse.Namespace) -> int:
    key = args.key if args.key is not None else args.path.stem
    words = decode_dictionary(key, lambda _: file_source(args.path))
    for word in sorted(words):
        print(word)
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    word = args.word.lower()
    words = load_dictionary(args.key, root=args.root)
    found = word in words
    print(f"{word}: {'found' if found else 'not found'} in {args.key} ({len(words)} words)")
    return 0 if found else 1


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Encode and decode front-coded dictionaries.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    encode = subparsers.add_parser("encode", help="Split a word list into dictionary files")
    encode.add_argument("wordlist", type=pathlib.Path, help="Word list, one word per line")
    encode.add_argument("output", type=pathlib.Path, help="Data root directory")
    encode.add_argument("--min-length", type=int, default=1, help="Shortest word length")
    encode.add_argument("--max-length", type=int, default=None, help="Longest word length")
    encode.set_defaults(func=_cmd_encode)

    decode = subparsers.add_parser("decode", help="Print the words of a dictionary file")
    decode.add_argument("path", type=pathlib.Path, help="Dictionary file, e.g. 6v.txt")
    decode.add_argument("--key", default=None, help="Dictionary key (default: file name)")
    decode.set_defaults(func=_cmd_decode)

    check = subparsers.add_parser("check", help="Check whether a word is accepted")
    check.add_argument("key", help="Dictionary key, e.g. 6v")
    check.add_argument("word", help="Word to look up")
    check.add_argument("--root", type=pathlib.Path, default=None, help="Data root directory")
    check.set_defaults(func=_cmd_check)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s"
    )
    return args.func(args)


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main(sys.argv[1:]))
