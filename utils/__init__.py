"""
Stream decoding and static data files for the word game.
"""

from utils.errors import EmptySource, InvalidDictionaryKey
from utils.line_stream import (
    LineDecoder,
    LineStream,
    AsyncLineStream,
    decode_lines,
    adecode_lines
)
from utils.dictionary import (
    DictionaryKey,
    decode_dictionary,
    adecode_dictionary,
    encode_dictionary,
    partition_words
)
from utils.challenge import Challenge, decode_challenge, adecode_challenge
from utils.wordlist import DecoderParams, file_source, load_dictionary, load_challenge

__all__ = [
    "EmptySource",
    "InvalidDictionaryKey",
    "LineDecoder",
    "LineStream",
    "AsyncLineStream",
    "decode_lines",
    "adecode_lines",
    "DictionaryKey",
    "decode_dictionary",
    "adecode_dictionary",
    "encode_dictionary",
    "partition_words",
    "Challenge",
    "decode_challenge",
    "adecode_challenge",
    "DecoderParams",
    "file_source",
    "load_dictionary",
    "load_challenge",
]
