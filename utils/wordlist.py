"""
File-backed sources for dictionaries and challenges.

Static files are laid out as produced by the offline build:

- ``<root>/dictionary/<length><letter>.txt``: front-coded dictionary
- ``<root>/challenge/<id>.txt``: solution of challenge ``<id>``
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Union
import logging
import os

from utils.challenge import Challenge, decode_challenge
from utils.dictionary import DictionaryKey, decode_dictionary

logger = logging.getLogger(__name__)

# Default data root, overridable per call
DATA_DIR_ENV = "VOCAB_DATA_DIR"
DEFAULT_DATA_DIR = "public"


@dataclass
class DecoderParams:
    """
    Parameters for reading static files.

    Attributes:
        chunk_size: Bytes read per chunk
        encoding: Text encoding of the files
    """
    chunk_size: int = 65536
    encoding: str = "utf-8"


def get_data_dir(root: Optional[Union[str, Path]] = None) -> Path:
    """Resolve the data root: argument, then $VOCAB_DATA_DIR, then ./public."""
    if root is None:
        root = os.environ.get(DATA_DIR_ENV, DEFAULT_DATA_DIR)
    return Path(root)


def file_source(path: Union[str, Path], chunk_size: int = 65536) -> Iterator[bytes]:
    """
    Yield the bytes of a file chunk by chunk.

    A missing file fails here rather than on the first read. The file is only
    opened once reading starts, and closing the generator closes it.

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Data file not found: {path}")

    def _chunks() -> Iterator[bytes]:
        with open(path, "rb") as f:
            while True:
                chunk = f.read(chunk_size)
                if not chunk:
                    return
                yield chunk

    return _chunks()


def load_dictionary(
    key: Union[str, DictionaryKey],
    root: Optional[Union[str, Path]] = None,
    params: Optional[DecoderParams] = None
) -> set[str]:
    """
    Load and decode a dictionary file.

    Args:
        key: Dictionary key, e.g. "6v"
        root: Data root (see get_data_dir)
        params: DecoderParams for reading

    Returns:
        Set of words of the partition
    """
    params = params if params is not None else DecoderParams()
    directory = get_data_dir(root) / "dictionary"

    def open_source(parsed: DictionaryKey) -> Iterator[bytes]:
        path = directory / f"{parsed}.txt"
        logger.debug("Reading dictionary %s from %s", parsed, path)
        return file_source(path, params.chunk_size)

    return decode_dictionary(key, open_source, encoding=params.encoding)


def load_challenge(
    challenge_id: str,
    root: Optional[Union[str, Path]] = None,
    params: Optional[DecoderParams] = None
) -> Challenge:
    """Load a challenge file by its identifier."""
    params = params if params is not None else DecoderParams()
    path = get_data_dir(root) / "challenge" / f"{challenge_id}.txt"
    return decode_challenge(
        challenge_id,
        file_source(path, params.chunk_size),
        encoding=params.encoding
    )
