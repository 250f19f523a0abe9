"""
Line-by-line decoding of chunked text streams.

A chunk source is any iterable (or async iterable) yielding ``bytes`` or
``str`` chunks in order. Lines are delimited by ``\\n`` or ``\\r\\n`` and may
span chunk boundaries, delimiters included.

Streams are pull-based cursors with an explicit ``close()``/``aclose()`` that
releases the underlying source. Closing happens automatically on exhaustion
and on errors; use the stream as a context manager to also cover early exit.
"""

from __future__ import annotations

import codecs
import inspect
import logging
import re
from collections import deque
from typing import AsyncIterable, Iterable, Optional, Union

from utils.errors import EmptySource

logger = logging.getLogger(__name__)

Chunk = Union[bytes, str]

_NEWLINE = re.compile(r"\r?\n")
_END = object()


class LineDecoder:
    """
    Incremental splitter turning chunks into complete lines.

    The undelimited remainder of everything fed so far is buffered and
    prepended to the next chunk before scanning for delimiters. Byte chunks go
    through an incremental decoder, so multi-byte characters may also be split.

    Attributes:
        encoding: Text encoding used for byte chunks
    """

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding
        self._decoder = codecs.getincrementaldecoder(encoding)()
        self._buffer = ""

    def feed(self, chunk: Chunk) -> list[str]:
        """
        Add a chunk and return the lines it completes.

        Args:
            chunk: Next chunk of the stream

        Returns:
            Complete lines, without delimiters, in arrival order
        """
        if isinstance(chunk, (bytes, bytearray, memoryview)):
            chunk = self._decoder.decode(bytes(chunk))
        lines = _NEWLINE.split(self._buffer + chunk)
        self._buffer = lines.pop()
        return lines

    def flush(self) -> list[str]:
        """
        Signal end of stream and return the last, undelimited line if any.

        A trailing delimiter does not produce an extra empty line.
        """
        lines = _NEWLINE.split(self._buffer + self._decoder.decode(b"", final=True))
        self._buffer = ""
        if not lines[-1]:
            lines.pop()
        return lines


class _LineCursor:
    """Buffering and bookkeeping shared by the sync and async streams."""

    def __init__(self, source, encoding: str):
        if source is None:
            raise EmptySource("Empty response body")
        self._source = source
        self._decoder = LineDecoder(encoding)
        self._pending: deque[str] = deque()
        self._started = False
        self._exhausted = False
        self.closed = False

    def _accept(self, chunk) -> None:
        if chunk is _END:
            self._exhausted = True
            if not self._started:
                raise EmptySource("Source ended before producing any chunk")
            self._pending.extend(self._decoder.flush())
        else:
            self._started = True
            self._pending.extend(self._decoder.feed(chunk))

    def _mark_closed(self) -> bool:
        """Flag the cursor closed; return False if it already was."""
        if self.closed:
            return False
        self.closed = True
        if not self._exhausted:
            logger.debug("Releasing %s before the end of its source", type(self).__name__)
        return True


class LineStream(_LineCursor):
    """
    Pull-based, non-restartable cursor over the lines of a chunk source.

    Example:
        >>> with LineStream([b"ab", b"c\\nd"]) as lines:
        ...     list(lines)
        ['abc', 'd']

    Raises:
        EmptySource: If the source is None or ends before its first chunk
    """

    def __init__(self, source: Optional[Iterable[Chunk]], encoding: str = "utf-8"):
        super().__init__(source, encoding)
        self._chunks = iter(source)

    def __iter__(self) -> LineStream:
        return self

    def __next__(self) -> str:
        if self.closed:
            raise StopIteration
        while not self._pending:
            if self._exhausted or self.closed:
                self.close()
                raise StopIteration
            try:
                self._accept(next(self._chunks, _END))
            except BaseException:
                self.close()
                raise
        return self._pending.popleft()

    def close(self) -> None:
        """Release the source. Safe to call more than once."""
        if not self._mark_closed():
            return
        close = getattr(self._source, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> LineStream:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class AsyncLineStream(_LineCursor):
    """
    Asynchronous counterpart of LineStream for async chunk sources.

    Only one chunk is awaited at a time. The source is released through its
    ``aclose()`` (or ``close()``) method.
    """

    def __init__(self, source: Optional[AsyncIterable[Chunk]], encoding: str = "utf-8"):
        super().__init__(source, encoding)
        self._chunks = source.__aiter__()

    def __aiter__(self) -> AsyncLineStream:
        return self

    async def __anext__(self) -> str:
        if self.closed:
            raise StopAsyncIteration
        while not self._pending:
            if self._exhausted or self.closed:
                await self.aclose()
                raise StopAsyncIteration
            try:
                try:
                    chunk = await self._chunks.__anext__()
                except StopAsyncIteration:
                    chunk = _END
                self._accept(chunk)
            except BaseException:
                await self.aclose()
                raise
        return self._pending.popleft()

    async def aclose(self) -> None:
        """Release the source. Safe to call more than once."""
        if not self._mark_closed():
            return
        close = getattr(self._source, "aclose", None) or getattr(self._source, "close", None)
        if close is not None:
            result = close()
            if inspect.isawaitable(result):
                await result

    async def __aenter__(self) -> AsyncLineStream:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()


def decode_lines(source: Optional[Iterable[Chunk]], encoding: str = "utf-8") -> LineStream:
    """
    Read a chunk source line by line.

    Args:
        source: Iterable of byte or text chunks
        encoding: Encoding for byte chunks

    Returns:
        LineStream over the source's lines
    """
    return LineStream(source, encoding=encoding)


def adecode_lines(
    source: Optional[AsyncIterable[Chunk]],
    encoding: str = "utf-8"
) -> AsyncLineStream:
    """Read an async chunk source line by line."""
    return AsyncLineStream(source, encoding=encoding)
