"""
Pytest configuration for the word game.

Provides in-memory chunk sources that record how they were consumed, so tests
can check that decoders release their source and never read more than needed.
"""

import os

import pytest

# Never pick up a developer's data directory during tests.
os.environ.pop("VOCAB_DATA_DIR", None)


class ChunkSource:
    """Iterable chunk source recording reads and close() calls."""

    def __init__(self, chunks, fail_after=None):
        self.chunks = list(chunks)
        self.fail_after = fail_after
        self.reads = 0
        self.closed = False

    def __iter__(self):
        for chunk in self.chunks:
            if self.fail_after is not None and self.reads >= self.fail_after:
                raise OSError("connection reset")
            self.reads += 1
            yield chunk

    def close(self):
        self.closed = True


class AsyncChunkSource(ChunkSource):
    """Async variant of ChunkSource released through aclose()."""

    def __aiter__(self):
        return self._generate()

    async def _generate(self):
        for chunk in self:
            yield chunk

    async def aclose(self):
        self.closed = True


class UntouchableOpener:
    """Source opener that fails the test if it is ever called."""

    def __init__(self):
        self.calls = 0

    def __call__(self, key):
        self.calls += 1
        raise AssertionError(f"source opened for {key}")


@pytest.fixture
def chunk_source():
    """Factory for ChunkSource instances."""
    return ChunkSource


@pytest.fixture
def async_chunk_source():
    """Factory for AsyncChunkSource instances."""
    return AsyncChunkSource


@pytest.fixture
def untouchable_opener():
    return UntouchableOpener()
