"""
Challenge files: plain text holding the solution word.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import AsyncIterable, Iterable, Optional

from utils.line_stream import Chunk, decode_lines, adecode_lines


@dataclass(frozen=True)
class Challenge:
    """
    One game challenge.

    Attributes:
        id: Challenge identifier (a date such as "2026-10-19" or an index)
        solution: Word to guess
    """
    id: str
    solution: str

    @property
    def dictionary_key(self) -> str:
        """Key of the dictionary holding the solution's partition."""
        return f"{len(self.solution)}{self.solution[:1]}"


def _make_challenge(challenge_id: str, lines: list[str]) -> Challenge:
    solution = "\n".join(lines).strip()
    if not solution:
        raise ValueError(f"Challenge {challenge_id!r} has an empty solution")
    return Challenge(id=challenge_id, solution=solution)


def decode_challenge(
    challenge_id: str,
    source: Optional[Iterable[Chunk]],
    encoding: str = "utf-8"
) -> Challenge:
    """
    Read a challenge from a chunk source, trimming surrounding whitespace.

    Raises:
        EmptySource: If the source has no body
        ValueError: If the body only holds whitespace
    """
    with decode_lines(source, encoding=encoding) as lines:
        return _make_challenge(challenge_id, list(lines))


async def adecode_challenge(
    challenge_id: str,
    source: Optional[AsyncIterable[Chunk]],
    encoding: str = "utf-8"
) -> Challenge:
    """Asynchronous variant of decode_challenge."""
    async with adecode_lines(source, encoding=encoding) as lines:
        return _make_challenge(challenge_id, [line async for line in lines])
