from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MatchState:
    index: int
    score: int = 0

    @property
    def started(self) -> bool:
        return self.index > 0

    def is_done(self, pattern: str) -> bool:
        return self.index == len(pattern)

    def accepts(self, char: str, pattern: str) -> bool:
        return pattern[self.index] == char

    def advance(self) -> MatchState:
        return MatchState(self.index + 1, self.score)

    def penalize(self) -> MatchState:
        return MatchState(self.index, self.score + 1)


@dataclass(frozen=True)
class RankedMatch:
    path: str
    score: int
