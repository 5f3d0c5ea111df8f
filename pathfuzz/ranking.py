from __future__ import annotations

from collections.abc import Iterable

from pathfuzz.matching import match_path
from pathfuzz.models import RankedMatch
from pathfuzz.traversal import iter_candidates

DEFAULT_LIMIT = 25


def score_candidates(
    candidates: Iterable[str], pattern: str, *, exact: bool = False
) -> dict[str, int]:
    """Score each distinct candidate, keeping only those that match.

    Candidates are compared in lowercase; the returned keys keep their
    original case and discovery order.
    """
    seen: set[str] = set()
    scores: dict[str, int] = {}
    for candidate in candidates:
        if candidate in seen:
            continue
        seen.add(candidate)
        score = match_path(pattern, candidate.lower(), exact)
        if score is not None:
            scores[candidate] = score
    return scores


def rank(scores: dict[str, int], limit: int) -> list[RankedMatch]:
    if limit < 1:
        raise ValueError(f"limit must be positive, got {limit}")
    ordered = sorted(scores.items(), key=lambda item: item[1])
    return [RankedMatch(path=path, score=score) for path, score in ordered[:limit]]


def find_matches(
    pattern: str,
    roots: Iterable[str],
    *,
    limit: int = DEFAULT_LIMIT,
    exact: bool = False,
) -> list[RankedMatch]:
    scores = score_candidates(
        iter_candidates(roots),
        pattern.lower(),
        exact=exact,
    )
    return rank(scores, limit)
