from __future__ import annotations

from collections.abc import Iterable

from pathfuzz.models import MatchState


def _cheapest_per_index(states: Iterable[MatchState]) -> list[MatchState]:
    # States at the same index face the same remaining subject.
    cheapest: dict[int, MatchState] = {}
    for state in states:
        current = cheapest.get(state.index)
        if current is None or state.score < current.score:
            cheapest[state.index] = state
    return list(cheapest.values())


def fuzzy_match(subject: str, pattern: str) -> int | None:
    """Score a subject using subsequence matching; lower scores are better.

    The score counts subject characters skipped between the first and last
    matched characters. Every occurrence of a pattern character is explored
    both taken and skipped, so "system" against "sys_system" settles on the
    contiguous suffix instead of the first greedy alignment.
    """
    if not pattern:
        return 0

    states = [MatchState(0)]
    completed: list[MatchState] = []

    for char in subject:
        next_states: list[MatchState] = []
        for state in states:
            if state.is_done(pattern):
                completed.append(state)
            elif state.accepts(char, pattern):
                next_states.append(state)
                advanced = state.advance()
                if advanced.is_done(pattern):
                    completed.append(advanced)
                else:
                    next_states.append(advanced)
            elif state.started:
                next_states.append(state.penalize())
            else:
                next_states.append(state)
        states = _cheapest_per_index(next_states)

    if not completed:
        return None
    return min(state.score for state in completed)
