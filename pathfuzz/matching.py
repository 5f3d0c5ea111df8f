from __future__ import annotations

import re

from pathfuzz.search import fuzzy_match

_SEPARATORS = re.compile(r"[/\\]")

# Alone, these would allow anything or nothing, so they compare verbatim.
_DEGENERATE_ANCHORS = frozenset({"^", "$", "^$"})


def split_components(path: str) -> list[str]:
    return _SEPARATORS.split(path)


def match_component(
    pattern_component: str, path_component: str, exact: bool = False
) -> int | None:
    """Resolve one aligned component pair to a cost, or None on rejection.

    A leading ``^`` asks for a prefix match and a trailing ``$`` for a suffix
    match; with both the component must be equal to the text between them.
    Anchored and exact comparisons cost nothing when they succeed. Anything
    else is scored by :func:`fuzzy_match`.
    """
    if not pattern_component:
        return 0

    if exact or pattern_component in _DEGENERATE_ANCHORS:
        return 0 if path_component == pattern_component else None

    start_anchor = pattern_component.startswith("^")
    end_anchor = pattern_component.endswith("$")

    if start_anchor and end_anchor:
        matched = path_component == pattern_component[1:-1]
    elif start_anchor:
        matched = path_component.startswith(pattern_component[1:])
    elif end_anchor:
        matched = path_component.endswith(pattern_component[:-1])
    else:
        return fuzzy_match(path_component, pattern_component)

    return 0 if matched else None


def match_path(pattern_path: str, candidate_path: str, exact: bool = False) -> int | None:
    """Match a pattern against a candidate path, component by component.

    Components are aligned from the end of both paths, so ``c`` can match
    ``tmp/a/b/c``. Candidate components in front of the first pattern
    component are ignored. A pattern with more components than the candidate
    never matches.
    """
    pattern_components = split_components(pattern_path)
    candidate_components = split_components(candidate_path)
    if len(pattern_components) > len(candidate_components):
        return None

    total = 0
    for pattern_component, candidate_component in zip(
        reversed(pattern_components), reversed(candidate_components)
    ):
        score = match_component(pattern_component, candidate_component, exact)
        if score is None:
            return None
        total += score
    return total
