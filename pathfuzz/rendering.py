from __future__ import annotations

from rich.markup import escape

from pathfuzz.models import RankedMatch

SCORE_WIDTH = 6


def format_match_line(match: RankedMatch, *, show_score: bool = False) -> str:
    path = escape(match.path)
    if not show_score:
        return path
    return f"[dim]{match.score:>{SCORE_WIDTH}}[/dim]  {path}"
