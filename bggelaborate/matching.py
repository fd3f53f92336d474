"""Fuzzy scoring of search hits against the title that was asked for."""

from __future__ import annotations

import string
from enum import Enum, auto
from typing import Iterable

from .models import BoardgameOverview

SCORE_MATCH = 16
GAP_START = -3
GAP_EXTENSION = -1
BONUS_FIRST_CHAR_MULTIPLIER = 2
BONUS_HEAD = SCORE_MATCH // 2
BONUS_BREAK = SCORE_MATCH // 2 + GAP_EXTENSION
BONUS_CAMEL = SCORE_MATCH // 2 + 2 * GAP_EXTENSION
BONUS_CONSECUTIVE = -(GAP_START + GAP_EXTENSION)
PENALTY_CASE_MISMATCH = GAP_EXTENSION * 2

_HARD_SEPARATORS = frozenset(" /\\|()[]{}")
_SOFT_SEPARATORS = frozenset(string.punctuation) - _HARD_SEPARATORS


class _CharType(Enum):
    EMPTY = auto()
    HARD_SEP = auto()
    SOFT_SEP = auto()
    NUMBER = auto()
    UPPER = auto()
    LOWER = auto()


def _char_type(ch: str | None) -> _CharType:
    if ch is None:
        return _CharType.EMPTY
    if ch in _HARD_SEPARATORS or ch.isspace():
        return _CharType.HARD_SEP
    if ch in _SOFT_SEPARATORS:
        return _CharType.SOFT_SEP
    if ch.isdigit():
        return _CharType.NUMBER
    if ch.isupper():
        return _CharType.UPPER
    return _CharType.LOWER


def _bonus(prev: _CharType, cur: _CharType) -> int:
    if prev in (_CharType.EMPTY, _CharType.HARD_SEP):
        return BONUS_HEAD
    if prev is _CharType.SOFT_SEP:
        return BONUS_BREAK
    if prev in (_CharType.LOWER, _CharType.NUMBER) and cur is _CharType.UPPER:
        return BONUS_CAMEL
    return 0


def _bonuses(choice: str) -> list[int]:
    types = [_char_type(ch) for ch in choice]
    previous = [_CharType.EMPTY, *types[:-1]]
    return [_bonus(prev, cur) for prev, cur in zip(previous, types)]


def _max_or_none(*candidates: int | None) -> int | None:
    present = [c for c in candidates if c is not None]
    return max(present) if present else None


def _shift(value: int | None, delta: int) -> int | None:
    return None if value is None else value + delta


def fuzzy_score(choice: str, pattern: str) -> int | None:
    """Score how well ``pattern`` matches ``choice`` as a subsequence.

    Returns None when the pattern is not a subsequence of the choice and 0
    for an empty pattern. Matching ignores case unless the pattern holds an
    upper-case letter. Higher scores mean better matches: characters at word
    starts and runs of consecutive characters earn bonuses, gaps cost points.
    """
    if not pattern:
        return 0
    if len(pattern) > len(choice):
        return None
    case_sensitive = any(ch.isupper() for ch in pattern)
    bonuses = _bonuses(choice)
    width = len(choice)
    prev_match: list[int | None] = [None] * width
    prev_gap: list[int | None] = [None] * width

    for row, p_ch in enumerate(pattern):
        cur_match: list[int | None] = [None] * width
        cur_gap: list[int | None] = [None] * width
        for col, c_ch in enumerate(choice):
            equal = c_ch == p_ch if case_sensitive else c_ch.lower() == p_ch.lower()
            if equal:
                multiplier = BONUS_FIRST_CHAR_MULTIPLIER if row == 0 else 1
                score = SCORE_MATCH + bonuses[col] * multiplier
                if c_ch != p_ch:
                    score += PENALTY_CASE_MISMATCH
                if row == 0:
                    cur_match[col] = score
                elif col > 0:
                    best = _max_or_none(
                        _shift(prev_match[col - 1], BONUS_CONSECUTIVE),
                        prev_gap[col - 1],
                    )
                    cur_match[col] = _shift(best, score)
            if col > 0:
                cur_gap[col] = _max_or_none(
                    _shift(cur_match[col - 1], GAP_START),
                    _shift(cur_gap[col - 1], GAP_EXTENSION),
                )
        prev_match, prev_gap = cur_match, cur_gap

    return _max_or_none(*prev_match)


def _title_score(title: str, name: str) -> int | None:
    # The title is cut to the byte length of the name asked for.
    cut = title[: len(name.encode("utf-8"))]
    return fuzzy_score(cut.lower(), name.lower())


def find_best_boardgame(
    name: str, games: Iterable[BoardgameOverview]
) -> tuple[BoardgameOverview, int]:
    """Pick the search hit that best matches ``name`` and return it with its score.

    Ties keep the order of the search results; a hit that does not match at
    all scores 0. Raises ValueError if there are no games.
    """
    scored = [(game, _title_score(game.name, name)) for game in games]
    if not scored:
        raise ValueError("no games to choose from")
    scored.sort(
        key=lambda item: (item[1] is not None, item[1] if item[1] is not None else 0),
        reverse=True,
    )
    best, score = scored[0]
    return best, score if score is not None else 0