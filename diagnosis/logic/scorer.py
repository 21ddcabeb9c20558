"""
Pair Scorer

Scores one (class, instructor) pair against the user's MatchContext.
Starts at 100 and applies independent deductions, each recorded in the
breakdown in the fixed order level -> age -> teacher:

- Level  : 0 / -10 / -30 (by distance on the 5-step scale)
- Age    : 0 / -15
- Teacher: 0 / -5

The score is not clamped.
"""

from typing import List, Optional, Sequence, Tuple

from .contracts import MatchContext, CandidatePair, ScoredPair, ScoreBreakdownItem
from .constants import (
    LEVEL_ORDER,
    UNKNOWN_LEVEL_DISTANCE,
    BASE_SCORE,
    LEVEL_NEAR_DEDUCTION,
    LEVEL_FAR_DEDUCTION,
    AGE_MISMATCH_DEDUCTION,
    TEACHER_MISMATCH_DEDUCTION,
    LEVEL_NEAR_NOTE,
    LEVEL_FAR_NOTE,
    AGE_MISMATCH_NOTE,
    TEACHER_MISMATCH_NOTE,
    BreakdownKey,
)


def _level_index(tag: str) -> int:
    try:
        return LEVEL_ORDER.index(tag)
    except ValueError:
        return -1


def level_distance(user_level: str, class_levels: Sequence[str]) -> int:
    """
    Minimum step distance between the user's level and any class level.

    Unknown user level, no class levels, or no recognised class level
    all count as UNKNOWN_LEVEL_DISTANCE (2).
    """
    idx_user = _level_index(user_level)
    if idx_user == -1 or not class_levels:
        return UNKNOWN_LEVEL_DISTANCE

    distances = [
        abs(idx - idx_user)
        for idx in (_level_index(lv) for lv in class_levels)
        if idx >= 0
    ]
    if not distances:
        return UNKNOWN_LEVEL_DISTANCE
    return min(distances)


def _level_deduction(distance: int) -> Optional[Tuple[int, str]]:
    if distance == 0:
        return None
    if distance == 1:
        return LEVEL_NEAR_DEDUCTION, LEVEL_NEAR_NOTE
    return LEVEL_FAR_DEDUCTION, LEVEL_FAR_NOTE


def score_pair(pair: CandidatePair, ctx: MatchContext) -> ScoredPair:
    """
    Score a single class x instructor pair.

    Args:
        pair: Class and instructor candidates
        ctx: User profile built from the answers

    Returns:
        ScoredPair with score and breakdown
    """
    score = BASE_SCORE
    breakdown: List[ScoreBreakdownItem] = []

    # 1. Level
    level = _level_deduction(level_distance(ctx.user_level, pair.clazz.levels or []))
    if level is not None:
        diff, note = level
        score += diff
        breakdown.append(ScoreBreakdownItem(key=BreakdownKey.LEVEL, score_diff=diff, note=note))

    # 2. Age target
    if ctx.user_age not in (pair.clazz.targets or []):
        score += AGE_MISMATCH_DEDUCTION
        breakdown.append(ScoreBreakdownItem(
            key=BreakdownKey.AGE,
            score_diff=AGE_MISMATCH_DEDUCTION,
            note=AGE_MISMATCH_NOTE,
        ))

    # 3. Teacher style
    if ctx.user_teacher_style not in (pair.teacher.styles or []):
        score += TEACHER_MISMATCH_DEDUCTION
        breakdown.append(ScoreBreakdownItem(
            key=BreakdownKey.TEACHER,
            score_diff=TEACHER_MISMATCH_DEDUCTION,
            note=TEACHER_MISMATCH_NOTE,
        ))

    return ScoredPair(
        clazz=pair.clazz,
        teacher=pair.teacher,
        score=score,
        breakdown=breakdown,
    )


def batch_score(pairs: Sequence[CandidatePair], ctx: MatchContext) -> List[ScoredPair]:
    """Score pairs in input order."""
    return [score_pair(p, ctx) for p in pairs]
