"""
Match Selector

Picks the best and worst pairs out of all scored candidates and classifies
the overall match as pattern A (best >= 80) or B.
"""

from typing import List, Sequence

from .contracts import MatchContext, CandidatePair, ScoredPair, MatchSelection
from .constants import MatchPattern, PATTERN_A_THRESHOLD
from .scorer import batch_score


def classify_pattern(best_score: int) -> MatchPattern:
    return MatchPattern.A if best_score >= PATTERN_A_THRESHOLD else MatchPattern.B


def select_matches(
    pairs: Sequence[CandidatePair],
    ctx: MatchContext
) -> MatchSelection:
    """
    Score every pair, then choose best/worst.

    Best is taken from pairs without the -30 level deduction; if every pair
    has it, from all pairs. Worst is taken from all pairs. Both use Python's
    stable sort, so ties keep input order.

    Raises:
        ValueError: if no pairs are given
    """
    scored: List[ScoredPair] = batch_score(pairs, ctx)

    if not scored:
        raise ValueError("No pairs to score.")

    valid_best = [s for s in scored if not s.has_far_level_gap()]

    sorted_for_best = sorted(valid_best or scored, key=lambda s: s.score, reverse=True)
    sorted_for_worst = sorted(scored, key=lambda s: s.score)

    best = sorted_for_best[0]
    worst = sorted_for_worst[0]

    return MatchSelection(
        pattern=classify_pattern(best.score),
        best=best,
        worst=worst,
        scored=scored,
    )
