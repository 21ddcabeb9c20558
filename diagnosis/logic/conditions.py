"""
Condition Matcher

Chooses the DiagnosisResult row to present. Candidates are evaluated in
(priority DESC, sort_order ASC) order:
1. First row whose conditions match the resolved context
2. Otherwise the first row flagged is_fallback
3. Otherwise the first row
An empty candidate list raises NoMatchedResult.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from sqlalchemy import select
from sqlalchemy.orm import Session

from .contracts import ResultConditions, ResolutionContext
from .constants import ResultMatchedBy
from .errors import NoMatchedResult
from ..models import DiagnosisResult

logger = logging.getLogger(__name__)


def includes_or_empty(values: List[str], value: Optional[str]) -> bool:
    """Wildcard when the list is empty; otherwise value must be present and listed."""
    if not values:
        return True
    if not value:
        return False
    return value in values


def matches_conditions(cond: ResultConditions, ctx: ResolutionContext) -> bool:
    """All four dimensions must match (AND)."""
    if not includes_or_empty(cond.campus, ctx.campus_slug):
        return False
    if not includes_or_empty(cond.genre, ctx.genre_slug):
        return False

    if cond.q2_tags:
        if not ctx.q2_for_course or ctx.q2_for_course not in cond.q2_tags:
            return False

    if cond.course_slug:
        if not ctx.course_slug:
            return False
        if ctx.course_slug not in cond.course_slug:
            return False

    return True


def load_candidates(db: Session, school_id: str) -> List[DiagnosisResult]:
    """Active results for the tenant in evaluation order."""
    stmt = (
        select(DiagnosisResult)
        .where(DiagnosisResult.school_id == school_id, DiagnosisResult.is_active.is_(True))
        .order_by(DiagnosisResult.priority.desc(), DiagnosisResult.sort_order.asc())
    )
    return list(db.execute(stmt).scalars().all())


def choose_result(
    candidates: Sequence[DiagnosisResult],
    ctx: ResolutionContext
) -> Tuple[DiagnosisResult, ResultMatchedBy]:
    """
    Apply the precedence chain to already ordered candidates.

    Raises:
        NoMatchedResult: if there are no candidates at all
    """
    if not candidates:
        raise NoMatchedResult()

    for row in candidates:
        if matches_conditions(ResultConditions.parse(row.conditions), ctx):
            return row, ResultMatchedBy.CONDITIONS
        logger.debug(f"Result {row.id} rejected by conditions")

    for row in candidates:
        if row.is_fallback:
            return row, ResultMatchedBy.FALLBACK

    return candidates[0], ResultMatchedBy.FIRST


def select_result(
    db: Session,
    school_id: str,
    ctx: ResolutionContext
) -> Tuple[DiagnosisResult, ResultMatchedBy]:
    candidates = load_candidates(db, school_id)
    if not candidates:
        logger.warning(f"⚠️ No active results configured for school {school_id}")
    return choose_result(candidates, ctx)
