"""
Instructor Resolver

Finds instructors at the resolved campus, relaxing genre/course constraints
step by step until a step returns someone:

    campus+genre+course -> campus+genre -> campus+course -> campus -> none

Campus is always a hard constraint. A step whose required entity was not
resolved is skipped.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from sqlalchemy import select
from sqlalchemy.orm import Session

from .constants import InstructorMatchedBy
from ..models import DiagnosisCampus, DiagnosisGenre, DiagnosisCourse, DiagnosisInstructor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RelaxationStep:
    label: InstructorMatchedBy
    use_genre: bool
    use_course: bool

    def is_applicable(self, genre: Optional[DiagnosisGenre], course: Optional[DiagnosisCourse]) -> bool:
        if self.use_genre and genre is None:
            return False
        if self.use_course and course is None:
            return False
        return True


RELAXATION_STEPS: Tuple[RelaxationStep, ...] = (
    RelaxationStep(InstructorMatchedBy.CAMPUS_GENRE_COURSE, use_genre=True, use_course=True),
    RelaxationStep(InstructorMatchedBy.CAMPUS_GENRE, use_genre=True, use_course=False),
    RelaxationStep(InstructorMatchedBy.CAMPUS_COURSE, use_genre=False, use_course=True),
    RelaxationStep(InstructorMatchedBy.CAMPUS, use_genre=False, use_course=False),
)


def find_instructors(
    db: Session,
    school_id: str,
    campus: DiagnosisCampus,
    genre: Optional[DiagnosisGenre] = None,
    course: Optional[DiagnosisCourse] = None,
) -> List[DiagnosisInstructor]:
    """Active tenant instructors teaching at campus (and genre/course when given), by sort_order."""
    stmt = select(DiagnosisInstructor).where(
        DiagnosisInstructor.school_id == school_id,
        DiagnosisInstructor.is_active.is_(True),
        DiagnosisInstructor.campuses.any(DiagnosisCampus.id == campus.id),
    )
    if genre is not None:
        stmt = stmt.where(DiagnosisInstructor.genres.any(DiagnosisGenre.id == genre.id))
    if course is not None:
        stmt = stmt.where(DiagnosisInstructor.courses.any(DiagnosisCourse.id == course.id))

    stmt = stmt.order_by(DiagnosisInstructor.sort_order.asc())
    return list(db.execute(stmt).scalars().all())


def resolve_instructors(
    db: Session,
    school_id: str,
    campus: DiagnosisCampus,
    genre: Optional[DiagnosisGenre] = None,
    course: Optional[DiagnosisCourse] = None,
    steps: Tuple[RelaxationStep, ...] = RELAXATION_STEPS,
) -> Tuple[List[DiagnosisInstructor], InstructorMatchedBy]:
    """
    Walk the relaxation steps and stop at the first non-empty result.

    Returns:
        (instructors, label of the step that produced them, or NONE)
    """
    for step in steps:
        if not step.is_applicable(genre, course):
            continue

        rows = find_instructors(
            db,
            school_id,
            campus,
            genre=genre if step.use_genre else None,
            course=course if step.use_course else None,
        )
        if rows:
            logger.info(f"👩‍🏫 Instructors matched by {step.label.value}: {len(rows)}")
            return rows, step.label

    logger.info(f"👩‍🏫 No instructors at campus {campus.slug}")
    return [], InstructorMatchedBy.NONE
