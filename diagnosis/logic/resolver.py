"""
Entity Resolver

Turns normalized answer values into tenant rows. Pure READ layer:
every query is filtered by school_id and is_active.
- Campus: mandatory (NoCampus)
- Genre: mandatory only when the Q4 tag maps to a slug (NoGenre)
- Recommended course: optional
"""

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from .catalog import QuestionCatalog, DEFAULT_CATALOG
from .errors import NoCampus, NoGenre
from .normalizer import map_genre_tag_to_slug, norm
from ..models import DiagnosisCampus, DiagnosisGenre, DiagnosisCourse

logger = logging.getLogger(__name__)


class EntityResolver:
    """Tenant-scoped lookups for campus, genre and course."""

    def __init__(self, db: Session, school_id: str, catalog: QuestionCatalog = DEFAULT_CATALOG):
        self.db = db
        self.school_id = school_id
        self.catalog = catalog

    def resolve_campus(self, slug: Optional[str]) -> DiagnosisCampus:
        """
        Raises:
            NoCampus: no active campus with this slug for the tenant
        """
        campus_slug = norm(slug)
        campus = None
        if campus_slug:
            campus = self.db.execute(
                select(DiagnosisCampus).where(
                    DiagnosisCampus.school_id == self.school_id,
                    DiagnosisCampus.slug == campus_slug,
                    DiagnosisCampus.is_active.is_(True),
                )
            ).scalars().first()

        if campus is None:
            logger.warning(f"⚠️ Campus '{campus_slug}' not found for school {self.school_id}")
            raise NoCampus(campus_slug)
        return campus

    def resolve_genre(self, genre_tag: Optional[str]) -> Optional[DiagnosisGenre]:
        """
        Returns None when the tag carries no genre filter (Genre_All).

        Raises:
            NoGenre: the tag maps to a slug with no active row
        """
        genre_slug = map_genre_tag_to_slug(genre_tag)
        if genre_slug is None:
            return None

        genre = self.db.execute(
            select(DiagnosisGenre).where(
                DiagnosisGenre.school_id == self.school_id,
                DiagnosisGenre.slug == genre_slug,
                DiagnosisGenre.is_active.is_(True),
            )
        ).scalars().first()

        if genre is None:
            logger.warning(f"⚠️ Genre '{genre_slug}' not found for school {self.school_id}")
            raise NoGenre(genre_slug)
        return genre

    def active_courses(self) -> List[DiagnosisCourse]:
        stmt = (
            select(DiagnosisCourse)
            .where(
                DiagnosisCourse.school_id == self.school_id,
                DiagnosisCourse.is_active.is_(True),
            )
            .order_by(DiagnosisCourse.sort_order.asc())
        )
        return list(self.db.execute(stmt).scalars().all())

    def resolve_course(self, q2_for_course: Optional[str]) -> Optional[DiagnosisCourse]:
        """
        First active course (by sort_order) whose q2_answer_tags contains the
        Q2 label. Exact, case-sensitive comparison after trimming.
        """
        value = norm(q2_for_course)
        if not value:
            return None
        for course in self.active_courses():
            tags = [norm(t) for t in (course.q2_answer_tags or [])]
            if value in tags:
                return course
        return None

    def course_levels(self, course: DiagnosisCourse) -> List[str]:
        """Explicit level tags, else the level tags behind the accepted Q2 labels."""
        if course.level_tags:
            return list(course.level_tags)
        return self.catalog.level_tags_for_labels(list(course.q2_answer_tags or []))
