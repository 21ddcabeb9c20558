"""
Catalog Queries

Read-only, tenant-scoped listings backing the public embed endpoints
(campuses, courses, results, weekly schedule).
- NO scoring logic
- NO DB writes
"""

from typing import Any, Dict, List

from sqlalchemy import select
from sqlalchemy.orm import Session

from .constants import WEEKDAY_ORDER
from ..models import (
    DiagnosisCampus,
    DiagnosisCourse,
    DiagnosisResult,
    DiagnosisScheduleSlot,
)


def list_campuses(db: Session, school_id: str, full: bool = False) -> List[Dict[str, Any]]:
    """
    Active campuses by sort_order.

    Without ``full`` rows are shaped like Q1 options ({id: slug, label, isOnline}).
    """
    rows = db.execute(
        select(DiagnosisCampus)
        .where(DiagnosisCampus.school_id == school_id, DiagnosisCampus.is_active.is_(True))
        .order_by(DiagnosisCampus.sort_order.asc())
    ).scalars().all()

    if not full:
        return [{"id": c.slug, "label": c.label, "isOnline": bool(c.is_online)} for c in rows]

    return [
        {
            "id": c.id,
            "schoolId": c.school_id,
            "label": c.label,
            "slug": c.slug,
            "sortOrder": c.sort_order,
            "isOnline": bool(c.is_online),
            "isActive": bool(c.is_active),
            "address": c.address,
            "access": c.access,
            "googleMapUrl": c.google_map_url,
        }
        for c in rows
    ]


def list_courses(db: Session, school_id: str) -> List[Dict[str, Any]]:
    """Active courses; ``id`` is the slug, ``dbId`` the row id."""
    rows = db.execute(
        select(DiagnosisCourse)
        .where(DiagnosisCourse.school_id == school_id, DiagnosisCourse.is_active.is_(True))
        .order_by(DiagnosisCourse.sort_order.asc())
    ).scalars().all()

    return [
        {
            "id": c.slug,
            "dbId": c.id,
            "label": c.label,
            "q2AnswerTags": list(c.q2_answer_tags or []),
        }
        for c in rows
    ]


def list_results(db: Session, school_id: str, include_inactive: bool = False) -> List[Dict[str, Any]]:
    stmt = select(DiagnosisResult).where(DiagnosisResult.school_id == school_id)
    if not include_inactive:
        stmt = stmt.where(DiagnosisResult.is_active.is_(True))
    stmt = stmt.order_by(DiagnosisResult.sort_order.asc(), DiagnosisResult.title.asc())

    return [
        {
            "id": r.id,
            "title": r.title,
            "sortOrder": r.sort_order,
            "isActive": bool(r.is_active),
        }
        for r in db.execute(stmt).scalars().all()
    ]


def weekly_schedule(db: Session, school_id: str, course_id: str) -> Dict[str, Any]:
    """Active slots linked to the course, grouped by weekday."""
    slots = db.execute(
        select(DiagnosisScheduleSlot)
        .where(
            DiagnosisScheduleSlot.school_id == school_id,
            DiagnosisScheduleSlot.is_active.is_(True),
            DiagnosisScheduleSlot.courses.any(DiagnosisCourse.id == course_id),
        )
        .order_by(DiagnosisScheduleSlot.sort_order.asc(), DiagnosisScheduleSlot.created_at.asc())
    ).scalars().all()

    grouped: Dict[str, List[Dict[str, Any]]] = {day: [] for day in WEEKDAY_ORDER}
    for s in slots:
        if s.weekday not in grouped:
            continue
        grouped[s.weekday].append({
            "id": s.id,
            "genreText": s.genre_text,
            "timeText": s.time_text,
            "teacher": s.teacher,
            "place": s.place,
        })

    return {"schedule": grouped, "order": list(WEEKDAY_ORDER)}
