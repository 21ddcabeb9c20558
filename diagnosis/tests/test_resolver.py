"""
Tests for tenant-scoped entity resolution.
"""

import pytest

from diagnosis.logic.errors import NoCampus, NoGenre
from diagnosis.logic.resolver import EntityResolver
from diagnosis.models import DiagnosisCampus, DiagnosisCourse
from diagnosis.seed import Q2_BEGINNER_LABEL, Q2_ADVANCED_LABEL

SCHOOL_ID = "school-a"
OTHER_SCHOOL_ID = "school-b"


def test_resolve_campus(db_session, seeded):
    campus = EntityResolver(db_session, SCHOOL_ID).resolve_campus(" shibuya ")
    assert campus.id == seeded["campuses"]["shibuya"].id


def test_inactive_campus_is_not_resolved(db_session, seeded):
    seeded["campuses"]["shinjuku"].is_active = False
    db_session.flush()

    with pytest.raises(NoCampus) as exc:
        EntityResolver(db_session, SCHOOL_ID).resolve_campus("shinjuku")
    assert exc.value.debug == {"campusSlug": "shinjuku"}


def test_campus_lookup_is_tenant_scoped(db_session, seeded):
    db_session.add(DiagnosisCampus(school_id=OTHER_SCHOOL_ID, label="池袋校", slug="ikebukuro"))
    db_session.flush()

    with pytest.raises(NoCampus):
        EntityResolver(db_session, SCHOOL_ID).resolve_campus("ikebukuro")
    with pytest.raises(NoCampus):
        EntityResolver(db_session, OTHER_SCHOOL_ID).resolve_campus("shibuya")


def test_genre_all_skips_genre_resolution(db_session, seeded):
    assert EntityResolver(db_session, SCHOOL_ID).resolve_genre("Genre_All") is None


def test_resolve_genre(db_session, seeded):
    genre = EntityResolver(db_session, SCHOOL_ID).resolve_genre("Genre_KPOP")
    assert genre.slug == "kpop"
    assert genre.school_id == SCHOOL_ID


def test_mapped_genre_without_row_is_fatal(db_session, seeded):
    with pytest.raises(NoGenre):
        EntityResolver(db_session, SCHOOL_ID).resolve_genre("Genre_JAZZ")


def test_resolve_course_by_label_and_sort_order(db_session, seeded):
    db_session.add(DiagnosisCourse(
        school_id=SCHOOL_ID, label="later", slug="later", sort_order=99,
        q2_answer_tags=[Q2_BEGINNER_LABEL],
    ))
    db_session.flush()

    resolver = EntityResolver(db_session, SCHOOL_ID)
    assert resolver.resolve_course(Q2_BEGINNER_LABEL).slug == "kpop-beginner"
    assert resolver.resolve_course(Q2_ADVANCED_LABEL).slug == "kpop-advanced"


def test_course_match_is_exact(db_session, seeded):
    resolver = EntityResolver(db_session, SCHOOL_ID)
    assert resolver.resolve_course("Lv1_入門") is None
    assert resolver.resolve_course(Q2_BEGINNER_LABEL[:-1]) is None
    assert resolver.resolve_course(None) is None


def test_course_levels_fall_back_to_q2_labels(db_session):
    course = DiagnosisCourse(
        school_id=SCHOOL_ID, label="c", slug="c",
        q2_answer_tags=[Q2_BEGINNER_LABEL, Q2_ADVANCED_LABEL], level_tags=[],
    )
    assert EntityResolver(db_session, SCHOOL_ID).course_levels(course) == ["Lv1_入門", "Lv4_中上級"]
