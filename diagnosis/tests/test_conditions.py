"""
Tests for result condition parsing, matching and the precedence chain.
"""

from types import SimpleNamespace

import pytest

from diagnosis.logic.conditions import (
    includes_or_empty,
    matches_conditions,
    choose_result,
    select_result,
)
from diagnosis.logic.contracts import ResultConditions, ResolutionContext
from diagnosis.logic.errors import NoMatchedResult
from diagnosis.models import DiagnosisResult


CONTEXTS = [
    ResolutionContext(),
    ResolutionContext(campus_slug="shibuya"),
    ResolutionContext(campus_slug="shibuya", genre_slug="kpop", q2_for_course="label", course_slug="c1"),
    ResolutionContext(campus_slug="online", genre_slug=None, q2_for_course=None, course_slug=None),
]


def _row(id, conditions=None, is_fallback=False):
    return SimpleNamespace(id=id, conditions=conditions, is_fallback=is_fallback)


@pytest.mark.parametrize("raw", [None, {}, [], "campus", {"campus": [], "genre": None, "q2Tags": "x"}])
def test_wildcard_conditions_match_every_context(raw):
    cond = ResultConditions.parse(raw)
    assert cond.is_wildcard()
    for ctx in CONTEXTS:
        assert matches_conditions(cond, ctx)


def test_parse_trims_and_drops_blank_values():
    cond = ResultConditions.parse({"campus": [" shibuya ", "", None], "courseSlug": ["c1"]})
    assert cond.campus == ["shibuya"]
    assert cond.course_slug == ["c1"]


def test_includes_or_empty():
    assert includes_or_empty([], None)
    assert not includes_or_empty(["kpop"], None)
    assert includes_or_empty(["kpop"], "kpop")
    assert not includes_or_empty(["kpop"], "jazz")


def test_all_dimensions_must_match():
    cond = ResultConditions.parse({"campus": ["shibuya"], "genre": ["kpop"]})
    assert matches_conditions(cond, ResolutionContext(campus_slug="shibuya", genre_slug="kpop"))
    assert not matches_conditions(cond, ResolutionContext(campus_slug="shibuya", genre_slug="jazz"))
    assert not matches_conditions(cond, ResolutionContext(campus_slug="shinjuku", genre_slug="kpop"))


def test_null_genre_only_matches_wildcard_genre():
    ctx = ResolutionContext(campus_slug="shibuya", genre_slug=None)
    assert matches_conditions(ResultConditions.parse({"campus": ["shibuya"]}), ctx)
    assert not matches_conditions(ResultConditions.parse({"genre": ["kpop"]}), ctx)


def test_course_slug_requires_resolved_course():
    cond = ResultConditions.parse({"courseSlug": ["c1"]})
    assert not matches_conditions(cond, ResolutionContext(campus_slug="shibuya"))
    assert matches_conditions(cond, ResolutionContext(campus_slug="shibuya", course_slug="c1"))


def test_q2_tags_compare_against_label():
    cond = ResultConditions.parse({"q2Tags": ["運動は普通にできるけど、ダンスは未経験"]})
    assert matches_conditions(cond, ResolutionContext(q2_for_course="運動は普通にできるけど、ダンスは未経験"))
    assert not matches_conditions(cond, ResolutionContext(q2_for_course="Lv1_入門"))


def test_first_matching_candidate_wins():
    rows = [_row("a", {"campus": ["shinjuku"]}), _row("b", {"campus": ["shibuya"]}), _row("c", {})]
    row, matched_by = choose_result(rows, ResolutionContext(campus_slug="shibuya"))
    assert (row.id, matched_by) == ("b", "conditions")


def test_fallback_used_when_nothing_matches():
    rows = [_row("a", {"campus": ["shinjuku"]}), _row("b", {"campus": ["ikebukuro"]}, is_fallback=True)]
    row, matched_by = choose_result(rows, ResolutionContext(campus_slug="shibuya"))
    assert (row.id, matched_by) == ("b", "fallback")


def test_first_candidate_used_without_fallback():
    rows = [_row("a", {"campus": ["shinjuku"]}), _row("b", {"campus": ["ikebukuro"]})]
    row, matched_by = choose_result(rows, ResolutionContext(campus_slug="shibuya"))
    assert (row.id, matched_by) == ("a", "first")


def test_no_candidates_raise():
    with pytest.raises(NoMatchedResult):
        choose_result([], ResolutionContext(campus_slug="shibuya"))


def test_select_result_orders_by_priority_then_sort_order(db_session):
    db_session.add_all([
        DiagnosisResult(id="low", school_id="s1", title="low", priority=0, sort_order=0, conditions={}),
        DiagnosisResult(id="high-2", school_id="s1", title="high-2", priority=5, sort_order=2, conditions={}),
        DiagnosisResult(id="high-1", school_id="s1", title="high-1", priority=5, sort_order=1, conditions={}),
        DiagnosisResult(id="inactive", school_id="s1", title="x", priority=99, is_active=False, conditions={}),
        DiagnosisResult(id="other", school_id="s2", title="x", priority=99, conditions={}),
    ])
    db_session.flush()

    row, matched_by = select_result(db_session, "s1", ResolutionContext(campus_slug="shibuya"))

    assert row.id == "high-1"
    assert matched_by == "conditions"


def test_select_result_raises_for_tenant_without_results(db_session):
    db_session.add(DiagnosisResult(school_id="s2", title="other tenant", conditions={}))
    db_session.flush()

    with pytest.raises(NoMatchedResult):
        select_result(db_session, "s1", ResolutionContext(campus_slug="shibuya"))
