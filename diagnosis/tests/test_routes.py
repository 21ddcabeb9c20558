"""
HTTP-level tests for the diagnosis router.
"""

import inspect

import pytest
from fastapi.testclient import TestClient

from db import get_session
from main import app

SCHOOL_ID = "school-a"


@pytest.fixture
def client(db_session, seeded):
    def _session():
        yield db_session

    app.dependency_overrides[get_session] = _session
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def test_post_result(client, seeded, make_answers):
    res = client.post("/api/diagnosis/result", json={"schoolId": SCHOOL_ID, "answers": make_answers()})

    assert res.status_code == 200
    body = res.json()
    assert body["pattern"] == "A"
    assert body["score"] == 100
    assert body["bestMatch"]["className"] == "はじめてのK-POP"
    assert body["bestMatch"]["classId"] == seeded["courses"]["kpop-beginner"].id
    assert body["selectedCampus"]["slug"] == "shibuya"
    assert body["selectedCampus"]["isOnline"] is False
    assert body["result"]["id"] == seeded["results"]["kpop"].id
    assert [i["slug"] for i in body["instructors"]] == ["mika"]
    assert body["debug"]["instructorMatchedBy"] == "campus+genre+course"
    assert body["concernMessage"]


def test_post_result_without_school_id(client, make_answers):
    res = client.post("/api/diagnosis/result", json={"answers": make_answers()})

    assert res.status_code == 400
    assert res.json()["error"] == "NO_SCHOOL_ID"


def test_post_result_with_missing_answers(client):
    res = client.post("/api/diagnosis/result", json={"schoolId": SCHOOL_ID, "answers": {"Q1": "shibuya"}})

    assert res.status_code == 400
    body = res.json()
    assert body["error"] == "MISSING_ANSWERS"
    assert body["debug"]["missing"] == ["Q2", "Q3", "Q4", "Q5", "Q6"]


def test_post_result_with_unknown_campus(client, make_answers):
    res = client.post(
        "/api/diagnosis/result",
        json={"schoolId": SCHOOL_ID, "answers": make_answers(Q1="ikebukuro")},
    )

    assert res.status_code == 400
    body = res.json()
    assert body["error"] == "NO_CAMPUS"
    assert body["debug"] == {"campusSlug": "ikebukuro"}


def test_post_result_with_null_answer(client, make_answers):
    res = client.post("/api/diagnosis/result", json={"schoolId": SCHOOL_ID, "answers": make_answers(Q3=None)})

    assert res.status_code == 400
    body = res.json()
    assert body["error"] == "MISSING_ANSWERS"
    assert body["debug"]["missing"] == ["Q3"]


def test_post_result_with_malformed_answers(client):
    res = client.post("/api/diagnosis/result", json={"schoolId": SCHOOL_ID, "answers": "Q1"})

    assert res.status_code == 400
    body = res.json()
    assert body["error"] == "INVALID_REQUEST"
    assert all(f.startswith("body.answers") for f in body["debug"]["fields"])


def test_post_result_with_array_body(client):
    res = client.post("/api/diagnosis/result", json=[SCHOOL_ID])

    assert res.status_code == 400
    assert res.json()["error"] == "INVALID_REQUEST"


def test_post_result_without_body(client):
    res = client.post("/api/diagnosis/result")

    assert res.status_code == 400
    assert res.json()["error"] == "NO_SCHOOL_ID"


def test_questions(client):
    res = client.get("/api/diagnosis/questions")

    assert res.status_code == 200
    questions = res.json()
    assert [q["id"] for q in questions] == ["Q1", "Q2", "Q3", "Q4", "Q5", "Q6"]
    online = [o for o in questions[0]["options"] if o["id"] == "online"][0]
    assert online["isOnline"] is True
    assert all("messageKey" in o for o in questions[5]["options"])


def test_campuses(client):
    res = client.get("/api/diagnosis/campuses", params={"schoolId": SCHOOL_ID})

    assert res.status_code == 200
    assert res.json() == [
        {"id": "shibuya", "label": "渋谷校", "isOnline": False},
        {"id": "shinjuku", "label": "新宿校", "isOnline": False},
        {"id": "online", "label": "オンライン", "isOnline": True},
    ]


def test_campuses_full_with_legacy_school_param(client, seeded):
    res = client.get("/api/diagnosis/campuses", params={"school": SCHOOL_ID, "full": "1"})

    assert res.status_code == 200
    first = res.json()[0]
    assert first["id"] == seeded["campuses"]["shibuya"].id
    assert first["slug"] == "shibuya"
    assert first["address"] == "東京都渋谷区道玄坂1-1-1"


def test_campuses_without_school(client):
    res = client.get("/api/diagnosis/campuses")

    assert res.status_code == 400
    assert res.json()["error"] == "NO_SCHOOL_ID"


def test_courses(client, seeded):
    res = client.get("/api/diagnosis/courses", params={"schoolId": SCHOOL_ID})

    assert res.status_code == 200
    courses = res.json()
    assert [c["id"] for c in courses] == ["kpop-beginner", "kpop-advanced"]
    assert courses[0]["dbId"] == seeded["courses"]["kpop-beginner"].id


def test_results_hide_inactive_by_default(client, db_session, seeded):
    seeded["results"]["default"].is_active = False
    db_session.flush()

    active = client.get("/api/diagnosis/results", params={"schoolId": SCHOOL_ID}).json()
    everything = client.get(
        "/api/diagnosis/results", params={"schoolId": SCHOOL_ID, "includeInactive": "true"}
    ).json()

    assert [r["id"] for r in active] == [seeded["results"]["kpop"].id]
    assert len(everything) == 2


def test_schedule(client, seeded):
    course_id = seeded["courses"]["kpop-beginner"].id
    res = client.get("/api/diagnosis/schedule", params={"schoolId": SCHOOL_ID, "courseId": course_id})

    assert res.status_code == 200
    body = res.json()
    assert body["order"] == ["MON", "TUE", "WED", "THU", "FRI", "SAT", "SUN"]
    assert [s["timeText"] for s in body["schedule"]["TUE"]] == ["19:30-20:30"]
    assert body["schedule"]["MON"] == []


def test_schedule_requires_course(client):
    res = client.get("/api/diagnosis/schedule", params={"schoolId": SCHOOL_ID})
    assert res.status_code == 400


def test_schedule_without_school(client, seeded):
    course_id = seeded["courses"]["kpop-beginner"].id
    res = client.get("/api/diagnosis/schedule", params={"courseId": course_id})

    assert res.status_code == 400
    assert res.json()["error"] == "NO_SCHOOL_ID"


def test_health(client):
    assert client.get("/api/diagnosis/health").json()["status"] == "ok"
    assert client.get("/health").json() == {"status": "ok"}


def test_session_dependency_is_a_plain_generator():
    assert inspect.isgeneratorfunction(get_session)

    gen = get_session()
    session = next(gen)
    assert session.is_active
    gen.close()
