"""
Demo data for one school: campuses, genres, courses, instructors and results.
Used by the seed_diagnosis.py script and by the test suite.
"""

from typing import Dict, Any

from sqlalchemy.orm import Session

from .models import (
    DiagnosisCampus,
    DiagnosisGenre,
    DiagnosisCourse,
    DiagnosisInstructor,
    DiagnosisResult,
    DiagnosisScheduleSlot,
)

Q2_BEGINNER_LABEL = "運動は普通にできるけど、ダンスは未経験"
Q2_ELEMENTARY_LABEL = "昔少し習っていた / 学校の体育でやった程度"
Q2_ADVANCED_LABEL = "本格的に習った経験がある / バリバリ踊りたい"


def seed_demo_school(db: Session, school_id: str) -> Dict[str, Any]:
    """
    Insert a small, consistent data set and return the rows by slug.

    Nothing is committed; the caller owns the transaction.
    """
    shibuya = DiagnosisCampus(
        school_id=school_id, label="渋谷校", slug="shibuya", sort_order=10,
        address="東京都渋谷区道玄坂1-1-1", access="渋谷駅 徒歩5分",
        google_map_url="https://maps.google.com/?q=shibuya",
    )
    shinjuku = DiagnosisCampus(school_id=school_id, label="新宿校", slug="shinjuku", sort_order=20)
    online = DiagnosisCampus(
        school_id=school_id, label="オンライン", slug="online", sort_order=30, is_online=True,
    )

    kpop = DiagnosisGenre(school_id=school_id, label="K-POP", slug="kpop", sort_order=10)
    hiphop = DiagnosisGenre(school_id=school_id, label="HIPHOP", slug="hiphop", sort_order=20)

    beginner = DiagnosisCourse(
        school_id=school_id, label="はじめてのK-POP", slug="kpop-beginner", sort_order=10,
        q2_answer_tags=[Q2_BEGINNER_LABEL, Q2_ELEMENTARY_LABEL],
        level_tags=["Lv2_初級"],
        target_tags=["Age_Adult_Work", "Age_Student"],
    )
    advanced = DiagnosisCourse(
        school_id=school_id, label="K-POP アドバンス", slug="kpop-advanced", sort_order=20,
        q2_answer_tags=[Q2_ADVANCED_LABEL],
        level_tags=["Lv4_中上級"],
        target_tags=["Age_Adult_Work"],
    )

    mika = DiagnosisInstructor(
        school_id=school_id, label="MIKA", slug="mika", sort_order=10,
        style_tags=["Style_Healing"],
        campuses=[shibuya], genres=[kpop], courses=[beginner],
    )
    ren = DiagnosisInstructor(
        school_id=school_id, label="REN", slug="ren", sort_order=20,
        style_tags=["Style_Hard"],
        campuses=[shibuya, shinjuku], genres=[hiphop], courses=[advanced],
    )

    default_result = DiagnosisResult(
        school_id=school_id, title="まずは体験レッスンへ", body="気軽に参加できる体験レッスンから始めましょう。",
        cta_label="体験予約", cta_url="https://example.com/trial",
        priority=0, sort_order=100, is_fallback=True, conditions={},
    )
    kpop_result = DiagnosisResult(
        school_id=school_id, title="渋谷でK-POPデビュー", body="未経験から踊れるK-POPクラスです。",
        cta_label="体験予約", cta_url="https://example.com/trial/kpop",
        priority=10, sort_order=10,
        conditions={"campus": ["shibuya"], "genre": ["kpop"], "courseSlug": ["kpop-beginner"]},
    )

    slot = DiagnosisScheduleSlot(
        school_id=school_id, weekday="TUE", genre_text="K-POP", time_text="19:30-20:30",
        teacher="MIKA", place="渋谷校 Studio A", sort_order=10, courses=[beginner],
    )

    db.add_all([
        shibuya, shinjuku, online, kpop, hiphop, beginner, advanced,
        mika, ren, default_result, kpop_result, slot,
    ])
    db.flush()

    return {
        "campuses": {"shibuya": shibuya, "shinjuku": shinjuku, "online": online},
        "genres": {"kpop": kpop, "hiphop": hiphop},
        "courses": {"kpop-beginner": beginner, "kpop-advanced": advanced},
        "instructors": {"mika": mika, "ren": ren},
        "results": {"default": default_result, "kpop": kpop_result},
        "slots": [slot],
    }
