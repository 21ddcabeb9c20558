# Export all diagnosis models for easy imports
from .base import Base
from .campus import DiagnosisCampus
from .genre import DiagnosisGenre
from .course import DiagnosisCourse
from .instructor import (
    DiagnosisInstructor,
    instructor_campuses,
    instructor_genres,
    instructor_courses,
)
from .result import DiagnosisResult
from .schedule_slot import DiagnosisScheduleSlot, schedule_slot_courses

__all__ = [
    "Base",
    "DiagnosisCampus",
    "DiagnosisGenre",
    "DiagnosisCourse",
    "DiagnosisInstructor",
    "DiagnosisResult",
    "DiagnosisScheduleSlot",
    "instructor_campuses",
    "instructor_genres",
    "instructor_courses",
    "schedule_slot_courses",
]
