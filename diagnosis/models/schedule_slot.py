from datetime import datetime

from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey, Table
from sqlalchemy.orm import relationship

from .base import Base, new_id


schedule_slot_courses = Table(
    "diagnosis_schedule_slot_courses",
    Base.metadata,
    Column("slot_id", String, ForeignKey("diagnosis_schedule_slots.id", ondelete="CASCADE"), primary_key=True),
    Column("course_id", String, ForeignKey("diagnosis_courses.id", ondelete="CASCADE"), primary_key=True),
)


class DiagnosisScheduleSlot(Base):
    __tablename__ = "diagnosis_schedule_slots"

    id = Column(String, primary_key=True, default=new_id)
    school_id = Column(String, nullable=False, index=True)
    weekday = Column(String(3), nullable=False)  # MON..SUN
    genre_text = Column(String)
    time_text = Column(String)
    teacher = Column(String)
    place = Column(String)
    sort_order = Column(Integer, nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=False), default=datetime.utcnow, nullable=False)

    courses = relationship("DiagnosisCourse", secondary=schedule_slot_courses)
