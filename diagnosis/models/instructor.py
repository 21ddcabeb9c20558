from sqlalchemy import Column, Integer, String, Boolean, JSON, ForeignKey, Table
from sqlalchemy.orm import relationship

from .base import Base, new_id


instructor_campuses = Table(
    "diagnosis_instructor_campuses",
    Base.metadata,
    Column("instructor_id", String, ForeignKey("diagnosis_instructors.id", ondelete="CASCADE"), primary_key=True),
    Column("campus_id", String, ForeignKey("diagnosis_campuses.id", ondelete="CASCADE"), primary_key=True),
)

instructor_genres = Table(
    "diagnosis_instructor_genres",
    Base.metadata,
    Column("instructor_id", String, ForeignKey("diagnosis_instructors.id", ondelete="CASCADE"), primary_key=True),
    Column("genre_id", String, ForeignKey("diagnosis_genres.id", ondelete="CASCADE"), primary_key=True),
)

instructor_courses = Table(
    "diagnosis_instructor_courses",
    Base.metadata,
    Column("instructor_id", String, ForeignKey("diagnosis_instructors.id", ondelete="CASCADE"), primary_key=True),
    Column("course_id", String, ForeignKey("diagnosis_courses.id", ondelete="CASCADE"), primary_key=True),
)


class DiagnosisInstructor(Base):
    __tablename__ = "diagnosis_instructors"

    id = Column(String, primary_key=True, default=new_id)
    school_id = Column(String, nullable=False, index=True)
    label = Column(String, nullable=False)
    slug = Column(String, nullable=False)
    sort_order = Column(Integer, nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)

    # Teaching style tags (Style_Healing, Style_Hard, ...)
    style_tags = Column(JSON, nullable=False, default=list)

    campuses = relationship("DiagnosisCampus", secondary=instructor_campuses)
    genres = relationship("DiagnosisGenre", secondary=instructor_genres)
    courses = relationship("DiagnosisCourse", secondary=instructor_courses)
