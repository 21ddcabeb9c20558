from sqlalchemy import Column, Integer, String, Boolean, JSON

from .base import Base, new_id


class DiagnosisCourse(Base):
    __tablename__ = "diagnosis_courses"

    id = Column(String, primary_key=True, default=new_id)
    school_id = Column(String, nullable=False, index=True)
    label = Column(String, nullable=False)
    slug = Column(String, nullable=False)
    sort_order = Column(Integer, nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)

    # Q2 option labels this course accepts (matched against the label, not the tag)
    q2_answer_tags = Column(JSON, nullable=False, default=list)

    # Scoring inputs; level_tags falls back to the tags behind q2_answer_tags
    level_tags = Column(JSON, nullable=False, default=list)
    target_tags = Column(JSON, nullable=False, default=list)
