from sqlalchemy import Column, Integer, String, Text, Boolean, JSON

from .base import Base, new_id


class DiagnosisResult(Base):
    __tablename__ = "diagnosis_results"

    id = Column(String, primary_key=True, default=new_id)
    school_id = Column(String, nullable=False, index=True)

    # Content
    title = Column(String, nullable=False)
    body = Column(Text)
    cta_label = Column(String)
    cta_url = Column(String)

    # Selection
    priority = Column(Integer, nullable=False, default=0)
    sort_order = Column(Integer, nullable=False, default=0)
    is_fallback = Column(Boolean, nullable=False, default=False)
    is_active = Column(Boolean, nullable=False, default=True)

    # {"campus": [...], "genre": [...], "q2Tags": [...], "courseSlug": [...]}
    conditions = Column(JSON)
