from sqlalchemy import Column, Integer, String, Boolean

from .base import Base, new_id


class DiagnosisGenre(Base):
    __tablename__ = "diagnosis_genres"

    id = Column(String, primary_key=True, default=new_id)
    school_id = Column(String, nullable=False, index=True)
    label = Column(String, nullable=False)
    slug = Column(String, nullable=False)
    sort_order = Column(Integer, nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)
