from sqlalchemy import Column, Integer, String, Text, Boolean

from .base import Base, new_id


class DiagnosisCampus(Base):
    __tablename__ = "diagnosis_campuses"

    id = Column(String, primary_key=True, default=new_id)
    school_id = Column(String, nullable=False, index=True)
    label = Column(String, nullable=False)
    slug = Column(String, nullable=False)
    sort_order = Column(Integer, nullable=False, default=0)
    is_online = Column(Boolean, nullable=False, default=False)
    is_active = Column(Boolean, nullable=False, default=True)

    # Access information shown on the result screen
    address = Column(Text)
    access = Column(Text)
    google_map_url = Column(String)
