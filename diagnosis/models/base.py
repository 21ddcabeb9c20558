# Re-export the main Base class from db.py for diagnosis models
# so every table shares one metadata
import uuid

from db import Base


def new_id() -> str:
    return uuid.uuid4().hex


__all__ = ["Base", "new_id"]
