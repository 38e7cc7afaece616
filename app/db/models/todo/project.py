from sqlalchemy import Column, String, ForeignKey
from app.db.session import Base
from app.db.types import UTCDateTime
from app.db.models.user import new_id
from app.core.dates import utcnow


class Project(Base):
    __tablename__ = "projects"

    id = Column(String(64), primary_key=True, index=True, default=new_id)
    name = Column(String(100), nullable=False)
    description = Column(String(500), nullable=False)

    # Foreign key to User (the single owner)
    user_id = Column(String(64), ForeignKey("users.id"), nullable=False, index=True)

    created_at = Column(UTCDateTime, nullable=False, default=utcnow, index=True)
    updated_at = Column(UTCDateTime, nullable=False, default=utcnow)
