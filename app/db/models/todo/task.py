import enum

from sqlalchemy import Column, String, ForeignKey
from app.db.session import Base
from app.db.types import UTCDateTime
from app.db.models.user import new_id
from app.core.dates import utcnow


class TaskStatus(str, enum.Enum):
    TODO = "todo"
    IN_PROGRESS = "in_progress"
    DONE = "done"


class Task(Base):
    __tablename__ = "tasks"

    id = Column(String(64), primary_key=True, index=True, default=new_id)
    title = Column(String(200), nullable=False)
    status = Column(String(20), nullable=False, default=TaskStatus.TODO.value)

    due_date = Column(UTCDateTime, nullable=True)           # 🗓 Due Date

    # Foreign Keys; the owner is reached through the project
    project_id = Column(String(64), ForeignKey("projects.id"), nullable=False, index=True)

    created_at = Column(UTCDateTime, nullable=False, default=utcnow, index=True)
    updated_at = Column(UTCDateTime, nullable=False, default=utcnow)
