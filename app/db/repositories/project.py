import logging
from typing import List, Optional

from sqlalchemy.orm import Session
from app.core.dates import utcnow
from app.db.models.todo.project import Project
from app.db.models.todo.task import Task

logger = logging.getLogger(__name__)


class ProjectRepository:
    def __init__(self, db: Session):
        self.db = db

    def list_for_owner(self, owner_id: str) -> List[Project]:
        return (
            self.db.query(Project)
            .filter(Project.user_id == owner_id)
            .order_by(Project.created_at.desc())
            .all()
        )

    def get(self, project_id: str) -> Optional[Project]:
        return self.db.get(Project, project_id)

    def add(self, project: Project) -> Project:
        now = utcnow()
        project.created_at = now
        project.updated_at = now
        self.db.add(project)
        self.db.commit()
        self.db.refresh(project)
        return project

    def update(self, project: Project, fields: dict) -> Project:
        for key, value in fields.items():
            setattr(project, key, value)
        project.updated_at = utcnow()
        self.db.commit()
        # Read back what the database holds rather than trusting the in-memory copy
        self.db.refresh(project)
        return project

    def delete_with_tasks(self, project: Project) -> int:
        """Delete a project and every task under it as one transaction.

        Either all rows go or none do. Returns the number of tasks removed.
        """
        try:
            removed = (
                self.db.query(Task)
                .filter(Task.project_id == project.id)
                .delete(synchronize_session=False)
            )
            self.db.delete(project)
            self.db.commit()
        except Exception:
            self.db.rollback()
            logger.exception("Cascade delete of project %s rolled back", project.id)
            raise
        return removed
