import logging
from typing import List

from fastapi import Depends
from sqlalchemy.orm import Session

from app.core.exceptions import Forbidden, NotFound
from app.db.models.todo.project import Project
from app.db.repositories.project import ProjectRepository
from app.db.session import get_db
from . import schemas

logger = logging.getLogger(__name__)


class ProjectService:
    """Owner-scoped access to projects.

    Every lookup by id checks existence first and ownership second, so a
    foreign project answers 403 and a missing one 404.
    """

    def __init__(self, db: Session):
        self.db = db
        self.projects = ProjectRepository(db)

    def list(self, owner_id: str) -> List[Project]:
        return self.projects.list_for_owner(owner_id)

    def create(self, owner_id: str, payload: schemas.ProjectCreate) -> Project:
        project = Project(
            user_id=owner_id,
            name=payload.name,
            description=payload.description,
        )
        project = self.projects.add(project)
        logger.info("Project %s created by user %s", project.id, owner_id)
        return project

    def get(self, project_id: str, caller_id: str) -> Project:
        project = self.projects.get(project_id)
        if project is None:
            raise NotFound("Project not found")
        if project.user_id != caller_id:
            logger.warning("User %s denied access to project %s", caller_id, project_id)
            raise Forbidden("Unauthorized access to project")
        return project

    def update(self, project_id: str, caller_id: str, payload: schemas.ProjectUpdate) -> Project:
        project = self.get(project_id, caller_id)
        fields = payload.model_dump(exclude_unset=True)
        project = self.projects.update(project, fields)
        logger.info("Project %s updated (%s)", project_id, ", ".join(sorted(fields)) or "no fields")
        return project

    def delete(self, project_id: str, caller_id: str) -> None:
        project = self.get(project_id, caller_id)
        removed = self.projects.delete_with_tasks(project)
        logger.info("Project %s deleted with %d task(s)", project_id, removed)


def get_project_service(db: Session = Depends(get_db)) -> ProjectService:
    return ProjectService(db)
