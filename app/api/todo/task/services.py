import logging
from typing import List

from fastapi import Depends
from sqlalchemy.orm import Session

from app.api.todo.project.services import ProjectService
from app.core.exceptions import Forbidden, NotFound
from app.db.models.todo.task import Task, TaskStatus
from app.db.repositories.task import TaskRepository
from app.db.session import get_db
from . import schemas

logger = logging.getLogger(__name__)


class TaskService:
    """Tasks are reached only through a project the caller owns.

    Single-task operations run three checks in order: parent project
    (404/403), task existence (404), and that the task really sits under
    the project named in the path (403).
    """

    def __init__(self, db: Session):
        self.db = db
        self.projects = ProjectService(db)
        self.tasks = TaskRepository(db)

    def list(self, project_id: str, caller_id: str) -> List[Task]:
        self.projects.get(project_id, caller_id)
        return self.tasks.list_for_project(project_id)

    def create(self, project_id: str, caller_id: str, payload: schemas.TaskCreate) -> Task:
        self.projects.get(project_id, caller_id)
        task = Task(
            project_id=project_id,
            title=payload.title,
            status=payload.status.value,
            due_date=payload.due_date,
        )
        task = self.tasks.add(task)
        logger.info("Task %s created in project %s", task.id, project_id)
        return task

    def get(self, project_id: str, task_id: str, caller_id: str) -> Task:
        self.projects.get(project_id, caller_id)

        task = self.tasks.get(task_id)
        if task is None:
            raise NotFound("Task not found")
        if task.project_id != project_id:
            logger.warning("Task %s addressed through foreign project %s", task_id, project_id)
            raise Forbidden("Task does not belong to this project")
        return task

    def update(self, project_id: str, task_id: str, caller_id: str, payload: schemas.TaskUpdate) -> Task:
        task = self.get(project_id, task_id, caller_id)

        fields = payload.model_dump(exclude_unset=True)
        if "status" in fields:
            fields["status"] = TaskStatus(fields["status"]).value

        task = self.tasks.update(task, fields)
        logger.info("Task %s updated (%s)", task_id, ", ".join(sorted(fields)) or "no fields")
        return task

    def delete(self, project_id: str, task_id: str, caller_id: str) -> None:
        task = self.get(project_id, task_id, caller_id)
        self.tasks.delete(task)
        logger.info("Task %s deleted from project %s", task_id, project_id)


def get_task_service(db: Session = Depends(get_db)) -> TaskService:
    return TaskService(db)
