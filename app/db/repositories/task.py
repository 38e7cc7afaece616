from typing import List, Optional

from sqlalchemy.orm import Session
from app.core.dates import utcnow
from app.db.models.todo.task import Task


class TaskRepository:
    def __init__(self, db: Session):
        self.db = db

    def list_for_project(self, project_id: str) -> List[Task]:
        return (
            self.db.query(Task)
            .filter(Task.project_id == project_id)
            .order_by(Task.created_at.desc())
            .all()
        )

    def get(self, task_id: str) -> Optional[Task]:
        return self.db.get(Task, task_id)

    def add(self, task: Task) -> Task:
        now = utcnow()
        task.created_at = now
        task.updated_at = now
        self.db.add(task)
        self.db.commit()
        self.db.refresh(task)
        return task

    def update(self, task: Task, fields: dict) -> Task:
        for key, value in fields.items():
            setattr(task, key, value)
        task.updated_at = utcnow()
        self.db.commit()
        self.db.refresh(task)
        return task

    def delete(self, task: Task) -> None:
        self.db.delete(task)
        self.db.commit()
