from typing import List

from fastapi import APIRouter, Depends, status

from app.api.schemas import ApiResponse
from app.core.security import CurrentUser, get_current_user
from . import schemas
from .services import TaskService, get_task_service

# Mounted under /projects/{project_id}/tasks
router = APIRouter()


@router.get("", response_model=ApiResponse[List[schemas.TaskOut]])
def tasks_by_project(
    project_id: str,
    service: TaskService = Depends(get_task_service),
    current_user: CurrentUser = Depends(get_current_user),
):
    tasks = service.list(project_id, current_user.id)
    return ApiResponse(message="Tasks retrieved successfully", data=tasks)


@router.post("", response_model=ApiResponse[schemas.TaskOut], status_code=status.HTTP_201_CREATED)
def create_task(
    project_id: str,
    task: schemas.TaskCreate,
    service: TaskService = Depends(get_task_service),
    current_user: CurrentUser = Depends(get_current_user),
):
    created = service.create(project_id, current_user.id, task)
    return ApiResponse(message="Task created successfully", data=created)


@router.get("/{task_id}", response_model=ApiResponse[schemas.TaskOut])
def get_task(
    project_id: str,
    task_id: str,
    service: TaskService = Depends(get_task_service),
    current_user: CurrentUser = Depends(get_current_user),
):
    task = service.get(project_id, task_id, current_user.id)
    return ApiResponse(message="Task retrieved successfully", data=task)


@router.put("/{task_id}", response_model=ApiResponse[schemas.TaskOut])
def update_task(
    project_id: str,
    task_id: str,
    task: schemas.TaskUpdate,
    service: TaskService = Depends(get_task_service),
    current_user: CurrentUser = Depends(get_current_user),
):
    updated = service.update(project_id, task_id, current_user.id, task)
    return ApiResponse(message="Task updated successfully", data=updated)


@router.delete("/{task_id}", response_model=ApiResponse[None])
def delete_task(
    project_id: str,
    task_id: str,
    service: TaskService = Depends(get_task_service),
    current_user: CurrentUser = Depends(get_current_user),
):
    service.delete(project_id, task_id, current_user.id)
    return ApiResponse(message="Task deleted successfully")
