from typing import List

from fastapi import APIRouter, Depends, status

from app.api.schemas import ApiResponse
from app.core.security import CurrentUser, get_current_user
from . import schemas
from .services import ProjectService, get_project_service

router = APIRouter()


@router.get("", response_model=ApiResponse[List[schemas.ProjectOut]])
def read_projects(
    service: ProjectService = Depends(get_project_service),
    current_user: CurrentUser = Depends(get_current_user),
):
    projects = service.list(current_user.id)
    return ApiResponse(message="Projects retrieved successfully", data=projects)


@router.post("", response_model=ApiResponse[schemas.ProjectOut], status_code=status.HTTP_201_CREATED)
def create_project(
    project: schemas.ProjectCreate,
    service: ProjectService = Depends(get_project_service),
    current_user: CurrentUser = Depends(get_current_user),
):
    created = service.create(current_user.id, project)
    return ApiResponse(message="Project created successfully", data=created)


@router.get("/{project_id}", response_model=ApiResponse[schemas.ProjectOut])
def read_project(
    project_id: str,
    service: ProjectService = Depends(get_project_service),
    current_user: CurrentUser = Depends(get_current_user),
):
    project = service.get(project_id, current_user.id)
    return ApiResponse(message="Project retrieved successfully", data=project)


@router.put("/{project_id}", response_model=ApiResponse[schemas.ProjectOut])
def update_project(
    project_id: str,
    project: schemas.ProjectUpdate,
    service: ProjectService = Depends(get_project_service),
    current_user: CurrentUser = Depends(get_current_user),
):
    updated = service.update(project_id, current_user.id, project)
    return ApiResponse(message="Project updated successfully", data=updated)


@router.delete("/{project_id}", response_model=ApiResponse[None])
def delete_project(
    project_id: str,
    service: ProjectService = Depends(get_project_service),
    current_user: CurrentUser = Depends(get_current_user),
):
    service.delete(project_id, current_user.id)
    return ApiResponse(message="Project and associated tasks deleted successfully")
