"""
Task router - API endpoints for a team's tasks.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Header, HTTPException, Response, status

from app.core.dependencies import (
    get_current_user,
    get_task_service,
    get_team_membership,
)
from app.models.team import TeamMember
from app.models.user import User
from app.schemas.task import TaskCreate, TaskDeleted, TaskRead, TaskUpdate
from app.services.task_list_cache import etag_matches, task_list_etag
from app.services.task_service import TaskService

router = APIRouter(prefix="/teams/{team_id}/tasks", tags=["tasks"])


@router.get("", response_model=List[TaskRead])
async def list_tasks(
    team_id: int,
    response: Response,
    if_none_match: Optional[str] = Header(None),
    _: TeamMember = Depends(get_team_membership),
    service: TaskService = Depends(get_task_service),
):
    """
    List all tasks of the team, most recent first.
    
    Answers 304 when the client's ETag still matches the rows returned.
    """
    tasks = await service.list_tasks(team_id)
    etag = task_list_etag(team_id, tasks)
    if etag_matches(if_none_match, etag):
        return Response(status_code=status.HTTP_304_NOT_MODIFIED, headers={"ETag": etag})
    
    response.headers["ETag"] = etag
    return tasks


@router.get("/{task_id}", response_model=TaskRead)
async def get_task(
    team_id: int,
    task_id: int,
    _: TeamMember = Depends(get_team_membership),
    service: TaskService = Depends(get_task_service),
):
    """Get a task by ID."""
    task = await service.get_task(team_id, task_id)
    
    if not task:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Task {task_id} not found for this team"
        )
    
    return task


@router.post("", response_model=TaskRead, status_code=status.HTTP_201_CREATED)
async def create_task(
    team_id: int,
    data: TaskCreate,
    user: User = Depends(get_current_user),
    service: TaskService = Depends(get_task_service),
):
    """Create a new task. Team owners only."""
    return await service.create_task(user.id, team_id, data)


@router.patch("/{task_id}", response_model=TaskRead)
async def update_task(
    team_id: int,
    task_id: int,
    data: TaskUpdate,
    user: User = Depends(get_current_user),
    service: TaskService = Depends(get_task_service),
):
    """Update title, description and/or status of a task."""
    return await service.update_task(task_id, user.id, team_id, data)


@router.post("/{task_id}/toggle", response_model=TaskRead)
async def toggle_task(
    team_id: int,
    task_id: int,
    user: User = Depends(get_current_user),
    service: TaskService = Depends(get_task_service),
):
    """Mark a pending task completed, or a completed task pending."""
    return await service.toggle_task_status(task_id, user.id, team_id)


@router.delete("/{task_id}", response_model=TaskDeleted)
async def delete_task(
    team_id: int,
    task_id: int,
    user: User = Depends(get_current_user),
    service: TaskService = Depends(get_task_service),
):
    """Delete a task permanently."""
    success = await service.delete_task(task_id, user.id, team_id)
    return TaskDeleted(success=success)
