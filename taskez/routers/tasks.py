from fastapi import APIRouter, Depends, Response, status

from taskez.dependencies import get_task_store
from taskez.schemas.task import (
    OwnerRequest, SearchTasksRequest, SaveTaskRequest, TaskRef,
    Task as TaskSchema, TaskResponse, TaskListResponse,
)
from taskez.services.tasks import TaskStore

router = APIRouter(prefix="/api", tags=["tasks"])


def _task(task) -> TaskSchema:
    return TaskSchema.model_validate(task)


@router.post("/get-tasks", response_model=TaskListResponse)
async def get_tasks(body: OwnerRequest, store: TaskStore = Depends(get_task_store)):
    tasks = await store.list_tasks(body.owner_id)
    return {"success": True, "message": "Tasks loaded", "tasks": [_task(t) for t in tasks]}

@router.post("/search-tasks", response_model=TaskListResponse)
async def search_tasks(body: SearchTasksRequest, store: TaskStore = Depends(get_task_store)):
    tasks = await store.search_tasks(body.owner_id, body.title)
    return {"success": True, "message": "Search complete", "tasks": [_task(t) for t in tasks]}

@router.post("/save-task", response_model=TaskResponse)
async def save_task(body: SaveTaskRequest, response: Response, store: TaskStore = Depends(get_task_store)):
    task, created = await store.save_task(
        owner_id=body.owner_id,
        title=body.title,
        content=body.content,
        start_at=body.start,
        end_at=body.end,
        color=body.color,
        task_id=body.task_id,
    )
    if created:
        response.status_code = status.HTTP_201_CREATED
        return {"success": True, "message": "Task created", "task": _task(task)}
    return {"success": True, "message": "Task updated", "task": _task(task)}

@router.post("/delete-task", response_model=TaskResponse)
async def delete_task(body: TaskRef, store: TaskStore = Depends(get_task_store)):
    task = await store.delete_task(body.task_id, body.owner_id)
    return {"success": True, "message": "Task deleted", "task": _task(task)}

@router.post("/finish-task", response_model=TaskResponse)
async def finish_task(body: TaskRef, store: TaskStore = Depends(get_task_store)):
    task = await store.finish_task(body.task_id, body.owner_id)
    return {"success": True, "message": "Task finished", "task": _task(task)}
