from fastapi import APIRouter

from wunderview.models.wunderlist import CompleteTaskRequest, CreateTaskRequest
from wunderview.services.wunderlist import get_client

router = APIRouter(prefix="/api/wunderlist", tags=["wunderlist"])


# --- Lists ---


@router.get("/lists")
def get_lists() -> list[dict]:
    return get_client().get_lists()


@router.get("/lists/{list_id}")
def get_list(list_id: int) -> dict:
    return get_client().get_list(list_id)


# --- Tasks ---


@router.get("/lists/{list_id}/tasks")
def get_list_tasks(list_id: int) -> list[dict]:
    return get_client().get_list_tasks(list_id)


@router.post("/lists/{list_id}/tasks", status_code=201)
def create_task(list_id: int, request: CreateTaskRequest) -> dict:
    return get_client().create_task(request.name, list_id, request.parameters)


@router.post("/tasks/{task_id}/complete")
def complete_task(task_id: int, request: CompleteTaskRequest) -> dict:
    return get_client().complete_task(task_id, request.revision)
