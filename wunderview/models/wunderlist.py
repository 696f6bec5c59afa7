from pydantic import BaseModel


class CreateTaskRequest(BaseModel):
    name: str
    parameters: dict = {}  # extra task attributes, e.g. {"due_date": "2024-01-01", "starred": true}


class CompleteTaskRequest(BaseModel):
    revision: int
