from pydantic import AliasChoices, BaseModel, Field, field_validator
from datetime import datetime
from taskez.utils.sanitization import sanitize_string, coerce_timestamp, to_naive_utc
from taskez.schemas.user import ApiResponse


# ── Requests ────────────────────────────────────────────

class OwnerRequest(BaseModel):
    owner_id: int


class SearchTasksRequest(OwnerRequest):
    title: str = ""

    @field_validator("title", mode="before")
    @classmethod
    def sanitize(cls, v):
        return sanitize_string(v) if v is not None else ""


class TaskRef(OwnerRequest):
    task_id: int


class SaveTaskRequest(OwnerRequest):
    task_id: int | None = None
    title: str = Field(..., min_length=1, max_length=255)
    content: str | None = ""
    start: datetime
    end: datetime
    color: str = Field(..., min_length=1, max_length=50)

    @field_validator("title", "content", "color", mode="before")
    @classmethod
    def sanitize(cls, v):
        return sanitize_string(v)

    @field_validator("start", "end", mode="before")
    @classmethod
    def date_only(cls, v):
        return coerce_timestamp(v)

    @field_validator("start", "end")
    @classmethod
    def as_utc(cls, v):
        return to_naive_utc(v)


# ── Responses ───────────────────────────────────────────

class Task(BaseModel):
    task_id: int
    owner_id: int
    title: str
    content: str = ""
    start: datetime = Field(validation_alias=AliasChoices("start_date", "start"))
    end: datetime = Field(validation_alias=AliasChoices("end_date", "end"))
    color: str
    finished: bool = False
    deleted: bool = False

    class Config:
        from_attributes = True


class TaskResponse(ApiResponse):
    task: Task


class TaskListResponse(ApiResponse):
    tasks: list[Task] = []
