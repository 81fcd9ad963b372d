from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional

from dateutil.parser import isoparse
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from ..calendar_api.data_models import TaskStatus


class PersonModel(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    name: Optional[str] = None
    email: Optional[str] = None


class DepartmentModel(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    name: Optional[str] = None


class AssignmentModel(BaseModel):
    model_config = ConfigDict(extra="allow")

    userId: str
    user: Optional[PersonModel] = None


class TaskModel(BaseModel):
    # allow other fields (projectId, logs, etc.)
    model_config = ConfigDict(extra="allow")

    id: str
    title: str
    status: TaskStatus
    createdAt: datetime
    dueDate: datetime
    startDate: Optional[datetime] = None
    description: Optional[str] = None
    priority: int = Field(5, validation_alias=AliasChoices("priority", "priorityBucket"))
    recurringInterval: Optional[int] = None
    parentTaskId: Optional[str] = None
    owner: Optional[PersonModel] = None
    department: Optional[DepartmentModel] = None
    assignments: List[AssignmentModel] = []
    tags: List[str] = []

    @field_validator("createdAt", "dueDate", "startDate", mode="before")
    @classmethod
    def parse_iso_timestamp(cls, v: Any):
        """Accept ISO-8601 strings (with or without time/offset)."""
        if isinstance(v, str):
            return isoparse(v)
        return v

    @field_validator("assignments", "tags", mode="before")
    @classmethod
    def none_as_empty(cls, v: Any):
        return [] if v is None else v
