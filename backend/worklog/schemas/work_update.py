"""Pydantic schemas for work updates.

The wire format uses camelCase keys (``projectType``, ``workDone``...); the
Python side stays snake_case through an alias generator.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class WorkUpdateCreate(_CamelModel):
    username: str | None = None
    name: str | None = None
    date: str | None = None
    project_type: str | None = None
    project_name: str | None = None
    work_done: str | None = None
    task: str | None = None
    help_taken: str | None = None
    status: str | None = None


class WorkUpdateRead(WorkUpdateCreate):
    id: int
    user_type: str | None = None
    timestamp: str


class WorkUpdateCreated(BaseModel):
    success: bool = True
    id: int


class DeleteResponse(BaseModel):
    success: bool = True
    message: str = "Deleted successfully"
