from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class JobResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(alias="_id")
    title: str
    company: str
    location: str


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str
