from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

UploadFieldName = Literal["resume", "coverLetter", "portfolio"]


class UploadFieldRule(BaseModel):
    name: UploadFieldName
    max_count: int = Field(ge=0)


class StoredFile(BaseModel):
    field: UploadFieldName
    original_name: str
    filename: str
    path: Path
    content_type: str
    size: int = 0


class UploadBatch(BaseModel):
    files: list[StoredFile] = Field(default_factory=list)

    def filenames(self, field: UploadFieldName) -> list[str]:
        return [item.filename for item in self.files if item.field == field]

    def paths(self) -> list[Path]:
        return [item.path for item in self.files]


class ApplicationForm(BaseModel):
    name: str | None = None
    email: str | None = None
    job_id: str | None = None

    def has_required_fields(self) -> bool:
        return bool(self.name) and bool(self.email) and bool(self.job_id)
