from __future__ import annotations

from collections.abc import Generator

from fastapi import Depends, Request, UploadFile
from sqlalchemy.orm import Session

from jobintake.config import Settings, get_settings
from jobintake.core.intake import ApplicationIntake
from jobintake.core.uploads import UploadGate
from jobintake.db.session import get_db_session
from jobintake.types import ApplicationForm


def get_db() -> Generator[Session, None, None]:
    yield from get_db_session()


def get_upload_gate(settings: Settings = Depends(get_settings)) -> UploadGate:
    return UploadGate(upload_dir=settings.upload_dir, max_file_bytes=settings.max_upload_bytes)


def get_intake(
    db: Session = Depends(get_db),
    gate: UploadGate = Depends(get_upload_gate),
    settings: Settings = Depends(get_settings),
) -> ApplicationIntake:
    return ApplicationIntake(db, gate, discard_orphaned_uploads=settings.discard_orphaned_uploads)


def _text_field(value: object) -> str | None:
    return value if isinstance(value, str) else None


async def get_submission(request: Request) -> tuple[ApplicationForm, dict[str, list[UploadFile]]]:
    form = await request.form()
    fields = ApplicationForm(
        name=_text_field(form.get("name")),
        email=_text_field(form.get("email")),
        job_id=_text_field(form.get("jobId")),
    )
    files: dict[str, list[UploadFile]] = {}
    for key, value in form.multi_items():
        if not isinstance(value, str):
            files.setdefault(key, []).append(value)
    return fields, files
