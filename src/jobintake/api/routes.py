from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, UploadFile
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from jobintake.api.deps import get_db, get_intake, get_submission
from jobintake.api.schemas import ErrorResponse, JobResponse, MessageResponse
from jobintake.core.intake import ApplicationIntake, SubmissionError
from jobintake.core.uploads import UploadRejected
from jobintake.db.repositories import Repository
from jobintake.types import ApplicationForm

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["api"])


@router.get("/jobs", response_model=list[JobResponse], responses={500: {"model": ErrorResponse}})
def list_jobs(db: Session = Depends(get_db)) -> list[JobResponse]:
    repo = Repository(db)
    try:
        rows = repo.list_jobs()
    except SQLAlchemyError as exc:
        logger.error("Failed to list jobs: %s", exc)
        raise HTTPException(status_code=500, detail="Server error") from exc

    return [
        JobResponse(id=row.id, title=row.title, company=row.company, location=row.location)
        for row in rows
    ]


@router.post(
    "/apply",
    response_model=MessageResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def submit_application(
    submission: tuple[ApplicationForm, dict[str, list[UploadFile]]] = Depends(get_submission),
    intake: ApplicationIntake = Depends(get_intake),
) -> MessageResponse:
    form, files = submission
    try:
        intake.submit(form, files)
    except SubmissionError as exc:
        raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc
    except (UploadRejected, SQLAlchemyError) as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    return MessageResponse(message="Application submitted successfully!")
