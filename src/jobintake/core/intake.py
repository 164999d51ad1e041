from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from fastapi import UploadFile
from sqlalchemy.orm import Session

from jobintake.core.uploads import UploadGate
from jobintake.db.models import Application
from jobintake.db.repositories import Repository, parse_job_id
from jobintake.types import ApplicationForm, UploadBatch

logger = logging.getLogger(__name__)


class SubmissionError(ValueError):
    status_code = 400


class MissingFieldsError(SubmissionError):
    def __init__(self) -> None:
        super().__init__("Name, email, and job ID are required")


class MissingResumeError(SubmissionError):
    def __init__(self) -> None:
        super().__init__("At least one resume is required")


class JobNotFoundError(SubmissionError):
    status_code = 404

    def __init__(self) -> None:
        super().__init__("Job not found")


class ApplicationIntake:
    def __init__(self, session: Session, gate: UploadGate, discard_orphaned_uploads: bool = False):
        self.repo = Repository(session)
        self.gate = gate
        self.discard_orphaned_uploads = discard_orphaned_uploads

    def submit(self, form: ApplicationForm, files: Mapping[str, Sequence[UploadFile]]) -> Application:
        batch = self.gate.accept(files)
        try:
            application = self._persist(form, batch)
        except Exception:
            if self.discard_orphaned_uploads:
                self.gate.discard(batch)
            raise

        logger.info(
            "Stored application %s for job %s with %d file(s)",
            application.id,
            application.job_id,
            len(batch.files),
        )
        return application

    def _persist(self, form: ApplicationForm, batch: UploadBatch) -> Application:
        if not form.has_required_fields():
            raise MissingFieldsError()

        resumes = batch.filenames("resume")
        if not resumes:
            raise MissingResumeError()

        job_id = parse_job_id(form.job_id or "")
        if job_id is None or self.repo.get_job(job_id) is None:
            raise JobNotFoundError()

        return self.repo.create_application(
            name=form.name or "",
            email=form.email or "",
            job_id=job_id,
            resumes=resumes,
            cover_letters=batch.filenames("coverLetter"),
            portfolios=batch.filenames("portfolio"),
        )
