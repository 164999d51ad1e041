from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from jobintake.db.models import Application, Job

MAX_JOB_ID = 2**63 - 1


def parse_job_id(value: str) -> int | None:
    """Turn a submitted job reference into a primary key, or None if it cannot be one."""
    candidate = value.strip()
    if not (candidate.isascii() and candidate.isdigit()):
        return None
    job_id = int(candidate)
    if job_id > MAX_JOB_ID:
        return None
    return job_id


class Repository:
    def __init__(self, session: Session):
        self.session = session

    def count_jobs(self) -> int:
        return int(self.session.scalar(select(func.count()).select_from(Job)) or 0)

    def list_jobs(self) -> list[Job]:
        return list(self.session.scalars(select(Job)).all())

    def get_job(self, job_id: int) -> Job | None:
        return self.session.get(Job, job_id)

    def add_jobs(self, rows: list[dict[str, str]]) -> list[Job]:
        jobs = [Job(**row) for row in rows]
        self.session.add_all(jobs)
        self.session.commit()
        return jobs

    def create_application(
        self,
        *,
        name: str,
        email: str,
        job_id: int,
        resumes: list[str],
        cover_letters: list[str] | None = None,
        portfolios: list[str] | None = None,
    ) -> Application:
        application = Application(
            name=name,
            email=email,
            job_id=job_id,
            resumes_json=list(resumes),
            cover_letters_json=list(cover_letters or []),
            portfolios_json=list(portfolios or []),
        )
        self.session.add(application)
        self.session.commit()
        self.session.refresh(application)
        return application

    def get_application(self, application_id: int) -> Application | None:
        return self.session.get(Application, application_id)

    def list_applications(self, job_id: int | None = None, limit: int = 50) -> list[Application]:
        statement = select(Application).order_by(Application.applied_at.desc(), Application.id.desc())
        if job_id is not None:
            statement = statement.where(Application.job_id == job_id)
        return list(self.session.scalars(statement.limit(limit)).all())

    def count_applications(self) -> int:
        return int(self.session.scalar(select(func.count()).select_from(Application)) or 0)
