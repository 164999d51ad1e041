from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from jobintake.db.repositories import Repository

logger = logging.getLogger(__name__)

SAMPLE_JOBS: list[dict[str, str]] = [
    {"title": "Software Engineer", "company": "Tech Corp", "location": "Remote"},
    {"title": "Product Manager", "company": "Innovate Inc", "location": "New York"},
]


def seed_jobs(session: Session) -> int:
    repo = Repository(session)
    if repo.count_jobs() > 0:
        return 0

    repo.add_jobs([dict(row) for row in SAMPLE_JOBS])
    logger.info("Sample jobs seeded")
    return len(SAMPLE_JOBS)
