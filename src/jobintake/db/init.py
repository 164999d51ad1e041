from __future__ import annotations

from pathlib import Path

from jobintake.config import get_settings
from jobintake.db.base import Base
from jobintake.db.session import SessionLocal, engine
from jobintake.db import models  # noqa: F401
from jobintake.db.seed import seed_jobs


def ensure_data_directories() -> None:
    settings = get_settings()
    paths: list[Path] = [
        settings.data_dir,
        settings.upload_dir,
    ]
    for path in paths:
        path.mkdir(parents=True, exist_ok=True)


def init_database(seed: bool | None = None) -> dict[str, int]:
    settings = get_settings()
    ensure_data_directories()
    Base.metadata.create_all(bind=engine)

    if seed is None:
        seed = settings.seed_sample_jobs
    if not seed:
        return {"seeded_jobs": 0}

    with SessionLocal() as session:
        inserted = seed_jobs(session)
    return {"seeded_jobs": inserted}
