from __future__ import annotations

import os
import shutil
import tempfile
from pathlib import Path

_TEST_ROOT = Path(tempfile.mkdtemp(prefix="jobintake-tests-"))
os.environ["APP_ENV"] = "test"
os.environ["DATABASE_URL"] = f"sqlite:///{_TEST_ROOT / 'test.db'}"
os.environ["DATA_DIR"] = str(_TEST_ROOT / "data")
os.environ["UPLOAD_DIR"] = str(_TEST_ROOT / "uploads")

import pytest

from jobintake.config import get_settings
from jobintake.db.base import Base
from jobintake.db.seed import seed_jobs
from jobintake.db.session import SessionLocal, engine


@pytest.fixture(autouse=True)
def reset_db() -> None:
    settings = get_settings()
    shutil.rmtree(settings.upload_dir, ignore_errors=True)
    settings.upload_dir.mkdir(parents=True, exist_ok=True)
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    with SessionLocal() as session:
        seed_jobs(session)
    yield


@pytest.fixture()
def upload_dir() -> Path:
    return get_settings().upload_dir
