from pathlib import Path

from fastapi.testclient import TestClient

from jobintake.api.app import create_app
from jobintake.db.repositories import Repository
from jobintake.db.session import SessionLocal

DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


def test_browse_jobs_then_apply_to_each(upload_dir: Path) -> None:
    with TestClient(create_app()) as client:
        jobs = client.get("/api/jobs").json()
        assert len(jobs) == 2

        for index, job in enumerate(jobs):
            response = client.post(
                "/api/apply",
                data={"name": f"Applicant {index}", "email": f"a{index}@x.com", "jobId": str(job["_id"])},
                files=[
                    ("resume", (f"resume-{index}.pdf", b"%PDF-1.4", "application/pdf")),
                    ("coverLetter", (f"letter-{index}.docx", b"PK", DOCX)),
                ],
            )
            assert response.status_code == 200

    with SessionLocal() as session:
        repo = Repository(session)
        assert repo.count_applications() == 2
        for job in jobs:
            rows = repo.list_applications(job_id=job["_id"])
            assert len(rows) == 1
            assert len(rows[0].resumes_json) == 1
            assert len(rows[0].cover_letters_json) == 1

    assert len(list(upload_dir.iterdir())) == 4
