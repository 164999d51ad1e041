import json

from typer.testing import CliRunner

from jobintake.cli.app import app
from jobintake.db.repositories import Repository
from jobintake.db.session import SessionLocal

runner = CliRunner()


def test_jobs_list_prints_seeded_jobs() -> None:
    result = runner.invoke(app, ["jobs", "list"])
    assert result.exit_code == 0
    titles = {item["title"] for item in json.loads(result.stdout)}
    assert titles == {"Software Engineer", "Product Manager"}


def test_jobs_seed_is_noop_on_populated_table() -> None:
    result = runner.invoke(app, ["jobs", "seed"])
    assert result.exit_code == 0
    assert json.loads(result.stdout) == {"seeded_jobs": 0}


def test_init_reports_seed_count() -> None:
    result = runner.invoke(app, ["init"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["ok"] is True
    assert payload["seeded_jobs"] == 0


def test_applications_list_filters_by_job() -> None:
    with SessionLocal() as session:
        repo = Repository(session)
        first, second = repo.list_jobs()[:2]
        repo.create_application(name="Jane Doe", email="jane@x.com", job_id=first.id, resumes=["1-cv.pdf"])
        repo.create_application(name="John Roe", email="john@x.com", job_id=second.id, resumes=["2-cv.pdf"])
        first_id = first.id

    result = runner.invoke(app, ["applications", "list", "--job-id", str(first_id)])
    assert result.exit_code == 0
    rows = json.loads(result.stdout)
    assert [row["name"] for row in rows] == ["Jane Doe"]
    assert rows[0]["resumes"] == ["1-cv.pdf"]
