from __future__ import annotations

import json

import typer
import uvicorn

from jobintake.api.app import create_app
from jobintake.config import get_settings
from jobintake.db.init import init_database
from jobintake.db.repositories import Repository
from jobintake.db.seed import seed_jobs
from jobintake.db.session import SessionLocal
from jobintake.logging_config import configure_logging

app = typer.Typer(help="Job intake service CLI")
jobs_app = typer.Typer(help="Job posting commands")
applications_app = typer.Typer(help="Submitted application commands")

app.add_typer(jobs_app, name="jobs")
app.add_typer(applications_app, name="applications")

_INITIALIZED = False


def ensure_initialized() -> None:
    global _INITIALIZED
    if _INITIALIZED:
        return
    init_database(seed=False)
    _INITIALIZED = True


@app.command("init")
def init_cmd() -> None:
    """Create directories and tables, then seed sample jobs if none exist."""
    configure_logging()
    result = init_database()
    typer.echo(json.dumps({"ok": True, **result}, indent=2))


@jobs_app.command("list")
def jobs_list() -> None:
    configure_logging()
    ensure_initialized()
    with SessionLocal() as db:
        rows = Repository(db).list_jobs()
        typer.echo(
            json.dumps(
                [
                    {"id": row.id, "title": row.title, "company": row.company, "location": row.location}
                    for row in rows
                ],
                indent=2,
            )
        )


@jobs_app.command("seed")
def jobs_seed() -> None:
    configure_logging()
    ensure_initialized()
    with SessionLocal() as db:
        inserted = seed_jobs(db)
    typer.echo(json.dumps({"seeded_jobs": inserted}, indent=2))


@applications_app.command("list")
def applications_list(
    job_id: int | None = typer.Option(None, "--job-id"),
    limit: int = typer.Option(20, "--limit"),
) -> None:
    configure_logging()
    ensure_initialized()
    with SessionLocal() as db:
        rows = Repository(db).list_applications(job_id=job_id, limit=limit)
        typer.echo(
            json.dumps(
                [
                    {
                        "id": row.id,
                        "name": row.name,
                        "email": row.email,
                        "job_id": row.job_id,
                        "resumes": row.resumes_json,
                        "cover_letters": row.cover_letters_json,
                        "portfolios": row.portfolios_json,
                        "applied_at": row.applied_at.isoformat() if row.applied_at else None,
                    }
                    for row in rows
                ],
                indent=2,
            )
        )


@app.command("serve")
def serve(
    host: str | None = typer.Option(None, "--host"),
    port: int | None = typer.Option(None, "--port"),
) -> None:
    configure_logging()
    settings = get_settings()
    app_instance = create_app()
    uvicorn.run(app_instance, host=host or settings.app_host, port=port or settings.app_port)
