from __future__ import annotations

from datetime import datetime

from sqlalchemy import JSON, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from jobintake.db.base import Base, TimestampMixin, utcnow


class Job(TimestampMixin, Base):
    __tablename__ = "jobs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String(255), default="", nullable=False)
    company: Mapped[str] = mapped_column(String(255), default="", nullable=False)
    location: Mapped[str] = mapped_column(String(255), default="", nullable=False)


class Application(TimestampMixin, Base):
    __tablename__ = "applications"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    resumes_json: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    cover_letters_json: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    portfolios_json: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    # Soft reference: existence is checked on submit, not by a foreign key.
    job_id: Mapped[int] = mapped_column(Integer, index=True, nullable=False)
    applied_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
