from datetime import datetime
import uuid

from sqlalchemy import DateTime, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from jobboard.core.database import Base


class JobApplicant(Base):
    """One edge of the job <-> applicant relation.

    The composite primary key is the storage-level guarantee that a pair is
    linked at most once, including under concurrent inserts.
    """

    __tablename__ = "job_applicants"

    job_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("jobs.id", ondelete="CASCADE"),
        primary_key=True,
    )
    applicant_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("applicants.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )
    applied_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False
    )

    def __repr__(self) -> str:
        return f"<JobApplicant(job_id={self.job_id}, applicant_id={self.applicant_id})>"
