from datetime import datetime
import uuid

from sqlalchemy import String, Text, DateTime, Uuid
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from jobboard.core.database import Base


class Applicant(Base):
    """Job seeker profile.

    Applied jobs are not held on the object; they are read through the
    ``job_applicants`` edge table (see ``JobApplicantRepository``).
    """

    __tablename__ = "applicants"
    __mapper_args__ = {"eager_defaults": True}

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        index=True,
    )

    name: Mapped[str] = mapped_column(String(255), index=True, nullable=False)
    contact: Mapped[str] = mapped_column(String(255), nullable=False)
    job_preferences: Mapped[str] = mapped_column(Text, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False
    )

    def __repr__(self) -> str:
        return f"<Applicant(id={self.id}, name='{self.name}')>"
