from sqlalchemy import String, Text, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import relationship, mapped_column, Mapped
from sqlalchemy.sql import func
from datetime import datetime
from typing import TYPE_CHECKING
import uuid

from jobboard.core.database import Base

if TYPE_CHECKING:
    from jobboard.models.company import Company


class Job(Base):
    __tablename__ = "jobs"
    __mapper_args__ = {"eager_defaults": True}

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        index=True,
    )

    title: Mapped[str] = mapped_column(String(255), index=True, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    required_skills: Mapped[str] = mapped_column(Text, nullable=False)
    experience: Mapped[str] = mapped_column(String(255), nullable=False)

    company_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("companies.id", ondelete="CASCADE"),
        index=True,
        nullable=False
    )

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

    # Many-to-one, always needed to render a job
    company: Mapped["Company"] = relationship(
        "Company",
        back_populates="jobs",
        lazy="joined",
        innerjoin=True
    )

    def __repr__(self) -> str:
        return f"<Job(id={self.id}, title='{self.title}', company_id={self.company_id})>"

    @property
    def company_name(self) -> str:
        return self.company.name

    @property
    def location(self) -> str:
        return self.company.location
