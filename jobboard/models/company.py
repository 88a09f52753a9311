from sqlalchemy import String, Text, DateTime, Uuid
from sqlalchemy.orm import relationship, mapped_column, Mapped
from sqlalchemy.sql import func
from typing import List, TYPE_CHECKING
from datetime import datetime
import uuid

from jobboard.core.database import Base

if TYPE_CHECKING:
    from jobboard.models.job import Job


class Company(Base):
    __tablename__ = "companies"
    __mapper_args__ = {"eager_defaults": True}

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        index=True,
    )

    name: Mapped[str] = mapped_column(
        String(255),
        index=True,
        nullable=False
    )
    description: Mapped[str] = mapped_column(
        Text,
        nullable=False
    )
    location: Mapped[str] = mapped_column(
        String(255),
        index=True,
        nullable=False
    )
    contact: Mapped[str] = mapped_column(
        String(255),
        nullable=False
    )

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    # Job rows are removed by the repository and by ON DELETE CASCADE
    jobs: Mapped[List["Job"]] = relationship(
        "Job",
        back_populates="company",
        passive_deletes=True,
        lazy="select"
    )

    def __repr__(self) -> str:
        return f"<Company(id={self.id}, name={self.name})>"

    def __str__(self) -> str:
        return f"{self.name} ({self.location})"
