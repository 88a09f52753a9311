"""
Models package - import order matters!
Base class first, then models in dependency order.
"""

from jobboard.core.database import Base

from .user import User
from .company import Company
from .applicant import Applicant
from .job import Job

# Edge table between jobs and applicants
from .job_applicant import JobApplicant

__all__ = [
    "Base",
    "User",
    "Company",
    "Applicant",
    "Job",
    "JobApplicant",
]
