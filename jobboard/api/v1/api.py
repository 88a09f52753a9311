from fastapi import APIRouter
from jobboard.api.v1.endpoints import applicants, companies, job_applicants, jobs, registration

api_router = APIRouter()

# Account registration
api_router.include_router(
    registration.router,
    tags=["users"]
)

api_router.include_router(
    companies.router,
    prefix="/companies",
    tags=["companies"]
)

api_router.include_router(
    jobs.router,
    prefix="/jobs",
    tags=["jobs"]
)

api_router.include_router(
    applicants.router,
    prefix="/applicants",
    tags=["applicants"]
)

# Job applications (job <-> applicant links)
api_router.include_router(
    job_applicants.router,
    prefix="/job_applicant",
    tags=["job-applications"]
)
