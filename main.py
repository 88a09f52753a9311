import uvicorn

from jobboard.core.config import settings
from jobboard.main import app  # noqa: F401

if __name__ == "__main__":
    uvicorn.run(
        "jobboard.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )
