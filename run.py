import uvicorn

from rentdesk.core.config import settings


if __name__ == "__main__":
    uvicorn.run(
        "rentdesk.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD,
        log_level=settings.LOG_LEVEL.lower(),
        workers=1,  # one process owns the SQLite file
    )
