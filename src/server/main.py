"""FastAPI application for canvas2kanban."""

from fastapi import FastAPI

from canvas2kanban.utils.logging_config import configure_logging
from server.routers.archive import router as archive_router

configure_logging()

app = FastAPI(title="canvas2kanban", description="Archive canvas cards into Kanban Markdown.")
app.include_router(archive_router)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}
