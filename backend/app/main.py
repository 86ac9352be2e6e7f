"""FastAPI application."""

from fastapi import FastAPI

from backend.app.api.routes.health import router as health_router
from backend.app.api.routes.recommendations import router as recommendations_router
from backend.app.api.routes.schedule import router as schedule_router
from backend.app.api.routes.tours import router as tours_router
from backend.app.api.routes.trip import router as trip_router

app = FastAPI(title="Arctic Fjord Tours API", version="0.1.0")

# Register routes
app.include_router(health_router, tags=["health"])
app.include_router(tours_router)
app.include_router(schedule_router)
app.include_router(trip_router)
app.include_router(recommendations_router)


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {"message": "Arctic Fjord Tours API", "version": "0.1.0"}
