"""
Super Chase - T20 Run-Chase Simulator API
"""
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from superchase import __version__
from superchase.config import settings
from superchase.database import init_db, get_session
from superchase.services.squad_service import seed_squads
from superchase.api.teams import router as teams_router
from superchase.api.match import router as match_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Initialize FastAPI app
app = FastAPI(
    title="Super Chase",
    description="Single-innings T20 run-chase simulator API",
    version=__version__,
)

# CORS origins - configurable via environment variable
default_origins = [
    "http://localhost:5173",
    "http://localhost:3000",
    "http://127.0.0.1:5173",
    "http://127.0.0.1:3000",
]

# Add custom origins from environment (comma-separated)
if settings.CORS_ORIGINS:
    default_origins.extend([o.strip() for o in settings.CORS_ORIGINS.split(",") if o.strip()])

app.add_middleware(
    CORSMiddleware,
    allow_origins=default_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(teams_router, prefix="/api")
app.include_router(match_router, prefix="/api")


@app.on_event("startup")
def startup_event():
    """Create tables and make sure every franchise has a squad"""
    init_db()
    db = get_session()
    try:
        seed_squads(db)
    finally:
        db.close()


@app.get("/")
def root():
    """Health check endpoint"""
    return {
        "name": "Super Chase API",
        "version": __version__,
        "status": "running",
    }


@app.get("/api/health")
def health_check():
    """API health check"""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
