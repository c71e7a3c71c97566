import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config.settings import Settings
from app.database import SessionLocal, init_db
from app.routers import auth, user, task
from app.services.seed import seed_database
from app.utils.error_handlers import register_exception_handlers

# Configure logging
logging.basicConfig(level=Settings.LOGGING['level'], format=Settings.LOGGING['format'])
logger = logging.getLogger(__name__)

app = FastAPI(title="Task Manager API")

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=Settings.CORS['allow_origins'],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Token-Expired", "Location"],
)

register_exception_handlers(app)

# Route registration
app.include_router(auth.router, prefix="/api/auth", tags=["Authentication"])
app.include_router(user.router, prefix="/api/users", tags=["Users"])
app.include_router(task.router)


# Startup events
@app.on_event("startup")
def startup_event():
    """Create tables and seed sample data when the application starts"""
    logger.info("Starting Task Manager API...")
    init_db()
    if Settings.SEED['enabled']:
        db = SessionLocal()
        try:
            seed_database(db)
        finally:
            db.close()


# Root route
@app.get("/")
def read_root():
    return {"message": "Task Manager API"}


@app.get("/health")
def health():
    return {"status": "ok"}
