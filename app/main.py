"""
Employee Management Service - FastAPI application.

Run with:
    uvicorn app.main:app --reload
"""
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from app.api import employees
from app.config import settings
from app.db import init_db, close_db
from app.domain.exceptions import DomainError, ErrorKind, PersistenceError
from app.version import __version__
import logging

logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


# Validation kinds are not listed and fall back to 400
ERROR_STATUS_CODES = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.DUPLICATE_REGISTRATION: status.HTTP_409_CONFLICT,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the database on startup, dispose it on shutdown"""
    logger.info(f"🚀 Starting Employee Management Service v{__version__}")
    logger.info(f"📝 Environment: {settings.environment}")

    app.state.database = await init_db(settings.database_url)
    logger.info("🔗 Employee endpoints mounted at /api/employees")

    yield

    logger.info("Stopping Employee Management Service...")
    await close_db(app.state.database)
    app.state.database = None


app = FastAPI(
    title="Employee Management Service",
    description="Employee records with business-rule validation",
    version=__version__,
    lifespan=lifespan,
)


# ============================================
# CORS
# ============================================

# Local employee UI during development
local_origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:3000",
]

extra_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]

allowed_origins = local_origins + extra_origins

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

logger.info(f"✅ CORS origins: {allowed_origins}")


# ============================================
# Error Handlers
# ============================================

@app.exception_handler(DomainError)
async def domain_exception_handler(request: Request, exc: DomainError):
    """Translate domain errors into client-facing responses"""
    status_code = ERROR_STATUS_CODES.get(exc.kind, status.HTTP_400_BAD_REQUEST)
    logger.info(
        f"{request.method} {request.url.path} rejected "
        f"({exc.kind.value}): {exc.message}"
    )
    return JSONResponse(status_code=status_code, content=exc.to_dict())


@app.exception_handler(PersistenceError)
async def persistence_exception_handler(request: Request, exc: PersistenceError):
    logger.error(f"Persistence failure on {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content=exc.to_dict()
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies (wrong types, unknown fields)"""
    errors = jsonable_errors(exc)
    logger.warning(f"Invalid request body for {request.method} {request.url.path}: {errors}")

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": errors}
    )


def jsonable_errors(exc: RequestValidationError) -> list:
    # Pydantic error contexts may hold exception objects
    return [
        {key: value for key, value in error.items() if key != "ctx"}
        for error in exc.errors()
    ]


app.include_router(employees.router, prefix="/api", tags=["employees"])


@app.get("/")
async def service_info():
    return {
        "app": "Employee Management Service",
        "version": __version__,
        "environment": settings.environment,
        "employees_url": "/api/employees"
    }


@app.get("/health")
async def health():
    """Liveness check"""
    return {
        "status": "healthy",
        "checked_at": datetime.now(timezone.utc).isoformat(),
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host=settings.host, port=settings.port)
