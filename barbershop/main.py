import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Import models so they're registered with SQLAlchemy Base before create_all
from . import database, models  # noqa: F401
from .config import ALLOWED_ORIGINS, SECURITY_HEADERS_ENABLED, SEED_DEMO_DATA
from .domain.appointments.router import router as appointments_router
from .domain.barbers.router import router as barbers_router
from .domain.contacts.router import router as contacts_router
from .domain.services.router import router as services_router
from .routes.auth import router as auth_router
from .schemas import MessageResponse, ValidationErrorResponse
from .security_headers import SecurityHeadersMiddleware
from .seed import seed_database
from .shared.validators import first_error

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Reduce verbosity of third-party libraries
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application starting up...")
    database.init_db()
    logger.info("Database tables ready")

    if SEED_DEMO_DATA:
        db = database.SessionLocal()
        try:
            seeded = seed_database(db)
            if any(seeded.values()):
                logger.info(
                    f"Demo data seeded: {seeded['services']} services, {seeded['barbers']} barbers"
                )
        finally:
            db.close()

    yield
    logger.info("Application shutting down...")


app = FastAPI(
    title="Barbershop Booking API",
    version="1.0.0",
    lifespan=lifespan,
    responses={
        400: {"model": ValidationErrorResponse},
        500: {"model": MessageResponse},
    },
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report the first failing field as a 400"""
    field, message = first_error(exc.errors())
    logger.warning(f"Validation error for {request.method} {request.url.path}: {field}: {message}")
    return JSONResponse(status_code=400, content={"message": message, "field": field})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"message": "Internal Server Error"})


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()
    try:
        response = await call_next(request)
    except Exception as e:
        logger.error(f"{request.method} {request.url.path} - Error: {str(e)}")
        raise
    elapsed_ms = (time.time() - start_time) * 1000
    logger.info(f"{request.method} {request.url.path} {response.status_code} ({elapsed_ms:.0f}ms)")
    return response


if SECURITY_HEADERS_ENABLED:
    app.add_middleware(SecurityHeadersMiddleware, exclude_paths=["/health", "/docs", "/openapi.json"])
    logger.info("Security headers enabled")
else:
    logger.warning("Security headers DISABLED - only use in development!")

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,  # Session cookie
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
    allow_headers=["*"],
)

# Routes
app.include_router(auth_router)
app.include_router(services_router)
app.include_router(barbers_router)
app.include_router(appointments_router)
app.include_router(contacts_router)


@app.get("/health")
def health():
    return {"status": "healthy"}
