"""
FastAPI Application Entry Point.

This module creates and configures the FastAPI application instance.
It handles:
1. Application initialization
2. Router registration
3. Middleware configuration (audit logging, CORS)
4. Exception handlers (application errors -> JSON bodies)
5. Startup/shutdown of the shared MongoDB and LLM clients

Run with: uvicorn edupilot.api.main:app --reload
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from edupilot import __version__
from edupilot.core.audit import AuditMiddleware
from edupilot.core.config import get_settings
from edupilot.core.exceptions import EduPilotError, InvalidInput
from edupilot.core.logging_config import setup_logging, get_logger
from edupilot.api.routes import ai_router, health_router, users_router
from edupilot.database import MongoConnection, UserRepository
from edupilot.llm import LLMClient
from edupilot.services import AIGateway, UserDirectoryService


# Initialize logging before anything else
settings = get_settings()
setup_logging(settings.log_level, log_dir=settings.log_dir, log_to_file=settings.log_to_file)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup builds one MongoDB client and one LLM client and wires
    them into the services every request handler uses. Shutdown
    closes the MongoDB client.
    """
    logger.info(f"Starting {settings.app_name} in {settings.app_env} mode")
    logger.info(f"Chat model: {settings.llm_chat_model}, vision model: {settings.llm_vision_model}")

    connection = MongoConnection()
    if connection.check_connection():
        logger.info("Database connected")
    else:
        logger.error("Database not reachable at startup; requests will fail until it is")

    app.state.user_service = UserDirectoryService(UserRepository(connection.users))
    app.state.ai_gateway = AIGateway(LLMClient(), settings)

    yield  # Application runs here

    logger.info(f"Shutting down {settings.app_name}")
    connection.close()


app = FastAPI(
    title="EduPilot API",
    description="""
    Student backend: accounts, profiles and AI helpers.

    ## Features

    - **Accounts**: register, log in, update profile
    - **Chat**: answers in the student's language
    - **Career roadmap**: three career suggestions from the stored profile
    - **Image analysis**: identify the math problem in a photo
    """,
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ============================================================
# Middleware Configuration
# ============================================================

if settings.enable_audit_logging:
    app.add_middleware(AuditMiddleware)
    logger.info("Audit logging middleware enabled")

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================
# Exception Handlers
# ============================================================

@app.exception_handler(EduPilotError)
async def edupilot_error_handler(request: Request, exc: EduPilotError):
    """Turn application errors into {"error": ...} bodies."""
    if exc.status_code >= 500:
        logger.error(f"{exc.error_code} on {request.url.path}: {exc.message} ({exc.__cause__})")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies are answered like any other invalid input."""
    logger.warning(f"Rejected request body on {request.url.path}: {exc.errors()}")
    error = InvalidInput("Invalid request body.")
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """
    Handle uncaught exceptions globally.

    Every request gets a JSON answer; details stay in the log.
    """
    logger.exception(f"Unhandled exception: {exc}")
    return JSONResponse(status_code=500, content={"error": "An unexpected error occurred"})


# ============================================================
# Routers
# ============================================================

app.include_router(health_router)
app.include_router(users_router)
app.include_router(ai_router)


@app.get("/", include_in_schema=False)
async def root():
    return {
        "message": f"{settings.app_name} API",
        "version": __version__,
        "documentation": "/docs",
        "health": "/health",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "edupilot.api.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=settings.is_development()
    )
