"""
Main FastAPI Application
"""
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from fiftyhertz import __version__
from fiftyhertz.core.config import settings
from fiftyhertz.core.database import database
from fiftyhertz.core.logging_config import setup_logging
from fiftyhertz.core.responses import register_exception_handlers, success
from fiftyhertz.middleware import ErrorEnvelopeMiddleware, SecurityHeadersMiddleware, limiter, rate_limit_exceeded_handler
from fiftyhertz.routers import auth, reference

logger = logging.getLogger(__name__)

app = FastAPI(title=settings.APP_NAME, version=__version__)

register_exception_handlers(app)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

# Middleware (last added runs first)
app.add_middleware(ErrorEnvelopeMiddleware)
app.add_middleware(SlowAPIMiddleware)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=[origin.strip() for origin in settings.CORS_ORIGINS.split(",") if origin.strip()],
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(auth.router)
app.include_router(reference.router)


@app.get("/health")
def health_check():
    """
    Health check endpoint
    """
    return success("healthy", {"status": "healthy", "version": __version__})


@app.on_event("startup")
def startup():
    """Open the connection pool and create tables"""
    setup_logging()
    database.init()
    database.create_all()
    logger.info("[STARTUP] Database tables created/verified")


@app.on_event("shutdown")
def shutdown():
    """Release the connection pool"""
    database.close()
    logger.info("[SHUTDOWN] Database connections released")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("fiftyhertz.main:app", host="0.0.0.0", port=settings.PORT)
