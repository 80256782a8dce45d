import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from blog_api.core.config import DEFAULT_SECRET_KEY, Settings, settings
from blog_api.core.database import engine, Base
from blog_api.core.logging_config import setup_logging
from blog_api.api.error_handlers import register_error_handlers
from blog_api.api.routes import auth, comments, posts
# Imported so every table is registered on Base.metadata
from blog_api.models import comment, post, user  # noqa: F401

logger = logging.getLogger(__name__)


def warn_if_default_secret(config: Settings) -> bool:
    """Log a warning when tokens would be signed with the shipped placeholder key"""
    if config.SECRET_KEY != DEFAULT_SECRET_KEY:
        return False
    logger.warning("SECRET_KEY is the built-in default; set it in the environment before deploying")
    return True


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Startup: configure logging and create missing tables.
    In production, use migrations (Alembic) instead of create_all.
    """
    setup_logging(settings.LOG_LEVEL)
    warn_if_default_secret(settings)
    Base.metadata.create_all(bind=engine)
    logger.info("Blog API started")
    yield
    logger.info("Blog API stopped")


app = FastAPI(
    title="Blog API",
    description="Posts and comments with token-based authentication",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware - the single-page client runs on another origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(auth.router, prefix=settings.API_PREFIX)
app.include_router(posts.router, prefix=settings.API_PREFIX)
app.include_router(comments.router, prefix=settings.API_PREFIX)


@app.get("/")
async def root():
    """Root endpoint - API information"""
    return {"message": "Blog API", "version": "1.0.0"}


@app.get("/health")
async def health():
    """Health check endpoint - used by monitoring/deployment tools"""
    return {"status": "healthy"}
