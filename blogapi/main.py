from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blogapi.core.config import settings
from blogapi.core.errors import exception_handlers
from blogapi.db.init_db import create_all_tables
from blogapi.middleware.request_logging import RequestLoggingMiddleware
from blogapi.middleware.auth_logging import AuthLoggingMiddleware
from blogapi.modules.users.api.router import router as user_router
from blogapi.modules.posts.api.router import router as posts_router
from blogapi.modules.posts.comments.api.router import router as comments_router
from blogapi.modules.posts.likes.api.router import router as likes_router
from blogapi.modules.quotes.api.router import router as quotes_router

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("blogapi")

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting server in {settings.ENVIRONMENT} mode")
    create_all_tables()
    yield
    logger.info("Server shutting down")

# Initialize the FastAPI application
app = FastAPI(
    title=settings.PROJECT_NAME,
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    exception_handlers=exception_handlers,
    debug=settings.DEBUG,
    description="Blogging backend: posts, comments, likes, accounts and quotes",
    version=settings.VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# Add middleware
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(AuthLoggingMiddleware)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials="*" not in settings.BACKEND_CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register API routers
app.include_router(user_router, prefix=f"{settings.API_V1_STR}/user", tags=["users"])
app.include_router(posts_router, prefix=f"{settings.API_V1_STR}/blog", tags=["posts"])
app.include_router(likes_router, prefix=settings.API_V1_STR, tags=["likes"])
app.include_router(comments_router, prefix=settings.API_V1_STR, tags=["comments"])
app.include_router(quotes_router, prefix=settings.API_V1_STR, tags=["quotes"])

@app.get("/")
async def root():
    return {
        "message": "Welcome to the Blog API",
        "version": settings.VERSION,
        "environment": settings.ENVIRONMENT,
        "documentation": "/docs" if settings.DEBUG else None,
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("blogapi.main:app", host="0.0.0.0", port=8000, reload=settings.DEBUG)
