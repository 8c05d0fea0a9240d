import sys
import logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from pydantic import BaseModel

from app.api.v1.api import api_router
from app.core.config import settings
from app.core.exceptions import RecipeConflictError, RecipeNotFoundError, StorageError
from app.db.session import init_db

logger = logging.getLogger(__name__)

logging.basicConfig(level=settings.LOG_LEVEL, handlers=[logging.StreamHandler(sys.stdout)])


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.DB_CREATE_TABLES:
        await init_db()
    yield


class RootResponse(BaseModel):
    status: str
    project_name: str
    version: str
    documentation_url: str


app = FastAPI(title=settings.PROJECT_NAME, version=settings.VERSION, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api/v1")


@app.exception_handler(RecipeNotFoundError)
async def recipe_not_found_handler(request: Request, exc: RecipeNotFoundError):
    logger.info(f"Recipe not found: {request.method} {request.url.path}")
    return JSONResponse(status_code=404, content={"detail": exc.message})


@app.exception_handler(RecipeConflictError)
async def recipe_conflict_handler(request: Request, exc: RecipeConflictError):
    logger.warning(f"Recipe conflict on {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(status_code=409, content={"detail": exc.message})


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError):
    logger.error(f"Storage failure on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": exc.message})


@app.get("/", response_model=RootResponse, tags=["Root"])
def read_root():
    return {
        "status": "ok",
        "project_name": app.title,
        "version": app.version,
        "documentation_url": "/docs",
    }
