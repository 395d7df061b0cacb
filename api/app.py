import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from api.core.config import get_settings
from api.core.logging_config import configure_logging
from api.db.create_tables import create_all
from api.db.seed import seed_posts
from api.db.session import get_sessionmaker
from api.routers import posts as posts_router
from api.services.post_service import PostNotFoundError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    configure_logging(settings.log_level)
    if settings.seed_on_startup:
        create_all()
        seed_posts(get_sessionmaker())
    logger.info("Posts API started (env=%s)", settings.app_env)
    yield


app = FastAPI(title="Posts API", lifespan=lifespan)


@app.exception_handler(PostNotFoundError)
async def post_not_found_handler(request: Request, exc: PostNotFoundError):
    return JSONResponse({"detail": str(exc)}, status_code=status.HTTP_404_NOT_FOUND)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        {"detail": jsonable_encoder(exc.errors())},
        status_code=status.HTTP_400_BAD_REQUEST,
    )


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    logger.warning("Constraint violation on %s %s: %s", request.method, request.url.path, exc.orig)
    return JSONResponse({"detail": "Constraint violation"}, status_code=status.HTTP_400_BAD_REQUEST)


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception("Database error on %s %s", request.method, request.url.path)
    return JSONResponse({"detail": "Database error"}, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


@app.get("/")
def root():
    return {"message": "Hello from the Server"}


app.include_router(posts_router.router)


def create_app() -> FastAPI:
    """Factory usable with uvicorn/gunicorn (``--factory``)."""
    return app
