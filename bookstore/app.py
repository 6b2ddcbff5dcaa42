import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from bookstore import config
from bookstore.database import connect_database
from bookstore.routers import books

logger = logging.getLogger(__name__)


def validation_message(exc: RequestValidationError) -> str:
    """Flatten the first validation error into ``"<field>: <message>"``."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    field = ".".join(
        str(part) for part in first.get("loc", ())
        if isinstance(part, str) and part not in ("body", "path", "query")
    )
    msg = first.get("msg", "Invalid request")
    return f"{field}: {msg}" if field else msg


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = validation_message(exc)
    logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=400, content={"error": message})


def create_app(database_url: str | None = None) -> FastAPI:
    url = database_url or config.DATABASE_URL

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db = await connect_database(url, echo=config.SQL_ECHO)
        if not db.ok:
            raise RuntimeError(f"Database unavailable: {db.error}")
        app.state.sessionmaker = db.sessionmaker
        try:
            yield
        finally:
            await db.engine.dispose()
            logger.info("Database engine disposed")

    app = FastAPI(title="Bookstore", version="0.1.0", lifespan=lifespan)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.include_router(books.router)
    return app


app = create_app()
