import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.router import api_router
from core.config import settings
from core.logging import configure_logging
from database.session import init_db
from services.session_store import SessionStore
from services.upload_service import UPLOAD_URL_PREFIX

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    configure_logging(settings.log_level)
    app = FastAPI(title=settings.app_name)

    app.state.session_store = SessionStore(ttl_seconds=settings.session_ttl_seconds)

    # Error bodies are plain text, never JSON.
    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException):
        return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def _validation_error(request: Request, exc: RequestValidationError):
        logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
        return PlainTextResponse("Invalid form data", status_code=status.HTTP_400_BAD_REQUEST)

    app.include_router(api_router)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    settings.uploads_dir.mkdir(parents=True, exist_ok=True)
    app.mount(f"/{UPLOAD_URL_PREFIX}", StaticFiles(directory=settings.uploads_dir), name="uploads")
    # Last: anything unrouted falls through to the public assets.
    app.mount("/", StaticFiles(directory=settings.public_dir, check_dir=False), name="public")

    return app


app = create_app()


@app.on_event("startup")
def _startup():
    # A dead database must not stop the server; requests will fail with 500 instead.
    try:
        init_db()
    except SQLAlchemyError:
        logger.exception("Database initialisation failed; continuing without it")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
