"""
FastAPI backend: phonebook REST API.
Run with uvicorn: uvicorn api.main:app --reload
(or the phonebook-api console script, which listens on PORT, default 3001).
"""

import logging
import time
from contextlib import asynccontextmanager
from datetime import datetime

import uvicorn
from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse, Response
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from phonebook.application import (
    PhonebookService,
    Rejection,
    RejectionKind,
    classify,
)
from phonebook.config import Settings, load_env_file
from phonebook.domain import Person, PhonebookError
from phonebook.infrastructure import open_repository

load_env_file()
_settings = Settings.from_env()

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=_settings.log_level,
)
logger = logging.getLogger(__name__)

UNKNOWN_ENDPOINT = {"error": "unknown endpoint"}


class PersonBody(BaseModel):
    name: str | None = None
    number: str | None = None


class PersonOut(BaseModel):
    id: str
    name: str
    number: str

    @classmethod
    def from_person(cls, person: Person) -> "PersonOut":
        return cls(id=person.id, name=person.name, number=person.number)


def get_service(request: Request) -> PhonebookService:
    return PhonebookService(request.app.state.repository)


def _error_response(failure: Rejection | BaseException) -> JSONResponse:
    error = classify(failure)
    return JSONResponse(content=error.body, status_code=error.status_code)


def _rejection_from_request_errors(errors) -> Rejection:
    """Wrongly typed body fields are format errors; an unusable body is missing content."""
    fields: list[str] = []
    for error in errors:
        loc = tuple(error.get("loc") or ())
        if len(loc) >= 2 and loc[0] == "body" and isinstance(loc[1], str):
            if loc[1] not in fields:
                fields.append(loc[1])
        else:
            return Rejection(RejectionKind.CONTENT_MISSING)
    if not fields:
        return Rejection(RejectionKind.CONTENT_MISSING)
    return Rejection(RejectionKind.FORMAT_VALIDATION, fields=tuple(fields))


def _log_request(request: Request, status_code: int, content_length: str, started: float) -> None:
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        "%s %s %s %s - %.3f ms",
        request.method,
        request.url.path,
        status_code,
        content_length,
        elapsed_ms,
    )


def _js_style_timestamp(now: datetime) -> str:
    return now.strftime("%a %b %d %Y %H:%M:%S GMT%z (%Z)")


# --- REST: persons ---

router = APIRouter()


@router.get("/api/persons")
def list_persons(service: PhonebookService = Depends(get_service)):
    return [PersonOut.from_person(p) for p in service.list_persons()]


@router.get("/api/persons/{person_id}")
def get_person(person_id: str, service: PhonebookService = Depends(get_service)):
    result = service.get_person(person_id)
    if isinstance(result, Rejection):
        return _error_response(result)
    return PersonOut.from_person(result)


@router.post("/api/persons")
def create_person(body: PersonBody, service: PhonebookService = Depends(get_service)):
    logger.info("Create person body=%s", body.model_dump())
    result = service.create_person(body.name, body.number)
    if isinstance(result, Rejection):
        return _error_response(result)
    return PersonOut.from_person(result)


@router.put("/api/persons/{person_id}")
def update_person(
    person_id: str,
    body: PersonBody,
    service: PhonebookService = Depends(get_service),
):
    logger.info("Update person id=%s body=%s", person_id, body.model_dump())
    result = service.update_person(person_id, body.name, body.number)
    if isinstance(result, Rejection):
        return _error_response(result)
    return PersonOut.from_person(result)


@router.delete("/api/persons/{person_id}")
def delete_person(person_id: str, service: PhonebookService = Depends(get_service)):
    result = service.delete_person(person_id)
    if isinstance(result, Rejection):
        return _error_response(result)
    return Response(status_code=204)


# --- non-API routes ---


@router.get("/info", response_class=HTMLResponse)
def info(service: PhonebookService = Depends(get_service)):
    count = service.count_persons()
    now = datetime.now().astimezone()
    return (
        f"<h3>Phonebook has info for {count} people</h3> "
        f"<h3>{_js_style_timestamp(now)}</h3>"
    )


@router.get("/", response_class=PlainTextResponse)
def root():
    return "hello, world!"


# --- exception handlers ---


async def phonebook_error_handler(request: Request, exc: PhonebookError):
    return _error_response(exc)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.info("Invalid request body on %s %s: %s", request.method, request.url.path, exc.errors())
    return _error_response(_rejection_from_request_errors(exc.errors()))


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # Unmatched path or method.
    if exc.status_code in (404, 405):
        return JSONResponse(content=UNKNOWN_ENDPOINT, status_code=404)
    return JSONResponse(
        content={"error": str(exc.detail)},
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


async def unhandled_error_handler(request: Request, exc: Exception):
    return _error_response(exc)


def create_app(repository=None, settings: Settings | None = None) -> FastAPI:
    """Build the app. Without a repository, one is opened from settings in the lifespan."""
    settings = settings or _settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if app.state.repository is not None:
            yield
            return
        with open_repository(settings) as repo:
            app.state.repository = repo
            try:
                yield
            finally:
                app.state.repository = None

    app = FastAPI(title="Phonebook API", lifespan=lifespan, redirect_slashes=False)
    app.state.repository = repository

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            # Answered with a 500 by the unhandled-error handler further out.
            _log_request(request, 500, "-", started)
            raise
        _log_request(
            request, response.status_code, response.headers.get("content-length", "-"), started
        )
        return response

    app.add_exception_handler(PhonebookError, phonebook_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
    app.include_router(router)
    return app


app = create_app()


def main() -> None:
    """Serve the API on PORT (default 3001)."""
    logger.info("Server running on port %s", _settings.port)
    uvicorn.run("api.main:app", host="0.0.0.0", port=_settings.port)


if __name__ == "__main__":
    main()
