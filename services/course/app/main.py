from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import Settings
from app.database import init_db
from app.progress.router import router as progress_router
from shared.middleware import error_envelope, error_envelope_middleware, request_id_middleware


def get_settings() -> Settings:
    return Settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    init_db(settings.course_database_url, echo=settings.database_echo)
    yield


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    detail = exc.detail if isinstance(exc.detail, str) else "http_error"
    return JSONResponse(
        status_code=exc.status_code,
        content=error_envelope(request, detail, detail),
        headers=exc.headers,
    )


SWAGGER_DESCRIPTION = """\
## Course Progress Service

Read-only views over courses, units, lessons and challenges with
per-user completion derived from challenge progress rows.

### Authentication

Send the identity provider's JWT as a Bearer token. Requests without a
usable token are served as anonymous: user-scoped endpoints return
`null`, `[]` or `0` instead of failing.

### Completion rules

- **Challenge** completed: at least one progress row, all marked completed.
- **Lesson** completed: at least one challenge, all completed.
- **Active lesson**: first lesson (unit order, then lesson order) with a
  challenge that has no progress or an incomplete progress row.
"""


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(
        title="Lingo Course Progress",
        version="0.1.0",
        description=SWAGGER_DESCRIPTION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
        max_age=600,
    )
    app.middleware("http")(error_envelope_middleware)
    app.middleware("http")(request_id_middleware)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    app.include_router(progress_router, prefix="/api/v1")

    @app.get("/health", tags=["Health"])
    async def health() -> dict:
        return {"status": "ok", "service": "course-progress"}

    return app


app = create_app()
