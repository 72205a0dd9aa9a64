from __future__ import annotations

# Standard library
import logging as _logging
from contextlib import asynccontextmanager
from typing import Any, Final

# Third-party
from dotenv import load_dotenv
from fastapi import FastAPI
from starlette.middleware.sessions import SessionMiddleware
from strawberry.fastapi import GraphQLRouter

load_dotenv()

# Local application imports
from api.dependencies import get_users_service  # noqa: E402
from api.errors import register_exception_handlers  # noqa: E402
from api.users import router as users_router  # noqa: E402
from graphql_api.context import get_graphql_context  # noqa: E402
from graphql_api.schema import create_schema  # noqa: E402
from infrastructure.config import (  # noqa: E402
    get_app_version,
    get_log_level,
    get_session_cookie_name,
    get_session_https_only,
    get_session_max_age,
    get_session_secret,
)
from infrastructure.user.current_user_middleware import CurrentUserMiddleware  # noqa: E402
from infrastructure.user.repository_factory import get_user_repository  # noqa: E402

# --- Basic logging configuration (minimal) ---
_LOG_LEVEL = get_log_level()
_logging.basicConfig(
    level=getattr(_logging, _LOG_LEVEL, _logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

APP_VERSION = get_app_version()

logger = _logging.getLogger("startup")


@asynccontextmanager
async def lifespan(_: FastAPI) -> Any:  # pragma: no cover
    """Application lifecycle: resolve the repository up front so a bad
    USER_REPOSITORY / MONGODB_URI fails at startup, not on first request."""
    repository = get_user_repository()
    logger.info(
        "lifespan.startup",
        extra={"version": APP_VERSION, "user_repository": type(repository).__name__},
    )
    yield
    logger.info("lifespan.shutdown", extra={"status": "cleanup"})


app = FastAPI(
    title="Users Backend",
    version=APP_VERSION,
    lifespan=lifespan,
)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/version")
async def version() -> dict[str, str]:
    return {"version": APP_VERSION}


# Middleware added last runs first: SessionMiddleware must wrap
# CurrentUserMiddleware so the session is decoded before the lookup.
app.add_middleware(CurrentUserMiddleware, users_service_provider=get_users_service)
app.add_middleware(
    SessionMiddleware,
    secret_key=get_session_secret(),
    session_cookie=get_session_cookie_name(),
    max_age=get_session_max_age(),
    https_only=get_session_https_only(),
    same_site="lax",
)

register_exception_handlers(app)

app.include_router(users_router)

schema = create_schema()

graphql_app: Final[GraphQLRouter[Any, Any]] = GraphQLRouter(
    schema, context_getter=get_graphql_context
)
app.include_router(graphql_app, prefix="/graphql")
