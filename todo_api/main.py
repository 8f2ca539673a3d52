"""Todo API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - GraphQL served at /query; / redirects there for the in-browser IDE
    - Global error handlers map TodoError → structured JSON responses
    - Database initialized and `tasks` table created-if-absent on startup

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from todo_api import __version__
from todo_api.api.error_handlers import register_error_handlers
from todo_api.api.routes import health
from todo_api.config import get_settings
from todo_api.graphql.router import build_graphql_router
from todo_api.infrastructure.database import init_db
from todo_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)

GRAPHQL_PATH = "/query"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        echo=settings.database_echo,
    )
    await manager.create_schema()
    logger.info(f"Todo API started, GraphQL endpoint at {GRAPHQL_PATH}")
    yield
    logger.info("Todo API shutting down")
    await manager.dispose()


app = FastAPI(title="Todo API", version=__version__, lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(
    build_graphql_router(graphql_ide=settings.graphql_ide), prefix=GRAPHQL_PATH,
)
register_error_handlers(app)


@app.get("/", include_in_schema=False)
async def graphql_ide_redirect():
    return RedirectResponse(url=GRAPHQL_PATH)


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(
        f"Connect to http://localhost:{settings.port}/ for the GraphQL IDE",
    )
    uvicorn.run(
        "todo_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
