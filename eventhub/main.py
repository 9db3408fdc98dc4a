import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from eventhub.core.db_config import get_database_echo, get_database_url
from eventhub.core.logging_config import configure_logging
from eventhub.database.db import Database
from eventhub.routes import bookings, events, featured

logger = logging.getLogger(__name__)


def create_app(database: Database | None = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging()
        if app.state.database is None:
            # Missing DATABASE_URL aborts startup
            app.state.database = Database(get_database_url(), echo=get_database_echo(), pool_pre_ping=True)
        logger.info("Using database %s", app.state.database.safe_url)
        yield
        app.state.database.dispose()

    app = FastAPI(title="EventHub", lifespan=lifespan)
    app.state.database = database

    # Configure CORS
    origins = [
        "*"
    ]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include the routers
    app.include_router(events.router)
    app.include_router(bookings.router)
    app.include_router(featured.router)
    return app


app = create_app()
